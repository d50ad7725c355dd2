"""牌组命令行界面.

使用click提供发牌命令，按配置创建牌组、洗牌并逐张发出。
"""

import logging
from typing import Optional

import click
from pydantic import ValidationError

from deck_of_cards.application import ConfigService, DeckConfig, LoggingConfig
from deck_of_cards.core.deck import CARDS_PER_DECK, Deck
from deck_of_cards.core.exceptions import DeckConfigError
from deck_of_cards.core.invariant import DeckIntegrityChecker, DeckIntegrityError

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="deck-of-cards")
def cli() -> None:
    """标准52张扑克牌组工具."""


@cli.command()
@click.option("--count", "-n", type=click.IntRange(min=0), default=CARDS_PER_DECK,
              show_default=True, help="要发出的牌数，超过剩余牌数时发完为止")
@click.option("--seed", type=click.IntRange(min=0), default=None,
              help="随机种子，指定后洗牌结果可重现")
@click.option("--no-shuffle", is_flag=True, help="不洗牌，按规范顺序发牌")
@click.option("--profile", default="default", show_default=True, help="配置名")
@click.option("--log-level", default=None, help="覆盖配置中的日志级别")
@click.option("--verify", is_flag=True, help="发牌后检查牌组不变量")
@click.option("--unicode", "use_unicode", is_flag=True, help="使用花色符号显示")
def deal(count: int, seed: Optional[int], no_shuffle: bool, profile: str,
         log_level: Optional[str], verify: bool, use_unicode: bool) -> None:
    """创建牌组并发牌."""
    service = ConfigService()
    try:
        deck_config = service.get_deck_config(profile)
        logging_config = service.get_logging_config(profile)
    except DeckConfigError as e:
        raise click.BadParameter(str(e), param_hint="--profile")

    try:
        if log_level is not None:
            logging_config = LoggingConfig(log_level=log_level,
                                           log_format=logging_config.log_format)
        deck_config = DeckConfig(
            random_seed=seed if seed is not None else deck_config.random_seed,
            shuffle_on_create=deck_config.shuffle_on_create and not no_shuffle,
            verify_integrity=deck_config.verify_integrity or verify,
        )
    except ValidationError as e:
        raise click.BadParameter(str(e))

    service.configure_logging(logging_config)
    try:
        deck = service.create_deck(deck_config)
    except DeckIntegrityError as e:
        raise click.ClickException(str(e))
    _deal_and_print(deck, count, use_unicode)

    if deck_config.verify_integrity:
        result = DeckIntegrityChecker().check(deck)
        if not result.is_valid:
            for violation in result.violations:
                click.echo(f"violation: {violation.description}", err=True)
            raise click.ClickException("牌组不变量检查失败")
        click.echo("integrity: ok")


def _deal_and_print(deck: Deck, count: int, use_unicode: bool) -> None:
    for _ in range(count):
        card = deck.deal_card()
        if card is None:
            click.echo("deck exhausted")
            break
        click.echo(card.display() if use_unicode else str(card))
    click.echo(f"remaining: {deck.num_cards()}")
    logger.info(f"发牌结束，剩余{deck.num_cards()}张")


def main() -> None:
    """命令行入口"""
    cli()
