"""
deck_of_cards - 标准52张扑克牌组

提供卡牌、牌组（洗牌、发牌、重置）以及牌组结构不变量检查。
"""

from typing import Optional

from .core.deck import (
    CARDS_PER_DECK,
    Card,
    Deck,
    RandomSource,
    Suit,
    Value,
    get_default_rng,
)
from .core.exceptions import DeckConfigError, DeckError, InvalidCardError
from .core.invariant import DeckIntegrityChecker, DeckIntegrityError

__version__ = "1.0.0"

__all__ = [
    # 卡牌相关
    'Card', 'Deck', 'Suit', 'Value', 'CARDS_PER_DECK',

    # 随机源
    'RandomSource', 'get_default_rng',

    # 不变量检查
    'DeckIntegrityChecker',

    # 异常类型
    'DeckError', 'InvalidCardError', 'DeckConfigError', 'DeckIntegrityError',

    # 便捷函数
    'new_deck',
]


def new_deck(shuffle: bool = True, rng: Optional[RandomSource] = None) -> Deck:
    """Create a new deck of cards.

    Args:
        shuffle: Whether to shuffle the deck after creation.
        rng: Optional random source; defaults to the process-wide generator.

    Returns:
        A new deck of cards.
    """
    deck = Deck(rng)
    if shuffle:
        deck.shuffle()
    return deck
