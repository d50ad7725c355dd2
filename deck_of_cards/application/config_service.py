#!/usr/bin/env python3
"""
ConfigService - 配置管理服务

负责集中化管理牌组相关配置，包括：
- 牌组配置（随机种子、创建时是否洗牌、是否做不变量检查）
- 日志配置

配置类使用Pydantic dataclass确保字段校验。
"""

import logging
import random
from enum import Enum
from typing import Dict, Optional

from pydantic import Field, field_validator
from pydantic.dataclasses import dataclass as pydantic_dataclass

from ..core.deck import Deck
from ..core.exceptions import DeckConfigError
from ..core.invariant import DeckIntegrityChecker

_LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG')


class ConfigType(Enum):
    """配置类型枚举"""
    DECK = "deck"
    LOGGING = "logging"


@pydantic_dataclass
class DeckConfig:
    """牌组配置.

    random_seed为None时使用进程级共享生成器，否则为该牌组创建独立的生成器。
    """
    random_seed: Optional[int] = Field(None, ge=0, description="随机种子，用于可重现的洗牌")
    shuffle_on_create: bool = Field(True, description="创建后立即洗牌")
    verify_integrity: bool = Field(False, description="创建牌组后执行不变量检查")


@pydantic_dataclass
class LoggingConfig:
    """日志配置"""
    log_level: str = Field('WARNING', description="日志级别")
    log_format: str = Field('%(asctime)s - %(name)s - %(levelname)s - %(message)s',
                            description="日志格式")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """验证日志级别名称."""
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"无效的日志级别: {v}")
        return level


class ConfigService:
    """配置管理服务"""

    def __init__(self):
        """初始化配置服务"""
        self.logger = logging.getLogger(__name__)
        self._configs: Dict[ConfigType, Dict[str, object]] = {}
        self._load_default_configs()

    def _load_default_configs(self):
        """加载默认配置"""
        self._configs[ConfigType.DECK] = {
            'default': DeckConfig(),
            'debug': DeckConfig(verify_integrity=True),
            'deterministic': DeckConfig(random_seed=0, verify_integrity=True),
        }
        self._configs[ConfigType.LOGGING] = {
            'default': LoggingConfig(),
            'debug': LoggingConfig(log_level='DEBUG'),
            'deterministic': LoggingConfig(log_level='INFO'),
        }
        self.logger.debug("默认配置加载完成")

    def _get(self, config_type: ConfigType, profile: str):
        profiles = self._configs[config_type]
        if profile not in profiles:
            raise DeckConfigError(
                f"未知的{config_type.value}配置: {profile}，可用: {', '.join(sorted(profiles))}"
            )
        return profiles[profile]

    def get_deck_config(self, profile: str = "default") -> DeckConfig:
        """
        获取牌组配置

        Args:
            profile: 配置名

        Raises:
            DeckConfigError: 当配置名不存在时
        """
        return self._get(ConfigType.DECK, profile)

    def get_logging_config(self, profile: str = "default") -> LoggingConfig:
        """获取日志配置"""
        return self._get(ConfigType.LOGGING, profile)

    def register_deck_profile(self, profile: str, config: DeckConfig) -> None:
        """
        注册牌组配置

        Raises:
            DeckConfigError: 当配置名为空或配置类型错误时
        """
        if not profile:
            raise DeckConfigError("配置名不能为空")
        if not isinstance(config, DeckConfig):
            raise DeckConfigError(f"配置必须是DeckConfig类型，实际: {type(config)}")
        self._configs[ConfigType.DECK][profile] = config
        self.logger.info(f"已注册牌组配置: {profile}")

    def list_profiles(self, config_type: ConfigType = ConfigType.DECK) -> list:
        """列出某类配置的所有配置名"""
        return sorted(self._configs[config_type])

    def configure_logging(self, config: LoggingConfig) -> None:
        """
        应用日志配置

        只应由程序入口调用一次，库代码不配置日志。
        """
        logging.basicConfig(level=config.log_level, format=config.log_format, force=True)
        self.logger.debug(f"日志级别已设置为{config.log_level}")

    def create_deck(self, config: Optional[DeckConfig] = None) -> Deck:
        """
        按配置创建牌组

        Args:
            config: 牌组配置，为None时使用default配置

        Returns:
            Deck: 新牌组，按配置决定是否已洗牌

        Raises:
            DeckIntegrityError: 当verify_integrity开启且牌组不变量被破坏时
        """
        if config is None:
            config = self.get_deck_config()

        rng = random.Random(config.random_seed) if config.random_seed is not None else None
        deck = Deck(rng)
        if config.shuffle_on_create:
            deck.shuffle()
        if config.verify_integrity:
            DeckIntegrityChecker().validate(deck)
        self.logger.debug(
            f"创建牌组: seed={config.random_seed}, shuffled={config.shuffle_on_create}"
        )
        return deck
