"""
Application Layer - 应用服务层

提供配置管理服务，负责牌组创建和日志设置。
"""

from .config_service import ConfigService, ConfigType, DeckConfig, LoggingConfig

__all__ = ['ConfigService', 'ConfigType', 'DeckConfig', 'LoggingConfig']
