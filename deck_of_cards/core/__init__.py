"""
Core Module - 纯领域逻辑层

Modules:
    deck: 卡牌、牌组和洗牌随机源
    invariant: 牌组结构不变量检查
    exceptions: 异常定义
"""

from .deck import Card, Deck, Suit, Value
from .exceptions import DeckConfigError, DeckError, InvalidCardError
from .invariant import DeckIntegrityChecker, DeckIntegrityError

__all__ = [
    'Card', 'Deck', 'Suit', 'Value',
    'DeckError', 'InvalidCardError', 'DeckConfigError', 'DeckIntegrityError',
    'DeckIntegrityChecker',
]
