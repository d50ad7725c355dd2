"""
扑克牌组管理模块.

提供Card和Deck类，实现标准52张牌的构造、洗牌、发牌和重置.
"""

from .card import Card
from .deck import Deck
from .random_source import RandomSource, get_default_rng
from .types import CARDS_PER_DECK, SUITS, VALUES, Suit, Value, get_all_suits, get_all_values

__all__ = [
    'Card', 'Deck',
    'Suit', 'Value', 'SUITS', 'VALUES', 'CARDS_PER_DECK',
    'get_all_suits', 'get_all_values',
    'RandomSource', 'get_default_rng',
]
