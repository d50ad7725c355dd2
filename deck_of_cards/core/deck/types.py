"""
扑克牌相关类型定义.

定义扑克牌的花色、点数枚举以及标准牌组的规范顺序.
"""

from enum import IntEnum
from typing import Dict, List, Tuple

from ..exceptions import InvalidCardError

__all__ = [
    'Suit',
    'Value',
    'SUITS',
    'VALUES',
    'CARDS_PER_DECK',
    'get_all_suits',
    'get_all_values',
]


class Suit(IntEnum):
    """
    扑克牌花色枚举.

    数值即规范顺序：梅花、方块、红桃、黑桃.
    """

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    @property
    def symbol(self) -> str:
        """单字母简写，如"C"."""
        return _SUIT_SYMBOLS[self]

    @property
    def pip(self) -> str:
        """Unicode花色符号，如"♣"."""
        return _SUIT_PIPS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Suit':
        """
        从单字母简写或Unicode花色符号解析花色.

        Args:
            symbol: 花色简写（大小写均可）或花色符号，如"C"、"♣"

        Returns:
            Suit: 对应的花色

        Raises:
            InvalidCardError: 当简写无效时
        """
        if not isinstance(symbol, str):
            raise InvalidCardError(f"花色简写必须是字符串，实际: {type(symbol)}")
        for suit in cls:
            if symbol.upper() == _SUIT_SYMBOLS[suit] or symbol == _SUIT_PIPS[suit]:
                return suit
        raise InvalidCardError(f"无效的花色: {symbol!r}")


class Value(IntEnum):
    """
    扑克牌点数枚举.

    A为1，K为13，不涉及任何牌型大小规则.
    """

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def symbol(self) -> str:
        """点数简写，如"A"、"10"、"K"."""
        return _VALUE_SYMBOLS[self]

    @classmethod
    def from_symbol(cls, symbol: str) -> 'Value':
        """
        从简写解析点数.

        Args:
            symbol: 点数简写，"T"也表示10

        Returns:
            Value: 对应的点数

        Raises:
            InvalidCardError: 当简写无效时
        """
        if not isinstance(symbol, str):
            raise InvalidCardError(f"点数简写必须是字符串，实际: {type(symbol)}")
        text = symbol.upper()
        if text == "T":
            return cls.TEN
        for value, value_text in _VALUE_SYMBOLS.items():
            if text == value_text:
                return value
        raise InvalidCardError(f"无效的点数: {symbol!r}")


_SUIT_SYMBOLS: Dict[Suit, str] = {
    Suit.CLUB: "C", Suit.DIAMOND: "D", Suit.HEART: "H", Suit.SPADE: "S"
}

_SUIT_PIPS: Dict[Suit, str] = {
    Suit.CLUB: "♣", Suit.DIAMOND: "♦", Suit.HEART: "♥", Suit.SPADE: "♠"
}

_VALUE_SYMBOLS: Dict[Value, str] = {
    Value.ACE: "A", Value.TWO: "2", Value.THREE: "3", Value.FOUR: "4",
    Value.FIVE: "5", Value.SIX: "6", Value.SEVEN: "7", Value.EIGHT: "8",
    Value.NINE: "9", Value.TEN: "10", Value.JACK: "J", Value.QUEEN: "Q",
    Value.KING: "K"
}

SUITS: Tuple[Suit, ...] = tuple(Suit)
VALUES: Tuple[Value, ...] = tuple(Value)
CARDS_PER_DECK = len(SUITS) * len(VALUES)


def get_all_suits() -> List[Suit]:
    """
    获取所有花色.

    Returns:
        List[Suit]: 按规范顺序排列的四种花色
    """
    return list(SUITS)


def get_all_values() -> List[Value]:
    """
    获取所有点数.

    Returns:
        List[Value]: 从A到K的13种点数
    """
    return list(VALUES)
