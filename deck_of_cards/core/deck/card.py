"""
扑克牌数据结构.

定义不可变的Card类，花色和点数都是必填字段，不存在"空牌".
"""

from dataclasses import dataclass

from ..exceptions import InvalidCardError
from .types import CARDS_PER_DECK, VALUES, Suit, Value


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，相等性和哈希只取决于花色和点数，
    因此可以直接放入set或作为dict的键去重.

    Attributes:
        suit: 花色
        value: 点数

    Examples:
        >>> card = Card(Suit.CLUB, Value.ACE)
        >>> str(card)
        'AC'
        >>> card.index
        0
    """

    suit: Suit
    value: Value

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")
        if not isinstance(self.value, Value):
            raise TypeError(f"点数必须是Value类型，实际: {type(self.value)}")

    @property
    def index(self) -> int:
        """
        在规范顺序中的位置.

        Returns:
            int: 0（梅花A）到51（黑桃K）
        """
        return int(self.suit) * len(VALUES) + (int(self.value) - 1)

    def display(self) -> str:
        """返回带花色符号的显示字符串，如"A♣"."""
        return f"{self.value.symbol}{self.suit.pip}"

    def __str__(self) -> str:
        return f"{self.value.symbol}{self.suit.symbol}"

    def __repr__(self) -> str:
        return f"Card({self.value.name}, {self.suit.name})"

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 格式为"点数花色"，如"AC"、"10d"、"Th"，也接受display()的"A♣"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            InvalidCardError: 当字符串格式无效时
        """
        if not isinstance(card_str, str) or len(card_str) < 2:
            raise InvalidCardError(f"卡牌字符串格式错误: {card_str!r}")

        value_str, suit_str = card_str[:-1], card_str[-1]
        return cls(Suit.from_symbol(suit_str), Value.from_symbol(value_str))

    @classmethod
    def from_index(cls, index: int) -> 'Card':
        """
        按规范位置创建扑克牌，是index属性的逆操作.

        Raises:
            InvalidCardError: 当位置不在0-51之间时
        """
        if not 0 <= index < CARDS_PER_DECK:
            raise InvalidCardError(f"卡牌位置超出范围: {index}")
        suit_index, value_index = divmod(index, len(VALUES))
        return cls(Suit(suit_index), VALUES[value_index])
