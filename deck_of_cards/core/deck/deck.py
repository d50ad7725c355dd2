"""
扑克牌组管理.

定义Deck类，管理标准52张牌的洗牌、发牌和重置.
牌组状态只由剩余牌数决定（0-52），发完后deal_card返回None而不是抛出异常，
reset随时把牌组恢复为规范顺序的完整52张.

Deck没有内部锁，多线程共享时由调用方自行串行化所有操作.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from .card import Card
from .random_source import RandomSource, get_default_rng
from .types import get_all_suits, get_all_values

logger = logging.getLogger(__name__)


class Deck:
    """
    表示一副扑克牌.

    构造时按"花色为主、点数为次"的规范顺序生成52张牌并保存快照，
    快照之后不再改变. 当前牌列表的末尾是下一张要发出的牌.

    Attributes:
        _original: 规范顺序的52张牌，只读元组
        _cards: 当前剩余的牌，末尾为下一张
        _rng: 洗牌使用的随机源

    Examples:
        >>> deck = Deck()
        >>> deck.shuffle()
        >>> card = deck.deal_card()
        >>> deck.num_cards()
        51
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        """
        初始化牌组.

        Args:
            rng: 洗牌使用的随机源。为None时使用进程级共享生成器
        """
        self._rng = rng if rng is not None else get_default_rng()
        self._original: Tuple[Card, ...] = tuple(
            Card(suit, value)
            for suit in get_all_suits()
            for value in get_all_values()
        )
        self._cards: List[Card] = list(self._original)

    def shuffle(self) -> None:
        """
        洗牌.

        对剩余的牌执行Fisher-Yates洗牌：i从末尾递减到1，
        在[0, i]中均匀选出j并交换i、j两个位置.
        randrange没有取模偏差. 已发出的牌不会回到牌组.
        """
        cards = self._cards
        for i in range(len(cards) - 1, 0, -1):
            j = self._rng.randrange(i + 1)
            cards[i], cards[j] = cards[j], cards[i]
        logger.debug(f"洗牌完成，剩余{len(cards)}张")

    def deal_card(self) -> Optional[Card]:
        """
        发一张牌.

        Returns:
            Optional[Card]: 发出的牌；牌组为空时返回None
        """
        if not self._cards:
            logger.debug("牌组已空，无牌可发")
            return None
        return self._cards.pop()

    def deal_cards(self, count: int) -> List[Card]:
        """
        发多张牌，牌组发完时提前停止.

        Args:
            count: 最多发出的牌数

        Returns:
            List[Card]: 发出的牌，按发出顺序排列，长度可能小于count

        Raises:
            ValueError: 当count为负数时
        """
        if count < 0:
            raise ValueError(f"发牌数量不能为负数: {count}")

        dealt: List[Card] = []
        while len(dealt) < count:
            card = self.deal_card()
            if card is None:
                break
            dealt.append(card)
        return dealt

    def reset(self) -> None:
        """重置牌组为规范顺序的完整52张牌，丢弃洗牌和发牌进度."""
        self._cards = list(self._original)
        logger.debug("牌组已重置")

    def num_cards(self) -> int:
        """返回牌组中剩余的牌数"""
        return len(self._cards)

    def peek_top(self) -> Optional[Card]:
        """
        查看下一张要发出的牌但不发出.

        Returns:
            Optional[Card]: 下一张牌，牌组为空时返回None
        """
        return self._cards[-1] if self._cards else None

    @property
    def is_empty(self) -> bool:
        """检查牌组是否为空"""
        return not self._cards

    @property
    def cards(self) -> Tuple[Card, ...]:
        """当前剩余牌的快照，末尾为下一张"""
        return tuple(self._cards)

    @property
    def original_cards(self) -> Tuple[Card, ...]:
        """构造时的规范顺序"""
        return self._original

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card: object) -> bool:
        return card in self._cards

    def __iter__(self) -> Iterator[Card]:
        """按发牌顺序遍历剩余的牌，不会发出任何牌"""
        return reversed(self.cards)

    def __repr__(self) -> str:
        return f"Deck(remaining={len(self._cards)})"

    def __str__(self) -> str:
        return f"Deck({len(self._cards)} cards remaining)"
