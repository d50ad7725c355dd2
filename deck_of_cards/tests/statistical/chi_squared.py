"""
卡方拟合优度检验工具

仅用于测试：统计"某张牌出现在某个位置"的频数，并与均匀分布比较。
临界值使用Wilson-Hilferty近似，自由度在数千量级时误差可以忽略。
"""

import math
from statistics import NormalDist
from typing import List

from deck_of_cards.core.deck import CARDS_PER_DECK, Card


def chi_squared_critical_value(dofs: int, alpha: float) -> float:
    """
    卡方分布上侧分位数（Wilson-Hilferty近似）

    Args:
        dofs: 自由度
        alpha: 显著性水平

    Returns:
        float: P(X > 返回值) = alpha 的临界值
    """
    if dofs <= 0:
        raise ValueError(f"自由度必须为正数: {dofs}")
    if not 0 < alpha < 1:
        raise ValueError(f"显著性水平必须在(0, 1)之间: {alpha}")

    z = NormalDist().inv_cdf(1 - alpha)
    h = 2.0 / (9.0 * dofs)
    return dofs * (1 - h + z * math.sqrt(h)) ** 3


def get_category(card: Card, position: int, num_cards: int = CARDS_PER_DECK) -> int:
    """把(牌, 位置)映射为唯一的类别编号

    Raises:
        IndexError: 当位置超出范围时
    """
    if not 0 <= position < num_cards:
        raise IndexError(f"位置超出范围: {position}")
    return card.index * num_cards + position


class ChiSquaredTest:
    """卡方检验器：各类别期望频数相同"""

    def __init__(self, num_categories: int, expected_frequency: float):
        self.dofs = num_categories - 1
        self._observed: List[int] = [0] * num_categories
        self._expected = expected_frequency
        self.chi_squared = 0.0
        self.threshold = 0.0

    def add_observation(self, category: int) -> None:
        """记录一次观测

        Raises:
            IndexError: 当类别编号超出范围时
        """
        if not 0 <= category < len(self._observed):
            raise IndexError(f"类别编号超出范围: {category}")
        self._observed[category] += 1

    @property
    def total_observations(self) -> int:
        return sum(self._observed)

    def passes_test(self, alpha: float) -> bool:
        """卡方统计量低于临界值时返回True"""
        self._calculate()
        self.threshold = chi_squared_critical_value(self.dofs, alpha)
        return self.chi_squared < self.threshold

    def _calculate(self) -> None:
        self.chi_squared = 0.0
        if self._expected <= 0:
            return
        for count in self._observed:
            self.chi_squared += (count - self._expected) ** 2 / self._expected
