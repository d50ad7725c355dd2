"""
牌组结构不变量检查器

检查规范快照是否完整有序、当前牌列表是否无重复且只包含快照中的牌。
"""

import logging
import time
import uuid
from collections import Counter
from typing import Any, Dict, List, Optional

from ..deck import CARDS_PER_DECK, Card, Deck, get_all_suits, get_all_values
from .types import DeckIntegrityError, InvariantCheckResult, InvariantViolation

__all__ = ['DeckIntegrityChecker']


class DeckIntegrityChecker:
    """牌组结构不变量检查器"""

    def __init__(self):
        self.logger = logging.getLogger(__name__)
        self._violations: List[InvariantViolation] = []
        self._canonical = [
            Card(suit, value)
            for suit in get_all_suits()
            for value in get_all_values()
        ]

    def check(self, deck: Deck) -> InvariantCheckResult:
        """执行不变量检查

        Args:
            deck: 被检查的牌组

        Returns:
            InvariantCheckResult: 检查结果
        """
        start_time = time.perf_counter()
        self._violations.clear()

        try:
            self._check_original(deck)
            self._check_current(deck)
        except Exception as e:
            self._create_violation(
                description=f"检查过程中发生异常: {str(e)}",
                context={'exception_type': type(e).__name__, 'exception_message': str(e)}
            )

        check_duration = time.perf_counter() - start_time
        if not self._violations:
            return InvariantCheckResult.create_success(check_duration)

        self.logger.warning(f"牌组不变量检查失败，共{len(self._violations)}项违反")
        return InvariantCheckResult.create_failure(self._violations.copy(), check_duration)

    def validate(self, deck: Deck) -> None:
        """检查并在失败时抛出异常

        Raises:
            DeckIntegrityError: 当存在违反记录时
        """
        result = self.check(deck)
        if not result.is_valid:
            descriptions = "; ".join(v.description for v in result.violations)
            raise DeckIntegrityError(f"牌组不变量被破坏: {descriptions}", result.violations)

    def _check_original(self, deck: Deck) -> None:
        original = list(deck.original_cards)
        if len(original) != CARDS_PER_DECK:
            self._create_violation(
                description=f"规范快照应有{CARDS_PER_DECK}张牌，实际{len(original)}张",
                context={'count': len(original)}
            )
        if original != self._canonical:
            self._create_violation(
                description="规范快照与标准顺序不一致",
                context={'first_mismatch': self._first_mismatch(original)}
            )

    def _check_current(self, deck: Deck) -> None:
        current = deck.cards
        if len(current) > CARDS_PER_DECK:
            self._create_violation(
                description=f"剩余牌数超过{CARDS_PER_DECK}: {len(current)}",
                context={'count': len(current)}
            )

        duplicates = [str(card) for card, n in Counter(current).items() if n > 1]
        if duplicates:
            self._create_violation(
                description=f"剩余牌中存在重复: {', '.join(duplicates)}",
                context={'duplicates': duplicates}
            )

        allowed = set(deck.original_cards)
        foreign = [str(card) for card in current if card not in allowed]
        if foreign:
            self._create_violation(
                description=f"剩余牌中存在快照外的牌: {', '.join(foreign)}",
                context={'foreign': foreign}
            )

    def _first_mismatch(self, original: List[Card]) -> Optional[int]:
        for position, (actual, expected) in enumerate(zip(original, self._canonical)):
            if actual != expected:
                return position
        return None

    def _create_violation(self, description: str, severity: str = 'CRITICAL',
                          context: Dict[str, Any] = None) -> InvariantViolation:
        """创建违反记录

        Args:
            description: 违反描述
            severity: 严重程度
            context: 上下文信息

        Returns:
            InvariantViolation: 违反记录
        """
        violation = InvariantViolation(
            violation_id=f"deck_integrity_{uuid.uuid4().hex[:8]}",
            description=description,
            severity=severity,
            context=context or {}
        )
        self._violations.append(violation)
        return violation
