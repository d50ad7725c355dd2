"""
牌组结构不变量检查器的单元测试.
"""

import pytest

from deck_of_cards.core.deck import Card, Suit, Value
from deck_of_cards.core.invariant import (
    DeckIntegrityError,
    InvariantCheckResult,
    InvariantViolation,
)


@pytest.mark.unit
class TestDeckIntegrityChecker:
    """DeckIntegrityChecker测试."""

    def test_fresh_deck_is_valid(self, deck, integrity_checker):
        result = integrity_checker.check(deck)

        assert result.is_valid
        assert result.violations == []
        assert result.check_duration >= 0

    def test_valid_through_lifecycle(self, deck, integrity_checker):
        deck.shuffle()
        deck.deal_cards(17)
        assert integrity_checker.check(deck).is_valid

        deck.shuffle()
        deck.deal_cards(40)
        assert integrity_checker.check(deck).is_valid

        deck.reset()
        integrity_checker.validate(deck)

    def test_detects_duplicates(self, deck, integrity_checker):
        deck._cards.append(deck._cards[0])

        result = integrity_checker.check(deck)

        assert not result.is_valid
        assert any("重复" in v.description for v in result.violations)

    def test_detects_foreign_card(self, deck, integrity_checker):
        deck._original = deck._original[1:]

        result = integrity_checker.check(deck)

        assert not result.is_valid
        assert any("快照外" in v.description for v in result.violations)
        foreign = [v for v in result.violations if 'foreign' in v.context]
        assert foreign[0].context['foreign'] == ["AC"]

    def test_detects_reordered_original(self, deck, integrity_checker):
        deck._original = tuple(reversed(deck._original))

        result = integrity_checker.check(deck)

        assert not result.is_valid
        violation = result.violations[0]
        assert violation.severity == 'CRITICAL'
        assert violation.context['first_mismatch'] == 0

    def test_validate_raises(self, deck, integrity_checker):
        deck._cards.append(Card(Suit.HEART, Value.ACE))

        with pytest.raises(DeckIntegrityError) as exc_info:
            integrity_checker.validate(deck)

        assert exc_info.value.get_critical_violations()

    def test_exception_during_check_is_reported(self, integrity_checker):
        result = integrity_checker.check(object())

        assert not result.is_valid
        assert result.violations[0].context['exception_type'] == 'AttributeError'


@pytest.mark.unit
class TestInvariantTypes:
    """不变量类型的验证测试."""

    def test_violation_validation(self):
        with pytest.raises(ValueError):
            InvariantViolation(violation_id="", description="x", severity='CRITICAL')
        with pytest.raises(ValueError):
            InvariantViolation(violation_id="v1", description="", severity='CRITICAL')
        with pytest.raises(ValueError):
            InvariantViolation(violation_id="v1", description="x", severity='FATAL')

    def test_failure_requires_violations(self):
        with pytest.raises(ValueError):
            InvariantCheckResult(is_valid=False, violations=[], check_duration=0.0)
        with pytest.raises(ValueError):
            InvariantCheckResult.create_success(check_duration=-1.0)
