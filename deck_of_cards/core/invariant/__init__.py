"""
Invariant Module - 牌组结构不变量

Classes:
    DeckIntegrityChecker: 牌组结构不变量检查器

Types:
    InvariantViolation: 不变量违反记录
    InvariantCheckResult: 不变量检查结果
    DeckIntegrityError: 不变量错误异常
"""

from .types import DeckIntegrityError, InvariantCheckResult, InvariantViolation
from .deck_integrity_checker import DeckIntegrityChecker

__all__ = [
    'DeckIntegrityChecker',
    'InvariantViolation',
    'InvariantCheckResult',
    'DeckIntegrityError',
]
