"""
不变量检查器类型定义

定义牌组结构不变量检查相关的基础类型。
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..exceptions import DeckError

__all__ = [
    'InvariantViolation',
    'InvariantCheckResult',
    'DeckIntegrityError',
    'SEVERITIES',
]

SEVERITIES = ('CRITICAL', 'WARNING', 'INFO')


@dataclass(frozen=True)
class InvariantViolation:
    """不变量违反记录"""
    violation_id: str
    description: str
    severity: str  # 'CRITICAL', 'WARNING', 'INFO'
    context: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """验证违反记录的有效性"""
        if not self.violation_id:
            raise ValueError("violation_id不能为空")
        if not self.description:
            raise ValueError("description不能为空")
        if self.severity not in SEVERITIES:
            raise ValueError("severity必须是CRITICAL、WARNING或INFO之一")


@dataclass(frozen=True)
class InvariantCheckResult:
    """不变量检查结果"""
    is_valid: bool
    violations: List[InvariantViolation]
    check_duration: float  # 检查耗时（秒）

    def __post_init__(self):
        """验证检查结果的有效性"""
        if self.check_duration < 0:
            raise ValueError("check_duration不能为负数")
        if not self.is_valid and len(self.violations) == 0:
            raise ValueError("检查失败时必须提供违反记录")

    @classmethod
    def create_success(cls, check_duration: float) -> 'InvariantCheckResult':
        """创建成功的检查结果"""
        return cls(is_valid=True, violations=[], check_duration=check_duration)

    @classmethod
    def create_failure(cls, violations: List[InvariantViolation],
                       check_duration: float) -> 'InvariantCheckResult':
        """创建失败的检查结果"""
        return cls(is_valid=False, violations=violations, check_duration=check_duration)


class DeckIntegrityError(DeckError):
    """牌组结构不变量被破坏"""

    def __init__(self, message: str, violations: List[InvariantViolation]):
        super().__init__(message)
        self.violations = violations

    def get_critical_violations(self) -> List[InvariantViolation]:
        """获取严重违反记录"""
        return [v for v in self.violations if v.severity == 'CRITICAL']
