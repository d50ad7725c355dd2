"""
洗牌随机源.

Deck通过构造参数注入随机源；未注入时使用进程级共享生成器.
共享生成器在模块导入时从操作系统熵源播种一次，之后不会因为创建新的Deck而重新播种，
避免同一时刻创建的多副牌得到相关的洗牌结果.
"""

import random
from typing import Protocol

__all__ = ['RandomSource', 'get_default_rng']


class RandomSource(Protocol):
    """Protocol for the uniform integer source used by the shuffle.

    ``random.Random`` and ``random.SystemRandom`` both satisfy it.
    """

    def randrange(self, stop: int) -> int:
        """Return a uniform integer in ``[0, stop)``."""
        ...


# random.Random() without a seed pulls from os.urandom
_default_rng = random.Random()


def get_default_rng() -> random.Random:
    """获取进程级共享随机数生成器"""
    return _default_rng
