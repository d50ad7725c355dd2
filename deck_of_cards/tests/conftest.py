"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的牌组fixture
- 确定性随机源
- 测试标记定义

所有测试都会自动加载这些配置。
"""

import random
from typing import List

import pytest

from deck_of_cards.core.deck import Card, Deck, get_all_suits, get_all_values
from deck_of_cards.core.invariant import DeckIntegrityChecker


@pytest.fixture
def rng():
    """固定种子的随机数生成器fixture"""
    return random.Random(42)


@pytest.fixture
def deck(rng):
    """使用固定随机源的新牌组fixture"""
    return Deck(rng)


@pytest.fixture
def canonical_cards() -> List[Card]:
    """按规范顺序排列的52张牌"""
    return [Card(suit, value) for suit in get_all_suits() for value in get_all_values()]


@pytest.fixture
def integrity_checker():
    """牌组不变量检查器fixture"""
    return DeckIntegrityChecker()


# 测试标记定义
def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "unit: 标记单元测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "statistical: 标记统计检验测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
