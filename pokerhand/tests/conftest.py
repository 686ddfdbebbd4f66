"""
Test Configuration - pytest配置文件

该文件提供测试的基础设施，包括：
- 通用的测试fixture
- 测试标记注册
"""

import random
from typing import Callable, List, Tuple

import pytest

from pokerhand.core.deck import Card, Deck, Rank
from pokerhand.core.eval import HandEvaluator
from pokerhand.application import ConfigService


def parse_cards(codes: str) -> List[Card]:
    """把空格分隔的牌代码解析成牌列表，如"AH KD 10c"."""
    return [Card.from_str(code) for code in codes.split()]


def parse_ranks(symbols: str) -> Tuple[Rank, ...]:
    """把空格分隔的点数符号解析成点数元组，如"A 10 8"."""
    return tuple(Card.from_str(symbol + "H").rank for symbol in symbols.split())


@pytest.fixture
def evaluator() -> HandEvaluator:
    """评估器fixture"""
    return HandEvaluator()


@pytest.fixture
def seeded_deck() -> Deck:
    """使用固定种子的牌组fixture"""
    return Deck(random.Random(42))


@pytest.fixture
def cards() -> Callable[[str], List[Card]]:
    """牌代码解析fixture"""
    return parse_cards


@pytest.fixture
def ranks() -> Callable[[str], Tuple[Rank, ...]]:
    """点数符号解析fixture"""
    return parse_ranks


@pytest.fixture
def config_service() -> ConfigService:
    """配置服务fixture"""
    return ConfigService()


@pytest.fixture
def mock_detector():
    """Mock对象检测器fixture"""
    def _detect_mocks(*objects):
        """检测对象中是否包含mock"""
        for obj in objects:
            if hasattr(obj, '_mock_name') or hasattr(obj, 'call_count'):
                pytest.fail(f"检测到mock对象: {obj}, 测试必须使用真实对象")
    return _detect_mocks


def pytest_configure(config):
    """pytest配置"""
    config.addinivalue_line(
        "markers", "anti_cheat: 标记需要反作弊检查的测试"
    )
    config.addinivalue_line(
        "markers", "property_test: 标记基于属性的测试"
    )
    config.addinivalue_line(
        "markers", "integration: 标记集成测试"
    )
