"""
核心模块边界测试

确保pokerhand.core不依赖应用层和测试代码，并且测试使用的是真实核心对象。
"""

import importlib

import pytest

from pokerhand.core.deck import Card, Deck, Rank, Suit
from pokerhand.core.eval import HandEvaluator
from pokerhand.tests.anti_cheat.core_usage_checker import CoreUsageChecker

CORE_MODULES = [
    "pokerhand.core.deck.types",
    "pokerhand.core.deck.card",
    "pokerhand.core.deck.deck",
    "pokerhand.core.eval.types",
    "pokerhand.core.eval.comparator",
    "pokerhand.core.eval.evaluator",
]


@pytest.mark.anti_cheat
@pytest.mark.parametrize("module_name", CORE_MODULES)
def test_core_module_has_no_external_dependencies(module_name):
    """核心模块只能依赖核心模块"""
    importlib.import_module(module_name)
    CoreUsageChecker.verify_no_external_dependencies(module_name)


@pytest.mark.anti_cheat
def test_evaluation_uses_real_core_objects():
    """评估流程返回真实的核心对象"""
    evaluator = HandEvaluator()
    hand = [Card(rank, Suit.SPADES) for rank in (Rank.ACE, Rank.KING, Rank.QUEEN, Rank.JACK, Rank.TEN)]
    result = evaluator.evaluate(hand)

    CoreUsageChecker.verify_real_objects(evaluator, "HandEvaluator")
    CoreUsageChecker.verify_real_objects(result, "HandEvaluation")
    for card in result.cards:
        CoreUsageChecker.verify_real_objects(card, "Card")


@pytest.mark.anti_cheat
def test_mock_objects_are_rejected():
    """mock对象无法通过检查"""
    from unittest.mock import Mock

    fake_deck = Mock(spec=Deck)
    with pytest.raises(AssertionError):
        CoreUsageChecker.verify_real_objects(fake_deck, "Deck")
