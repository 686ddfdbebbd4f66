"""
pokerhand - 扑克牌型评估引擎

从2-7张（或更多）牌中找出最佳5张牌组合，判定十种标准牌型，
并为摊牌提供全序比较.
"""

from .core.deck import Card, Deck, Rank, Suit
from .core.eval import (
    HandCategory,
    HandEvaluation,
    HandEvaluator,
    Ordering,
    compare,
    find_winners,
    rank_evaluations,
)

__version__ = "1.0.0"

__all__ = [
    'Card', 'Deck', 'Rank', 'Suit',
    'HandCategory', 'HandEvaluation', 'HandEvaluator',
    'Ordering', 'compare', 'find_winners', 'rank_evaluations',
]
