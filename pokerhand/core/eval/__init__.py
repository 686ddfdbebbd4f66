"""
牌型评估模块.

提供HandEvaluator类和相关类型，实现牌型识别、最佳组合搜索和牌型比较功能.
"""

from .types import HAND_SIZE, HandCategory, HandEvaluation
from .comparator import Ordering, compare, sort_key, rank_evaluations, find_winners
from .evaluator import HandEvaluator

__all__ = [
    'HAND_SIZE', 'HandCategory', 'HandEvaluation',
    'Ordering', 'compare', 'sort_key', 'rank_evaluations', 'find_winners',
    'HandEvaluator',
]
