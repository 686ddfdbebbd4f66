"""
牌型比较器.

先比较牌型等级，再按评估结果中牌的顺序逐张比较点数.
花色永远不参与比较，点数完全相同的两手牌视为相等.
"""

from enum import IntEnum
from functools import cmp_to_key
from typing import Iterable, List, Sequence

from .types import HandEvaluation


class Ordering(IntEnum):
    """比较结果，可直接当作-1/0/1使用."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


def compare(a: HandEvaluation, b: HandEvaluation) -> Ordering:
    """
    比较两个牌型评估结果.

    Args:
        a: 第一个评估结果
        b: 第二个评估结果

    Returns:
        Ordering: a更强为GREATER，更弱为LESS，相同为EQUAL

    Raises:
        TypeError: 当参数不是HandEvaluation时
    """
    if not isinstance(a, HandEvaluation):
        raise TypeError(f"a必须是HandEvaluation类型，实际: {type(a)}")
    if not isinstance(b, HandEvaluation):
        raise TypeError(f"b必须是HandEvaluation类型，实际: {type(b)}")

    if a.category != b.category:
        return Ordering.GREATER if a.category > b.category else Ordering.LESS

    for mine, theirs in zip(a.cards, b.cards):
        if mine.rank != theirs.rank:
            return Ordering.GREATER if mine.rank > theirs.rank else Ordering.LESS

    # 只有少于5张牌的评估结果长度才会不同，牌多者为大
    if len(a.cards) != len(b.cards):
        return Ordering.GREATER if len(a.cards) > len(b.cards) else Ordering.LESS

    return Ordering.EQUAL


# 用于sorted/max的key
sort_key = cmp_to_key(compare)


def rank_evaluations(evaluations: Iterable[HandEvaluation]) -> List[HandEvaluation]:
    """
    按牌力从强到弱排序.

    Args:
        evaluations: 评估结果

    Returns:
        List[HandEvaluation]: 排序后的新列表，相等的结果保持原有顺序
    """
    return sorted(evaluations, key=sort_key, reverse=True)


def find_winners(evaluations: Sequence[HandEvaluation]) -> List[int]:
    """
    找出牌力最强的所有评估结果.

    Args:
        evaluations: 评估结果序列

    Returns:
        List[int]: 并列最强者的下标，按原顺序排列；输入为空时返回空列表
    """
    if not evaluations:
        return []

    best = max(evaluations, key=sort_key)
    return [
        index for index, evaluation in enumerate(evaluations)
        if compare(evaluation, best) == Ordering.EQUAL
    ]
