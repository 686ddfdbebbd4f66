"""
扑克牌型评估器.

提供牌型识别、比较和最佳5张牌组合搜索功能.
评估是纯函数：相同的一组牌（不论输入顺序）总是得到相同的结果，
重复的牌按实际张数计入，不会报错.
"""

import logging
from itertools import combinations
from typing import Dict, Iterable, List, Optional

from ..deck.card import Card
from ..deck.types import Rank, Suit, get_all_suits
from .comparator import Ordering, compare
from .types import HAND_SIZE, HandCategory, HandEvaluation

logger = logging.getLogger(__name__)

_SUIT_ORDER: Dict[Suit, int] = {suit: index for index, suit in enumerate(get_all_suits())}

# A-2-3-4-5顺子，A作为最小牌排在最后
_WHEEL_RANKS = (Rank.FIVE, Rank.FOUR, Rank.THREE, Rank.TWO, Rank.ACE)


def _card_key(card: Card):
    # 点数相同时按固定花色顺序排列，保证结果与输入顺序无关
    return (card.rank.value, -_SUIT_ORDER[card.suit])


class HandEvaluator:
    """
    扑克牌型评估器.

    实现标准的牌型识别和比较算法，支持从任意张数的牌中找出最佳5张牌组合.

    Examples:
        >>> evaluator = HandEvaluator()
        >>> hole_cards = [Card(Rank.ACE, Suit.HEARTS), Card(Rank.ACE, Suit.SPADES)]
        >>> community_cards = [Card(Rank.KING, Suit.HEARTS), ...]
        >>> result = evaluator.evaluate_hand(hole_cards, community_cards)
        >>> result.category
        <HandCategory.ONE_PAIR: 2>
    """

    def __init__(self, trace_evaluations: bool = False) -> None:
        """
        Args:
            trace_evaluations: 为True时每次评估都输出DEBUG日志
        """
        self._trace = trace_evaluations

    @property
    def trace_evaluations(self) -> bool:
        """是否输出评估跟踪日志."""
        return self._trace

    def evaluate(self, cards: Iterable[Card]) -> HandEvaluation:
        """
        评估一组牌能组成的最佳牌型.

        少于5张牌时直接返回高牌，包含全部牌并按点数降序排列.

        Args:
            cards: 任意张数的牌，允许重复

        Returns:
            HandEvaluation: 牌型及决定胜负的5张牌

        Raises:
            TypeError: 当输入中包含非Card对象时
        """
        sorted_cards = self._sorted_cards(cards)

        if len(sorted_cards) < HAND_SIZE:
            result = HandEvaluation(HandCategory.HIGH_CARD, tuple(sorted_cards))
        else:
            result = self._classify(sorted_cards)

        if self._trace:
            logger.debug(f"[牌型评估] {[str(c) for c in sorted_cards]} -> {result}")
        return result

    def find_best_hand(self, cards: Iterable[Card]) -> HandEvaluation:
        """
        从给定牌中找出最佳的5张牌组合.

        枚举所有5张牌的组合（7张牌共21种），逐一评估并保留最强者.
        多个组合同样强时保留排序后第一个出现的组合.

        Args:
            cards: 候选牌

        Returns:
            HandEvaluation: 最佳牌型的评估结果
        """
        pool = self._sorted_cards(cards)
        if len(pool) <= HAND_SIZE:
            return self.evaluate(pool)

        best: Optional[HandEvaluation] = None
        for five_cards in combinations(pool, HAND_SIZE):
            result = self._classify(list(five_cards))
            if best is None or compare(result, best) == Ordering.GREATER:
                best = result

        if self._trace:
            logger.debug(f"[最佳组合] {len(pool)}张牌中的最佳牌型: {best}")
        return best

    def evaluate_hand(self, hole_cards: Iterable[Card], community_cards: Iterable[Card]) -> HandEvaluation:
        """
        评估玩家手牌与公共牌组合后的最佳牌型.

        Args:
            hole_cards: 玩家手牌
            community_cards: 公共牌

        Returns:
            HandEvaluation: 最佳牌型的评估结果
        """
        return self.find_best_hand(list(hole_cards) + list(community_cards))

    def compare_hands(self, hand1: HandEvaluation, hand2: HandEvaluation) -> Ordering:
        """
        比较两个牌型的强弱.

        Returns:
            Ordering: hand1更强为GREATER，更弱为LESS，相同为EQUAL
        """
        return compare(hand1, hand2)

    def _sorted_cards(self, cards: Iterable[Card]) -> List[Card]:
        """校验并按点数降序排列."""
        card_list = list(cards)
        for i, card in enumerate(card_list):
            if not isinstance(card, Card):
                raise TypeError(f"第{i}张牌必须是Card类型，实际: {type(card)}")
        return sorted(card_list, key=_card_key, reverse=True)

    def _classify(self, sorted_cards: List[Card]) -> HandEvaluation:
        """
        按牌型从强到弱依次检查，返回第一个成立的牌型.

        Args:
            sorted_cards: 已按点数降序排列的至少5张牌
        """
        rank_groups = self._group_by_rank(sorted_cards)
        flush_cards = self._best_flush_group(sorted_cards)

        # 同花顺 / 皇家同花顺，只在选定的同花花色中查找
        straight_flush = self._find_straight(flush_cards) if flush_cards else None
        if straight_flush is not None:
            if straight_flush[0].rank == Rank.ACE:
                return HandEvaluation(HandCategory.ROYAL_FLUSH, tuple(straight_flush))
            return HandEvaluation(HandCategory.STRAIGHT_FLUSH, tuple(straight_flush))

        # 四条；同一张牌的重复副本可以充当踢脚牌
        quad_ranks = [rank for rank, group in rank_groups.items() if len(group) >= 4]
        if quad_ranks:
            quad_group = rank_groups[quad_ranks[0]]
            kickers = [c for c in sorted_cards if c.rank != quad_ranks[0]] or quad_group[4:]
            return HandEvaluation(HandCategory.FOUR_OF_A_KIND, tuple(quad_group[:4] + kickers[:1]))

        three_ranks = [rank for rank, group in rank_groups.items() if len(group) == 3]
        pair_ranks = [rank for rank, group in rank_groups.items() if len(group) == 2]

        # 葫芦：两组三条时取较大的三条和较小三条中的两张.
        # 同一点数既是三条又是对子的情况（重复牌）已在四条中处理
        if len(three_ranks) >= 2:
            cards = rank_groups[three_ranks[0]] + rank_groups[three_ranks[1]][:2]
            return HandEvaluation(HandCategory.FULL_HOUSE, tuple(cards))
        if three_ranks and pair_ranks:
            cards = rank_groups[three_ranks[0]] + rank_groups[pair_ranks[0]]
            return HandEvaluation(HandCategory.FULL_HOUSE, tuple(cards))

        # 同花
        if flush_cards:
            return HandEvaluation(HandCategory.FLUSH, tuple(flush_cards[:HAND_SIZE]))

        # 顺子；普通顺子先检查A-2-3-4-5
        straight = self._find_straight(sorted_cards, wheel_first=True)
        if straight is not None:
            return HandEvaluation(HandCategory.STRAIGHT, tuple(straight))

        # 三条
        if three_ranks:
            kickers = [c for c in sorted_cards if c.rank != three_ranks[0]]
            cards = rank_groups[three_ranks[0]] + kickers[:2]
            return HandEvaluation(HandCategory.THREE_OF_A_KIND, tuple(cards))

        # 两对
        if len(pair_ranks) >= 2:
            high_pair, low_pair = pair_ranks[0], pair_ranks[1]
            kickers = [c for c in sorted_cards if c.rank not in (high_pair, low_pair)]
            cards = rank_groups[high_pair] + rank_groups[low_pair] + kickers[:1]
            return HandEvaluation(HandCategory.TWO_PAIR, tuple(cards))

        # 一对
        if pair_ranks:
            kickers = [c for c in sorted_cards if c.rank != pair_ranks[0]]
            cards = rank_groups[pair_ranks[0]] + kickers[:3]
            return HandEvaluation(HandCategory.ONE_PAIR, tuple(cards))

        # 高牌
        return HandEvaluation(HandCategory.HIGH_CARD, tuple(sorted_cards[:HAND_SIZE]))

    def _best_flush_group(self, sorted_cards: List[Card]) -> Optional[List[Card]]:
        """
        选出同花花色.

        多个花色都有5张以上时，取前5张点数按字典序最大的花色.

        Returns:
            Optional[List[Card]]: 该花色的全部牌（点数降序），没有同花时返回None
        """
        flush_groups = [
            group for group in self._group_by_suit(sorted_cards).values()
            if len(group) >= HAND_SIZE
        ]
        if not flush_groups:
            return None
        return max(flush_groups, key=lambda group: [c.rank for c in group[:HAND_SIZE]])

    def _find_straight(self, sorted_cards: List[Card], wheel_first: bool = False) -> Optional[List[Card]]:
        """
        检查是否存在顺子.

        Args:
            sorted_cards: 按点数降序排列的牌
            wheel_first: 为True时A-2-3-4-5优先于其它顺子，否则只在没有其它顺子时使用

        Returns:
            Optional[List[Card]]: 组成顺子的5张牌（降序，A-2-3-4-5为5-4-3-2-A），
            不存在顺子时返回None
        """
        # 每个点数取排序后的第一张
        by_rank: Dict[Rank, Card] = {}
        for card in sorted_cards:
            by_rank.setdefault(card.rank, card)

        if len(by_rank) < HAND_SIZE:
            return None

        has_wheel = all(rank in by_rank for rank in _WHEEL_RANKS)
        if has_wheel and wheel_first:
            return [by_rank[rank] for rank in _WHEEL_RANKS]

        for high in range(Rank.ACE, Rank.FIVE, -1):
            window = [Rank(value) for value in range(high, high - HAND_SIZE, -1)]
            if all(rank in by_rank for rank in window):
                return [by_rank[rank] for rank in window]

        if has_wheel:
            return [by_rank[rank] for rank in _WHEEL_RANKS]

        return None

    def _group_by_rank(self, sorted_cards: List[Card]) -> Dict[Rank, List[Card]]:
        """按点数分组，分组按点数降序排列."""
        groups: Dict[Rank, List[Card]] = {}
        for card in sorted_cards:
            groups.setdefault(card.rank, []).append(card)
        return groups

    def _group_by_suit(self, sorted_cards: List[Card]) -> Dict[Suit, List[Card]]:
        """按花色分组，组内保持点数降序."""
        groups: Dict[Suit, List[Card]] = {}
        for card in sorted_cards:
            groups.setdefault(card.suit, []).append(card)
        return groups
