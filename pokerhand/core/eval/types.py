"""
牌型评估相关类型定义.

定义牌型等级、评估结果等核心数据结构.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from ..deck.card import Card
from ..deck.types import Rank

HAND_SIZE = 5


class HandCategory(IntEnum):
    """
    扑克牌型枚举.

    定义所有可能的牌型，数值越大表示牌型越强.
    包含皇家同花顺在内的10种标准牌型.
    """

    HIGH_CARD = 1          # 高牌
    ONE_PAIR = 2           # 一对
    TWO_PAIR = 3           # 两对
    THREE_OF_A_KIND = 4    # 三条
    STRAIGHT = 5           # 顺子
    FLUSH = 6              # 同花
    FULL_HOUSE = 7         # 葫芦
    FOUR_OF_A_KIND = 8     # 四条
    STRAIGHT_FLUSH = 9     # 同花顺
    ROYAL_FLUSH = 10       # 皇家同花顺

    @property
    def display_name(self) -> str:
        """牌型的显示名称，如"Full House"."""
        return _CATEGORY_NAMES[self]


_CATEGORY_NAMES = {
    HandCategory.HIGH_CARD: "High Card",
    HandCategory.ONE_PAIR: "One Pair",
    HandCategory.TWO_PAIR: "Two Pair",
    HandCategory.THREE_OF_A_KIND: "Three of a Kind",
    HandCategory.STRAIGHT: "Straight",
    HandCategory.FLUSH: "Flush",
    HandCategory.FULL_HOUSE: "Full House",
    HandCategory.FOUR_OF_A_KIND: "Four of a Kind",
    HandCategory.STRAIGHT_FLUSH: "Straight Flush",
    HandCategory.ROYAL_FLUSH: "Royal Flush",
}


@dataclass(frozen=True, eq=False)
class HandEvaluation:
    """
    牌型评估结果.

    包含牌型等级和决定胜负的牌。cards按比较优先级排列：
    例如葫芦先列三条的三张再列对子的两张，一对先列对子再按点数降序列出踢脚牌.
    两个评估结果只按牌型和各位置的点数判断相等，花色不参与.

    Attributes:
        category: 牌型等级
        cards: 组成牌型的牌（最多5张），按比较优先级排列

    Examples:
        >>> result = HandEvaluation(HandCategory.HIGH_CARD, (Card(Rank.ACE, Suit.HEARTS),))
        >>> result.ranks
        (<Rank.ACE: 14>,)
    """

    category: HandCategory
    cards: Tuple[Card, ...] = ()

    def __post_init__(self) -> None:
        """
        验证评估结果的有效性.

        Raises:
            TypeError: 当牌型等级或牌的类型无效时
            ValueError: 当牌数超过5张时
        """
        if not isinstance(self.category, HandCategory):
            raise TypeError(f"牌型等级必须是HandCategory类型，实际: {type(self.category)}")

        # 允许传入列表，统一保存为元组
        object.__setattr__(self, "cards", tuple(self.cards))

        if len(self.cards) > HAND_SIZE:
            raise ValueError(f"评估结果最多包含{HAND_SIZE}张牌，实际: {len(self.cards)}")

        for i, card in enumerate(self.cards):
            if not isinstance(card, Card):
                raise TypeError(f"第{i}张牌必须是Card类型，实际: {type(card)}")

    @property
    def ranks(self) -> Tuple[Rank, ...]:
        """按比较优先级排列的点数."""
        return tuple(card.rank for card in self.cards)

    @property
    def high_card(self) -> Optional[Card]:
        """优先级最高的牌；顺子类牌型即顺子的最高牌（A-2-3-4-5为5）."""
        return self.cards[0] if self.cards else None

    @property
    def sort_key(self) -> Tuple[int, Tuple[int, ...]]:
        """与compare一致的排序键."""
        return (int(self.category), tuple(int(rank) for rank in self.ranks))

    def compare_to(self, other: 'HandEvaluation') -> int:
        """
        比较两个牌型的强弱.

        Args:
            other: 另一个牌型评估结果

        Returns:
            int: 1表示当前牌型更强，-1表示更弱，0表示相等

        Raises:
            TypeError: 当other不是HandEvaluation类型时
        """
        if not isinstance(other, HandEvaluation):
            raise TypeError(f"比较对象必须是HandEvaluation类型，实际: {type(other)}")

        mine, theirs = self.sort_key, other.sort_key
        if mine == theirs:
            return 0
        return 1 if mine > theirs else -1

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.sort_key == other.sort_key

    def __hash__(self) -> int:
        return hash(self.sort_key)

    def __lt__(self, other: 'HandEvaluation') -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __le__(self, other: 'HandEvaluation') -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.sort_key <= other.sort_key

    def __gt__(self, other: 'HandEvaluation') -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.sort_key > other.sort_key

    def __ge__(self, other: 'HandEvaluation') -> bool:
        if not isinstance(other, HandEvaluation):
            return NotImplemented
        return self.sort_key >= other.sort_key

    def __str__(self) -> str:
        """
        返回牌型的字符串描述.

        Returns:
            str: 牌型名称和组成牌型的牌，如"Full House: A♠ A♦ A♣ K♠ K♦"
        """
        if not self.cards:
            return self.category.display_name
        cards_str = " ".join(card.description for card in self.cards)
        return f"{self.category.display_name}: {cards_str}"
