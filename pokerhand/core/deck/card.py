"""
扑克牌数据结构.

定义不可变的Card类，支持严格的类型检查和完整的操作接口.
"""

from dataclasses import dataclass, field, replace
from typing import Dict

from .types import Suit, Rank


@dataclass(frozen=True)
class Card:
    """
    表示一张扑克牌.

    不可变数据类，包含点数和花色，支持比较、排序和字符串表示等操作.
    大小比较只看点数；相等判断同时看点数和花色.

    Attributes:
        rank: 点数
        suit: 花色
        face_up: 是否正面朝上，仅用于显示，不参与比较

    Examples:
        >>> card = Card(Rank.ACE, Suit.HEARTS)
        >>> str(card)
        'AH'
        >>> card.description
        'A♥'
    """

    rank: Rank
    suit: Suit
    face_up: bool = field(default=False, compare=False)

    def __post_init__(self) -> None:
        """
        验证扑克牌数据的有效性.

        Raises:
            TypeError: 当花色或点数类型无效时
        """
        if not isinstance(self.rank, Rank):
            raise TypeError(f"点数必须是Rank类型，实际: {type(self.rank)}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"花色必须是Suit类型，实际: {type(self.suit)}")

    def __str__(self) -> str:
        """
        返回扑克牌的字符串表示.

        Returns:
            str: 格式为"点数花色"的字符串，如"AH"表示红桃A
        """
        return f"{self.rank.symbol}{self.suit.code}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def description(self) -> str:
        """带花色符号的显示文本，如"A♥"."""
        return f"{self.rank.symbol}{self.suit.value}"

    def flipped(self) -> 'Card':
        """
        返回翻面后的新牌.

        Returns:
            Card: face_up取反后的副本
        """
        return replace(self, face_up=not self.face_up)

    @classmethod
    def from_str(cls, card_str: str) -> 'Card':
        """
        从字符串创建扑克牌对象.

        Args:
            card_str: 扑克牌字符串，格式为"点数花色"，如"AH"、"10d"、"Th"、"A♥"

        Returns:
            Card: 对应的扑克牌对象

        Raises:
            TypeError: 当输入不是字符串时
            ValueError: 当字符串格式无效时
        """
        if not isinstance(card_str, str):
            raise TypeError(f"输入必须是字符串，实际: {type(card_str)}")

        if len(card_str) < 2:
            raise ValueError(f"卡牌字符串格式错误: {card_str}")

        # 处理10的特殊情况
        if card_str.startswith("10"):
            rank_str, suit_str = "10", card_str[2:]
        else:
            rank_str, suit_str = card_str[0].upper(), card_str[1:]

        if rank_str not in _RANK_MAP:
            raise ValueError(f"无效的点数: {rank_str}")
        if suit_str not in _SUIT_MAP:
            raise ValueError(f"无效的花色: {suit_str}")

        return cls(_RANK_MAP[rank_str], _SUIT_MAP[suit_str])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank == other.rank and self.suit == other.suit

    def __hash__(self) -> int:
        return hash((self.rank, self.suit))

    # 大小比较只看点数，花色不分大小
    def __lt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: 'Card') -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.rank >= other.rank


_RANK_MAP: Dict[str, Rank] = {
    "2": Rank.TWO, "3": Rank.THREE, "4": Rank.FOUR, "5": Rank.FIVE,
    "6": Rank.SIX, "7": Rank.SEVEN, "8": Rank.EIGHT, "9": Rank.NINE,
    "10": Rank.TEN, "T": Rank.TEN, "J": Rank.JACK, "Q": Rank.QUEEN,
    "K": Rank.KING, "A": Rank.ACE
}

_SUIT_MAP: Dict[str, Suit] = {
    "h": Suit.HEARTS, "H": Suit.HEARTS, "♥": Suit.HEARTS,
    "d": Suit.DIAMONDS, "D": Suit.DIAMONDS, "♦": Suit.DIAMONDS,
    "c": Suit.CLUBS, "C": Suit.CLUBS, "♣": Suit.CLUBS,
    "s": Suit.SPADES, "S": Suit.SPADES, "♠": Suit.SPADES,
}
