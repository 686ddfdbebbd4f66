"""
扑克牌组管理模块.

提供Card和Deck类，实现扑克牌的基本操作和牌组管理功能.
"""

from .types import Suit, Rank, get_all_suits, get_all_ranks
from .card import Card
from .deck import Deck

__all__ = ['Suit', 'Rank', 'get_all_suits', 'get_all_ranks', 'Card', 'Deck']
