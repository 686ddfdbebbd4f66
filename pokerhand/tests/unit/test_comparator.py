"""
牌型比较器的单元测试.

验证先比牌型、再逐张比点数、花色不参与比较的规则，
以及多手牌排序和并列获胜者的判定.
"""

import pytest

from pokerhand.core.eval import (
    HandCategory,
    HandEvaluation,
    Ordering,
    compare,
    find_winners,
    rank_evaluations,
)


class TestCompare:
    """compare函数测试."""

    def test_compare_different_categories(self, evaluator, cards):
        """测试不同牌型按牌型等级比较."""
        royal_flush = evaluator.evaluate(cards("10H JH QH KH AH"))
        straight_flush = evaluator.evaluate(cards("9H 10H JH QH KH"))
        four_of_a_kind = evaluator.evaluate(cards("AH AD AC AS KH"))

        assert compare(royal_flush, straight_flush) == Ordering.GREATER
        assert compare(straight_flush, royal_flush) == Ordering.LESS
        assert compare(straight_flush, four_of_a_kind) == Ordering.GREATER
        assert compare(four_of_a_kind, straight_flush) == Ordering.LESS

    def test_any_flush_beats_any_straight(self, evaluator, cards):
        """测试牌型等级优先于点数."""
        low_flush = evaluator.evaluate(cards("2H 3H 4H 5H 7H"))
        high_straight = evaluator.evaluate(cards("10H JD QC KS AH"))

        assert compare(low_flush, high_straight) == Ordering.GREATER

    def test_compare_same_category_different_kicker(self, evaluator, cards):
        """测试两对相同时按踢脚牌比较."""
        ace_kicker = evaluator.evaluate(cards("KH KD 8C 8S AH"))
        queen_kicker = evaluator.evaluate(cards("KC KS 8H 8D QH"))

        assert ace_kicker.category == queen_kicker.category == HandCategory.TWO_PAIR
        assert compare(ace_kicker, queen_kicker) == Ordering.GREATER
        assert compare(queen_kicker, ace_kicker) == Ordering.LESS

    def test_one_pair_decided_by_third_kicker(self, evaluator, cards):
        """测试一对及前两张踢脚牌相同时由第三张踢脚牌决定."""
        five_kicker = evaluator.evaluate(cards("9H 9D AC KS 5H"))
        four_kicker = evaluator.evaluate(cards("9C 9S AD KH 4C"))

        assert compare(five_kicker, four_kicker) == Ordering.GREATER
        assert compare(four_kicker, five_kicker) == Ordering.LESS

    def test_wheel_loses_to_six_high_straight(self, evaluator, cards):
        """测试A-2-3-4-5是最小的顺子."""
        wheel = evaluator.evaluate(cards("AH 2D 3C 4S 5H"))
        six_high = evaluator.evaluate(cards("2H 3D 4C 5S 6H"))

        assert compare(wheel, six_high) == Ordering.LESS

    def test_full_house_compares_triple_first(self, evaluator, cards):
        """测试葫芦先比三条再比对子."""
        threes_full = evaluator.evaluate(cards("3H 3D 3C AS AD"))
        fours_full = evaluator.evaluate(cards("4H 4D 4C 2S 2D"))

        assert compare(fours_full, threes_full) == Ordering.GREATER

    def test_equal_hands_regardless_of_suit(self, evaluator, cards):
        """测试不同花色的皇家同花顺相等."""
        hearts = evaluator.evaluate(cards("AH KH QH JH 10H"))
        spades = evaluator.evaluate(cards("AS KS QS JS 10S"))

        assert compare(hearts, spades) == Ordering.EQUAL
        assert compare(spades, hearts) == Ordering.EQUAL
        assert hearts == spades

    def test_equal_two_pair_different_suits(self, evaluator, cards):
        """测试点数相同的两对相等."""
        first = evaluator.evaluate(cards("KH KD 8C 8S 2H"))
        second = evaluator.evaluate(cards("KC KS 8H 8D 2C"))

        assert compare(first, second) == Ordering.EQUAL

    def test_reflexive(self, evaluator, cards):
        """测试自身比较相等."""
        hand = evaluator.evaluate(cards("9H 9D AC KS 5H"))
        assert compare(hand, hand) == Ordering.EQUAL

    def test_ordering_behaves_like_int(self, evaluator, cards):
        """测试比较结果可作为-1/0/1使用."""
        high = evaluator.evaluate(cards("AH AD 3C 4S 9H"))
        low = evaluator.evaluate(cards("KH KD 3C 4S 9H"))

        assert compare(high, low) == 1
        assert compare(low, high) == -1
        assert compare(high, high) == 0

    def test_shorter_degenerate_hand_is_lower(self, cards):
        """测试少于5张牌的评估结果前缀相同时牌少者为小."""
        short = HandEvaluation(HandCategory.HIGH_CARD, cards("AH"))
        longer = HandEvaluation(HandCategory.HIGH_CARD, cards("AD KC"))

        assert compare(short, longer) == Ordering.LESS
        assert compare(longer, short) == Ordering.GREATER

    def test_compare_rejects_other_types(self, evaluator, cards):
        """测试非评估结果参数报错."""
        hand = evaluator.evaluate(cards("AH KD QC JS 9H"))

        with pytest.raises(TypeError):
            compare(hand, "royal flush")
        with pytest.raises(TypeError):
            compare(None, hand)

    def test_evaluator_compare_hands(self, evaluator, cards):
        """测试评估器的比较接口."""
        pair = evaluator.evaluate(cards("AH AD 3C 4S 9H"))
        high_card = evaluator.evaluate(cards("AH KD 3C 4S 9H"))

        assert evaluator.compare_hands(pair, high_card) == Ordering.GREATER

    def test_rich_comparisons_agree_with_compare(self, evaluator, cards):
        """测试比较运算符与compare一致."""
        high = evaluator.evaluate(cards("AH AD 3C 4S 9H"))
        low = evaluator.evaluate(cards("AC AS 3D 4H 8H"))

        assert low < high
        assert high > low
        assert high >= low and low <= high
        assert high.compare_to(low) == 1
        assert low.compare_to(high) == -1
        assert high.compare_to(high) == 0


class TestMultipleHands:
    """多手牌排序和获胜者判定测试."""

    def test_rank_evaluations(self, evaluator, cards):
        """测试按牌力从强到弱排序."""
        pair = evaluator.evaluate(cards("AH AD 3C 4S 9H"))
        flush = evaluator.evaluate(cards("2H 3H 4H 5H 7H"))
        high_card = evaluator.evaluate(cards("AH KD 3C 4S 9H"))

        ordered = rank_evaluations([pair, flush, high_card])

        assert [e.category for e in ordered] == [
            HandCategory.FLUSH, HandCategory.ONE_PAIR, HandCategory.HIGH_CARD
        ]

    def test_find_single_winner(self, evaluator, cards):
        """测试唯一获胜者."""
        hands = [
            evaluator.evaluate(cards("AH KD 3C 4S 9H")),
            evaluator.evaluate(cards("2H 3H 4H 5H 7H")),
            evaluator.evaluate(cards("AC AD 3D 4H 9S")),
        ]

        assert find_winners(hands) == [1]

    def test_find_tied_winners(self, evaluator, cards):
        """测试并列获胜者."""
        hands = [
            evaluator.evaluate(cards("AH KH QH JH 10H")),
            evaluator.evaluate(cards("2C 2D 2H 2S 3C")),
            evaluator.evaluate(cards("AS KS QS JS 10S")),
        ]

        assert find_winners(hands) == [0, 2]

    def test_find_winners_empty(self):
        """测试没有评估结果时没有获胜者."""
        assert find_winners([]) == []
