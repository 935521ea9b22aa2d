"""Tests for hand ranking and best-hand selection."""

import pytest
from treys import Evaluator

from pokerai.errors import ValidationError
from pokerai.game.cards import full_deck, parse_cards
from pokerai.game.evaluator import (
    CATEGORY_NAMES, FLUSH, FULL_HOUSE, HIGH_CARD, PAIR, QUADS, STRAIGHT,
    STRAIGHT_FLUSH, TRIPS, TWO_PAIR,
    HandScore, best_five, compare_hands, evaluate5, evaluate_best, pack_ranks, winners,
)


def score(codes):
    return evaluate5(parse_cards(codes))


TREYS = Evaluator()


def treys_rank(cards):
    treys_cards = [c.to_treys() for c in cards]
    return TREYS.evaluate(treys_cards[:2], treys_cards[2:])


def random_cards(rng, n):
    deck = full_deck()
    return [deck[i] for i in rng.choice(52, size=n, replace=False)]


class TestKnownHands:
    def test_broadway_straight_flush(self):
        assert score("AsKsQsJsTs") == HandScore(STRAIGHT_FLUSH, 14)

    def test_wheel_straight_flush(self):
        assert score("5s4s3s2sAs") == HandScore(STRAIGHT_FLUSH, 5)

    def test_quads(self):
        s = score("9c9d9h9s2c")
        assert s.category == QUADS
        assert s.tiebreak == pack_ranks([9, 2])

    def test_full_house(self):
        s = score("KcKdKh2s2c")
        assert s.category == FULL_HOUSE
        assert s.tiebreak == pack_ranks([13, 2])
        # Trip rank outranks pair rank
        assert s > score("2h2d2s KsKh")

    def test_flush(self):
        assert score("Ah9h7h4h2h").category == FLUSH

    def test_straight(self):
        assert score("9c8d7h6s5c") == HandScore(STRAIGHT, 9)

    def test_wheel_straight(self):
        assert score("Ac2d3h4s5c") == HandScore(STRAIGHT, 5)

    def test_ace_does_not_wrap(self):
        assert score("QcKdAh2s3c").category == HIGH_CARD

    def test_trips(self):
        assert score("7c7d7hKs2c").category == TRIPS

    def test_two_pair(self):
        assert score("7c7dKhKs2c").category == TWO_PAIR

    def test_pair(self):
        assert score("7c7dKhQs2c").category == PAIR

    def test_high_card(self):
        assert score("Ac9d7h4s2c").category == HIGH_CARD

    def test_name(self):
        assert score("KcKdKh2s2c").name == "Full House"
        assert score("Ac9d7h4s2c").name == "High Card"

    def test_accepts_codes_in_any_case(self):
        assert score(["as", "KS", "qs", "Js", "tS"]) == HandScore(STRAIGHT_FLUSH, 14)


class TestOrdering:
    CATEGORY_EXAMPLES = [
        "Ac9d7h4s2c",   # high card
        "7c7dKhQs2c",   # pair
        "7c7dKhKs2c",   # two pair
        "7c7d7hKs2c",   # trips
        "Ac2d3h4s5c",   # wheel straight
        "2h4h6h8hTh",   # weakest-ish flush
        "2c2d2h3s3c",   # weakest full house
        "2c2d2h2s3c",   # weakest quads
        "Ad2d3d4d5d",   # steel wheel
    ]

    def test_categories_strictly_increase(self):
        scores = [score(h) for h in self.CATEGORY_EXAMPLES]
        assert [s.category for s in scores] == list(range(9))
        assert scores == sorted(scores)
        assert len(set(scores)) == 9

    def test_higher_category_beats_any_tiebreak(self):
        best_pair = score("AcAdKhQsJc")
        worst_two_pair = score("3c3d2h2s4c")
        assert worst_two_pair > best_pair

    @pytest.mark.parametrize("better,worse", [
        ("9c9d9h9sAc", "9c9d9h9sKc"),      # quads kicker
        ("3c3d3hAsAc", "2c2d2hAsAd"),      # full house trips rank
        ("3c3d3hAsAc", "3c3d3hKsKc"),      # full house pair rank
        ("Ah7h5h4h2h", "KsQsJsTs8s"),      # flush top card
        ("AhKh5h4h3h", "AsQsJsTs8s"),      # flush second card
        ("Ah9h7h4h3h", "As9s7s4s2s"),      # flush last card
        ("2c3d4h5s6c", "Ac2d3h4s5c"),      # six-high beats wheel
        ("AcKdQhJsTc", "KcQdJhTs9c"),      # broadway beats king-high
        ("7c7d7hAs2c", "7c7d7hKsQc"),      # trips first kicker
        ("7c7d7hAs3c", "7c7d7hAs2d"),      # trips second kicker
        ("KcKdQhQs3c", "KcKdQhQs2d"),      # two pair kicker
        ("KcKd3h3s2c", "QcQdJhJsAc"),      # two pair top pair
        ("KcKd4h4s2c", "KcKd3h3sAc"),      # two pair second pair
        ("AcAdKhQs9c", "AcAdKhQs8d"),      # pair last kicker
        ("AcAd3h4s2c", "KcKdQhJs9d"),      # pair rank over kickers
        ("Ac6d4h3s2c", "KcQdJhTs8d"),      # high card top rank
        ("AcKdQhJs9c", "AcKdQhJs8d"),      # high card last rank
    ])
    def test_kickers(self, better, worse):
        assert score(better) > score(worse)

    def test_equal_hands_different_suits(self):
        assert score("AcKdQhJs9c") == score("AdKhQsJc9d")
        assert score("Ah9h7h4h2h") == score("As9s7s4s2s")

    def test_random_categories_in_range(self, rng):
        for _ in range(500):
            assert 0 <= evaluate5(random_cards(rng, 5)).category <= 8


class TestAgainstTreys:
    """Our ordering must agree with an independent evaluator."""

    @staticmethod
    def _treys_name(rank):
        name = TREYS.class_to_string(TREYS.get_rank_class(rank))
        return "Straight Flush" if name == "Royal Flush" else name

    def test_five_card_ordering(self, rng):
        for _ in range(1500):
            a = random_cards(rng, 5)
            b = random_cards(rng, 5)
            ours = (evaluate5(a) > evaluate5(b)) - (evaluate5(a) < evaluate5(b))
            ta, tb = treys_rank(a), treys_rank(b)
            theirs = (ta < tb) - (ta > tb)
            assert ours == theirs, (a, b)

    def test_seven_card_ordering(self, rng):
        for _ in range(1000):
            board = random_cards(rng, 9)
            a = board[:2] + board[4:]
            b = board[2:4] + board[4:]
            ours = (evaluate_best(a) > evaluate_best(b)) - (evaluate_best(a) < evaluate_best(b))
            ta, tb = treys_rank(a), treys_rank(b)
            theirs = (ta < tb) - (ta > tb)
            assert ours == theirs, (a, b)

    def test_category_names(self, rng):
        for _ in range(500):
            cards = random_cards(rng, 7)
            assert evaluate_best(cards).name == self._treys_name(treys_rank(cards))


class TestValidation:
    @pytest.mark.parametrize("codes", ["AsKsQsJs", "AsKsQsJsTs9s", ""])
    def test_evaluate5_wrong_count(self, codes):
        with pytest.raises(ValidationError):
            evaluate5(parse_cards(codes))

    def test_evaluate5_duplicates(self):
        with pytest.raises(ValidationError, match="Duplicate"):
            evaluate5(parse_cards("AsAsQsJsTs"))

    @pytest.mark.parametrize("codes", ["AsKsQsJs", "AsKsQsJsTs9s8s7s"])
    def test_evaluate_best_wrong_count(self, codes):
        with pytest.raises(ValidationError):
            evaluate_best(parse_cards(codes))

    def test_evaluate_best_duplicates(self):
        with pytest.raises(ValidationError):
            evaluate_best(parse_cards("AsKsQsJsTsAs"))


class TestBestHand:
    def test_five_cards_is_evaluate5(self):
        cards = parse_cards("Ac9d7h4s2c")
        assert evaluate_best(cards) == evaluate5(cards)

    def test_seven_cards_finds_straight_flush(self):
        assert evaluate_best(parse_cards("AsKs QsJsTs2h3d")) == HandScore(STRAIGHT_FLUSH, 14)

    def test_six_cards(self):
        assert evaluate_best(parse_cards("AsAh Ad2c7h9s")).category == TRIPS

    def test_playing_the_board(self):
        assert evaluate_best(parse_cards("2c3d AhKhQhJhTh")) == HandScore(STRAIGHT_FLUSH, 14)

    def test_picks_best_kickers(self):
        # Pair of aces with K, Q, J kickers out of seven cards
        s = evaluate_best(parse_cards("AcAd KhQsJc4d2h"))
        assert s == HandScore(PAIR, pack_ranks([14, 13, 12, 11]))

    def test_two_pair_from_three_pairs(self):
        s = evaluate_best(parse_cards("KcKd QhQs2c2dAh"))
        assert s == HandScore(TWO_PAIR, pack_ranks([13, 12, 14]))

    def test_full_house_from_two_trips(self):
        s = evaluate_best(parse_cards("9c9d9h 5s5c5dAh"))
        assert s == HandScore(FULL_HOUSE, pack_ranks([9, 5]))

    def test_best_five(self):
        best = best_five(parse_cards("AsKs QsJsTs2h3d"))
        assert [str(c) for c in best] == ["As", "Ks", "Qs", "Js", "Ts"]


class TestCompare:
    def test_compare_hands(self, board_river):
        # KK makes trips, AA one pair
        assert compare_hands(parse_cards("KhKc"), parse_cards("AsAh"), board_river) == 1
        assert compare_hands(parse_cards("AsAh"), parse_cards("KhKc"), board_river) == -1

    def test_compare_split(self, board_river):
        assert compare_hands(parse_cards("AcKh"), parse_cards("AdKc"), board_river) == 0

    def test_winners(self, board_river):
        hands = [parse_cards("AcQh"), parse_cards("AdQc"), parse_cards("8h4d")]
        assert winners(hands, board_river) == [0, 1]

    def test_category_names_cover_all(self):
        assert len(CATEGORY_NAMES) == 9
