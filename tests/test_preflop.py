"""Tests for preflop classification and advice."""

import pytest

from pokerai.errors import FormatError, ValidationError
from pokerai.game.cards import full_deck, get_all_hands, parse_cards
from pokerai.game.preflop import (
    GTO_RANKINGS, UNRANKED, action_for_ranking, classify, gto_advice, ranking_for,
)


class TestClassify:
    def test_offsuit_symmetric(self):
        assert classify(parse_cards("AsKd")) == "AKo"
        assert classify(parse_cards("KdAs")) == "AKo"

    def test_suited(self):
        assert classify(parse_cards("AsKs")) == "AKs"
        assert classify(parse_cards("KsAs")) == "AKs"

    def test_pair(self):
        assert classify(parse_cards("7h7c")) == "77"

    def test_low_cards(self):
        assert classify(parse_cards("2c7d")) == "72o"
        assert classify(parse_cards("Td9d")) == "T9s"

    def test_every_category_is_a_starting_hand(self):
        all_hands = set(get_all_hands())
        seen = set()
        deck = full_deck()
        for i, a in enumerate(deck):
            for b in deck[i + 1:]:
                seen.add(classify([a, b]))
        assert seen == all_hands

    @pytest.mark.parametrize("codes", ["As", "AsKsQs", ""])
    def test_wrong_size(self, codes):
        with pytest.raises(ValidationError):
            classify(parse_cards(codes))

    def test_same_card_twice(self):
        with pytest.raises(ValidationError):
            classify(["As", "As"])

    def test_bad_code(self):
        with pytest.raises(FormatError):
            classify(["As", "K"])


class TestRankingTable:
    def test_fifty_entries(self):
        assert len(GTO_RANKINGS) == 50
        assert sorted(GTO_RANKINGS.values()) == list(range(1, 51))

    def test_entries_are_real_hands(self):
        assert set(GTO_RANKINGS) <= set(get_all_hands())

    def test_read_only(self):
        with pytest.raises(TypeError):
            GTO_RANKINGS["72o"] = 1

    def test_unranked_default(self):
        assert ranking_for("72o") == UNRANKED == 100


class TestActions:
    @pytest.mark.parametrize("ranking,action", [
        (1, "Strong Raise"),
        (10, "Strong Raise"),
        (11, "Open Raise"),
        (25, "Open Raise"),
        (26, "Call"),
        (50, "Call"),
        (51, "Fold"),
        (100, "Fold"),
    ])
    def test_thresholds(self, ranking, action):
        assert action_for_ranking(ranking) == action


class TestGTOAdvice:
    def test_aces(self):
        advice = gto_advice(parse_cards("AsAh"))
        assert advice.category == "AA"
        assert advice.ranking == 1
        assert advice.action == "Strong Raise"

    def test_open_raise(self):
        advice = gto_advice(parse_cards("KhQc"))
        assert (advice.category, advice.ranking, advice.action) == ("KQo", 24, "Open Raise")

    def test_call(self):
        advice = gto_advice(parse_cards("Jc8c"))
        assert (advice.category, advice.ranking, advice.action) == ("J8s", 50, "Call")

    def test_unranked_folds(self):
        advice = gto_advice(parse_cards("7c2d"))
        assert advice.ranking == 100
        assert advice.action == "Fold"

    def test_to_dict(self):
        assert gto_advice(["As", "Ks"]).to_dict() == {
            "category": "AKs", "ranking": 5, "action": "Strong Raise",
        }
