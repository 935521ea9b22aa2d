"""Game representation module."""

from .cards import (
    Card, Hand as CardHand, Deck, full_deck, parse_card, parse_cards,
    remaining_deck, get_all_hands,
)
from .evaluator import HandScore, evaluate5, evaluate_best, compare_hands, winners
from .shuffle import make_rng, shuffle, spawn_rngs
from .equity import EquityCalculator, EquityResult, TrialTally, simulate_equity
from .preflop import GTOAdvice, GTO_RANKINGS, classify, gto_advice
from .texture import TextureStats, batch_analyze, classify_flop

__all__ = [
    "Card",
    "CardHand",
    "Deck",
    "full_deck",
    "parse_card",
    "parse_cards",
    "remaining_deck",
    "get_all_hands",
    "HandScore",
    "evaluate5",
    "evaluate_best",
    "compare_hands",
    "winners",
    "make_rng",
    "shuffle",
    "spawn_rngs",
    "EquityCalculator",
    "EquityResult",
    "TrialTally",
    "simulate_equity",
    "GTOAdvice",
    "GTO_RANKINGS",
    "classify",
    "gto_advice",
    "TextureStats",
    "batch_analyze",
    "classify_flop",
]
