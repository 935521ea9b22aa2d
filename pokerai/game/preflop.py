"""Preflop hand categories and static strength ranking."""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Iterable

from pokerai.errors import ValidationError
from .cards import CardLike, Hand, parse_cards


# Top 50 of the 169 starting hands, 1 = strongest. Read-only.
GTO_RANKINGS = MappingProxyType({
    "AA": 1, "KK": 2, "QQ": 3, "JJ": 4, "AKs": 5,
    "AKo": 6, "AQs": 7, "TT": 8, "AJs": 9, "KQs": 10,
    "99": 11, "ATs": 12, "AQo": 13, "KJs": 14, "QJs": 15,
    "88": 16, "KTs": 17, "AJo": 18, "QTs": 19, "JTs": 20,
    "77": 21, "A9s": 22, "ATo": 23, "KQo": 24, "K9s": 25,
    "66": 26, "T9s": 27, "Q9s": 28, "J9s": 29, "A8s": 30,
    "55": 31, "KJo": 32, "A5s": 33, "A7s": 34, "A4s": 35,
    "44": 36, "A6s": 37, "A3s": 38, "K8s": 39, "98s": 40,
    "33": 41, "QJo": 42, "A2s": 43, "T8s": 44, "Q8s": 45,
    "22": 46, "K7s": 47, "KTo": 48, "87s": 49, "J8s": 50,
})

UNRANKED = 100
TOTAL_HANDS = 169

# (max ranking, action), checked in order
ACTION_THRESHOLDS = (
    (10, "Strong Raise"),
    (25, "Open Raise"),
    (50, "Call"),
)
FOLD = "Fold"


@dataclass(frozen=True)
class GTOAdvice:
    """Static preflop recommendation for a starting hand."""
    category: str
    ranking: int
    action: str

    def to_dict(self) -> dict:
        return {
            "category": self.category,
            "ranking": self.ranking,
            "action": self.action,
        }


def _hero_hand(hero: Iterable[CardLike]) -> Hand:
    cards = parse_cards(hero)
    if len(cards) != 2:
        raise ValidationError(f"Hero hand must be exactly 2 cards, got {len(cards)}")
    if cards[0] == cards[1]:
        raise ValidationError(f"Hero hand holds {cards[0]} twice")
    return Hand(cards[0], cards[1])


def classify(hero: Iterable[CardLike]) -> str:
    """
    Canonical category of a starting hand.

    'AA' for pairs, 'AKs' for suited, 'AKo' for offsuit, higher rank
    first regardless of card order.
    """
    return _hero_hand(hero).canonical


def ranking_for(category: str) -> int:
    """Strength rank of a category; hands outside the table rank 100."""
    return GTO_RANKINGS.get(category, UNRANKED)


def action_for_ranking(ranking: int) -> str:
    for limit, action in ACTION_THRESHOLDS:
        if ranking <= limit:
            return action
    return FOLD


def gto_advice(hero: Iterable[CardLike]) -> GTOAdvice:
    """Look up the category, its ranking, and the recommended action."""
    category = classify(hero)
    ranking = ranking_for(category)
    return GTOAdvice(
        category=category,
        ranking=ranking,
        action=action_for_ranking(ranking),
    )
