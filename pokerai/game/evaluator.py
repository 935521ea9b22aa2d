"""5-card hand ranking and best-hand selection."""

from itertools import combinations
from typing import Iterable, NamedTuple, Sequence

from pokerai.errors import ValidationError
from .cards import Card, CardLike, ensure_distinct, parse_cards


HIGH_CARD = 0
PAIR = 1
TWO_PAIR = 2
TRIPS = 3
STRAIGHT = 4
FLUSH = 5
FULL_HOUSE = 6
QUADS = 7
STRAIGHT_FLUSH = 8

# Names match treys' class strings
CATEGORY_NAMES = (
    "High Card",
    "Pair",
    "Two Pair",
    "Three of a Kind",
    "Straight",
    "Flush",
    "Full House",
    "Four of a Kind",
    "Straight Flush",
)

# Positional base for packing ranks into a tiebreak; must exceed the Ace (14)
TIEBREAK_BASE = 15

WHEEL = [14, 5, 4, 3, 2]


class HandScore(NamedTuple):
    """
    Comparable hand strength.

    Compares as a plain tuple: category first, then tiebreak. Tiebreaks
    are only meaningful between hands of the same category.
    """
    category: int
    tiebreak: int

    @property
    def name(self) -> str:
        return CATEGORY_NAMES[self.category]


def pack_ranks(ranks: Iterable[int]) -> int:
    """Pack ranks, most significant first, into a base-15 integer."""
    value = 0
    for r in ranks:
        value = value * TIEBREAK_BASE + r
    return value


def _score5(cards: Sequence[Card]) -> HandScore:
    # Hot path for the simulator: no validation
    vals = sorted((c.rank for c in cards), reverse=True)

    suit = cards[0].suit
    is_flush = all(c.suit == suit for c in cards)

    counts: dict[int, int] = {}
    for v in vals:
        counts[v] = counts.get(v, 0) + 1

    if len(counts) == 5:
        if vals == WHEEL:
            straight_high = 5
        elif vals[0] - vals[4] == 4:
            straight_high = vals[0]
        else:
            straight_high = 0

        if straight_high:
            category = STRAIGHT_FLUSH if is_flush else STRAIGHT
            return HandScore(category, int(straight_high))
        category = FLUSH if is_flush else HIGH_CARD
        return HandScore(category, pack_ranks(vals))

    # Group ranks by (count, rank) descending: made part first, kickers after
    groups = sorted(counts.items(), key=lambda kv: (kv[1], kv[0]), reverse=True)
    top_count = groups[0][1]

    if len(groups) == 2:
        category = QUADS if top_count == 4 else FULL_HOUSE
    elif len(groups) == 3:
        category = TRIPS if top_count == 3 else TWO_PAIR
    else:
        category = PAIR

    return HandScore(category, pack_ranks(r for r, _ in groups))


def evaluate5(cards: Iterable[CardLike]) -> HandScore:
    """
    Score exactly five cards.

    Args:
        cards: Five distinct cards (Card objects or codes like 'As')

    Returns:
        HandScore(category, tiebreak)

    Raises:
        ValidationError: Not exactly five cards, or a duplicate card
    """
    parsed = parse_cards(cards)
    if len(parsed) != 5:
        raise ValidationError(f"evaluate5 expects exactly 5 cards, got {len(parsed)}")
    ensure_distinct(parsed)
    return _score5(parsed)


def best_score(cards: Sequence[Card]) -> HandScore:
    """Best 5-card score from already-validated cards."""
    if len(cards) == 5:
        return _score5(cards)
    return max(_score5(combo) for combo in combinations(cards, 5))


def evaluate_best(cards: Iterable[CardLike]) -> HandScore:
    """
    Best score over every 5-card subset of 5 to 7 cards.

    With 7 cards that is 21 subsets; with 5, just the one.

    Raises:
        ValidationError: Fewer than 5 or more than 7 cards, or duplicates
    """
    parsed = parse_cards(cards)
    if not 5 <= len(parsed) <= 7:
        raise ValidationError(f"evaluate_best expects 5 to 7 cards, got {len(parsed)}")
    ensure_distinct(parsed)
    return best_score(parsed)


def best_five(cards: Iterable[CardLike]) -> list[Card]:
    """The 5-card subset that makes the best hand, highest rank first."""
    parsed = parse_cards(cards)
    if not 5 <= len(parsed) <= 7:
        raise ValidationError(f"best_five expects 5 to 7 cards, got {len(parsed)}")
    ensure_distinct(parsed)

    best = max(combinations(parsed, 5), key=_score5)
    return sorted(best, reverse=True)


def compare_hands(
    hand1: Iterable[CardLike],
    hand2: Iterable[CardLike],
    board: Iterable[CardLike],
) -> int:
    """1 if hand1 wins on the board, -1 if hand2 wins, 0 on a split."""
    b = parse_cards(board)
    s1 = evaluate_best(parse_cards(hand1) + b)
    s2 = evaluate_best(parse_cards(hand2) + b)
    return 1 if s1 > s2 else (-1 if s2 > s1 else 0)


def winners(hands: Sequence[Iterable[CardLike]], board: Iterable[CardLike]) -> list[int]:
    """Indices of every hand that shares the best score on the board."""
    b = parse_cards(board)
    scores = [evaluate_best(parse_cards(h) + b) for h in hands]
    top = max(scores)
    return [i for i, s in enumerate(scores) if s == top]
