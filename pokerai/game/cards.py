"""Card, starting hand and deck representation."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Union

import numpy as np
from treys import Card as TreysCard

from pokerai.errors import CapacityError, FormatError, ValidationError
from .shuffle import make_rng, shuffle


class Rank(IntEnum):
    """Card ranks (2-14 where 14 is Ace)."""
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14


class Suit(IntEnum):
    """Card suits."""
    CLUBS = 0
    DIAMONDS = 1
    HEARTS = 2
    SPADES = 3


# Mapping for string conversion
RANK_STR = {
    2: "2", 3: "3", 4: "4", 5: "5", 6: "6", 7: "7", 8: "8", 9: "9",
    10: "T", 11: "J", 12: "Q", 13: "K", 14: "A"
}
STR_RANK = {v: k for k, v in RANK_STR.items()}

SUIT_STR = {0: "c", 1: "d", 2: "h", 3: "s"}
STR_SUIT = {v: k for k, v in SUIT_STR.items()}

SUIT_SYMBOLS = {0: "♣", 1: "♦", 2: "♥", 3: "♠"}

DECK_SIZE = 52


@dataclass(frozen=True, order=True)
class Card:
    """A playing card. Orders by rank first; suit only makes the order total."""
    rank: int  # 2-14
    suit: int  # 0-3

    def __str__(self) -> str:
        return f"{RANK_STR[self.rank]}{SUIT_STR[self.suit]}"

    def __repr__(self) -> str:
        return str(self)

    @property
    def code(self) -> str:
        """Two-character code, e.g. 'As'."""
        return str(self)

    @property
    def pretty(self) -> str:
        """Rank with suit symbol, e.g. 'A♠'."""
        return f"{RANK_STR[self.rank]}{SUIT_SYMBOLS[self.suit]}"

    @property
    def is_red(self) -> bool:
        return self.suit in (Suit.DIAMONDS, Suit.HEARTS)

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Parse card from string like 'As', 'Th', '2c' (case-insensitive)."""
        if not isinstance(s, str) or len(s) != 2:
            raise FormatError(f"Invalid card string: {s!r}")
        rank_char = s[0].upper()
        suit_char = s[1].lower()

        if rank_char not in STR_RANK:
            raise FormatError(f"Invalid rank: {rank_char!r} in {s!r}")
        if suit_char not in STR_SUIT:
            raise FormatError(f"Invalid suit: {suit_char!r} in {s!r}")

        return cls(rank=STR_RANK[rank_char], suit=STR_SUIT[suit_char])

    def to_treys(self) -> int:
        """Convert to treys library card format."""
        return TreysCard.new(str(self))


CardLike = Union[str, Card]


def parse_card(code: CardLike) -> Card:
    """Parse a single two-character card code."""
    if isinstance(code, Card):
        return code
    return Card.from_string(code)


def parse_cards(codes: Union[str, Iterable[CardLike]]) -> list[Card]:
    """
    Parse several cards.

    Accepts an iterable of codes/cards, or a single string of concatenated
    codes such as 'AsKh' or 'As Kh Td'.
    """
    if isinstance(codes, str):
        compact = "".join(codes.split())
        if len(compact) % 2:
            raise FormatError(f"Invalid card list: {codes!r}")
        return [Card.from_string(compact[i:i + 2]) for i in range(0, len(compact), 2)]
    return [parse_card(c) for c in codes]


def ensure_distinct(cards: list[Card], what: str = "cards") -> None:
    """Raise ValidationError if any card appears twice."""
    if len(set(cards)) != len(cards):
        seen = set()
        dupes = []
        for c in cards:
            if c in seen:
                dupes.append(str(c))
            seen.add(c)
        raise ValidationError(f"Duplicate {what}: {', '.join(dupes)}")


# Built once, shared read-only
_FULL_DECK = tuple(
    Card(rank, suit)
    for rank in range(2, 15)
    for suit in range(4)
)


def full_deck() -> list[Card]:
    """All 52 cards."""
    return list(_FULL_DECK)


def remaining_deck(used: Iterable[CardLike]) -> list[Card]:
    """
    Full deck minus the used cards.

    Args:
        used: Cards already assigned (hero, board, ...)

    Returns:
        The 52 - len(used) cards still available

    Raises:
        ValidationError: More than 52 used cards or a duplicate entry
    """
    used_cards = parse_cards(used)
    if len(used_cards) > DECK_SIZE:
        raise ValidationError(
            f"Cannot remove {len(used_cards)} cards from a {DECK_SIZE}-card deck"
        )
    ensure_distinct(used_cards, "used cards")

    dead = set(used_cards)
    return [c for c in _FULL_DECK if c not in dead]


@dataclass
class Hand:
    """A two-card starting hand."""
    card1: Card
    card2: Card

    def __post_init__(self):
        if self.card1 == self.card2:
            raise ValidationError(f"Hand cannot hold {self.card1} twice")
        # Ensure card1 has higher or equal rank
        if self.card1.rank < self.card2.rank:
            self.card1, self.card2 = self.card2, self.card1

    @property
    def is_pair(self) -> bool:
        """Check if hand is a pocket pair."""
        return self.card1.rank == self.card2.rank

    @property
    def is_suited(self) -> bool:
        """Check if hand is suited."""
        return self.card1.suit == self.card2.suit

    @property
    def cards(self) -> list[Card]:
        return [self.card1, self.card2]

    @property
    def canonical(self) -> str:
        """
        Get canonical hand notation (e.g., 'AKs', 'QQ', '72o').

        This groups equivalent hands regardless of specific suits.
        """
        r1 = RANK_STR[self.card1.rank]
        r2 = RANK_STR[self.card2.rank]

        if self.is_pair:
            return f"{r1}{r2}"
        elif self.is_suited:
            return f"{r1}{r2}s"
        else:
            return f"{r1}{r2}o"

    def __str__(self) -> str:
        return f"{self.card1}{self.card2}"

    def __repr__(self) -> str:
        return f"Hand({self.card1}, {self.card2})"

    @classmethod
    def from_cards(cls, cards: Iterable[CardLike]) -> "Hand":
        """Build a hand from exactly two cards."""
        parsed = parse_cards(cards)
        if len(parsed) != 2:
            raise ValidationError(f"Hand must be exactly 2 cards, got {len(parsed)}")
        return cls(parsed[0], parsed[1])

    @classmethod
    def from_string(cls, s: str) -> "Hand":
        """Parse hand from string like 'AsKh' or 'AKs'."""
        if len(s) == 4:
            # Specific cards: 'AsKh'
            card1 = Card.from_string(s[:2])
            card2 = Card.from_string(s[2:])
            return cls(card1, card2)
        elif len(s) == 2:
            # Pair: 'AA'
            if s[0].upper() not in STR_RANK or s[0].upper() != s[1].upper():
                raise FormatError(f"Invalid hand string: {s!r}")
            rank = STR_RANK[s[0].upper()]
            return cls(
                Card(rank, Suit.SPADES),
                Card(rank, Suit.HEARTS)
            )
        elif len(s) == 3:
            # Suited or offsuit: 'AKs' or 'AKo'
            if (
                s[0].upper() not in STR_RANK
                or s[1].upper() not in STR_RANK
                or s[2].lower() not in ("s", "o")
            ):
                raise FormatError(f"Invalid hand string: {s!r}")
            r1 = STR_RANK[s[0].upper()]
            r2 = STR_RANK[s[1].upper()]
            if r1 == r2:
                raise FormatError(f"Pairs cannot be suited or offsuit: {s!r}")
            suited = s[2].lower() == 's'

            if suited:
                return cls(Card(r1, Suit.SPADES), Card(r2, Suit.SPADES))
            else:
                return cls(Card(r1, Suit.SPADES), Card(r2, Suit.HEARTS))
        else:
            raise FormatError(f"Invalid hand string: {s!r}")


class Deck:
    """
    A 52-card deck, optionally with some cards removed.

    Shuffling takes an injected numpy Generator, so a seeded generator
    gives a reproducible deal.
    """

    def __init__(self, exclude: Iterable[CardLike] = ()):
        self.excluded: list[Card] = parse_cards(exclude)
        self.cards: list[Card] = []
        self.reset()

    def reset(self) -> None:
        """Restore every card except the excluded ones, in deck order."""
        self.cards = remaining_deck(self.excluded)

    def shuffle(self, rng: Optional[np.random.Generator] = None) -> None:
        """Shuffle the remaining cards in place."""
        self.cards = shuffle(self.cards, make_rng(rng))

    def deal(self, n: int = 1) -> list[Card]:
        """Deal n cards from the front of the deck."""
        if n > len(self.cards):
            raise CapacityError(f"Cannot deal {n} cards, only {len(self.cards)} remaining")
        dealt = self.cards[:n]
        self.cards = self.cards[n:]
        return dealt

    def __len__(self) -> int:
        return len(self.cards)

    def __contains__(self, card: object) -> bool:
        return card in self.cards


def get_all_hands() -> list[str]:
    """Generate all 169 unique starting hands in canonical form."""
    hands = []
    ranks = "AKQJT98765432"

    # Pairs
    for r in ranks:
        hands.append(f"{r}{r}")

    # Non-pairs
    for i, r1 in enumerate(ranks):
        for r2 in ranks[i+1:]:
            hands.append(f"{r1}{r2}s")  # Suited
            hands.append(f"{r1}{r2}o")  # Offsuit

    return hands
