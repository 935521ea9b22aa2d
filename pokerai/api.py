"""
Code-based entry points for UI and detection collaborators.

Callers pass plain two-character card codes and get back plain dicts of
numbers and labels. ``HandSession`` replaces the global selection state
a UI would otherwise keep: it is owned by the caller and passed around
explicitly.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from pokerai.config import MAX_OPPONENTS, MIN_OPPONENTS, SimulationConfig
from pokerai.game.cards import parse_card, parse_cards
from pokerai.game.equity import VALID_BOARD_SIZES, EquityCalculator, EquityResult, simulate_equity
from pokerai.game.preflop import GTOAdvice, gto_advice
from pokerai.game.shuffle import SeedLike
from pokerai.game.texture import batch_analyze


logger = logging.getLogger(__name__)

HERO_SIZE = 2
MAX_BOARD = 5


def compute_equity(
    hero_codes: Sequence[str],
    board_codes: Sequence[str],
    opponents: int,
    trials: int,
    seed: SeedLike = None,
    workers: int = 1,
) -> dict[str, float]:
    """Win/tie/lose/equity percentages for hero against random hands."""
    result = simulate_equity(
        parse_cards(hero_codes),
        parse_cards(board_codes),
        opponents,
        trials,
        rng=seed,
        workers=workers,
    )
    return result.to_dict()


def classify_hand(hero_codes: Sequence[str]) -> dict:
    """Category, static ranking and recommended preflop action."""
    return gto_advice(parse_cards(hero_codes)).to_dict()


def compute_board_texture_batch(
    hero_codes: Sequence[str],
    opponents: int,
    flop_samples: int,
    trials_per_flop: int,
    seed: SeedLike = None,
    workers: int = 1,
) -> dict[str, dict]:
    """Average equity per flop texture, keyed by texture label."""
    stats = batch_analyze(
        parse_cards(hero_codes),
        opponents,
        flop_samples,
        trials_per_flop,
        rng=seed,
        workers=workers,
    )
    return {label: s.to_dict() for label, s in stats.items()}


@dataclass
class HandSession:
    """
    Cards and table size for one user's analysis.

    New cards fill the hero's hand first, then the board; codes already
    held anywhere in the session are ignored.
    """
    hero: list[str] = field(default_factory=list)
    board: list[str] = field(default_factory=list)
    opponents: int = 2
    config: SimulationConfig = field(default_factory=SimulationConfig)

    def __post_init__(self):
        self.hero = [str(c) for c in parse_cards(self.hero)]
        self.board = [str(c) for c in parse_cards(self.board)]
        self._calculator = EquityCalculator(self.config)

    @property
    def cards(self) -> list[str]:
        return self.hero + self.board

    def add_cards(self, codes: Iterable[str]) -> list[str]:
        """
        Assign new codes to hero then board.

        Returns:
            The normalized codes that were actually added
        """
        added = []
        for code in codes:
            normalized = str(parse_card(code))
            if normalized in self.cards:
                continue

            if len(self.hero) < HERO_SIZE:
                self.hero.append(normalized)
            elif len(self.board) < MAX_BOARD:
                self.board.append(normalized)
            else:
                logger.debug("Session full, dropping %s", normalized)
                continue
            added.append(normalized)
        return added

    def remove_card(self, code: str) -> None:
        normalized = str(parse_card(code))
        self.hero = [c for c in self.hero if c != normalized]
        self.board = [c for c in self.board if c != normalized]

    def clear(self) -> None:
        self.hero = []
        self.board = []

    def set_opponents(self, n: int) -> int:
        """Set the table size, clamped to 1-9."""
        self.opponents = max(MIN_OPPONENTS, min(MAX_OPPONENTS, n))
        return self.opponents

    @property
    def ready(self) -> bool:
        """Hero is complete and the board is a street the simulator accepts."""
        return len(self.hero) == HERO_SIZE and len(self.board) in VALID_BOARD_SIZES

    def update_equity(self) -> Optional[EquityResult]:
        """Quick live estimate, or None while the cards are incomplete."""
        if not self.ready:
            return None
        return self._calculator.live_equity(self.hero, self.board, self.opponents)

    def calculate(self, trials: Optional[int] = None) -> EquityResult:
        """Full-precision estimate for the current cards."""
        return self._calculator.equity(self.hero, self.board, self.opponents, trials)

    def advice(self) -> Optional[GTOAdvice]:
        if len(self.hero) != HERO_SIZE:
            return None
        return gto_advice(self.hero)
