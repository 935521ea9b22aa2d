"""Monte Carlo equity simulation against random opponents."""

import logging
import threading
from concurrent.futures import ProcessPoolExecutor, as_completed
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

import numpy as np

from pokerai.config import MAX_OPPONENTS, MIN_OPPONENTS, SimulationConfig
from pokerai.errors import CapacityError, SimulationCancelled, ValidationError
from .cards import DECK_SIZE, Card, CardLike, ensure_distinct, parse_cards, remaining_deck
from .evaluator import best_score
from .shuffle import SeedLike, make_rng, shuffle, spawn_rngs


logger = logging.getLogger(__name__)

VALID_BOARD_SIZES = (0, 3, 4, 5)

# Trial chunks per worker; chunks not yet started are dropped on cancel
CHUNKS_PER_WORKER = 4


@dataclass
class TrialTally:
    """Raw win/tie counts; merging tallies is plain summation."""
    wins: int = 0
    ties: int = 0
    trials: int = 0

    @property
    def losses(self) -> int:
        return self.trials - self.wins - self.ties

    def __add__(self, other: "TrialTally") -> "TrialTally":
        return TrialTally(
            wins=self.wins + other.wins,
            ties=self.ties + other.ties,
            trials=self.trials + other.trials,
        )


@dataclass(frozen=True)
class EquityResult:
    """Simulation outcome in percent (0-100)."""
    win: float
    tie: float
    lose: float
    equity: float
    trials: int

    @classmethod
    def from_tally(cls, tally: TrialTally) -> "EquityResult":
        if tally.trials <= 0:
            raise SimulationCancelled("No trials completed")

        win = 100.0 * tally.wins / tally.trials
        tie = 100.0 * tally.ties / tally.trials
        lose = 100.0 * tally.losses / tally.trials
        return cls(
            win=win,
            tie=tie,
            lose=lose,
            equity=win + 0.5 * tie,
            trials=tally.trials,
        )

    def to_dict(self) -> dict[str, float]:
        return {
            "win": self.win,
            "tie": self.tie,
            "lose": self.lose,
            "equity": self.equity,
        }


def validate_request(
    hero: Iterable[CardLike],
    board: Iterable[CardLike],
    opponents: int,
    trials: int,
) -> tuple[list[Card], list[Card]]:
    """
    Parse and check a simulation request.

    Returns:
        (hero_cards, board_cards)

    Raises:
        FormatError: A card code does not parse
        ValidationError: Wrong hero/board size, duplicates, bad counts
        CapacityError: Too many opponents for the cards left in the deck
    """
    hero_cards = parse_cards(hero)
    board_cards = parse_cards(board)

    if len(hero_cards) != 2:
        raise ValidationError(f"Hero hand must be exactly 2 cards, got {len(hero_cards)}")
    if len(board_cards) not in VALID_BOARD_SIZES:
        raise ValidationError(
            f"Board must have 0, 3, 4 or 5 cards, got {len(board_cards)}"
        )
    ensure_distinct(hero_cards + board_cards)

    if isinstance(trials, bool) or not isinstance(trials, (int, np.integer)) or trials <= 0:
        raise ValidationError(f"Trial count must be a positive integer, got {trials!r}")
    if isinstance(opponents, bool) or not isinstance(opponents, (int, np.integer)):
        raise ValidationError(f"Opponent count must be an integer, got {opponents!r}")
    if opponents < MIN_OPPONENTS:
        raise ValidationError(f"Need at least {MIN_OPPONENTS} opponent, got {opponents}")

    known = len(hero_cards) + len(board_cards)
    if 2 + 5 + 2 * opponents > DECK_SIZE - known:
        raise CapacityError(
            f"Not enough cards for {opponents} opponents with {known} known cards"
        )
    if opponents > MAX_OPPONENTS:
        raise ValidationError(f"At most {MAX_OPPONENTS} opponents, got {opponents}")

    return hero_cards, board_cards


def validate_workers(workers: int) -> None:
    """Worker count must be a positive integer."""
    if isinstance(workers, bool) or not isinstance(workers, (int, np.integer)) or workers <= 0:
        raise ValidationError(f"workers must be a positive integer, got {workers!r}")


def run_trials(
    hero: Sequence[Card],
    board: Sequence[Card],
    opponents: int,
    trials: int,
    rng: np.random.Generator,
    cancel: Optional[threading.Event] = None,
) -> TrialTally:
    """
    Play out trials for an already-validated request.

    Each trial shuffles the working deck, completes the board from the
    front, then deals two cards to each opponent. Hero loses the trial to
    any strictly better opponent, ties if the best opponent is equal, and
    wins otherwise.
    """
    hero = list(hero)
    board = list(board)
    deck = remaining_deck(hero + board)
    need = 5 - len(board)

    wins = ties = played = 0

    for _ in range(trials):
        if cancel is not None and cancel.is_set():
            break

        shuffled = shuffle(deck, rng)
        full_board = board + shuffled[:need]
        hero_score = best_score(hero + full_board)

        idx = need
        lost = tied = False
        for _ in range(opponents):
            opp_score = best_score([shuffled[idx], shuffled[idx + 1]] + full_board)
            idx += 2
            if opp_score > hero_score:
                lost = True
                break
            if opp_score == hero_score:
                tied = True

        played += 1
        if lost:
            continue
        if tied:
            ties += 1
        else:
            wins += 1

    return TrialTally(wins=wins, ties=ties, trials=played)


def split_evenly(total: int, parts: int) -> list[int]:
    """Split total into at most `parts` positive chunks differing by at most one."""
    base, extra = divmod(total, parts)
    sizes = [base + (1 if i < extra else 0) for i in range(parts)]
    return [s for s in sizes if s > 0]


def _run_parallel(
    hero: list[Card],
    board: list[Card],
    opponents: int,
    trials: int,
    rng: np.random.Generator,
    workers: int,
    cancel: Optional[threading.Event],
) -> TrialTally:
    chunks = split_evenly(trials, workers * CHUNKS_PER_WORKER)
    child_rngs = spawn_rngs(rng, len(chunks))

    tally = TrialTally()
    with ProcessPoolExecutor(max_workers=workers) as executor:
        futures = [
            executor.submit(run_trials, hero, board, opponents, n, child)
            for n, child in zip(chunks, child_rngs)
        ]
        for future in as_completed(futures):
            tally += future.result()
            if cancel is not None and cancel.is_set():
                for f in futures:
                    f.cancel()
                break

    return tally


def simulate_equity(
    hero: Iterable[CardLike],
    board: Iterable[CardLike],
    opponents: int,
    trials: int,
    rng: SeedLike = None,
    workers: int = 1,
    cancel: Optional[threading.Event] = None,
) -> EquityResult:
    """
    Estimate hero's equity against random opponent hands.

    Args:
        hero: Hero's two hole cards
        board: Known board cards (0, 3, 4 or 5)
        opponents: Number of opponents (1-9)
        trials: Number of Monte Carlo trials
        rng: Generator or seed; None draws fresh entropy
        workers: Worker processes; 1 runs inline
        cancel: Set this event to stop early and keep the partial tally

    Returns:
        EquityResult in percent

    Raises:
        SimulationCancelled: Cancelled before any trial completed
    """
    hero_cards, board_cards = validate_request(hero, board, opponents, trials)
    validate_workers(workers)

    generator = make_rng(rng)

    logger.debug(
        "Simulating %s | %s vs %d opponents, %d trials, %d workers",
        " ".join(map(str, hero_cards)),
        " ".join(map(str, board_cards)) or "-",
        opponents, trials, workers,
    )

    if workers == 1:
        tally = run_trials(hero_cards, board_cards, opponents, trials, generator, cancel)
    else:
        tally = _run_parallel(
            hero_cards, board_cards, opponents, trials, generator, workers, cancel
        )

    if tally.trials < trials:
        logger.info("Simulation cancelled after %d of %d trials", tally.trials, trials)

    result = EquityResult.from_tally(tally)
    logger.debug(
        "Result: win %.2f%% tie %.2f%% lose %.2f%% equity %.2f%%",
        result.win, result.tie, result.lose, result.equity,
    )
    return result


class EquityCalculator:
    """
    Equity calculations with a shared config and random stream.

    Monte Carlo throughout: exact enumeration over every undealt card for
    several opponents grows far too quickly. Trial counts trade accuracy
    for latency, so the config carries separate counts for live and
    on-demand use.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        rng: SeedLike = None,
    ):
        """
        Initialize calculator.

        Args:
            config: Simulation defaults
            rng: Generator or seed; falls back to config.seed
        """
        self.config = config or SimulationConfig()
        self.rng = make_rng(rng if rng is not None else self.config.seed)

    def equity(
        self,
        hero: Iterable[CardLike],
        board: Iterable[CardLike] = (),
        opponents: Optional[int] = None,
        trials: Optional[int] = None,
        cancel: Optional[threading.Event] = None,
    ) -> EquityResult:
        """Equity with config defaults for any argument left out."""
        return simulate_equity(
            hero,
            board,
            opponents if opponents is not None else self.config.opponents,
            trials if trials is not None else self.config.trials,
            rng=self.rng,
            workers=self.config.workers,
            cancel=cancel,
        )

    def live_equity(
        self,
        hero: Iterable[CardLike],
        board: Iterable[CardLike] = (),
        opponents: Optional[int] = None,
    ) -> EquityResult:
        """Low-trial estimate for continuously refreshed displays."""
        return self.equity(hero, board, opponents, trials=self.config.live_trials)

    def preflop_equity(
        self,
        hero: Iterable[CardLike],
        opponents: Optional[int] = None,
    ) -> EquityResult:
        return self.equity(hero, (), opponents, trials=self.config.preflop_trials)

    def hand_vs_hand(
        self,
        hand1: Iterable[CardLike],
        hand2: Iterable[CardLike],
        board: Iterable[CardLike] = (),
        num_simulations: Optional[int] = None,
    ) -> tuple[float, float, float]:
        """
        Heads-up equity between two known hands.

        Args:
            hand1: First hand
            hand2: Second hand
            board: Board cards (0, 3, 4 or 5)
            num_simulations: Runouts to sample when the board is incomplete

        Returns:
            Tuple of (hand1_equity, hand2_equity, tie_frequency), all 0-1,
            with split pots counted as half to each hand
        """
        h1 = parse_cards(hand1)
        h2 = parse_cards(hand2)
        b = parse_cards(board)

        if len(h1) != 2 or len(h2) != 2:
            raise ValidationError("Both hands must be exactly 2 cards")
        if len(b) not in VALID_BOARD_SIZES:
            raise ValidationError(f"Board must have 0, 3, 4 or 5 cards, got {len(b)}")
        ensure_distinct(h1 + h2 + b)

        remaining = 5 - len(b)

        if remaining == 0:
            # Exact evaluation
            s1 = best_score(h1 + b)
            s2 = best_score(h2 + b)
            if s1 > s2:
                return (1.0, 0.0, 0.0)
            elif s2 > s1:
                return (0.0, 1.0, 0.0)
            else:
                return (0.5, 0.5, 1.0)

        total = num_simulations or self.config.trials
        if total <= 0:
            raise ValidationError(f"num_simulations must be positive, got {total}")

        available = remaining_deck(h1 + h2 + b)
        wins1 = wins2 = ties = 0

        for _ in range(total):
            runout = shuffle(available, self.rng)[:remaining]
            full_board = b + runout

            s1 = best_score(h1 + full_board)
            s2 = best_score(h2 + full_board)

            if s1 > s2:
                wins1 += 1
            elif s2 > s1:
                wins2 += 1
            else:
                ties += 1

        return (
            (wins1 + 0.5 * ties) / total,
            (wins2 + 0.5 * ties) / total,
            ties / total,
        )
