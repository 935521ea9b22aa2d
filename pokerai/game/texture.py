"""Board-texture batch analysis built on the equity simulator."""

import logging
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from pokerai.errors import ValidationError
from .cards import Card, CardLike, Deck
from .equity import simulate_equity, split_evenly, validate_request, validate_workers
from .shuffle import SeedLike, make_rng, spawn_rngs


logger = logging.getLogger(__name__)

TOP_PAIR = "Top Pair"
LOW_PAIR = "Low Pair"
FLUSH_DRAW = "Flush Draw"
STRAIGHT_DRAW = "Straight Draw"
DRY_BOARD = "Dry Board"

# Precedence order, also the order results are reported in
TEXTURE_LABELS = (TOP_PAIR, LOW_PAIR, FLUSH_DRAW, STRAIGHT_DRAW, DRY_BOARD)


@dataclass(frozen=True)
class TextureStats:
    """Average equity over the flops that landed in one bucket."""
    avg: float
    count: int

    def to_dict(self) -> dict:
        return {"avg": self.avg, "count": self.count}


def has_straight_draw(ranks: Iterable[int]) -> bool:
    """True if some 4 consecutive sorted ranks span at most 4."""
    vals = sorted(ranks)
    return any(vals[j + 3] - vals[j] <= 4 for j in range(len(vals) - 3))


def classify_flop(hero: Sequence[Card], flop: Sequence[Card]) -> str:
    """
    Put a flop into exactly one texture bucket for hero's hand.

    Checked in order: hero's higher rank on the flop, hero's lower rank
    on the flop, a suit showing twice that hero holds, four of the five
    combined ranks within a span of four, else dry.
    """
    hero_high = max(c.rank for c in hero)
    hero_low = min(c.rank for c in hero)
    hero_suits = {c.suit for c in hero}
    flop_ranks = [c.rank for c in flop]

    if hero_high in flop_ranks:
        return TOP_PAIR
    if hero_low in flop_ranks:
        return LOW_PAIR

    suit_counts: dict[int, int] = {}
    for c in flop:
        suit_counts[c.suit] = suit_counts.get(c.suit, 0) + 1
    if any(n >= 2 and s in hero_suits for s, n in suit_counts.items()):
        return FLUSH_DRAW

    if has_straight_draw(flop_ranks + [hero_high, hero_low]):
        return STRAIGHT_DRAW
    return DRY_BOARD


def sample_flops(
    hero: Sequence[Card],
    opponents: int,
    flop_samples: int,
    trials_per_flop: int,
    rng: np.random.Generator,
) -> dict[str, list[float]]:
    """Draw flops, bucket them, and collect each flop's equity."""
    buckets: dict[str, list[float]] = {label: [] for label in TEXTURE_LABELS}
    deck = Deck(exclude=hero)

    for _ in range(flop_samples):
        deck.reset()
        deck.shuffle(rng)
        flop = deck.deal(3)

        label = classify_flop(hero, flop)
        result = simulate_equity(hero, flop, opponents, trials_per_flop, rng=rng)
        buckets[label].append(result.equity)

    return buckets


def summarize(buckets: dict[str, list[float]]) -> dict[str, TextureStats]:
    """Average each non-empty bucket, in precedence order."""
    return {
        label: TextureStats(avg=float(np.mean(buckets[label])), count=len(buckets[label]))
        for label in TEXTURE_LABELS
        if buckets.get(label)
    }


def batch_analyze(
    hero: Iterable[CardLike],
    opponents: int,
    flop_samples: int,
    trials_per_flop: int,
    rng: SeedLike = None,
    workers: int = 1,
) -> dict[str, TextureStats]:
    """
    Average equity by flop texture.

    Args:
        hero: Hero's two hole cards
        opponents: Number of opponents (1-9)
        flop_samples: Number of random flops to draw
        trials_per_flop: Monte Carlo trials per flop
        rng: Generator or seed
        workers: Worker processes; 1 runs inline

    Returns:
        Mapping of texture label to TextureStats; empty buckets omitted
    """
    hero_cards, _ = validate_request(hero, (), opponents, trials_per_flop)
    if isinstance(flop_samples, bool) or not isinstance(flop_samples, (int, np.integer)) \
            or flop_samples <= 0:
        raise ValidationError(f"flop_samples must be a positive integer, got {flop_samples!r}")
    validate_workers(workers)

    generator = make_rng(rng)
    logger.debug(
        "Texture batch for %s vs %d opponents: %d flops x %d trials",
        " ".join(map(str, hero_cards)), opponents, flop_samples, trials_per_flop,
    )

    if workers == 1:
        buckets = sample_flops(hero_cards, opponents, flop_samples, trials_per_flop, generator)
    else:
        chunks = split_evenly(flop_samples, workers)
        child_rngs = spawn_rngs(generator, len(chunks))
        buckets = {label: [] for label in TEXTURE_LABELS}

        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(sample_flops, hero_cards, opponents, n, trials_per_flop, child)
                for n, child in zip(chunks, child_rngs)
            ]
            # Merged in submission order
            for future in futures:
                for label, values in future.result().items():
                    buckets[label].extend(values)

    summary = summarize(buckets)
    logger.debug(
        "Texture buckets: %s",
        ", ".join(f"{k}={v.count}" for k, v in summary.items()),
    )
    return summary
