"""
Random source boundary.

Every random draw in the package goes through a numpy ``Generator`` that
the caller passes in. Nothing touches global random state, so a fixed
seed reproduces a simulation and parallel workers can each own an
independent stream.
"""

from typing import Optional, Sequence, TypeVar, Union

import numpy as np

from pokerai.errors import ValidationError


T = TypeVar("T")

SeedLike = Union[None, int, np.random.SeedSequence, np.random.Generator]


def make_rng(seed: SeedLike = None) -> np.random.Generator:
    """
    Build a generator from a seed.

    An existing Generator is returned unchanged so callers can thread one
    stream through several calls. ``None`` draws fresh OS entropy.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    if isinstance(seed, (int, np.integer)) and seed < 0:
        raise ValidationError(f"Seed must be non-negative, got {seed}")
    return np.random.default_rng(seed)


def spawn_rngs(rng: np.random.Generator, n: int) -> list[np.random.Generator]:
    """
    Derive n independent child generators for parallel workers.

    Children come from the parent's SeedSequence, so the same parent seed
    always yields the same children and no two children share a stream.
    """
    if n <= 0:
        raise ValueError(f"Cannot spawn {n} generators")
    return rng.spawn(n)


def shuffle(items: Sequence[T], rng: np.random.Generator) -> list[T]:
    """
    Return a uniformly random permutation of items.

    Uses numpy's Fisher-Yates permutation; the input is left untouched.
    """
    order = rng.permutation(len(items))
    return [items[i] for i in order]


def sample(items: Sequence[T], k: int, rng: np.random.Generator) -> list[T]:
    """Draw k distinct items without replacement."""
    if k > len(items):
        raise ValueError(f"Cannot sample {k} items from {len(items)}")
    picks = rng.choice(len(items), size=k, replace=False)
    return [items[i] for i in picks]
