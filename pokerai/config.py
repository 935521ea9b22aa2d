"""Simulation configuration."""

import os
from dataclasses import dataclass, fields
from typing import Optional

from .errors import ValidationError


MIN_OPPONENTS = 1
MAX_OPPONENTS = 9

ENV_PREFIX = "POKERAI_"


@dataclass
class SimulationConfig:
    """Default trial counts and table settings for equity requests."""
    trials: int = 10000            # On-demand calculation
    live_trials: int = 5000        # Live overlay, favours responsiveness
    preflop_trials: int = 8000     # Headline equity in the texture view
    opponents: int = 2
    flop_samples: int = 200        # Flops sampled by the texture batch
    trials_per_flop: int = 100
    workers: int = 1               # Worker processes (1 = run inline)
    seed: Optional[int] = None     # None = fresh entropy

    def validate(self) -> "SimulationConfig":
        """Check every count is usable, returning self for chaining."""
        for name in (
            "trials", "live_trials", "preflop_trials",
            "flop_samples", "trials_per_flop", "workers",
        ):
            value = getattr(self, name)
            if value <= 0:
                raise ValidationError(f"{name} must be positive, got {value}")

        if not MIN_OPPONENTS <= self.opponents <= MAX_OPPONENTS:
            raise ValidationError(
                f"opponents must be between {MIN_OPPONENTS} and "
                f"{MAX_OPPONENTS}, got {self.opponents}"
            )
        if self.seed is not None and self.seed < 0:
            raise ValidationError(f"seed must be non-negative, got {self.seed}")
        return self

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "SimulationConfig":
        """
        Build a config from ``POKERAI_*`` environment variables.

        Unset variables keep their defaults, e.g. ``POKERAI_TRIALS=20000``
        overrides ``trials``.
        """
        environ = os.environ if environ is None else environ
        values = {}

        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw == "":
                continue
            try:
                values[f.name] = int(raw)
            except ValueError:
                raise ValidationError(
                    f"{ENV_PREFIX}{f.name.upper()} must be an integer, got {raw!r}"
                ) from None

        return cls(**values).validate()
