"""Visualization module."""

from .ranges import PreflopChart, HAND_MATRIX
from .results import display_equity, display_texture_batch

__all__ = [
    "PreflopChart",
    "HAND_MATRIX",
    "display_equity",
    "display_texture_batch",
]
