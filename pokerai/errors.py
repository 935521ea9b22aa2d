"""Error types raised by the poker core.

All errors derive from ``ValueError`` so callers that only care about
"bad input" can keep catching that.
"""


class PokerError(ValueError):
    """Base class for all poker core errors."""


class FormatError(PokerError):
    """A card code could not be parsed."""


class ValidationError(PokerError):
    """Inputs have the wrong cardinality, duplicates, or out-of-range values."""


class CapacityError(PokerError):
    """Not enough undealt cards to complete the board and deal every opponent."""


class SimulationCancelled(PokerError):
    """A simulation was cancelled before any trial completed."""
