"""Pytest configuration and fixtures."""

import numpy as np
import pytest

from pokerai.game.cards import parse_cards


@pytest.fixture
def rng():
    """Seeded generator so simulations are reproducible."""
    return np.random.default_rng(12345)


@pytest.fixture
def cards():
    """Parse a card list like 'AsKh' or 'As Kh Td'."""
    return parse_cards


@pytest.fixture
def board_flop():
    return parse_cards("Ks7d2c")


@pytest.fixture
def board_river():
    return parse_cards("Ks7d2c9h3s")
