"""Pytest configuration and fixtures."""

import pytest

from handfreq.game.cards import Card
from handfreq.game.state import GameState


@pytest.fixture
def flop_state():
    """Aces in the hole on a rainbow K-7-2 flop."""
    return GameState.from_string("AsAh", "Ks7d2c")


@pytest.fixture
def turn_state(flop_state):
    return flop_state.deal_turn(Card.from_string("9h"))


@pytest.fixture
def river_state(turn_state):
    return turn_state.deal_river(Card.from_string("3s"))
