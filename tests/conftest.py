"""Shared pytest fixtures for draw poker tests."""

import pytest

from config.settings import Config, GameConfig
from poker.cards import Deck
from poker.session import GameSession


@pytest.fixture
def deck():
    """A fresh, unshuffled single deck."""
    return Deck()


@pytest.fixture
def seeded_deck():
    """A single deck with a reproducible shuffle."""
    return Deck(seed=42)


@pytest.fixture
def config():
    return Config(game=GameConfig(starting_balance=100, seed=7, show_payout_table=False))


@pytest.fixture
def session(config):
    """A session with a seeded deck and 100 starting balance."""
    return GameSession(config)


@pytest.fixture(params=[1, 2, 4])
def num_decks(request):
    """Parametrize over different deck counts."""
    return request.param
