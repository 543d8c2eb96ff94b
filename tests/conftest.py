"""Shared test fixtures for World Cup tests."""

import pytest
from worldcup import FixedDie, GameConfig, TextScoreBoard, ZeroDie, create_game


@pytest.fixture
def game_config():
    """Default game configuration."""
    return GameConfig()


@pytest.fixture
def scoreboard():
    """Text score board collecting every notification."""
    return TextScoreBoard()


@pytest.fixture
def scripted_game(game_config, scoreboard):
    """
    Factory for games whose turns follow a fixed list of steps.

    The first die cycles through `rolls`, the second always rolls 0,
    so the n-th turn of the game moves by rolls[n % len(rolls)].
    """

    def _build(rolls, players=2, names=None):
        names = names or [f"Player-{i}" for i in range(1, players + 1)]
        return create_game(
            game_config,
            player_names=names,
            dice=[FixedDie(rolls), ZeroDie()],
            scoreboard=scoreboard,
        )

    return _build
