"""
World Cup 2022 Board Game Engine

A deterministic engine for a turn-based board game played on a
12-field World Cup circuit.
"""

from .game import GameState, create_game
from .player import PlayerState
from .board import Board
from .config import GameConfig
from .dice import Dice, Die, FixedDie, RandomDie, ZeroDie
from .scoreboard import ScoreBoard, TextScoreBoard
from .exceptions import (
    WorldCupError,
    TooFewDiceError,
    TooManyDiceError,
    TooFewPlayersError,
    TooManyPlayersError,
)

__all__ = [
    "GameState",
    "create_game",
    "PlayerState",
    "Board",
    "GameConfig",
    "Dice",
    "Die",
    "FixedDie",
    "RandomDie",
    "ZeroDie",
    "ScoreBoard",
    "TextScoreBoard",
    "WorldCupError",
    "TooFewDiceError",
    "TooManyDiceError",
    "TooFewPlayersError",
    "TooManyPlayersError",
]
