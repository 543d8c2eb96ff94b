"""
Game configuration settings.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameConfig:
    """Configuration for a World Cup game."""

    starting_cash: int = 1000
    dice_count: int = 2

    min_players: int = 2
    max_players: int = 11

    seed: Optional[int] = None
