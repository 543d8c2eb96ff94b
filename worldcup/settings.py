"""
Simulation configuration using pydantic-settings.

Provides typed, environment-based defaults for the command line
simulator. Rule constants of the game itself live in
`worldcup.config.GameConfig`.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class SimulationSettings(BaseSettings):
    """
    Defaults for simulated games.

    Environment variables (prefix: WORLDCUP_):
        WORLDCUP_ROUNDS     - Maximum number of rounds (default: 100)
        WORLDCUP_DICE_COUNT - Number of dice rolled per turn (default: 2)
        WORLDCUP_DIE_FACES  - Faces on each random die (default: 6)
        WORLDCUP_SEED       - Optional random seed
        WORLDCUP_LOG_LEVEL  - Logging level name (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        env_prefix="WORLDCUP_",
    )

    rounds: int = Field(default=100, gt=0, description="Maximum number of rounds.")
    dice_count: int = Field(default=2, gt=0, description="Number of dice rolled per turn.")
    die_faces: int = Field(default=6, gt=0, description="Faces on each random die.")
    seed: Optional[int] = Field(default=None, description="Random seed for reproducible games.")
    log_level: str = Field(default="INFO", description="Logging level name.")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, value: Optional[str]) -> str:
        """Uppercase the level name and reject unknown levels."""
        if not value:
            return "INFO"
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level


@lru_cache
def get_simulation_settings() -> SimulationSettings:
    """Return cached simulation settings instance."""
    return SimulationSettings()
