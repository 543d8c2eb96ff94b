"""
Custom exception hierarchy for the World Cup engine.

Setup problems are reported to the caller as typed errors; the engine
never corrects them on its own.
"""


class WorldCupError(Exception):
    """Base exception for all game-related errors."""


class DiceCountError(WorldCupError):
    """Registered die sources do not match the required count."""


class TooFewDiceError(DiceCountError):
    """Fewer die sources registered than required."""


class TooManyDiceError(DiceCountError):
    """More die sources registered than required."""


class PlayerCountError(WorldCupError):
    """Roster size is outside the allowed range."""


class TooFewPlayersError(PlayerCountError):
    """Not enough players to start a game."""


class TooManyPlayersError(PlayerCountError):
    """Too many players to start a game."""
