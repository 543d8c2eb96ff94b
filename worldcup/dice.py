"""
Die sources and the dice aggregate used to move tokens.
"""

import random
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from worldcup.exceptions import TooFewDiceError, TooManyDiceError


class Die(ABC):
    """A source of non-negative rolls."""

    @abstractmethod
    def roll(self) -> int:
        """Produce the next roll."""
        pass


class RandomDie(Die):
    """Uniform die with faces numbered 1..faces."""

    def __init__(self, faces: int = 6, rng: Optional[random.Random] = None):
        if faces < 1:
            raise ValueError("A die needs at least one face")
        self.faces = faces
        self.rng = rng or random.Random()

    def roll(self) -> int:
        return self.rng.randint(1, self.faces)

    def __repr__(self) -> str:
        return f"RandomDie(faces={self.faces})"


class FixedDie(Die):
    """
    Die that cycles through a fixed sequence of rolls.

    Each call returns the next value, wrapping back to the first one
    after the last.
    """

    def __init__(self, rolls: Sequence[int]):
        if not rolls:
            raise ValueError("FixedDie requires at least one roll")
        if any(r < 0 for r in rolls):
            raise ValueError("Rolls must be non-negative")
        self.rolls = list(rolls)
        self.current = 0

    def roll(self) -> int:
        value = self.rolls[self.current]
        self.current = (self.current + 1) % len(self.rolls)
        return value

    def __repr__(self) -> str:
        return f"FixedDie(rolls={self.rolls})"


class ZeroDie(Die):
    """Die that always rolls 0."""

    def roll(self) -> int:
        return 0


class Dice:
    """
    Fixed-size aggregate of die sources.

    Sources are registered one by one; the count is only checked when
    the dice are rolled.
    """

    def __init__(self, dice_count: int = 2):
        self.dice_count = dice_count
        self.dice: List[Die] = []

    def add_die(self, die: Optional[Die]) -> None:
        """Register a die source. None is ignored."""
        if die is not None:
            self.dice.append(die)

    def roll(self) -> int:
        """
        Roll every registered die and return the sum.

        Raises:
            TooFewDiceError: fewer dice registered than required
            TooManyDiceError: more dice registered than required
        """
        if len(self.dice) < self.dice_count:
            raise TooFewDiceError(
                f"Expected {self.dice_count} dice, got {len(self.dice)}"
            )
        if len(self.dice) > self.dice_count:
            raise TooManyDiceError(
                f"Expected {self.dice_count} dice, got {len(self.dice)}"
            )
        return sum(die.roll() for die in self.dice)

    def __len__(self) -> int:
        return len(self.dice)
