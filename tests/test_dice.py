"""
Tests for die sources and the dice aggregate.
"""

import random

import pytest
from worldcup.dice import Dice, FixedDie, RandomDie, ZeroDie
from worldcup.exceptions import DiceCountError, TooFewDiceError, TooManyDiceError


def test_roll_sums_all_dice():
    dice = Dice(2)
    dice.add_die(FixedDie([3]))
    dice.add_die(FixedDie([4]))

    assert dice.roll() == 7


def test_none_die_is_ignored():
    dice = Dice(2)
    dice.add_die(None)
    dice.add_die(ZeroDie())

    assert len(dice) == 1


def test_too_few_dice_fails_on_roll():
    dice = Dice(2)
    dice.add_die(ZeroDie())

    with pytest.raises(TooFewDiceError):
        dice.roll()


def test_too_many_dice_fails_on_roll():
    dice = Dice(2)
    for _ in range(3):
        dice.add_die(ZeroDie())

    with pytest.raises(TooManyDiceError):
        dice.roll()


def test_dice_errors_share_base_class():
    assert issubclass(TooFewDiceError, DiceCountError)
    assert issubclass(TooManyDiceError, DiceCountError)


def test_fixed_die_cycles():
    die = FixedDie([1, 2, 3])
    assert [die.roll() for _ in range(7)] == [1, 2, 3, 1, 2, 3, 1]


def test_fixed_die_rejects_bad_rolls():
    with pytest.raises(ValueError):
        FixedDie([])
    with pytest.raises(ValueError):
        FixedDie([1, -1])


def test_random_die_stays_in_range():
    die = RandomDie(6, random.Random(7))
    rolls = [die.roll() for _ in range(200)]

    assert min(rolls) >= 1
    assert max(rolls) <= 6


def test_random_die_is_reproducible_with_seed():
    first = RandomDie(6, random.Random(42))
    second = RandomDie(6, random.Random(42))

    assert [first.roll() for _ in range(20)] == [second.roll() for _ in range(20)]


def test_random_die_needs_a_face():
    with pytest.raises(ValueError):
        RandomDie(0)
