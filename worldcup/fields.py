"""
Board field definitions and types.

Every field reacts to two events: a token passing over it without
stopping, and a token landing on it. Both hooks do nothing by default.
"""

from dataclasses import dataclass
from enum import Enum

from worldcup.player import PlayerState


class FieldType(Enum):
    """Types of fields on the board."""

    START = "start"
    MATCH = "match"
    REST = "rest"
    YELLOW_CARD = "yellow_card"
    BOOKMAKER = "bookmaker"
    GOAL = "goal"
    PENALTY = "penalty"


@dataclass
class BoardField:
    """Base class for a board field."""

    name: str
    field_type: FieldType

    def pass_field(self, player: PlayerState) -> None:
        """Called when `player` moves over this field without stopping."""

    def land_on_field(self, player: PlayerState) -> None:
        """Called when `player` finishes a move on this field."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


@dataclass
class StartField(BoardField):
    """Season start. Pays a gift both when passed and when landed on."""

    gift: int

    def __init__(self, name: str = "Season Start", gift: int = 50):
        super().__init__(name, FieldType.START)
        self.gift = gift

    def pass_field(self, player: PlayerState) -> None:
        player.take(self.gift)

    def land_on_field(self, player: PlayerState) -> None:
        player.take(self.gift)


@dataclass
class GoalField(BoardField):
    """Pays a bonus to the player who lands here."""

    bonus: int

    def __init__(self, name: str, bonus: int):
        super().__init__(name, FieldType.GOAL)
        self.bonus = bonus

    def land_on_field(self, player: PlayerState) -> None:
        player.take(self.bonus)


@dataclass
class PenaltyField(BoardField):
    """Charges a fee to the player who lands here."""

    fee: int

    def __init__(self, name: str, fee: int):
        super().__init__(name, FieldType.PENALTY)
        self.fee = fee

    def land_on_field(self, player: PlayerState) -> None:
        player.pay(self.fee)


@dataclass
class YellowCardField(BoardField):
    """Suspends the player who lands here for a number of rounds."""

    suspension: int

    def __init__(self, name: str, suspension: int):
        super().__init__(name, FieldType.YELLOW_CARD)
        self.suspension = suspension

    def land_on_field(self, player: PlayerState) -> None:
        player.suspend(self.suspension)


@dataclass
class BookmakerField(BoardField):
    """
    Bookmaker working in cycles of `cycle` visits.

    The first visitor of each cycle wins the bet, every other visitor
    in the cycle loses it. The cycle is shared by all players.
    """

    bet: int
    cycle: int
    visits: int

    def __init__(self, name: str, bet: int, cycle: int = 3):
        super().__init__(name, FieldType.BOOKMAKER)
        self.bet = bet
        self.cycle = cycle
        self.visits = 0

    def land_on_field(self, player: PlayerState) -> None:
        if self.visits == 0:
            player.take(self.bet)
        else:
            player.pay(self.bet)
        self.visits = (self.visits + 1) % self.cycle


@dataclass
class MatchField(BoardField):
    """
    A match against another national team.

    Players passing through pay the fee (or whatever they have left)
    into the pool. The player who lands here collects pool * weight.
    """

    fee: int
    weight: float
    pool: int

    def __init__(self, name: str, fee: int, weight: float):
        super().__init__(name, FieldType.MATCH)
        self.fee = fee
        self.weight = weight
        self.pool = 0

    def payout(self) -> int:
        """Amount the next player to land here would collect."""
        return int(self.pool * self.weight)

    def pass_field(self, player: PlayerState) -> None:
        self.pool += player.pay(self.fee)

    def land_on_field(self, player: PlayerState) -> None:
        # A bankrupt lander leaves the pool for the next one.
        if player.take(self.payout()):
            self.pool = 0


@dataclass
class RestField(BoardField):
    """A day off training. Nothing happens."""

    def __init__(self, name: str = "Rest Day"):
        super().__init__(name, FieldType.REST)
