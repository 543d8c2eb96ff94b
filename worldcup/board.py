from typing import List

from worldcup.fields import (
    BoardField,
    FieldType,
    StartField,
    MatchField,
    RestField,
    YellowCardField,
    BookmakerField,
    GoalField,
    PenaltyField,
)
from worldcup.player import PlayerState


class Board:
    """The World Cup 2022 board with 12 fields."""

    def __init__(self):
        self.fields: List[BoardField] = self._create_standard_board()

    def _create_standard_board(self) -> List[BoardField]:
        """Create the standard 12-field World Cup board."""
        return [
            StartField("Season Start", 50),
            MatchField("Match vs San Marino", 160, 1.0),
            RestField("Rest Day"),
            MatchField("Match vs Liechtenstein", 220, 1.0),
            YellowCardField("Yellow Card", 3),
            MatchField("Match vs Mexico", 300, 2.5),
            MatchField("Match vs Saudi Arabia", 280, 2.5),
            BookmakerField("Bookmaker", 100),
            MatchField("Match vs Argentina", 250, 2.5),
            GoalField("Goal", 120),
            MatchField("Match vs France", 400, 4.0),
            PenaltyField("Penalty Kick", 180),
        ]

    def __len__(self) -> int:
        return len(self.fields)

    def get_field(self, position: int) -> BoardField:
        """Get the field at the given position."""
        return self.fields[position % len(self.fields)]

    def get_field_name(self, position: int) -> str:
        return self.get_field(position).name

    def get_fields_by_type(self, field_type: FieldType) -> List[int]:
        """Get positions of all fields of the given type."""
        return [i for i, f in enumerate(self.fields) if f.field_type == field_type]

    def player_move(self, player: PlayerState, steps: int) -> int:
        """
        Move a player forward by `steps` fields.

        Every field strictly between the start and the destination is
        passed in travel order, then the player lands on the destination.

        Returns:
            The new position
        """
        size = len(self.fields)
        start = player.position
        destination = (start + steps) % size

        for offset in range(1, steps):
            self.fields[(start + offset) % size].pass_field(player)

        player.move(destination)
        self.fields[destination].land_on_field(player)
        return destination
