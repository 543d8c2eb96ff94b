"""
Score boards notified by the engine as the game progresses.
"""

from typing import List, Optional, TextIO


class ScoreBoard:
    """
    Receives round starts, turn summaries and the winner.

    The base class ignores every notification and is the default
    score board of a new game.
    """

    def on_round(self, round_number: int) -> None:
        pass

    def on_turn(self, player_name: str, status: str, field_name: str, cash: int) -> None:
        pass

    def on_win(self, player_name: str) -> None:
        pass


class TextScoreBoard(ScoreBoard):
    """
    Score board that renders notifications as text lines.

    Args:
        stream: Optional text stream every line is also written to
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream
        self.lines: List[str] = []

    def _emit(self, line: str) -> None:
        self.lines.append(line)
        if self.stream is not None:
            self.stream.write(line + "\n")

    def on_round(self, round_number: int) -> None:
        self._emit(f"=== Round: {round_number}")

    def on_turn(self, player_name: str, status: str, field_name: str, cash: int) -> None:
        self._emit(f"{player_name} [{status}] [{cash}] - {field_name}")

    def on_win(self, player_name: str) -> None:
        self._emit(f"=== Winner: {player_name}")

    def __str__(self) -> str:
        return "".join(line + "\n" for line in self.lines)
