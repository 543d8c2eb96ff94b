"""
Main game engine and state management.
"""

import logging
from typing import Iterable, List, Optional

from worldcup.board import Board
from worldcup.config import GameConfig
from worldcup.dice import Dice, Die
from worldcup.events import EventLog, EventType
from worldcup.exceptions import TooFewPlayersError, TooManyPlayersError
from worldcup.player import PlayerState
from worldcup.scoreboard import ScoreBoard

logger = logging.getLogger(__name__)


class GameState:
    """
    Represents the complete state of a World Cup game.
    This is the main interface for the game engine.

    Dice, players and the score board are registered first, then
    `play` runs the whole game in one call.
    """

    def __init__(self, config: Optional[GameConfig] = None):
        self.config = config or GameConfig()
        self.board = Board()
        self.dice = Dice(self.config.dice_count)
        self.scoreboard: ScoreBoard = ScoreBoard()
        self.event_log = EventLog()

        # Turn order is registration order
        self.players: List[PlayerState] = []

        self.round_number = 0
        self.game_over = False
        self.winner: Optional[PlayerState] = None

    def add_die(self, die: Optional[Die]) -> None:
        """Register a die source. None is ignored."""
        self.dice.add_die(die)

    def add_player(self, name: str) -> PlayerState:
        """Register a new player with the starting cash on the first field."""
        player = PlayerState(len(self.players), name, self.config.starting_cash)
        self.players.append(player)
        return player

    def set_scoreboard(self, scoreboard: Optional[ScoreBoard]) -> None:
        """Install a score board. None keeps the current one."""
        if scoreboard is not None:
            self.scoreboard = scoreboard

    def _check_player_count(self) -> None:
        count = len(self.players)
        if count > self.config.max_players:
            raise TooManyPlayersError(
                f"At most {self.config.max_players} players allowed, got {count}"
            )
        if count < self.config.min_players:
            raise TooFewPlayersError(
                f"At least {self.config.min_players} players required, got {count}"
            )

    def play(self, rounds: int) -> PlayerState:
        """
        Play at most `rounds` rounds.

        Each round every player on the roster takes one turn, in
        registration order. The game ends early when only one player
        is left.

        Returns:
            The winner

        Raises:
            TooManyPlayersError, TooFewPlayersError: roster size out of range
            TooManyDiceError, TooFewDiceError: wrong number of dice, on first roll
        """
        self._check_player_count()

        self.event_log.log(
            EventType.GAME_START,
            players=[p.name for p in self.players],
            starting_cash=self.config.starting_cash,
            rounds=rounds,
        )
        logger.info("Starting game with %d players for up to %d rounds", len(self.players), rounds)

        self.round_number = 0
        while self.round_number < rounds and len(self.players) > 1:
            self.play_round()
            self.round_number += 1

        return self._finish()

    def play_round(self) -> None:
        """Give every player on the roster one turn and drop bankrupt players."""
        self.scoreboard.on_round(self.round_number)
        self.event_log.log(EventType.ROUND_START, round=self.round_number)

        roster = self.players
        survivors: List[PlayerState] = []
        for index, player in enumerate(roster):
            self._play_turn(player)

            if not player.is_bankrupt:
                survivors.append(player)
                continue

            self.event_log.log(
                EventType.BANKRUPTCY, player_id=player.player_id, round=self.round_number
            )
            logger.info("%s went bankrupt in round %d", player.name, self.round_number)

            remaining = roster[index + 1 :]
            if len(survivors) + len(remaining) == 1:
                survivors.extend(remaining)
                break

        self.players = survivors

    def _play_turn(self, player: PlayerState) -> None:
        player.wait_if_needed()

        if player.is_waiting:
            self.event_log.log(
                EventType.WAIT, player_id=player.player_id, rounds_left=player.suspension
            )
        else:
            steps = self.dice.roll()
            self.event_log.log(EventType.DICE_ROLL, player_id=player.player_id, total=steps)

            old_position = player.position
            new_position = self.board.player_move(player, steps)
            self.event_log.log(
                EventType.MOVE,
                player_id=player.player_id,
                **{"from": old_position, "to": new_position, "steps": steps},
            )
            logger.debug(
                "%s rolled %d: %s -> %s",
                player.name,
                steps,
                self.board.get_field_name(old_position),
                self.board.get_field_name(new_position),
            )

        self.scoreboard.on_turn(
            player.name,
            player.status,
            self.board.get_field_name(player.position),
            player.cash,
        )

    def _finish(self) -> PlayerState:
        """Pick the richest remaining player and announce them."""
        winner = self.players[0]
        for player in self.players:
            if player.cash > winner.cash:
                winner = player

        self.game_over = True
        self.winner = winner
        self.event_log.log(
            EventType.GAME_END,
            player_id=winner.player_id,
            winner=winner.name,
            cash=winner.cash,
            rounds_played=self.round_number,
        )
        logger.info("%s wins after %d rounds with %d", winner.name, self.round_number, winner.cash)

        self.scoreboard.on_win(winner.name)
        return winner


def create_game(
    config: Optional[GameConfig] = None,
    player_names: Iterable[str] = (),
    dice: Iterable[Optional[Die]] = (),
    scoreboard: Optional[ScoreBoard] = None,
) -> GameState:
    """
    Create a new game with the specified configuration, players and dice.

    Args:
        config: Game configuration (defaults to GameConfig())
        player_names: Names in turn order
        dice: Die sources; None entries are ignored
        scoreboard: Score board to notify (defaults to a silent one)

    Returns:
        Initialized GameState
    """
    game = GameState(config)
    for die in dice:
        game.add_die(die)
    for name in player_names:
        game.add_player(name)
    game.set_scoreboard(scoreboard)
    return game
