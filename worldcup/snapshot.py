"""
Public snapshot serialization of GameState.

Produces a plain, UI-friendly dict of the current game.
"""

from __future__ import annotations

from typing import Any, Dict, List

from worldcup.fields import BookmakerField, MatchField
from worldcup.game import GameState


def serialize_snapshot(game: GameState) -> Dict[str, Any]:
    """Serialize a GameState into a public, stable JSON dict.

    The snapshot includes:
    - round_number, game_over and the winner's name (if decided)
    - players still on the roster, in turn order
    - every board field, with the match pools and the bookmaker cycle
    """
    players: List[Dict[str, Any]] = []
    for pstate in game.players:
        players.append(
            {
                "player_id": pstate.player_id,
                "name": pstate.name,
                "cash": pstate.cash,
                "position": pstate.position,
                "field": game.board.get_field_name(pstate.position),
                "status": pstate.status,
                "suspension": pstate.suspension,
                "is_bankrupt": pstate.is_bankrupt,
            }
        )

    fields: List[Dict[str, Any]] = []
    for position, board_field in enumerate(game.board.fields):
        entry: Dict[str, Any] = {
            "position": position,
            "name": board_field.name,
            "type": board_field.field_type.value,
        }
        if isinstance(board_field, MatchField):
            entry["pool"] = board_field.pool
            entry["weight"] = board_field.weight
        elif isinstance(board_field, BookmakerField):
            entry["visits"] = board_field.visits
        fields.append(entry)

    return {
        "round_number": game.round_number,
        "game_over": game.game_over,
        "winner": game.winner.name if game.winner is not None else None,
        "players": players,
        "fields": fields,
    }
