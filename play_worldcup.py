#!/usr/bin/env python3
"""
Minimal CLI for simulating World Cup games.

Runs a complete game with random dice and prints the score board
transcript followed by the final standings.
"""

import argparse
import logging
import random
import sys
from typing import List, Optional, Sequence

from worldcup.config import GameConfig
from worldcup.dice import RandomDie
from worldcup.exceptions import WorldCupError
from worldcup.game import GameState, create_game
from worldcup.scoreboard import TextScoreBoard
from worldcup.settings import get_simulation_settings

DEFAULT_PLAYERS = ["Lewandowski", "Messi", "Ronaldo"]


def print_game_summary(game: GameState, player_names: List[str]):
    """Print final game summary."""
    print("\n" + "=" * 60)
    print("GAME OVER")
    print("=" * 60)

    if game.winner is not None:
        print(f"\nWinner: {game.winner.name}")
        print(f"Final Cash: {game.winner.cash}")

    print("\nFinal Standings:")
    remaining = {p.name: p for p in game.players}
    for name in player_names:
        player = remaining.get(name)
        status = f"{player.cash}" if player is not None else "BANKRUPT"
        print(f"  {name}: {status}")

    print(f"\nRounds Played: {game.round_number}")


def simulate_game(
    player_names: Sequence[str],
    rounds: int,
    dice_count: int = 2,
    die_faces: int = 6,
    seed: Optional[int] = None,
    verbose: bool = True,
) -> GameState:
    """
    Simulate a complete game.

    Args:
        player_names: Player names in turn order
        rounds: Maximum number of rounds
        dice_count: Number of random dice rolled per turn
        die_faces: Faces on each die
        seed: Random seed for reproducibility
        verbose: Whether to print the score board transcript
    """
    config = GameConfig(dice_count=dice_count, seed=seed)
    rng = random.Random(config.seed)
    scoreboard = TextScoreBoard(sys.stdout if verbose else None)

    game = create_game(
        config,
        player_names=player_names,
        dice=[RandomDie(die_faces, rng) for _ in range(dice_count)],
        scoreboard=scoreboard,
    )

    if verbose:
        print(f"Starting game with {len(player_names)} players")
        print(f"Seed: {seed}")

    game.play(rounds)

    print_game_summary(game, list(player_names))
    return game


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for CLI."""
    settings = get_simulation_settings()

    parser = argparse.ArgumentParser(description="Simulate a World Cup 2022 board game")
    parser.add_argument(
        "--players",
        nargs="+",
        default=DEFAULT_PLAYERS,
        help="Player names in turn order (2-11)",
    )
    parser.add_argument(
        "--rounds", type=int, default=settings.rounds, help="Maximum number of rounds"
    )
    parser.add_argument(
        "--dice", type=int, default=settings.dice_count, help="Number of dice rolled per turn"
    )
    parser.add_argument(
        "--faces", type=int, default=settings.die_faces, help="Faces on each die"
    )
    parser.add_argument("--seed", type=int, default=settings.seed, help="Random seed")
    parser.add_argument("--quiet", action="store_true", help="Only print the summary")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        simulate_game(
            player_names=args.players,
            rounds=args.rounds,
            dice_count=args.dice,
            die_faces=args.faces,
            seed=args.seed,
            verbose=not args.quiet,
        )
    except WorldCupError as e:
        print(f"Cannot play: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
