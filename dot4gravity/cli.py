"""
dot4gravity command-line interface.

Usage:
    # Show the board generated for a seed
    dot4gravity new alice bob --seed 123456

    # Replay a recorded game and print the final board and fingerprint
    dot4gravity replay game.json

A replay script is JSON of the form::

    {
      "players": ["alice", "bob"],
      "seed": 123456,
      "turns": [
        {"player": "alice", "move": {"type": "drop_stone", "side": "north", "position": 3}},
        {"player": "bob", "move": {"type": "place_bomb",
                                   "coordinates": {"row": 4, "col": 4},
                                   "salt": "<64 hex chars>"}}
      ]
    }
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .adapter import Dot4GravityGame
from .board_manager import BoardManager
from .config import LOG_LEVEL
from .errors import InvalidSeedError
from .logging_config import get_logger, setup_logging
from .models import GameState, Move, PlayerId
from .rules import count_squares

logger = get_logger(__name__)


class ReplayTurn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    player: PlayerId
    move: Move


class ReplayScript(BaseModel):
    model_config = ConfigDict(extra="ignore")

    players: List[PlayerId]
    seed: Optional[int] = None
    turns: List[ReplayTurn] = Field(default_factory=list)


def _print_state(state: GameState) -> None:
    print(BoardManager.summarize_board(state.board))
    print(f"seed:        {state.seed}")
    print(f"next player: {state.next_player}")
    print(f"energy:      {dict(zip(state.players, state.bomb_energy))}")
    print(f"squares:     {dict(zip(state.players, count_squares(state.board)))}")
    print(f"winner:      {state.winner if state.winner is not None else '-'}")
    print(f"fingerprint: {BoardManager.hash_game_state(state)}")


def cmd_new(args: argparse.Namespace) -> int:
    """Create a game and print it."""
    game = Dot4GravityGame()
    try:
        state = game.init([args.player1, args.player2], args.seed)
    except InvalidSeedError as e:
        logger.error(str(e))
        return 1
    if state is None:
        logger.error("Could not create a game")
        return 1
    _print_state(state)
    return 0


def cmd_replay(args: argparse.Namespace) -> int:
    """Replay a script through the adapter."""
    try:
        script = ReplayScript.model_validate_json(Path(args.script).read_text())
    except (OSError, ValidationError) as e:
        logger.error(f"Could not load replay script {args.script}: {e}")
        return 1

    game = Dot4GravityGame()
    try:
        state = game.init(script.players, script.seed)
    except InvalidSeedError as e:
        logger.error(str(e))
        return 1
    if state is None:
        logger.error(f"A game needs exactly two players, got {len(script.players)}")
        return 1

    for number, turn in enumerate(script.turns, start=1):
        new_state = game.play_turn(turn.player, state, turn.move)
        if new_state is None:
            logger.error(
                f"Turn {number} rejected: {turn.player} {turn.move.type.value}"
            )
            _print_state(state)
            return 1
        state = new_state
        logger.debug(f"Turn {number} accepted")

    _print_state(state)
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="dot4gravity",
        description="Deterministic gravity-stones-with-bombs engine",
    )
    parser.add_argument(
        "--log-level",
        default=LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    new_parser = subparsers.add_parser("new", help="Create a game and print its board")
    new_parser.add_argument("player1")
    new_parser.add_argument("player2")
    new_parser.add_argument("--seed", type=int, default=None)
    new_parser.set_defaults(func=cmd_new)

    replay_parser = subparsers.add_parser("replay", help="Replay a JSON move script")
    replay_parser.add_argument("script", help="Path to the replay script")
    replay_parser.set_defaults(func=cmd_replay)

    args = parser.parse_args(argv)
    if args.command is None:
        parser.print_help()
        return 1

    setup_logging("dot4gravity", level=args.log_level, format_style="compact")
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
