"""JSON encoding of game states and moves.

The engine itself defines no wire format; hosts that persist states use
these helpers so every field round-trips losslessly. Keys are camelCase and
salts are hex encoded.
"""

from __future__ import annotations

from pydantic import TypeAdapter

from .models import GameState, Move

__all__ = ["decode_move", "decode_state", "encode_move", "encode_state"]

_MOVE_ADAPTER: TypeAdapter[Move] = TypeAdapter(Move)


def encode_state(game_state: GameState) -> str:
    """Canonical JSON for ``game_state`` (stable key order, no whitespace)."""
    return game_state.model_dump_json(by_alias=True)


def decode_state(data: str | bytes) -> GameState:
    return GameState.model_validate_json(data)


def encode_move(move: Move) -> str:
    return _MOVE_ADAPTER.dump_json(move, by_alias=True).decode("utf-8")


def decode_move(data: str | bytes) -> Move:
    return _MOVE_ADAPTER.validate_json(data)
