"""Shared constants and builders for dot4gravity tests."""

from typing import Sequence

from dot4gravity.board_manager import BoardManager
from dot4gravity.models import Board

ALICE = "alice"
BOB = "bob"
CHARLIE = "charlie"

EMPTY_ROWS = ["." * 10] * 10


def make_salt(value: int) -> bytes:
    """32-byte salt whose distinguishing bytes sit at the front.

    Bytes 30 and 31 are overwritten by the coordinates when hashing, so
    test salts keep their entropy away from the end.
    """
    return value.to_bytes(32, "little")


def make_board(rows: Sequence[str]) -> Board:
    return BoardManager.parse_board(rows)
