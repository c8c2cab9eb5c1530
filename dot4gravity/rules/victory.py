"""Win detection over 2x2 squares."""

from __future__ import annotations

from typing import Iterator, List, Optional

from ..config import BOARD_HEIGHT, BOARD_WIDTH, NUM_OF_PLAYERS, SQUARES_TO_WIN
from ..models import Board


def _square_owners(board: Board) -> Iterator[int]:
    """Yield the owner index of every fully owned 2x2 window, row-major."""
    cells = board.cells
    for row in range(BOARD_HEIGHT - 1):
        for col in range(BOARD_WIDTH - 1):
            cell = cells[row][col]
            if not cell.is_stone():
                continue
            if (
                cells[row][col + 1] == cell
                and cells[row + 1][col] == cell
                and cells[row + 1][col + 1] == cell
            ):
                yield cell.player


def count_squares(board: Board) -> List[int]:
    """Number of scoring windows per player index. Overlapping windows count."""
    squares = [0] * NUM_OF_PLAYERS
    for owner in _square_owners(board):
        squares[owner] += 1
    return squares


def find_winner_index(board: Board) -> Optional[int]:
    """Return the index of the first player to reach the winning count.

    The scan runs row-major and stops at the first window that brings a
    player to the threshold, so if both players qualify the one whose third
    window comes first in scan order wins.
    """
    squares = [0] * NUM_OF_PLAYERS
    for owner in _square_owners(board):
        squares[owner] += 1
        if squares[owner] >= SQUARES_TO_WIN:
            return owner
    return None
