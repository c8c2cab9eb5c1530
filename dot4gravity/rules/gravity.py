"""Sliding placement of stones."""

from __future__ import annotations

from typing import Optional

from ..board_manager import BoardManager
from ..errors import InvalidStonePositionError
from ..models import Board, Coordinates, Side


def find_landing_cell(board: Board, side: Side, position: int) -> Coordinates:
    """Return the cell where a stone dropped from ``side`` at ``position`` settles.

    The stone travels from the entry cell toward the opposite wall and stops
    in the last empty cell before the first block or stone. If nothing
    obstructs it, it rests on the far boundary cell.

    Raises:
        InvalidStonePositionError: the entry cell itself is obstructed.
    """
    landing: Optional[Coordinates] = None
    for cell in BoardManager.travel_path(side, position):
        if not board.is_stone_droppable(cell):
            break
        landing = cell

    if landing is None:
        raise InvalidStonePositionError(
            "No room to place a stone",
            context={"side": side.value, "position": position},
        )
    return landing
