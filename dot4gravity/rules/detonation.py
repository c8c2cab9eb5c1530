"""Bomb area effect."""

from __future__ import annotations

from typing import List

from ..board_manager import BoardManager
from ..models import Board, Cell, Coordinates, PowerLevel

ORTHOGONAL_OFFSETS = ((1, 0), (0, 1), (-1, 0), (0, -1))
DIAGONAL_OFFSETS = ((1, 1), (1, -1), (-1, 1), (-1, -1))


def blast_area(epicenter: Coordinates, power_level: PowerLevel) -> List[Coordinates]:
    """Cells reached by a blast, epicenter first. Off-board cells are dropped.

    Level one reaches the epicenter only, level two adds the orthogonal
    neighbours and level three adds the diagonal ones.
    """
    area = [epicenter]
    if power_level in (PowerLevel.TWO, PowerLevel.THREE):
        area.extend(BoardManager.offset_cells(epicenter, ORTHOGONAL_OFFSETS))
    if power_level == PowerLevel.THREE:
        area.extend(BoardManager.offset_cells(epicenter, DIAGONAL_OFFSETS))
    return area


def explode(board: Board, epicenter: Coordinates, power_level: PowerLevel) -> int:
    """Clear every stone in the blast area of ``board`` in place.

    Blocks and empty cells are left alone. Returns the number of stones
    removed.
    """
    cleared = 0
    for position in blast_area(epicenter, power_level):
        if board.get_cell(position).is_stone():
            board.update_cell(position, Cell.empty())
            cleared += 1
    return cleared
