"""Board-level helpers for the dot4gravity engine.

Pure geometry over the fixed 10x10 grid: entry cells and travel paths for
each side, blast neighbourhoods, a compact text rendering for logs and the
CLI, and a canonical state fingerprint for replay audits.
"""
from __future__ import annotations

import hashlib
from typing import Iterable, List, Sequence, Tuple

from .config import BOARD_HEIGHT, BOARD_WIDTH
from .models import Board, Cell, CellKind, Coordinates, GameState, Side
from .serialization import encode_state

__all__ = ["BoardManager"]

_EMPTY_SYMBOL = "."
_BLOCK_SYMBOL = "#"


class BoardManager:
    """Helper for board-level operations.

    It is side-effect-free; callers pass in ``Board``/``GameState``
    instances and receive derived views or new value objects.
    """

    @staticmethod
    def is_inside_board(row: int, col: int) -> bool:
        return 0 <= row < BOARD_HEIGHT and 0 <= col < BOARD_WIDTH

    @staticmethod
    def bound_coordinates(side: Side, position: int) -> Coordinates:
        """Return the boundary cell a stone dropped from ``side`` enters first."""
        if side == Side.NORTH:
            return Coordinates(row=0, col=position)
        if side == Side.SOUTH:
            return Coordinates(row=BOARD_HEIGHT - 1, col=position)
        if side == Side.WEST:
            return Coordinates(row=position, col=0)
        return Coordinates(row=position, col=BOARD_WIDTH - 1)

    @staticmethod
    def is_opposite_cell(position: Coordinates, side: Side) -> bool:
        """Tell whether ``position`` lies on the wall opposite to ``side``."""
        if side == Side.NORTH:
            return position.row == BOARD_HEIGHT - 1
        if side == Side.SOUTH:
            return position.row == 0
        if side == Side.WEST:
            return position.col == BOARD_WIDTH - 1
        return position.col == 0

    @staticmethod
    def travel_path(side: Side, position: int) -> List[Coordinates]:
        """Cells a stone crosses, from the entry cell to the opposite wall."""
        if side == Side.NORTH:
            return [Coordinates(row=row, col=position) for row in range(BOARD_HEIGHT)]
        if side == Side.SOUTH:
            return [
                Coordinates(row=row, col=position)
                for row in range(BOARD_HEIGHT - 1, -1, -1)
            ]
        if side == Side.WEST:
            return [Coordinates(row=position, col=col) for col in range(BOARD_WIDTH)]
        return [
            Coordinates(row=position, col=col)
            for col in range(BOARD_WIDTH - 1, -1, -1)
        ]

    @staticmethod
    def offset_cells(
        center: Coordinates, offsets: Iterable[Tuple[int, int]]
    ) -> List[Coordinates]:
        """Apply ``offsets`` to ``center``, dropping cells that leave the board."""
        cells: List[Coordinates] = []
        for d_row, d_col in offsets:
            row, col = center.row + d_row, center.col + d_col
            if BoardManager.is_inside_board(row, col):
                cells.append(Coordinates(row=row, col=col))
        return cells

    @staticmethod
    def count_cells(board: Board, kind: CellKind) -> int:
        return sum(1 for row in board.cells for cell in row if cell.kind == kind)

    @staticmethod
    def summarize_board(board: Board) -> str:
        """Render the board one text row per board row.

        ``.`` is empty, ``#`` is a block and a digit is a stone owned by the
        player with that index.
        """
        lines = []
        for row in board.cells:
            symbols = []
            for cell in row:
                if cell.kind == CellKind.BLOCK:
                    symbols.append(_BLOCK_SYMBOL)
                elif cell.kind == CellKind.STONE:
                    symbols.append(str(cell.player))
                else:
                    symbols.append(_EMPTY_SYMBOL)
            lines.append(" ".join(symbols))
        return "\n".join(lines)

    @staticmethod
    def parse_board(rows: Sequence[str]) -> Board:
        """Inverse of :meth:`summarize_board`. Whitespace inside rows is ignored."""
        cells: List[List[Cell]] = []
        for text in rows:
            row: List[Cell] = []
            for symbol in "".join(text.split()):
                if symbol == _BLOCK_SYMBOL:
                    row.append(Cell.block())
                elif symbol.isdigit():
                    row.append(Cell.stone(int(symbol)))
                elif symbol == _EMPTY_SYMBOL:
                    row.append(Cell.empty())
                else:
                    raise ValueError(f"Unknown board symbol: {symbol!r}")
            cells.append(row)
        return Board(cells=cells)

    @staticmethod
    def hash_game_state(game_state: GameState) -> str:
        """BLAKE2b fingerprint of the canonical JSON encoding of ``game_state``.

        Two hosts that replayed the same moves must report the same value.
        """
        return hashlib.blake2b(
            encode_state(game_state).encode("utf-8"), digest_size=32
        ).hexdigest()
