"""
Pydantic Models for dot4gravity Game State

Value types shared by the engine, the turn-based adapter and the
serialization layer. JSON field names are camelCase so that non-Python
hosts can persist and inspect states without a translation table.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from .config import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    BOMB_AMOUNT_PER_PLAYER,
    NUM_OF_PLAYERS,
    SALT_LENGTH,
    U32_MAX,
)
from .errors import InvalidStateError

# Opaque player handle supplied by the host (account id, username, ...).
PlayerId = Union[int, str]

# 32-byte salt mixed into a bomb commitment.
HashSalt = Annotated[bytes, Field(min_length=SALT_LENGTH, max_length=SALT_LENGTH)]

# Lowercase hex of the 32-byte commitment hash.
Commitment = Annotated[str, Field(pattern=r"^[0-9a-f]{64}$")]


class CellKind(str, Enum):
    """Cell content enumeration"""
    EMPTY = "empty"
    BLOCK = "block"
    STONE = "stone"


class Side(str, Enum):
    """Board wall a stone enters from"""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"


class PowerLevel(int, Enum):
    """Bomb blast radius tier. The value is also the energy it costs."""
    ONE = 1
    TWO = 2
    THREE = 3

    @property
    def energy_cost(self) -> int:
        return int(self.value)

    def can_use_level(self, energy: int) -> bool:
        return energy >= self.energy_cost


class MoveType(str, Enum):
    """Move kind discriminator"""
    PLACE_BOMB = "place_bomb"
    DETONATE_BOMB = "detonate_bomb"
    DROP_STONE = "drop_stone"


class Cell(BaseModel):
    """A single board cell.

    ``player`` holds the owning player's index (0 or 1) for stones and is
    ``None`` otherwise.
    """
    model_config = ConfigDict(frozen=True)

    kind: CellKind = CellKind.EMPTY
    player: Optional[int] = Field(None, ge=0, lt=NUM_OF_PLAYERS)

    @classmethod
    def empty(cls) -> "Cell":
        return cls()

    @classmethod
    def block(cls) -> "Cell":
        return cls(kind=CellKind.BLOCK)

    @classmethod
    def stone(cls, player_index: int) -> "Cell":
        return cls(kind=CellKind.STONE, player=player_index)

    def is_stone(self) -> bool:
        return self.kind == CellKind.STONE

    def is_stone_droppable(self) -> bool:
        """Only empty cells accept a stone."""
        return self.kind == CellKind.EMPTY


class Coordinates(BaseModel):
    """Board coordinates, both axes in [0, 10)"""
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=0, lt=BOARD_HEIGHT)
    col: int = Field(ge=0, lt=BOARD_WIDTH)

    def to_key(self) -> str:
        """Convert coordinates to string key"""
        return f"{self.row},{self.col}"


def _empty_cells() -> List[List[Cell]]:
    return [[Cell() for _ in range(BOARD_WIDTH)] for _ in range(BOARD_HEIGHT)]


BoardRow = Annotated[List[Cell], Field(min_length=BOARD_WIDTH, max_length=BOARD_WIDTH)]


class Board(BaseModel):
    """Fixed 10x10 grid, addressed only through bounds-checked accessors"""
    cells: List[BoardRow] = Field(
        default_factory=_empty_cells,
        min_length=BOARD_HEIGHT,
        max_length=BOARD_HEIGHT,
    )

    @staticmethod
    def _check_bounds(position: Coordinates) -> None:
        # Coordinates validate on construction; model_construct() skips that.
        if not (0 <= position.row < BOARD_HEIGHT and 0 <= position.col < BOARD_WIDTH):
            raise InvalidStateError(
                "Coordinates outside the board",
                context={"row": position.row, "col": position.col},
            )

    def get_cell(self, position: Coordinates) -> Cell:
        self._check_bounds(position)
        return self.cells[position.row][position.col]

    def update_cell(self, position: Coordinates, cell: Cell) -> None:
        self._check_bounds(position)
        self.cells[position.row][position.col] = cell

    def is_stone_droppable(self, position: Coordinates) -> bool:
        return self.get_cell(position).is_stone_droppable()


class LastMove(BaseModel):
    """The most recent stone drop"""
    model_config = ConfigDict(frozen=True)

    player: PlayerId
    side: Side
    position: int = Field(ge=0, lt=max(BOARD_WIDTH, BOARD_HEIGHT))


# Moves are a closed set of payload-bearing variants discriminated by ``type``.
_MOVE_CONFIG = ConfigDict(
    frozen=True,
    populate_by_name=True,
    ser_json_bytes="hex",
    val_json_bytes="hex",
)


class PlaceBomb(BaseModel):
    """Commit to a hidden bomb target"""
    model_config = _MOVE_CONFIG

    type: Literal[MoveType.PLACE_BOMB] = MoveType.PLACE_BOMB
    coordinates: Coordinates
    salt: HashSalt


class DetonateBomb(BaseModel):
    """Reveal a committed bomb target and detonate it"""
    model_config = _MOVE_CONFIG

    type: Literal[MoveType.DETONATE_BOMB] = MoveType.DETONATE_BOMB
    coordinates: Coordinates
    salt: HashSalt
    power_level: PowerLevel = Field(alias="powerLevel")


class DropStone(BaseModel):
    """Drop a stone from a side of the board"""
    model_config = _MOVE_CONFIG

    type: Literal[MoveType.DROP_STONE] = MoveType.DROP_STONE
    side: Side
    position: int = Field(ge=0, lt=max(BOARD_WIDTH, BOARD_HEIGHT))


Move = Annotated[
    Union[PlaceBomb, DetonateBomb, DropStone],
    Field(discriminator="type"),
]


PendingBombs = Annotated[List[Commitment], Field(max_length=BOMB_AMOUNT_PER_PLAYER)]


class GameState(BaseModel):
    """Complete game state.

    ``bomb_energy`` and ``bombs_placed`` are index-aligned with ``players``.
    """
    model_config = ConfigDict(populate_by_name=True)

    seed: int = Field(ge=0, le=U32_MAX)
    board: Board = Field(default_factory=Board)
    winner: Optional[PlayerId] = None
    next_player: PlayerId = Field(alias="nextPlayer")
    players: List[PlayerId] = Field(min_length=NUM_OF_PLAYERS, max_length=NUM_OF_PLAYERS)
    bomb_energy: List[Annotated[int, Field(ge=0)]] = Field(
        alias="bombEnergy",
        min_length=NUM_OF_PLAYERS,
        max_length=NUM_OF_PLAYERS,
    )
    bombs_placed: List[PendingBombs] = Field(
        default_factory=lambda: [[] for _ in range(NUM_OF_PLAYERS)],
        alias="bombsPlaced",
        min_length=NUM_OF_PLAYERS,
        max_length=NUM_OF_PLAYERS,
    )
    last_move: Optional[LastMove] = Field(None, alias="lastMove")

    def is_player_in_game(self, player: PlayerId) -> bool:
        return player in self.players

    def player_index(self, player: PlayerId) -> int:
        try:
            return self.players.index(player)
        except ValueError:
            raise InvalidStateError(
                "Player is not part of this game",
                context={"player": player},
            ) from None

    def get_bomb_energy_for(self, player: PlayerId) -> Optional[int]:
        if not self.is_player_in_game(player):
            return None
        return self.bomb_energy[self.player_index(player)]

    def pending_bombs_for(self, player: PlayerId) -> List[str]:
        """Return a copy of the player's pending commitments (empty for outsiders)."""
        if not self.is_player_in_game(player):
            return []
        return list(self.bombs_placed[self.player_index(player)])

    def is_player_turn(self, player: PlayerId) -> bool:
        return self.next_player == player

    def following_player(self) -> PlayerId:
        """Return the player after ``next_player`` in the closed two-player rotation."""
        try:
            index = self.players.index(self.next_player)
        except ValueError:
            raise InvalidStateError(
                "Next player is not part of this game",
                context={"next_player": self.next_player},
            ) from None
        return self.players[(index + 1) % NUM_OF_PLAYERS]
