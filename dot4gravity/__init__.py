"""dot4gravity: a deterministic two-player gravity-stones-with-bombs engine.

Usage:
    from dot4gravity import Dot4GravityGame, DropStone, Side

    game = Dot4GravityGame()
    state = game.init(["alice", "bob"], seed=123456)
    state = game.play_turn("alice", state, DropStone(side=Side.NORTH, position=4))
"""

from .adapter import Dot4GravityGame
from .board_manager import BoardManager
from .errors import (
    Dot4GravityError,
    GameAlreadyFinishedError,
    GameError,
    InsufficientBombEnergyError,
    InvalidBombCoordinatesError,
    InvalidSeedError,
    InvalidStateError,
    InvalidStonePositionError,
    NoMoreBombsAvailableError,
    NoPreviousPositionError,
    NotPlayerTurnError,
)
from .game_engine import GameEngine
from .interfaces import Finished, TurnBasedGame
from .models import (
    Board,
    Cell,
    CellKind,
    Coordinates,
    DetonateBomb,
    DropStone,
    GameState,
    LastMove,
    Move,
    MoveType,
    PlaceBomb,
    PowerLevel,
    Side,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardManager",
    "Cell",
    "CellKind",
    "Coordinates",
    "DetonateBomb",
    "Dot4GravityError",
    "Dot4GravityGame",
    "DropStone",
    "Finished",
    "GameAlreadyFinishedError",
    "GameEngine",
    "GameError",
    "GameState",
    "InsufficientBombEnergyError",
    "InvalidBombCoordinatesError",
    "InvalidSeedError",
    "InvalidStateError",
    "InvalidStonePositionError",
    "LastMove",
    "Move",
    "MoveType",
    "NoMoreBombsAvailableError",
    "NoPreviousPositionError",
    "NotPlayerTurnError",
    "PlaceBomb",
    "PowerLevel",
    "Side",
    "TurnBasedGame",
]
