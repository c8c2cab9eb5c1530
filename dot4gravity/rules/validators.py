"""Move preconditions.

Each move kind has its own chain of checks, evaluated in order; the first
failing check decides the error. Validators only read the state.
"""

from __future__ import annotations

from ..board_manager import BoardManager
from ..config import BOARD_HEIGHT, BOARD_WIDTH, BOMB_AMOUNT_PER_PLAYER
from ..errors import (
    GameAlreadyFinishedError,
    InsufficientBombEnergyError,
    InvalidBombCoordinatesError,
    InvalidStonePositionError,
    NoMoreBombsAvailableError,
    NotPlayerTurnError,
)
from ..models import GameState, PlayerId, PowerLevel, Side


def _check_turn(game_state: GameState, player: PlayerId) -> None:
    if game_state.winner is not None:
        raise GameAlreadyFinishedError(
            "Game has already finished",
            context={"winner": game_state.winner},
        )
    if not game_state.is_player_turn(player):
        raise NotPlayerTurnError(
            "It is not this player's turn",
            context={"player": player, "next_player": game_state.next_player},
        )


def can_place_bomb(game_state: GameState, player: PlayerId) -> None:
    """Finished -> turn -> free bomb slot."""
    _check_turn(game_state, player)
    if len(game_state.pending_bombs_for(player)) >= BOMB_AMOUNT_PER_PLAYER:
        raise NoMoreBombsAvailableError(
            "No more bombs available",
            context={"player": player},
        )


def can_detonate_bomb(
    game_state: GameState,
    player: PlayerId,
    commitment: str,
    power_level: PowerLevel,
) -> None:
    """Matching commitment -> finished -> turn -> enough energy."""
    if commitment not in game_state.pending_bombs_for(player):
        raise InvalidBombCoordinatesError(
            "No pending bomb matches these coordinates and salt",
            context={"player": player},
        )
    _check_turn(game_state, player)
    energy = game_state.get_bomb_energy_for(player) or 0
    if not power_level.can_use_level(energy):
        raise InsufficientBombEnergyError(
            "Not enough bomb energy for this power level",
            context={
                "player": player,
                "energy": energy,
                "power_level": power_level.energy_cost,
            },
        )


def can_drop_stone(
    game_state: GameState, side: Side, position: int, player: PlayerId
) -> None:
    """Finished -> turn -> droppable entry cell."""
    _check_turn(game_state, player)
    limit = BOARD_WIDTH if side in (Side.NORTH, Side.SOUTH) else BOARD_HEIGHT
    if not 0 <= position < limit or not game_state.board.is_stone_droppable(
        BoardManager.bound_coordinates(side, position)
    ):
        raise InvalidStonePositionError(
            "Stone cannot enter the board here",
            context={"side": side.value, "position": position},
        )
