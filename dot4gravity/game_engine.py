"""Core game engine for dot4gravity.

Two players drop stones that slide across a 10x10 board until something
stops them, and hide bombs that later clear parts of the board. The first
player to own three 2x2 squares wins.

Every operation is a pure function of its inputs: the incoming state is
deep-copied before any change, validation always runs before mutation, and
nothing consults time, external entropy or floating point. Replaying the
same moves from the same seed yields identical states on every host.
"""

from __future__ import annotations

import logging
from typing import Optional

from .board_manager import BoardManager
from .config import (
    BOMB_ENERGY_PER_PLAYER,
    DEBUG_ENGINE,
    INITIAL_SEED,
    NUM_OF_BLOCKS,
    NUM_OF_PLAYERS,
)
from .errors import InvalidBombCoordinatesError, InvalidStateError
from .models import (
    Board,
    Cell,
    Coordinates,
    DetonateBomb,
    DropStone,
    GameState,
    LastMove,
    Move,
    PlaceBomb,
    PlayerId,
    PowerLevel,
    Side,
)
from .rng import generate_block_coordinates, validate_seed
from .rules import (
    can_detonate_bomb,
    can_drop_stone,
    can_place_bomb,
    explode,
    find_landing_cell,
    find_winner_index,
    hash_coordinates,
)

logger = logging.getLogger(__name__)


def _debug_board(label: str, game_state: GameState) -> None:
    """Log a board rendering when engine debug is enabled."""
    if DEBUG_ENGINE:
        logger.debug(
            "%s\n%s", label, BoardManager.summarize_board(game_state.board)
        )


class GameEngine:
    """dot4gravity rules engine.

    All methods are static and take the current ``GameState`` by value.
    Accepted moves return a new state; rejected moves raise a
    :class:`~dot4gravity.errors.GameError` subclass and leave the input
    untouched.
    """

    @staticmethod
    def new_game(
        player1: PlayerId, player2: PlayerId, seed: Optional[int] = None
    ) -> GameState:
        """Create a game with ten randomly placed blocks.

        ``player1`` moves first. The returned state carries the seed as
        advanced by block placement.
        """
        seed = validate_seed(INITIAL_SEED if seed is None else seed)
        blocks, seed = generate_block_coordinates(seed, NUM_OF_BLOCKS)

        board = Board()
        for coordinates in blocks:
            board.update_cell(coordinates, Cell.block())

        game_state = GameState(
            seed=seed,
            board=board,
            winner=None,
            next_player=player1,
            players=[player1, player2],
            bomb_energy=[BOMB_ENERGY_PER_PLAYER] * NUM_OF_PLAYERS,
            bombs_placed=[[] for _ in range(NUM_OF_PLAYERS)],
            last_move=None,
        )
        logger.debug("New game %s vs %s, seed after setup %d", player1, player2, seed)
        _debug_board("Initial board", game_state)
        return game_state

    @staticmethod
    def place_bomb(
        game_state: GameState,
        player: PlayerId,
        coordinates: Coordinates,
        salt: bytes,
    ) -> GameState:
        """Commit to a hidden bomb target and pass the turn."""
        can_place_bomb(game_state, player)

        commitment = hash_coordinates(coordinates, salt)
        if commitment in game_state.pending_bombs_for(player):
            raise InvalidBombCoordinatesError(
                "A bomb is already pending for these coordinates and salt",
                context={"player": player},
            )

        new_state = game_state.model_copy(deep=True)
        new_state.bombs_placed[new_state.player_index(player)].append(commitment)
        new_state.next_player = new_state.following_player()

        logger.debug("Player %s placed a bomb", player)
        return new_state

    @staticmethod
    def detonate_bomb(
        game_state: GameState,
        player: PlayerId,
        coordinates: Coordinates,
        salt: bytes,
        power_level: PowerLevel,
    ) -> GameState:
        """Reveal a pending bomb, clear its blast area and pass the turn."""
        power_level = PowerLevel(power_level)
        commitment = hash_coordinates(coordinates, salt)
        can_detonate_bomb(game_state, player, commitment, power_level)

        new_state = game_state.model_copy(deep=True)
        player_index = new_state.player_index(player)

        cleared = explode(new_state.board, coordinates, power_level)
        new_state.bomb_energy[player_index] -= power_level.energy_cost
        new_state.bombs_placed[player_index].remove(commitment)
        new_state.next_player = new_state.following_player()

        logger.debug(
            "Player %s detonated a level %d bomb at %s, %d stone(s) cleared",
            player,
            power_level.energy_cost,
            coordinates.to_key(),
            cleared,
        )
        _debug_board("Board after detonation", new_state)
        return new_state

    @staticmethod
    def drop_stone(
        game_state: GameState,
        player: PlayerId,
        side: Side,
        position: int,
    ) -> GameState:
        """Drop a stone from ``side`` and let it slide until obstructed."""
        side = Side(side)
        can_drop_stone(game_state, side, position, player)

        landing = find_landing_cell(game_state.board, side, position)

        new_state = game_state.model_copy(deep=True)
        new_state.board.update_cell(
            landing, Cell.stone(new_state.player_index(player))
        )
        new_state.last_move = LastMove(player=player, side=side, position=position)
        new_state.next_player = new_state.following_player()
        new_state = GameEngine.check_winner_player(new_state)

        logger.debug(
            "Player %s dropped a stone from %s at %d, landed on %s",
            player,
            side.value,
            position,
            landing.to_key(),
        )
        _debug_board("Board after drop", new_state)
        return new_state

    @staticmethod
    def apply_move(game_state: GameState, player: PlayerId, move: Move) -> GameState:
        """Route ``move`` to the matching operation."""
        if isinstance(move, PlaceBomb):
            return GameEngine.place_bomb(
                game_state, player, move.coordinates, move.salt
            )
        if isinstance(move, DetonateBomb):
            return GameEngine.detonate_bomb(
                game_state, player, move.coordinates, move.salt, move.power_level
            )
        if isinstance(move, DropStone):
            return GameEngine.drop_stone(game_state, player, move.side, move.position)
        raise InvalidStateError(
            "Unknown move type", context={"move": type(move).__name__}
        )

    @staticmethod
    def check_winner_player(game_state: GameState) -> GameState:
        """Set the winner if a player owns three squares.

        A state that already has a winner is returned as is; otherwise the
        result is a new state and the argument is left untouched.
        """
        if game_state.winner is not None:
            return game_state

        winner_index = find_winner_index(game_state.board)
        if winner_index is not None:
            game_state = game_state.model_copy(
                update={"winner": game_state.players[winner_index]}
            )
            logger.info("Player %s wins with three squares", game_state.winner)
        return game_state
