"""dot4gravity as a :class:`~dot4gravity.interfaces.TurnBasedGame`."""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .config import NUM_OF_PLAYERS
from .errors import GameError
from .game_engine import GameEngine
from .interfaces import Finished, TurnBasedGame
from .metrics import GAMES_CREATED, GAMES_FINISHED, observe_turn
from .models import GameState, Move, PlayerId

logger = logging.getLogger(__name__)


class Dot4GravityGame(TurnBasedGame[Move, PlayerId, GameState]):
    """Adapter between an orchestrator and :class:`GameEngine`.

    Every rejection kind collapses into ``None`` so the orchestrator cannot
    depend on a particular reason.
    """

    def init(
        self, players: Sequence[PlayerId], seed: Optional[int] = None
    ) -> Optional[GameState]:
        if len(players) != NUM_OF_PLAYERS:
            logger.debug("Refusing to start a game with %d players", len(players))
            return None
        player1, player2 = players
        state = GameEngine.new_game(player1, player2, seed)
        GAMES_CREATED.inc()
        return state

    def get_last_player(self, state: GameState) -> PlayerId:
        # Only stone drops are recorded; fall back to the next player.
        if state.last_move is not None:
            return state.last_move.player
        return state.next_player

    def get_next_player(self, state: GameState) -> PlayerId:
        return state.next_player

    def play_turn(
        self, player: PlayerId, state: GameState, turn: Move
    ) -> Optional[GameState]:
        move_type = turn.type.value
        try:
            new_state = GameEngine.apply_move(state, player, turn)
        except GameError as e:
            logger.debug("Rejected %s from %s: %s", move_type, player, e.code)
            observe_turn(move_type, accepted=False)
            return None

        observe_turn(move_type, accepted=True)
        if state.winner is None and new_state.winner is not None:
            GAMES_FINISHED.labels(reason="victory").inc()
        return new_state

    def abort(self, state: GameState, winner: PlayerId) -> GameState:
        logger.info("Game aborted, winner forced to %s", winner)
        GAMES_FINISHED.labels(reason="abort").inc()
        return state.model_copy(update={"winner": winner})

    def is_finished(self, state: GameState) -> Finished[PlayerId]:
        return Finished(winner=state.winner)

    def seed(self, state: GameState) -> Optional[int]:
        return state.seed
