"""
Turn-based game interface.

An external orchestrator (matchmaking, storage, turn submission) drives any
game that implements :class:`TurnBasedGame` without knowing its move or
state types.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Generic, Optional, Sequence, TypeVar

TurnT = TypeVar("TurnT")
PlayerT = TypeVar("PlayerT")
StateT = TypeVar("StateT")


@dataclass(frozen=True)
class Finished(Generic[PlayerT]):
    """Outcome of :meth:`TurnBasedGame.is_finished`.

    ``winner`` is ``None`` while the game is still running.
    """
    winner: Optional[PlayerT] = None

    @property
    def is_finished(self) -> bool:
        return self.winner is not None


class TurnBasedGame(ABC, Generic[TurnT, PlayerT, StateT]):
    """Abstract base class for games driven by an external orchestrator"""

    @abstractmethod
    def init(
        self, players: Sequence[PlayerT], seed: Optional[int] = None
    ) -> Optional[StateT]:
        """
        Create the initial state.

        Returns:
            The new state, or None if the player list does not fit the game
        """
        pass

    @abstractmethod
    def get_last_player(self, state: StateT) -> PlayerT:
        """Player that played last"""
        pass

    @abstractmethod
    def get_next_player(self, state: StateT) -> PlayerT:
        """Player that should play next"""
        pass

    @abstractmethod
    def play_turn(self, player: PlayerT, state: StateT, turn: TurnT) -> Optional[StateT]:
        """
        Play ``turn`` for ``player``.

        Returns:
            The new state, or None if the turn was rejected. The rejection
            reason is intentionally not exposed.
        """
        pass

    @abstractmethod
    def abort(self, state: StateT, winner: PlayerT) -> StateT:
        """Force the game to end with ``winner``, e.g. on forfeit or timeout."""
        pass

    @abstractmethod
    def is_finished(self, state: StateT) -> Finished[PlayerT]:
        pass

    @abstractmethod
    def seed(self, state: StateT) -> Optional[int]:
        """Seed carried by the state, if the game uses one."""
        pass
