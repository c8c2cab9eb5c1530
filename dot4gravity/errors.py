"""
dot4gravity Error Hierarchy

All engine exceptions inherit from Dot4GravityError. Move rejections are
GameError subclasses, one per rejection kind, so hosts can either catch the
whole family or a single kind.

Usage:
    from dot4gravity.errors import GameError, NotPlayerTurnError

    try:
        state = GameEngine.drop_stone(state, player, Side.NORTH, 3)
    except NotPlayerTurnError:
        ...
    except GameError as e:
        logger.info(f"Rejected move: {e.code}")
"""

from typing import Any

__all__ = [
    "Dot4GravityError",
    "GameAlreadyFinishedError",
    "GameError",
    "InsufficientBombEnergyError",
    "InvalidBombCoordinatesError",
    "InvalidSeedError",
    "InvalidStateError",
    "InvalidStonePositionError",
    "NoMoreBombsAvailableError",
    "NoPreviousPositionError",
    "NotPlayerTurnError",
]


class Dot4GravityError(Exception):
    """Base exception for all dot4gravity errors.

    Attributes:
        code: Machine-readable error code for categorization
        message: Human-readable error description
        context: Additional context for debugging
    """
    code: str = "DOT4GRAVITY_ERROR"

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            ctx = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"[{self.code}] {self.message} ({ctx})"
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "context": self.context,
        }


class InvalidStateError(Dot4GravityError):
    """Corrupted or unexpected game state.

    Raised when a state is in a configuration that cannot be reached
    through the engine, e.g. a handle that is not one of the two players.
    """
    code: str = "INVALID_STATE"


class InvalidSeedError(Dot4GravityError):
    """Seed outside the unsigned 32-bit range."""
    code: str = "INVALID_SEED"

    def __init__(
        self,
        message: str,
        seed: int | None = None,
        context: dict[str, Any] | None = None,
    ):
        super().__init__(message, context=context)
        if seed is not None:
            self.context["seed"] = seed


# =============================================================================
# Move Rejections
# =============================================================================


class GameError(Dot4GravityError):
    """A move that the rules do not allow in the current state.

    Every subclass is an expected, retry-with-different-input situation.
    The engine raises before touching any state, so a rejected move never
    leaves a partial change behind.
    """
    code: str = "GAME_ERROR"


class NoMoreBombsAvailableError(GameError):
    """The player already has the maximum number of pending bombs."""
    code: str = "NO_MORE_BOMBS_AVAILABLE"


class InsufficientBombEnergyError(GameError):
    """The player has not enough bomb energy for the requested power level."""
    code: str = "INSUFFICIENT_BOMB_ENERGY"


class InvalidBombCoordinatesError(GameError):
    """The coordinate/salt pair does not match a usable commitment.

    Raised on detonation when no pending commitment matches, and on
    placement when the same commitment is already pending.
    """
    code: str = "INVALID_BOMB_COORDINATES"


class InvalidStonePositionError(GameError):
    """The stone cannot enter the board at the requested side/position."""
    code: str = "INVALID_STONE_POSITION"


class NotPlayerTurnError(GameError):
    """The move was submitted by the player who is not next to move."""
    code: str = "NOT_PLAYER_TURN"


class NoPreviousPositionError(GameError):
    """The cell has no previous position; it is an edge cell.

    Reserved. The current rules never raise it.
    """
    code: str = "NO_PREVIOUS_POSITION"


class GameAlreadyFinishedError(GameError):
    """A move was submitted after a winner was decided."""
    code: str = "GAME_ALREADY_FINISHED"
