"""
Shared pytest fixtures for dot4gravity tests.

Game state fixtures are function-scoped so every test starts from a fresh
state. Boards are written as text rows in the format produced by
``BoardManager.summarize_board``: ``.`` empty, ``#`` block, ``0``/``1`` a
stone owned by the player with that index.
"""

from pathlib import Path
import sys
from typing import Callable, Optional, Sequence

import pytest

# Ensure the repository root is on sys.path so `import dot4gravity` works
# when running pytest without installing the package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from dot4gravity.config import INITIAL_SEED  # noqa: E402
from dot4gravity.game_engine import GameEngine  # noqa: E402
from dot4gravity.models import GameState, PlayerId  # noqa: E402
from tests.helpers import ALICE, BOB, EMPTY_ROWS, make_board  # noqa: E402


# =============================================================================
# FACTORY FIXTURES
# =============================================================================


@pytest.fixture
def state_factory() -> Callable[..., GameState]:
    """Factory for game states with a custom board and turn."""

    def _create_state(
        rows: Optional[Sequence[str]] = None,
        player1: PlayerId = ALICE,
        player2: PlayerId = BOB,
        next_player: Optional[PlayerId] = None,
        seed: int = INITIAL_SEED,
    ) -> GameState:
        state = GameEngine.new_game(player1, player2, seed)
        update = {}
        if rows is not None:
            update["board"] = make_board(rows)
        if next_player is not None:
            update["next_player"] = next_player
        return state.model_copy(update=update) if update else state

    return _create_state


@pytest.fixture
def new_game() -> GameState:
    """Alice vs Bob on the default seed."""
    return GameEngine.new_game(ALICE, BOB, INITIAL_SEED)


@pytest.fixture
def empty_game(state_factory) -> GameState:
    """Alice vs Bob on a board without blocks."""
    return state_factory(EMPTY_ROWS)
