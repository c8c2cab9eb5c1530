"""Fixed configuration for the dot4gravity engine.

Board geometry, bomb inventory and RNG coefficients are process-wide
constants. Every participant that replays a game must derive the same
states from the same inputs, so none of them can be changed at runtime.

Environment flags are read once at import time and only affect logging:

    DOT4GRAVITY_DEBUG_ENGINE=1    log a board rendering after every move
    DOT4GRAVITY_LOG_LEVEL=DEBUG   default level for setup_logging()
"""

from __future__ import annotations

import os
from typing import Final

BOARD_WIDTH: Final[int] = 10
BOARD_HEIGHT: Final[int] = 10

NUM_OF_PLAYERS: Final[int] = 2
BOMB_AMOUNT_PER_PLAYER: Final[int] = 3
BOMB_ENERGY_PER_PLAYER: Final[int] = 5
NUM_OF_BLOCKS: Final[int] = 10
SQUARES_TO_WIN: Final[int] = 3

# Linear congruential generator: seed' = (MULTIPLIER * seed + INCREMENT) % MODULUS
INITIAL_SEED: Final[int] = 123_456
RNG_MULTIPLIER: Final[int] = 75
RNG_INCREMENT: Final[int] = 74
RNG_MODULUS: Final[int] = 2**16
U32_MAX: Final[int] = 2**32 - 1

SALT_LENGTH: Final[int] = 32

DEBUG_ENGINE: Final[bool] = os.environ.get(
    "DOT4GRAVITY_DEBUG_ENGINE",
    "0",
) in {"1", "true", "yes", "on"}

LOG_LEVEL: Final[str] = os.environ.get("DOT4GRAVITY_LOG_LEVEL", "INFO").upper()
