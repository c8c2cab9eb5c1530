"""Deterministic pseudorandom coordinates for board setup.

The generator is a 16-bit linear congruential sequence evaluated with
unsigned 32-bit saturating arithmetic, so every host that replays a game
derives the same block layout from the same seed. Nothing here may consult
wall-clock time or external entropy.
"""

from __future__ import annotations

from typing import List, Tuple

from .config import (
    BOARD_HEIGHT,
    BOARD_WIDTH,
    RNG_INCREMENT,
    RNG_MODULUS,
    RNG_MULTIPLIER,
    U32_MAX,
)
from .errors import InvalidSeedError
from .models import Coordinates

__all__ = [
    "generate_block_coordinates",
    "linear_congruential_generator",
    "random_coordinates",
    "validate_seed",
]


def validate_seed(seed: int) -> int:
    """Return ``seed`` if it fits in an unsigned 32-bit integer."""
    if isinstance(seed, bool) or not isinstance(seed, int) or not 0 <= seed <= U32_MAX:
        raise InvalidSeedError("Seed must be an unsigned 32-bit integer", seed=seed)
    return seed


def linear_congruential_generator(seed: int) -> int:
    """Advance the sequence by one step."""
    product = min(RNG_MULTIPLIER * seed, U32_MAX)
    return min(product + RNG_INCREMENT, U32_MAX) % RNG_MODULUS


def random_coordinates(seed: int) -> Tuple[Coordinates, int]:
    """Draw one coordinate pair, returning it with the advanced seed.

    Both axes are reduced modulo ``size - 1``, so generated rows and columns
    stay within 0-8 and never reach the last index.
    """
    seed_1 = linear_congruential_generator(seed)
    seed_2 = linear_congruential_generator(seed_1)
    coordinates = Coordinates(
        row=seed_1 % (BOARD_WIDTH - 1),
        col=seed_2 % (BOARD_HEIGHT - 1),
    )
    return coordinates, seed_2


def generate_block_coordinates(seed: int, count: int) -> Tuple[List[Coordinates], int]:
    """Draw ``count`` mutually distinct coordinates.

    The seed advances on every draw, including draws that collide with an
    already chosen coordinate. Returns the coordinates in draw order and the
    final seed.
    """
    if count > (BOARD_WIDTH - 1) * (BOARD_HEIGHT - 1):
        raise ValueError(f"Cannot draw {count} distinct coordinates")
    blocks: List[Coordinates] = []
    while len(blocks) < count:
        coordinates, seed = random_coordinates(seed)
        if coordinates not in blocks:
            blocks.append(coordinates)
    return blocks, seed
