"""Rule components of the dot4gravity engine.

Each module covers one concern and works on already-copied states or
boards; ``GameEngine`` wires them together.
"""

from .commitments import hash_coordinates
from .detonation import blast_area, explode
from .gravity import find_landing_cell
from .validators import can_detonate_bomb, can_drop_stone, can_place_bomb
from .victory import count_squares, find_winner_index

__all__ = [
    "blast_area",
    "can_detonate_bomb",
    "can_drop_stone",
    "can_place_bomb",
    "count_squares",
    "explode",
    "find_landing_cell",
    "find_winner_index",
    "hash_coordinates",
]
