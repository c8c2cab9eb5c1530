"""Commit-reveal hashing for hidden bomb targets.

A bomb is stored only as a commitment: the salt with the target row and
column spliced into its last two bytes, hashed twice with BLAKE2b-256. The
raw coordinate never appears in the state, and revealing it later means
supplying the same coordinate and salt again.
"""

from __future__ import annotations

import hashlib

from ..config import SALT_LENGTH
from ..models import Coordinates

__all__ = ["hash_coordinates"]

_ROW_BYTE = 30
_COL_BYTE = 31


def _blake2_256(data: bytes) -> bytes:
    return hashlib.blake2b(data, digest_size=32).digest()


def hash_coordinates(coordinates: Coordinates, salt: bytes) -> str:
    """Return the hex commitment for ``coordinates`` under ``salt``."""
    if len(salt) != SALT_LENGTH:
        raise ValueError(f"Salt must be {SALT_LENGTH} bytes, got {len(salt)}")
    spliced = bytearray(salt)
    spliced[_ROW_BYTE] = coordinates.row
    spliced[_COL_BYTE] = coordinates.col
    return _blake2_256(_blake2_256(bytes(spliced))).hex()
