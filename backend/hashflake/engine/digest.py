"""Deterministic number generator — seed text to reproducible integers.

Every derived quantity hashes its own composite seed material
(``"<seed> branches"``, ``"<seed> branch <k> Length"``, ...), so values
drawn from the same seed look independent of each other.
"""

from __future__ import annotations

import asyncio
import hashlib
import math

from hashflake.errors import GenerationError


def digest_int(seed_material: str) -> int:
    """SHA-1 of the UTF-8 bytes, read as a big-endian unsigned integer."""
    try:
        h = hashlib.sha1(seed_material.encode("utf-8"), usedforsecurity=False)
    except ValueError as e:
        raise GenerationError(f"SHA-1 unavailable: {e}") from e
    return int.from_bytes(h.digest(), "big")


def derive(minimum: int, maximum: int, seed_material: str) -> int:
    """Map ``seed_material`` into ``[minimum, maximum)``.

    Rounds with ceiling. The modular result is already integral, so this only
    matters if callers pass fractional bounds.
    """
    if minimum >= maximum:
        raise ValueError(f"empty derivation range [{minimum}, {maximum})")
    return math.ceil(minimum + digest_int(seed_material) % (maximum - minimum))


async def derive_async(minimum: int, maximum: int, seed_material: str) -> int:
    """``derive`` run off the event loop."""
    return await asyncio.to_thread(derive, minimum, maximum, seed_material)
