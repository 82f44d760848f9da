"""Branch model builder — seed text to an ordered branch list."""

from __future__ import annotations

import asyncio
import logging
import math
import random

from hashflake.engine.digest import derive, derive_async
from hashflake.models.snowflake import Branch, DrawSettings

logger = logging.getLogger(__name__)


def branches_material(seed: str) -> str:
    return f"{seed} branches"


def length_material(seed: str, k: int) -> str:
    return f"{seed} branch {k} Length"


def position_material(seed: str, k: int) -> str:
    return f"{seed} branch {k} Position"


def taper(raw_length: float, position: float, size: float) -> float:
    """Shorten branches that sprout far from the root: ``L * sqrt(1 - p/size)``."""
    return raw_length * math.sqrt(max(0.0, 1 - position / size))


def branch_count(seed: str, max_branches: int) -> int:
    # [1, 1) is empty; a single allowed branch needs no derivation
    if max_branches <= 1:
        return 1
    return derive(1, max_branches, branches_material(seed))


def build(seed: str, draw_settings: DrawSettings) -> list[Branch]:
    """Derive the branch list for ``seed``. Same inputs, same branches."""
    if not seed:
        raise ValueError("seed must be non-empty")

    size = draw_settings.size
    branches: list[Branch] = []
    for k in range(branch_count(seed, draw_settings.max_branches)):
        raw_length = derive(0, size, length_material(seed, k))
        position = derive(0, size, position_material(seed, k))
        branches.append(Branch(length=taper(raw_length, position, size), position=position))

    logger.debug("Built %d branches for seed %r", len(branches), seed)
    return branches


async def build_async(seed: str, draw_settings: DrawSettings) -> list[Branch]:
    """Concurrent ``build``. Returns only once every branch is derived."""
    if not seed:
        raise ValueError("seed must be non-empty")

    size = draw_settings.size
    if draw_settings.max_branches <= 1:
        count = 1
    else:
        count = await derive_async(1, draw_settings.max_branches, branches_material(seed))

    async def _branch(k: int) -> Branch:
        raw_length, position = await asyncio.gather(
            derive_async(0, size, length_material(seed, k)),
            derive_async(0, size, position_material(seed, k)),
        )
        return Branch(length=taper(raw_length, position, size), position=position)

    branches = await asyncio.gather(*(_branch(k) for k in range(count)))
    return list(branches)


def random_branches(draw_settings: DrawSettings, rng: random.Random | None = None) -> list[Branch]:
    """Fallback when neither a seed nor a persisted fragment is available."""
    rng = rng or random.Random()

    def _unit() -> float:
        # (0, 1] so ceil never yields zero branches
        return 1.0 - rng.random()

    count = math.ceil(_unit() * draw_settings.max_branches)
    return [
        Branch(
            position=math.ceil(_unit() * draw_settings.size),
            length=math.ceil(_unit() * draw_settings.size),
        )
        for _ in range(count)
    ]
