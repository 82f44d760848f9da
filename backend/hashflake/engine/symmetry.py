"""Six-fold rotational symmetry checks.

Each arm is merged into one shape, rotated by 60° about the canvas centre and
compared with the next arm. The deviation is the symmetric-difference area
relative to the arm area: 0 for a perfectly symmetric figure.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np
from numpy.typing import NDArray
from shapely import affinity
from shapely.geometry import Polygon
from shapely.ops import unary_union
from shapely.validation import make_valid

from hashflake.engine.renderer import ARM_ANGLE, ARM_COUNT, Snowflake
from hashflake.svg.parser import parse_snowflake_svg

logger = logging.getLogger(__name__)

# Coordinates are written with 2 decimals; thin arms make rounding noise visible
SYMMETRY_TOLERANCE = 0.02


def arm_shape(polygons: Sequence[NDArray[np.float64]]):
    parts = []
    for pts in polygons:
        if len(pts) < 3:
            continue
        poly = Polygon(pts)
        parts.append(poly if poly.is_valid else make_valid(poly))
    return unary_union(parts)


def rotational_deviation(
    arms: Sequence[Sequence[NDArray[np.float64]]],
    center: tuple[float, float],
) -> float:
    """Worst relative mismatch between arm ``i`` rotated 60° and arm ``i + 1``."""
    if len(arms) < 2:
        return 0.0

    shapes = [arm_shape(arm) for arm in arms]
    worst = 0.0
    for i, shape in enumerate(shapes):
        nxt = shapes[(i + 1) % len(shapes)]
        if shape.is_empty and nxt.is_empty:
            continue
        rotated = affinity.rotate(shape, ARM_ANGLE, origin=center)
        area = max(shape.area, nxt.area)
        if area <= 0:
            continue
        worst = max(worst, rotated.symmetric_difference(nxt).area / area)
    return float(worst)


def snowflake_deviation(snowflake: Snowflake) -> float:
    return rotational_deviation(snowflake.arms, snowflake.center)


def validate_snowflake_svg(svg: str) -> dict:
    """Read a rendered document back and check its six-fold symmetry.

    Returns a dict with:
    - valid: bool
    - arm_count: int (arms per layer)
    - path_count: int
    - deviation: float (worst layer)
    - issues: list[str]
    """
    try:
        parsed = parse_snowflake_svg(svg)
    except ValueError as e:
        return {
            "valid": False,
            "arm_count": 0,
            "path_count": 0,
            "deviation": 0.0,
            "issues": [f"Parse error: {e}"],
        }

    issues: list[str] = []
    if not parsed.layers:
        issues.append("No snowflake layers found in SVG")

    deviation = 0.0
    arm_count = 0
    for i, layer in enumerate(parsed.layers):
        arm_count = max(arm_count, len(layer.arms))
        if not layer.arms:
            if layer.core is None:
                issues.append(f"Layer {i}: no arms and no core")
            continue
        if len(layer.arms) != ARM_COUNT:
            issues.append(f"Layer {i}: expected {ARM_COUNT} arms, found {len(layer.arms)}")
        sizes = {len(arm) for arm in layer.arms}
        if len(sizes) > 1:
            issues.append(f"Layer {i}: arms have differing path counts {sorted(sizes)}")
        layer_dev = rotational_deviation(layer.arms, parsed.center)
        deviation = max(deviation, layer_dev)
        if layer_dev > SYMMETRY_TOLERANCE:
            issues.append(f"Layer {i}: arms differ under 60° rotation (deviation {layer_dev:.4f})")

    if issues:
        logger.warning("Snowflake SVG failed validation: %s", "; ".join(issues))

    return {
        "valid": not issues,
        "arm_count": arm_count,
        "path_count": parsed.path_count,
        "deviation": round(deviation, 6),
        "issues": issues,
    }
