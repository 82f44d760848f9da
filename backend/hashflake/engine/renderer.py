"""Geometry renderer — branch list to six rotated copies of one arm.

Arm-local coordinates put the arm along +x starting at the origin. Every
segment is a capsule: a ``2w``-wide quadrilateral closed by a pointed cap of
length ``w / 1.5``. Rotations use the SVG convention (y axis pointing down).
"""

from __future__ import annotations

import logging
import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from hashflake.models.snowflake import Branch, DrawSettings
from hashflake.svg.serializer import serialize_svg

logger = logging.getLogger(__name__)

VIEW_BOX_SIZE = 2000
ARM_COUNT = 6
ARM_ANGLE = 360.0 / ARM_COUNT
BRANCH_ANGLE = 45.0
# Pointed cap length as a fraction of the half-width
_CAP_RATIO = 1 / 1.5

_SPIN_STYLES = {
    "@keyframes hashflake-spin": "from { transform: rotate(0deg); } to { transform: rotate(360deg); }",
    ".snowflake.rotate": (
        "animation: hashflake-spin 60s linear infinite; "
        "transform-origin: center; transform-box: fill-box"
    ),
}


def rotation_matrix(degrees: float) -> NDArray[np.float64]:
    a = math.radians(degrees)
    return np.array([[math.cos(a), -math.sin(a)], [math.sin(a), math.cos(a)]])


def rotate_points(
    points: NDArray[np.float64],
    degrees: float,
    origin: tuple[float, float] = (0.0, 0.0),
) -> NDArray[np.float64]:
    """Rotate an Nx2 point array about ``origin``."""
    o = np.asarray(origin, dtype=np.float64)
    return (points - o) @ rotation_matrix(degrees).T + o


def capsule(start: float, length: float, half_width: float) -> NDArray[np.float64]:
    """Quadrilateral from ``start`` to ``start + length`` with a pointed cap."""
    end = start + length
    return np.array([
        [start, half_width],
        [end, half_width],
        [end + half_width * _CAP_RATIO, 0.0],
        [end, -half_width],
        [start, -half_width],
    ])


def hexagon(radius: float, center: tuple[float, float] = (0.0, 0.0)) -> NDArray[np.float64]:
    angles = np.radians(np.arange(ARM_COUNT) * ARM_ANGLE)
    return np.column_stack([np.cos(angles), np.sin(angles)]) * radius + np.asarray(center)


def hexagon_size(branches: Sequence[Branch]) -> float | None:
    """Radius of the central core: the smallest branch position."""
    if not branches:
        return None
    return min(b.position for b in branches)


def build_arm(
    branches: Sequence[Branch],
    size: float,
    half_width: float,
) -> list[NDArray[np.float64]]:
    """Polygons of a single arm in arm-local coordinates."""
    core = hexagon_size(branches)
    if core is None:
        return []

    spoke = capsule(core, size, half_width)
    edge = np.array([
        [0.0, half_width],
        [core, half_width],
        [core, -half_width],
        [0.0, -half_width],
    ])
    polygons = [spoke, rotate_points(edge, ARM_ANGLE, (core, 0.0))]

    for branch in branches:
        offshoot = capsule(branch.position, branch.length, half_width)
        pivot = (branch.position, 0.0)
        polygons.append(rotate_points(offshoot, BRANCH_ANGLE, pivot))
        polygons.append(rotate_points(offshoot, -BRANCH_ANGLE, pivot))
    return polygons


def path_data(points: NDArray[np.float64]) -> str:
    head, *rest = points
    parts = [f"M{head[0]:.2f} {head[1]:.2f}"]
    parts.extend(f"L{x:.2f} {y:.2f}" for x, y in rest)
    parts.append("Z")
    return " ".join(parts)


@dataclass
class Snowflake:
    """Rendered figure. Coordinates are absolute in view-box units."""

    view_box_size: float
    hexagon_size: float | None
    # ARM_COUNT entries, each the arm's polygons rotated into place
    arms: list[list[NDArray[np.float64]]] = field(default_factory=list)
    # Set only when there are no branches (bare core, no arms)
    core: NDArray[np.float64] | None = None
    # Path attribute sets, drawn in order (border first, fill on top)
    layers: list[dict[str, str]] = field(default_factory=list)
    rotate: bool = False

    @property
    def center(self) -> tuple[float, float]:
        return (self.view_box_size / 2, self.view_box_size / 2)

    @property
    def path_count(self) -> int:
        per_layer = sum(len(arm) for arm in self.arms) + (1 if self.core is not None else 0)
        return per_layer * len(self.layers)

    def elements(self) -> list[dict[str, Any]]:
        """Element dicts for the serializer: one group per layer, one per arm."""
        groups: list[dict[str, Any]] = []
        for i, attrs in enumerate(self.layers):
            children: list[dict[str, Any]] = []
            if self.core is not None:
                children.append({"tag": "path", "class": "core", "d": path_data(self.core)})
            for edge, arm in enumerate(self.arms):
                children.append({
                    "tag": "g",
                    "class": "arm",
                    "data-edge": str(edge),
                    "children": [{"tag": "path", "d": path_data(p)} for p in arm],
                })
            groups.append({"tag": "g", "class": f"layer layer-{i}", **attrs, "children": children})
        return groups

    def to_svg(self, title: str = "Snowflake") -> str:
        css_class = "snowflake rotate" if self.rotate else "snowflake"
        return serialize_svg(
            self.elements(),
            canvas_w=self.view_box_size,
            canvas_h=self.view_box_size,
            title=title,
            styles=_SPIN_STYLES if self.rotate else None,
            css_class=css_class,
        )


def layers_for(draw_settings: DrawSettings) -> list[dict[str, str]]:
    layers: list[dict[str, str]] = []
    if draw_settings.border:
        layers.append({
            "fill": "transparent",
            "stroke-width": str(draw_settings.stroke_width),
            "stroke": draw_settings.border_color,
        })
    layers.append({"fill": draw_settings.fill_color})
    return layers


def render(
    branches: Sequence[Branch],
    draw_settings: DrawSettings,
    view_box_size: float = VIEW_BOX_SIZE,
) -> Snowflake:
    """Compose the six-arm figure. Pure: the input sequence is not reordered."""
    half_width = draw_settings.branch_width / 2
    center = np.array([view_box_size / 2, view_box_size / 2])
    core_radius = hexagon_size(branches)

    snowflake = Snowflake(
        view_box_size=view_box_size,
        hexagon_size=core_radius,
        layers=layers_for(draw_settings),
        rotate=draw_settings.rotate,
    )

    if core_radius is None:
        logger.info("No branches to render, drawing bare hexagon core")
        snowflake.core = hexagon(half_width, (center[0], center[1]))
        return snowflake

    arm = build_arm(branches, draw_settings.size, half_width)
    for edge in range(ARM_COUNT):
        snowflake.arms.append([rotate_points(p, edge * ARM_ANGLE) + center for p in arm])

    extent = core_radius + draw_settings.size + half_width * (1 + _CAP_RATIO)
    if extent > view_box_size / 2:
        logger.warning(
            "Snowflake extends past the view box (%.0f > %.0f)", extent, view_box_size / 2
        )
    return snowflake
