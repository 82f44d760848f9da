"""SVG reader for rendered snowflakes — facade over svgpathtools + ElementTree.

Reads a document written by ``Snowflake.to_svg`` back into per-layer,
per-arm polygon point arrays so the figure can be checked independently of
the renderer that produced it.
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray
from svgpathtools import Line, parse_path

logger = logging.getLogger(__name__)

_SVG_NS = "{http://www.w3.org/2000/svg}"
_VIEWBOX_RE = re.compile(r"[\s,]+")


@dataclass
class ParsedLayer:
    attributes: dict[str, str] = field(default_factory=dict)
    # One entry per arm group, in data-edge order
    arms: list[list[NDArray[np.float64]]] = field(default_factory=list)
    core: NDArray[np.float64] | None = None


@dataclass
class ParsedSnowflake:
    canvas_width: float = 0.0
    canvas_height: float = 0.0
    css_class: str = ""
    layers: list[ParsedLayer] = field(default_factory=list)

    @property
    def center(self) -> tuple[float, float]:
        return (self.canvas_width / 2, self.canvas_height / 2)

    @property
    def path_count(self) -> int:
        return sum(
            sum(len(arm) for arm in layer.arms) + (1 if layer.core is not None else 0)
            for layer in self.layers
        )


def _local(tag: str) -> str:
    return tag[len(_SVG_NS):] if tag.startswith(_SVG_NS) else tag


def _classes(elem: ET.Element) -> set[str]:
    return set(elem.get("class", "").split())


def path_vertices(d: str) -> NDArray[np.float64]:
    """Vertices of a straight-line path (start of every segment)."""
    path = parse_path(d)
    points = []
    for seg in path:
        if not isinstance(seg, Line):
            logger.debug("Non-line segment %s sampled at its start point", type(seg).__name__)
        points.append((seg.start.real, seg.start.imag))
    return np.array(points, dtype=np.float64)


def _parse_layer(group: ET.Element) -> ParsedLayer:
    layer = ParsedLayer(attributes={k: v for k, v in group.attrib.items() if k != "class"})
    arms: list[tuple[int, list[NDArray[np.float64]]]] = []
    for child in group:
        tag = _local(child.tag)
        if tag == "path" and "core" in _classes(child):
            layer.core = path_vertices(child.get("d", ""))
        elif tag == "g" and "arm" in _classes(child):
            edge = int(child.get("data-edge", len(arms)))
            polys = [
                path_vertices(p.get("d", ""))
                for p in child
                if _local(p.tag) == "path" and p.get("d")
            ]
            arms.append((edge, polys))
    layer.arms = [polys for _, polys in sorted(arms, key=lambda a: a[0])]
    return layer


def parse_snowflake_svg(svg_text: str) -> ParsedSnowflake:
    """Parse a snowflake document. Raises ``ValueError`` on malformed XML."""
    try:
        root = ET.fromstring(svg_text.encode("utf-8"))
    except ET.ParseError as e:
        raise ValueError(f"invalid SVG: {e}") from e

    parsed = ParsedSnowflake(css_class=root.get("class", ""))
    view_box = root.get("viewBox")
    if view_box:
        parts = _VIEWBOX_RE.split(view_box.strip())
        if len(parts) >= 4:
            parsed.canvas_width = float(parts[2])
            parsed.canvas_height = float(parts[3])

    for child in root:
        if _local(child.tag) == "g" and "layer" in _classes(child):
            parsed.layers.append(_parse_layer(child))

    logger.info(
        "Parsed snowflake SVG: %d layers, %d paths, canvas %.0f×%.0f",
        len(parsed.layers),
        parsed.path_count,
        parsed.canvas_width,
        parsed.canvas_height,
    )
    return parsed
