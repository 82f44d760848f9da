"""Write clean SVG output from element definitions."""

from __future__ import annotations

from html import escape
from typing import Any


def _attr_str(elem: dict[str, Any]) -> str:
    attrs = {k: v for k, v in elem.items() if k not in ("tag", "children")}
    return " ".join(f'{k}="{escape(str(v))}"' for k, v in attrs.items())


def _write_element(elem: dict[str, Any], lines: list[str], depth: int) -> None:
    indent = "  " * depth
    tag = elem.get("tag", "path")
    attr_str = _attr_str(elem)
    opening = f"{indent}<{tag} {attr_str}" if attr_str else f"{indent}<{tag}"
    children = elem.get("children")
    if not children:
        lines.append(f"{opening} />")
        return
    lines.append(f"{opening}>")
    for child in children:
        _write_element(child, lines, depth + 1)
    lines.append(f"{indent}</{tag}>")


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
    description: str = "",
    styles: dict[str, str] | None = None,
    css_class: str = "",
) -> str:
    """Generate clean SVG markup from element definitions.

    Elements are dicts of attributes plus ``tag`` and optional ``children``
    (nested element dicts, used for ``<g>`` groups).
    """
    class_attr = f' class="{escape(css_class)}"' if css_class else ""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w:g} {canvas_h:g}" xmlns="http://www.w3.org/2000/svg"'
        f'{class_attr} role="img">',
    ]

    if title:
        lines.append(f"  <title>{escape(title)}</title>")
    if description:
        lines.append(f"  <desc>{escape(description)}</desc>")

    if styles:
        lines.append("  <style>")
        for selector, props in styles.items():
            lines.append(f"    {selector} {{ {props} }}")
        lines.append("  </style>")

    for elem in elements:
        _write_element(elem, lines, 1)

    lines.append("</svg>")
    return "\n".join(lines)
