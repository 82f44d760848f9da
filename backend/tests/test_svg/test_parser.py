"""Tests for reading rendered snowflakes back."""

import pytest

from hashflake.engine.renderer import render
from hashflake.svg.parser import parse_snowflake_svg, path_vertices
from tests.conftest import SAMPLE_BRANCHES


def test_path_vertices():
    pts = path_vertices("M0 0 L10 0 L10 5 Z")
    assert pts.tolist() == [[0, 0], [10, 0], [10, 5]]


def test_parse_rendered(border_settings):
    parsed = parse_snowflake_svg(render(SAMPLE_BRANCHES, border_settings).to_svg())
    assert parsed.canvas_width == 2000.0
    assert parsed.canvas_height == 2000.0
    assert parsed.center == (1000.0, 1000.0)
    assert parsed.css_class == "snowflake"
    assert len(parsed.layers) == 2
    border = parsed.layers[0]
    assert border.attributes["stroke"] == "#123456"
    assert border.attributes["fill"] == "transparent"
    assert len(border.arms) == 6
    # spoke and branch capsules have five vertices, the hexagon edge four
    assert [len(p) for p in border.arms[0]] == [5, 4, 5, 5, 5, 5]
    assert parsed.path_count == 72


def test_parse_spoke_coordinates(draw_settings):
    parsed = parse_snowflake_svg(render(SAMPLE_BRANCHES, draw_settings).to_svg())
    spoke = parsed.layers[0].arms[0][0]
    assert spoke[0].tolist() == [1100.0, 1025.0]


def test_parse_core_only(draw_settings):
    parsed = parse_snowflake_svg(render([], draw_settings).to_svg())
    layer = parsed.layers[0]
    assert layer.arms == []
    assert layer.core is not None
    assert len(layer.core) == 6


def test_parse_invalid_xml():
    with pytest.raises(ValueError):
        parse_snowflake_svg("<svg")
