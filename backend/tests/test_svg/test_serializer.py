"""Tests for the SVG serializer."""

from hashflake.svg.serializer import serialize_svg


def test_flat_elements():
    svg = serialize_svg([{"tag": "path", "d": "M0 0 L1 1 Z", "fill": "#fff"}], 24, 24)
    assert '<svg viewBox="0 0 24 24" xmlns="http://www.w3.org/2000/svg" role="img">' in svg
    assert '  <path d="M0 0 L1 1 Z" fill="#fff" />' in svg
    assert svg.endswith("</svg>")


def test_nested_groups_indented():
    svg = serialize_svg(
        [{"tag": "g", "class": "layer", "children": [
            {"tag": "g", "class": "arm", "children": [{"tag": "path", "d": "M0 0 Z"}]},
        ]}],
        100,
        100,
    )
    lines = svg.splitlines()
    assert '  <g class="layer">' in lines
    assert '    <g class="arm">' in lines
    assert '      <path d="M0 0 Z" />' in lines
    assert lines.count("  </g>") == 1
    assert lines.count("    </g>") == 1


def test_empty_group_self_closes():
    svg = serialize_svg([{"tag": "g", "class": "empty", "children": []}], 10, 10)
    assert '  <g class="empty" />' in svg


def test_title_and_class_escaped():
    svg = serialize_svg([], 10, 10, title="a <b> & c", css_class="snowflake rotate")
    assert "<title>a &lt;b&gt; &amp; c</title>" in svg
    assert 'class="snowflake rotate"' in svg


def test_styles_block():
    svg = serialize_svg([], 10, 10, styles={".x": "fill: red"})
    assert "  <style>" in svg
    assert "    .x { fill: red }" in svg


def test_fractional_canvas():
    svg = serialize_svg([], 12.5, 2000)
    assert 'viewBox="0 0 12.5 2000"' in svg
