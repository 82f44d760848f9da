"""
Hashflake CLI — write a snowflake SVG from a seed or a persisted fragment.

Usage:
  hashflake snow                          # prints fragment + summary
  hashflake snow -o out/                  # saves out/<fragment>.svg
  hashflake snow -o flake.svg --border    # saves flake.svg with a border layer
  hashflake --fragment 100:50,200:75 -o . # re-renders a shared fragment
  hashflake snow --print                  # prints the SVG document
"""

from __future__ import annotations

import argparse
import os
import sys

from pydantic import ValidationError

from hashflake.engine import codec
from hashflake.engine.builder import build, random_branches
from hashflake.engine.renderer import render
from hashflake.engine.symmetry import validate_snowflake_svg
from hashflake.errors import EmptyFragmentError, FragmentDecodeError, GenerationError
from hashflake.export import ExportFile, export_svg, write_export
from hashflake.models.snowflake import Configuration, DrawSettings


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Hashflake — seeded snowflake SVG generator")
    parser.add_argument("seed", nargs="?", default="", help="Seed text (omit for a random snowflake)")
    parser.add_argument("-f", "--fragment", default="", help="Persisted position:length,... fragment")
    parser.add_argument("-o", "--output", help="Output .svg file or folder")
    parser.add_argument("--print", dest="print_svg", action="store_true", help="Print the SVG document")
    parser.add_argument("--validate", action="store_true", help="Check six-fold symmetry of the output")
    parser.add_argument("--title", default="Snowflake")

    draw = parser.add_argument_group("draw settings")
    draw.add_argument("--stroke-width", type=int, default=10)
    draw.add_argument("--branch-width", type=int, default=50)
    draw.add_argument("--max-branches", type=int, default=6)
    draw.add_argument("--size", type=int, default=500)
    draw.add_argument("--rotate", action="store_true")
    draw.add_argument("--border", action="store_true")
    draw.add_argument("--fill-color", default="#ffffff")
    draw.add_argument("--border-color", default="#000000")
    return parser


def _configuration(seed: str, fragment: str, draw_settings: DrawSettings) -> Configuration:
    if fragment:
        try:
            return codec.decode(fragment)
        except EmptyFragmentError:
            pass
        except FragmentDecodeError as e:
            print(f"  WARNING: {e}; using a random snowflake", file=sys.stderr)
    if seed:
        return Configuration(branches=tuple(build(seed, draw_settings)))
    return Configuration(branches=tuple(random_branches(draw_settings)))


def _save(export_file: ExportFile, output: str) -> str:
    if os.path.isdir(output) or output.endswith(os.sep):
        os.makedirs(output, exist_ok=True)
        return str(write_export(export_file, output))
    parent = os.path.dirname(output)
    if parent:
        os.makedirs(parent, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        f.write(export_file.content)
    return output


def main(argv: list[str] | None = None) -> int:
    args = _parser().parse_args(argv)

    try:
        draw_settings = DrawSettings(
            stroke_width=args.stroke_width,
            branch_width=args.branch_width,
            max_branches=args.max_branches,
            size=args.size,
            rotate=args.rotate,
            border=args.border,
            fill_color=args.fill_color,
            border_color=args.border_color,
        )
    except ValidationError as e:
        print(f"  ERROR: invalid draw settings\n{e}", file=sys.stderr)
        return 2

    try:
        configuration = _configuration(args.seed, args.fragment, draw_settings)
    except GenerationError as e:
        print(f"  ERROR: {e}", file=sys.stderr)
        return 1

    fragment = codec.encode(configuration)
    snowflake = render(configuration.branches, draw_settings)
    export_file = export_svg(snowflake, fragment, title=args.title)

    print(f"  #{fragment}")
    print(f"  {len(configuration.branches)} branches | hexagon {snowflake.hexagon_size} | {snowflake.path_count} paths")

    if args.validate:
        report = validate_snowflake_svg(export_file.content)
        print(f"  symmetry deviation {report['deviation']:.6f} ({'ok' if report['valid'] else 'FAILED'})")
        for issue in report["issues"]:
            print(f"    - {issue}")
        if not report["valid"]:
            return 1

    if args.output:
        try:
            saved = _save(export_file, args.output)
        except OSError as e:
            print(f"  ERROR: cannot write {args.output}: {e}", file=sys.stderr)
            return 1
        print(f"  → Saved: {saved}")
    if args.print_svg:
        print(export_file.content)
    return 0


if __name__ == "__main__":
    sys.exit(main())
