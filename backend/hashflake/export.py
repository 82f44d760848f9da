"""Export adapter — a rendered snowflake as a named, self-contained SVG file."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from hashflake.engine import codec
from hashflake.engine.renderer import Snowflake

logger = logging.getLogger(__name__)

DEFAULT_STEM = "snowflake"
SVG_MEDIA_TYPE = "image/svg+xml"


@dataclass(frozen=True)
class ExportFile:
    filename: str
    content: str
    media_type: str = SVG_MEDIA_TYPE


def export_filename(fragment: str | None) -> str:
    """``<fragment>.svg``, or ``snowflake.svg`` when nothing is persisted."""
    if codec.is_persisted(fragment):
        return f"{codec.strip_fragment(fragment)}.svg"
    return f"{DEFAULT_STEM}.svg"


def export_svg(
    snowflake: Snowflake | str,
    fragment: str | None = None,
    title: str = "Snowflake",
) -> ExportFile:
    """Wrap a rendered snowflake (or its finished markup) for download."""
    content = snowflake if isinstance(snowflake, str) else snowflake.to_svg(title=title)
    return ExportFile(filename=export_filename(fragment), content=content)


def write_export(export_file: ExportFile, directory: str | Path = ".") -> Path:
    path = Path(directory) / export_file.filename
    path.write_text(export_file.content, encoding="utf-8")
    logger.info("Wrote %s (%d bytes)", path, len(export_file.content))
    return path
