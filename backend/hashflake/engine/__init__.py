"""Hashflake generation engine: digest, builder, codec, renderer."""

from hashflake.engine.builder import build, build_async, random_branches
from hashflake.engine.codec import decode, encode
from hashflake.engine.digest import derive
from hashflake.engine.renderer import Snowflake, render

__all__ = [
    "build",
    "build_async",
    "random_branches",
    "decode",
    "encode",
    "derive",
    "Snowflake",
    "render",
]
