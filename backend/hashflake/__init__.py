"""Hashflake: seeded six-fold snowflake SVG generator."""

__version__ = "0.1.0"
