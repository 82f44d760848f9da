"""Shared test fixtures."""

from __future__ import annotations

import pytest

from hashflake.engine.session import reset_view_session
from hashflake.models.snowflake import Branch, Configuration, DrawSettings


# Golden values for seed "snow" with max_branches=6, size=500.
# derive(1, 6, "snow branches") == 5; positions / raw lengths per branch k.
SNOW_SEED = "snow"
SNOW_BRANCH_COUNT = 5
SNOW_POSITIONS = [388, 70, 51, 409, 227]
SNOW_RAW_LENGTHS = [150, 287, 316, 200, 93]
SNOW_FRAGMENT = "388:70,70:266,51:299,409:85,227:68"

SAMPLE_FRAGMENT = "100:50,200:75"
SAMPLE_BRANCHES = (
    Branch(position=100, length=50),
    Branch(position=200, length=75),
)

MALFORMED_FRAGMENTS = [
    "100:abc",
    "100",
    "1:2:3",
    "-1:5",
    "100:50,",
    "100:50,x:1",
    "a,b",
    "9" * 400 + ":1",
    "9" * 5000 + ":1",
    "\u0661\u0660\u0660:\u0665\u0660",
    "\uff11\uff10\uff10:\uff15\uff10",
]

# Digit runs too long for a finite float, or for int() at all
OVERSIZED_FRAGMENTS = ["9" * 400 + ":1", "9" * 5000 + ":1"]


@pytest.fixture
def draw_settings() -> DrawSettings:
    return DrawSettings(max_branches=6, size=500)


@pytest.fixture
def border_settings() -> DrawSettings:
    return DrawSettings(max_branches=6, size=500, border=True, border_color="#123456")


@pytest.fixture
def sample_configuration() -> Configuration:
    return Configuration(branches=SAMPLE_BRANCHES)


@pytest.fixture
def fresh_session():
    """Replace the app-wide view session for the duration of a test."""
    session = reset_view_session()
    yield session
    reset_view_session()
