"""Tests for the deterministic number generator."""

from __future__ import annotations

import asyncio

import pytest

from hashflake.engine.digest import derive, derive_async, digest_int


def test_digest_int_is_sha1_big_endian():
    assert digest_int("abc") == int("a9993e364706816aba3e25717850c26c9cd0d89d", 16)


def test_golden_snow_branch_count():
    assert derive(1, 6, "snow branches") == 5


def test_golden_snow_positions():
    assert derive(0, 500, "snow branch 0 Position") == 388
    assert derive(0, 500, "snow branch 0 Length") == 150


def test_deterministic():
    assert derive(0, 1000, "same material") == derive(0, 1000, "same material")


def test_range():
    for i in range(50):
        value = derive(3, 10, f"material {i}")
        assert 3 <= value < 10
        assert isinstance(value, int)


def test_distinct_materials_vary():
    values = {derive(0, 1_000_000, f"seed branch {k} Length") for k in range(20)}
    assert len(values) > 15


def test_unicode_material():
    assert derive(0, 100, "❄ flocon") == derive(0, 100, "❄ flocon")


@pytest.mark.parametrize("minimum,maximum", [(1, 1), (5, 2)])
def test_empty_range_raises(minimum, maximum):
    with pytest.raises(ValueError):
        derive(minimum, maximum, "snow")


def test_async_matches_sync():
    result = asyncio.run(derive_async(1, 6, "snow branches"))
    assert result == derive(1, 6, "snow branches") == 5
