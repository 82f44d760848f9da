"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from hashflake.main import app
from tests.conftest import OVERSIZED_FRAGMENTS, SAMPLE_FRAGMENT, SNOW_FRAGMENT, SNOW_SEED


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_generate_snow():
    response = client.post("/api/snowflake/generate", json={
        "seed": SNOW_SEED,
        "draw_settings": {"max_branches": 6, "size": 500},
    })
    assert response.status_code == 200
    data = response.json()
    assert data["fragment"] == SNOW_FRAGMENT
    assert len(data["branches"]) == 5
    assert data["hexagon_size"] == 51
    assert not data["fallback"]
    assert data["svg"].startswith("<?xml")


def test_generate_is_deterministic():
    body = {"seed": "frost", "draw_settings": {"max_branches": 10}}
    first = client.post("/api/snowflake/generate", json=body).json()
    second = client.post("/api/snowflake/generate", json=body).json()
    assert first["fragment"] == second["fragment"]
    assert first["svg"] == second["svg"]


def test_generate_empty_seed_is_random():
    response = client.post("/api/snowflake/generate", json={"seed": ""})
    assert response.status_code == 200
    data = response.json()
    assert data["fallback"]
    assert 1 <= len(data["branches"]) <= 6


def test_generate_rejects_bad_settings():
    response = client.post("/api/snowflake/generate", json={
        "seed": "snow",
        "draw_settings": {"max_branches": 0},
    })
    assert response.status_code == 422

    response = client.post("/api/snowflake/generate", json={
        "seed": "snow",
        "draw_settings": {"fill_color": "white"},
    })
    assert response.status_code == 422


def test_render_fragment():
    response = client.post("/api/snowflake/render", json={"fragment": "#" + SAMPLE_FRAGMENT})
    assert response.status_code == 200
    data = response.json()
    assert data["fragment"] == SAMPLE_FRAGMENT
    assert data["hexagon_size"] == 100
    assert data["branches"] == [
        {"length": 50.0, "position": 100.0},
        {"length": 75.0, "position": 200.0},
    ]
    assert not data["fallback"]


def test_render_malformed_fragment_falls_back():
    response = client.post("/api/snowflake/render", json={"fragment": "100:fifty"})
    assert response.status_code == 200
    data = response.json()
    assert data["fallback"]
    assert data["fragment"] != "100:fifty"
    assert data["branches"]


@pytest.mark.parametrize("fragment", OVERSIZED_FRAGMENTS)
def test_render_oversized_fragment_falls_back(fragment):
    response = client.post("/api/snowflake/render", json={"fragment": fragment})
    assert response.status_code == 200
    data = response.json()
    assert data["fallback"]
    assert data["branches"]


@pytest.mark.parametrize("fragment", OVERSIZED_FRAGMENTS)
def test_export_oversized_fragment_falls_back(fragment):
    response = client.post("/api/snowflake/export", json={"fragment": fragment})
    assert response.status_code == 200
    assert "<svg" in response.text


def test_export_attachment():
    response = client.post("/api/snowflake/export", json={
        "fragment": SAMPLE_FRAGMENT,
        "draw_settings": {"border": True},
    })
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    assert f'filename="{SAMPLE_FRAGMENT}.svg"' in response.headers["content-disposition"]
    assert 'class="layer layer-1"' in response.text


def test_validate_endpoint():
    svg = client.post("/api/snowflake/render", json={"fragment": SAMPLE_FRAGMENT}).json()["svg"]
    response = client.post("/api/snowflake/validate", json={"svg": svg})
    assert response.status_code == 200
    data = response.json()
    assert data["valid"]
    assert data["arm_count"] == 6


def test_validate_invalid_svg():
    response = client.post("/api/snowflake/validate", json={"svg": "<not-svg>"})
    assert response.status_code == 200
    assert not response.json()["valid"]


def test_session_flow(fresh_session):
    response = client.get("/api/session")
    assert response.status_code == 200
    assert response.json()["state"] == "ready"

    data = client.post("/api/session/seed", json={"seed": SNOW_SEED}).json()
    assert data["fragment"] == SNOW_FRAGMENT

    # Our own fragment echoed back changes nothing
    data = client.post("/api/session/fragment", json={"fragment": "#" + SNOW_FRAGMENT}).json()
    assert data["fragment"] == SNOW_FRAGMENT
    assert data["branches"][0]["length"] != 70

    data = client.post("/api/session/fragment", json={"fragment": SAMPLE_FRAGMENT}).json()
    assert data["fragment"] == SAMPLE_FRAGMENT
    assert len(data["branches"]) == 2


def test_session_settings(fresh_session):
    client.post("/api/session/fragment", json={"fragment": SAMPLE_FRAGMENT})
    data = client.post("/api/session/settings", json={"draw_settings": {"border": True}}).json()
    assert data["fragment"] == SAMPLE_FRAGMENT
    assert 'class="layer layer-1"' in data["svg"]
