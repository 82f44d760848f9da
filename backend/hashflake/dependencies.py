"""FastAPI dependency injection."""

from __future__ import annotations

from hashflake.config import settings


def get_settings():
    return settings


def get_session():
    from hashflake.engine.session import get_view_session

    return get_view_session()
