"""Master API router — mounts all endpoint routers."""

from __future__ import annotations

from fastapi import APIRouter

from hashflake.api import health, session, snowflake

api_router = APIRouter(prefix="/api")

api_router.include_router(health.router)
api_router.include_router(snowflake.router)
api_router.include_router(session.router)
