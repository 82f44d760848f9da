"""/api/session — the server-side view session mirrored into a fragment."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from hashflake.config import Settings
from hashflake.dependencies import get_session, get_settings
from hashflake.engine.session import ViewSession
from hashflake.errors import GenerationError
from hashflake.models.requests import (
    SessionFragmentRequest,
    SessionSeedRequest,
    SessionSettingsRequest,
)
from hashflake.models.responses import SessionResponse

router = APIRouter(prefix="/session")


def _session_response(session: ViewSession, settings: Settings) -> SessionResponse:
    return SessionResponse(
        state=session.state.value,
        fragment=session.fragment,
        branches=list(session.configuration.branches),
        svg=session.render().to_svg(title=settings.default_title),
    )


@router.get("", response_model=SessionResponse)
async def get_session_state(
    session: ViewSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    return _session_response(session, settings)


@router.post("/seed", response_model=SessionResponse)
async def submit_seed(
    req: SessionSeedRequest,
    session: ViewSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    try:
        await session.submit_seed(req.seed)
    except GenerationError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    return _session_response(session, settings)


@router.post("/fragment", response_model=SessionResponse)
async def fragment_changed(
    req: SessionFragmentRequest,
    session: ViewSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    session.fragment_changed(req.fragment)
    return _session_response(session, settings)


@router.post("/settings", response_model=SessionResponse)
async def update_settings(
    req: SessionSettingsRequest,
    session: ViewSession = Depends(get_session),
    settings: Settings = Depends(get_settings),
) -> SessionResponse:
    try:
        await session.update_draw_settings(req.draw_settings)
    except GenerationError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    return _session_response(session, settings)
