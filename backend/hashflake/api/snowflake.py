"""POST /api/snowflake/* — stateless generation, rendering and export."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response

from hashflake.config import Settings
from hashflake.dependencies import get_settings
from hashflake.engine import codec
from hashflake.engine.builder import build_async, random_branches
from hashflake.engine.renderer import render
from hashflake.engine.symmetry import validate_snowflake_svg
from hashflake.errors import EmptyFragmentError, FragmentDecodeError, GenerationError
from hashflake.export import export_svg
from hashflake.models.requests import GenerateRequest, RenderRequest, ValidateRequest
from hashflake.models.responses import SnowflakeResponse, ValidateResponse
from hashflake.models.snowflake import Configuration, DrawSettings

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/snowflake")


def _respond(
    configuration: Configuration,
    draw_settings: DrawSettings,
    settings: Settings,
    fallback: bool = False,
) -> SnowflakeResponse:
    snowflake = render(configuration.branches, draw_settings, settings.view_box_size)
    return SnowflakeResponse(
        fragment=codec.encode(configuration),
        branches=list(configuration.branches),
        hexagon_size=snowflake.hexagon_size,
        svg=snowflake.to_svg(title=settings.default_title),
        fallback=fallback,
    )


def _from_fragment(fragment: str, draw_settings: DrawSettings) -> tuple[Configuration, bool]:
    try:
        return codec.decode(fragment), False
    except EmptyFragmentError:
        pass
    except FragmentDecodeError as e:
        logger.warning("Rejected fragment %r: %s", fragment, e)
    return Configuration(branches=tuple(random_branches(draw_settings))), True


@router.post("/generate", response_model=SnowflakeResponse)
async def generate(
    req: GenerateRequest,
    settings: Settings = Depends(get_settings),
) -> SnowflakeResponse:
    if not req.seed:
        configuration = Configuration(branches=tuple(random_branches(req.draw_settings)))
        return _respond(configuration, req.draw_settings, settings, fallback=True)

    try:
        branches = await build_async(req.seed, req.draw_settings)
    except GenerationError as e:
        raise HTTPException(status_code=503, detail=str(e)) from e
    return _respond(Configuration(branches=tuple(branches)), req.draw_settings, settings)


@router.post("/render", response_model=SnowflakeResponse)
async def render_fragment(
    req: RenderRequest,
    settings: Settings = Depends(get_settings),
) -> SnowflakeResponse:
    configuration, fallback = _from_fragment(req.fragment, req.draw_settings)
    return _respond(configuration, req.draw_settings, settings, fallback=fallback)


@router.post("/export")
async def export(
    req: RenderRequest,
    settings: Settings = Depends(get_settings),
) -> Response:
    configuration, _ = _from_fragment(req.fragment, req.draw_settings)
    snowflake = render(configuration.branches, req.draw_settings, settings.view_box_size)
    export_file = export_svg(snowflake, codec.encode(configuration), title=settings.default_title)
    return Response(
        content=export_file.content,
        media_type=export_file.media_type,
        headers={"Content-Disposition": f'attachment; filename="{export_file.filename}"'},
    )


@router.post("/validate", response_model=ValidateResponse)
async def validate(req: ValidateRequest) -> ValidateResponse:
    return ValidateResponse(**validate_snowflake_svg(req.svg))
