"""GET /api/svg, GET /api/png, POST /api/token-uri[/decode]."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import Response

from herefornow.codec.metadata import decode_image, parse_token_uri
from herefornow.codec.renderer import Renderer
from herefornow.codec.svg import is_solid, total_lines
from herefornow.config import settings
from herefornow.dependencies import get_renderer
from herefornow.models.requests import DecodeRequest, TokenURIRequest
from herefornow.models.responses import DecodeResponse, TokenURIResponse

router = APIRouter()


def _count_query(default: int = 0):
    return Query(default, ge=0, le=settings.hfn_max_presence, description="Presence count")


@router.get("/svg")
async def svg(
    count: int = _count_query(),
    renderer: Renderer = Depends(get_renderer),
) -> Response:
    return Response(content=renderer.svg(count), media_type="image/svg+xml")


@router.get("/png")
async def png(
    count: int = _count_query(),
    size: int = Query(1000, ge=16, le=4000, description="Output width/height in pixels"),
    renderer: Renderer = Depends(get_renderer),
) -> Response:
    from herefornow.utils.rasterizer import render_png

    return Response(content=render_png(renderer.svg(count), size), media_type="image/png")


@router.post("/token-uri", response_model=TokenURIResponse)
async def token_uri(
    req: TokenURIRequest,
    renderer: Renderer = Depends(get_renderer),
) -> TokenURIResponse:
    if req.presence_count > settings.hfn_max_presence:
        raise HTTPException(status_code=422, detail="presence_count out of range")
    if req.metadata is not None:
        renderer = renderer.with_metadata(
            req.metadata.name if req.metadata.name is not None else renderer.config.name,
            req.metadata.description
            if req.metadata.description is not None
            else renderer.config.description,
        )

    uri = renderer.token_uri(req.presence_count, req.held_amount)
    solid = is_solid(req.presence_count, renderer.layout)
    return TokenURIResponse(
        token_uri=uri,
        svg_bytes=len(renderer.svg(req.presence_count).encode("utf-8")),
        lines=0 if solid else total_lines(req.presence_count),
        solid=solid,
    )


@router.post("/token-uri/decode", response_model=DecodeResponse)
async def decode(req: DecodeRequest) -> DecodeResponse:
    metadata = parse_token_uri(req.token_uri)
    svg = decode_image(metadata)
    return DecodeResponse(metadata=metadata, svg=svg, lines=svg.count("<use"))
