"""GET /api/preview — HTML sheet of rendered states."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse

from herefornow.codec.renderer import Renderer
from herefornow.config import settings
from herefornow.dependencies import get_renderer
from herefornow.preview import DEFAULT_STATES, PreviewState, render_preview_html

router = APIRouter()

_MAX_STATES = 32


def parse_counts(raw: str | None) -> list[int]:
    if not raw:
        return list(DEFAULT_STATES)
    try:
        counts = [int(part) for part in raw.split(",") if part.strip()]
    except ValueError:
        raise HTTPException(status_code=422, detail="counts must be comma-separated integers") from None
    if len(counts) > _MAX_STATES:
        raise HTTPException(status_code=422, detail=f"at most {_MAX_STATES} states")
    if any(c < 0 or c > settings.hfn_max_presence for c in counts):
        raise HTTPException(status_code=422, detail="counts out of range")
    return counts


@router.get("/preview", response_class=HTMLResponse)
async def preview(
    counts: str | None = Query(None, description="Comma-separated presence counts"),
    held: int | None = Query(None, ge=0, description="Held amount in wei shown on every card"),
    renderer: Renderer = Depends(get_renderer),
) -> HTMLResponse:
    states = [PreviewState(c, held) for c in parse_counts(counts)]
    return HTMLResponse(render_preview_html(states, renderer))
