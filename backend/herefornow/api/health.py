"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from herefornow import __version__
from herefornow.codec.laws import get_registry
from herefornow.config import settings
from herefornow.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        interpolation=settings.hfn_interpolation,
        solid_threshold=settings.hfn_solid_threshold,
        interpolation_laws=get_registry().names(),
    )
