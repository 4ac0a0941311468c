"""API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    interpolation: str = "ease_out"
    solid_threshold: int = 0
    interpolation_laws: list[str] = Field(default_factory=list)


class TokenURIResponse(BaseModel):
    token_uri: str
    svg_bytes: int = 0
    lines: int = 0
    solid: bool = False


class DecodeResponse(BaseModel):
    metadata: dict[str, Any]
    svg: str
    lines: int = 0
