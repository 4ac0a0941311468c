"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class MetadataOverride(BaseModel):
    name: str | None = Field(default=None, description="Override the configured name")
    description: str | None = Field(default=None, description="Override the configured description")


class TokenURIRequest(BaseModel):
    presence_count: int = Field(..., ge=0, description="Number of present participants")
    held_amount: int | None = Field(
        default=None,
        ge=0,
        description="Total held, in wei; adds the held-amount attribute",
    )
    metadata: MetadataOverride | None = Field(default=None)


class DecodeRequest(BaseModel):
    token_uri: str = Field(..., description="data:application/json;base64,... URI")
