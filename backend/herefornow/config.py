"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings

from herefornow.codec.config import LayoutConfig
from herefornow.codec.laws import get_registry
from herefornow.models.renderer_config import (
    DEFAULT_AUTHOR,
    DEFAULT_DESCRIPTION,
    DEFAULT_NAME,
    DEFAULT_URLS,
    RendererConfig,
)


class Settings(BaseSettings):
    hfn_env: str = "development"
    hfn_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    hfn_solid_threshold: int = 420
    hfn_interpolation: str = "ease_out"
    # Upper bound on counts accepted over HTTP
    hfn_max_presence: int = 100_000

    # Token metadata
    hfn_name: str = DEFAULT_NAME
    hfn_description: str = DEFAULT_DESCRIPTION
    hfn_author: str = DEFAULT_AUTHOR
    hfn_urls: list[str] = DEFAULT_URLS

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("hfn_interpolation")
    @classmethod
    def _known_law(cls, v: str) -> str:
        get_registry().get(v)
        return v

    def layout(self) -> LayoutConfig:
        return LayoutConfig(
            solid_threshold=self.hfn_solid_threshold,
            interpolation=self.hfn_interpolation,
        )

    def renderer_config(self) -> RendererConfig:
        return RendererConfig(
            name=self.hfn_name,
            description=self.hfn_description,
            author=self.hfn_author or None,
            urls=self.hfn_urls,
        )


settings = Settings()
