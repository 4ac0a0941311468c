"""FastAPI dependency injection."""

from __future__ import annotations

from herefornow.codec.renderer import Renderer, create_renderer
from herefornow.config import settings


def get_renderer() -> Renderer:
    return create_renderer(settings.renderer_config(), settings.layout())
