"""Renderer — a metadata config and a layout bundled behind one object."""

from __future__ import annotations

from typing import Any

from herefornow.codec.config import DEFAULT_LAYOUT, LayoutConfig
from herefornow.codec.metadata import build_metadata, build_token_uri
from herefornow.codec.svg import generate_svg
from herefornow.models.renderer_config import RendererConfig


class Renderer:
    """Pure renderer; holds no state beyond its two immutable configs."""

    def __init__(
        self,
        config: RendererConfig | None = None,
        layout: LayoutConfig | None = None,
    ) -> None:
        self.config = config or RendererConfig()
        self.layout = layout or DEFAULT_LAYOUT

    def svg(self, presence_count: int) -> str:
        return generate_svg(presence_count, self.layout)

    def metadata(self, presence_count: int, held_amount: int | None = None) -> dict[str, Any]:
        return build_metadata(presence_count, held_amount, self.config, self.layout)

    def token_uri(self, presence_count: int, held_amount: int | None = None) -> str:
        return build_token_uri(presence_count, held_amount, self.config, self.layout)

    def with_metadata(self, name: str, description: str) -> Renderer:
        """Copy of this renderer with a new name and description."""
        config = self.config.model_copy(update={"name": name, "description": description})
        return Renderer(config, self.layout)


def create_renderer(
    config: RendererConfig | None = None,
    layout: LayoutConfig | None = None,
) -> Renderer:
    """Factory function for creating a renderer instance."""
    return Renderer(config=config, layout=layout)
