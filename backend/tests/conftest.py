"""Shared test fixtures."""

from __future__ import annotations

import pytest

from herefornow.codec.config import LayoutConfig
from herefornow.codec.renderer import Renderer
from herefornow.models.renderer_config import RendererConfig

# Full image for zero participants: just the two boundary lines
EMPTY_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="4000" height="4000" viewBox="0 0 1000 1000">'
    '<rect width="1000" height="1000" fill="#0A0A0A"/>'
    '<defs><rect id="l" width="400" height="1" fill="#FFF"/></defs>'
    '<use href="#l" x="300" y="200"/>'
    '<use href="#l" x="300" y="799"/>'
    "</svg>"
)

SOLID_RECT = '<rect x="300" y="200" width="400" height="600" fill="#FFF"/>'

# y positions for 5 present (7 lines) under each law
EASE_OUT_5 = [200, 383, 533, 650, 733, 783, 799]
LINEAR_5 = [200, 300, 400, 500, 599, 699, 799]

ONE_ETH = 10**18


@pytest.fixture
def config() -> RendererConfig:
    return RendererConfig(
        name="Here, For Now",
        description="A shared intimate space held by a single collector.",
        author="ripe0x.eth",
        urls=["https://hfn.ripe.wtf"],
    )


@pytest.fixture
def renderer(config: RendererConfig) -> Renderer:
    return Renderer(config)


@pytest.fixture
def linear_layout() -> LayoutConfig:
    return LayoutConfig(interpolation="linear")
