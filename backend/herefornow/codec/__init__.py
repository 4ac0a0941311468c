"""Presence image and token metadata codec."""

from herefornow.codec.config import DEFAULT_LAYOUT, LayoutConfig
from herefornow.codec.errors import DataURIError, InvalidInputError, RenderError
from herefornow.codec.metadata import build_token_uri, decode_image, parse_token_uri
from herefornow.codec.renderer import Renderer, create_renderer
from herefornow.codec.svg import estimate_svg_length, generate_svg

__all__ = [
    "DEFAULT_LAYOUT",
    "LayoutConfig",
    "DataURIError",
    "InvalidInputError",
    "RenderError",
    "Renderer",
    "build_token_uri",
    "create_renderer",
    "decode_image",
    "estimate_svg_length",
    "generate_svg",
    "parse_token_uri",
]
