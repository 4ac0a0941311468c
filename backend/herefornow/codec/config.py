"""Layout configuration — geometry constants and the solid-fill switch."""

from __future__ import annotations

from dataclasses import dataclass

from herefornow.codec.errors import InvalidInputError
from herefornow.codec.laws import get_registry


@dataclass(frozen=True)
class LayoutConfig:
    """Controls where lines land and when the image collapses to a block."""

    # Raster size vs. internal coordinate space (scale factor 4)
    pixel_size: int = 4000
    viewbox_size: int = 1000

    # Colors
    background: str = "#0A0A0A"
    foreground: str = "#FFF"

    # Line band: lines span [y_top, y_bottom] inclusive
    x: int = 300
    y_top: int = 200
    y_bottom: int = 799
    line_width: int = 400
    line_height: int = 1

    # total_lines >= threshold renders one solid rectangle
    solid_threshold: int = 420

    # Registered interpolation law name (see herefornow.codec.laws)
    interpolation: str = "ease_out"

    def __post_init__(self) -> None:
        if self.y_bottom < self.y_top:
            raise InvalidInputError("y_bottom must not be above y_top")
        if self.solid_threshold < 1:
            raise InvalidInputError("solid_threshold must be positive")
        if self.viewbox_size <= 0 or self.pixel_size <= 0:
            raise InvalidInputError("pixel_size and viewbox_size must be positive")
        # Unknown names raise InvalidInputError
        get_registry().get(self.interpolation)

    @property
    def span(self) -> int:
        return self.y_bottom - self.y_top

    @property
    def block_height(self) -> int:
        """Height of the solid block: the band plus the last line's height."""
        return self.span + self.line_height


DEFAULT_LAYOUT = LayoutConfig()
