"""Rasterization utilities — SVG to PNG/pixel array, layout to text grid.

``render_png``/``rasterize_svg`` go through CairoSVG. ``layout_grid`` builds
the same picture straight from the line layout, without a renderer, for
terminal previews.
"""

from __future__ import annotations

import io
import logging

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from herefornow.codec.config import DEFAULT_LAYOUT, LayoutConfig
from herefornow.codec.layout import line_positions
from herefornow.codec.svg import is_solid, total_lines

logger = logging.getLogger(__name__)

# Luminance above this (0-255) counts as a lit pixel; background is 0x0A.
_LIT_THRESHOLD = 128


def render_png(svg: str, size: int = 1000) -> bytes:
    """Render SVG string to square PNG bytes using cairosvg."""
    import cairosvg

    try:
        return cairosvg.svg2png(
            bytestring=svg.encode("utf-8"),
            output_width=size,
            output_height=size,
        )
    except Exception as e:
        logger.warning("Failed to render SVG to PNG: %s", e)
        raise


def rasterize_svg(svg: str, resolution: int = 1000) -> NDArray[np.uint8]:
    """Rasterize SVG to an RGBA numpy array (resolution x resolution x 4)."""
    png_data = render_png(svg, resolution)
    return np.array(Image.open(io.BytesIO(png_data)).convert("RGBA"))


def lit_mask(rgba: NDArray[np.uint8]) -> NDArray[np.int8]:
    """1 where a pixel is bright (foreground), 0 elsewhere."""
    luminance = rgba[..., :3].astype(np.float64).mean(axis=2)
    return (luminance > _LIT_THRESHOLD).astype(np.int8)


def row_coverage(grid: NDArray[np.int8]) -> NDArray[np.float64]:
    """Fraction of lit cells in every row."""
    if grid.shape[1] == 0:
        return np.zeros(grid.shape[0])
    return grid.sum(axis=1) / grid.shape[1]


def layout_grid(
    presence_count: int,
    layout: LayoutConfig = DEFAULT_LAYOUT,
    resolution: int = 64,
) -> NDArray[np.int8]:
    """Downsample the image to a resolution x resolution grid of lit cells."""
    grid = np.zeros((resolution, resolution), dtype=np.int8)
    vb = layout.viewbox_size
    c0 = layout.x * resolution // vb
    c1 = max(c0 + 1, (layout.x + layout.line_width) * resolution // vb)

    if is_solid(presence_count, layout):
        r0 = layout.y_top * resolution // vb
        r1 = max(r0 + 1, (layout.y_top + layout.block_height) * resolution // vb)
        grid[r0:r1, c0:c1] = 1
        return grid

    ys = np.asarray(line_positions(total_lines(presence_count), layout), dtype=np.int64)
    rows = np.clip(ys * resolution // vb, 0, resolution - 1)
    grid[rows, c0:c1] = 1
    return grid


def grid_fill_percentage(grid: NDArray[np.int8]) -> float:
    """Percentage of filled cells."""
    total = grid.size
    if total == 0:
        return 0.0
    return float(np.sum(grid) / total * 100)


def grid_to_halfblock(grid: NDArray[np.int8]) -> str:
    """Render grid using Unicode half-block characters for 2x vertical resolution.

    - █ (full block) = both top and bottom filled
    - ▀ (upper half) = top filled, bottom empty
    - ▄ (lower half) = bottom filled, top empty
    - space = both empty
    """
    rows, cols = grid.shape
    lines = []
    for r in range(0, rows - 1, 2):
        line_chars = []
        for c in range(cols):
            top = grid[r, c]
            bottom = grid[r + 1, c]
            if top and bottom:
                line_chars.append("█")
            elif top:
                line_chars.append("▀")
            elif bottom:
                line_chars.append("▄")
            else:
                line_chars.append(" ")
        lines.append("".join(line_chars))
    if rows % 2 == 1:
        lines.append("".join("▀" if grid[rows - 1, c] else " " for c in range(cols)))
    return "\n".join(lines)
