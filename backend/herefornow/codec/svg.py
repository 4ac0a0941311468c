"""SVG assembly for the presence image.

Output shape (no whitespace between elements):

    <svg xmlns=... width="4000" height="4000" viewBox="0 0 1000 1000">
      <rect width="1000" height="1000" fill="#0A0A0A"/>
      <defs><rect id="l" width="400" height="1" fill="#FFF"/></defs>
      <use href="#l" x="300" y="200"/> ...     (below the threshold)
      <rect x="300" y="200" width="400" height="600" fill="#FFF"/>   (at/above)
    </svg>
"""

from __future__ import annotations

import logging

from herefornow.codec.config import DEFAULT_LAYOUT, LayoutConfig
from herefornow.codec.errors import require_non_negative_int
from herefornow.codec.layout import line_positions

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
LINE_ID = "l"

# Boundary lines at y_top and y_bottom are always drawn
BOUNDARY_LINES = 2

_FOOTER = "</svg>"


def total_lines(presence_count: int) -> int:
    return require_non_negative_int(presence_count, "presence_count") + BOUNDARY_LINES


def is_solid(presence_count: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> bool:
    """True when the count renders as one solid block instead of lines."""
    return total_lines(presence_count) >= layout.solid_threshold


def svg_header(layout: LayoutConfig = DEFAULT_LAYOUT) -> str:
    px = layout.pixel_size
    vb = layout.viewbox_size
    return (
        f'<svg xmlns="{SVG_NS}" width="{px}" height="{px}" viewBox="0 0 {vb} {vb}">'
        f'<rect width="{vb}" height="{vb}" fill="{layout.background}"/>'
        f'<defs><rect id="{LINE_ID}" width="{layout.line_width}" '
        f'height="{layout.line_height}" fill="{layout.foreground}"/></defs>'
    )


def solid_block(layout: LayoutConfig = DEFAULT_LAYOUT) -> str:
    return (
        f'<rect x="{layout.x}" y="{layout.y_top}" width="{layout.line_width}" '
        f'height="{layout.block_height}" fill="{layout.foreground}"/>'
    )


def line_use(x: int, y: int) -> str:
    return f'<use href="#{LINE_ID}" x="{x}" y="{y}"/>'


def _line_cost(layout: LayoutConfig) -> int:
    """Upper bound on one ``<use>`` element; y never has more digits than y_bottom."""
    return len(line_use(layout.x, layout.y_bottom))


def estimate_svg_length(presence_count: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> int:
    """Upper bound on ``len(generate_svg(presence_count))``.

    Exact whenever every y has as many digits as ``y_bottom`` (true for the
    default band 200..799).
    """
    fixed = len(svg_header(layout)) + len(_FOOTER)
    if is_solid(presence_count, layout):
        return fixed + len(solid_block(layout))
    return fixed + total_lines(presence_count) * _line_cost(layout)


def generate_svg(presence_count: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> str:
    """Render the presence image for ``presence_count`` participants.

    Raises:
        InvalidInputError: negative or non-integer count.
    """
    n_lines = total_lines(presence_count)

    parts = [svg_header(layout)]
    if n_lines >= layout.solid_threshold:
        parts.append(solid_block(layout))
    else:
        x = layout.x
        parts.extend(line_use(x, y) for y in line_positions(n_lines, layout))
    parts.append(_FOOTER)

    svg = "".join(parts)
    logger.debug(
        "Rendered %d lines (%s) in %d bytes",
        n_lines,
        "solid" if n_lines >= layout.solid_threshold else layout.interpolation,
        len(svg),
    )
    return svg
