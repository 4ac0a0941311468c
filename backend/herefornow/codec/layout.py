"""Line layout — maps a line count to y-coordinates inside the band.

The placement law is looked up by name in ``herefornow.codec.laws``.
"""

from __future__ import annotations

from herefornow.codec.config import DEFAULT_LAYOUT, LayoutConfig
from herefornow.codec.errors import InvalidInputError
from herefornow.codec.laws import get_registry


def line_positions(total_lines: int, layout: LayoutConfig = DEFAULT_LAYOUT) -> list[int]:
    """Y-coordinate of every line, first ``y_top`` and last ``y_bottom``.

    Raises:
        InvalidInputError: ``total_lines < 2``.
    """
    if total_lines < 2:
        raise InvalidInputError(f"total_lines must be >= 2, got {total_lines}")
    if total_lines == 2:
        return [layout.y_top, layout.y_bottom]

    law = get_registry().get(layout.interpolation)
    intervals = total_lines - 1
    span = layout.span
    y_top = layout.y_top
    return [y_top + law.fn(i, intervals, span) for i in range(total_lines)]
