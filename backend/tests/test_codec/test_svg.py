"""Tests for SVG assembly and the solid-fill threshold."""

import re

import pytest

from herefornow.codec.config import LayoutConfig
from herefornow.codec.errors import InvalidInputError
from herefornow.codec.svg import estimate_svg_length, generate_svg, is_solid, total_lines
from tests.conftest import EASE_OUT_5, EMPTY_SVG, LINEAR_5, SOLID_RECT

_USE_Y = re.compile(r'<use href="#l" x="300" y="(\d+)"/>')


def _ys(svg: str) -> list[int]:
    return [int(y) for y in _USE_Y.findall(svg)]


def test_zero_present_exact_output():
    assert generate_svg(0) == EMPTY_SVG


def test_header_structure():
    svg = generate_svg(3)
    assert svg.startswith("<svg")
    assert svg.endswith("</svg>")
    assert 'width="4000"' in svg
    assert 'height="4000"' in svg
    assert 'viewBox="0 0 1000 1000"' in svg
    assert 'fill="#0A0A0A"' in svg
    assert "<defs>" in svg
    assert 'href="#l"' in svg


@pytest.mark.parametrize("count", [0, 1, 5, 10, 100, 417])
def test_line_count_is_count_plus_two(count):
    svg = generate_svg(count)
    assert svg.count("<use") == count + 2
    assert SOLID_RECT not in svg


def test_line_positions_in_output(linear_layout):
    assert _ys(generate_svg(5)) == EASE_OUT_5
    assert _ys(generate_svg(5, linear_layout)) == LINEAR_5


def test_threshold_edge():
    below = generate_svg(417)
    assert below.count("<use") == 419
    assert SOLID_RECT not in below

    at = generate_svg(418)
    assert at.count("<use") == 0
    assert SOLID_RECT in at


def test_solid_is_constant_size():
    assert generate_svg(418) == generate_svg(10_000)


def test_custom_threshold():
    layout = LayoutConfig(solid_threshold=599)
    assert generate_svg(596, layout).count("<use") == 598
    assert generate_svg(597, layout).count("<use") == 0
    assert not is_solid(596, layout)
    assert is_solid(597, layout)


def test_deterministic():
    assert generate_svg(42) == generate_svg(42)


@pytest.mark.parametrize("count", [0, 1, 7, 250, 417, 418, 5000])
def test_estimate_matches_output(count):
    assert len(generate_svg(count)) == estimate_svg_length(count)


def test_total_lines():
    assert total_lines(0) == 2
    assert total_lines(9) == 11


@pytest.mark.parametrize("bad", [-1, 2.0, "3", True, None])
def test_rejects_bad_counts(bad):
    with pytest.raises(InvalidInputError):
        generate_svg(bad)


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        generate_svg(-5)
