"""Tests for line layout and the interpolation registry."""

import pytest

from herefornow.codec.config import LayoutConfig
from herefornow.codec.errors import InvalidInputError
from herefornow.codec.laws import InterpolationRegistry, InterpolationSpec, ease_out, get_registry
from herefornow.codec.layout import line_positions
from herefornow.codec.svg import generate_svg
from tests.conftest import EASE_OUT_5, LINEAR_5


def test_registered_laws():
    assert get_registry().names() == ["ease_out", "linear"]


def test_two_lines_are_the_band_edges():
    assert line_positions(2) == [200, 799]
    assert line_positions(2, LayoutConfig(interpolation="linear")) == [200, 799]


def test_ease_out_values():
    assert line_positions(3) == [200, 650, 799]
    assert line_positions(7) == EASE_OUT_5


def test_linear_values(linear_layout):
    assert line_positions(3, linear_layout) == [200, 500, 799]
    assert line_positions(7, linear_layout) == LINEAR_5


def test_ease_out_midpoint_arithmetic():
    # t=500, inv=500: 599 - (599 * 250000) // 10**6 = 599 - 149
    assert ease_out(1, 2, 599) == 450


@pytest.mark.parametrize("law", ["ease_out", "linear"])
@pytest.mark.parametrize("n", [2, 3, 4, 10, 57, 100, 419, 600, 1001])
def test_endpoints_and_monotonic(law, n):
    ys = line_positions(n, LayoutConfig(interpolation=law))
    assert len(ys) == n
    assert ys[0] == 200
    assert ys[-1] == 799
    assert all(a <= b for a, b in zip(ys, ys[1:]))


def test_ease_out_bunches_toward_bottom():
    ys = line_positions(101)
    upper = sum(1 for y in ys if y < 500)
    assert upper < len(ys) - upper


def test_rejects_fewer_than_two_lines():
    with pytest.raises(InvalidInputError):
        line_positions(1)


def test_unknown_law_rejected_on_construction():
    with pytest.raises(InvalidInputError, match="Unknown interpolation law"):
        LayoutConfig(interpolation="cubic")


def test_unknown_law_never_reaches_solid_render():
    with pytest.raises(InvalidInputError):
        generate_svg(1000, LayoutConfig(interpolation="nope"))


def test_registry_rejects_duplicates():
    registry = InterpolationRegistry()
    spec = InterpolationSpec(name="ease_out", fn=ease_out)
    registry.register(spec)
    with pytest.raises(ValueError, match="Duplicate"):
        registry.register(spec)


def test_layout_config_validation():
    with pytest.raises(InvalidInputError):
        LayoutConfig(y_top=800, y_bottom=200)
    with pytest.raises(InvalidInputError):
        LayoutConfig(solid_threshold=0)


def test_layout_block_height():
    layout = LayoutConfig()
    assert layout.span == 599
    assert layout.block_height == 600
