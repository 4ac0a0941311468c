"""Tests for fixed-point amount formatting."""

import pytest

from herefornow.codec.amounts import format_amount
from herefornow.codec.errors import InvalidInputError
from tests.conftest import ONE_ETH


def test_zero():
    assert format_amount(0) == "0.0000 ETH"


def test_whole_ether():
    assert format_amount(ONE_ETH) == "1.0000 ETH"
    assert format_amount(2 * ONE_ETH) == "2.0000 ETH"


def test_truncates_instead_of_rounding():
    assert format_amount(1_999_999_999_999_999_999) == "1.9999 ETH"
    assert format_amount(99_995 * 10**13) == "0.9999 ETH"


def test_fraction_is_zero_padded():
    assert format_amount(10**14) == "0.0001 ETH"
    assert format_amount(10**14 - 1) == "0.0000 ETH"
    assert format_amount(ONE_ETH // 2) == "0.5000 ETH"


def test_large_amount():
    assert format_amount(123_456_789 * 10**12) == "123.4567 ETH"


def test_custom_unit_and_scale():
    assert format_amount(1_234_567, unit="USDC", decimals=6, precision=2) == "1.23 USDC"
    assert format_amount(5 * ONE_ETH, precision=0) == "5 ETH"


@pytest.mark.parametrize("bad", [-1, 1.5, "1", True, None])
def test_rejects_bad_amounts(bad):
    with pytest.raises(InvalidInputError):
        format_amount(bad)


def test_rejects_precision_beyond_decimals():
    with pytest.raises(InvalidInputError):
        format_amount(1, decimals=2, precision=3)
