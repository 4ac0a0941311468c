"""Fixed-point amount formatting (wei -> "1.2345 ETH")."""

from __future__ import annotations

from herefornow.codec.errors import InvalidInputError, require_non_negative_int

WEI_DECIMALS = 18
DISPLAY_PRECISION = 4
DEFAULT_UNIT = "ETH"


def format_amount(
    amount: int,
    unit: str = DEFAULT_UNIT,
    decimals: int = WEI_DECIMALS,
    precision: int = DISPLAY_PRECISION,
) -> str:
    """Format a smallest-unit integer as ``"<whole>.<fraction> <unit>"``.

    The fraction is truncated, not rounded: 1.99999 ETH renders as
    ``"1.9999 ETH"``.
    """
    require_non_negative_int(amount, "amount")
    if precision < 0 or precision > decimals:
        raise InvalidInputError(
            f"precision must be within [0, {decimals}], got {precision}"
        )

    scale = 10**decimals
    whole = amount // scale
    if precision == 0:
        return f"{whole} {unit}"
    fraction = (amount % scale) // 10 ** (decimals - precision)
    return f"{whole}.{fraction:0{precision}d} {unit}"
