"""
formatting.py — Rendering scaled amounts as strings

Two renderings are provided:

- to_string(): the canonical numeric string, rounded to the settings
  increment and always carrying exactly `precision` fractional digits.
  Parsing it back with the same settings yields the same amount.
- format_amount(): the display string built from the positive/negative
  pattern, the symbol, the decimal mark and the digit-grouping rule.
"""

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Optional

from .numeric import magnitude, scale_down, wide_context
from .settings import Settings


def round_to_increment(value: Decimal, increment: Decimal) -> Decimal:
    """Round `value` to the nearest multiple of `increment`, halves away from zero."""
    with wide_context(magnitude(value) + magnitude(increment) + abs(increment.adjusted())):
        return (value / increment).to_integral_value(rounding=ROUND_HALF_UP) * increment


def to_string(scaled_amount: int, settings: Settings) -> str:
    rounded = round_to_increment(scale_down(scaled_amount, settings.precision), settings.increment)
    with wide_context(magnitude(rounded), settings.precision):
        rounded = rounded.quantize(Decimal(1).scaleb(-settings.precision), rounding=ROUND_HALF_UP)
    # -0.00 after increment rounding
    if rounded.is_zero():
        rounded = rounded.copy_abs()
    return format(rounded, "f")


def format_amount(
    scaled_amount: int,
    settings: Settings,
    use_symbol: Optional[bool] = None,
) -> str:
    """
    Render an amount with the settings patterns.

    `!` in the pattern becomes the symbol (or nothing when symbols are off),
    `#` becomes the grouped integer part followed by the decimal mark and the
    fractional digits, if any.

    The pattern follows the sign of the stored amount, so an amount that an
    increment rounds to zero keeps its sign here: -0.01 with a 0.05
    increment renders as "-0.00" while to_string() gives "0.00".
    """
    if use_symbol is None:
        use_symbol = settings.format_with_symbol

    whole, _, fraction = to_string(scaled_amount, settings).lstrip("-").partition(".")
    body = settings.grouping.apply(whole, settings.separator)
    if fraction:
        body += settings.decimal + fraction

    pattern = settings.pattern if scaled_amount >= 0 else settings.negative_pattern
    return (
        pattern
        .replace("!", settings.symbol if use_symbol else "", 1)
        .replace("#", body, 1)
    )
