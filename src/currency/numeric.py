"""
numeric.py — Decimal scaling without silent digit loss

The default decimal context keeps 28 significant digits and rounds (or
raises, for quantize) beyond that. Every Decimal operation on an amount
runs instead in a context wide enough for its operands: the integer digits
involved, plus `precision` fractional digits, plus GUARD_DIGITS. Amounts
are therefore bounded only by the decimal module's exponent limit.
"""

from __future__ import annotations
from decimal import Decimal, getcontext, localcontext
from typing import Union


GUARD_DIGITS = 10


def magnitude(value: Union[Decimal, int]) -> int:
    """Digits needed to hold `value` exactly, at least 1."""
    if not isinstance(value, Decimal):
        value = Decimal(value)
    return max(len(value.as_tuple().digits), value.adjusted() + 1, 1)


def wide_context(digits: int, precision: int = 0):
    """Local decimal context holding `digits` plus `precision` and guard digits."""
    context = getcontext().copy()
    context.prec = max(context.prec, digits + precision + GUARD_DIGITS)
    return localcontext(context)


def scale_down(scaled_amount: Union[Decimal, int], precision: int) -> Decimal:
    """Exact `scaled_amount / 10 ** precision`."""
    amount = Decimal(scaled_amount)
    with wide_context(magnitude(amount)):
        return amount.scaleb(-precision)
