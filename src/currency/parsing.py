"""
parsing.py — Raw input to scaled integer

================================================================================
CONVERSION RULES
================================================================================

Accepted inputs, dispatched explicitly:

    Currency        -> its display value, rescaled to the target precision
    int / Decimal   -> taken as is
    float           -> read through its shortest repr (1.005 is "1.005")
    str             -> "(1.99)" means -1.99; everything but digits, "-" and the
                       configured decimal mark is dropped; the decimal mark is
                       normalised to "."

Anything else (None, bool, lists, NaN, infinities, strings without a number)
is invalid: InvalidInputError when `error_on_invalid` is set, zero otherwise.

The scaled result is first quantized to 4 fractional digits, then rounded
half away from zero to an integer. Division asks for the unrounded value so
that fractional divisors survive until the final result is rounded.

================================================================================
"""

from __future__ import annotations
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import TYPE_CHECKING, Any, Union
import logging
import re

from .exceptions import InvalidInputError
from .numeric import magnitude, wide_context
from .settings import Settings

if TYPE_CHECKING:
    from .core import Currency


logger = logging.getLogger(__name__)

Amount = Union["Currency", str, int, float, Decimal]

# Fractional digits kept on the scaled value before integer rounding
_SCALED_QUANT = Decimal("0.0001")

_PARENTHESIZED = re.compile(r"\((.*)\)")


def parse(value: Amount, settings: Settings, use_rounding: bool = True) -> Union[int, Decimal]:
    """
    Convert `value` to smallest units under `settings`.

    Returns:
        int with `use_rounding`, otherwise the Decimal quantized to 4 places

    Raises:
        InvalidInputError: invalid input with `settings.error_on_invalid`
    """
    number = parse_number(value, settings)
    with wide_context(magnitude(number), settings.precision):
        scaled = (number * settings.multiplier).quantize(_SCALED_QUANT, rounding=ROUND_HALF_UP)
        if not use_rounding:
            return scaled
        return int(scaled.to_integral_value(rounding=ROUND_HALF_UP))


def parse_number(value: Amount, settings: Settings) -> Decimal:
    """Read `value` as a plain Decimal in display units, without scaling."""
    from .core import Currency

    if isinstance(value, Currency):
        return value.value
    if isinstance(value, bool):
        return _invalid(value, settings)
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        number = Decimal(repr(value))
    elif isinstance(value, Decimal):
        number = value
    elif isinstance(value, str):
        number = _parse_text(value, settings.decimal)
        if number is None:
            return _invalid(value, settings)
    else:
        return _invalid(value, settings)

    if not number.is_finite():
        return _invalid(value, settings)
    return number


def _parse_text(text: str, decimal: str) -> Decimal | None:
    """Strip formatting from `text`; None when no number is left."""
    text = _PARENTHESIZED.sub(r"-\1", text, count=1)
    text = re.sub(r"[^-0-9" + re.escape(decimal) + r"]", "", text)
    text = text.replace(decimal, ".")
    try:
        return Decimal(text)
    except InvalidOperation:
        return None


def _invalid(value: Any, settings: Settings) -> Decimal:
    if settings.error_on_invalid:
        raise InvalidInputError(f"Invalid input: {value!r}")
    logger.debug("Coercing invalid input %r to zero", value)
    return Decimal(0)
