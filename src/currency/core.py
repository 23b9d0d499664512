"""
core.py — Fixed-point currency value

================================================================================
DESIGN PRINCIPLES
================================================================================

1. INTERNAL REPRESENTATION
   An integer count of the smallest unit (cents for precision 2).
   The display value (a Decimal) is derived from it and never feeds
   further arithmetic.

2. FORGIVING INPUT
   Values are built from numbers, decimal strings ("$1,234.56", "(1.99)")
   or other Currency values. See parsing.py for the exact rules.

3. IMMUTABILITY
   Frozen dataclass. Every operation returns a new instance carrying the
   receiver's Settings; the operand's own settings are ignored.

4. ONE ROUNDING PATH
   Arithmetic results are rewrapped through the constructor, so every value
   is rounded by the same rule (half away from zero at `precision` digits).

5. VERIFIABLE INVARIANTS
   distribute(n) guarantees sum(parts) == original, for negative amounts too.

================================================================================
USAGE
================================================================================

    from currency import Currency

    Currency("$1,234.50").add(0.1).format(True)     # "$1,234.60"
    Currency(100).distribute(3)                     # [33.34, 33.33, 33.33]
    Currency(1234567, use_vedic=True).format()      # "12,34,567.00"

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Optional

from .exceptions import DivisionByZeroError
from .formatting import format_amount, to_string
from .numeric import magnitude, scale_down, wide_context
from .parsing import Amount, parse, parse_number
from .settings import Settings


_NUMBERS = (int, float, Decimal)


@dataclass(frozen=True, init=False)
class Currency:
    """
    Immutable currency amount stored as an integer of smallest units.

    INVARIANTS:
    1. _scaled_amount is always int
    2. _value == _scaled_amount / 10 ** precision
    3. add/subtract/multiply/divide return new instances with the same Settings
    4. distribute(n) returns n parts whose sum is exactly self

    EQUALITY:
        Two values are equal when they hold the same scaled amount under the
        same Settings. Ordering compares display values.
    """
    _scaled_amount: int
    _settings: Settings
    _value: Decimal = field(compare=False, repr=False)

    def __init__(
        self,
        value: Amount = 0,
        settings: Optional[Settings] = None,
        **options: Any,
    ):
        settings = Settings.from_options(settings, **options)
        scaled_amount = parse(value, settings)

        # Use object.__setattr__ because dataclass is frozen
        object.__setattr__(self, "_scaled_amount", scaled_amount)
        object.__setattr__(self, "_settings", settings)
        object.__setattr__(self, "_value", scale_down(scaled_amount, settings.precision))

    def _rescale(self, scaled_amount: Any) -> Currency:
        """Wrap an amount of smallest units back into a Currency."""
        return Currency(scale_down(scaled_amount, self._settings.precision), self._settings)

    # -------------------------------------------------------------------------
    # Arithmetic
    # -------------------------------------------------------------------------

    def add(self, other: Amount) -> Currency:
        return self._rescale(self._scaled_amount + parse(other, self._settings))

    def subtract(self, other: Amount) -> Currency:
        return self._rescale(self._scaled_amount - parse(other, self._settings))

    def multiply(self, factor: Amount) -> Currency:
        """
        Multiply by a plain factor.

        The factor is not scaled: Currency(2.5).multiply(2) is 5.00.
        """
        factor = parse_number(factor, self._settings)
        with wide_context(magnitude(self._scaled_amount) + magnitude(factor)):
            return self._rescale(self._scaled_amount * factor)

    def divide(self, divisor: Amount) -> Currency:
        """
        Divide by `divisor`.

        The divisor is scaled without rounding, so fractional divisors keep
        their sub-unit digits until the quotient is rounded.

        Raises:
            DivisionByZeroError: if the divisor parses to zero
        """
        scaled_divisor = parse(divisor, self._settings, use_rounding=False)
        if scaled_divisor.is_zero():
            raise DivisionByZeroError(f"Cannot divide {self} by {divisor!r}")
        amount = Decimal(self._scaled_amount)
        # scaled / scaled: the quotient is already in display units
        with wide_context(magnitude(amount) + magnitude(scaled_divisor), self.precision):
            quotient = amount / scaled_divisor
        return Currency(quotient, self._settings)

    # -------------------------------------------------------------------------
    # Distribution
    # -------------------------------------------------------------------------

    def distribute(self, count: int) -> list[Currency]:
        """
        Split the amount into `count` shares with an EXACT sum.

        Every share gets the amount divided by `count`, rounded toward zero.
        The leftover smallest units go one each to the first shares, so
        shares differ by at most one unit and sum(parts) == self.

            Currency(100).distribute(3)    # [33.34, 33.33, 33.33]
            Currency(-1.01).distribute(2)  # [-0.51, -0.50]

        Returns:
            A list of `count` values; empty when `count` is 0

        Raises:
            TypeError: if count is not an int
            ValueError: if count < 0
        """
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeError(f"count must be an int, got {type(count).__name__}")
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if count == 0:
            return []

        amount = self._scaled_amount
        if amount >= 0:
            share, unit = amount // count, 1
        else:
            share, unit = -(-amount // count), -1
        remainder = abs(amount - share * count)

        return [
            self._rescale(share + (unit if i < remainder else 0))
            for i in range(count)
        ]

    # -------------------------------------------------------------------------
    # Properties and accessors
    # -------------------------------------------------------------------------

    @property
    def scaled_amount(self) -> int:
        """Amount in smallest units. Use this for storage and exact math."""
        return self._scaled_amount

    @property
    def value(self) -> Decimal:
        """Amount in display units, derived from scaled_amount."""
        return self._value

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def precision(self) -> int:
        return self._settings.precision

    def dollars(self) -> int:
        """Integer part of the amount, truncated toward zero."""
        return int(self._value)

    def cents(self) -> int:
        """Sub-unit part of the amount, with the sign of the amount."""
        cents = abs(self._scaled_amount) % self._settings.multiplier
        return -cents if self._scaled_amount < 0 else cents

    def is_positive(self) -> bool:
        return self._scaled_amount > 0

    def is_negative(self) -> bool:
        return self._scaled_amount < 0

    def is_zero(self) -> bool:
        return self._scaled_amount == 0

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    def format(self, use_symbol: Optional[bool] = None) -> str:
        """
        Display string built from the settings patterns.

        Args:
            use_symbol: include the symbol; defaults to settings.format_with_symbol
        """
        return format_amount(self._scaled_amount, self._settings, use_symbol)

    def to_string(self) -> str:
        """Numeric string rounded to the increment, with `precision` decimals."""
        return to_string(self._scaled_amount, self._settings)

    def to_json(self) -> float:
        """
        Plain number for JSON serialization.

        NOTE: a float. For storage prefer scaled_amount.
        """
        return float(self._value)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Currency('{self._value:f}', precision={self._settings.precision})"

    def __float__(self) -> float:
        return self.to_json()

    # -------------------------------------------------------------------------
    # Operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> Currency:
        if not isinstance(other, (Currency,) + _NUMBERS):
            return NotImplemented
        return self.add(other)

    def __radd__(self, other: Any) -> Currency:
        # sum() starts from 0
        return self.__add__(other)

    def __sub__(self, other: Any) -> Currency:
        if not isinstance(other, (Currency,) + _NUMBERS):
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other: Any) -> Currency:
        if not isinstance(other, _NUMBERS):
            return NotImplemented
        return Currency(other, self._settings).subtract(self)

    def __mul__(self, other: Any) -> Currency:
        if not isinstance(other, _NUMBERS):
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other: Any) -> Currency:
        return self.__mul__(other)

    def __truediv__(self, other: Any) -> Currency:
        if not isinstance(other, (Currency,) + _NUMBERS):
            return NotImplemented
        return self.divide(other)

    def __neg__(self) -> Currency:
        return self._rescale(-self._scaled_amount)

    def __abs__(self) -> Currency:
        return self._rescale(abs(self._scaled_amount))

    # -------------------------------------------------------------------------
    # Comparison
    # -------------------------------------------------------------------------

    def __lt__(self, other: Currency) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value < other._value

    def __le__(self, other: Currency) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value <= other._value

    def __gt__(self, other: Currency) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value > other._value

    def __ge__(self, other: Currency) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented
        return self._value >= other._value
