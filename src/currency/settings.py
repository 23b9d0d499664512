"""
settings.py — Formatting and precision configuration

================================================================================
DESIGN PRINCIPLES
================================================================================

1. ONE FROZEN OBJECT
   All the knobs a value needs (symbol, separators, patterns, precision,
   rounding increment, digit grouping) live in a single frozen dataclass.
   A Settings is resolved once and then shared by every value derived from it.

2. EXPLICIT MERGE
   Per-value overrides are keyword options applied on top of a base Settings
   by Settings.from_options(). Unknown option names are rejected instead of
   being silently carried around.

3. RESOLVED DEFAULTS
   The rounding increment defaults to one smallest unit (10 ** -precision)
   and is resolved at construction, so a Settings never holds "unset" fields.

================================================================================
"""

from __future__ import annotations
from dataclasses import dataclass, fields, replace
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Optional
import logging
import re

from .exceptions import SettingsError


logger = logging.getLogger(__name__)


# ==============================================================================
# DIGIT GROUPING
# ==============================================================================

class GroupingRule(Enum):
    """
    Digit-grouping conventions for the integer part of a formatted amount.

    Each rule carries the regex that marks the digits a separator follows:
    - STANDARD: groups of three from the right (1,234,567)
    - VEDIC: first group of three, then groups of two (12,34,567)
      see https://en.wikipedia.org/wiki/Indian_numbering_system
    """
    STANDARD = ("standard", r"(\d)(?=(\d{3})+\b)")
    VEDIC = ("vedic", r"(\d)(?=(\d\d)+\d\b)")

    def __init__(self, label: str, regex: str):
        self._label = label
        self._regex = re.compile(regex)

    @property
    def label(self) -> str:
        return self._label

    @property
    def regex(self) -> re.Pattern[str]:
        return self._regex

    def apply(self, digits: str, separator: str) -> str:
        """Insert `separator` into a string of digits according to this rule."""
        return self._regex.sub(lambda match: match.group(1) + separator, digits)


# ==============================================================================
# SETTINGS
# ==============================================================================

@dataclass(frozen=True)
class Settings:
    """
    Immutable configuration of a currency value.

    `pattern` and `negative_pattern` use two placeholders:
    `!` for the symbol and `#` for the number body.

    USAGE:
        euro = Settings.from_options(symbol="€", separator=".", decimal=",")
        rupee = Settings.from_options(symbol="₹", use_vedic=True)
    """
    symbol: str = "$"
    separator: str = ","
    decimal: str = "."
    format_with_symbol: bool = False
    error_on_invalid: bool = False
    precision: int = 2
    pattern: str = "!#"
    negative_pattern: str = "-!#"
    increment: Optional[Decimal] = None
    grouping: GroupingRule = GroupingRule.STANDARD

    def __post_init__(self):
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise SettingsError(
                f"precision must be an int, got {type(self.precision).__name__}"
            )
        if self.precision < 0:
            raise SettingsError(f"precision must be >= 0, got {self.precision}")
        if not self.decimal:
            raise SettingsError("decimal mark cannot be empty")
        for name in ("pattern", "negative_pattern"):
            if "#" not in getattr(self, name):
                raise SettingsError(f"{name} must contain the '#' placeholder")
        if not isinstance(self.grouping, GroupingRule):
            raise SettingsError(f"Unknown grouping rule: {self.grouping!r}")

        # Use object.__setattr__ because dataclass is frozen
        if self.increment is None:
            object.__setattr__(self, "increment", Decimal(1).scaleb(-self.precision))
        else:
            object.__setattr__(self, "increment", _to_increment(self.increment))

    @property
    def multiplier(self) -> int:
        """Scale factor between display units and the smallest unit."""
        return 10 ** self.precision

    @property
    def has_default_increment(self) -> bool:
        return self.increment == Decimal(1).scaleb(-self.precision)

    @property
    def use_vedic(self) -> bool:
        return self.grouping is GroupingRule.VEDIC

    @classmethod
    def from_options(cls, base: Optional[Settings] = None, **options: Any) -> Settings:
        """
        Merge keyword options on top of `base` (or the defaults).

        `use_vedic=True/False` is accepted as a shorthand for `grouping`.
        Overriding `precision` without `increment` re-derives the default
        increment (one smallest unit) from the new precision. A custom
        increment on `base`, such as 0.05, is kept.

        Raises:
            TypeError: for an unknown option name
            SettingsError: if the merged configuration is invalid
        """
        base = base if base is not None else DEFAULT_SETTINGS
        if not options:
            return base

        if "use_vedic" in options:
            use_vedic = options.pop("use_vedic")
            options.setdefault(
                "grouping", GroupingRule.VEDIC if use_vedic else GroupingRule.STANDARD
            )

        unknown = set(options) - _OPTION_NAMES
        if unknown:
            raise TypeError(f"Unknown currency option(s): {', '.join(sorted(unknown))}")

        if "precision" in options and "increment" not in options and base.has_default_increment:
            options["increment"] = None

        logger.debug("Merging currency options %s", sorted(options))
        return replace(base, **options)


def _to_increment(value: Any) -> Decimal:
    if isinstance(value, bool):
        raise SettingsError("increment must be a number")
    try:
        increment = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise SettingsError(f"increment must be a number, got {value!r}") from None
    if not increment.is_finite() or increment <= 0:
        raise SettingsError(f"increment must be positive, got {value!r}")
    return increment


_OPTION_NAMES = frozenset(f.name for f in fields(Settings))

DEFAULT_SETTINGS = Settings()
