"""
currency — Fixed-point currency values

Exact decimal money arithmetic on an integer representation, with
lossless distribution and configurable formatting/parsing.

================================================================================
QUICK START
================================================================================

Basic usage:

    from currency import Currency

    # Strings, numbers and other values are all accepted
    price = Currency("$1,234.56")
    price.add(0.1).to_string()            # "1234.66"
    Currency(0.1).add(0.2).to_json()      # 0.3, not 0.30000000000000004

    # Distribute evenly (sum ALWAYS equals original)
    parts = Currency(100).distribute(3)   # 33.34, 33.33, 33.33
    assert sum(parts) == Currency(100)

Formatting:

    euro = Settings.from_options(symbol="€", separator=".", decimal=",", pattern="# !")
    Currency("1.234,56", euro).format(True)       # "1.234,56 €"
    Currency(1234567, use_vedic=True).format()    # "12,34,567.00"
    Currency(1.23, increment=0.05).to_string()    # "1.25"

================================================================================
"""

from .core import Currency
from .exceptions import (
    CurrencyError,
    InvalidInputError,
    DivisionByZeroError,
    SettingsError,
)
from .formatting import format_amount, round_to_increment, to_string
from .parsing import parse, parse_number
from .settings import DEFAULT_SETTINGS, GroupingRule, Settings

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Core
    "Currency",
    "Settings",
    "GroupingRule",
    "DEFAULT_SETTINGS",
    # Conversion
    "parse",
    "parse_number",
    "to_string",
    "format_amount",
    "round_to_increment",
    # Errors
    "CurrencyError",
    "InvalidInputError",
    "DivisionByZeroError",
    "SettingsError",
]
