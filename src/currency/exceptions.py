"""Exceptions for the currency engine."""


class CurrencyError(Exception):
    """Base class for every error raised by this package."""
    pass


class InvalidInputError(CurrencyError, ValueError):
    """Raised when a value cannot be read as an amount and error_on_invalid is set."""
    pass


class DivisionByZeroError(CurrencyError, ZeroDivisionError):
    """Raised when dividing by an operand that parses to zero."""
    pass


class SettingsError(CurrencyError, ValueError):
    """Raised when formatting or precision settings are inconsistent."""
    pass
