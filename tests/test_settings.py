"""
test_settings.py — Test suite for Settings and GroupingRule
"""

import logging
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from currency import Currency, DEFAULT_SETTINGS, GroupingRule, Settings, SettingsError


# ==============================================================================
# UNIT TESTS: Defaults and resolution
# ==============================================================================

class TestDefaults:

    def test_defaults(self):
        s = Settings()
        assert s.symbol == "$"
        assert s.separator == ","
        assert s.decimal == "."
        assert s.format_with_symbol is False
        assert s.error_on_invalid is False
        assert s.precision == 2
        assert s.pattern == "!#"
        assert s.negative_pattern == "-!#"
        assert s.grouping is GroupingRule.STANDARD

    def test_increment_defaults_to_smallest_unit(self):
        assert Settings().increment == Decimal("0.01")
        assert Settings(precision=3).increment == Decimal("0.001")
        assert Settings(precision=0).increment == Decimal("1")

    def test_increment_is_normalized_to_decimal(self):
        s = Settings(increment=0.05)
        assert isinstance(s.increment, Decimal)
        assert s.increment == Decimal("0.05")

    def test_multiplier(self):
        assert Settings().multiplier == 100
        assert Settings(precision=0).multiplier == 1

    def test_settings_are_frozen(self):
        with pytest.raises(FrozenInstanceError):
            DEFAULT_SETTINGS.precision = 3

    def test_settings_are_hashable(self):
        assert hash(Settings()) == hash(DEFAULT_SETTINGS)


# ==============================================================================
# UNIT TESTS: Merging options
# ==============================================================================

class TestFromOptions:

    def test_no_options_returns_base(self):
        assert Settings.from_options() is DEFAULT_SETTINGS
        base = Settings(symbol="€")
        assert Settings.from_options(base) is base

    def test_options_override_base(self):
        base = Settings(symbol="€", precision=3)
        merged = Settings.from_options(base, separator=" ")
        assert merged.symbol == "€"
        assert merged.precision == 3
        assert merged.separator == " "
        assert base.separator == ","

    def test_use_vedic(self):
        assert Settings.from_options(use_vedic=True).grouping is GroupingRule.VEDIC
        assert Settings.from_options(use_vedic=False).grouping is GroupingRule.STANDARD
        assert Settings.from_options(use_vedic=True).use_vedic

    def test_unknown_option_raises(self):
        with pytest.raises(TypeError):
            Settings.from_options(colour="red")

        with pytest.raises(TypeError):
            Currency(1, colour="red")

    def test_precision_override_rederives_default_increment(self):
        assert Settings.from_options(precision=3).increment == Decimal("0.001")
        cents = Settings.from_options(symbol="€")
        assert Settings.from_options(cents, precision=0).increment == Decimal("1")

    def test_precision_override_keeps_custom_increment(self):
        nickel = Settings.from_options(increment=0.05)
        assert not nickel.has_default_increment
        assert Settings.from_options(nickel, precision=3).increment == Decimal("0.05")
        assert Currency(1.234, nickel, precision=3).to_string() == "1.250"

    def test_explicit_increment_survives_other_overrides(self):
        nickel = Settings.from_options(increment=0.05)
        assert Settings.from_options(nickel, symbol="€").increment == Decimal("0.05")

    def test_merge_is_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="currency.settings")
        Settings.from_options(symbol="€")
        assert "Merging currency options ['symbol']" in caplog.text


# ==============================================================================
# UNIT TESTS: Validation
# ==============================================================================

class TestValidation:

    @pytest.mark.parametrize("precision", [-1, 1.5, "2", True])
    def test_invalid_precision(self, precision):
        with pytest.raises(SettingsError):
            Settings(precision=precision)

    @pytest.mark.parametrize("increment", [0, -0.05, "abc", True, float("inf")])
    def test_invalid_increment(self, increment):
        with pytest.raises(SettingsError):
            Settings(increment=increment)

    def test_pattern_needs_number_placeholder(self):
        with pytest.raises(SettingsError):
            Settings(pattern="!")

        with pytest.raises(SettingsError):
            Settings(negative_pattern="-!")

    def test_empty_decimal_mark(self):
        with pytest.raises(SettingsError):
            Settings(decimal="")

    def test_settings_error_is_value_error(self):
        with pytest.raises(ValueError):
            Currency(1, precision=-1)


# ==============================================================================
# UNIT TESTS: GroupingRule
# ==============================================================================

class TestGroupingRule:

    @pytest.mark.parametrize("digits, expected", [
        ("1", "1"),
        ("123", "123"),
        ("1234", "1,234"),
        ("1234567", "1,234,567"),
    ])
    def test_standard(self, digits, expected):
        assert GroupingRule.STANDARD.apply(digits, ",") == expected

    @pytest.mark.parametrize("digits, expected", [
        ("123", "123"),
        ("1234", "1,234"),
        ("12345", "12,345"),
        ("1234567", "12,34,567"),
        ("1234567890", "1,23,45,67,890"),
    ])
    def test_vedic(self, digits, expected):
        assert GroupingRule.VEDIC.apply(digits, ",") == expected

    def test_separator_is_inserted_literally(self):
        assert GroupingRule.STANDARD.apply("1234", "\\1") == "1\\1234"

    def test_label(self):
        assert GroupingRule.VEDIC.label == "vedic"
