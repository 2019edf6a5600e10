"""
Tests for Number Helpers.

Tests formatting, random ranges and rounding modes.
"""

import math
import random

import pytest

from smart_utils.errors import InvalidArgumentError
from smart_utils.numeric import (
    ceil_to,
    floor_to,
    format_compact,
    format_currency,
    format_percentage,
    random_double,
    random_int,
    round_to,
)


# ============================================================================
# Formatting
# ============================================================================

class TestFormatCurrency:
    """Tests for format_currency."""

    def test_default_symbol_and_decimals(self) -> None:
        """Test the default dollar format."""
        assert format_currency(1234.56) == "$1,234.56"
        assert format_currency(1000) == "$1,000.00"
        assert format_currency(0) == "$0.00"

    def test_custom_symbol(self) -> None:
        """Test other currency symbols."""
        assert format_currency(1234.56, symbol="€") == "€1,234.56"
        assert format_currency(1000, symbol="£") == "£1,000.00"

    def test_custom_decimals(self) -> None:
        """Test rounding to other decimal places."""
        assert format_currency(1234.567, decimals=0) == "$1,235"
        assert format_currency(1234.567, decimals=1) == "$1,234.6"
        assert format_currency(1234.567, decimals=3) == "$1,234.567"

    def test_large_numbers(self) -> None:
        """Test thousands separators on large values."""
        assert format_currency(1234567.89) == "$1,234,567.89"
        assert format_currency(1000000) == "$1,000,000.00"

    def test_negative_numbers(self) -> None:
        """Test the sign follows the symbol."""
        assert format_currency(-1234.56) == "$-1,234.56"
        assert format_currency(-1000) == "$-1,000.00"
        assert format_currency(-123456) == "$-123,456.00"

    def test_negative_rounding_to_zero_has_no_sign(self) -> None:
        """Test tiny negative amounts print as zero without a sign."""
        assert format_currency(-0.001) == "$0.00"
        assert format_currency(-0.4, decimals=0) == "$0"

    def test_negative_decimals_raise(self) -> None:
        """Test negative decimals are rejected."""
        with pytest.raises(InvalidArgumentError):
            format_currency(100, decimals=-1)


class TestFormatCompact:
    """Tests for format_compact."""

    def test_below_thousand(self) -> None:
        """Test small numbers keep a decimal only when needed."""
        assert format_compact(0) == "0"
        assert format_compact(100) == "100"
        assert format_compact(999) == "999"
        assert format_compact(123.45) == "123.5"

    def test_thousands(self) -> None:
        """Test the K suffix."""
        assert format_compact(1000) == "1.0K"
        assert format_compact(1200) == "1.2K"
        assert format_compact(999999) == "1000.0K"

    def test_millions(self) -> None:
        """Test the M suffix."""
        assert format_compact(1000000) == "1.0M"
        assert format_compact(1500000) == "1.5M"
        assert format_compact(999999999) == "1000.0M"

    def test_billions_and_trillions(self) -> None:
        """Test the B and T suffixes."""
        assert format_compact(1000000000) == "1.0B"
        assert format_compact(2300000000) == "2.3B"
        assert format_compact(1000000000000) == "1.0T"
        assert format_compact(2500000000000) == "2.5T"

    def test_negative_numbers(self) -> None:
        """Test negative values use the magnitude for the unit."""
        assert format_compact(-1000) == "-1.0K"
        assert format_compact(-1500000) == "-1.5M"


class TestFormatPercentage:
    """Tests for format_percentage."""

    def test_default_decimals(self) -> None:
        """Test one decimal place by default."""
        assert format_percentage(0.1234) == "12.3%"
        assert format_percentage(0.5) == "50.0%"
        assert format_percentage(1.0) == "100.0%"
        assert format_percentage(0) == "0.0%"

    def test_custom_decimals(self) -> None:
        """Test other decimal places."""
        assert format_percentage(0.1234, decimals=0) == "12%"
        assert format_percentage(0.1234, decimals=2) == "12.34%"
        assert format_percentage(0.5, decimals=0) == "50%"

    def test_out_of_unit_range(self) -> None:
        """Test values above one and below zero."""
        assert format_percentage(1.5) == "150.0%"
        assert format_percentage(-0.5) == "-50.0%"

    def test_tiny_negative_is_unsigned_zero(self) -> None:
        """Test a negative ratio that rounds to zero prints without a sign."""
        assert format_percentage(-0.000001) == "0.0%"

    def test_negative_decimals_raise(self) -> None:
        """Test negative decimals are rejected."""
        with pytest.raises(InvalidArgumentError):
            format_percentage(0.5, decimals=-1)


# ============================================================================
# Random
# ============================================================================

class TestRandomInt:
    """Tests for random_int."""

    def test_within_inclusive_range(self) -> None:
        """Test results stay within both bounds."""
        rng = random.Random(42)
        results = {random_int(1, 10, rng=rng) for _ in range(500)}

        assert results <= set(range(1, 11))
        assert {1, 10} <= results

    def test_single_value_range(self) -> None:
        """Test equal bounds always return that value."""
        assert random_int(5, 5) == 5

    def test_negative_range(self) -> None:
        """Test negative bounds."""
        for _ in range(50):
            assert -10 <= random_int(-10, -1) <= -1

    def test_inverted_bounds_raise(self) -> None:
        """Test min > max is rejected."""
        with pytest.raises(InvalidArgumentError):
            random_int(10, 1)


class TestRandomDouble:
    """Tests for random_double."""

    def test_half_open_range(self) -> None:
        """Test results are in [min, max)."""
        rng = random.Random(7)
        for _ in range(200):
            assert 0.0 <= random_double(0.0, 1.0, rng=rng) < 1.0
            assert 100.0 <= random_double(100.0, 200.0, rng=rng) < 200.0
            assert -10.0 <= random_double(-10.0, -1.0, rng=rng) < -1.0

    def test_invalid_bounds_raise(self) -> None:
        """Test min >= max is rejected."""
        with pytest.raises(InvalidArgumentError):
            random_double(10.0, 1.0)
        with pytest.raises(InvalidArgumentError):
            random_double(5.0, 5.0)


# ============================================================================
# Rounding
# ============================================================================

class TestRounding:
    """Tests for round_to, floor_to and ceil_to."""

    def test_round_half_away_from_zero(self) -> None:
        """Test halves round away from zero."""
        assert round_to(3.14159, 2) == 3.14
        assert round_to(3.145, 2) == 3.15
        assert round_to(3.14159, 3) == 3.142
        assert round_to(-3.145, 2) == -3.15
        assert round_to(2.5, 0) == 3.0
        assert round_to(3.4, 0) == 3.0

    def test_floor(self) -> None:
        """Test flooring toward negative infinity."""
        assert floor_to(3.145, 2) == 3.14
        assert floor_to(3.149, 2) == 3.14
        assert floor_to(3.9, 0) == 3.0
        assert floor_to(-3.14159, 2) == -3.15

    def test_ceil(self) -> None:
        """Test ceiling toward positive infinity."""
        assert ceil_to(3.14159, 2) == 3.15
        assert ceil_to(3.14001, 2) == 3.15
        assert ceil_to(3.0, 0) == 3.0
        assert ceil_to(-3.145, 2) == -3.14

    def test_zero(self) -> None:
        """Test zero stays zero."""
        assert round_to(0, 2) == 0.0
        assert floor_to(0.0, 5) == 0.0
        assert ceil_to(0, 2) == 0.0

    def test_negative_zero_is_cleared(self) -> None:
        """Test small negatives round to a positive zero."""
        result = round_to(-0.4, 0)
        assert result == 0.0
        assert math.copysign(1.0, result) == 1.0

    def test_just_below_half(self) -> None:
        """Test the largest double below 0.5 rounds down."""
        assert round_to(0.49999999999999994, 0) == 0.0
        assert round_to(-0.49999999999999994, 0) == 0.0
        assert round_to(-2.5, 0) == -3.0

    @pytest.mark.parametrize("func", [round_to, floor_to, ceil_to])
    def test_negative_decimals_raise(self, func) -> None:
        """Test negative decimal counts are rejected."""
        with pytest.raises(InvalidArgumentError):
            func(3.14, -1)
