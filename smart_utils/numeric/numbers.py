"""
Number Helpers.

Currency, compact and percentage formatting, bounded random numbers
and decimal rounding.
"""

import math
import random
from collections.abc import Callable
from decimal import ROUND_HALF_UP, Decimal

from smart_utils.errors import InvalidArgumentError

# (threshold, divisor, suffix), checked in order
COMPACT_UNITS = [
    (1e6, 1e3, "K"),
    (1e9, 1e6, "M"),
    (1e12, 1e9, "B"),
]


def _check_decimals(decimals: int) -> None:
    if decimals < 0:
        raise InvalidArgumentError("decimals", decimals, "must be non-negative")


def _round_half_away(value: float) -> float:
    # round() is banker's rounding; 314.5 must become 315
    if not math.isfinite(value):
        return value
    rounded = Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    # + 0.0 drops the sign of a negative zero
    return float(rounded) + 0.0


def _scaled(value: float, decimals: int, rounding: Callable[[float], float]) -> float:
    _check_decimals(decimals)
    factor = 10.0**decimals
    return rounding(value * factor) / factor


def round_to(value: float, decimals: int) -> float:
    """
    Round to the given number of decimal places, halves away from zero.

    Example:
        round_to(3.145, 2)  # 3.15
    """
    return _scaled(value, decimals, _round_half_away)


def floor_to(value: float, decimals: int) -> float:
    """Floor to the given number of decimal places."""
    return _scaled(value, decimals, math.floor)


def ceil_to(value: float, decimals: int) -> float:
    """Ceil to the given number of decimal places."""
    return _scaled(value, decimals, math.ceil)


def format_currency(amount: float, symbol: str = "$", decimals: int = 2) -> str:
    """
    Format an amount with a currency symbol and thousands separators.

    The sign follows the symbol: format_currency(-1234.56) == "$-1,234.56".

    Args:
        amount: Amount to format
        symbol: Currency symbol prefix
        decimals: Number of decimal places

    Returns:
        Formatted currency string

    Raises:
        InvalidArgumentError: If decimals is negative
    """
    rounded = round_to(amount, decimals)
    return f"{symbol}{rounded:,.{decimals}f}"


def format_compact(number: float) -> str:
    """
    Format a number in compact notation (1.2K, 1.5M, 2.3B, 1.0T).

    Values below one thousand keep one decimal only when they are
    not whole numbers.
    """
    magnitude = abs(number)
    if magnitude < 1e3:
        decimals = 0 if float(number).is_integer() else 1
        return f"{number:.{decimals}f}"
    for threshold, divisor, suffix in COMPACT_UNITS:
        if magnitude < threshold:
            return f"{number / divisor:.1f}{suffix}"
    return f"{number / 1e12:.1f}T"


def format_percentage(value: float, decimals: int = 1) -> str:
    """
    Format a ratio as a percentage (0.1234 -> "12.3%").

    Raises:
        InvalidArgumentError: If decimals is negative
    """
    _check_decimals(decimals)
    rounded = round_to(value * 100, decimals)
    return f"{rounded:.{decimals}f}%"


def random_int(min_value: int, max_value: int, rng: random.Random | None = None) -> int:
    """
    Random integer in [min_value, max_value], both ends inclusive.

    Raises:
        InvalidArgumentError: If min_value > max_value
    """
    if min_value > max_value:
        raise InvalidArgumentError(
            "min_value", min_value, "must be less than or equal to max_value"
        )
    return (rng or random).randint(min_value, max_value)


def random_double(
    min_value: float, max_value: float, rng: random.Random | None = None
) -> float:
    """
    Random float in [min_value, max_value).

    Raises:
        InvalidArgumentError: If min_value >= max_value
    """
    if min_value >= max_value:
        raise InvalidArgumentError("min_value", min_value, "must be less than max_value")
    return min_value + (rng or random).random() * (max_value - min_value)
