"""
Numeric Helpers.

Formatting, random generation and rounding.
"""

from smart_utils.numeric.numbers import (
    ceil_to,
    floor_to,
    format_compact,
    format_currency,
    format_percentage,
    random_double,
    random_int,
    round_to,
)

__all__ = [
    # Formatting
    "format_currency",
    "format_compact",
    "format_percentage",
    # Random
    "random_int",
    "random_double",
    # Rounding
    "round_to",
    "floor_to",
    "ceil_to",
]
