"""
Date and Time Helpers.

Relative phrases, day labels and an ICU-style pattern formatter.
"""

from smart_utils.temporal.dates import (
    diff_summary,
    format_date,
    is_today,
    is_yesterday,
    smart_date_time,
    time_ago,
)
from smart_utils.temporal.patterns import DatePattern, compile_pattern

__all__ = [
    # Humanizing
    "time_ago",
    "smart_date_time",
    "diff_summary",
    # Calendar checks
    "is_today",
    "is_yesterday",
    # Formatting
    "format_date",
    "compile_pattern",
    "DatePattern",
]
