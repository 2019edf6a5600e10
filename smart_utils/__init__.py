"""
smart_utils - Helper utilities for UI applications.

This package contains:
- String and number formatting/validation
- Human-readable dates and an ICU-style date pattern formatter
- A colorized leveled console logger
- Device, platform and connectivity queries
- Transient UI feedback and layout helpers over a host UI context
"""

from smart_utils.config import Settings, get_settings
from smart_utils.errors import (
    InvalidArgumentError,
    SmartUtilsError,
    UnavailableCapabilityError,
)
from smart_utils.text import capitalize, is_email, is_url, slugify, truncate
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
from smart_utils.temporal import (
    diff_summary,
    format_date,
    is_today,
    is_yesterday,
    smart_date_time,
    time_ago,
)
from smart_utils.utils import ConsoleLogger, LoggerConfig, LogLevel
from smart_utils.widgets import WidgetHelpers
from smart_utils import device

__version__ = "1.0.0"

__all__ = [
    # Config
    "Settings",
    "get_settings",
    # Errors
    "SmartUtilsError",
    "InvalidArgumentError",
    "UnavailableCapabilityError",
    # Text
    "capitalize",
    "slugify",
    "truncate",
    "is_email",
    "is_url",
    # Numbers
    "format_currency",
    "format_compact",
    "format_percentage",
    "random_int",
    "random_double",
    "round_to",
    "floor_to",
    "ceil_to",
    # Dates
    "time_ago",
    "smart_date_time",
    "format_date",
    "is_today",
    "is_yesterday",
    "diff_summary",
    # Logging
    "ConsoleLogger",
    "LoggerConfig",
    "LogLevel",
    # UI
    "WidgetHelpers",
    "device",
]
