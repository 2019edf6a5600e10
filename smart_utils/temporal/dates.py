"""
Human-Readable Dates.

Relative phrases ("15 mins ago"), day labels ("Tomorrow 6:00 PM"),
pattern formatting, calendar-day checks and duration summaries.

Every function takes an optional reference instant so results are
deterministic under test; it defaults to the current time.
"""

from datetime import date, datetime, timedelta

from smart_utils.config import get_settings
from smart_utils.temporal.patterns import compile_pattern

ABSOLUTE_DATE_PATTERN = "d MMM yyyy"
DAY_LABEL_PATTERN = "EEE, d MMM"
CLOCK_PATTERN = "h:mm a"

DAY_LABELS = {
    0: "Today",
    -1: "Yesterday",
    1: "Tomorrow",
}


def _now_for(value: datetime) -> datetime:
    """Current time in the same timezone awareness as value."""
    return datetime.now(value.tzinfo)


def _plural(count: int, word: str) -> str:
    return f"{count} {word}{'' if count == 1 else 's'}"


def format_date(value: datetime, pattern: str | None = None) -> str:
    """
    Format a datetime with an ICU-style pattern.

    Args:
        value: Datetime to render
        pattern: Pattern text; defaults to settings.default_date_pattern
            ("yyyy-MM-dd HH:mm")

    Returns:
        Rendered string
    """
    if pattern is None:
        pattern = get_settings().default_date_pattern
    return compile_pattern(pattern).format(value)


def time_ago(value: datetime, reference: datetime | None = None) -> str:
    """
    Describe how long ago value happened relative to reference.

    Instants less than a minute in the future read as "just now";
    anything further ahead is rendered as an absolute date.

    Example:
        time_ago(datetime(2025, 1, 1, 11, 45), reference=datetime(2025, 1, 1, 12))
        # "15 mins ago"
    """
    now = reference if reference is not None else _now_for(value)
    difference = now - value

    if difference < timedelta(0):
        if -difference < timedelta(minutes=1):
            return "just now"
        return format_date(value, ABSOLUTE_DATE_PATTERN)

    if difference < timedelta(minutes=1):
        return "just now"

    minutes = difference // timedelta(minutes=1)
    if minutes < 60:
        return f"{_plural(minutes, 'min')} ago"

    hours = difference // timedelta(hours=1)
    if hours < 24:
        return f"{_plural(hours, 'hour')} ago"

    days = difference.days
    if days == 1:
        return "yesterday"
    if days < 7:
        return f"{days} days ago"
    return format_date(value, ABSOLUTE_DATE_PATTERN)


def smart_date_time(value: datetime, reference: datetime | None = None) -> str:
    """
    Label value by calendar day relative to reference, plus clock time.

    Returns strings like "Today 6:00 PM", "Yesterday 9:15 AM" or
    "Fri, 10 Jan 7:30 AM".
    """
    now = reference if reference is not None else _now_for(value)
    day_offset = (value.date() - now.date()).days

    label = DAY_LABELS.get(day_offset)
    if label is None:
        label = format_date(value, DAY_LABEL_PATTERN)

    return f"{label} {format_date(value, CLOCK_PATTERN)}"


def _same_day(value: datetime, day: date) -> bool:
    return (value.year, value.month, value.day) == (day.year, day.month, day.day)


def is_today(value: datetime, reference: datetime | None = None) -> bool:
    """Check whether value falls on the reference calendar day."""
    now = reference if reference is not None else _now_for(value)
    return _same_day(value, now.date())


def is_yesterday(value: datetime, reference: datetime | None = None) -> bool:
    """Check whether value falls on the calendar day before reference."""
    now = reference if reference is not None else _now_for(value)
    return _same_day(value, now.date() - timedelta(days=1))


def diff_summary(start: datetime, end: datetime, absolute: bool = True) -> str:
    """
    Summarize the time between start and end as "2d 5h 10m".

    Seconds are dropped and zero components are omitted. When end is
    before start, absolute=True summarizes the magnitude and
    absolute=False reports no elapsed time ("0m"). No sign is rendered.

    Args:
        start: Start of the interval
        end: End of the interval
        absolute: Use the magnitude of a negative interval

    Returns:
        Summary string, "0m" when nothing remains
    """
    difference = end - start
    if difference < timedelta(0):
        difference = -difference if absolute else timedelta(0)

    days = difference.days
    hours = difference // timedelta(hours=1) % 24
    minutes = difference // timedelta(minutes=1) % 60

    parts = [
        f"{amount}{unit}"
        for amount, unit in ((days, "d"), (hours, "h"), (minutes, "m"))
        if amount > 0
    ]
    return " ".join(parts) if parts else "0m"
