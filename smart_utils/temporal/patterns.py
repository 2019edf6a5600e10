"""
Date Pattern Compiler.

Compiles ICU-style date patterns ("yyyy-MM-dd HH:mm", "EEE, d MMM")
into reusable renderers. Compiled patterns are cached by pattern text,
so repeated formatting with the same pattern skips parsing.
"""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from functools import lru_cache

from smart_utils.errors import InvalidArgumentError

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]

WEEKDAY_NAMES = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]

Renderer = Callable[[datetime], str]


def _year(width: int) -> Renderer:
    if width == 2:
        return lambda dt: f"{dt.year % 100:02d}"
    return lambda dt: f"{dt.year:0{width}d}"


def _month(width: int) -> Renderer:
    if width >= 4:
        return lambda dt: MONTH_NAMES[dt.month - 1]
    if width == 3:
        return lambda dt: MONTH_NAMES[dt.month - 1][:3]
    return lambda dt: f"{dt.month:0{width}d}"


def _weekday(width: int) -> Renderer:
    if width >= 4:
        return lambda dt: WEEKDAY_NAMES[dt.weekday()]
    return lambda dt: WEEKDAY_NAMES[dt.weekday()][:3]


def _hour12(width: int) -> Renderer:
    return lambda dt: f"{(dt.hour % 12) or 12:0{width}d}"


def _fraction(width: int) -> Renderer:
    return lambda dt: f"{dt.microsecond:06d}"[:width].ljust(width, "0")


def _numeric(field: str) -> Callable[[int], Renderer]:
    return lambda width: lambda dt: f"{getattr(dt, field):0{width}d}"


# Pattern letter -> factory taking the run length
TOKENS: dict[str, Callable[[int], Renderer]] = {
    "y": _year,
    "M": _month,
    "L": _month,
    "d": _numeric("day"),
    "E": _weekday,
    "H": _numeric("hour"),
    "h": _hour12,
    "m": _numeric("minute"),
    "s": _numeric("second"),
    "S": _fraction,
    "a": lambda width: lambda dt: "AM" if dt.hour < 12 else "PM",
}


@dataclass(frozen=True)
class DatePattern:
    """A compiled date pattern."""

    pattern: str
    segments: tuple[str | Renderer, ...]

    def format(self, value: datetime) -> str:
        """Render a datetime with this pattern."""
        return "".join(
            segment if isinstance(segment, str) else segment(value)
            for segment in self.segments
        )


def _parse(pattern: str) -> list[str | Renderer]:
    segments: list[str | Renderer] = []
    literal: list[str] = []
    i = 0
    n = len(pattern)

    while i < n:
        char = pattern[i]

        if char == "'":
            # '' is an escaped quote, otherwise a quoted literal run
            if i + 1 < n and pattern[i + 1] == "'":
                literal.append("'")
                i += 2
                continue
            end = i + 1
            while True:
                end = pattern.find("'", end)
                if end == -1:
                    raise InvalidArgumentError("pattern", pattern, "unterminated quote")
                if end + 1 < n and pattern[end + 1] == "'":
                    literal.append(pattern[i + 1 : end + 1])
                    i = end + 1
                    end += 2
                    continue
                break
            literal.append(pattern[i + 1 : end])
            i = end + 1
            continue

        if char in TOKENS:
            run = i
            while run < n and pattern[run] == char:
                run += 1
            if literal:
                segments.append("".join(literal))
                literal = []
            segments.append(TOKENS[char](run - i))
            i = run
            continue

        if char.isascii() and char.isalpha():
            raise InvalidArgumentError("pattern", pattern, f"unsupported field {char!r}")

        literal.append(char)
        i += 1

    if literal:
        segments.append("".join(literal))
    return segments


@lru_cache(maxsize=128)
def compile_pattern(pattern: str) -> DatePattern:
    """
    Compile a date pattern, reusing earlier compilations.

    Args:
        pattern: ICU-style pattern text

    Returns:
        Compiled DatePattern

    Raises:
        InvalidArgumentError: On unsupported letters or an unterminated quote
    """
    return DatePattern(pattern=pattern, segments=tuple(_parse(pattern)))
