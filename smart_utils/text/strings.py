"""
String Helpers.

Transformations and validators over optional input strings.
None and empty input never raise; they map to an empty result or False.
"""

import re

from smart_utils.errors import InvalidArgumentError

# Compiled once at import and shared by every call
_SLUG_SEPARATOR_RE = re.compile(r"[^a-z0-9]+")
_SLUG_EDGE_RE = re.compile(r"^-|-$")

_EMAIL_RE = re.compile(
    r"^[a-zA-Z0-9.!#$%&*+/=?^_`{|}~-]+"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$",
    re.ASCII,
)

_URL_RE = re.compile(
    r"^https?://(www\.)?[-a-zA-Z0-9@:%._+~#=]{1,256}\.[a-zA-Z0-9()]{1,6}\b"
    r"([-a-zA-Z0-9()@:%_+.~#?&/=]*)$",
    re.ASCII,
)


def capitalize(text: str | None) -> str:
    """
    Uppercase the first character and keep the rest unchanged.

    Unlike str.capitalize, the remainder is not lowercased.

    Args:
        text: Input string

    Returns:
        Capitalized string, or "" for None/empty input
    """
    if not text:
        return ""
    return text[0].upper() + text[1:]


def slugify(text: str | None) -> str:
    """
    Convert text into a URL-friendly slug.

    Example:
        slugify("Hello World!")  # "hello-world"
    """
    if not text:
        return ""
    slug = _SLUG_SEPARATOR_RE.sub("-", text.lower().strip())
    return _SLUG_EDGE_RE.sub("", slug)


def truncate(text: str | None, max_length: int, suffix: str = "...") -> str:
    """
    Shorten text to at most max_length characters including the suffix.

    Args:
        text: Input string
        max_length: Maximum length of the result
        suffix: Appended when the text is cut

    Returns:
        Truncated string

    Raises:
        InvalidArgumentError: If max_length is negative
    """
    if max_length < 0:
        raise InvalidArgumentError("max_length", max_length, "must be non-negative")
    if text is None:
        return ""
    if len(text) <= max_length:
        return text
    if max_length <= len(suffix):
        return suffix
    return text[: max_length - len(suffix)] + suffix


def is_email(text: str | None) -> bool:
    """Check whether text is a syntactically valid email address."""
    if not text:
        return False
    return _EMAIL_RE.match(text.strip()) is not None


def is_url(text: str | None) -> bool:
    """Check whether text is an http(s) URL."""
    if not text:
        return False
    return _URL_RE.match(text.strip()) is not None
