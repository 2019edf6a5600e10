"""
Text Helpers.

String transformation and validation.
"""

from smart_utils.text.strings import (
    capitalize,
    is_email,
    is_url,
    slugify,
    truncate,
)

__all__ = [
    "capitalize",
    "slugify",
    "truncate",
    "is_email",
    "is_url",
]
