"""Shared string filters for gallery parameters and remote payload fields."""
from __future__ import annotations

import re

# Everything outside letters, digits and $-_.+!*'(),{}|\^~[]`<>#%";/?:@&=
URL_ILLEGAL_CHARS = re.compile(r"[^A-Za-z0-9$\-_.+!*'(),{}|\\^~\[\]`<>#%\";/?:@&=]")
NUMBER_ILLEGAL_CHARS = re.compile(r'[^0-9+\-]')
LEADING_INT_PATTERN = re.compile(r'^[+-]?\d+')


def as_text(value: object) -> str:
    """Return ``value`` as a string, mapping ``None`` to the empty string."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    return str(value)


def filter_url(value: object) -> str:
    """Strip characters that are not allowed anywhere in a URL.

    This does not check that the result is a well-formed URL.
    """
    return URL_ILLEGAL_CHARS.sub('', as_text(value))


def filter_number_int(value: object) -> str:
    """Keep only digits and sign characters."""
    return NUMBER_ILLEGAL_CHARS.sub('', as_text(value))


def coerce_int(value: object) -> int:
    """Coerce to an integer from the leading signed-digit prefix, else 0.

    Usage: ``coerce_int('12')`` -> 12, ``coerce_int('+5')`` -> 5,
    ``coerce_int('3-4')`` -> 3, ``coerce_int('')`` -> 0.
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    match = LEADING_INT_PATTERN.match(as_text(value))
    if not match:
        return 0
    return int(match.group(0))
