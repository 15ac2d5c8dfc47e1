"""Default per-entry transform: strip a type marker from the path and coerce the value.

In front of the whole path:

- ``+`` parses the value as a number
- ``&`` parses the value as a boolean (only the exact string ``"true"`` is True)
- ``-`` replaces the value with ``None``

Values that are not ``str`` (uploaded files and similar blobs) are opaque and
passed through unchanged unless a marker overrides them.
"""

from __future__ import annotations

import math
import re
from typing import Any, NamedTuple


NUMBER_MARKER = "+"
BOOLEAN_MARKER = "&"
NULL_MARKER = "-"

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY = re.compile(r"([+-]?)Infinity")
_RADIX = {
    "x": (re.compile(r"[0-9a-fA-F]+"), 16),
    "o": (re.compile(r"[0-7]+"), 8),
    "b": (re.compile(r"[01]+"), 2),
}


class TransformedEntry(NamedTuple):
    """Structural path and leaf value produced for one form entry."""

    path: str
    value: Any


def to_number(value: Any) -> int | float:
    """Convert a form value to a number the way browsers' ``Number()`` does.

    Blank strings become ``0``; integer literals become ``int``; unsigned
    hexadecimal, octal and binary literals (``0x1f``) become ``int``; other
    decimal literals and ``Infinity`` become ``float``. Only ASCII digits count.
    Anything else, including ``inf``, ``nan`` and blobs, becomes ``nan``.
    """
    if not isinstance(value, str):
        return math.nan
    text = value.strip()
    if not text:
        return 0

    if len(text) > 2 and text[0] == "0" and text[1].lower() in _RADIX:
        pattern, radix = _RADIX[text[1].lower()]
        if pattern.fullmatch(text[2:]):
            return int(text[2:], radix)
        return math.nan

    if _INTEGER.fullmatch(text):
        return int(text)
    if _DECIMAL.fullmatch(text):
        return float(text)
    infinity = _INFINITY.fullmatch(text)
    if infinity:
        return -math.inf if infinity.group(1) == "-" else math.inf
    return math.nan


def to_boolean(value: Any) -> bool:
    return value == "true"


def default_transform(entry: tuple[str, Any]) -> TransformedEntry:
    """Map a raw ``(path, value)`` entry to its structural path and leaf value.

    >>> default_transform(("+a[0]", "1"))
    TransformedEntry(path='a[0]', value=1)
    >>> default_transform(("&a", "true"))
    TransformedEntry(path='a', value=True)
    >>> default_transform(("-a", "null"))
    TransformedEntry(path='a', value=None)
    """
    path, value = entry
    marker, rest = path[:1], path[1:]
    if marker == NUMBER_MARKER:
        return TransformedEntry(rest, to_number(value))
    if marker == BOOLEAN_MARKER:
        return TransformedEntry(rest, to_boolean(value))
    if marker == NULL_MARKER:
        return TransformedEntry(rest, None)
    return TransformedEntry(path, value)
