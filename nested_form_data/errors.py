"""Errors raised while turning form entries into a nested structure."""

from __future__ import annotations


class FormDataError(ValueError):
    """Base class for all structural form-data errors.

    ``key`` is the path string of the entry that triggered the error.
    """

    def __init__(self, key: str, reason: str | None = None) -> None:
        self.key = key
        self.reason = reason
        msg = f"{key!r}: {reason}" if reason else repr(key)
        super().__init__(msg)


class PathSyntaxError(FormDataError):
    """Raised when a path does not follow the ``name[index].name`` grammar."""


class DuplicateKeyError(FormDataError):
    """Raised when a path is assigned twice or used as two different kinds.

    Entries ``("a", "b")`` followed by ``("a[]", "c")`` raise with ``key == "a[]"``.
    """


class MixedArrayError(FormDataError):
    """Raised when one array is addressed both with ``[n]`` and with ``[]``."""
