"""Parse flat form entries into a nested JSON-like object."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from typing import Any, TypeAlias

from .paths import MAX_INDEX, parse_path
from .transform import TransformedEntry, default_transform
from .tree import TreeBuilder


logger = logging.getLogger(__name__)

Entry: TypeAlias = tuple[str, Any]
DefaultTransform: TypeAlias = Callable[[Entry], TransformedEntry]
TransformEntry: TypeAlias = Callable[[Entry, DefaultTransform], tuple[str, Any]]


@dataclass(frozen=True)
class ParseFormDataOptions:
    """Options changing how ``parse_form_data`` reads entries.

    Parameters
    ----------
    remove_empty_string
        Skip entries whose transformed value is ``""``. Skipped entries take no
        part in duplicate or mixed-array detection.
    transform_entry
        ``(entry, default_transform) -> (path, value)`` called for every entry.
        Defaults to ``default_transform``.
    max_index
        Largest explicit array index accepted in a path. Larger indices raise
        ``PathSyntaxError`` instead of padding a huge list.
    """

    remove_empty_string: bool = False
    transform_entry: TransformEntry | None = None
    max_index: int = MAX_INDEX

    def transform(self, entry: Entry) -> tuple[str, Any]:
        if self.transform_entry is None:
            return default_transform(entry)
        transformed = self.transform_entry(entry, default_transform)
        if not isinstance(transformed, tuple) or len(transformed) != 2:
            msg = f"transform_entry must return a (path, value) pair, got {transformed!r}"
            raise TypeError(msg)
        if not isinstance(transformed[0], str):
            msg = f"transform_entry must return a str path, got {transformed[0]!r}"
            raise TypeError(msg)
        return transformed


def parse_form_data(
    form_data: Iterable[Entry] | Mapping[str, Any],
    options: ParseFormDataOptions | None = None,
    *,
    remove_empty_string: bool = False,
    transform_entry: TransformEntry | None = None,
) -> dict[str, Any]:
    """Insert the value of every ``(path, value)`` entry at its path in a new dict.

    Paths use ``.`` to nest into objects and ``[n]`` or ``[]`` to nest into
    arrays (``+a[][1].b``); ``[n]`` places at position ``n``, ``[]`` appends.
    Entries are consumed once, in order. Options are given either as keywords
    or as a ``ParseFormDataOptions`` instance, not both.

    Raises
    ------
    PathSyntaxError
        A path does not follow the grammar.
    DuplicateKeyError
        A path is assigned twice, or used both as a value and as a container,
        or both as an object and as an array.
    MixedArrayError
        One array is addressed both with ``[n]`` and with ``[]``.
    """
    if options is None:
        options = ParseFormDataOptions(remove_empty_string=remove_empty_string, transform_entry=transform_entry)
    elif remove_empty_string or transform_entry is not None:
        msg = "pass either options or keyword options, not both"
        raise TypeError(msg)

    entries = form_data.items() if isinstance(form_data, Mapping) else form_data
    builder = TreeBuilder()
    inserted = skipped = 0
    for entry in entries:
        path, value = options.transform(entry)
        if options.remove_empty_string and isinstance(value, str) and value == "":
            logger.debug("skipping empty value at %r", path)
            skipped += 1
            continue
        builder.insert(parse_path(path, max_index=options.max_index), value, key=path)
        inserted += 1

    logger.debug("parsed %d form entries (%d empty skipped)", inserted, skipped)
    return builder.result
