"""Incremental construction of the nested result from parsed paths.

Every node ever created is recorded in a registry keyed by its resolved
prefix: key segments contribute their name and index segments contribute the
concrete list position (an ``[]`` segment contributes the position it was
appended at). The registry, not the tree content, decides whether a slot is
taken, so ``None`` padding in a list never counts as a set value.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeAlias

from nested_form_data.errors import DuplicateKeyError, MixedArrayError
from nested_form_data.paths import KeySegment

from .kinds import PathKind


if TYPE_CHECKING:
    from collections.abc import Sequence

    from nested_form_data.paths import Segment


Prefix: TypeAlias = tuple[str | int, ...]


def _required_kind(segment: Segment) -> PathKind:
    """Return the container kind a node needs so that ``segment`` can address into it."""
    if isinstance(segment, KeySegment):
        return PathKind.OBJECT
    return PathKind.ARRAY_AUTO if segment.auto else PathKind.ARRAY_ORDERED


def _new_container(kind: PathKind) -> dict[str, Any] | list[Any]:
    return {} if kind is PathKind.OBJECT else []


class TreeBuilder:
    """Build one nested ``dict`` from a sequence of ``insert`` calls."""

    def __init__(self) -> None:
        super().__init__()
        self.result: dict[str, Any] = {}
        self._kinds: dict[Prefix, PathKind] = {(): PathKind.OBJECT}

    def kind_of(self, prefix: Prefix) -> PathKind | None:
        """Return the kind recorded for a resolved prefix, or None if nothing lives there."""
        return self._kinds.get(prefix)

    @staticmethod
    def _slot(container: dict[str, Any] | list[Any], segment: Segment) -> str | int:
        if isinstance(segment, KeySegment):
            return segment.name
        if segment.index is None:
            return len(container)
        return segment.index

    @staticmethod
    def _place(container: dict[str, Any] | list[Any], slot: str | int, value: Any) -> None:
        if isinstance(container, dict):
            container[slot] = value  # type: ignore[index]
            return
        index = int(slot)
        if index >= len(container):
            container.extend([None] * (index + 1 - len(container)))
        container[index] = value

    @staticmethod
    def _check_existing(existing: PathKind, required: PathKind, key: str) -> None:
        if existing is required:
            return
        if existing.is_array and required.is_array:
            msg = "array already uses the other index style"
            raise MixedArrayError(key, msg)
        msg = f"path is already used as {existing.value}"
        raise DuplicateKeyError(key, msg)

    def insert(self, segments: Sequence[Segment], value: Any, *, key: str) -> None:
        """Store ``value`` at the location described by ``segments``.

        ``key`` is the path string reported when the insertion conflicts with
        an earlier one. Intermediate objects and lists are created on first use.
        """
        if not segments or not isinstance(segments[0], KeySegment):
            msg = "segments must start with a key segment"
            raise ValueError(msg)

        container: dict[str, Any] | list[Any] = self.result
        prefix: Prefix = ()
        last = len(segments) - 1

        for position, segment in enumerate(segments):
            slot = self._slot(container, segment)
            prefix = (*prefix, slot)
            existing = self._kinds.get(prefix)

            if position == last:
                if existing is not None:
                    msg = f"path is already used as {existing.value}"
                    raise DuplicateKeyError(key, msg)
                self._place(container, slot, value)
                self._kinds[prefix] = PathKind.LEAF
                return

            required = _required_kind(segments[position + 1])
            if existing is None:
                child = _new_container(required)
                self._place(container, slot, child)
                self._kinds[prefix] = required
                container = child
            else:
                self._check_existing(existing, required, key)
                container = container[slot]  # type: ignore[index]
