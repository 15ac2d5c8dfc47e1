"""Kinds a node can be created as, tracked per resolved path prefix."""

from __future__ import annotations

from enum import Enum


class PathKind(Enum):
    OBJECT = "object"
    ARRAY_ORDERED = "array_ordered"
    ARRAY_AUTO = "array_auto"
    LEAF = "leaf"

    @property
    def is_array(self) -> bool:
        return self in {PathKind.ARRAY_ORDERED, PathKind.ARRAY_AUTO}
