"""Typed segments of a parsed form path."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias


if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(frozen=True, slots=True)
class KeySegment:
    """Object property step, e.g. ``b`` in ``a.b``."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class IndexSegment:
    """Array step: ``[n]`` when ``index`` is set, ``[]`` (append) when it is None."""

    index: int | None = None

    @property
    def auto(self) -> bool:
        return self.index is None

    def __str__(self) -> str:
        return "[]" if self.index is None else f"[{self.index}]"


Segment: TypeAlias = KeySegment | IndexSegment


def format_path(segments: Iterable[Segment]) -> str:
    """Render segments back into canonical path text such as ``a[0].b[]``."""
    rendered: list[str] = []
    for segment in segments:
        if isinstance(segment, KeySegment) and rendered:
            rendered.append(".")
        rendered.append(str(segment))
    return "".join(rendered)
