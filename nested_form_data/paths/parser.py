"""Parse ``name[index].name`` path strings into segments."""

from __future__ import annotations

from typing import TYPE_CHECKING

from nested_form_data.errors import PathSyntaxError

from .segments import IndexSegment, KeySegment


if TYPE_CHECKING:
    from collections.abc import Iterator

    from .segments import Segment


# Largest explicit array index accepted; lists are padded up to it.
MAX_INDEX = 10_000


def _parse_index(content: str, path: str, max_index: int) -> IndexSegment:
    if not content:
        return IndexSegment()
    # str.isdigit alone also accepts non-ASCII digits such as "²"
    if not (content.isascii() and content.isdigit()):
        msg = f"array index must be empty or digits, got {content!r}"
        raise PathSyntaxError(path, msg)
    index = int(content)
    if index > max_index:
        msg = f"array index {index} exceeds the limit of {max_index}"
        raise PathSyntaxError(path, msg)
    return IndexSegment(index)


def _parse_part(part: str, path: str, max_index: int) -> Iterator[Segment]:
    bracket = part.find("[")
    name = part if bracket == -1 else part[:bracket]
    if not name:
        msg = f"path part {part!r} has no name"
        raise PathSyntaxError(path, msg)
    yield KeySegment(name)

    rest = part[len(name) :]
    while rest:
        if not rest.startswith("["):
            msg = f"unexpected {rest!r} after array index"
            raise PathSyntaxError(path, msg)
        close = rest.find("]")
        if close == -1:
            msg = "unterminated '['"
            raise PathSyntaxError(path, msg)
        yield _parse_index(rest[1:close], path, max_index)
        rest = rest[close + 1 :]


def parse_path(path: str, *, max_index: int = MAX_INDEX) -> tuple[Segment, ...]:
    """Split a path into key and index segments, in left-to-right order.

    ``a[0][].b`` becomes ``(KeySegment("a"), IndexSegment(0), IndexSegment(None),
    KeySegment("b"))``. The first segment is always a key segment. Explicit
    indices above ``max_index`` raise ``PathSyntaxError``.
    """
    if not path:
        msg = "path must not be empty"
        raise PathSyntaxError(path, msg)

    segments: list[Segment] = []
    for part in path.split("."):
        if not part:
            msg = "path contains an empty part"
            raise PathSyntaxError(path, msg)
        segments.extend(_parse_part(part, path, max_index))
    return tuple(segments)
