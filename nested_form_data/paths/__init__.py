"""Path parsing for bracket/dot form keys."""

from .parser import MAX_INDEX, parse_path
from .segments import IndexSegment, KeySegment, Segment, format_path


__all__ = ["MAX_INDEX", "IndexSegment", "KeySegment", "Segment", "format_path", "parse_path"]
