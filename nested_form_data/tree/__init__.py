"""Nested tree construction with duplicate and mixed-array detection."""

from .builder import TreeBuilder
from .kinds import PathKind


__all__ = ["PathKind", "TreeBuilder"]
