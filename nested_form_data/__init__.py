"""nested-form-data - rebuild nested JSON-like objects from bracket/dot form keys"""

from ._version import version as __version__
from .errors import DuplicateKeyError, FormDataError, MixedArrayError, PathSyntaxError
from .form import ParseFormDataOptions, parse_form_data
from .paths import MAX_INDEX, IndexSegment, KeySegment, format_path, parse_path
from .transform import TransformedEntry, default_transform
from .tree import PathKind, TreeBuilder


__all__ = [
    "MAX_INDEX",
    "DuplicateKeyError",
    "FormDataError",
    "IndexSegment",
    "KeySegment",
    "MixedArrayError",
    "ParseFormDataOptions",
    "PathKind",
    "PathSyntaxError",
    "TransformedEntry",
    "TreeBuilder",
    "__version__",
    "default_transform",
    "format_path",
    "parse_form_data",
    "parse_path",
]
