"""Interface for ``python -m nested_form_data``."""

from __future__ import annotations

import json
import logging
import math
import sys
from argparse import ArgumentParser
from typing import TYPE_CHECKING, Any
from urllib.parse import parse_qsl

from ._version import version
from .errors import FormDataError
from .form import parse_form_data


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


def _split_pair(pair: str) -> tuple[str, str]:
    path, sep, value = pair.partition("=")
    if not sep:
        msg = f"expected path=value, got {pair!r}"
        raise ValueError(msg)
    return path, value


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats with None, as JSON has no NaN or Infinity."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_json_safe(item) for item in value]
    return value


def _entries(pairs: Sequence[str], query: str | None) -> list[tuple[str, Any]]:
    entries: list[tuple[str, Any]] = []
    if query is not None:
        text = sys.stdin.read() if query == "-" else query
        entries.extend(parse_qsl(text.strip(), keep_blank_values=True))
    entries.extend(_split_pair(pair) for pair in pairs)
    return entries


def main(args: Sequence[str] | None = None) -> int:
    """Parse form entries from the command line and print them as JSON."""
    parser = ArgumentParser(prog="nested-form-data", description="Rebuild nested JSON from bracket/dot form entries.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("pairs", nargs="*", metavar="PATH=VALUE", help="form entries, in order")
    _ = parser.add_argument(
        "--query", help="urlencoded form body parsed before PAIRS ('-' reads stdin); encode a leading + as %%2B"
    )
    _ = parser.add_argument("--remove-empty-string", action="store_true", help="skip entries with empty values")
    _ = parser.add_argument("--indent", type=int, default=None, help="JSON indentation")
    _ = parser.add_argument(
        "--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"], type=str.upper
    )
    namespace = parser.parse_args(args)

    logging.basicConfig(level=namespace.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        entries = _entries(namespace.pairs, namespace.query)
    except ValueError as exc:
        parser.error(str(exc))

    try:
        result = parse_form_data(entries, remove_empty_string=namespace.remove_empty_string)
    except FormDataError as exc:
        print(f"{type(exc).__name__}: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(_json_safe(result), indent=namespace.indent, allow_nan=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
