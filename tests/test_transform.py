import io
import math

import pytest

from nested_form_data.transform import TransformedEntry, default_transform, to_boolean, to_number


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("1", 1),
        ("-12", -12),
        ("  42 ", 42),
        ("1.5", 1.5),
        ("1e3", 1000.0),
        ("", 0),
        ("   ", 0),
        ("0x1f", 31),
        ("0B101", 5),
        ("0o17", 15),
        ("+5", 5),
        ("1.", 1.0),
        (".5", 0.5),
        ("2E-1", 0.2),
        ("Infinity", math.inf),
        ("-Infinity", -math.inf),
    ],
)
def test_to_number_parses_numeric_strings(raw: str, expected: float) -> None:
    result = to_number(raw)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "raw",
    [
        "abc",
        "1_000",
        "0xzz",
        "0x",
        "-0x10",
        "1,5",
        "inf",
        "infinity",
        "nan",
        "NaN",
        "\u0661\u0662",
        "\uff11",
        io.BytesIO(b"1"),
    ],
)
def test_to_number_returns_nan_for_unparseable_values(raw: object) -> None:
    assert math.isnan(to_number(raw))


def test_to_boolean_only_accepts_literal_true() -> None:
    assert to_boolean("true") is True
    assert to_boolean("True") is False
    assert to_boolean("1") is False
    assert to_boolean("") is False
    assert to_boolean("false") is False


def test_default_transform_without_marker_passes_value_through() -> None:
    assert default_transform(("a[0]", "b")) == TransformedEntry("a[0]", "b")
    blob = io.BytesIO(b"file contents")
    result = default_transform(("upload", blob))
    assert result.path == "upload"
    assert result.value is blob


def test_default_transform_markers_coerce_and_are_stripped() -> None:
    assert default_transform(("+a[0]", "1")) == TransformedEntry("a[0]", 1)
    assert default_transform(("&a.b", "true")) == TransformedEntry("a.b", True)
    assert default_transform(("&a.b", "yes")) == TransformedEntry("a.b", False)
    assert default_transform(("-a", "null")) == TransformedEntry("a", None)
    assert default_transform(("-a", io.BytesIO(b""))) == TransformedEntry("a", None)


def test_default_transform_only_strips_first_marker() -> None:
    assert default_transform(("+-a", "3")) == TransformedEntry("-a", 3)
