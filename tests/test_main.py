import io
import json

import pytest

from nested_form_data.__main__ import main
from nested_form_data._version import version


def test_main_prints_nested_json(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["a[0]=foo", "a[1]=bar", "+b.c=2"]) == 0
    assert json.loads(capsys.readouterr().out) == {"a": ["foo", "bar"], "b": {"c": 2}}


def test_main_marker_pairs_after_separator(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--", "-c=anything", "&d=true"]) == 0
    assert json.loads(capsys.readouterr().out) == {"c": None, "d": True}


def test_main_reads_query_before_pairs(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--query", "a%5B%5D=x&a[]=y&%2Bn=5", "a[]=z"]) == 0
    assert json.loads(capsys.readouterr().out) == {"a": ["x", "y", "z"], "n": 5}


def test_main_reads_query_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("a.b=1&a.c=\n"))
    assert main(["--query", "-", "--remove-empty-string"]) == 0
    assert json.loads(capsys.readouterr().out) == {"a": {"b": "1"}}


def test_main_indent(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--indent", "2", "a=b"]) == 0
    assert capsys.readouterr().out == '{\n  "a": "b"\n}\n'


def test_main_reports_structural_errors(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["a[0]=x", "a[]=y"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("MixedArrayError: 'a[]'")


def test_main_rejects_pairs_without_value(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = main(["novalue"])
    assert exc_info.value.code == 2
    assert "expected path=value" in capsys.readouterr().err


def test_main_version(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as exc_info:
        _ = main(["--version"])
    assert exc_info.value.code == 0
    assert version in capsys.readouterr().out


def test_main_writes_unparseable_numbers_as_null(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["+a=abc", "+b[]=1", "+b[]=Infinity"]) == 0
    out = capsys.readouterr().out
    assert "NaN" not in out
    assert json.loads(out) == {"a": None, "b": [1, None]}


def test_main_reports_index_over_limit(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["a[100000000000]=x"]) == 1
    assert capsys.readouterr().err.startswith("PathSyntaxError: 'a[100000000000]'")
