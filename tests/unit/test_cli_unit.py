"""
Unit tests for readmetrics/__main__.py

Runs main() with a patched argv and checks the JSON, CSV and text written to
stdout.
"""

import csv
import io
import json
import sys

import pytest

from readmetrics.__main__ import main
from readmetrics.features.readability.constants import (
    READABILITY_MODULE_NAME,
    READABILITY_MODULE_VERSION,
    STANDARD_READABILITY_INDICES,
)


def _run(monkeypatch, capsys, *args: str) -> str:
    monkeypatch.setattr(sys, "argv", ["readmetrics", "--quiet", *args])
    main()
    return capsys.readouterr().out


class TestJsonOutput:
    """Default output is a JSON list of records."""

    def test_inline_texts(self, monkeypatch, capsys):
        out = _run(monkeypatch, capsys, "--text", "The cat sat on the mat.", "--text", "")
        records = json.loads(out)

        assert [record["id"] for record in records] == ["text-1", "text-2"]
        assert records[0]["word_count"] == 6
        assert records[0]["flesch_kincaid_reading_ease"] == 116.1
        assert "clean_text" not in records[0]
        assert records[1]["letter_count"] == 0
        assert records[1]["sentence_count"] is None

    def test_include_clean_text(self, monkeypatch, capsys):
        out = _run(monkeypatch, capsys, "--include-clean-text", "--text", "<p>Hello</p><p>World</p>")
        assert json.loads(out)[0]["clean_text"] == "Hello. world."

    def test_files_identified_by_path(self, monkeypatch, capsys, tmp_path):
        path = tmp_path / "doc.html"
        path.write_text("<p>Hello</p><p>World</p>", encoding="utf-8")

        records = json.loads(_run(monkeypatch, capsys, str(path)))

        assert records[0]["id"] == str(path)
        assert records[0]["sentence_count"] == 2

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("The cat sat on the mat."))
        records = json.loads(_run(monkeypatch, capsys))
        assert records[0]["id"] == "stdin"
        assert records[0]["letter_count"] == 17


class TestCsvOutput:
    """CSV output has a header row and one row per input."""

    def test_rows(self, monkeypatch, capsys):
        out = _run(
            monkeypatch, capsys, "--format", "csv",
            "--text", "The cat sat on the mat.", "--text", "123 456."
        )
        rows = list(csv.reader(io.StringIO(out)))

        assert rows[0][:3] == ["Id", "LetterCount", "WordCount"]
        assert len(rows[0]) == 14
        assert rows[1][:3] == ["text-1", "17", "6"]
        assert rows[2] == ["text-2", "0", "0"] + [""] * 11


class TestTextOutput:
    """Text output prints one summary per input."""

    def test_summaries(self, monkeypatch, capsys):
        out = _run(
            monkeypatch, capsys, "--format", "text",
            "--text", "The cat sat on the mat.", "--text", "42"
        )

        assert out.startswith("[text-1]\n")
        assert "Flesch Reading Ease: 116.1 (Very easy)" in out
        assert "[text-2]\n" in out
        assert "No letters found" in out


class TestDescribe:
    """--describe lists the indices and their references without analyzing."""

    def test_lists_every_index(self, monkeypatch, capsys):
        out = _run(monkeypatch, capsys, "--describe")

        assert out.startswith(f"{READABILITY_MODULE_NAME} {READABILITY_MODULE_VERSION}")
        for name in STANDARD_READABILITY_INDICES:
            assert f"  {name}: " in out
        assert "Flesch, R. (1948)" in out
        assert "McLaughlin" in out

    def test_ignores_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "stdin", io.StringIO("unused"))
        out = _run(monkeypatch, capsys, "--describe")
        assert "References:" in out
        assert sys.stdin.read() == "unused"

class TestErrors:
    """Unreadable inputs stop the run."""

    def test_missing_file_exits(self, monkeypatch, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, capsys, str(tmp_path / "missing.txt"))
        assert exc_info.value.code == 1

    def test_invalid_format_exits(self, monkeypatch, capsys):
        with pytest.raises(SystemExit) as exc_info:
            _run(monkeypatch, capsys, "--format", "xml", "--text", "Hi.")
        assert exc_info.value.code == 2
