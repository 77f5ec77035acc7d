from __future__ import annotations

import json
import os
import subprocess
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]


def _run_cli(*args: str, cwd: Path | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, "-m", "question_separator.cli", *args],
        capture_output=True,
        text=True,
        env={**os.environ, "PYTHONPATH": str(ROOT)},
        cwd=cwd,
    )


def test_extract_inline_text() -> None:
    result = _run_cli("extract", "--text", "What is AI?\nHow does ML work?")

    assert result.returncode == 0, result.stderr
    body = json.loads(result.stdout)
    texts = [q["text"] for q in body["questions"]]
    assert texts == ["What is AI?", "How does ML work?"]
    assert body["processing_summary"]["method"] == "line_breaks"


def test_extract_file_with_cap_and_jsonl_output(tmp_path: Path) -> None:
    src = tmp_path / "input.txt"
    src.write_text("• What is AI?\n• How does ML work?\n• Why?", encoding="utf-8")
    out = tmp_path / "out.jsonl"

    result = _run_cli(
        "extract", str(src), "--max-questions", "1", "--out", str(out), cwd=tmp_path
    )

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout)["limited_to"] == 1
    assert len(out.read_text(encoding="utf-8").splitlines()) == 1


def test_extract_rejects_long_input() -> None:
    result = _run_cli("extract", "--text", "What is AI?", "--max-chars", "5")

    assert result.returncode == 1
    assert "too long" in result.stderr


def test_extract_missing_file_exits_nonzero() -> None:
    result = _run_cli("extract", "missing.txt")

    assert result.returncode != 0
    err = result.stderr.lower()
    assert "does not exist" in err or "no such file" in err


def test_extract_without_input_fails() -> None:
    result = _run_cli("extract")

    assert result.returncode == 1
    assert "INPUT_PATH" in result.stderr


def test_analyze() -> None:
    result = _run_cli("analyze", "--text", "What is AI?")

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout)["question_marks_found"] == 1


def test_selftest() -> None:
    result = _run_cli("selftest")

    assert result.returncode == 0, result.stderr
    report = json.loads(result.stdout)
    assert report["passed"] == report["total"] == 4
