from __future__ import annotations

import json
import logging
import sys
from collections.abc import Callable, Iterator, Mapping
from pathlib import Path
from typing import Any

import typer

from question_separator.adapters import emit_jsonl
from question_separator.adapters.response import to_extract_response
from question_separator.config import load_spec
from question_separator.core import run_extract
from question_separator.selftest import run_self_tests
from question_separator.validation import analyze_input


def _spec_path_candidates(path: str | Path) -> Iterator[Path]:
    """Yield potential spec locations without hitting the filesystem."""
    candidate = Path(path)
    pkg_dir = Path(__file__).resolve().parent
    yield from (
        candidate,
        pkg_dir.parent / candidate,
    )


def _resolve_spec_path(path: str | Path) -> Path:
    """Pick the first existing pipeline spec from candidate locations."""
    return next((p for p in _spec_path_candidates(path) if p.exists()), Path(path))


def _format_timings(timings: Mapping[str, float]) -> str:
    """Return ``timings`` as newline-delimited ``name: seconds`` strings."""
    return "\n".join(f"{n}: {t:.4f}s" for n, t in timings.items())


def _exit_with_error(exc: Exception) -> None:
    """Print ``exc`` to stderr and exit with status 1."""
    print(f"error: {exc}", file=sys.stderr)
    raise typer.Exit(1)


def _safe(func: Callable[[], None]) -> None:
    """Invoke ``func`` and exit non-zero on any exception."""
    try:
        func()
    except typer.Exit:
        raise
    except Exception as exc:
        _exit_with_error(exc)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _read_input(input_path: Path | None, text: str | None) -> str:
    if text is not None:
        return text
    if input_path is None:
        raise ValueError("provide INPUT_PATH or --text")
    return input_path.read_text(encoding="utf-8")


def _cli_overrides(
    max_questions: int | None,
    max_chars: int | None,
    force: bool,
) -> dict[str, dict[str, Any]]:
    validate_opts: dict[str, Any] = {
        k: v
        for k, v in {
            "max_chars": max_chars,
            "force_mode": True if force else None,
        }.items()
        if v is not None
    }
    separate_opts: dict[str, Any] = (
        {"max_questions": max_questions} if max_questions is not None else {}
    )
    return {
        k: v
        for k, v in {
            "validate_input": validate_opts,
            "separate_questions": separate_opts,
        }.items()
        if v
    }


def _print_json(data: Any) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _run_extract(
    input_path: Path | None,
    text: str | None,
    max_questions: int | None,
    max_chars: int | None,
    force: bool,
    out: Path | None,
    spec: str,
    verbose: bool,
) -> None:
    _configure_logging(verbose)
    s = load_spec(
        _resolve_spec_path(spec),
        overrides=_cli_overrides(max_questions, max_chars, force),
    )
    artifact, timings = run_extract(_read_input(input_path, text), s)
    emit_jsonl.maybe_write(artifact, {"output_path": str(out) if out else None})
    _print_json(to_extract_response(artifact.payload))
    if verbose:
        print(_format_timings(timings), file=sys.stderr)


def _run_analyze(input_path: Path | None, text: str | None, force: bool) -> None:
    analysis = analyze_input(_read_input(input_path, text), force_mode=force)
    _print_json(analysis.to_dict())


def _run_selftest() -> None:
    report = run_self_tests()
    _print_json(report.to_dict())
    if not report.ok:
        raise typer.Exit(1)


app = typer.Typer(add_completion=False, no_args_is_help=True)


@app.command()
def extract(
    input_path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    text: str | None = typer.Option(None, "--text"),
    max_questions: int | None = typer.Option(None, "--max-questions"),
    max_chars: int | None = typer.Option(None, "--max-chars"),
    force: bool = typer.Option(False, "--force"),
    out: Path | None = typer.Option(None, "--out"),
    spec: str = typer.Option("pipeline.yaml", "--spec"),
    verbose: bool = typer.Option(False, "--verbose"),
) -> None:
    """Separate text into question cards and print them as JSON."""
    _safe(
        lambda: _run_extract(
            input_path,
            text,
            max_questions,
            max_chars,
            force,
            out,
            spec,
            verbose,
        )
    )


@app.command()
def analyze(
    input_path: Path | None = typer.Argument(
        None,
        exists=True,
        dir_okay=False,
        readable=True,
    ),
    text: str | None = typer.Option(None, "--text"),
    force: bool = typer.Option(False, "--force"),
) -> None:
    """Report heuristic signals about the input without separating it."""
    _safe(lambda: _run_analyze(input_path, text, force))


@app.command()
def selftest() -> None:
    """Run the built-in scenario checks."""
    _safe(_run_selftest)


if __name__ == "__main__":
    app()
