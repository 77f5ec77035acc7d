from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

from question_separator.framework import Artifact
from question_separator.models import ProcessingResult


def _rows(payload: Any) -> Iterable[dict[str, Any]]:
    """Yield one row per question, tagged with the call's processing method."""

    if not isinstance(payload, ProcessingResult):
        return ()
    method = payload.processing_method
    return ({**q.to_dict(), "processing_method": method} for q in payload.questions)


def _serialize(rows: Iterable[dict[str, Any]]) -> Iterator[str]:
    """Serialize dictionaries to JSON lines."""
    return (json.dumps(r, ensure_ascii=False) for r in rows)


def _write(path: str, lines: Iterable[str]) -> None:
    """Write ``lines`` to ``path`` with trailing newlines."""
    path_obj = Path(path)
    path_obj.parent.mkdir(parents=True, exist_ok=True)
    with path_obj.open("w", encoding="utf-8") as f:
        f.writelines(f"{line}\n" for line in lines)


def write(rows: Iterable[dict[str, Any]], path: str | None) -> None:
    """Write ``rows`` to JSONL at ``path`` when provided."""
    if not path:
        return
    _write(path, _serialize(rows))


def maybe_write(artifact: Artifact, options: dict[str, Any]) -> None:
    """Write the artifact's questions to JSONL if ``output_path`` is specified."""
    write(_rows(artifact.payload), options.get("output_path"))
