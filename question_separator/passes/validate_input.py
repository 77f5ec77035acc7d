"""Input validation pass.

Rejects text the separator should not see (empty, non-string, or longer
than ``max_chars``) and records a heuristic analysis of the input under
``meta["input_analysis"]``. The payload passes through unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass

from question_separator.framework import Artifact, register
from question_separator.validation import (
    MAX_INPUT_CHARS,
    analyze_input,
    ensure_valid_text,
)


@dataclass(frozen=True)
class _ValidateInputPass:
    name: str = "validate_input"
    input_type: type = str
    output_type: type = str
    max_chars: int = MAX_INPUT_CHARS
    force_mode: bool = False

    def __call__(self, a: Artifact) -> Artifact:
        text = ensure_valid_text(a.payload, self.max_chars)
        analysis = analyze_input(text, force_mode=self.force_mode)
        meta = {**a.meta, "input_analysis": analysis.to_dict()}
        return Artifact(payload=text, meta=meta)


validate_input = register(_ValidateInputPass())
