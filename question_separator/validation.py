"""Input checks applied before text reaches the engine.

The engine accepts any string; these helpers hold the policy callers
enforce at their boundary (length ceiling, non-empty text) together with
a quick heuristic read of whether the input is worth separating at all.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict

from question_separator.models import round_half_up
from question_separator.patterns import BULLET_LINE_RE, NUMBERED_LINE_RE

MAX_INPUT_CHARS = 5000


class InputValidationError(ValueError):
    """Raised when text is rejected before separation."""


class InvalidTextError(InputValidationError):
    def __init__(self, message: str = "Invalid text input") -> None:
        super().__init__(message)


class InputTooLongError(InputValidationError):
    def __init__(self, character_count: int, max_allowed: int) -> None:
        self.character_count = character_count
        self.max_allowed = max_allowed
        super().__init__(
            "Your input is too long. Please split it into smaller chunks "
            f"under {max_allowed} characters."
        )


def ensure_valid_text(text: Any, max_chars: int = MAX_INPUT_CHARS) -> str:
    """Return ``text`` when it is a non-empty string within ``max_chars``."""

    if not text or not isinstance(text, str):
        raise InvalidTextError()
    if len(text) > max_chars:
        raise InputTooLongError(len(text), max_chars)
    return text


@dataclass(frozen=True)
class InputAnalysis:
    question_marks_found: int
    lines_count: int
    average_line_length: int
    has_bullet_points: bool
    can_proceed: bool
    confidence_score: float

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def analyze_input(text: str, force_mode: bool = False) -> InputAnalysis:
    """Score how likely ``text`` is to contain separable questions."""

    question_marks = text.count("?")
    lines = [line for line in text.split("\n") if line.strip()]
    average = sum(len(line) for line in lines) / len(lines) if lines else 0
    has_bullets = bool(BULLET_LINE_RE.search(text) or NUMBERED_LINE_RE.search(text))
    can_proceed = force_mode or (
        question_marks > 0 or len(lines) > 1 or has_bullets or len(text) > 100
    )
    score = min(
        1.0,
        question_marks * 0.3
        + min(len(lines) / 5, 1) * 0.3
        + (0.2 if has_bullets else 0)
        + min(len(text) / 500, 1) * 0.2,
    )
    return InputAnalysis(
        question_marks_found=question_marks,
        lines_count=len(lines),
        average_line_length=int(round_half_up(average)),
        has_bullet_points=has_bullets,
        can_proceed=can_proceed,
        confidence_score=score,
    )


__all__ = [
    "InputAnalysis",
    "InputTooLongError",
    "InputValidationError",
    "InvalidTextError",
    "MAX_INPUT_CHARS",
    "analyze_input",
    "ensure_valid_text",
]
