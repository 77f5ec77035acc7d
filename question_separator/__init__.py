"""Deterministic, heuristic separation of pasted text into question cards."""

# Auto-register passes on package import (e.g., when importing any submodule)
from . import passes  # noqa: F401
from .engine import LineRoute, process_text_to_questions, route_line
from .models import ProcessingResult, Question, Statistics
from .patterns import ProcessingMethod, SourceTag
from .splitting import split_by_lines, split_by_sentences, split_mixed_punctuation
from .strategies import (
    LineHeuristicStrategy,
    clean_line_prefix,
    detect_question_in_line,
    has_mixed_punctuation,
    has_multiple_questions,
)
from .transform import transform_to_question

__all__ = [
    "LineHeuristicStrategy",
    "LineRoute",
    "ProcessingMethod",
    "ProcessingResult",
    "Question",
    "SourceTag",
    "Statistics",
    "clean_line_prefix",
    "detect_question_in_line",
    "has_mixed_punctuation",
    "has_multiple_questions",
    "process_text_to_questions",
    "route_line",
    "split_by_lines",
    "split_by_sentences",
    "split_mixed_punctuation",
    "transform_to_question",
]
