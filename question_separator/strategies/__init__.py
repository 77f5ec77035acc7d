"""Strategy objects encapsulating reusable heuristics."""

from .lines import (  # noqa: F401
    DEFAULT_STRATEGY,
    LineHeuristicStrategy,
    clean_line_prefix,
    detect_question_in_line,
    has_mixed_punctuation,
    has_multiple_questions,
    prefix_source,
)

__all__ = [
    "LineHeuristicStrategy",
    "DEFAULT_STRATEGY",
    "detect_question_in_line",
    "has_multiple_questions",
    "has_mixed_punctuation",
    "clean_line_prefix",
    "prefix_source",
]
