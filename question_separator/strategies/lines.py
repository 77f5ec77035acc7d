"""Line classification heuristics packaged as a pure strategy."""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import reduce
from typing import Tuple

from question_separator.patterns import (
    MIXED_PUNCTUATION_RE,
    PREFIX_PATTERNS,
    QUESTION_OR_EXCLAMATION_RE,
    Pattern,
    SourceTag,
)


@dataclass(frozen=True)
class LineHeuristicStrategy:
    """Encapsulate the per-line question heuristics as pure callables."""

    min_text_length: int = 5
    short_statement_length: int = 100
    fallback_min_length: int = 20
    fallback_max_length: int = 200
    prefix_patterns: Tuple[Pattern, ...] = field(default=PREFIX_PATTERNS)

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------
    def has_prefix(self, line: str) -> bool:
        """Return ``True`` when ``line`` starts with any structural prefix."""

        return any(p.matches(line) for p in self.prefix_patterns)

    def detect_question_in_line(self, line: str) -> bool:
        """Return ``True`` when ``line`` already looks like a question.

        Any ``?``/``!``, a short period-terminated statement, or a bullet,
        numbered or ``Q:`` prefix qualifies.
        """

        return bool(
            QUESTION_OR_EXCLAMATION_RE.search(line)
            or (line.endswith(".") and len(line) < self.short_statement_length)
            or self.has_prefix(line)
        )

    def has_multiple_questions(self, line: str) -> bool:
        """Return ``True`` when ``line`` holds more than one question mark."""

        return line.count("?") > 1

    def has_mixed_punctuation(self, line: str) -> bool:
        """Return ``True`` when two sentence terminators appear in ``line``."""

        return bool(MIXED_PUNCTUATION_RE.search(line))

    def needs_split(self, line: str) -> bool:
        """Return ``True`` when ``line`` should go to the multi-question splitter."""

        return self.has_multiple_questions(line) or self.has_mixed_punctuation(line)

    def in_fallback_window(self, line: str) -> bool:
        """Return ``True`` when ``line`` may be transformed into a question."""

        return self.fallback_min_length < len(line) < self.fallback_max_length

    def keeps(self, text: str) -> bool:
        """Return ``True`` when ``text`` is long enough to be a question."""

        return len(text) > self.min_text_length

    # ------------------------------------------------------------------
    # Prefix cleaning
    # ------------------------------------------------------------------
    def clean_line_prefix(self, line: str) -> str:
        """Strip each structural prefix once, in precedence order."""

        return reduce(lambda acc, p: p.strip(acc), self.prefix_patterns, line).strip()

    def prefix_source(self, line: str) -> str:
        """Return the source tag of the first prefix matching ``line``."""

        return next(
            (p.source.value for p in self.prefix_patterns if p.matches(line)),
            SourceTag.LINE_CLEANED.value,
        )


DEFAULT_STRATEGY = LineHeuristicStrategy()


def _resolve(strategy: LineHeuristicStrategy | None) -> LineHeuristicStrategy:
    return strategy or DEFAULT_STRATEGY


def detect_question_in_line(
    line: str, strategy: LineHeuristicStrategy | None = None
) -> bool:
    return _resolve(strategy).detect_question_in_line(line)


def has_multiple_questions(
    line: str, strategy: LineHeuristicStrategy | None = None
) -> bool:
    return _resolve(strategy).has_multiple_questions(line)


def has_mixed_punctuation(
    line: str, strategy: LineHeuristicStrategy | None = None
) -> bool:
    return _resolve(strategy).has_mixed_punctuation(line)


def clean_line_prefix(line: str, strategy: LineHeuristicStrategy | None = None) -> str:
    return _resolve(strategy).clean_line_prefix(line)


def prefix_source(line: str, strategy: LineHeuristicStrategy | None = None) -> str:
    return _resolve(strategy).prefix_source(line)


__all__ = [
    "DEFAULT_STRATEGY",
    "LineHeuristicStrategy",
    "clean_line_prefix",
    "detect_question_in_line",
    "has_mixed_punctuation",
    "has_multiple_questions",
    "prefix_source",
]
