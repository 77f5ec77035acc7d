"""Centralized pattern registry for line segmentation decisions.

Every regular expression the separator consults lives here so the
heuristics can be audited (and unit-tested) in one place. Prefix patterns
carry the source tag recorded when they are stripped from a line; their
order in :data:`PREFIX_PATTERNS` is the order in which they are removed and
the priority used when naming the cleaned source.

Design philosophy:
- Declarative over imperative: patterns are data, not nested conditionals
- Precedence is explicit: bullet > numbered > question prefix
- Testable in isolation: each pattern can be unit-tested independently
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum


class SourceTag(str, Enum):
    """Closed vocabulary naming which heuristic produced a question.

    ``line_<N>`` is the one open-ended member and is built by
    :func:`line_source`.
    """

    QUESTION_PRESERVED = "question_preserved"
    EXCLAMATION_CONVERTED = "exclamation_converted"
    PERIOD_CONVERTED = "period_converted"
    NO_PUNCTUATION_CONVERTED = "no_punctuation_converted"
    BULLET_CLEANED = "bullet_cleaned"
    NUMBERED_CLEANED = "numbered_cleaned"
    PREFIX_CLEANED = "prefix_cleaned"
    LINE_CLEANED = "line_cleaned"
    FALLBACK_TRANSFORMED = "fallback_transformed"
    FALLBACK_SENTENCE = "fallback_sentence"


class ProcessingMethod(str, Enum):
    """Closed vocabulary summarising which strategy labelled a call."""

    LINE_BREAKS = "line_breaks"
    MIXED_PUNCTUATION = "mixed_punctuation"
    PREFIX_CLEANING = "prefix_cleaning"
    FALLBACK_PROCESSING = "fallback_processing"
    FALLBACK_SENTENCES = "fallback_sentences"


def line_source(index: int) -> str:
    """Return the ``line_<N>`` tag for a 1-based line ``index``."""
    return f"line_{index}"


@dataclass(frozen=True)
class Pattern:
    """A structural prefix that may be stripped from a line.

    Attributes:
        name: Unique identifier for this pattern
        match: Anchored regex matching the prefix
        source: Tag recorded when this prefix is the one removed
        description: Human-readable explanation
    """

    name: str
    match: re.Pattern[str]
    source: SourceTag
    description: str

    def matches(self, text: str) -> bool:
        """Return True if this pattern matches the start of ``text``."""
        return bool(self.match.search(text))

    def strip(self, text: str) -> str:
        """Remove the first occurrence of the prefix from ``text``."""
        return self.match.sub("", text, count=1)


BULLET_RE = re.compile(r"^\s*[-•*]\s+")
NUMBERED_RE = re.compile(r"^\d+\.\s+")
QUESTION_PREFIX_RE = re.compile(r"^(Q|Question)\s*\d*[:.]?\s+", re.IGNORECASE)

# Terminal punctuation, used both for classification and for splitting.
QUESTION_OR_EXCLAMATION_RE = re.compile(r"[?!]")
MIXED_PUNCTUATION_RE = re.compile(r"[.!?].*[.!?]")
TERMINATOR_SPLIT_RE = re.compile(r"([.!?])")
SENTENCE_BOUNDARY_RE = re.compile(r"[.!?]+")

# Multiline variants for whole-input analysis.
BULLET_LINE_RE = re.compile(r"^\s*[-•*]\s", re.MULTILINE)
NUMBERED_LINE_RE = re.compile(r"^\d+\.\s", re.MULTILINE)


PREFIX_PATTERNS: tuple[Pattern, ...] = (
    Pattern(
        name="bullet_points",
        match=BULLET_RE,
        source=SourceTag.BULLET_CLEANED,
        description="Bullet list items (• Item, - Item, * Item)",
    ),
    Pattern(
        name="numbered_lists",
        match=NUMBERED_RE,
        source=SourceTag.NUMBERED_CLEANED,
        description="Numbered list items (1. Item, 2. Item)",
    ),
    Pattern(
        name="question_prefixes",
        match=QUESTION_PREFIX_RE,
        source=SourceTag.PREFIX_CLEANED,
        description="Question prefixes (Q: ..., Q1. ..., Question 2: ...)",
    ),
)


__all__ = [
    "BULLET_LINE_RE",
    "BULLET_RE",
    "MIXED_PUNCTUATION_RE",
    "NUMBERED_LINE_RE",
    "NUMBERED_RE",
    "PREFIX_PATTERNS",
    "Pattern",
    "ProcessingMethod",
    "QUESTION_OR_EXCLAMATION_RE",
    "QUESTION_PREFIX_RE",
    "SENTENCE_BOUNDARY_RE",
    "SourceTag",
    "TERMINATOR_SPLIT_RE",
    "line_source",
]
