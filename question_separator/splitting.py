"""Text splitting helpers: lines, sentences and mixed-punctuation lines.

Functions are pure (no side effects) and never raise for string input.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Tuple

from question_separator.patterns import (
    SENTENCE_BOUNDARY_RE,
    TERMINATOR_SPLIT_RE,
    SourceTag,
)

MIN_FRAGMENT_LENGTH = 5


@dataclass(frozen=True)
class Fragment:
    """A question candidate cut out of a mixed-punctuation line."""

    text: str
    source: str
    confidence: float
    original_text: str


_PUNCTUATION_SCORES: Mapping[str, Tuple[SourceTag, float]] = {
    "?": (SourceTag.QUESTION_PRESERVED, 0.95),
    "!": (SourceTag.EXCLAMATION_CONVERTED, 0.85),
    ".": (SourceTag.PERIOD_CONVERTED, 0.75),
}
_UNTERMINATED = (SourceTag.NO_PUNCTUATION_CONVERTED, 0.7)


def split_by_lines(text: str) -> List[str]:
    """Return the non-empty, stripped lines of ``text`` in order."""

    return [line.strip() for line in text.split("\n") if line.strip()]


def split_by_sentences(text: str, min_length: int = MIN_FRAGMENT_LENGTH) -> List[str]:
    """Split ``text`` on runs of ``.!?`` and phrase each sentence as a question."""

    sentences = (s.strip() for s in SENTENCE_BOUNDARY_RE.split(text))
    return [s if s.endswith("?") else f"{s}?" for s in sentences if len(s) > min_length]


def _pairs(line: str) -> List[Tuple[str, str | None]]:
    """Return ``(text, punctuation)`` pairs from a capturing terminator split.

    Empty strings are discarded before pairing, so consecutive terminators
    shift the pairing exactly as the raw split sequence dictates.
    """

    parts = [p for p in TERMINATOR_SPLIT_RE.split(line) if p]
    return [
        (parts[i], parts[i + 1] if i + 1 < len(parts) else None)
        for i in range(0, len(parts), 2)
    ]


def _fragment(text: str, punctuation: str | None) -> Fragment:
    terminator = punctuation if punctuation in _PUNCTUATION_SCORES else ""
    source, confidence = _PUNCTUATION_SCORES.get(terminator, _UNTERMINATED)
    return Fragment(
        text=f"{text}?",
        source=source.value,
        confidence=confidence,
        original_text=f"{text}{terminator}",
    )


def split_mixed_punctuation(
    line: str, min_length: int = MIN_FRAGMENT_LENGTH
) -> List[Fragment]:
    """Split ``line`` into one question per sentence-like fragment.

    Confidence follows the terminator that closed each fragment; fragments
    of ``min_length`` characters or fewer are dropped as noise.
    """

    stripped = ((text.strip(), punct) for text, punct in _pairs(line))
    return [
        _fragment(text, punct) for text, punct in stripped if len(text) > min_length
    ]


__all__ = [
    "Fragment",
    "MIN_FRAGMENT_LENGTH",
    "split_by_lines",
    "split_by_sentences",
    "split_mixed_punctuation",
]
