"""Immutable result types returned by the separation engine."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Tuple


def round_half_up(value: float, digits: int = 0) -> float:
    """Round ``value`` half-up (``0.125 -> 0.13``) instead of half-to-even."""

    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


@dataclass(frozen=True)
class Question:
    """One segmented, confidence-scored interrogative string.

    Attributes:
        id: ``temp_<n>``; unique within a single engine call.
        text: Final question text, always ending with ``?``.
        source: Tag naming the heuristic that produced the question.
        confidence: Fixed per-strategy score in ``[0, 1]``.
        is_fallback: True when synthesised from a statement.
        card_number: 1-based position in the returned sequence.
        original_text: Untransformed line, fragment or sentence.
        is_edited: Flipped by the UI after a user edit; never set here.
    """

    id: str
    text: str
    source: str
    confidence: float
    is_fallback: bool
    card_number: int
    original_text: str
    is_edited: bool = False

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Statistics:
    lines_processed: int = 0
    questions_found: int = 0
    fallback_used: bool = False
    confidence_average: float = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProcessingResult:
    """Aggregate output of one :func:`process_text_to_questions` call."""

    questions: Tuple[Question, ...] = ()
    total_processed: int = 0
    processing_method: str = "line_breaks"
    statistics: Statistics = field(default_factory=Statistics)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "questions": [q.to_dict() for q in self.questions],
            "total_processed": self.total_processed,
            "processing_method": self.processing_method,
            "statistics": self.statistics.to_dict(),
        }


def confidence_average(questions: Tuple[Question, ...]) -> float:
    """Mean confidence rounded half-up to two decimals; ``0`` when empty."""

    if not questions:
        return 0
    return round_half_up(sum(q.confidence for q in questions) / len(questions), 2)


__all__ = [
    "ProcessingResult",
    "Question",
    "Statistics",
    "confidence_average",
    "round_half_up",
]
