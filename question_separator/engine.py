"""Question separation engine.

Turns a block of pasted text into an ordered, capped list of
:class:`~question_separator.models.Question` objects. Each line is routed
through a prioritised chain of heuristics:

1. ``MIXED_PUNCTUATION`` - several terminators on one line; split it.
2. ``DIRECT_QUESTION``   - the line already reads as a question; strip any
   bullet/number/``Q:`` prefix and keep it.
3. ``FALLBACK_TRANSFORM`` - a plain statement of reasonable length; rewrite
   it as a question.
4. ``DROP``              - anything else.

When no line yields a question the whole input is re-split on sentence
boundaries instead. The engine is pure: every call builds its own state and
returns a fresh :class:`ProcessingResult`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from functools import reduce
from typing import Callable, Dict, Tuple

from question_separator.models import (
    ProcessingResult,
    Question,
    Statistics,
    confidence_average,
)
from question_separator.patterns import ProcessingMethod, SourceTag, line_source
from question_separator.splitting import (
    split_by_lines,
    split_by_sentences,
    split_mixed_punctuation,
)
from question_separator.strategies.lines import (
    DEFAULT_STRATEGY,
    LineHeuristicStrategy,
)
from question_separator.transform import transform_to_question

logger = logging.getLogger(__name__)

DEFAULT_MAX_QUESTIONS = 20
PREFIXED_CONFIDENCE = 0.85
DIRECT_CONFIDENCE = 0.95


class LineRoute(Enum):
    MIXED_PUNCTUATION = "mixed_punctuation"
    DIRECT_QUESTION = "direct_question"
    FALLBACK_TRANSFORM = "fallback_transform"
    DROP = "drop"


def route_line(line: str, strategy: LineHeuristicStrategy | None = None) -> LineRoute:
    """Return the heuristic responsible for ``line``."""

    s = strategy or DEFAULT_STRATEGY
    if s.needs_split(line):
        return LineRoute.MIXED_PUNCTUATION
    if s.detect_question_in_line(line):
        return LineRoute.DIRECT_QUESTION
    if s.in_fallback_window(line):
        return LineRoute.FALLBACK_TRANSFORM
    return LineRoute.DROP


@dataclass(frozen=True)
class _Draft:
    text: str
    source: str
    confidence: float
    is_fallback: bool
    original_text: str


@dataclass(frozen=True)
class _State:
    drafts: Tuple[_Draft, ...] = ()
    method: str = ProcessingMethod.LINE_BREAKS.value
    fallback_used: bool = False

    def room(self, cap: int) -> int:
        return max(cap - len(self.drafts), 0)

    def add(self, *drafts: _Draft, **changes: object) -> _State:
        return replace(self, drafts=self.drafts + drafts, **changes)


_Handler = Callable[[_State, int, str, int, LineHeuristicStrategy], _State]


def _split_line(
    state: _State, index: int, line: str, cap: int, strategy: LineHeuristicStrategy
) -> _State:
    fragments = split_mixed_punctuation(line, strategy.min_text_length)
    drafts = tuple(
        _Draft(f.text, f.source, f.confidence, False, f.original_text)
        for f in fragments[: state.room(cap)]
    )
    return state.add(*drafts, method=ProcessingMethod.MIXED_PUNCTUATION.value)


def _direct_line(
    state: _State, index: int, line: str, cap: int, strategy: LineHeuristicStrategy
) -> _State:
    cleaned = strategy.clean_line_prefix(line)
    if not (strategy.keeps(cleaned) and state.room(cap)):
        return state
    prefixed = cleaned != line
    draft = _Draft(
        text=cleaned if cleaned.endswith("?") else f"{cleaned}?",
        source=strategy.prefix_source(line) if prefixed else line_source(index),
        confidence=PREFIXED_CONFIDENCE if prefixed else DIRECT_CONFIDENCE,
        is_fallback=False,
        original_text=line,
    )
    method = ProcessingMethod.PREFIX_CLEANING.value if prefixed else state.method
    return state.add(draft, method=method)


def _fallback_line(
    state: _State, index: int, line: str, cap: int, strategy: LineHeuristicStrategy
) -> _State:
    if not state.room(cap):
        return state
    transformed = transform_to_question(line)
    draft = _Draft(
        text=transformed.text,
        source=SourceTag.FALLBACK_TRANSFORMED.value,
        confidence=transformed.confidence,
        is_fallback=True,
        original_text=line,
    )
    return state.add(
        draft, fallback_used=True, method=ProcessingMethod.FALLBACK_PROCESSING.value
    )


def _drop_line(
    state: _State, index: int, line: str, cap: int, strategy: LineHeuristicStrategy
) -> _State:
    return state


_HANDLERS: Dict[LineRoute, _Handler] = {
    LineRoute.MIXED_PUNCTUATION: _split_line,
    LineRoute.DIRECT_QUESTION: _direct_line,
    LineRoute.FALLBACK_TRANSFORM: _fallback_line,
    LineRoute.DROP: _drop_line,
}


def _step(
    state: _State, item: Tuple[int, str], cap: int, strategy: LineHeuristicStrategy
) -> _State:
    index, line = item
    route = route_line(line, strategy)
    logger.debug("line %d routed to %s: %.60r", index, route.value, line)
    return _HANDLERS[route](state, index, line, cap, strategy)


def _sentence_fallback(text: str, cap: int, strategy: LineHeuristicStrategy) -> _State:
    """Rebuild the result from sentence fragments of the whole input."""

    sentences = split_by_sentences(text, strategy.min_text_length)
    logger.debug("no line-level questions; %d sentence fragments", len(sentences))
    drafts = tuple(
        _Draft(
            text=t.text,
            source=SourceTag.FALLBACK_SENTENCE.value,
            confidence=t.confidence,
            is_fallback=True,
            original_text=sentence,
        )
        for sentence in sentences[: max(cap, 0)]
        for t in (transform_to_question(sentence),)
    )
    return _State(
        drafts=drafts,
        method=ProcessingMethod.FALLBACK_SENTENCES.value,
        fallback_used=True,
    )


def _number(drafts: Tuple[_Draft, ...]) -> Tuple[Question, ...]:
    return tuple(
        Question(
            id=f"temp_{n}",
            text=d.text,
            source=d.source,
            confidence=d.confidence,
            is_fallback=d.is_fallback,
            card_number=n,
            original_text=d.original_text,
        )
        for n, d in enumerate(drafts, start=1)
    )


def process_text_to_questions(
    text: str,
    max_questions: int = DEFAULT_MAX_QUESTIONS,
    strategy: LineHeuristicStrategy | None = None,
) -> ProcessingResult:
    """Segment ``text`` into at most ``max_questions`` questions.

    ``processing_method`` reports the last strategy that labelled the call:
    a prefix-cleaned line after a mixed-punctuation line leaves
    ``prefix_cleaning`` and vice versa.
    """

    s = strategy or DEFAULT_STRATEGY
    lines = split_by_lines(text)
    initial = _State()
    state = reduce(
        lambda acc, item: _step(acc, item, max_questions, s),
        enumerate(lines, start=1),
        initial,
    )
    if not state.drafts:
        state = _sentence_fallback(text, max_questions, s)

    questions = _number(state.drafts[: max(max_questions, 0)])
    stats = Statistics(
        lines_processed=len(lines),
        questions_found=len(questions),
        fallback_used=state.fallback_used,
        confidence_average=confidence_average(questions),
    )
    logger.debug(
        "separated %d questions from %d lines via %s",
        len(questions),
        len(lines),
        state.method,
    )
    return ProcessingResult(
        questions=questions,
        total_processed=len(lines),
        processing_method=state.method,
        statistics=stats,
    )


__all__ = [
    "DEFAULT_MAX_QUESTIONS",
    "LineRoute",
    "process_text_to_questions",
    "route_line",
]
