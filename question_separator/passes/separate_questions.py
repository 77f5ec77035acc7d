"""Question separation pass.

Runs :func:`~question_separator.engine.process_text_to_questions` over a
text payload. The payload becomes the :class:`ProcessingResult` and the
result statistics are merged into ``meta["metrics"]["separate_questions"]``.
Non-text payloads pass through untouched.
"""

from __future__ import annotations

from dataclasses import dataclass

from question_separator.engine import DEFAULT_MAX_QUESTIONS, process_text_to_questions
from question_separator.framework import Artifact, register
from question_separator.models import ProcessingResult


@dataclass(frozen=True)
class _SeparateQuestionsPass:
    name: str = "separate_questions"
    input_type: type = str
    output_type: type = ProcessingResult
    max_questions: int = DEFAULT_MAX_QUESTIONS

    def __call__(self, a: Artifact) -> Artifact:
        if not isinstance(a.payload, str):
            return a
        result = process_text_to_questions(a.payload, self.max_questions)
        metrics = {
            **result.statistics.to_dict(),
            "processing_method": result.processing_method,
        }
        return Artifact(payload=result, meta=a.with_metrics(self.name, metrics))


separate_questions = register(_SeparateQuestionsPass())
