"""Shape a :class:`ProcessingResult` into the extract-questions response body."""

from __future__ import annotations

from typing import Any, Dict

from question_separator.models import ProcessingResult


def to_extract_response(result: ProcessingResult) -> Dict[str, Any]:
    """Return the JSON-ready body served for an extract request.

    Cards are renumbered from their position and each one repeats the
    call-level ``processing_method`` so clients can render cards standalone.
    """

    stats = result.statistics
    questions = [
        {
            "id": q.id,
            "text": q.text,
            "is_edited": q.is_edited,
            "confidence": q.confidence,
            "is_fallback": q.is_fallback,
            "card_number": index,
            "original_text": q.original_text or q.text,
            "processing_method": result.processing_method,
            "source": q.source,
        }
        for index, q in enumerate(result.questions, start=1)
    ]
    return {
        "questions": questions,
        "total_found": stats.questions_found,
        "limited_to": len(questions),
        "processing_summary": {
            "method": result.processing_method,
            "lines_processed": stats.lines_processed,
            "fallback_used": stats.fallback_used,
            "confidence_average": stats.confidence_average,
            "statistics": stats.to_dict(),
        },
    }


__all__ = ["to_extract_response"]
