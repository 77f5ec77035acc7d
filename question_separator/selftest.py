"""Built-in smoke checks that pin the engine's observable behaviour."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

from question_separator.engine import process_text_to_questions


@dataclass(frozen=True)
class SelfTestCase:
    name: str
    input: str
    expected_questions: int
    expected_method: str


@dataclass(frozen=True)
class SelfTestCaseResult:
    name: str
    passed: bool
    expected: int
    actual: int
    method: str
    expected_method: str
    method_matched: bool
    questions: Tuple[str, ...]


@dataclass(frozen=True)
class SelfTestReport:
    passed: int
    total: int
    results: Tuple[SelfTestCaseResult, ...]

    @property
    def ok(self) -> bool:
        return self.passed == self.total

    @property
    def message(self) -> str:
        return f"{self.passed}/{self.total} tests passed"

    def to_dict(self) -> Dict[str, Any]:
        return {**asdict(self), "message": self.message}


SELF_TEST_CASES: Tuple[SelfTestCase, ...] = (
    SelfTestCase(
        name="Line breaks processing",
        input="What is AI?\nHow does ML work?",
        expected_questions=2,
        expected_method="line_breaks",
    ),
    SelfTestCase(
        name="Mixed punctuation processing",
        input=(
            "What is AI! How does ML work. What are neural networks? "
            "Can you explain deep learning!"
        ),
        expected_questions=4,
        expected_method="mixed_punctuation",
    ),
    SelfTestCase(
        name="Bullet point cleaning",
        input="• What is AI?\n• How does ML work?",
        expected_questions=2,
        expected_method="prefix_cleaning",
    ),
    SelfTestCase(
        name="Fallback sentence processing",
        input="AI is important. ML has applications.",
        expected_questions=2,
        expected_method="fallback_sentences",
    ),
)


def _run_case(case: SelfTestCase) -> SelfTestCaseResult:
    result = process_text_to_questions(case.input)
    actual = len(result.questions)
    return SelfTestCaseResult(
        name=case.name,
        passed=actual == case.expected_questions,
        expected=case.expected_questions,
        actual=actual,
        method=result.processing_method,
        expected_method=case.expected_method,
        method_matched=result.processing_method == case.expected_method,
        questions=tuple(q.text for q in result.questions),
    )


def run_self_tests(cases: Tuple[SelfTestCase, ...] = SELF_TEST_CASES) -> SelfTestReport:
    """Run ``cases`` through the engine; a case passes on question count."""

    results = tuple(_run_case(c) for c in cases)
    return SelfTestReport(
        passed=sum(r.passed for r in results),
        total=len(results),
        results=results,
    )


__all__ = [
    "SELF_TEST_CASES",
    "SelfTestCase",
    "SelfTestCaseResult",
    "SelfTestReport",
    "run_self_tests",
]
