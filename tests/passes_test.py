import pytest

from question_separator.config import PipelineSpec
from question_separator.core import configure_pass, run_extract
from question_separator.framework import Artifact, registry, run_pipeline
from question_separator.models import ProcessingResult
from question_separator.passes.separate_questions import separate_questions
from question_separator.passes.validate_input import validate_input
from question_separator.validation import InputTooLongError

TEXT = "What is AI?\nHow does ML work?"


def test_passes_registered():
    regs = registry()
    assert {"validate_input", "separate_questions"} <= set(regs)


def test_validate_input_records_analysis():
    result = validate_input(Artifact(payload=TEXT))

    assert result.payload == TEXT
    assert result.meta["input_analysis"]["question_marks_found"] == 2


def test_validate_input_rejects_long_text():
    strict = configure_pass(validate_input, {"max_chars": 5})

    with pytest.raises(InputTooLongError):
        strict(Artifact(payload=TEXT))
    assert validate_input.max_chars == 5000


def test_separate_questions_records_metrics():
    result = separate_questions(Artifact(payload=TEXT, meta={"keep": 1}))

    assert isinstance(result.payload, ProcessingResult)
    assert result.meta["keep"] == 1
    metrics = result.meta["metrics"]["separate_questions"]
    assert metrics["questions_found"] == 2
    assert metrics["processing_method"] == "line_breaks"


def test_separate_questions_ignores_non_text_payload():
    artifact = Artifact(payload={"not": "text"})
    assert separate_questions(artifact) is artifact


def test_run_pipeline_by_name():
    result = run_pipeline(["validate_input", "separate_questions"], Artifact(TEXT))
    assert len(result.payload.questions) == 2


def test_run_extract_applies_options_and_times_steps():
    spec = PipelineSpec(options={"separate_questions": {"max_questions": 1}})

    artifact, timings = run_extract(TEXT, spec)

    assert len(artifact.payload.questions) == 1
    assert set(timings) == {"validate_input", "separate_questions"}
    assert "input_analysis" in artifact.meta


def test_run_extract_rejects_unknown_steps():
    with pytest.raises(KeyError, match="unknown steps"):
        run_extract(TEXT, PipelineSpec(pipeline=["validate_input", "translate"]))


def test_run_extract_requires_validation_first():
    spec = PipelineSpec(pipeline=["separate_questions", "validate_input"])
    with pytest.raises(ValueError, match="validate_input"):
        run_extract(TEXT, spec)


def test_configure_pass_ignores_unknown_options():
    assert configure_pass(separate_questions, {"colour": "blue"}) is separate_questions
