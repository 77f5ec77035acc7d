import json

from question_separator.adapters import emit_jsonl
from question_separator.adapters.response import to_extract_response
from question_separator.engine import process_text_to_questions
from question_separator.framework import Artifact

TEXT = "What is AI?\nHow does ML work?"


def test_extract_response_shape():
    body = to_extract_response(process_text_to_questions(TEXT))

    assert body["total_found"] == 2
    assert body["limited_to"] == 2
    assert [q["card_number"] for q in body["questions"]] == [1, 2]
    assert {q["processing_method"] for q in body["questions"]} == {"line_breaks"}
    assert body["questions"][0]["is_edited"] is False
    summary = body["processing_summary"]
    assert summary["method"] == "line_breaks"
    assert summary["lines_processed"] == 2
    assert summary["confidence_average"] == 0.95
    assert summary["statistics"]["questions_found"] == 2
    json.dumps(body)


def test_result_to_dict_round_trips_through_json():
    result = process_text_to_questions("• What is AI?")
    data = json.loads(json.dumps(result.to_dict()))

    assert data["processing_method"] == "prefix_cleaning"
    assert data["questions"][0]["source"] == "bullet_cleaned"
    assert data["statistics"]["fallback_used"] is False


def test_emit_jsonl_writes_one_row_per_question(tmp_path):
    out = tmp_path / "nested" / "questions.jsonl"
    artifact = Artifact(payload=process_text_to_questions(TEXT))

    emit_jsonl.maybe_write(artifact, {"output_path": str(out)})

    rows = [json.loads(line) for line in out.read_text(encoding="utf-8").splitlines()]
    assert [r["text"] for r in rows] == ["What is AI?", "How does ML work?"]
    assert all(r["processing_method"] == "line_breaks" for r in rows)


def test_emit_jsonl_without_path_is_noop(tmp_path):
    emit_jsonl.maybe_write(Artifact(payload=process_text_to_questions(TEXT)), {})
    assert list(tmp_path.iterdir()) == []
