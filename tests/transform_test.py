import pytest

from question_separator.transform import transform_to_question


def test_existing_question_returned_verbatim():
    result = transform_to_question("Is It Raining?")
    assert result.text == "Is It Raining?"
    assert result.confidence == 0.95


@pytest.mark.parametrize(
    "statement, text, confidence",
    [
        ("The sky is blue", "What the sky is blue?", 0.7),
        ("Neural nets are layered", "What neural nets are layered?", 0.7),
        (
            "ML has applications",
            "What applications or features ml have applications?",
            0.68,
        ),
        ("Dogs have tails", "What applications or features dogs have tails?", 0.68),
        ("Birds can fly", "How birds can fly?", 0.65),
        ("Robots could dream", "How robots could dream?", 0.65),
        (
            "Photosynthesis converts light.",
            "What about photosynthesis converts light?",
            0.6,
        ),
        ("Wow!", "What about wow?", 0.6),
    ],
)
def test_rules(statement, text, confidence):
    result = transform_to_question(statement)
    assert result.text == text
    assert result.confidence == confidence


def test_rule_order_prefers_definition():
    result = transform_to_question("It is what we have")
    assert result.text == "What it is what we have?"


def test_only_first_has_is_rewritten():
    result = transform_to_question("She has it and he has it")
    assert result.text == "What applications or features she have it and he has it?"


def test_markers_need_surrounding_spaces():
    assert transform_to_question("This is").text == "What about this is?"
