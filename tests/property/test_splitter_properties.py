from hypothesis import given, settings, strategies as st

from question_separator.splitting import split_by_lines, split_by_sentences
from question_separator.strategies import clean_line_prefix


@given(st.text(max_size=300))
@settings(deadline=None)
def test_lines_are_non_empty_and_stripped(text: str) -> None:
    lines = split_by_lines(text)
    assert all(line and line == line.strip() for line in lines)


@given(st.text(max_size=300))
@settings(deadline=None)
def test_sentences_end_with_question_mark(text: str) -> None:
    assert all(
        s.endswith("?") and len(s) > 6 for s in split_by_sentences(text)
    )


@given(st.text(max_size=120))
@settings(deadline=None)
def test_cleaning_never_grows_a_line(text: str) -> None:
    line = text.strip()
    assert len(clean_line_prefix(line)) <= len(line)
