from question_separator.splitting import split_by_sentences


def test_sentences_become_questions():
    text = "AI is important. ML has applications."
    assert split_by_sentences(text) == ["AI is important?", "ML has applications?"]


def test_runs_of_terminators_split_once():
    assert split_by_sentences("Greetings... Everyone!!! ok.") == [
        "Greetings?",
        "Everyone?",
    ]


def test_short_fragments_dropped():
    assert split_by_sentences("Hello. World. Tiny!") == []
