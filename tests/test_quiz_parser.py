from __future__ import annotations

from backend.core.quiz_parser import LineKind, classify_line, parse_quiz
from backend.models.schemas import QuestionRecord


SAMPLE = """1. What is 2+2?
A) 3
B) 4
Answer: B
2. What is the capital of France?
A) Paris
B) Rome
Answer: A
"""


def test_parses_numbered_questions_with_options_and_answers():
    result = parse_quiz(SAMPLE)

    assert result == [
        QuestionRecord(question="What is 2+2?", options=["A) 3", "B) 4"], answer="B"),
        QuestionRecord(question="What is the capital of France?", options=["A) Paris", "B) Rome"], answer="A"),
    ]


def test_empty_input_falls_back_to_raw():
    assert parse_quiz("") == [""]


def test_unstructured_text_returned_verbatim():
    text = "Sorry, I can't make a quiz about that.\nTry another topic."

    assert parse_quiz(text) == [text]


def test_option_before_any_question_is_dropped():
    result = parse_quiz("B) Berlin\n1) Largest planet?\nA. Jupiter\nB. Mars")

    assert len(result) == 1
    assert result[0].question == "Largest planet?"
    assert result[0].options == ["A. Jupiter", "B. Mars"]
    assert result[0].answer == ""


def test_option_only_text_is_fallback():
    text = "B) Berlin\nAnswer: B"

    assert parse_quiz(text) == [text]


def test_last_answer_line_wins():
    result = parse_quiz("1. Q?\nAnswer: A\nCorrect answer - C")

    assert result[0].answer == "- C"


def test_answer_match_is_case_insensitive_and_greedy():
    result = parse_quiz("1. Q?\nThe ANSWER choices are below\n**Correct Answer:** B) 4")

    assert result[0].answer == "** B) 4"


def test_prose_mentioning_answer_overwrites_answer():
    result = parse_quiz("1. Q?\nAnswer: D\nNote: the answer choices are random")

    assert result[0].answer == "choices are random"


def test_blank_and_indented_lines_are_trimmed():
    result = parse_quiz("\r\n   3)   Indented question   \r\n\r\n    C) option  \n")

    assert result == [QuestionRecord(question="Indented question", options=["C) option"], answer="")]


def test_lowercase_and_out_of_range_letters_are_not_options():
    result = parse_quiz("1. Q?\na) lower\nE) fifth\nD) fourth")

    assert result[0].options == ["D) fourth"]


def test_markdown_bold_question_headers_are_not_detected():
    text = "**1. What is H2O?**\nA) Water"

    assert parse_quiz(text) == [text]


def test_classify_line():
    assert classify_line("12) Twelve") == (LineKind.QUESTION, "Twelve")
    assert classify_line("A. Option") == (LineKind.OPTION, "A. Option")
    assert classify_line("Answer:B") == (LineKind.ANSWER, "B")
    assert classify_line("Explanation follows") == (LineKind.OTHER, "Explanation follows")
