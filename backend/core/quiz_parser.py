# backend/core/quiz_parser.py
"""
Best-effort extraction of multiple choice questions from free model text.

The model is asked for a numbered list with lettered options and an answer
line, but nothing enforces that format. The parser makes one forward pass
over the lines and never fails: when no numbered question is found the raw
reply comes back as the only item.

Known limitation: any line containing "answer" is taken as the answer line
of the current question, including prose such as "the answer choices are".
"""
from enum import Enum
from typing import List, Optional, Tuple
import re

from backend.models.schemas import ParseResult, QuestionRecord

QUESTION_RE = re.compile(r"^[0-9]+[.)]")
QUESTION_PREFIX_RE = re.compile(r"^[0-9]+[.)]\s*")
OPTION_RE = re.compile(r"^[A-D][.)]")
ANSWER_RE = re.compile(r"answer", re.IGNORECASE)
ANSWER_PREFIX_RE = re.compile(r"^.*?answer:?\s*", re.IGNORECASE | re.DOTALL)


class LineKind(str, Enum):
    QUESTION = "question"
    OPTION = "option"
    ANSWER = "answer"
    OTHER = "other"


def classify_line(line: str) -> Tuple[LineKind, str]:
    """Tag a stripped line and return the value it carries."""
    if QUESTION_RE.match(line):
        return LineKind.QUESTION, QUESTION_PREFIX_RE.sub("", line, count=1)
    if OPTION_RE.match(line):
        return LineKind.OPTION, line
    if ANSWER_RE.search(line):
        return LineKind.ANSWER, ANSWER_PREFIX_RE.sub("", line, count=1)
    return LineKind.OTHER, line


def parse_quiz(raw_reply: str) -> ParseResult:
    questions: List[QuestionRecord] = []
    current: Optional[QuestionRecord] = None

    for raw_line in raw_reply.split("\n"):
        line = raw_line.strip()
        if not line:
            continue

        kind, value = classify_line(line)
        if kind is LineKind.QUESTION:
            if current is not None:
                questions.append(current)
            current = QuestionRecord(question=value)
        elif current is None:
            # options and answers need a question to attach to
            continue
        elif kind is LineKind.OPTION:
            current.options.append(value)
        elif kind is LineKind.ANSWER:
            current.answer = value

    if current is not None:
        questions.append(current)

    if questions:
        return questions
    return [raw_reply]
