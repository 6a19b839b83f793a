from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Optional, Union


class Action(str, Enum):
    CHAT = "chat"
    SUMMARIZE = "summarize"
    QUIZ = "quiz"


class ResponseShape(str, Enum):
    REPLY = "reply"
    RESULT = "result"
    QUESTIONS = "questions"


class Payload(BaseModel):
    text: Optional[str] = None
    count: Optional[int] = None


class AssistRequest(BaseModel):
    """Body of POST /api/groq. Legacy clients send only `message` (or `prompt`)."""
    action: Optional[str] = None
    payload: Optional[Payload] = None
    message: Optional[str] = None
    prompt: Optional[str] = None


class QuestionRecord(BaseModel):
    question: str
    options: List[str] = Field(default_factory=list)
    answer: str = ""


# A parsed quiz is either structured questions or the raw reply as a single item
ParseResult = List[Union[QuestionRecord, str]]


class ReplyResponse(BaseModel):
    reply: str


class ResultResponse(BaseModel):
    result: str


class QuizResponse(BaseModel):
    questions: ParseResult
    quiz: ParseResult
    raw: str


class ErrorResponse(BaseModel):
    error: str


class ApiTestResponse(BaseModel):
    status: str
    gemini_key_present: bool
    model: str
