from typing import Any, Dict, Iterable, Optional, Tuple, Union
import logging

from backend.config import Config
from backend.core.errors import MissingInput, ProfanityRejected
from backend.core.llm import GeminiLLMWrapper
from backend.core.prompt_router import route
from backend.core.quiz_parser import parse_quiz
from backend.models.schemas import (
    AssistRequest,
    Payload,
    QuizResponse,
    ReplyResponse,
    ResponseShape,
    ResultResponse,
)

logger = logging.getLogger(__name__)

AssistResponse = Union[ReplyResponse, ResultResponse, QuizResponse]


class StudyAgent:
    """
    Ties the prompt router, the Gemini client and the quiz parser together.
    - Normalizes legacy request bodies into (action, payload)
    - Rejects filtered words before any model call
    - Shapes the model reply for the requested action
    """

    def __init__(self, llm: Optional[GeminiLLMWrapper] = None, profanity_words: Optional[Iterable[str]] = None):
        self.llm = llm or GeminiLLMWrapper()
        words = Config.PROFANITY_WORDS if profanity_words is None else profanity_words
        self.profanity_words = [w.lower() for w in words if w]

    @staticmethod
    def normalize_request(request: AssistRequest) -> Tuple[Optional[str], Payload]:
        """A body without `action` is a legacy chat message."""
        if request.action is None:
            message = request.message if request.message is not None else request.prompt
            return "chat", Payload(text=message)
        return request.action, request.payload or Payload()

    def check_profanity(self, text: Optional[str]) -> None:
        if not text:
            return
        lower = text.lower()
        for word in self.profanity_words:
            if word in lower:
                raise ProfanityRejected()

    async def handle(self, action: Optional[str], payload: Optional[Payload]) -> AssistResponse:
        """
        Run one action end to end.

        Input: action (str), payload (Payload)
        Output: ReplyResponse, ResultResponse or QuizResponse depending on the action
        Raises the StudyBotError subclasses; nothing is retried.
        """
        prompt, shape = route(action, payload)
        self.check_profanity(payload.text)

        logger.info(f"Handling '{action}' request ({len(prompt)} prompt chars)")
        raw = await self.llm.generate(prompt)

        if shape is ResponseShape.REPLY:
            return ReplyResponse(reply=raw)
        if shape is ResponseShape.RESULT:
            return ResultResponse(result=raw)

        questions = parse_quiz(raw)
        logger.info(f"Parsed {len(questions)} quiz item(s)")
        return QuizResponse(questions=questions, quiz=questions, raw=raw)

    async def handle_request(self, request: AssistRequest) -> AssistResponse:
        action, payload = self.normalize_request(request)
        if request.action is None and not (payload.text or "").strip():
            raise MissingInput("Message required")
        return await self.handle(action, payload)

    def describe(self) -> Dict[str, Any]:
        return {
            "status": "ok",
            "gemini_key_present": bool(getattr(self.llm, "api_key", "")),
            "model": getattr(self.llm, "model", Config.GEMINI_MODEL),
        }
