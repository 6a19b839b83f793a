# backend/core/prompt_router.py
from typing import Optional, Tuple
import logging

from backend.config import Config
from backend.core.errors import InvalidInput, MissingInput, UnknownAction
from backend.models.schemas import Action, Payload, ResponseShape
from backend.prompts import study_prompts

logger = logging.getLogger(__name__)

_SHAPES = {
    Action.CHAT: ResponseShape.REPLY,
    Action.SUMMARIZE: ResponseShape.RESULT,
    Action.QUIZ: ResponseShape.QUESTIONS,
}


def parse_action(action: Optional[str]) -> Action:
    try:
        return Action(action)
    except ValueError:
        raise UnknownAction(action)


def resolve_quiz_count(count: Optional[int]) -> int:
    if count is not None and count < 0:
        raise InvalidInput("count must be a positive integer")
    return count or Config.DEFAULT_QUIZ_COUNT


def route(action: Optional[str], payload: Optional[Payload]) -> Tuple[str, ResponseShape]:
    """
    Build the single prompt for an action and pick how its reply is shaped.

    Input: action ("chat" | "summarize" | "quiz"), payload with text and optional count
    Output: (prompt, ResponseShape)

    Raises UnknownAction before looking at the payload, then MissingInput
    when the text is absent or blank. The text goes into the prompt untrimmed.
    """
    resolved = parse_action(action)

    text = payload.text if payload else None
    if not text or not text.strip():
        raise MissingInput()

    if resolved is Action.CHAT:
        prompt = text
    elif resolved is Action.SUMMARIZE:
        prompt = study_prompts.SUMMARIZE_TEMPLATE.format(text=text)
    else:
        count = resolve_quiz_count(payload.count)
        prompt = study_prompts.QUIZ_GENERATION_TEMPLATE.format(count=count, text=text)

    logger.debug(f"Routed action '{resolved.value}' to shape '{_SHAPES[resolved].value}'")
    return prompt, _SHAPES[resolved]
