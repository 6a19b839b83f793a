from fastapi import APIRouter
from fastapi.responses import JSONResponse
from backend.models.schemas import ApiTestResponse, AssistRequest, ErrorResponse
from backend.core.errors import StudyBotError
from backend.core.study_agent import StudyAgent
import logging

logger = logging.getLogger(__name__)

router = APIRouter()

# Set from the app lifespan
study_agent: StudyAgent = None


def set_dependencies(agent: StudyAgent):
    global study_agent
    study_agent = agent


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=ErrorResponse(error=message).model_dump())


@router.post("/groq", responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}})
@router.post("/chat", responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}})
async def assist(request: AssistRequest):
    """
    Run a chat, summarize or quiz action against the language model.

    Accepts {action, payload} or the legacy {message} body (treated as chat).

    Returns:
        {reply} for chat, {result} for summarize,
        {questions, quiz, raw} for quiz, or {error} on failure
    """
    try:
        response = await study_agent.handle_request(request)
        return response.model_dump()
    except StudyBotError as e:
        logger.warning(f"Request rejected ({e.status_code}): {e.message}")
        return error_response(e.message, e.status_code)
    except Exception as e:
        logger.error(f"Unexpected error handling request: {e}")
        return error_response("AI backend error", 500)


@router.get("/test", response_model=ApiTestResponse)
async def api_test():
    """Report whether the Gemini key is configured so the UI can warn early."""
    return ApiTestResponse(**study_agent.describe())
