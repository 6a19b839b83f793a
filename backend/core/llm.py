from langchain_google_genai import ChatGoogleGenerativeAI
from langchain_core.messages import BaseMessage, HumanMessage
from typing import List, Optional
import logging
from backend.config import Config
from backend.core.errors import UpstreamError

logger = logging.getLogger(__name__)


def _content_to_text(content) -> str:
    if isinstance(content, str):
        return content
    if isinstance(content, list):
        parts = []
        for part in content:
            if isinstance(part, str):
                parts.append(part)
            elif isinstance(part, dict) and part.get("type") == "text":
                parts.append(part.get("text", ""))
        return "".join(parts)
    raise UpstreamError(f"Unexpected response content type: {type(content).__name__}")


class GeminiLLMWrapper:
    def __init__(self, api_key: Optional[str] = None, model: Optional[str] = None):
        """Store settings; the Gemini client is created on first use."""
        self.api_key = api_key if api_key is not None else Config.GEMINI_API_KEY
        self.model = model or Config.GEMINI_MODEL
        self._llm = None

    @property
    def llm(self) -> ChatGoogleGenerativeAI:
        if self._llm is None:
            if not self.api_key:
                logger.error("Cannot call Gemini: GEMINI_API_KEY is not configured")
                raise UpstreamError("GEMINI_API_KEY is not configured")
            self._llm = ChatGoogleGenerativeAI(
                google_api_key=self.api_key,
                model=self.model,
                temperature=Config.GEMINI_TEMPERATURE,
                max_output_tokens=Config.GEMINI_MAX_OUTPUT_TOKENS,
            )
        return self._llm

    async def generate_response(
        self,
        messages: List[BaseMessage],
        **kwargs
    ) -> str:
        try:
            response = await self.llm.ainvoke(messages, **kwargs)
        except UpstreamError:
            raise
        except Exception as e:
            logger.error(f"LLM generation error: {e}")
            raise UpstreamError(str(e)) from e

        text = _content_to_text(response.content)
        if not text:
            logger.warning("LLM returned an empty response")
        return text

    async def generate(self, prompt: str) -> str:
        """Send one prompt with an empty conversation history."""
        return await self.generate_response([HumanMessage(content=prompt)])
