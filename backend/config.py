import os
import logging
from dotenv import load_dotenv
from typing import List

load_dotenv()

logger = logging.getLogger(__name__)


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Config:
    # API Keys
    GEMINI_API_KEY: str = os.getenv("GEMINI_API_KEY", "")

    # Model Settings
    GEMINI_MODEL: str = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
    GEMINI_TEMPERATURE: float = float(os.getenv("GEMINI_TEMPERATURE", "0.3"))
    GEMINI_MAX_OUTPUT_TOKENS: int = int(os.getenv("GEMINI_MAX_OUTPUT_TOKENS", "2048"))

    # Quiz Settings
    DEFAULT_QUIZ_COUNT: int = int(os.getenv("DEFAULT_QUIZ_COUNT", "5"))

    # Content filter (substring match, case-insensitive)
    PROFANITY_WORDS: List[str] = _split_csv(os.getenv("PROFANITY_WORDS", "badword1,badword2"))

    # Server Settings
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "8000"))
    CORS_ORIGINS: List[str] = _split_csv(os.getenv("CORS_ORIGINS", "*"))
    VERSION: str = "1.0.0"

    @classmethod
    def gemini_key_present(cls) -> bool:
        return bool(cls.GEMINI_API_KEY)

    @classmethod
    def validate_config(cls):
        """Check settings at startup. A missing key only warns so /api/test can report it."""
        if not cls.gemini_key_present():
            logger.warning("GEMINI_API_KEY not set; model calls will fail until it is configured")
        if cls.DEFAULT_QUIZ_COUNT < 1:
            raise ValueError("DEFAULT_QUIZ_COUNT must be a positive integer")
        if cls.GEMINI_MAX_OUTPUT_TOKENS < 1:
            raise ValueError("GEMINI_MAX_OUTPUT_TOKENS must be a positive integer")
