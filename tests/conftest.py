from __future__ import annotations

import os
import socket
from typing import Any, List

import pytest
from fastapi.testclient import TestClient

os.environ.setdefault("GEMINI_API_KEY", "")

from backend.api import assist  # noqa: E402
from backend.core.study_agent import StudyAgent  # noqa: E402
from backend.main import app  # noqa: E402


class NetworkBlockedError(RuntimeError):
    pass


def _blocked(*_args: Any, **_kwargs: Any) -> Any:
    raise NetworkBlockedError("Network access is disabled during tests. Set ALLOW_NETWORK=1 to allow it.")


@pytest.fixture(autouse=True)
def _disable_network(monkeypatch: pytest.MonkeyPatch) -> None:
    """Prevent accidental calls to the real Gemini API."""

    if os.getenv("ALLOW_NETWORK") == "1":
        return

    monkeypatch.setattr(socket, "create_connection", _blocked)
    monkeypatch.setattr(socket, "getaddrinfo", _blocked)


class FakeLLM:
    """Stands in for GeminiLLMWrapper and records every prompt it receives."""

    def __init__(self, reply: str = "ok", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.prompts: List[str] = []
        self.api_key = "test-key"
        self.model = "fake-model"

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


@pytest.fixture
def make_llm():
    return FakeLLM


@pytest.fixture
def make_client():
    original = assist.study_agent

    def _make(llm: FakeLLM, profanity_words: List[str] | None = None) -> TestClient:
        agent = StudyAgent(llm, profanity_words=profanity_words or ["badword1", "badword2"])
        assist.set_dependencies(agent)
        return TestClient(app)

    yield _make
    assist.set_dependencies(original)

