from __future__ import annotations

import json
from typing import Any, Callable

import httpx
import pytest

from lecture_ai.core.settings import Settings
from lecture_ai.llm.gemini_client import GeminiClient

PHOTOSYNTHESIS_NOTES = "Photosynthesis converts light into chemical energy."
PHOTOSYNTHESIS_REPLY = (
    '{"summary":"Plants convert light to energy.",'
    '"keyPoints":["Light energy to chemical energy"],'
    '"examQuestions":["What is photosynthesis?"]}'
)


def gemini_reply(text: str | None) -> dict[str, Any]:
    if text is None:
        return {"candidates": [{"content": {"role": "model", "parts": []}, "finishReason": "SAFETY"}]}
    return {"candidates": [{"content": {"role": "model", "parts": [{"text": text}]}, "finishReason": "STOP"}]}


class FakeGemini:
    """Records outbound generateContent calls and answers with a canned reply."""

    def __init__(self, reply: dict[str, Any] | Callable[[httpx.Request], httpx.Response], status_code: int = 200) -> None:
        self.reply = reply
        self.status_code = status_code
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if callable(self.reply):
            return self.reply(request)
        return httpx.Response(self.status_code, json=self.reply)

    def sent_payloads(self) -> list[dict[str, Any]]:
        return [json.loads(r.content) for r in self.requests]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        gemini_base_url="https://gemini.test/v1beta",
        gemini_api_key="test-key",
        gemini_model="gemini-test",
    )


@pytest.fixture
def make_client(test_settings: Settings) -> Callable[[FakeGemini], GeminiClient]:
    def _make(fake: FakeGemini) -> GeminiClient:
        return GeminiClient(
            base_url=test_settings.gemini_base_url,
            api_key=test_settings.gemini_api_key,
            model=test_settings.gemini_model,
            transport=httpx.MockTransport(fake),
        )

    return _make
