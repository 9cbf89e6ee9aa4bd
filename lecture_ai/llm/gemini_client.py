from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

logger = logging.getLogger(__name__)


class GeminiClientError(RuntimeError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass(frozen=True)
class GeminiPart:
    text: str

    def to_dict(self) -> dict[str, Any]:
        return {"text": self.text}


@dataclass(frozen=True)
class GeminiTurn:
    role: str
    parts: list[GeminiPart]

    def to_dict(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [p.to_dict() for p in self.parts]}


class GeminiClient:
    """
    Minimal wrapper over the Gemini ``generateContent`` REST endpoint.

    Sends a request and hands back the reply text. Prompts, schemas and
    parsing of the reply belong to the caller.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str | None,
        model: str,
        timeout_s: float = 60.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key or ""
        self._model = model
        self._client = httpx.AsyncClient(timeout=httpx.Timeout(timeout_s), transport=transport)

    @property
    def model(self) -> str:
        return self._model

    async def aclose(self) -> None:
        await self._client.aclose()

    async def generate_content(
        self,
        turns: list[GeminiTurn],
        *,
        response_mime_type: str | None = None,
        response_schema: dict[str, Any] | None = None,
    ) -> str | None:
        url = f"{self._base_url}/models/{self._model}:generateContent"
        req_payload: dict[str, Any] = {"contents": [t.to_dict() for t in turns]}
        generation_config: dict[str, Any] = {}
        if response_mime_type is not None:
            generation_config["responseMimeType"] = response_mime_type
        if response_schema is not None:
            generation_config["responseSchema"] = response_schema
        if generation_config:
            req_payload["generationConfig"] = generation_config
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }
        resp = await self._client.post(url, headers=headers, json=req_payload)
        if resp.status_code >= 400:
            raise GeminiClientError(
                f"Gemini generateContent failed: {resp.status_code} {resp.text}",
                status_code=resp.status_code,
            )
        data = resp.json()
        text = self._extract_text(data)
        if text is None:
            logger.warning(
                "Gemini returned no text: %s", json.dumps(data, ensure_ascii=False)[:2000]
            )
        return text

    def _extract_text(self, data: dict[str, Any]) -> str | None:
        candidates = data.get("candidates") if isinstance(data, dict) else None
        if not isinstance(candidates, list) or not candidates:
            return None
        first = candidates[0]
        content = first.get("content") if isinstance(first, dict) else None
        if not isinstance(content, dict):
            return None
        parts = content.get("parts")
        if not isinstance(parts, list):
            return None
        texts: list[str] = []
        for p in parts:
            # thought parts are model reasoning, not the answer
            if isinstance(p, dict) and isinstance(p.get("text"), str) and not p.get("thought"):
                texts.append(p["text"])
        if not texts:
            return None
        return "".join(texts) or None
