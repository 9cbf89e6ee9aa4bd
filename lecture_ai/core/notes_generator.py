from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from pydantic import ValidationError

from lecture_ai.llm.gemini_client import GeminiClient, GeminiPart, GeminiTurn
from lecture_ai.schema.notes import StudyNotes

logger = logging.getLogger(__name__)


STUDY_NOTES_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": {
            "type": "STRING",
            "description": "A concise summary of the lecture notes.",
        },
        "keyPoints": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "5 key points to remember from the lecture.",
        },
        "examQuestions": {
            "type": "ARRAY",
            "items": {"type": "STRING"},
            "description": "5 exam questions based on the lecture notes.",
        },
    },
    "required": ["summary", "keyPoints", "examQuestions"],
}


class StudyNotesError(RuntimeError):
    pass


class EmptyResponseError(StudyNotesError):
    def __init__(self) -> None:
        super().__init__("No response from Gemini")


class MalformedResponseError(StudyNotesError):
    def __init__(self, message: str, *, raw: str) -> None:
        super().__init__(message)
        self.raw = raw


def build_prompt(notes_text: str) -> str:
    return (
        "Analyze the following lecture notes and provide:\n"
        "1) A short, concise summary.\n"
        "2) 5 key points to remember.\n"
        "3) 5 exam questions based on the notes.\n\n"
        f"Lecture Notes:\n{notes_text}"
    )


def parse_study_notes(raw: str) -> StudyNotes:
    """Decode the reply text and check it carries all three fields."""
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise MalformedResponseError(f"Gemini reply is not valid JSON: {e}", raw=raw) from e
    try:
        return StudyNotes.model_validate(data)
    except ValidationError as e:
        raise MalformedResponseError(
            f"Gemini reply does not match the study notes schema: {e.error_count()} error(s)",
            raw=raw,
        ) from e


class NotesGenerator:
    def __init__(self, client: GeminiClient, *, timeout_s: float | None = None) -> None:
        self._client = client
        self._timeout_s = timeout_s

    async def generate(self, notes_text: str, *, timeout_s: float | None = None) -> StudyNotes:
        turns = [GeminiTurn(role="user", parts=[GeminiPart(text=build_prompt(notes_text))])]
        call = self._client.generate_content(
            turns,
            response_mime_type="application/json",
            response_schema=STUDY_NOTES_SCHEMA,
        )
        limit = timeout_s if timeout_s is not None else self._timeout_s
        logger.info("Requesting study notes: chars=%d timeout_s=%s", len(notes_text), limit)
        if limit is None:
            raw = await call
        else:
            raw = await asyncio.wait_for(call, timeout=limit)

        if not raw:
            raise EmptyResponseError()
        notes = parse_study_notes(raw)
        logger.info(
            "Study notes generated: key_points=%d exam_questions=%d",
            len(notes.key_points),
            len(notes.exam_questions),
        )
        return notes
