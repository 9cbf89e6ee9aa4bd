from __future__ import annotations

import logging

from lecture_ai.core.notes_generator import NotesGenerator
from lecture_ai.core.settings import Settings, settings as default_settings
from lecture_ai.core.surface import NotesSurface
from lecture_ai.llm.gemini_client import GeminiClient

logger = logging.getLogger(__name__)


class AppContext:
    """
    Process-wide application context.

    Owns the Gemini client and hands the same generator to every request;
    the API key is not checked here and a missing one fails at call time.
    """

    def __init__(self, settings: Settings | None = None, *, client: GeminiClient | None = None) -> None:
        self.settings = settings or default_settings
        self.llm_client = client or GeminiClient(
            base_url=self.settings.gemini_base_url,
            api_key=self.settings.gemini_api_key,
            model=self.settings.gemini_model,
            timeout_s=self.settings.gemini_timeout_s,
        )
        self.generator = NotesGenerator(self.llm_client, timeout_s=self.settings.generation_timeout_s)
        if not self.settings.gemini_api_key:
            logger.warning("GEMINI_API_KEY is not set; generation requests will be rejected by Gemini")

    def new_surface(self) -> NotesSurface:
        return NotesSurface(generator=self.generator)

    async def shutdown(self) -> None:
        await self.llm_client.aclose()
