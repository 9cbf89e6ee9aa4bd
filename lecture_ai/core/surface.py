from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Literal, Protocol

from lecture_ai.schema.notes import StudyNotes

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Failed to generate study notes. Please try again."

SurfaceStatus = Literal["idle", "loading", "error", "success"]


class StudyNotesSource(Protocol):
    async def generate(self, notes_text: str) -> StudyNotes: ...


class SurfaceBusyError(RuntimeError):
    pass


def is_blank(notes_text: str | None) -> bool:
    return not (notes_text or "").strip()


@dataclass
class NotesSurface:
    """
    Display state behind the notes form.

    - blank input never reaches the generator
    - one request in flight at a time
    - failures collapse to a generic message and leave the form retryable

    ``error`` is the idle state with a message attached: nothing is in
    flight and ``submit`` is accepted again.
    """

    generator: StudyNotesSource
    status: SurfaceStatus = "idle"
    result: StudyNotes | None = None
    error: str | None = None
    _lock: asyncio.Lock = field(default_factory=asyncio.Lock, repr=False)

    @property
    def can_submit(self) -> bool:
        return self.status != "loading"

    async def submit(self, notes_text: str) -> StudyNotes | None:
        if is_blank(notes_text):
            return None
        if self._lock.locked():
            raise SurfaceBusyError("a study notes request is already in flight")

        async with self._lock:
            self.status = "loading"
            self.error = None
            try:
                notes = await self.generator.generate(notes_text)
            except asyncio.CancelledError:
                self.status = "idle"
                raise
            except Exception:
                logger.exception("Study notes generation failed")
                self.error = GENERIC_FAILURE_MESSAGE
                self.status = "error"
                return None
            self.result = notes
            self.status = "success"
            return notes
