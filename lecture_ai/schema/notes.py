from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StudyNotes(BaseModel):
    # replies must use the wire names; python field names are not accepted
    model_config = ConfigDict(frozen=True)

    summary: str
    key_points: list[str] = Field(..., alias="keyPoints")
    exam_questions: list[str] = Field(..., alias="examQuestions")


class StudyNotesRequest(BaseModel):
    notes: str


class StudyNotesResponse(BaseModel):
    ok: bool
    result: StudyNotes


class ErrorResponse(BaseModel):
    ok: bool = False
    error: str
