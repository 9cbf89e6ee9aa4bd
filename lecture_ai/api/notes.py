from __future__ import annotations

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from lecture_ai.core.surface import is_blank
from lecture_ai.schema.notes import ErrorResponse, StudyNotesRequest, StudyNotesResponse

router = APIRouter(tags=["study_notes"])


@router.post(
    "/study_notes",
    response_model=StudyNotesResponse,
    responses={400: {"model": ErrorResponse}, 502: {"model": ErrorResponse}},
)
async def generate_study_notes(payload: StudyNotesRequest, request: Request):
    if is_blank(payload.notes):
        return JSONResponse(
            status_code=400,
            content=ErrorResponse(error="Lecture notes must not be empty.").model_dump(),
        )

    ctx = request.app.state.ctx
    surface = ctx.new_surface()
    result = await surface.submit(payload.notes)
    if result is None:
        return JSONResponse(status_code=502, content=ErrorResponse(error=surface.error or "").model_dump())
    return StudyNotesResponse(ok=True, result=result)
