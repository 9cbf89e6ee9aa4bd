from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from lecture_ai.api.notes import router as notes_router
from lecture_ai.api.pages import router as pages_router
from lecture_ai.core.app_context import AppContext
from lecture_ai.core.settings import settings


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    # tests may install their own context before startup
    if getattr(app.state, "ctx", None) is None:
        app.state.ctx = AppContext()
    yield
    await app.state.ctx.shutdown()
    app.state.ctx = None


def create_app() -> FastAPI:
    _configure_logging(settings.log_level)
    app = FastAPI(title="LectureAI", version="0.1.0", lifespan=lifespan)
    app.include_router(pages_router)
    app.include_router(notes_router, prefix="/api/v1")
    return app


app = create_app()
