"""Syntax Club API entrypoint.

Run with::

    uvicorn main:app --reload
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from syntax_club.api.router import get_api_router
from syntax_club.core.config import settings
from syntax_club.core.database import close_db, init_db
from syntax_club.core.logging import setup_logging
from syntax_club.models.base import utcnow
from syntax_club.schemas.shared import StatusResponse

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info(f"{settings.PROJECT_NAME} v{settings.VERSION} started")
    yield
    await close_db()


def create_app() -> FastAPI:
    """Build the application with logging, CORS and the versioned API."""
    setup_logging()

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_credentials=True,
        allow_methods=settings.CORS_METHODS.split(","),
        allow_headers=settings.CORS_HEADERS.split(","),
    )

    app.include_router(get_api_router(), prefix=settings.API_V1_STR)

    @app.get("/health", response_model=StatusResponse, tags=["System"])
    async def health_check():
        return StatusResponse(
            status="healthy",
            version=settings.VERSION,
            timestamp=utcnow().isoformat(),
        )

    return app


app = create_app()
