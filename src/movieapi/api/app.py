"""FastAPI application factory.

The api layer validates requests, calls catalog operations and wraps
their Outcomes in the response envelope. It holds no state between
requests: each request gets its own database session.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Generator

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from movieapi import __version__
from movieapi.api.responses import envelope_response
from movieapi.config import Settings
from movieapi.db.repo import DbSession
from movieapi.db.session import get_session, init_db
from movieapi.models.domain import Outcome

logger = logging.getLogger(__name__)

MSG_VALIDATION_FAILED = "Validation failed"
MSG_FAILURE = "Something went wrong"


def get_settings(request: Request) -> Settings:
    """Dependency to get the settings the app was built with."""
    return request.app.state.settings


def get_db_session(request: Request) -> Generator[DbSession, None, None]:
    """Dependency to get database session.

    Yields:
        Database session that is automatically closed after request.
    """
    session = get_session(get_settings(request).database_url)
    try:
        yield session
    finally:
        session.close()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging and create tables on startup."""
    settings: Settings = app.state.settings
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    init_db(settings.database_url)
    logger.info(f"Serving posters from {settings.upload_dir} at {settings.static_path}")
    yield


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create FastAPI application.

    Args:
        settings: Optional settings; read from the environment if omitted.

    Returns:
        Configured FastAPI application.
    """
    if settings is None:
        settings = Settings.from_env()

    app = FastAPI(
        title="Movie Catalog API",
        description="Movies, their actors and poster uploads",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = settings

    allow_any = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_any else settings.cors_origins,
        allow_credentials=not allow_any,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(RequestValidationError)
    async def validation_failed(request: Request, exc: RequestValidationError):
        """Answer malformed requests with the envelope instead of 422."""
        return envelope_response(
            Outcome.invalid(MSG_VALIDATION_FAILED, jsonable_encoder(exc.errors()))
        )

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception):
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return envelope_response(Outcome.fault(MSG_FAILURE))

    # Include routes
    from movieapi.api.routes import movies

    app.include_router(movies.router, prefix="/api")

    # Directory is created on first upload
    app.mount(
        settings.static_path,
        StaticFiles(directory=str(settings.upload_dir), check_dir=False),
        name="posters",
    )

    # Health check endpoint
    @app.get("/health")
    def health_check():
        """Health check endpoint."""
        return {"status": "ok"}

    return app


# Default app instance
app = create_app()
