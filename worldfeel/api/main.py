"""
FastAPI application for the worldfeel service.

This module initializes and configures the FastAPI application that serves
the submission and stats API, and runs the expiry sweeper in the background.
"""

import asyncio
import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from worldfeel.api.dependencies import get_unknown_emotion_tracker
from worldfeel.api.endpoints import admin, emotions, stats, submit
from worldfeel.config.settings import settings
from worldfeel.core.errors import WordValidationError
from worldfeel.core.expiry import run_expiry_sweeper
from worldfeel.models.dtos import ApiResponse
from worldfeel.monitoring.metrics import render_latest
from worldfeel.utils.db_health import check_db_connection
from worldfeel.utils.db_session import get_async_engine
from worldfeel.utils.logging_utils import setup_logging

# Background expiry sweeper task
sweeper_task: asyncio.Task | None = None

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager for startup and shutdown events.

    Configures logging and starts the expiry sweeper on startup; stops the
    sweeper, waits for pending unknown-emotion writes and disposes the engine
    on shutdown.
    """
    global sweeper_task

    setup_logging()
    logger.info("Starting %s v%s", settings.APP_NAME, settings.APP_VERSION)

    sweeper_task = asyncio.create_task(run_expiry_sweeper())
    logger.info("Expiry sweeper task created")

    yield

    logger.info("Shutting down application")
    if sweeper_task:
        sweeper_task.cancel()
        try:
            await sweeper_task
        except asyncio.CancelledError:
            logger.info("Expiry sweeper task cancelled successfully")
        sweeper_task = None

    await get_unknown_emotion_tracker().drain()
    await get_async_engine().dispose()


def _envelope(status_code: int, error: str, message: str | None = None) -> JSONResponse:
    body = ApiResponse(success=False, error=error, message=message)
    return JSONResponse(status_code=status_code, content=body.to_json_dict())


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ())[1:])
    message = first.get("msg", "Validation failed")
    if field:
        message = f"{field}: {message}"
    logger.info("Request validation failed on %s: %s", request.url.path, message)
    return _envelope(status.HTTP_400_BAD_REQUEST, "Invalid input", message)


async def word_validation_handler(request: Request, exc: WordValidationError) -> JSONResponse:
    logger.info("Rejected word on %s (%s): %s", request.url.path, exc.reason, exc.message)
    return _envelope(status.HTTP_400_BAD_REQUEST, "Invalid input", exc.message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        return _envelope(exc.status_code, "Not found", f"Route {request.url.path} not found")
    return _envelope(exc.status_code, str(exc.detail))


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error on %s %s: %s", request.method, request.url.path, exc, exc_info=exc)
    message = str(exc) if settings.DEBUG else "Something went wrong. Please try again."
    return _envelope(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error", message)


def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="""How is the world feeling?

        Visitors share one word describing how they feel and see which
        feelings are most common over the last 24 hours.""",
        debug=settings.DEBUG,
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,  # Disable docs in production
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_tags=[
            {"name": "submissions", "description": "Share a feeling"},
            {"name": "stats", "description": "Aggregated world mood"},
            {"name": "emotions", "description": "Emotion vocabulary lookups"},
            {"name": "admin", "description": "Vocabulary curation"},
            {"name": "health", "description": "Health check and monitoring"},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS if not settings.DEBUG else ["*"],
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.ALLOWED_HOSTS if not settings.DEBUG else ["*"]
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(WordValidationError, word_validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(submit.router, prefix="/api", tags=["submissions"])
    app.include_router(stats.router, prefix="/api", tags=["stats"])
    app.include_router(emotions.router, prefix="/api", tags=["emotions"])
    app.include_router(admin.router, prefix="/api", tags=["admin"])

    @app.get("/api/health", tags=["health"], summary="Health Check")
    async def health_check():
        """Service liveness plus database reachability."""
        db_ok = await check_db_connection()
        body = {
            "success": db_ok,
            "message": "Server is running" if db_ok else "Database unavailable",
            "service": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "database": "connected" if db_ok else "unavailable",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        return JSONResponse(
            status_code=status.HTTP_200_OK if db_ok else status.HTTP_503_SERVICE_UNAVAILABLE,
            content=body,
        )

    @app.get("/metrics", include_in_schema=False)
    async def metrics():
        body, content_type = render_latest()
        return Response(content=body, media_type=content_type)

    @app.get("/", tags=["health"], summary="Service information")
    async def root():
        return {
            "success": True,
            "message": "How Is The World Feeling API",
            "version": settings.APP_VERSION,
            "docs": "/api/health",
        }

    return app


# Create the application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "worldfeel.api.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
