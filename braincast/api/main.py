"""
FastAPI application with assembled routers.

Initializes FastAPI app with all API routers, session and route gate
middleware, and configures uvicorn server.

Dependencies: fastapi, starlette, braincast.api.routers, uvicorn
System role: API entry point with router assembly and server launch
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.sessions import SessionMiddleware

from braincast.api.deps.dependencies import get_service_cache
from braincast.api.middleware import RouteGateMiddleware
from braincast.boundary.db import dispose_engine
from braincast.configs import Settings, get_settings
from braincast.core.exceptions import BrainCastException
from braincast.observability import configure_logging
from braincast.observability.middleware import CorrelationMiddleware, RequestLoggingMiddleware
from .routers import (
    auth_router,
    categories_router,
    challenges_router,
    friends_router,
    health_router,
    quizzes_router,
    scores_router,
    webhook_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    logger.info("BrainCast API starting", extra={"environment": settings.environment})

    yield

    # Shutdown
    get_service_cache().clear()
    await dispose_engine()
    logger.info("BrainCast API stopped")


async def braincast_exception_handler(request: Request, exc: BrainCastException) -> JSONResponse:
    """Render domain errors as {"error": message} with their status code."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Answer 404 for malformed ids in the path; no such entity can exist.

    Body and query validation failures keep FastAPI's 422 response.
    """
    errors = exc.errors()
    if errors and all(error["loc"][0] == "path" for error in errors):
        return JSONResponse(status_code=404, content={"error": "Not found"})
    return await request_validation_exception_handler(request, exc)


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure FastAPI application with routers.

    Args:
        settings: Settings override; defaults to the cached environment settings

    Returns:
        FastAPI: Configured application instance with all routers registered
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="BrainCast API",
        description="Quiz catalogue, friends and head-to-head quiz challenges",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_exception_handler(BrainCastException, braincast_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Middleware added later wraps middleware added earlier; the route gate
    # reads request.session, so SessionMiddleware must be added after it.
    app.add_middleware(RouteGateMiddleware, settings=settings.auth)
    app.add_middleware(
        SessionMiddleware,
        secret_key=settings.auth.session_secret,
        session_cookie=settings.auth.session_cookie,
        max_age=settings.auth.session_max_age,
        https_only=settings.auth.https_only,
        same_site="lax",
    )

    # Add observability middleware
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(CorrelationMiddleware)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.auth.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register all routers under the API prefix
    api_prefix = settings.auth.api_prefix
    app.include_router(health_router, prefix=api_prefix)
    app.include_router(auth_router, prefix=api_prefix)
    app.include_router(friends_router, prefix=api_prefix)
    app.include_router(challenges_router, prefix=api_prefix)
    app.include_router(quizzes_router, prefix=api_prefix)
    app.include_router(scores_router, prefix=api_prefix)
    app.include_router(categories_router, prefix=api_prefix)
    app.include_router(webhook_router, prefix=api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "braincast.api.main:app",
        host="0.0.0.0",
        port=8000,
    )
