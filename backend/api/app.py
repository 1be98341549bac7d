"""
FastAPI application factory.

Creates and configures the FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from shared.config import Settings, get_settings
from shared.exceptions import AuthenticationError, CinevaultError, InternalError
from shared.logging_config import configure_logging

from .dependencies import ServiceContainer
from .models.errors import ErrorResponse, ValidationErrorResponse
from .routes import health
from modules.auth.routes import router as auth_router
from modules.movies.routes import router as movies_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Runs startup and shutdown logic.
    """
    # Startup
    settings: Settings = app.state.container.settings
    configure_logging(settings)
    logger.info(
        "Starting %s on %s:%s (storage=%s)",
        settings.app_name, settings.host, settings.port, settings.storage_backend,
    )
    if not settings.jwt_secret:
        logger.warning("JWT_SECRET is not set; registration and login will fail")
    yield
    # Shutdown
    logger.info("Shutting down %s", settings.app_name)


async def handle_cinevault_error(request: Request, exc: CinevaultError) -> JSONResponse:
    """Render domain errors with the status code of their base class."""
    if exc.status_code >= 500:
        logger.error(
            "%s %s failed: %s", request.method, request.url.path, exc.message,
            exc_info=exc,
        )
        body = ErrorResponse(error=InternalError().code, message=InternalError().message)
    else:
        body = ErrorResponse(error=exc.code, message=exc.message, details=exc.details)

    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(
        status_code=exc.status_code,
        content=jsonable_encoder(body),
        headers=headers,
    )


async def handle_request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors: 400, not 422."""
    body = ValidationErrorResponse(detail=jsonable_encoder(exc.errors()))
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    body = ErrorResponse(error=InternalError().code, message=InternalError().message)
    return JSONResponse(status_code=500, content=jsonable_encoder(body))


def create_app(
    settings: Optional[Settings] = None,
    container: Optional[ServiceContainer] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to build with (defaults to the environment)
        container: Pre-built service container (defaults to one built
            from settings)

    Returns:
        Configured FastAPI instance
    """
    if container is None:
        container = ServiceContainer(settings or get_settings())
    settings = container.settings

    app = FastAPI(
        title=settings.app_name,
        description="Movie catalog API with bearer-token authentication",
        version=settings.app_version,
        lifespan=lifespan,
        docs_url="/api/docs" if settings.debug else None,
        redoc_url="/api/redoc" if settings.debug else None,
    )
    app.state.container = container

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Error handlers
    app.add_exception_handler(CinevaultError, handle_cinevault_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)

    # Register routes
    app.include_router(health.router, prefix="/api", tags=["health"])
    app.include_router(auth_router, prefix="/api/auth", tags=["auth"])
    app.include_router(movies_router, prefix="/api/movies", tags=["movies"])

    return app


# Application instance for uvicorn
app = create_app()
