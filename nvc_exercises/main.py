"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from nvc_exercises.config import Settings, configure_logging, get_settings
from nvc_exercises.database import Database
from nvc_exercises.domain.common.exceptions import (
    DomainError,
    EntityNotFoundError,
    ValidationError,
)
from nvc_exercises.domain.identity.exceptions import InvalidApiKeyError
from nvc_exercises.exceptions import NvcError
from nvc_exercises.infrastructure.common.routers import status as status_router
from nvc_exercises.infrastructure.content.routers import exercises

logger = structlog.get_logger(__name__)


def _error(status_code: int, message: str, headers: dict[str, str] | None = None) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": message}, headers=headers)


def register_exception_handlers(app: FastAPI) -> None:
    """Map internal failures to HTTP responses. Nothing else in the app does this."""

    @app.exception_handler(NvcError)
    async def nvc_error_handler(request: Request, exc: NvcError) -> JSONResponse:
        return _error(exc.status_code, exc.message)

    @app.exception_handler(InvalidApiKeyError)
    async def invalid_api_key_handler(request: Request, exc: InvalidApiKeyError) -> JSONResponse:
        return _error(
            status.HTTP_401_UNAUTHORIZED, exc.message, headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(ValidationError)
    async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
        return _error(status.HTTP_400_BAD_REQUEST, exc.message)

    @app.exception_handler(EntityNotFoundError)
    async def not_found_handler(request: Request, exc: EntityNotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, exc.message)

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError) -> JSONResponse:
        # Anything else from the domain is a broken invariant, i.e. bad stored data
        logger.error("domain_error", path=request.url.path, error=str(exc))
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.error("unhandled_error", path=request.url.path, exc_info=exc)
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application for the given settings."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        database = Database(settings.DATABASE_URL)
        database.open()
        database.create_schema()
        app.state.database = database
        logger.info(
            "application_started", project=settings.PROJECT_NAME, environment=settings.ENVIRONMENT
        )
        try:
            yield
        finally:
            database.close()
            logger.info("application_stopped")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["GET"],
        allow_headers=["Authorization"],
    )

    register_exception_handlers(app)

    app.include_router(status_router.router)
    app.include_router(exercises.router, prefix=settings.API_V1_PREFIX)

    return app


app = create_app()
