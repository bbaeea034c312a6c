"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import structlog
from fastapi import APIRouter, FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from flashdeck.config import Settings, configure_logging, get_settings
from flashdeck.database import create_schema, dispose_engine, initialize_database
from flashdeck.domain.common.exceptions import (
    BusinessRuleViolationError,
    DomainError,
    EntityNotFoundError,
)
from flashdeck.domain.learning.exceptions import InsufficientCardsError, NoEligibleCardsError
from flashdeck.exceptions import FlashdeckError
from flashdeck.infrastructure.common.rate_limit import limiter
from flashdeck.infrastructure.learning.routers import (
    flashcards,
    lesson_flashcards,
    lessons,
    quiz_sessions,
    study_sessions,
)

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    settings: Settings = app.state.settings
    initialize_database(settings)
    if settings.ENVIRONMENT != "production":
        create_schema()
    logger.info("application_started", environment=settings.ENVIRONMENT)
    yield
    dispose_engine()
    logger.info("application_stopped")


async def flashdeck_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, FlashdeckError)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def domain_error_handler(_request: Request, exc: Exception) -> JSONResponse:
    """
    Translate domain errors into HTTP responses.

    Empty selections are informational (422), other rule violations are
    conflicts with the current state (409), missing entities are 404 and the
    rest is bad input (400).
    """
    assert isinstance(exc, DomainError)
    content: dict[str, object] = {"detail": exc.message}
    if isinstance(exc, NoEligibleCardsError | InsufficientCardsError):
        status_code = status.HTTP_422_UNPROCESSABLE_CONTENT
        content["rule"] = exc.rule
    elif isinstance(exc, BusinessRuleViolationError):
        status_code = status.HTTP_409_CONFLICT
        content["rule"] = exc.rule
    elif isinstance(exc, EntityNotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    return JSONResponse(status_code=status_code, content=content)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application; settings default to the cached environment settings."""
    settings = settings or get_settings()
    configure_logging(settings.ENVIRONMENT)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        docs_url=f"{settings.API_V1_PREFIX}/docs",
        openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.limiter = limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(FlashdeckError, flashdeck_error_handler)
    app.add_exception_handler(DomainError, domain_error_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    api_router = APIRouter(prefix=settings.API_V1_PREFIX)
    api_router.include_router(lessons.router)
    api_router.include_router(lesson_flashcards.router)
    api_router.include_router(flashcards.router)
    api_router.include_router(quiz_sessions.router)
    api_router.include_router(study_sessions.router)

    @api_router.get("/")
    def api_root() -> dict[str, str]:
        return {
            "message": f"{settings.PROJECT_NAME} v1",
            "version": settings.VERSION,
            "docs": f"{settings.API_V1_PREFIX}/docs",
        }

    app.include_router(api_router)

    @app.get("/")
    def root() -> dict[str, str]:
        return {"message": f"Welcome to {settings.PROJECT_NAME}"}

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy"}

    return app


app = create_app()
