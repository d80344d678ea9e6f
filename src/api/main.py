"""
FastAPI Application Setup

Main entry point for the Task Management API application.

Responsibility:
    - FastAPI app initialization
    - Lifespan: schema creation, default user seeding, pool cleanup
    - Router registration (auth, tasks)
    - CORS middleware configuration
    - Global exception handlers ({error, statusCode} envelope)
    - Request logging middleware
    - Health check endpoint

Architecture Notes:
    - Part of API Layer (Presentation)
    - Entry point for HTTP server (uvicorn)
    - Centralizes cross-cutting concerns (logging, CORS, error handling)
    - No business logic - pure HTTP orchestration

Contains:
    - create_app() factory function
    - Global exception handlers
    - Request logging middleware
    - Health check endpoint: GET /health

Does NOT contain:
    - Business logic (delegated to Application Layer)
    - Direct database access (uses Infrastructure Layer)
"""

import logging
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.exceptions import HTTPException as StarletteHTTPException

# Import routers
from src.api.routers import auth, tasks

# Import shared schemas and dependencies
from src.api.dependencies import get_password_hasher, get_unit_of_work
from src.api.schemas.common import ErrorResponse

# Import exceptions for global handling
from src.application.ports.unit_of_work import PersistenceError
from src.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    NotFoundError,
    UnauthorizedError,
)
from src.infrastructure.persistence.database.connection import (
    close_connections,
    health_check as database_health_check,
    init_schema,
)
from src.infrastructure.persistence.seed import seed_default_user
from src.shared.config import get_settings

# Configure logger
logging.basicConfig(
    level=get_settings().log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


# ============================================================================
# RESPONSE MODELS
# ============================================================================


class HealthCheckResponse(BaseModel):
    """
    Health check response model.

    Status indicator for monitoring and load balancers.

    Attributes:
        status: "ok" when the database answers, "degraded" otherwise
        version: API version (APP_VERSION)
        database: "up" or "down"
        timestamp: Unix timestamp of health check
    """

    status: str = "ok"
    version: str
    database: str
    timestamp: float


# ============================================================================
# MIDDLEWARE
# ============================================================================


async def request_logging_middleware(request: Request, call_next):
    """
    Request logging middleware.

    Logs all incoming requests with method, path, status code, and duration.

    Logging Format:
        INFO: "Incoming request: GET /api/tasks"
        INFO: "Request completed: GET /api/tasks - 200 - 0.012s"
    """
    logger.info(f"Incoming request: {request.method} {request.url.path}")

    start_time = time.time()
    response = await call_next(request)
    duration = time.time() - start_time

    logger.info(
        f"Request completed: {request.method} {request.url.path} - "
        f"{response.status_code} - {duration:.3f}s"
    )

    return response


# ============================================================================
# EXCEPTION HANDLERS
# ============================================================================


def error_response(status_code: int, message: str) -> JSONResponse:
    """Build the {error, statusCode} envelope."""
    body = ErrorResponse(error=message, status_code=status_code)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(by_alias=True),
    )


async def domain_exception_handler(request: Request, exc: DomainException):
    """
    Global exception handler for domain layer exceptions.

    Mapping:
        - DomainValidationError -> 400 Bad Request
        - UnauthorizedError (InvalidCredentialsError, InvalidTokenError) -> 401
        - NotFoundError (TaskNotFoundError) -> 404 Not Found
        - ConflictError (EmailAlreadyRegisteredError) -> 409 Conflict
        - Other DomainException -> 400 Bad Request

    Examples:
        >>> raise TaskNotFoundError(task_id)
        >>> # Returns: 404 {"error": "Task ... not found", "statusCode": 404}
    """
    if isinstance(exc, UnauthorizedError):
        status_code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, ConflictError):
        status_code = status.HTTP_409_CONFLICT
    else:
        status_code = status.HTTP_400_BAD_REQUEST

    logger.warning(
        f"Domain exception: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}"
    )

    response = error_response(status_code, str(exc))
    if status_code == status.HTTP_401_UNAUTHORIZED:
        response.headers["WWW-Authenticate"] = "Bearer"
    return response


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    Convert FastAPI request validation errors (422) to 400 envelopes.

    The message lists every failing field as "<location>: <message>".
    """
    errors = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        errors.append(f"{location}: {error.get('msg')}" if location else error.get("msg"))

    message = "; ".join(errors) or "Invalid request"
    logger.warning(
        f"Request validation failed: {message} - "
        f"Request: {request.method} {request.url.path}"
    )
    return error_response(status.HTTP_400_BAD_REQUEST, message)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Wrap framework HTTP errors (unknown route, wrong method) in the envelope."""
    response = error_response(exc.status_code, str(exc.detail))
    if exc.headers:
        response.headers.update(exc.headers)
    return response


async def persistence_exception_handler(request: Request, exc: PersistenceError):
    """Database failures -> 500; details are logged, never returned."""
    logger.error(
        f"Persistence error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """
    Global exception handler for unexpected exceptions.

    Catches all unhandled exceptions and converts to 500 Internal Server Error.
    Logs full stack trace for debugging.
    """
    logger.error(
        f"Unexpected error: {exc.__class__.__name__} - {str(exc)} - "
        f"Request: {request.method} {request.url.path}",
        exc_info=True,
    )
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred"
    )


# ============================================================================
# LIFESPAN
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Startup: create schema and seed the default user.
    Shutdown: close the database connection pool.

    Dependency overrides are honoured, so tests can point seeding at
    their own unit of work.
    """
    overrides = app.dependency_overrides
    unit_of_work = overrides.get(get_unit_of_work, get_unit_of_work)()
    password_hasher = overrides.get(get_password_hasher, get_password_hasher)()

    init_schema()
    seed_default_user(unit_of_work, password_hasher, get_settings())
    logger.info("Application startup complete")

    yield

    close_connections()
    logger.info("Application shutdown complete")


# ============================================================================
# APP FACTORY
# ============================================================================


def create_app() -> FastAPI:
    """
    FastAPI application factory.

    Creates and configures FastAPI app with all middleware, routers,
    and exception handlers.

    Configuration:
        - Title/Version: APP_NAME / APP_VERSION
        - CORS: CORS_ORIGINS (the SPA origin), X-Total-Count exposed
        - Routers: /api/auth, /api/tasks
        - Health: GET /health

    Returns:
        Configured FastAPI application instance

    Usage:
        >>> app = create_app()
        >>> # Run with uvicorn:
        >>> # uvicorn src.api.main:app --reload

    Architecture Note:
        Factory pattern allows easy testing with dependency overrides
        and configuration injection.
    """
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "Task management API: register/login with bearer tokens, "
            "create, update, delete and search tasks."
        ),
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=[tasks.TOTAL_COUNT_HEADER],
    )

    # Add request logging middleware
    app.middleware("http")(request_logging_middleware)

    # Register global exception handlers
    app.add_exception_handler(DomainException, domain_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(PersistenceError, persistence_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Register routers with /api prefix
    app.include_router(auth.router, prefix="/api")
    app.include_router(tasks.router, prefix="/api")

    @app.get(
        "/health",
        response_model=HealthCheckResponse,
        status_code=status.HTTP_200_OK,
        summary="Health check endpoint",
        description="Health check for monitoring and load balancers",
        tags=["health"],
    )
    def health_check() -> HealthCheckResponse:
        """
        Health check endpoint.

        Examples:
            >>> curl http://localhost:8000/health
            {
              "status": "ok",
              "version": "1.0.0",
              "database": "up",
              "timestamp": 1704976800.123
            }
        """
        database_up = database_health_check()
        return HealthCheckResponse(
            status="ok" if database_up else "degraded",
            version=settings.app_version,
            database="up" if database_up else "down",
            timestamp=time.time(),
        )

    logger.info("FastAPI application created successfully")
    logger.info("Registered routers: /api/auth, /api/tasks")
    logger.info("Health check available at: GET /health")

    return app


# ============================================================================
# APP INSTANCE (for uvicorn)
# ============================================================================

# Create app instance for uvicorn
# Usage: uvicorn src.api.main:app --reload
app = create_app()
