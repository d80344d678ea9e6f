"""
API Router for Authentication

Responsibility:
    HTTP interface for registration and login.
    Both return a signed bearer token for subsequent task mutations.

Architecture Notes:
    - Part of API Layer (Presentation)
    - Depends on Application Layer (AuthService)
    - No business logic - pure HTTP concerns
    - Errors are raised as domain exceptions and converted by the global
      handlers in main.py

Contains:
    - POST /auth/register - Create account, return token
    - POST /auth/login - Verify credentials, return token
"""

import logging

from fastapi import APIRouter, Depends, status

from src.api.dependencies import get_auth_service
from src.api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from src.api.schemas.common import ErrorResponse
from src.application.services.auth_service import AuthService

logger = logging.getLogger(__name__)


# ============================================================================
# ROUTER CONFIGURATION
# ============================================================================


router = APIRouter(
    prefix="/auth",
    tags=["auth"],
    responses={
        400: {"model": ErrorResponse, "description": "Bad Request - Invalid input"},
        500: {"model": ErrorResponse, "description": "Internal Server Error"},
    },
)


# ============================================================================
# ENDPOINTS
# ============================================================================


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=AuthResponse,
    summary="Register a new user",
    responses={
        409: {"model": ErrorResponse, "description": "Conflict - Email already registered"},
    },
)
def register(
    request: RegisterRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Register a user and return a token (the user is signed in immediately).

    Examples:
        >>> curl -X POST http://localhost:8000/api/auth/register \\
        ...   -d '{"name": "Alice", "email": "alice@example.com", "password": "s3cret!"}'
        {"token": "eyJ...", "expiresAt": "...", "user": {"id": "...", "name": "Alice", ...}}
    """
    result = service.register(request.to_command())
    return AuthResponse.model_validate(result)


@router.post(
    "/login",
    status_code=status.HTTP_200_OK,
    response_model=AuthResponse,
    summary="Log in with email and password",
    responses={
        401: {"model": ErrorResponse, "description": "Unauthorized - Invalid email or password"},
    },
)
def login(
    request: LoginRequest,
    service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """Verify credentials and return a token."""
    result = service.login(request.to_command())
    return AuthResponse.model_validate(result)
