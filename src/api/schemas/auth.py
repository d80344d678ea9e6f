"""
Auth API Schemas

HTTP request/response models for the auth router.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from src.api.schemas.common import CamelModel
from src.application.commands.authenticate import LoginCommand, RegisterUserCommand


class RegisterRequest(CamelModel):
    """Request body for POST /api/auth/register."""

    name: str = Field(max_length=100)
    email: str = Field(max_length=255)
    password: str = Field(repr=False)

    def to_command(self) -> RegisterUserCommand:
        return RegisterUserCommand(
            name=self.name, email=self.email, password=self.password
        )


class LoginRequest(CamelModel):
    """Request body for POST /api/auth/login."""

    email: str
    password: str = Field(repr=False)

    def to_command(self) -> LoginCommand:
        return LoginCommand(email=self.email, password=self.password)


class UserResponse(CamelModel):
    """Public user representation (never includes the password hash)."""

    id: UUID
    name: str
    email: str
    created_on: datetime


class AuthResponse(CamelModel):
    """
    Token returned by register and login.

    The SPA sends `token` back as `Authorization: Bearer <token>`.
    """

    token: str
    expires_at: datetime
    user: UserResponse
