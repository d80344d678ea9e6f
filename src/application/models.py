"""
Shared Application Models

Responsibility:
    Contains shared models used across Application Layer.
    Prevents circular dependencies and code duplication.

Architecture Notes:
    - Part of Application Layer (Shared)
    - Used by Commands, Queries, and Services
    - Enums and common DTOs that don't belong to specific modules

Contains:
    - SortDirection: Ordering direction for queries
    - UserSummary: Public view of a user (no password hash)
    - AuthResult: Token + user returned by register/login

Does NOT contain:
    - Business logic (belongs to Domain Layer)
    - HTTP models (belongs to API Layer)
    - Infrastructure details (belongs to Infrastructure Layer)
"""

from datetime import datetime
from enum import Enum
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.identity.entities.user import User


class SortDirection(str, Enum):
    """
    Ordering direction for list queries.

    Usage:
        >>> SortDirection("asc") == SortDirection.ASC
        True
    """

    ASC = "asc"
    DESC = "desc"


class UserSummary(BaseModel):
    """
    Public representation of a user.

    The password hash is deliberately absent: it never leaves the
    Application/Infrastructure boundary.

    Attributes:
        id: User id
        name: Display name
        email: Login email
        created_on: Registration timestamp
    """

    id: UUID
    name: str
    email: str
    created_on: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserSummary":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_on=user.created_on,
        )


class AuthResult(BaseModel):
    """
    Result DTO returned by AuthService.register() and AuthService.login().

    Attributes:
        token: Signed bearer token
        expires_at: Token expiry (aware UTC)
        user: Authenticated user
    """

    token: str = Field(description="Signed bearer token")
    expires_at: datetime = Field(description="Token expiry timestamp")
    user: UserSummary
