"""
Shared Domain Module

Shared domain concepts used across all subdomains (tasks, identity).

This module exports:
    - DomainException: Base exception for all domain errors
    - Exception families mapped to HTTP status codes by the API Layer
"""

from .exceptions import (
    ConflictError,
    DomainException,
    DomainValidationError,
    EmailAlreadyRegisteredError,
    InvalidCredentialsError,
    InvalidTokenError,
    NotFoundError,
    TaskNotFoundError,
    UnauthorizedError,
)

__all__ = [
    "DomainException",
    "DomainValidationError",
    "UnauthorizedError",
    "InvalidCredentialsError",
    "InvalidTokenError",
    "ConflictError",
    "EmailAlreadyRegisteredError",
    "NotFoundError",
    "TaskNotFoundError",
]
