"""
Domain Layer Exceptions

This module defines the exception hierarchy for the Domain Layer.
All domain-specific exceptions inherit from DomainException.

Responsibility:
    - Base exception class for domain errors
    - Type-safe error handling across layers
    - Clear separation from framework exceptions

Architecture Notes:
    - Part of Shared Domain (used by tasks and identity subdomains)
    - API Layer maps each family to one HTTP status code:
        * DomainValidationError -> 400 Bad Request
        * UnauthorizedError     -> 401 Unauthorized
        * NotFoundError         -> 404 Not Found
        * ConflictError         -> 409 Conflict
    - Infrastructure Layer does not raise DomainException
      (persistence failures use PersistenceError from the application ports)
"""

from uuid import UUID


class DomainException(Exception):
    """
    Base exception for all domain layer errors.

    Usage:
        - Catch this in Application Layer to handle all domain errors
        - API Layer converts to appropriate HTTP status codes

    Examples:
        >>> raise DomainException("Business rule violation")
    """

    def __init__(self, message: str) -> None:
        """
        Initialize domain exception with error message.

        Args:
            message: Human-readable error description
        """
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message={self.message!r})"


class DomainValidationError(DomainException):
    """
    Raised when input data violates business rules.

    This exception can contain multiple validation errors to provide
    comprehensive feedback to the user (better UX than fail-fast).

    Attributes:
        errors: List of validation error messages
        field_name: Name of the offending field when only one is involved

    Examples:
        >>> raise DomainValidationError("title must not be empty", field_name="title")

        >>> raise DomainValidationError(
        ...     "Task validation failed",
        ...     errors=["title must not be empty", "remarks must not be empty"],
        ... )
    """

    def __init__(
        self,
        message: str,
        errors: list[str] | None = None,
        field_name: str | None = None,
    ) -> None:
        self.errors = errors or []
        self.field_name = field_name
        if self.errors:
            detailed_message = f"{message}: " + "; ".join(self.errors)
            super().__init__(detailed_message)
        else:
            super().__init__(message)


class UnauthorizedError(DomainException):
    """
    Raised when the caller cannot be authenticated.

    Covers bad credentials as well as missing, expired or invalid tokens.
    """


class InvalidCredentialsError(UnauthorizedError):
    """
    Raised when email/password verification fails at login.

    The message is identical for unknown emails and wrong passwords so that
    callers cannot probe which emails are registered.
    """

    def __init__(self) -> None:
        super().__init__("Invalid email or password")


class InvalidTokenError(UnauthorizedError):
    """Raised when a bearer token is missing, malformed, tampered with or expired."""


class ConflictError(DomainException):
    """Raised when an operation would violate a uniqueness rule."""


class EmailAlreadyRegisteredError(ConflictError):
    """
    Raised when registering an email that already belongs to a user.

    Attributes:
        email: The conflicting (normalized) email address
    """

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"A user with email '{email}' already exists")


class NotFoundError(DomainException):
    """Raised when a requested entity does not exist."""


class TaskNotFoundError(NotFoundError):
    """
    Raised when a task id is unknown.

    Attributes:
        task_id: The id that was looked up
    """

    def __init__(self, task_id: UUID) -> None:
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")
