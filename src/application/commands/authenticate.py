"""
Authentication Commands

Command objects for user registration and login.
"""

from typing import ClassVar

from pydantic import BaseModel, Field

from src.domain.identity.entities.user import User
from src.domain.shared.exceptions import DomainValidationError


class RegisterUserCommand(BaseModel):
    """
    Command containing data needed to register a new user.

    Attributes:
        name: Display name
        email: Login email (normalized before use)
        password: Plain password (hashed by AuthService, never stored)

    Business Rules (validated in validate_business_rules()):
        - name non-blank
        - email non-blank and shaped like an address
        - password at least MIN_PASSWORD_LENGTH characters
    """

    name: str = Field(description="Display name")
    email: str = Field(description="Login email")
    password: str = Field(description="Plain password", repr=False)

    # Minimum accepted password length
    MIN_PASSWORD_LENGTH: ClassVar[int] = 6

    @property
    def normalized_email(self) -> str:
        return User.normalize_email(self.email)

    def validate_business_rules(self) -> None:
        """
        Validate registration data, collecting every error.

        Raises:
            DomainValidationError: If any rule is violated
        """
        errors = User.validate_profile(self.name.strip(), self.normalized_email)

        if len(self.password) < self.MIN_PASSWORD_LENGTH:
            errors.append(
                f"password must have at least {self.MIN_PASSWORD_LENGTH} characters"
            )

        if errors:
            raise DomainValidationError("Registration validation failed", errors=errors)


class LoginCommand(BaseModel):
    """
    Command containing login credentials.

    Attributes:
        email: Login email
        password: Plain password
    """

    email: str = Field(description="Login email")
    password: str = Field(description="Plain password", repr=False)

    @property
    def normalized_email(self) -> str:
        return User.normalize_email(self.email)
