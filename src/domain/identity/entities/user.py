"""
User Entity.

Registered account that can authenticate and own tasks.

Security Notes:
    - Only the password hash is stored, never the plain password
    - The hash stays inside the Application/Infrastructure boundary; API
      schemas expose id, name, email and created_on only
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from src.domain.shared.clock import utc_now
from src.domain.shared.exceptions import DomainValidationError


@dataclass
class User:
    """
    Entity representing a registered user.

    Attributes:
        name: Display name (required)
        email: Unique login email, stored trimmed and lower-cased
        password_hash: Salted password hash produced by a PasswordHasher
        id: Unique identifier (UUID4, auto-generated)
        created_on: Registration timestamp (aware UTC)

    Examples:
        >>> user = User.register("Alice", " Alice@Example.com ", "$argon2id$...")
        >>> user.email
        'alice@example.com'
    """

    name: str
    email: str
    password_hash: str
    id: UUID = field(default_factory=uuid4)
    created_on: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        self.name = (self.name or "").strip()
        self.email = self.normalize_email(self.email)

        errors = self.validate_profile(self.name, self.email)
        if errors:
            raise DomainValidationError("User validation failed", errors=errors)

    @classmethod
    def register(
        cls,
        name: str,
        email: str,
        password_hash: str,
        now: Optional[datetime] = None,
    ) -> "User":
        """Factory method for a newly registered user."""
        return cls(
            name=name,
            email=email,
            password_hash=password_hash,
            created_on=now or utc_now(),
        )

    @staticmethod
    def normalize_email(email: str) -> str:
        """
        Normalize email for storage and lookup.

        Examples:
            >>> User.normalize_email("  Bob@Example.COM ")
            'bob@example.com'
        """
        return (email or "").strip().lower()

    @staticmethod
    def validate_profile(name: str, email: str) -> list[str]:
        """
        Check name and email, returning a list of error messages.

        Args:
            name: Display name (already trimmed)
            email: Email (already normalized)

        Returns:
            Empty list when valid
        """
        errors: list[str] = []
        if not name:
            errors.append("name must not be empty")
        if not email:
            errors.append("email must not be empty")
        elif "@" not in email or email.startswith("@") or email.endswith("@"):
            errors.append(f"email '{email}' is not a valid email address")
        return errors
