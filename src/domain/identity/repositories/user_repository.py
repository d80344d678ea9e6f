"""
UserRepository Interface

Repository pattern interface for User persistence.
"""

from typing import Optional, Protocol

from src.domain.identity.entities.user import User
from src.domain.shared.repository import RepositoryProtocol


class UserRepositoryProtocol(RepositoryProtocol[User], Protocol):
    """
    Protocol defining the contract for User persistence.

    Adds lookup by (normalized) email on top of the generic CRUD contract.
    """

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Retrieve a user by email.

        Args:
            email: Email address (normalized by the caller)

        Returns:
            User if found, None otherwise
        """
        ...
