"""
Password Hasher Port

Contract for one-way password hashing with a per-password random salt.
Implemented by Argon2PasswordHasher (pwdlib) in the Infrastructure Layer.
"""

from typing import Optional, Protocol


class PasswordHasherProtocol(Protocol):
    """Protocol for hashing and verifying passwords."""

    def hash(self, password: str) -> str:
        """Return a self-describing salted hash of `password`."""
        ...

    def verify_and_update(
        self, password: str, password_hash: str
    ) -> tuple[bool, Optional[str]]:
        """
        Verify `password` against `password_hash`.

        Returns:
            (valid, updated_hash) where updated_hash is a fresh hash when the
            stored one uses outdated parameters, None otherwise
        """
        ...
