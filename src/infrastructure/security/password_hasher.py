"""
Argon2 Password Hasher

Implements PasswordHasherProtocol with pwdlib (Argon2id, random salt per hash).

Hashes are self-describing ($argon2id$v=19$m=...,t=...,p=...$salt$hash), so
changing cost parameters later only affects new hashes; verify_and_update()
reports when a stored hash should be replaced.
"""

import logging
from typing import Optional

from pwdlib import PasswordHash
from pwdlib.exceptions import UnknownHashError

logger = logging.getLogger(__name__)


class Argon2PasswordHasher:
    """
    pwdlib-backed password hasher.

    Attributes:
        password_hash: pwdlib PasswordHash (defaults to PasswordHash.recommended())

    Examples:
        >>> hasher = Argon2PasswordHasher()
        >>> stored = hasher.hash("s3cret!")
        >>> hasher.verify_and_update("s3cret!", stored)
        (True, None)
    """

    def __init__(self, password_hash: Optional[PasswordHash] = None) -> None:
        self.password_hash = password_hash or PasswordHash.recommended()

    def hash(self, password: str) -> str:
        return self.password_hash.hash(password)

    def verify_and_update(
        self, password: str, password_hash: str
    ) -> tuple[bool, Optional[str]]:
        """
        Verify a password and return a replacement hash when needed.

        A stored value that is not a recognised hash counts as a mismatch.
        """
        try:
            return self.password_hash.verify_and_update(password, password_hash)
        except UnknownHashError:
            logger.warning("Stored password hash has an unknown format")
            return False, None
