"""
Token Service Port

Contract for issuing and verifying signed, time-limited bearer tokens.
Implemented by JwtTokenService (PyJWT) in the Infrastructure Layer.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol

from src.domain.identity.value_objects.caller_identity import CallerIdentity


@dataclass(frozen=True)
class IssuedToken:
    """
    A freshly signed token.

    Attributes:
        token: Encoded bearer token
        expires_at: Expiry timestamp (aware UTC)
    """

    token: str
    expires_at: datetime


class TokenServiceProtocol(Protocol):
    """Protocol for bearer token issuance and verification."""

    def issue(self, identity: CallerIdentity) -> IssuedToken:
        """Sign a token carrying the identity and an expiry."""
        ...

    def verify(self, token: str) -> CallerIdentity:
        """
        Verify signature and expiry and return the carried identity.

        Raises:
            InvalidTokenError: If the token is malformed, tampered with or expired
        """
        ...
