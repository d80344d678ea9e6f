"""
JWT Token Service

Implements TokenServiceProtocol with PyJWT (HMAC-signed, time-limited).

Claims:
    sub: User id (UUID string)
    name: User display name
    iat: Issued-at (seconds since epoch)
    exp: Expiry (seconds since epoch)

Architecture Notes:
    - Infrastructure Layer (implements Application port)
    - Stateless: no token store, so there is no server-side revocation;
      tokens stay valid until exp
    - PyJWT errors never leave this module; callers only see the domain
      InvalidTokenError
"""

import logging
from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from src.application.ports.token_service import IssuedToken
from src.domain.identity.value_objects.caller_identity import CallerIdentity
from src.domain.shared.exceptions import InvalidTokenError
from src.shared.config import Settings

logger = logging.getLogger(__name__)

REQUIRED_CLAIMS = ["sub", "name", "iat", "exp"]


class JwtTokenService:
    """
    Issue and verify signed bearer tokens.

    Attributes:
        secret: HMAC signing secret
        algorithm: Signing algorithm (e.g. HS256)
        expire_minutes: Token lifetime

    Examples:
        >>> service = JwtTokenService(secret="x" * 32, expire_minutes=60)
        >>> issued = service.issue(CallerIdentity(user_id=user.id, name="Alice"))
        >>> service.verify(issued.token).name
        'Alice'
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expire_minutes: int = 60,
    ) -> None:
        if not secret:
            raise ValueError("JWT secret must not be empty")
        if expire_minutes <= 0:
            raise ValueError("Token lifetime must be positive")

        self.secret = secret
        self.algorithm = algorithm
        self.expire_minutes = expire_minutes

    @classmethod
    def from_settings(cls, settings: Settings) -> "JwtTokenService":
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            expire_minutes=settings.jwt_expire_minutes,
        )

    def issue(self, identity: CallerIdentity) -> IssuedToken:
        issued_at = datetime.now(timezone.utc).replace(microsecond=0)
        expires_at = issued_at + timedelta(minutes=self.expire_minutes)

        payload = {
            "sub": str(identity.user_id),
            "name": identity.name,
            "iat": issued_at,
            "exp": expires_at,
        }
        token = jwt.encode(payload, self.secret, algorithm=self.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> CallerIdentity:
        """
        Decode and validate a token.

        Raises:
            InvalidTokenError: "Token has expired" or "Invalid token"
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": REQUIRED_CLAIMS},
            )
            return CallerIdentity(user_id=UUID(payload["sub"]), name=payload["name"])

        except jwt.ExpiredSignatureError as e:
            logger.info("Rejected expired token")
            raise InvalidTokenError("Token has expired") from e
        except (jwt.InvalidTokenError, ValueError, TypeError) as e:
            logger.warning(f"Rejected invalid token: {e}")
            raise InvalidTokenError("Invalid token") from e
