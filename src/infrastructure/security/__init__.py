"""
Security Infrastructure Module

Exports:
    - Argon2PasswordHasher: pwdlib implementation of PasswordHasherProtocol
    - JwtTokenService: PyJWT implementation of TokenServiceProtocol
"""

from .jwt_token_service import JwtTokenService
from .password_hasher import Argon2PasswordHasher

__all__ = [
    "Argon2PasswordHasher",
    "JwtTokenService",
]
