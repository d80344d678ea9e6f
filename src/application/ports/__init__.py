"""
Application Layer Ports (Interfaces)

Contains Protocol definitions for dependency inversion.
Infrastructure Layer implements these protocols.
"""

from src.application.ports.password_hasher import PasswordHasherProtocol
from src.application.ports.token_service import IssuedToken, TokenServiceProtocol
from src.application.ports.unit_of_work import (
    IntegrityViolationError,
    PersistenceError,
    UnitOfWorkProtocol,
)

__all__ = [
    "UnitOfWorkProtocol",
    "PersistenceError",
    "IntegrityViolationError",
    "PasswordHasherProtocol",
    "TokenServiceProtocol",
    "IssuedToken",
]
