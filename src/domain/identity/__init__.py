"""
Identity Subdomain Module

Users and the authenticated caller identity.

Exports:
    - User: Registered account entity
    - CallerIdentity: Authenticated caller value object
    - UserRepositoryProtocol: Repository interface
"""

from .entities import User
from .repositories import UserRepositoryProtocol
from .value_objects import CallerIdentity

__all__ = ["User", "CallerIdentity", "UserRepositoryProtocol"]
