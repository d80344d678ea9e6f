"""
Identity Domain Repository Interfaces.

Available Interfaces:
    - UserRepositoryProtocol: User persistence contract
"""

from src.domain.identity.repositories.user_repository import UserRepositoryProtocol

__all__ = ["UserRepositoryProtocol"]
