"""
Identity Domain Entities.

Available Entities:
    - User: Registered account
"""

from src.domain.identity.entities.user import User

__all__ = ["User"]
