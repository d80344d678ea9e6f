"""
Identity Domain Value Objects.

Available Value Objects:
    - CallerIdentity: Authenticated caller taken from a bearer token
"""

from src.domain.identity.value_objects.caller_identity import CallerIdentity

__all__ = ["CallerIdentity"]
