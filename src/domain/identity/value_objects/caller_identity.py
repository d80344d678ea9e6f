"""
CallerIdentity Value Object.

Identity of the authenticated user making a request, taken from a verified
bearer token. Services stamp task ownership with it.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class CallerIdentity:
    """
    Authenticated caller.

    Attributes:
        user_id: Id of the user (token "sub" claim)
        name: Display name at token issue time (token "name" claim)
    """

    user_id: UUID
    name: str
