"""
User Repository Implementation

SQLAlchemy implementation of UserRepositoryProtocol.
"""

from typing import Optional

from src.domain.identity.entities.user import User
from src.infrastructure.persistence.database.models import UserModel
from src.infrastructure.persistence.repositories.base_repository import (
    SqlAlchemyRepository,
)


class SqlAlchemyUserRepository(SqlAlchemyRepository[User, UserModel]):
    """Users table access, lookups by id and by normalized email."""

    entity_type = User
    model_type = UserModel

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by email (normalized the same way as on registration).

        Served by the unique index ix_users_email.
        """
        stmt = self.query().where(UserModel.email == User.normalize_email(email))
        row = self.session.scalars(stmt).first()
        if row is None:
            return None
        return self._to_entity(row)
