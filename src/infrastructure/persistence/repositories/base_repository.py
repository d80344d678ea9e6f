"""
Generic SQLAlchemy Repository

Implements RepositoryProtocol for any dataclass entity whose fields match
the columns of an ORM model one to one.

Responsibility:
    - Map entity <-> ORM row (dataclasses.fields driven)
    - get_by_id / add / update / remove on the unit of work's session
    - Provide a base SELECT for entity-specific queries

Architecture Notes:
    - Infrastructure Layer (implements Domain interface)
    - The session belongs to the unit of work: repositories never commit,
      roll back or close it
    - Writes are staged in the session and flushed on commit (or on the
      next query through autoflush)
"""

import dataclasses
from typing import Any, ClassVar, Generic, Optional, TypeVar
from uuid import UUID

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from src.infrastructure.persistence.database.models import Base

EntityT = TypeVar("EntityT")
ModelT = TypeVar("ModelT", bound=Base)


class SqlAlchemyRepository(Generic[EntityT, ModelT]):
    """
    Base repository bound to one entity type and one ORM model.

    Subclasses set `entity_type` and `model_type`.

    Examples:
        >>> class SqlAlchemyUserRepository(SqlAlchemyRepository[User, UserModel]):
        ...     entity_type = User
        ...     model_type = UserModel
        >>>
        >>> repo = SqlAlchemyUserRepository(session)
        >>> repo.add(user)
        >>> repo.get_by_id(user.id) == user
        True
    """

    entity_type: ClassVar[type]
    model_type: ClassVar[type[Base]]

    def __init__(self, session: Session) -> None:
        self.session = session

    # ========================================================================
    # MAPPING
    # ========================================================================

    def _to_entity(self, row: ModelT) -> EntityT:
        values = {
            f.name: getattr(row, f.name)
            for f in dataclasses.fields(self.entity_type)
            if f.init
        }
        return self.entity_type(**values)

    def _to_model(self, entity: EntityT) -> ModelT:
        values: dict[str, Any] = {
            f.name: getattr(entity, f.name) for f in dataclasses.fields(entity)
        }
        return self.model_type(**values)  # type: ignore[return-value]

    # ========================================================================
    # CRUD
    # ========================================================================

    def query(self) -> Select[Any]:
        """Base SELECT over the model table."""
        return select(self.model_type)

    def get_by_id(self, entity_id: UUID) -> Optional[EntityT]:
        row = self.session.get(self.model_type, entity_id)
        if row is None:
            return None
        return self._to_entity(row)  # type: ignore[arg-type]

    def add(self, entity: EntityT) -> None:
        self.session.add(self._to_model(entity))

    def update(self, entity: EntityT) -> None:
        """
        Stage the entity's full state.

        merge() copies the values onto the row already loaded in the
        session (or loads it first), so only changed columns are written.
        """
        self.session.merge(self._to_model(entity))

    def remove(self, entity_id: UUID) -> bool:
        row = self.session.get(self.model_type, entity_id)
        if row is None:
            return False
        self.session.delete(row)
        return True
