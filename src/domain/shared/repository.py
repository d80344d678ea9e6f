"""
Generic Repository Interface

Minimal CRUD contract shared by every entity repository.

Architecture Notes:
    - Repository Pattern (Martin Fowler)
    - Protocol-based interface (structural typing)
    - Implementations live in the Infrastructure Layer and participate in
      a unit of work: add/update/remove are staged and only become durable
      when the unit of work commits
"""

from typing import Optional, Protocol, TypeVar
from uuid import UUID

EntityT = TypeVar("EntityT")


class RepositoryProtocol(Protocol[EntityT]):
    """
    Contract for get-by-id / add / update / remove over one entity type.

    Examples:
        >>> task = repo.get_by_id(task_id)
        >>> task.apply_changes({"status": "Completed"}, updated_by=user_id)
        >>> repo.update(task)
        >>> uow.commit()
    """

    def get_by_id(self, entity_id: UUID) -> Optional[EntityT]:
        """Return the entity or None when absent."""
        ...

    def add(self, entity: EntityT) -> None:
        """Stage a new entity for insertion."""
        ...

    def update(self, entity: EntityT) -> None:
        """Stage the entity's current state for writing."""
        ...

    def remove(self, entity_id: UUID) -> bool:
        """Stage deletion; return False if the entity did not exist."""
        ...
