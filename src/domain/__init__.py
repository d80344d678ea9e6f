"""
Domain Layer - Core Business Logic

Heart of the Task Management application. Contains business rules, entities,
value objects and repository interfaces. Framework-independent and highly testable.

Architecture:
    - Clean Architecture: Domain Layer is the center, no external dependencies
    - Domain-Driven Design: Entities, Value Objects, Repositories
    - Dependency Inversion: Domain defines interfaces, Infrastructure implements

Subdomains:
    - tasks: Task tracking with ownership stamping and search criteria
    - identity: Users and the authenticated caller
    - shared: Exceptions, clock and the generic repository contract

Usage:
    >>> from src.domain import Task, User, DomainException
    >>> from src.domain.tasks import TaskSearchCriteria
"""

# Tasks Subdomain
from .tasks import Task, TaskDetails, TaskRepositoryProtocol, TaskStatus

# Identity Subdomain
from .identity import CallerIdentity, User, UserRepositoryProtocol

# Shared Domain
from .shared import DomainException

__all__ = [
    # Tasks Subdomain
    "Task",
    "TaskDetails",
    "TaskStatus",
    "TaskRepositoryProtocol",
    # Identity Subdomain
    "User",
    "CallerIdentity",
    "UserRepositoryProtocol",
    # Shared Domain
    "DomainException",
]
