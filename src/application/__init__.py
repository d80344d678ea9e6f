"""
Application Layer - Use Cases and Orchestration

Responsibility:
    Coordinates the flow of data between API and Domain layers.
    Owns transaction boundaries (one unit of work per use case).

Contains:
    - commands/: CQRS write operations
    - queries/: CQRS read operations
    - services/: TaskService and AuthService
    - ports/: Protocols implemented by the Infrastructure Layer
    - models: Shared Application Layer DTOs

Does NOT contain:
    - Domain business rules (belongs to Domain layer)
    - HTTP handling (belongs to API layer)
    - Infrastructure details (belongs to Infrastructure layer)
"""

# Re-export commonly used models for convenience
from src.application.models import AuthResult, SortDirection, UserSummary

__all__ = [
    "AuthResult",
    "SortDirection",
    "UserSummary",
]
