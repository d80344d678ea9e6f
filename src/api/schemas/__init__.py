"""
API Schemas Package

Contains Pydantic models for API Layer (camelCase JSON).
"""

from src.api.schemas.auth import AuthResponse, LoginRequest, RegisterRequest, UserResponse
from src.api.schemas.common import CamelModel, ErrorResponse
from src.api.schemas.tasks import TaskCreateRequest, TaskResponse, TaskUpdateRequest

__all__ = [
    "CamelModel",
    "ErrorResponse",
    "RegisterRequest",
    "LoginRequest",
    "UserResponse",
    "AuthResponse",
    "TaskCreateRequest",
    "TaskUpdateRequest",
    "TaskResponse",
]
