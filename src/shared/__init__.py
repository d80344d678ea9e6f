"""
Shared Module

Responsibility:
    Cross-cutting concerns used across all layers.

Contains:
    - Settings: Application configuration loaded from environment
    - get_settings: Cached settings accessor

Does NOT contain:
    - Layer-specific code
    - Business logic
    - Infrastructure implementations
"""

from .config import Settings, get_settings

__all__ = ["Settings", "get_settings"]
