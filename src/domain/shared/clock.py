"""
Domain Clock

Single source of "now" for entities, so every timestamp in the domain is
timezone-aware UTC.
"""

from datetime import datetime, timezone


def utc_now() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
