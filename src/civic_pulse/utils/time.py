# src/civic_pulse/utils/time.py
"""Time utilities shared by schemas and database models."""

from datetime import UTC, datetime


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)
