# src/civic_pulse/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import issues_router, votes_router

__all__ = [
    "issues_router",
    "votes_router",
]
