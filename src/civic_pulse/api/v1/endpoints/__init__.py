# src/civic_pulse/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .issues import router as issues_router
from .votes import router as votes_router

__all__ = [
    "issues_router",
    "votes_router",
]
