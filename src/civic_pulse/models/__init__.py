# src/civic_pulse/models/__init__.py
"""SQLAlchemy models for the Civic Pulse application."""

from .issue import Issue

__all__ = ["Issue"]
