"""Civic Pulse: duplicate detection and area-restricted voting for citizen issue reports."""

__version__ = "0.1.0"
