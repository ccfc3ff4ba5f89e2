"""Read-only data access for the scoring services.

The SQL-backed implementation lives in ``civic_pulse.repositories.issue_repo``
and is imported from there so that the scoring services load no database code.
"""

from .base import IssueRepository, RepositoryError

__all__ = ["IssueRepository", "RepositoryError"]
