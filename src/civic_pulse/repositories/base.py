"""Read interface and error type for issue repositories."""
from __future__ import annotations

from typing import Protocol

from civic_pulse.schemas.issue import IssueRecord

__all__ = ["IssueRepository", "RepositoryError"]


class RepositoryError(RuntimeError):
    """Raised when the issue corpus cannot be retrieved.

    Services treat this as an operational failure and degrade instead of
    propagating it to callers.
    """


class IssueRepository(Protocol):
    """Read interface the scoring services depend on."""

    def get_all(self, category_id: str | None = None) -> list[IssueRecord]:
        """Return every issue, optionally restricted to one category."""
        ...

    def get_by_author(self, author_id: str) -> list[IssueRecord]:
        """Return the issues reported by ``author_id``."""
        ...

    def get_by_id(self, issue_id: str) -> IssueRecord | None:
        """Return a single issue or None."""
        ...

    def get_with_coordinates(self) -> list[IssueRecord]:
        """Return the issues that carry a latitude/longitude pair."""
        ...
