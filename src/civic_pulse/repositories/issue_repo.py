"""Data access helpers for reading issue reports."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from civic_pulse.models.issue import Issue
from civic_pulse.repositories.base import IssueRepository, RepositoryError
from civic_pulse.schemas.issue import IssueRecord

__all__ = ["IssueRepository", "RepositoryError", "SqlIssueRepository"]


class SqlIssueRepository:
    """Thin wrapper around database access for issue entities.

    Results are materialized as immutable ``IssueRecord`` values so nothing
    downstream can touch the session.
    """

    def __init__(self, session: Session, limit: int | None = None) -> None:
        """Initialize the repository.

        Args:
            session: SQLAlchemy session used for reads.
            limit: Optional cap on corpus queries; the most recent rows are kept.
        """
        self.session = session
        self.limit = limit

    def _fetch(self, stmt: Select[tuple[Issue]], *, apply_limit: bool = True) -> list[IssueRecord]:
        capped = apply_limit and self.limit is not None
        if capped:
            stmt = stmt.order_by(Issue.created_at.desc(), Issue.id.desc()).limit(self.limit)
        else:
            stmt = stmt.order_by(Issue.created_at, Issue.id)
        try:
            rows = self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as err:
            raise RepositoryError(f"Failed to load issues: {err}") from err
        records = [IssueRecord.model_validate(row) for row in rows]
        if capped:
            # Callers always see oldest-first retrieval order.
            records.reverse()
        return records

    def get_all(self, category_id: str | None = None) -> list[IssueRecord]:
        """Return issues in retrieval order, filtered to a category when given."""
        stmt = select(Issue)
        if category_id is not None:
            stmt = stmt.where(Issue.category_id == category_id)
        return self._fetch(stmt)

    def get_by_author(self, author_id: str) -> list[IssueRecord]:
        """Return every issue reported by the given author."""
        return self._fetch(select(Issue).where(Issue.author_id == author_id), apply_limit=False)

    def get_by_id(self, issue_id: str) -> IssueRecord | None:
        """Return an issue by identifier."""
        try:
            row = self.session.get(Issue, issue_id)
        except SQLAlchemyError as err:
            raise RepositoryError(f"Failed to load issue {issue_id}: {err}") from err
        if row is None:
            return None
        return IssueRecord.model_validate(row)

    def get_with_coordinates(self) -> list[IssueRecord]:
        """Return issues that have both a latitude and a longitude."""
        stmt = select(Issue).where(
            Issue.latitude.is_not(None),
            Issue.longitude.is_not(None),
        )
        return self._fetch(stmt)
