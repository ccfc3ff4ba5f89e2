# src/civic_pulse/models/issue.py
"""SQLAlchemy model for citizen issue reports."""

import uuid
from datetime import datetime

from sqlalchemy import DateTime, Float, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from civic_pulse.db.session import Base
from civic_pulse.utils.time import utcnow


class Issue(Base):
    """An issue reported by a citizen.

    Rows are owned by the reporting workflow; this application only reads them
    to detect duplicates and decide voting eligibility.
    """

    __tablename__ = "issue"
    __table_args__ = (
        Index("ix_issue_author_id", "author_id"),
        Index("ix_issue_category_id", "category_id"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    title: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    category_id: Mapped[str | None] = mapped_column(String(64), nullable=True)

    # Both halves are null together when the reporter shared no location.
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)

    author_id: Mapped[str] = mapped_column(String(64), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
