# tests/conftest.py
from __future__ import annotations

from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from civic_pulse.core.settings import ScoringConfig
from civic_pulse.db.session import Base
from civic_pulse.db.session import get_db as app_get_session
from civic_pulse.main import app as fastapi_app
from civic_pulse.models import Issue
from civic_pulse.repositories.base import RepositoryError
from civic_pulse.schemas.issue import IssueRecord

TEST_DB_URL = "sqlite://"

_ISSUE_COUNTER = count(1)
_BASE_TIME = datetime(2024, 1, 1, tzinfo=UTC)

POTHOLE_TITLE = "Pothole on Main Street near Oak Ave"
POTHOLE_DESCRIPTION = "Deep pothole in the right lane causing cars to swerve into traffic"
STREETLIGHT_TITLE = "Broken streetlight outside library"
STREETLIGHT_DESCRIPTION = "Lamp has been flickering for weeks and is now completely dark"


class FakeIssueRepository:
    """In-memory issue repository preserving insertion order."""

    def __init__(self, issues: list[IssueRecord] | None = None) -> None:
        self.issues = list(issues or [])
        self.calls: list[tuple[str, Any]] = []

    def get_all(self, category_id: str | None = None) -> list[IssueRecord]:
        self.calls.append(("get_all", category_id))
        if category_id is None:
            return list(self.issues)
        return [issue for issue in self.issues if issue.category_id == category_id]

    def get_by_author(self, author_id: str) -> list[IssueRecord]:
        self.calls.append(("get_by_author", author_id))
        return [issue for issue in self.issues if issue.author_id == author_id]

    def get_by_id(self, issue_id: str) -> IssueRecord | None:
        self.calls.append(("get_by_id", issue_id))
        return next((issue for issue in self.issues if issue.id == issue_id), None)

    def get_with_coordinates(self) -> list[IssueRecord]:
        self.calls.append(("get_with_coordinates", None))
        return [
            issue for issue in self.issues
            if issue.latitude is not None and issue.longitude is not None
        ]


class FailingIssueRepository:
    """Repository whose every read fails as if the database were down."""

    def get_all(self, category_id: str | None = None) -> list[IssueRecord]:
        raise RepositoryError("database unavailable")

    def get_by_author(self, author_id: str) -> list[IssueRecord]:
        raise RepositoryError("database unavailable")

    def get_by_id(self, issue_id: str) -> IssueRecord | None:
        raise RepositoryError("database unavailable")

    def get_with_coordinates(self) -> list[IssueRecord]:
        raise RepositoryError("database unavailable")


def make_issue(**overrides: Any) -> IssueRecord:
    """Build an IssueRecord with sensible defaults."""
    n = next(_ISSUE_COUNTER)
    data: dict[str, Any] = {
        "id": f"issue-{n}",
        "title": POTHOLE_TITLE,
        "description": POTHOLE_DESCRIPTION,
        "category_id": "roads",
        "latitude": 12.9716,
        "longitude": 77.5946,
        "author_id": "author-1",
        "created_at": _BASE_TIME + timedelta(minutes=n),
    }
    data.update(overrides)
    return IssueRecord(**data)


@pytest.fixture()
def issue_factory() -> Callable[..., IssueRecord]:
    """Return the IssueRecord factory."""
    return make_issue


@pytest.fixture()
def scoring_config() -> ScoringConfig:
    """Return the default scoring constants."""
    return ScoringConfig()


@pytest.fixture()
def fake_repository() -> FakeIssueRepository:
    """Return an empty in-memory repository."""
    return FakeIssueRepository()


@pytest.fixture()
def failing_repository() -> FailingIssueRepository:
    """Return a repository that always raises RepositoryError."""
    return FailingIssueRepository()


@pytest.fixture(scope="session")
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(
        bind=engine,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()

        # Ensure each test sees a clean database even if commits occurred.
        with engine.begin() as cleanup_conn:
            for table in reversed(Base.metadata.sorted_tables):
                cleanup_conn.execute(table.delete())


@pytest.fixture()
def add_issue(db_session: Session) -> Callable[..., Issue]:
    """Return a helper that persists an Issue row built from make_issue defaults."""

    def _add(**overrides: Any) -> Issue:
        record = make_issue(**overrides)
        row = Issue(**record.model_dump())
        db_session.add(row)
        db_session.commit()
        return row

    return _add


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client
