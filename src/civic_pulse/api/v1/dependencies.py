"""Shared API dependencies for the scoring services."""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.orm import Session

from civic_pulse.core.settings import ScoringConfig, settings
from civic_pulse.db.session import get_db
from civic_pulse.repositories.base import IssueRepository
from civic_pulse.repositories.issue_repo import SqlIssueRepository
from civic_pulse.services.duplicates import DuplicateDetectionService
from civic_pulse.services.eligibility import VotingEligibilityService

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_scoring_config() -> ScoringConfig:
    """Return the scoring constants for the current settings."""
    return settings.scoring


ScoringConfigDep = Annotated[ScoringConfig, Depends(get_scoring_config)]


def get_issue_repository(db: SessionDep) -> IssueRepository:
    """Return a read-only issue repository bound to the request session."""
    return SqlIssueRepository(db, limit=settings.candidate_limit)


IssueRepositoryDep = Annotated[IssueRepository, Depends(get_issue_repository)]


def get_duplicate_service(
    repository: IssueRepositoryDep,
    config: ScoringConfigDep,
) -> DuplicateDetectionService:
    """Return a duplicate detection service for the request."""
    return DuplicateDetectionService(repository, config)


def get_eligibility_service(
    repository: IssueRepositoryDep,
    config: ScoringConfigDep,
) -> VotingEligibilityService:
    """Return a voting eligibility service for the request."""
    return VotingEligibilityService(repository, config)


DuplicateServiceDep = Annotated[DuplicateDetectionService, Depends(get_duplicate_service)]
EligibilityServiceDep = Annotated[VotingEligibilityService, Depends(get_eligibility_service)]
