# src/civic_pulse/api/v1/endpoints/issues.py
"""Issue lookup endpoints: duplicate detection and proximity search."""

import logging
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from civic_pulse.core.settings import settings
from civic_pulse.repositories.base import RepositoryError
from civic_pulse.schemas.issue import IssueDraft, NearbyIssue
from civic_pulse.schemas.similarity import DuplicationCheckResult
from civic_pulse.services.nearby import find_nearby_issues

from ..dependencies import DuplicateServiceDep, IssueRepositoryDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/issues", tags=["issues"])


@router.post("/duplicates", response_model=DuplicationCheckResult)
async def check_duplicates(
    draft: IssueDraft,
    service: DuplicateServiceDep,
) -> DuplicationCheckResult:
    """Check whether a drafted report duplicates an existing issue."""
    return service.check_draft(draft)


@router.get("/nearby", response_model=list[NearbyIssue])
async def get_nearby_issues(
    repository: IssueRepositoryDep,
    latitude: Annotated[float, Query(ge=-90.0, le=90.0)],
    longitude: Annotated[float, Query(ge=-180.0, le=180.0)],
    radius_km: Annotated[float | None, Query(gt=0.0, le=100.0)] = None,
) -> list[NearbyIssue]:
    """List issues within a radius of a point, closest first."""
    radius = radius_km if radius_km is not None else settings.nearby_default_radius_km
    try:
        issues = repository.get_with_coordinates()
    except RepositoryError as err:
        logger.error("Nearby issue lookup failed: %s", err)
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Issue data is temporarily unavailable",
        ) from err
    return find_nearby_issues(latitude, longitude, issues, radius)
