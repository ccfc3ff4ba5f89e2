# src/civic_pulse/api/v1/endpoints/votes.py
"""Vote eligibility endpoints for the Civic Pulse API."""

import logging

from fastapi import APIRouter, HTTPException, status

from civic_pulse.repositories.base import RepositoryError
from civic_pulse.schemas.vote import VoteEligibilityRequest, VotingDecision

from ..dependencies import EligibilityServiceDep, IssueRepositoryDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/votes", tags=["votes"])

REASON_LOOKUP_FAILED = "unable to check voting permissions"


@router.post("/eligibility", response_model=VotingDecision)
async def check_eligibility(
    request: VoteEligibilityRequest,
    repository: IssueRepositoryDep,
    service: EligibilityServiceDep,
) -> VotingDecision:
    """Decide whether the actor may vote on the requested issue."""
    try:
        issue = repository.get_by_id(request.issue_id)
    except RepositoryError as err:
        logger.warning("Could not load issue %s for eligibility: %s", request.issue_id, err)
        return VotingDecision(can_vote=False, reason=REASON_LOOKUP_FAILED)

    if issue is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Issue not found")

    return service.can_vote(
        request.actor_id,
        issue,
        actor_latitude=request.latitude,
        actor_longitude=request.longitude,
    )


@router.get("/rules", response_model=list[str])
async def get_voting_rules(service: EligibilityServiceDep) -> list[str]:
    """Return the voting rules as help text."""
    return service.get_voting_rules_explanation()
