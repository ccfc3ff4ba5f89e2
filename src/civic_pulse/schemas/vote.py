# src/civic_pulse/schemas/vote.py
"""Vote eligibility Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class VoteEligibilityRequest(BaseModel):
    """Schema for asking whether an actor may vote on an issue."""

    actor_id: str = Field(..., min_length=1, description="Identifier of the would-be voter")
    issue_id: str = Field(..., min_length=1)
    latitude: float | None = Field(None, ge=-90.0, le=90.0, description="Actor latitude")
    longitude: float | None = Field(None, ge=-180.0, le=180.0, description="Actor longitude")


class VotingDecision(BaseModel):
    """Outcome of the voting eligibility ladder."""

    can_vote: bool
    reason: str

    model_config = ConfigDict(frozen=True)
