# src/civic_pulse/schemas/issue.py
"""Issue-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from civic_pulse.utils.time import utcnow


class IssueRecord(BaseModel):
    """Read-only view of a reported issue as consumed by the scoring core."""

    id: str
    title: str
    description: str
    category_id: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    author_id: str
    created_at: datetime = Field(default_factory=utcnow)

    model_config = ConfigDict(from_attributes=True, frozen=True)


class IssueDraft(BaseModel):
    """A newly drafted report that has not been submitted yet."""

    title: str = Field(..., max_length=500, description="Draft title")
    description: str = Field(..., max_length=5000, description="Draft description")
    category_id: str | None = Field(None, description="Selected category identifier")
    latitude: float | None = Field(None, ge=-90.0, le=90.0)
    longitude: float | None = Field(None, ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_issue(cls, issue: IssueRecord) -> "IssueDraft":
        """Treat an existing issue as a draft for comparison against another."""
        return cls.model_construct(
            title=issue.title,
            description=issue.description,
            category_id=issue.category_id,
            latitude=issue.latitude,
            longitude=issue.longitude,
        )


class NearbyIssue(BaseModel):
    """Issue paired with its distance from a query point."""

    issue: IssueRecord
    distance_km: float = Field(..., ge=0.0)
