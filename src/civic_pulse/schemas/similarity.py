# src/civic_pulse/schemas/similarity.py
"""Schemas describing duplicate-detection results."""

from pydantic import BaseModel, ConfigDict, Field

from .issue import IssueRecord


class SimilarityResult(BaseModel):
    """Weighted similarity of a draft against one existing issue."""

    issue: IssueRecord
    score: float = Field(..., ge=0.0, le=1.0)
    reasons: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class DuplicationCheckResult(BaseModel):
    """Verdict for a draft plus the best-matching existing issues."""

    is_duplicate: bool
    similar_issues: list[SimilarityResult] = Field(default_factory=list)
    threshold: float
