# src/civic_pulse/schemas/__init__.py
"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .issue import IssueDraft, IssueRecord, NearbyIssue
from .similarity import DuplicationCheckResult, SimilarityResult
from .vote import VoteEligibilityRequest, VotingDecision

__all__ = [
    "IssueDraft", "IssueRecord", "NearbyIssue",
    "DuplicationCheckResult", "SimilarityResult",
    "VoteEligibilityRequest", "VotingDecision",
]
