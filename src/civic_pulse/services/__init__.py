"""Business logic services for the Civic Pulse application."""

from .duplicates import DuplicateDetectionService, rank_candidates
from .eligibility import VotingEligibilityService
from .nearby import find_nearby_issues
from .similarity import SimilarityScorer

__all__ = [
    "DuplicateDetectionService",
    "SimilarityScorer",
    "VotingEligibilityService",
    "find_nearby_issues",
    "rank_candidates",
]
