"""Duplicate detection for newly drafted issue reports.

Duplicate detection is advisory. A failure to load the corpus never blocks
submission: the service logs it and reports that no duplicates were found.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from civic_pulse.core.settings import ScoringConfig
from civic_pulse.repositories.base import IssueRepository, RepositoryError
from civic_pulse.schemas.issue import IssueDraft, IssueRecord
from civic_pulse.schemas.similarity import DuplicationCheckResult, SimilarityResult
from civic_pulse.services.similarity import SimilarityScorer

# Configure logger for this module
logger = logging.getLogger(__name__)


def is_draft_too_short(draft: IssueDraft, config: ScoringConfig) -> bool:
    """Return True when a draft is too short to produce a meaningful signal."""
    return (
        len(draft.title.strip()) < config.min_title_length
        or len(draft.description.strip()) < config.min_description_length
    )


def rank_candidates(
    draft: IssueDraft,
    candidates: Iterable[IssueRecord],
    scorer: SimilarityScorer,
) -> DuplicationCheckResult:
    """Score, filter and rank an already-materialized candidate list.

    Results at or below the inclusion floor are dropped. The rest are sorted by
    descending score; ties keep retrieval order.
    """
    config = scorer.config
    results: list[SimilarityResult] = []
    for issue in candidates:
        result = scorer.score(draft, issue)
        if result.score > config.inclusion_floor:
            results.append(result)

    # sorted() is stable, including with reverse=True.
    results = sorted(results, key=lambda r: r.score, reverse=True)
    is_duplicate = bool(results) and results[0].score >= config.duplicate_threshold

    return DuplicationCheckResult(
        is_duplicate=is_duplicate,
        similar_issues=results[: config.max_similar_issues],
        threshold=config.duplicate_threshold,
    )


class DuplicateDetectionService:
    """Check drafts against the stored corpus for likely re-reports."""

    def __init__(
        self,
        repository: IssueRepository,
        config: ScoringConfig | None = None,
        scorer: SimilarityScorer | None = None,
    ) -> None:
        self.repository = repository
        self.config = config or (scorer.config if scorer else ScoringConfig())
        self.scorer = scorer or SimilarityScorer(self.config)

    def empty_result(self) -> DuplicationCheckResult:
        """Return the non-duplicate verdict with no similar issues."""
        return DuplicationCheckResult(
            is_duplicate=False,
            similar_issues=[],
            threshold=self.config.duplicate_threshold,
        )

    def check_for_duplicates(
        self,
        title: str,
        description: str,
        category_id: str | None = None,
        latitude: float | None = None,
        longitude: float | None = None,
    ) -> DuplicationCheckResult:
        """Return the duplication verdict for a draft.

        Args:
            title: Draft title.
            description: Draft description.
            category_id: Optional category, scored as one signal.
            latitude: Optional draft latitude.
            longitude: Optional draft longitude.

        Returns:
            DuplicationCheckResult. Never raises for repository failures.
        """
        draft = IssueDraft.model_construct(
            title=title,
            description=description,
            category_id=category_id,
            latitude=latitude,
            longitude=longitude,
        )
        return self.check_draft(draft)

    def check_draft(self, draft: IssueDraft) -> DuplicationCheckResult:
        """Return the duplication verdict for an ``IssueDraft``."""
        if is_draft_too_short(draft, self.config):
            logger.debug("Draft below minimum length, skipping duplicate check")
            return self.empty_result()

        try:
            # Every category is a candidate; category only contributes to the score.
            candidates = self.repository.get_all()
        except RepositoryError as err:
            logger.warning("Duplicate check failed, returning empty result: %s", err)
            return self.empty_result()

        result = rank_candidates(draft, candidates, self.scorer)
        logger.debug(
            "Scored %d candidates, returning %d, duplicate=%s",
            len(candidates),
            len(result.similar_issues),
            result.is_duplicate,
        )
        return result
