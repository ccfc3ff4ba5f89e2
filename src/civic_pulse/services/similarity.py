"""Composite similarity scoring between a draft and an existing issue."""

from __future__ import annotations

from civic_pulse.core.geo import geo_distance_km, has_coordinates
from civic_pulse.core.settings import ScoringConfig
from civic_pulse.core.text import text_similarity
from civic_pulse.schemas.issue import IssueDraft, IssueRecord
from civic_pulse.schemas.similarity import SimilarityResult
from civic_pulse.utils.formatting import format_metres, format_percent


class SimilarityScorer:
    """Combine title, description, category and location signals into one score.

    Each signal is a raw value in [0, 1] multiplied by its configured weight.
    The weights sum to 1.0, so absent signals simply contribute nothing and
    the total needs no renormalization.
    """

    def __init__(self, config: ScoringConfig | None = None) -> None:
        self.config = config or ScoringConfig()

    def score(self, candidate: IssueDraft, existing: IssueRecord) -> SimilarityResult:
        """Score ``candidate`` against ``existing``.

        Args:
            candidate: Draft (or an issue viewed as a draft) being compared.
            existing: Stored issue it is compared against.

        Returns:
            SimilarityResult whose reasons list the signals that crossed their
            explanatory sub-thresholds, in title/description/category/location order.
        """
        cfg = self.config
        reasons: list[str] = []

        title_similarity = text_similarity(candidate.title, existing.title)
        if title_similarity > cfg.title_reason_threshold:
            reasons.append(f"Similar title ({format_percent(title_similarity)} match)")

        description_similarity = text_similarity(candidate.description, existing.description)
        if description_similarity > cfg.description_reason_threshold:
            reasons.append(
                f"Similar description ({format_percent(description_similarity)} match)"
            )

        category_similarity = 0.0
        if candidate.category_id is not None and candidate.category_id == existing.category_id:
            category_similarity = 1.0
            reasons.append("Same category")

        location_similarity = 0.0
        if has_coordinates(candidate.latitude, candidate.longitude) and has_coordinates(
            existing.latitude, existing.longitude
        ):
            distance = geo_distance_km(
                candidate.latitude,  # type: ignore[arg-type]
                candidate.longitude,  # type: ignore[arg-type]
                existing.latitude,  # type: ignore[arg-type]
                existing.longitude,  # type: ignore[arg-type]
            )
            if distance <= cfg.dedupe_radius_km:
                # Linear decay from 1 at the same spot to 0 at the radius.
                location_similarity = 1 - distance / cfg.dedupe_radius_km
                reasons.append(f"Same location ({format_metres(distance)} away)")

        total = (
            title_similarity * cfg.title_weight
            + description_similarity * cfg.description_weight
            + category_similarity * cfg.category_weight
            + location_similarity * cfg.location_weight
        )

        return SimilarityResult(
            issue=existing,
            score=min(1.0, max(0.0, total)),
            reasons=reasons,
        )
