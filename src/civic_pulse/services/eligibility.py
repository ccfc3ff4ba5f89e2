"""Area-restricted voting eligibility.

An actor may vote on an issue when they reported it, when they reported
something similar, or when they are close enough to it. The rules are an
ordered ladder evaluated top to bottom; the first rule that reaches a decision
wins. When location data is missing the ladder denies the vote.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from civic_pulse.core.geo import geo_distance_km, has_coordinates
from civic_pulse.core.settings import ScoringConfig
from civic_pulse.repositories.base import IssueRepository, RepositoryError
from civic_pulse.schemas.issue import IssueDraft, IssueRecord
from civic_pulse.schemas.vote import VotingDecision
from civic_pulse.services.similarity import SimilarityScorer
from civic_pulse.utils.formatting import format_kilometres, format_metres

# Configure logger for this module
logger = logging.getLogger(__name__)

REASON_SELF_AUTHORED = "self-authored"
REASON_SIMILAR_REPORT = "similar to own report"
REASON_LOCATION_UNAVAILABLE = "location unavailable"


@dataclass(frozen=True)
class VotingContext:
    """Inputs available to every rule in the ladder."""

    actor_id: str
    issue: IssueRecord
    own_issues: Sequence[IssueRecord]
    actor_latitude: float | None = None
    actor_longitude: float | None = None


EligibilityRule = Callable[["VotingEligibilityService", VotingContext], VotingDecision | None]


def _self_authored(service: VotingEligibilityService, ctx: VotingContext) -> VotingDecision | None:
    if ctx.issue.author_id == ctx.actor_id:
        return VotingDecision(can_vote=True, reason=REASON_SELF_AUTHORED)
    return None


def _similar_own_report(
    service: VotingEligibilityService,
    ctx: VotingContext,
) -> VotingDecision | None:
    threshold = service.config.voting_similarity_threshold
    for own in ctx.own_issues:
        result = service.scorer.score(IssueDraft.from_issue(own), ctx.issue)
        if result.score > threshold:
            return VotingDecision(can_vote=True, reason=REASON_SIMILAR_REPORT)
    return None


def _within_voting_radius(
    service: VotingEligibilityService,
    ctx: VotingContext,
) -> VotingDecision | None:
    issue = ctx.issue
    if not (
        has_coordinates(ctx.actor_latitude, ctx.actor_longitude)
        and has_coordinates(issue.latitude, issue.longitude)
    ):
        return None

    distance = geo_distance_km(
        ctx.actor_latitude,  # type: ignore[arg-type]
        ctx.actor_longitude,  # type: ignore[arg-type]
        issue.latitude,  # type: ignore[arg-type]
        issue.longitude,  # type: ignore[arg-type]
    )
    if distance <= service.config.voting_radius_km:
        return VotingDecision(
            can_vote=True,
            reason=f"issue is in your area (~{format_metres(distance)} away)",
        )
    return VotingDecision(
        can_vote=False,
        reason=f"issue is too far from your location (~{format_kilometres(distance)} away)",
    )


def _location_unavailable(
    service: VotingEligibilityService,
    ctx: VotingContext,
) -> VotingDecision | None:
    return VotingDecision(can_vote=False, reason=REASON_LOCATION_UNAVAILABLE)


DEFAULT_RULES: tuple[EligibilityRule, ...] = (
    _self_authored,
    _similar_own_report,
    _within_voting_radius,
    _location_unavailable,
)


class VotingEligibilityService:
    """Decide whether an actor may vote on an issue."""

    def __init__(
        self,
        repository: IssueRepository | None = None,
        config: ScoringConfig | None = None,
        scorer: SimilarityScorer | None = None,
        rules: Sequence[EligibilityRule] = DEFAULT_RULES,
    ) -> None:
        self.repository = repository
        self.config = config or (scorer.config if scorer else ScoringConfig())
        self.scorer = scorer or SimilarityScorer(self.config)
        self.rules = tuple(rules)

    def evaluate(
        self,
        actor_id: str,
        issue: IssueRecord,
        own_issues: Sequence[IssueRecord],
        actor_latitude: float | None = None,
        actor_longitude: float | None = None,
    ) -> VotingDecision:
        """Run the rule ladder against already-loaded data.

        Args:
            actor_id: Identifier of the would-be voter.
            issue: Issue being voted on.
            own_issues: Issues previously reported by the actor.
            actor_latitude: Actor latitude, if known.
            actor_longitude: Actor longitude, if known.

        Returns:
            The decision of the first rule that produced one.
        """
        ctx = VotingContext(
            actor_id=actor_id,
            issue=issue,
            own_issues=own_issues,
            actor_latitude=actor_latitude,
            actor_longitude=actor_longitude,
        )
        for rule in self.rules:
            decision = rule(self, ctx)
            if decision is not None:
                logger.debug(
                    "Vote eligibility for issue %s decided by %s: %s",
                    issue.id,
                    getattr(rule, "__name__", repr(rule)),
                    decision.reason,
                )
                return decision
        return VotingDecision(can_vote=False, reason=REASON_LOCATION_UNAVAILABLE)

    def load_own_issues(self, actor_id: str) -> list[IssueRecord]:
        """Return the actor's own reports, or an empty list if they cannot be read."""
        if self.repository is None:
            return []
        try:
            return self.repository.get_by_author(actor_id)
        except RepositoryError as err:
            logger.warning("Could not load issues for actor %s, assuming none: %s", actor_id, err)
            return []

    def can_vote(
        self,
        actor_id: str,
        issue: IssueRecord,
        actor_latitude: float | None = None,
        actor_longitude: float | None = None,
    ) -> VotingDecision:
        """Load the actor's own reports and run the rule ladder."""
        if issue.author_id == actor_id:
            # Skip the lookup; the first rule decides regardless.
            own_issues: list[IssueRecord] = []
        else:
            own_issues = self.load_own_issues(actor_id)
        return self.evaluate(actor_id, issue, own_issues, actor_latitude, actor_longitude)

    def get_voting_rules_explanation(self) -> list[str]:
        """Return the voting rules as help text, in evaluation order."""
        radius = f"{self.config.voting_radius_km:g}"
        return [
            "You can vote on issues you reported",
            "You can vote on issues similar to ones you've reported",
            f"You can vote on issues within {radius}km of your location",
            "Location access is required for area-based voting",
        ]
