# tests/test_duplicates.py
"""Tests for duplicate detection."""

import logging

import pytest

from civic_pulse.core.settings import ScoringConfig
from civic_pulse.schemas.issue import IssueDraft
from civic_pulse.services.duplicates import (
    DuplicateDetectionService,
    is_draft_too_short,
    rank_candidates,
)
from civic_pulse.services.similarity import SimilarityScorer
from tests.conftest import (
    POTHOLE_DESCRIPTION,
    POTHOLE_TITLE,
    STREETLIGHT_DESCRIPTION,
    STREETLIGHT_TITLE,
    FakeIssueRepository,
    make_issue,
)

BASE_LAT = 12.9716
BASE_LNG = 77.5946
GARBAGE_TITLE = "Overflowing garbage bins at market"
GARBAGE_DESCRIPTION = "Trash has not been collected for days and smells terrible"


def _check(service: DuplicateDetectionService, **overrides):
    kwargs = {
        "title": POTHOLE_TITLE,
        "description": POTHOLE_DESCRIPTION,
        "category_id": "roads",
        "latitude": BASE_LAT,
        "longitude": BASE_LNG,
    }
    kwargs.update(overrides)
    return service.check_for_duplicates(**kwargs)


def test_identical_report_is_duplicate() -> None:
    """Same title, description, category and spot as an existing issue."""
    existing = make_issue()
    service = DuplicateDetectionService(FakeIssueRepository([existing]))

    result = _check(service)

    assert result.is_duplicate is True
    assert result.threshold == 0.7
    assert result.similar_issues[0].issue.id == existing.id
    assert result.similar_issues[0].score >= 0.95
    assert result.similar_issues[0].score == pytest.approx(1.0)


def test_unrelated_report_is_excluded() -> None:
    existing = make_issue(
        title=STREETLIGHT_TITLE,
        description=STREETLIGHT_DESCRIPTION,
        category_id="electrical",
        latitude=BASE_LAT + 1.0,
    )
    service = DuplicateDetectionService(FakeIssueRepository([existing]))

    result = _check(service, category_id=None)

    assert result.is_duplicate is False
    assert result.similar_issues == []


def test_score_at_inclusion_floor_is_excluded() -> None:
    """Same category and spot alone scores exactly 0.3, which is not above the floor."""
    existing = make_issue()
    service = DuplicateDetectionService(FakeIssueRepository([existing]))

    result = _check(service, title=GARBAGE_TITLE, description=GARBAGE_DESCRIPTION)

    assert result.similar_issues == []
    assert result.is_duplicate is False


def test_similar_but_below_threshold_is_listed_not_duplicate() -> None:
    existing = make_issue(latitude=BASE_LAT + 1.0)
    service = DuplicateDetectionService(FakeIssueRepository([existing]))

    result = _check(service, description=GARBAGE_DESCRIPTION)

    # title 0.4 + category 0.15
    assert result.similar_issues[0].score == pytest.approx(0.55)
    assert result.is_duplicate is False


def test_results_sorted_descending() -> None:
    near_match = make_issue(latitude=BASE_LAT + 1.0)
    exact = make_issue()
    partial = make_issue(description=GARBAGE_DESCRIPTION, latitude=BASE_LAT + 1.0)
    service = DuplicateDetectionService(FakeIssueRepository([partial, near_match, exact]))

    result = _check(service)

    ids = [item.issue.id for item in result.similar_issues]
    assert ids == [exact.id, near_match.id, partial.id]
    scores = [item.score for item in result.similar_issues]
    assert scores == sorted(scores, reverse=True)


def test_ties_keep_retrieval_order() -> None:
    first = make_issue()
    second = make_issue()
    third = make_issue()
    service = DuplicateDetectionService(FakeIssueRepository([first, second, third]))

    result = _check(service)

    assert [item.issue.id for item in result.similar_issues] == [first.id, second.id, third.id]


def test_at_most_five_similar_issues() -> None:
    issues = [make_issue() for _ in range(7)]
    service = DuplicateDetectionService(FakeIssueRepository(issues))

    result = _check(service)

    assert len(result.similar_issues) == 5
    assert [item.issue.id for item in result.similar_issues] == [i.id for i in issues[:5]]


def test_whole_corpus_is_searched_regardless_of_category() -> None:
    repo = FakeIssueRepository([make_issue()])
    service = DuplicateDetectionService(repo)

    _check(service)

    assert repo.calls == [("get_all", None)]


def test_matching_report_in_other_category_is_duplicate() -> None:
    """Title, description and spot match; only the category differs."""
    existing = make_issue(category_id="drainage")
    service = DuplicateDetectionService(FakeIssueRepository([existing]))

    result = _check(service, category_id="roads")

    assert result.is_duplicate is True
    assert result.similar_issues[0].issue.id == existing.id
    # title 0.4 + description 0.3 + location 0.15
    assert result.similar_issues[0].score == pytest.approx(0.85)
    assert "Same category" not in result.similar_issues[0].reasons


def test_best_match_wins_across_categories() -> None:
    same_category = make_issue()
    other_category = make_issue(category_id="drainage")
    service = DuplicateDetectionService(FakeIssueRepository([other_category, same_category]))

    result = _check(service)

    assert [item.issue.id for item in result.similar_issues] == [
        same_category.id,
        other_category.id,
    ]


def test_repository_failure_fails_open(failing_repository, caplog) -> None:
    service = DuplicateDetectionService(failing_repository)

    with caplog.at_level(logging.WARNING, logger="civic_pulse.services.duplicates"):
        result = _check(service)

    assert result.is_duplicate is False
    assert result.similar_issues == []
    assert result.threshold == 0.7
    assert "Duplicate check failed" in caplog.text


@pytest.mark.parametrize(
    ("title", "description"),
    [
        ("", ""),
        ("Pothole", POTHOLE_DESCRIPTION),
        (POTHOLE_TITLE, "Big hole"),
        ("          ", "                         "),
    ],
)
def test_short_drafts_skip_the_repository(title: str, description: str) -> None:
    repo = FakeIssueRepository([make_issue()])
    service = DuplicateDetectionService(repo)

    result = service.check_for_duplicates(title, description)

    assert result.is_duplicate is False
    assert result.similar_issues == []
    assert repo.calls == []


def test_is_draft_too_short(scoring_config: ScoringConfig) -> None:
    long_enough = IssueDraft(title=POTHOLE_TITLE, description=POTHOLE_DESCRIPTION)
    too_short = IssueDraft(title="Pothole", description=POTHOLE_DESCRIPTION)

    assert is_draft_too_short(long_enough, scoring_config) is False
    assert is_draft_too_short(too_short, scoring_config) is True


def test_custom_threshold_from_config() -> None:
    config = ScoringConfig(duplicate_threshold=0.5)
    existing = make_issue(latitude=BASE_LAT + 1.0)
    service = DuplicateDetectionService(FakeIssueRepository([existing]), config)

    result = _check(service, description=GARBAGE_DESCRIPTION)

    assert result.threshold == 0.5
    assert result.is_duplicate is True


def test_empty_corpus() -> None:
    service = DuplicateDetectionService(FakeIssueRepository())

    result = _check(service)

    assert result.is_duplicate is False
    assert result.similar_issues == []


def test_rank_candidates_without_repository() -> None:
    draft = IssueDraft(
        title=POTHOLE_TITLE,
        description=POTHOLE_DESCRIPTION,
        latitude=BASE_LAT,
        longitude=BASE_LNG,
    )
    unrelated = make_issue(
        title=STREETLIGHT_TITLE,
        description=STREETLIGHT_DESCRIPTION,
        latitude=BASE_LAT + 1.0,
    )
    match = make_issue()

    result = rank_candidates(draft, [unrelated, match], SimilarityScorer())

    assert result.is_duplicate is True
    assert [item.issue.id for item in result.similar_issues] == [match.id]
