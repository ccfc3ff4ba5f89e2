"""Proximity queries over the issue corpus."""

from __future__ import annotations

from collections.abc import Iterable

from civic_pulse.core.geo import geo_distance_km, has_coordinates
from civic_pulse.schemas.issue import IssueRecord, NearbyIssue


def find_nearby_issues(
    latitude: float,
    longitude: float,
    issues: Iterable[IssueRecord],
    radius_km: float,
) -> list[NearbyIssue]:
    """Return issues within ``radius_km`` of a point, closest first.

    Issues without coordinates are skipped. Equal distances keep input order.
    """
    nearby: list[NearbyIssue] = []
    for issue in issues:
        if not has_coordinates(issue.latitude, issue.longitude):
            continue
        distance = geo_distance_km(latitude, longitude, issue.latitude, issue.longitude)  # type: ignore[arg-type]
        if distance <= radius_km:
            nearby.append(NearbyIssue(issue=issue, distance_km=distance))
    nearby.sort(key=lambda item: item.distance_km)
    return nearby
