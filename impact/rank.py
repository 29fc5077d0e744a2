"""Impact score, ordering and repository-wide rollups."""

from __future__ import annotations

from impact.config import COMMIT_WEIGHT, LINES_CAP, LINES_DIVISOR, MERGED_REQUEST_WEIGHT
from impact.models import AggregatedContributor, AnalysisReport


def impact_score(c: AggregatedContributor) -> float:
    """
    commits * 2 + merged PRs * 5 + min(additions + deletions, 100k) / 100

    The lines term is capped so one vendored or generated change cannot
    dominate the ranking.
    """
    lines_impact = min(c.total_additions + c.total_deletions, LINES_CAP) / LINES_DIVISOR
    return (
        c.total_commits * COMMIT_WEIGHT
        + c.total_merged_requests * MERGED_REQUEST_WEIGHT
        + lines_impact
    )


def rank_contributors(contributors: list[AggregatedContributor]) -> list[AggregatedContributor]:
    """Stamp impact_score and sort descending; equal scores keep input order."""
    for c in contributors:
        c.impact_score = impact_score(c)
    return sorted(contributors, key=lambda c: c.impact_score, reverse=True)


def build_report(
    owner: str,
    repo: str,
    contributors: list[AggregatedContributor],
    merged_request_count: int,
    activity_degraded: bool = False,
) -> AnalysisReport:
    ranked = rank_contributors(contributors)
    return AnalysisReport(
        owner=owner,
        repo=repo,
        contributors=ranked,
        total_commits=sum(c.total_commits for c in ranked),
        total_lines_changed=sum(c.lines_changed for c in ranked),
        merged_request_count=merged_request_count,
        activity_degraded=activity_degraded,
    )
