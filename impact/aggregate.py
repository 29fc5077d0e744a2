"""Fold commit stats and merged PRs into one record per contributor login."""

from __future__ import annotations

from collections import defaultdict

from impact.config import SECONDS_PER_WEEK
from impact.models import AggregatedContributor, ContributorStat, MergeRequestStat


def _finalize(entry: AggregatedContributor, active_weeks: set[int]) -> None:
    entry.net_lines = entry.total_additions - entry.total_deletions
    entry.weeks_active = len(active_weeks)
    if not active_weeks:
        entry.velocity = 0.0
        entry.consistency = 0.0
        return
    span = (max(active_weeks) - min(active_weeks)) // SECONDS_PER_WEEK + 1
    entry.velocity = round(entry.total_commits / entry.weeks_active, 2)
    entry.consistency = round(min(entry.weeks_active / span, 1.0), 4)


def aggregate_contributors(
    stats: list[ContributorStat],
    merge_requests: list[MergeRequestStat],
) -> list[AggregatedContributor]:
    """
    Commit stats are folded first, then merged PRs, so a login seen in both
    keeps the stats-side avatar. PR-only logins are seeded with zero totals.
    PRs without an author are skipped. Output keeps first-seen order.
    """
    by_login: dict[str, AggregatedContributor] = {}
    active_weeks: dict[str, set[int]] = defaultdict(set)

    for stat in stats:
        entry = by_login.get(stat.login)
        if entry is None:
            entry = by_login[stat.login] = AggregatedContributor(
                login=stat.login, avatar_url=stat.avatar_url
            )
        entry.total_commits += stat.total
        for bucket in stat.weeks:
            entry.total_additions += bucket.additions
            entry.total_deletions += bucket.deletions
            if bucket.commits > 0:
                active_weeks[stat.login].add(bucket.week)

    for mr in merge_requests:
        if not mr.author:
            continue
        entry = by_login.get(mr.author)
        if entry is None:
            entry = by_login[mr.author] = AggregatedContributor(
                login=mr.author, avatar_url=mr.avatar_url
            )
        entry.total_merged_requests += 1

    for login, entry in by_login.items():
        _finalize(entry, active_weeks.get(login, set()))

    return list(by_login.values())
