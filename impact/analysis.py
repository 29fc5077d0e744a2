"""Top-level analysis: poll stats, collect merged PRs, aggregate, rank."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import requests

from impact.activity import collect_merged_requests
from impact.aggregate import aggregate_contributors
from impact.config import STATS_MAX_ATTEMPTS, STATS_POLL_DELAY, ClientConfig
from impact.github import GitHubClient
from impact.models import AnalysisReport, parse_contributor_stats
from impact.poller import poll_contributor_stats
from impact.rank import build_report

log = logging.getLogger(__name__)


def analyze_repository(
    owner: str,
    repo: str,
    token: Optional[str] = None,
    *,
    config: Optional[ClientConfig] = None,
    session: Optional[requests.Session] = None,
    sleep: Callable[[float], None] = time.sleep,
    poll_delay: float = STATS_POLL_DELAY,
    max_attempts: int = STATS_MAX_ATTEMPTS,
) -> AnalysisReport:
    """
    Run one self-contained analysis of owner/repo.

    Raises an AnalysisError subclass when commit statistics cannot be
    obtained. A failed merged-PR fetch only marks the report as degraded.
    An explicit token overrides config.token.
    """
    owner, repo = (owner or "").strip(), (repo or "").strip()
    if not owner or not repo:
        raise ValueError("owner and repo must both be non-empty")

    config = config or ClientConfig()
    if token:
        config = ClientConfig(
            token=token,
            base_url=config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )
    client = GitHubClient(config, session=session)

    log.info(f"Fetching contributor stats for {owner}/{repo}…")
    raw_stats = poll_contributor_stats(
        client, owner, repo, sleep=sleep, delay=poll_delay, max_attempts=max_attempts
    )
    stats = parse_contributor_stats(raw_stats)

    log.info(f"Fetching recent merged PRs for {owner}/{repo}…")
    activity = collect_merged_requests(client, owner, repo)

    log.info("Aggregating contributors…")
    contributors = aggregate_contributors(stats, activity.requests)

    report = build_report(
        owner,
        repo,
        contributors,
        merged_request_count=len(activity.requests),
        activity_degraded=activity.degraded,
    )
    log.info(
        f"Analyzed {len(report.contributors)} contributors · "
        f"{report.total_commits} commits · {report.merged_request_count} merged PRs"
    )
    return report
