"""Merged pull request collector (single page, soft-fail)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from impact.config import PR_PAGE_SIZE
from impact.errors import AnalysisError
from impact.github import GitHubClient
from impact.models import MergeRequestStat

log = logging.getLogger(__name__)


@dataclass
class ActivityResult:
    """
    Merged requests plus whether the fetch degraded.

    degraded=False with an empty list means the repo genuinely has no recent
    merged PRs; degraded=True means the fetch failed and the list is empty.
    """

    requests: list[MergeRequestStat] = field(default_factory=list)
    degraded: bool = False
    reason: Optional[str] = None

    @classmethod
    def failed(cls, reason: str) -> "ActivityResult":
        log.warning(f"Merged PR fetch degraded, continuing without PR data: {reason}")
        return cls(requests=[], degraded=True, reason=reason)


def collect_merged_requests(client: GitHubClient, owner: str, repo: str) -> ActivityResult:
    params = {
        "state":     "closed",
        "sort":      "updated",
        "direction": "desc",
        "per_page":  PR_PAGE_SIZE,
    }
    try:
        response = client.get(f"/repos/{owner}/{repo}/pulls", params=params)
    except AnalysisError as exc:
        return ActivityResult.failed(str(exc))

    if response.status != 200:
        return ActivityResult.failed(f"HTTP {response.status} from {response.url}")
    if not isinstance(response.body, list):
        return ActivityResult.failed(f"unexpected body type {type(response.body).__name__}")

    merged = [
        MergeRequestStat.from_api(pr)
        for pr in response.body
        if isinstance(pr, dict) and pr.get("merged_at") is not None
    ]
    log.info(f"Fetched {len(response.body)} closed PRs, {len(merged)} merged")
    return ActivityResult(requests=merged)
