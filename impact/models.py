"""Data types for contributor statistics, merged requests and the report."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field
from typing import Optional

log = logging.getLogger(__name__)


@dataclass
class WeeklyBucket:
    week: int           # unix timestamp of week start
    additions: int = 0
    deletions: int = 0
    commits: int = 0

    @classmethod
    def from_api(cls, payload: dict) -> "WeeklyBucket":
        return cls(
            week=int(payload.get("w") or 0),
            additions=int(payload.get("a") or 0),
            deletions=int(payload.get("d") or 0),
            commits=int(payload.get("c") or 0),
        )


@dataclass
class ContributorStat:
    """One entry of /stats/contributors: full-history totals for a login."""

    login: str
    avatar_url: str = ""
    total: int = 0
    weeks: list[WeeklyBucket] = field(default_factory=list)

    @classmethod
    def from_api(cls, payload: dict) -> Optional["ContributorStat"]:
        author = payload.get("author")
        login = author.get("login") if isinstance(author, dict) else None
        if not login:
            return None
        return cls(
            login=login,
            avatar_url=author.get("avatar_url", ""),
            total=int(payload.get("total") or 0),
            weeks=[
                WeeklyBucket.from_api(w) for w in payload.get("weeks") or [] if isinstance(w, dict)
            ],
        )


@dataclass
class MergeRequestStat:
    author: Optional[str]
    avatar_url: str = ""
    number: int = 0
    title: str = ""
    merged_at: Optional[str] = None

    @classmethod
    def from_api(cls, payload: dict) -> "MergeRequestStat":
        user = payload.get("user") or {}
        return cls(
            author=user.get("login") or None,
            avatar_url=user.get("avatar_url", ""),
            number=int(payload.get("number") or 0),
            title=payload.get("title") or "",
            merged_at=payload.get("merged_at"),
        )


@dataclass
class AggregatedContributor:
    login: str
    avatar_url: str = ""
    total_commits: int = 0
    total_additions: int = 0
    total_deletions: int = 0
    net_lines: int = 0
    total_merged_requests: int = 0
    weeks_active: int = 0
    velocity: float = 0.0       # commits per active week
    consistency: float = 0.0    # active weeks / weeks between first and last active
    impact_score: float = 0.0

    @property
    def lines_changed(self) -> int:
        return self.total_additions + self.total_deletions


@dataclass
class AnalysisReport:
    owner: str
    repo: str
    contributors: list[AggregatedContributor]
    total_commits: int
    total_lines_changed: int
    merged_request_count: int
    activity_degraded: bool = False

    def to_dict(self) -> dict:
        return asdict(self)


def parse_contributor_stats(raw: list[dict]) -> list[ContributorStat]:
    """Parse the stats array, dropping entries without an author or that are not objects."""
    stats: list[ContributorStat] = []
    skipped = 0
    for entry in raw:
        stat = ContributorStat.from_api(entry) if isinstance(entry, dict) else None
        if stat is None:
            skipped += 1
            continue
        stats.append(stat)
    if skipped:
        log.warning(f"Skipped {skipped} contributor stat(s) with no author login or a malformed entry")
    return stats
