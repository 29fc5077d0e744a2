"""Repo URL parsing and report → DataFrame helpers."""

from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

import pandas as pd

from impact.config import COMMIT_WEIGHT, LINES_CAP, LINES_DIVISOR, MERGED_REQUEST_WEIGHT
from impact.models import AnalysisReport

CONTRIBUTOR_COLUMNS = [
    "contributor", "avatar_url", "impact", "commits", "prs",
    "additions", "deletions", "net_lines", "velocity", "consistency",
]


def parse_repo_url(url: str) -> Optional[tuple[str, str]]:
    """
    'https://github.com/owner/repo(.git)(/anything)' → ('owner', 'repo').
    Returns None when the URL has no scheme/host or fewer than two path parts.
    """
    url = (url or "").strip()
    if url.endswith(".git"):
        url = url[:-4]
    parsed = urlparse(url)
    if not parsed.scheme or not parsed.netloc:
        return None
    parts = [p for p in parsed.path.split("/") if p]
    if len(parts) < 2:
        return None
    return parts[0], parts[1]


def build_contributors_df(report: AnalysisReport) -> pd.DataFrame:
    rows = [
        {
            "contributor": c.login,
            "avatar_url":  c.avatar_url,
            "impact":      round(c.impact_score, 2),
            "commits":     c.total_commits,
            "prs":         c.total_merged_requests,
            "additions":   c.total_additions,
            "deletions":   c.total_deletions,
            "net_lines":   c.net_lines,
            "velocity":    c.velocity,
            "consistency": c.consistency,
        }
        for c in report.contributors
    ]
    # Report order is already the ranking; keep it rather than re-sorting
    return pd.DataFrame(rows, columns=CONTRIBUTOR_COLUMNS)


def score_breakdown_df(contrib_df: pd.DataFrame, top_n: int = 10) -> pd.DataFrame:
    """Split each impact score into its commit, PR and capped-lines terms."""
    df = contrib_df.head(top_n).copy()
    df["commit_pts"] = df["commits"] * COMMIT_WEIGHT
    df["pr_pts"]     = df["prs"] * MERGED_REQUEST_WEIGHT
    df["lines_pts"]  = (df["additions"] + df["deletions"]).clip(upper=LINES_CAP) / LINES_DIVISOR
    return df
