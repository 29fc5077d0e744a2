"""Tunables for the contributor-impact engine and the explicit client config."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

# ── GitHub API ───────────────────────────────────────────────────────────────
GITHUB_API      = "https://api.github.com"
ACCEPT_HEADER   = "application/vnd.github.v3+json"
USER_AGENT      = "repo-impact-dash"
REQUEST_TIMEOUT = 30            # seconds, per request

# ── Stats polling ────────────────────────────────────────────────────────────
STATS_POLL_DELAY   = 2.0        # seconds between "202 Accepted" retries
STATS_MAX_ATTEMPTS = 20         # worst case ~40s of waiting

# ── Activity page ────────────────────────────────────────────────────────────
PR_PAGE_SIZE = 100

# ── Impact score ─────────────────────────────────────────────────────────────
COMMIT_WEIGHT         = 2
MERGED_REQUEST_WEIGHT = 5
LINES_CAP             = 100_000  # combined additions + deletions
LINES_DIVISOR         = 100

SECONDS_PER_WEEK = 7 * 24 * 3600


@dataclass(frozen=True)
class ClientConfig:
    """Per-invocation settings for the GitHub client.

    Passed explicitly into every fetch; nothing here is process-wide.
    """

    token: Optional[str] = None
    base_url: str = GITHUB_API
    timeout: float = REQUEST_TIMEOUT
    user_agent: str = USER_AGENT

    @classmethod
    def from_env(cls) -> "ClientConfig":
        token = os.environ.get("GITHUB_TOKEN", "").strip()
        return cls(token=token or None)
