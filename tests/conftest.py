"""
tests/conftest.py — Shared fixtures for the impact test suite.

Everything here is offline: ScriptedClient stands in for GitHubClient and
replays a fixed list of FetchResponse objects, one per get() call.

Fixtures:
    no_sleep        — records requested delays instead of sleeping.
    stats_payload   — /stats/contributors body for two contributors.
    pulls_payload   — /pulls body with merged, unmerged and authorless PRs.
"""

import pytest

from impact.errors import TransportError
from impact.github import FetchResponse


# ── Helpers ───────────────────────────────────────────────────────────────────

class ScriptedClient:
    """Replays responses in order; an Exception entry is raised instead."""

    def __init__(self, responses):
        self._responses = list(responses)
        self.calls: list[tuple[str, dict]] = []

    def get(self, path, params=None):
        self.calls.append((path, params))
        if not self._responses:
            raise AssertionError(f"Unexpected extra request to {path}")
        nxt = self._responses.pop(0)
        if isinstance(nxt, Exception):
            raise nxt
        return nxt


def ok(body):
    return FetchResponse(status=200, body=body, url="https://api.github.com/test")


def status(code, body=None):
    return FetchResponse(status=code, body=body, url="https://api.github.com/test")


def stat(login, total, weeks, avatar=None):
    return {
        "author": {"login": login, "avatar_url": avatar or f"https://avatars/{login}"},
        "total": total,
        "weeks": [{"w": w, "a": a, "d": d, "c": c} for (w, a, d, c) in weeks],
    }


def pull(number, login, merged_at="2024-05-01T10:00:00Z", avatar=None):
    user = None if login is None else {"login": login, "avatar_url": avatar or f"https://avatars/pr/{login}"}
    return {"number": number, "title": f"PR {number}", "user": user, "merged_at": merged_at}


class SleepRecorder:
    """Drop-in for time.sleep that only records the requested delays."""

    def __init__(self):
        self.delays: list[float] = []

    def __call__(self, seconds):
        self.delays.append(seconds)


WEEK = 7 * 24 * 3600


# ── Fixtures ──────────────────────────────────────────────────────────────────

@pytest.fixture
def no_sleep():
    return SleepRecorder()


@pytest.fixture
def stats_payload():
    return [
        stat("alice", 12, [(0, 300, 50, 5), (WEEK, 200, 10, 7)]),
        stat("bob", 3, [(0, 20, 5, 3), (WEEK, 0, 0, 0)]),
    ]


@pytest.fixture
def pulls_payload():
    return [
        pull(10, "alice"),
        pull(11, "carol"),
        pull(12, "bob", merged_at=None),   # closed without merging
        pull(13, None),                    # deleted account
        pull(14, "alice"),
    ]


@pytest.fixture
def transport_error():
    return TransportError("Network error for https://api.github.com/test: boom")
