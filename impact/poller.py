"""
Statistics poller for /repos/{owner}/{repo}/stats/contributors.

GitHub computes contributor statistics lazily and answers 202 Accepted until
they are ready. PollState holds the bounded-retry bookkeeping and classifies
each response; poll_contributor_stats drives it with an injectable sleep so
tests never wait on the wall clock.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Optional

from impact.config import STATS_MAX_ATTEMPTS, STATS_POLL_DELAY
from impact.errors import PollTimeoutError
from impact.github import FetchResponse, GitHubClient, ResponseKind, classify, raise_for_status

log = logging.getLogger(__name__)


@dataclass
class PollState:
    max_attempts: int = STATS_MAX_ATTEMPTS
    attempts: int = 0

    @property
    def exhausted(self) -> bool:
        return self.attempts >= self.max_attempts

    def observe(self, response: FetchResponse) -> Optional[list]:
        """
        Record one attempt. Returns the stats list on terminal success,
        None when the upstream is still computing, raises on fatal status.
        """
        self.attempts += 1
        kind = classify(response.status)

        if kind is ResponseKind.SUCCESS:
            if isinstance(response.body, list):
                return response.body
            # 200 with an object body shows up while stats are still warming up
            log.debug(f"Stats body is not an array yet (attempt {self.attempts})")
            return None
        if kind is ResponseKind.EMPTY:
            return []
        if kind is ResponseKind.COMPUTING:
            return None

        raise_for_status(response)
        return None  # unreachable: FATAL always raises


def poll_contributor_stats(
    client: GitHubClient,
    owner: str,
    repo: str,
    sleep: Callable[[float], None] = time.sleep,
    delay: float = STATS_POLL_DELAY,
    max_attempts: int = STATS_MAX_ATTEMPTS,
) -> list[dict]:
    """Fetch the raw contributor stats array, waiting out 202 responses."""
    path = f"/repos/{owner}/{repo}/stats/contributors"
    state = PollState(max_attempts=max_attempts)

    while not state.exhausted:
        response = client.get(path)
        result = state.observe(response)
        if result is not None:
            log.info(f"Contributor stats ready after {state.attempts} attempt(s): {len(result)} entries")
            return result
        if not state.exhausted:
            log.info(
                f"  GitHub is computing stats for {owner}/{repo}, "
                f"retrying in {delay:.0f}s ({state.attempts}/{state.max_attempts})…"
            )
            sleep(delay)

    raise PollTimeoutError(state.attempts)
