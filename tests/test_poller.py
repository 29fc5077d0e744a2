"""
Tests for impact.poller — the bounded retry loop around /stats/contributors.

Covers:
- 202, 202, 200 → result after exactly two delayed retries.
- 20 × 202 → PollTimeoutError, nothing returned.
- 204 → empty list, no retries.
- 200 with a non-array body consumes an attempt.
- fatal statuses abort immediately.
"""
import pytest

from conftest import ScriptedClient, ok, status
from impact.errors import (
    NotFoundError,
    PollTimeoutError,
    RateLimitedError,
    UnauthorizedError,
)
from impact.poller import PollState, poll_contributor_stats


def test_accepted_twice_then_success(no_sleep):
    client = ScriptedClient([status(202), status(202), ok([{"a": 1}, {"b": 2}])])

    result = poll_contributor_stats(client, "o", "r", sleep=no_sleep)

    assert result == [{"a": 1}, {"b": 2}]
    assert no_sleep.delays == [2.0, 2.0]
    assert len(client.calls) == 3
    assert client.calls[0][0] == "/repos/o/r/stats/contributors"


def test_twenty_accepted_times_out(no_sleep):
    client = ScriptedClient([status(202)] * 20)

    with pytest.raises(PollTimeoutError) as info:
        poll_contributor_stats(client, "o", "r", sleep=no_sleep)

    assert info.value.attempts == 20
    assert len(client.calls) == 20
    # no wait after the final attempt
    assert len(no_sleep.delays) == 19


def test_no_content_returns_empty_without_retry(no_sleep):
    client = ScriptedClient([status(204)])
    assert poll_contributor_stats(client, "o", "r", sleep=no_sleep) == []
    assert no_sleep.delays == []


def test_success_with_empty_array_is_terminal(no_sleep):
    client = ScriptedClient([ok([])])
    assert poll_contributor_stats(client, "o", "r", sleep=no_sleep) == []
    assert len(client.calls) == 1


def test_non_array_success_body_consumes_attempt(no_sleep):
    client = ScriptedClient([ok({}), ok([{"a": 1}])])
    assert poll_contributor_stats(client, "o", "r", sleep=no_sleep) == [{"a": 1}]
    assert len(no_sleep.delays) == 1


@pytest.mark.parametrize("code, exc_type", [
    (401, UnauthorizedError),
    (403, RateLimitedError),
    (404, NotFoundError),
])
def test_fatal_status_aborts_without_retry(no_sleep, code, exc_type):
    client = ScriptedClient([status(202), status(code)])
    with pytest.raises(exc_type):
        poll_contributor_stats(client, "o", "r", sleep=no_sleep)
    assert len(client.calls) == 2
    assert len(no_sleep.delays) == 1


def test_custom_delay_and_budget(no_sleep):
    client = ScriptedClient([status(202)] * 3)
    with pytest.raises(PollTimeoutError):
        poll_contributor_stats(client, "o", "r", sleep=no_sleep, delay=0.5, max_attempts=3)
    assert no_sleep.delays == [0.5, 0.5]


def test_poll_state_counts_attempts():
    state = PollState(max_attempts=2)
    assert state.observe(status(202)) is None
    assert not state.exhausted
    assert state.observe(status(202)) is None
    assert state.exhausted
