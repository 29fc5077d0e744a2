"""
Credentialed fetcher for the GitHub REST API.

One GET per call, no retries: the caller decides what a 202 or a 204 means.
Responses are classified into SUCCESS / COMPUTING / EMPTY / FATAL so the
poller can run its state machine without touching HTTP details.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

import requests

from impact.config import ACCEPT_HEADER, ClientConfig
from impact.errors import (
    NotFoundError,
    RateLimitedError,
    TransportError,
    UnauthorizedError,
    UpstreamHTTPError,
)

log = logging.getLogger(__name__)


class ResponseKind(Enum):
    SUCCESS   = "success"
    COMPUTING = "computing"
    EMPTY     = "empty"
    FATAL     = "fatal"


@dataclass
class FetchResponse:
    status: int
    body: Any
    url: str = ""


def classify(status: int) -> ResponseKind:
    if status == 200:
        return ResponseKind.SUCCESS
    if status == 202:
        return ResponseKind.COMPUTING
    if status == 204:
        return ResponseKind.EMPTY
    return ResponseKind.FATAL


def raise_for_status(response: FetchResponse) -> None:
    """Raise the taxonomy error matching a FATAL response; no-op otherwise."""
    status = response.status
    if classify(status) is not ResponseKind.FATAL:
        return
    if status == 401:
        raise UnauthorizedError(status, response.url)
    if status in (403, 429):
        raise RateLimitedError(status, response.url)
    if status == 404:
        raise NotFoundError(status, response.url)
    raise UpstreamHTTPError(status, response.url)


def build_headers(token: Optional[str], user_agent: str) -> dict[str, str]:
    headers = {
        "Accept":     ACCEPT_HEADER,
        "User-Agent": user_agent,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


class GitHubClient:
    """Thin wrapper over a requests.Session scoped to one analysis run."""

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or ClientConfig()
        self.session = session or requests.Session()
        # sent with each request, never installed on the session
        self.headers = build_headers(self.config.token, self.config.user_agent)

    def get(self, path: str, params: Optional[dict] = None) -> FetchResponse:
        url = f"{self.config.base_url.rstrip('/')}/{path.lstrip('/')}"
        try:
            resp = self.session.get(
                url, params=params, headers=self.headers, timeout=self.config.timeout
            )
        except requests.RequestException as exc:
            raise TransportError(f"Network error for {url}: {exc}") from exc

        body: Any = None
        if resp.content:
            try:
                body = resp.json()
            except ValueError:
                log.debug(f"Non-JSON body from {url} (HTTP {resp.status_code})")
        log.debug(f"GET {url} -> {resp.status_code}")
        return FetchResponse(status=resp.status_code, body=body, url=url)
