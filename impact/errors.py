"""Errors surfaced by the analysis engine."""

from __future__ import annotations

from typing import Optional


class AnalysisError(Exception):
    """Base for every terminal failure of an analysis run."""


class UpstreamHTTPError(AnalysisError):
    """GitHub answered with a status we cannot recover from."""

    def __init__(self, status: int, url: str, message: Optional[str] = None) -> None:
        self.status = status
        self.url = url
        super().__init__(message or f"GitHub API Error: HTTP {status} for {url}")


class UnauthorizedError(UpstreamHTTPError):
    def __init__(self, status: int, url: str) -> None:
        super().__init__(status, url, "Unauthorized. Please check your GitHub Token.")


class RateLimitedError(UpstreamHTTPError):
    def __init__(self, status: int, url: str) -> None:
        super().__init__(
            status, url, "API Rate limit exceeded or Forbidden. Try adding a Token."
        )


class NotFoundError(UpstreamHTTPError):
    def __init__(self, status: int, url: str) -> None:
        super().__init__(status, url, "Repository not found or private (check token).")


class TransportError(AnalysisError):
    """The request never produced an HTTP response."""


class PollTimeoutError(AnalysisError):
    """The stats endpoint kept answering 'still computing'."""

    def __init__(self, attempts: int) -> None:
        self.attempts = attempts
        super().__init__(
            f"Timeout waiting for GitHub statistics calculation after {attempts} attempts. "
            "The repository might be too large or GitHub is busy."
        )
