"""Contributor impact analysis for GitHub repositories."""

from impact.analysis import analyze_repository
from impact.errors import (
    AnalysisError,
    NotFoundError,
    PollTimeoutError,
    RateLimitedError,
    TransportError,
    UnauthorizedError,
    UpstreamHTTPError,
)
from impact.models import AggregatedContributor, AnalysisReport

__all__ = [
    "analyze_repository",
    "AnalysisError",
    "NotFoundError",
    "PollTimeoutError",
    "RateLimitedError",
    "TransportError",
    "UnauthorizedError",
    "UpstreamHTTPError",
    "AggregatedContributor",
    "AnalysisReport",
]
