"""Failure taxonomy for the outbound issue search."""
from __future__ import annotations

from enum import Enum
from typing import Optional


class FailureKind(str, Enum):
    UNAVAILABLE = "unavailable"
    REJECTED = "rejected"
    MALFORMED = "malformed"


class IssueSearchError(Exception):
    """Base class for errors raised while talking to the issue tracker."""

    kind: FailureKind = FailureKind.UNAVAILABLE

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class UpstreamUnavailableError(IssueSearchError):
    """The tracker could not be reached (network error or timeout)."""

    kind = FailureKind.UNAVAILABLE


class UpstreamRejectedError(IssueSearchError):
    """The tracker answered with a non-success HTTP status."""

    kind = FailureKind.REJECTED


class MalformedResponseError(IssueSearchError):
    """The tracker answered with a payload that is not a search result."""

    kind = FailureKind.MALFORMED


__all__ = [
    "FailureKind",
    "IssueSearchError",
    "MalformedResponseError",
    "UpstreamRejectedError",
    "UpstreamUnavailableError",
]
