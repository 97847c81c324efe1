"""Async client for the GitHub issue search endpoint."""
from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Optional, Protocol, Union

import httpx
from pydantic import ValidationError

from .errors import (
    FailureKind,
    IssueSearchError,
    MalformedResponseError,
    UpstreamRejectedError,
    UpstreamUnavailableError,
)
from .models import SearchResponse
from .query import SearchQuery

logger = logging.getLogger(__name__)

GITHUB_API_BASE = "https://api.github.com"
USER_AGENT = "support-assistant/1.0"
GITHUB_API_VERSION = "2022-11-28"
SEARCH_ISSUES_PATH = "/search/issues"
DEFAULT_TIMEOUT = 20.0


@dataclass(frozen=True)
class SearchSuccess:
    response: SearchResponse

    ok = True


@dataclass(frozen=True)
class SearchFailure:
    kind: FailureKind
    detail: str
    status_code: Optional[int] = None

    ok = False

    @classmethod
    def from_error(cls, error: IssueSearchError) -> "SearchFailure":
        return cls(kind=error.kind, detail=str(error), status_code=error.status_code)


SearchOutcome = Union[SearchSuccess, SearchFailure]


class IssueSearcher(Protocol):
    """Anything able to run a :class:`SearchQuery` against an issue tracker."""

    async def search_issues(self, query: SearchQuery) -> SearchOutcome:
        """Run ``query`` and report success or failure without raising."""


def build_headers(token: Optional[str], user_agent: str = USER_AGENT) -> dict[str, str]:
    headers = {
        "User-Agent": user_agent,
        "Accept": "application/vnd.github+json",
        "X-GitHub-Api-Version": GITHUB_API_VERSION,
    }
    if token:
        headers["Authorization"] = f"Bearer {token}"
    return headers


class GitHubSearchClient:
    """Issue search over the GitHub REST API.

    The credential is injected by the caller; the client never reads the
    process environment. One call to :meth:`search_issues` performs exactly one
    HTTP request, without retries.

    Example:
        async with GitHubSearchClient(token) as client:
            outcome = await client.search_issues(query)
    """

    def __init__(
        self,
        token: Optional[str] = None,
        *,
        base_url: str = GITHUB_API_BASE,
        user_agent: str = USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url
        self.authenticated = bool(token)
        self._client = httpx.AsyncClient(
            base_url=base_url,
            headers=build_headers(token, user_agent),
            timeout=httpx.Timeout(timeout),
            transport=transport,
        )

    async def __aenter__(self) -> "GitHubSearchClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, params: dict[str, str]) -> Any:
        try:
            response = await self._client.get(path, params=params)
        except httpx.HTTPError as exc:
            raise UpstreamUnavailableError(f"GitHub request failed: {exc!r}") from exc

        if not response.is_success:
            raise UpstreamRejectedError(
                f"GitHub API error! status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                "GitHub returned a non-JSON body", status_code=response.status_code
            ) from exc

    @staticmethod
    def _parse(payload: Any) -> SearchResponse:
        try:
            return SearchResponse.model_validate(payload)
        except ValidationError as exc:
            raise MalformedResponseError(
                f"Unexpected search payload: {exc.error_count()} validation error(s)"
            ) from exc

    async def search_issues(self, query: SearchQuery) -> SearchOutcome:
        try:
            payload = await self._get_json(SEARCH_ISSUES_PATH, query.as_params())
            return SearchSuccess(self._parse(payload))
        except IssueSearchError as exc:
            logger.error(f"Error making GitHub request: {exc}")
            return SearchFailure.from_error(exc)


__all__ = [
    "GITHUB_API_BASE",
    "GitHubSearchClient",
    "IssueSearcher",
    "SearchFailure",
    "SearchOutcome",
    "SearchSuccess",
    "USER_AGENT",
    "build_headers",
]
