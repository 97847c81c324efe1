"""Pytest fixtures for offline testing without the real GitHub API."""
from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from issue_search.github import SearchFailure, SearchOutcome, SearchSuccess
from issue_search.models import IssueRecord, SearchResponse
from issue_search.query import SearchQuery

# --- Sample data used by fixtures -------------------------------------------------------
SAMPLE_ISSUES: List[Dict[str, Any]] = [
    {
        "number": 101,
        "title": "App crashes on large file upload",
        "body": None,
        "html_url": "https://github.com/octo/widgets/issues/101",
        "state": "open",
        "closed_at": None,
        "labels": [{"id": 1, "name": "bug", "color": "d73a4a"}],
        "comments": 4,
    },
    {
        "number": 102,
        "title": "Button color is wrong",
        "body": None,
        "html_url": "https://github.com/octo/widgets/issues/102",
        "state": "closed",
        "closed_at": "2024-03-05T10:00:00Z",
        "labels": [{"name": "ui"}, {"name": "good first issue"}],
    },
    {
        "number": 103,
        "title": "Crash during upload of big files",
        "body": None,
        "html_url": "https://github.com/octo/widgets/issues/103",
        "state": "open",
        "closed_at": None,
        "labels": [],
    },
]


def _issue_payload(number: int, title: str, **overrides: Any) -> Dict[str, Any]:
    payload: Dict[str, Any] = {
        "number": number,
        "title": title,
        "body": None,
        "html_url": f"https://github.com/octo/widgets/issues/{number}",
        "state": "open",
        "closed_at": None,
        "labels": [],
    }
    payload.update(overrides)
    return payload


class FakeSearcher:
    """Searcher returning a canned outcome and recording the queries it saw."""

    def __init__(self, outcome: SearchOutcome) -> None:
        self.outcome = outcome
        self.queries: List[SearchQuery] = []

    async def search_issues(self, query: SearchQuery) -> SearchOutcome:
        self.queries.append(query)
        return self.outcome


@pytest.fixture
def sample_issues() -> List[Dict[str, Any]]:
    return copy.deepcopy(SAMPLE_ISSUES)


@pytest.fixture
def make_issue() -> Callable[..., IssueRecord]:
    def _make(number: int = 1, title: str = "Untitled", **overrides: Any) -> IssueRecord:
        return IssueRecord.model_validate(_issue_payload(number, title, **overrides))

    return _make


@pytest.fixture
def search_payload() -> Callable[..., Dict[str, Any]]:
    def _payload(items: List[Dict[str, Any]], total_count: Optional[int] = None) -> Dict[str, Any]:
        return {
            "total_count": len(items) if total_count is None else total_count,
            "incomplete_results": False,
            "items": items,
        }

    return _payload


@pytest.fixture
def fake_searcher() -> Callable[..., FakeSearcher]:
    def _make(
        items: Optional[List[Dict[str, Any]]] = None,
        *,
        failure: Optional[SearchFailure] = None,
        total_count: Optional[int] = None,
    ) -> FakeSearcher:
        if failure is not None:
            return FakeSearcher(failure)
        items = items or []
        response = SearchResponse.model_validate(
            {"total_count": len(items) if total_count is None else total_count, "items": items}
        )
        return FakeSearcher(SearchSuccess(response))

    return _make


class RecordingHandler:
    """``httpx.MockTransport`` handler that records requests and replays a response."""

    def __init__(self, responder: Callable[[httpx.Request], httpx.Response]) -> None:
        self.responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responder(request)


@pytest.fixture
def github_transport() -> Callable[..., tuple]:
    """Build a mock transport answering every request with ``status``/``json``.

    Returns ``(transport, handler)``; ``handler.requests`` lists what was sent.
    """

    def _make(
        *,
        status: int = 200,
        json: Any = None,
        content: Optional[bytes] = None,
        error: Optional[Exception] = None,
    ) -> tuple:
        def responder(request: httpx.Request) -> httpx.Response:
            if error is not None:
                raise error
            if content is not None:
                return httpx.Response(status, content=content)
            return httpx.Response(status, json=json)

        handler = RecordingHandler(responder)
        return httpx.MockTransport(handler), handler

    return _make
