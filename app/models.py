from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from issue_search.ranker import ScoredCandidate
from issue_search.service import SimilarIssuesResult


class SimilarIssue(BaseModel):
    number: int
    title: str
    url: str
    state: str
    closed_at: Optional[datetime] = None
    labels: List[str] = []
    score: float

    @classmethod
    def from_candidate(cls, candidate: ScoredCandidate) -> "SimilarIssue":
        issue = candidate.issue
        return cls(
            number=issue.number,
            title=issue.title,
            url=issue.html_url,
            state=issue.state.value,
            closed_at=issue.closed_at,
            labels=issue.label_names,
            score=candidate.score,
        )


class SearchError(BaseModel):
    kind: str
    detail: str
    status_code: Optional[int] = None


class SimilarIssuesResponse(BaseModel):
    owner: str
    repo: str
    query: str
    status: str
    total_count: int = 0
    results: List[SimilarIssue] = []
    text: str
    error: Optional[SearchError] = None

    @classmethod
    def from_result(cls, result: SimilarIssuesResult, text: str) -> "SimilarIssuesResponse":
        error = None
        if result.failure is not None:
            error = SearchError(
                kind=result.failure.kind.value,
                detail=result.failure.detail,
                status_code=result.failure.status_code,
            )
        return cls(
            owner=result.owner,
            repo=result.repo,
            query=result.query.q,
            status=result.status.value,
            total_count=result.total_count,
            results=[SimilarIssue.from_candidate(c) for c in result.candidates],
            text=text,
            error=error,
        )
