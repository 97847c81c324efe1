"""High level service finding issues similar to a free-text description."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
import logging
from typing import List, Optional

from .github import IssueSearcher, SearchFailure
from .query import SearchQuery, build_search_query
from .ranker import DEFAULT_MAX_RESULTS, ScoredCandidate, clamp_max_results, rank_candidates

logger = logging.getLogger(__name__)


class ResultStatus(str, Enum):
    FOUND = "found"
    NO_RESULTS = "no_results"
    FAILED = "failed"


@dataclass
class SimilarIssuesResult:
    owner: str
    repo: str
    query: SearchQuery
    status: ResultStatus
    candidates: List[ScoredCandidate] = field(default_factory=list)
    failure: Optional[SearchFailure] = None
    total_count: int = 0

    @property
    def repository(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass
class SimilarIssueService:
    """Search a repository and rank the hits by similarity to a description."""

    searcher: IssueSearcher

    async def find_similar(
        self,
        owner: str,
        repo: str,
        description: str,
        max_results: Optional[int] = DEFAULT_MAX_RESULTS,
    ) -> SimilarIssuesResult:
        limit = clamp_max_results(max_results)
        query = build_search_query(owner, repo, description)
        logger.info(f"Searching {owner}/{repo} with query {query.q!r}")

        outcome = await self.searcher.search_issues(query)
        if isinstance(outcome, SearchFailure):
            logger.warning(f"Issue search for {owner}/{repo} failed ({outcome.kind.value}): {outcome.detail}")
            return SimilarIssuesResult(
                owner=owner,
                repo=repo,
                query=query,
                status=ResultStatus.FAILED,
                failure=outcome,
            )

        response = outcome.response
        if response.total_count == 0 or not response.items:
            logger.info(f"No candidates returned for {owner}/{repo}")
            return SimilarIssuesResult(
                owner=owner,
                repo=repo,
                query=query,
                status=ResultStatus.NO_RESULTS,
                total_count=response.total_count,
            )

        candidates = rank_candidates(description, response.items, limit)
        logger.info(
            f"Ranked {len(response.items)} candidates for {owner}/{repo}, returning {len(candidates)}"
        )
        return SimilarIssuesResult(
            owner=owner,
            repo=repo,
            query=query,
            status=ResultStatus.FOUND,
            candidates=candidates,
            total_count=response.total_count,
        )


__all__ = ["ResultStatus", "SimilarIssueService", "SimilarIssuesResult"]
