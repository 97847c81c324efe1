"""Find existing GitHub issues similar to a free-text description."""

from .errors import FailureKind
from .formatting import format_result
from .github import GitHubSearchClient, IssueSearcher, SearchFailure, SearchSuccess
from .models import IssueLabel, IssueRecord, IssueState, SearchResponse
from .query import SearchQuery, build_search_query
from .ranker import ScoredCandidate, clamp_max_results, rank_candidates
from .service import ResultStatus, SimilarIssueService, SimilarIssuesResult
from .similarity import jaccard_similarity
from .text import extract_keywords

__all__ = [
    "FailureKind",
    "GitHubSearchClient",
    "IssueLabel",
    "IssueRecord",
    "IssueSearcher",
    "IssueState",
    "ResultStatus",
    "ScoredCandidate",
    "SearchFailure",
    "SearchQuery",
    "SearchResponse",
    "SearchSuccess",
    "SimilarIssueService",
    "SimilarIssuesResult",
    "build_search_query",
    "clamp_max_results",
    "extract_keywords",
    "format_result",
    "jaccard_similarity",
    "rank_candidates",
]
