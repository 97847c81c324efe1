"""Build scoped GitHub issue search queries from free text."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from .text import extract_keywords

DEFAULT_SORT = "updated"
DEFAULT_ORDER = "desc"
DEFAULT_PAGE_SIZE = 30


@dataclass(frozen=True)
class SearchQuery:
    """A single request against the issue search endpoint."""

    q: str
    sort: str = DEFAULT_SORT
    order: str = DEFAULT_ORDER
    per_page: int = DEFAULT_PAGE_SIZE

    def as_params(self) -> Dict[str, str]:
        return {
            "q": self.q,
            "sort": self.sort,
            "order": self.order,
            "per_page": str(self.per_page),
        }


def repository_scope(owner: str, repo: str) -> str:
    return f"repo:{owner}/{repo}"


def build_search_query(owner: str, repo: str, text: str) -> SearchQuery:
    """Scope the keywords of ``text`` to ``owner/repo``.

    When no keyword survives filtering the query is only the repository
    qualifier, which matches every issue in the repository.
    """

    keywords = " ".join(extract_keywords(text))
    parts = [repository_scope(owner, repo)]
    if keywords:
        parts.append(keywords)
    return SearchQuery(q=" ".join(parts))


__all__ = ["SearchQuery", "build_search_query", "repository_scope"]
