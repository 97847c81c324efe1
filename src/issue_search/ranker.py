"""Score candidate issues and keep the most similar ones."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import IssueRecord
from .similarity import candidate_text, jaccard_similarity

MIN_RESULTS = 1
MAX_RESULTS = 20
DEFAULT_MAX_RESULTS = 5


@dataclass(frozen=True)
class ScoredCandidate:
    issue: IssueRecord
    score: float

    @property
    def percentage(self) -> float:
        return self.score * 100


def clamp_max_results(value: Optional[int], default: int = DEFAULT_MAX_RESULTS) -> int:
    """Clamp a requested result count into ``[MIN_RESULTS, MAX_RESULTS]``."""

    if value is None:
        value = default
    return max(MIN_RESULTS, min(MAX_RESULTS, int(value)))


def score_candidates(text: str, issues: Iterable[IssueRecord]) -> List[ScoredCandidate]:
    return [
        ScoredCandidate(issue=issue, score=jaccard_similarity(text, candidate_text(issue)))
        for issue in issues
    ]


def rank_candidates(
    text: str,
    issues: Iterable[IssueRecord],
    max_results: Optional[int] = DEFAULT_MAX_RESULTS,
) -> List[ScoredCandidate]:
    """Return the ``max_results`` candidates most similar to ``text``.

    ``sorted`` is stable, so candidates with equal scores keep the order the
    search endpoint returned them in. Truncation happens after sorting.
    """

    limit = clamp_max_results(max_results)
    scored = score_candidates(text, issues)
    ranked = sorted(scored, key=lambda candidate: candidate.score, reverse=True)
    return ranked[:limit]


__all__ = [
    "DEFAULT_MAX_RESULTS",
    "MAX_RESULTS",
    "MIN_RESULTS",
    "ScoredCandidate",
    "clamp_max_results",
    "rank_candidates",
    "score_candidates",
]
