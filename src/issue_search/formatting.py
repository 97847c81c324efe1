"""Render ranked issues as the plain-text block returned to tool callers."""
from __future__ import annotations

from datetime import datetime, timezone

from .ranker import ScoredCandidate
from .service import ResultStatus, SimilarIssuesResult

FAILURE_MESSAGE = "Failed to retrieve issues from GitHub"
SEPARATOR = "---"


def format_closed_date(value: datetime) -> str:
    """Format ``value`` as an en-US short date (``M/D/YYYY``) in UTC."""

    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return f"{value.month}/{value.day}/{value.year}"


def format_issue(candidate: ScoredCandidate) -> str:
    issue = candidate.issue
    labels = ", ".join(issue.label_names)
    status = "Closed" if issue.is_closed else "Open"
    if issue.closed_at is not None:
        status += f" (closed on {format_closed_date(issue.closed_at)})"
    return "\n".join(
        [
            f"Issue #{issue.number}: {issue.title}",
            f"URL: {issue.html_url}",
            f"Status: {status}",
            f"Labels: {labels or 'None'}",
            f"Similarity: {candidate.percentage:.1f}%",
            SEPARATOR,
        ]
    )


def no_results_message(repository: str) -> str:
    return f"No similar issues found in {repository}"


def format_result(result: SimilarIssuesResult) -> str:
    if result.status is ResultStatus.FAILED:
        return FAILURE_MESSAGE
    if result.status is ResultStatus.NO_RESULTS:
        return no_results_message(result.repository)

    entries = "\n".join(format_issue(candidate) for candidate in result.candidates)
    return f"Found {len(result.candidates)} similar issues in {result.repository}:\n\n{entries}"


__all__ = [
    "FAILURE_MESSAGE",
    "format_closed_date",
    "format_issue",
    "format_result",
    "no_results_message",
]
