"""Lexical similarity between an issue description and candidate issues."""
from __future__ import annotations

from typing import FrozenSet

from .models import IssueRecord
from .text import tokenize


def word_set(text: str) -> FrozenSet[str]:
    return frozenset(tokenize(text))


def jaccard_similarity(text1: str, text2: str) -> float:
    """Return the Jaccard coefficient of the word sets of two texts.

    Two texts without any words score 0.0.
    """

    words1 = word_set(text1)
    words2 = word_set(text2)
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def candidate_text(issue: IssueRecord) -> str:
    return f"{issue.title} {issue.body or ''}"


__all__ = ["candidate_text", "jaccard_similarity", "word_set"]
