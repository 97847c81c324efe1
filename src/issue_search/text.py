"""Text normalisation helpers shared by the query builder and the ranker.

Keyword lists keep repeated words in their original positions; only the
first ten surviving tokens reach the search query.
"""
from __future__ import annotations

import re
from typing import List

STOP_WORDS = frozenset({"the", "and", "that", "this", "with"})
MIN_KEYWORD_LENGTH = 4
MAX_KEYWORDS = 10

_NON_WORD = re.compile(r"[^\w\s]")


def normalize_text(text: str) -> str:
    """Lower-case ``text`` and drop everything that is not a word character or whitespace."""

    return _NON_WORD.sub("", (text or "").lower())


def tokenize(text: str) -> List[str]:
    return normalize_text(text).split()


def extract_keywords(text: str, *, limit: int = MAX_KEYWORDS) -> List[str]:
    """Return up to ``limit`` search keywords from ``text`` in their original order.

    Short tokens (three characters or fewer) and :data:`STOP_WORDS` are
    discarded. Repeated words are kept; the limit bounds the query anyway.
    """

    keywords = [
        word
        for word in tokenize(text)
        if len(word) >= MIN_KEYWORD_LENGTH and word not in STOP_WORDS
    ]
    return keywords[:limit]


__all__ = [
    "MAX_KEYWORDS",
    "MIN_KEYWORD_LENGTH",
    "STOP_WORDS",
    "extract_keywords",
    "normalize_text",
    "tokenize",
]
