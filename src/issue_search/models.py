"""Read-only views of the issue tracker's search payload."""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel


class IssueState(str, Enum):
    OPEN = "open"
    CLOSED = "closed"


class IssueLabel(BaseModel):
    name: str


class IssueRecord(BaseModel):
    number: int
    title: str
    body: Optional[str] = None
    html_url: str
    state: IssueState
    closed_at: Optional[datetime] = None
    labels: List[IssueLabel] = []

    @property
    def label_names(self) -> List[str]:
        return [label.name for label in self.labels]

    @property
    def is_closed(self) -> bool:
        return self.state is IssueState.CLOSED


class SearchResponse(BaseModel):
    total_count: int
    incomplete_results: bool = False
    items: List[IssueRecord] = []


__all__ = ["IssueLabel", "IssueRecord", "IssueState", "SearchResponse"]
