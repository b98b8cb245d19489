"""Domain entities for the SearchServer system."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Iterator


class DocumentStatus(IntEnum):
    """Lifecycle status of an indexed document, used as a filter key."""

    ACTUAL = 0
    IRRELEVANT = 1
    BANNED = 2
    REMOVED = 3


@dataclass(slots=True)
class Document:
    """A scored search result."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return f"{{ document_id = {self.id}, relevance = {self.relevance}, rating = {self.rating} }}"


@dataclass(slots=True)
class DocumentData:
    """Per-document data owned by the document store."""

    rating: int = 0
    status: DocumentStatus = DocumentStatus.ACTUAL
    word_frequencies: dict[str, float] = field(default_factory=dict)


@dataclass(slots=True)
class QueryWord:
    """A single parsed query token."""

    data: str
    is_minus: bool = False
    is_stop: bool = False


@dataclass(slots=True)
class Query:
    """Plus and minus words of a parsed query."""

    plus_words: set[str] = field(default_factory=set)
    minus_words: set[str] = field(default_factory=set)


@dataclass(slots=True)
class MatchResult:
    """Words of a query found in one document, together with its status."""

    words: list[str]
    status: DocumentStatus

    def __iter__(self) -> Iterator[object]:
        # allows ``words, status = server.match_document(...)``
        yield self.words
        yield self.status


__all__ = [
    "DocumentStatus",
    "Document",
    "DocumentData",
    "QueryWord",
    "Query",
    "MatchResult",
]
