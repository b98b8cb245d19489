"""Abstract interfaces for the SearchServer system."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Union

from domain.entities import DocumentStatus


DocumentPredicate = Callable[[int, DocumentStatus, int], bool]
"""Filter applied to ranking candidates: ``(document_id, status, rating) -> bool``."""

DocumentFilter = Union[DocumentPredicate, DocumentStatus, int, None]


class WordSplitter(ABC):
    """Turns raw document or query text into words."""

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """Return the words of ``text`` in order of appearance."""

    @abstractmethod
    def is_valid_word(self, word: str) -> bool:
        """Return whether ``word`` may be indexed or queried."""


def as_predicate(document_filter: DocumentFilter) -> DocumentPredicate:
    """Normalize a status, a predicate or ``None`` into a predicate."""

    if document_filter is None:
        document_filter = DocumentStatus.ACTUAL
    if isinstance(document_filter, int) and not isinstance(document_filter, bool):
        desired_status = DocumentStatus(document_filter)
        return lambda _document_id, status, _rating: status == desired_status
    if not callable(document_filter):
        raise TypeError(f"document filter must be a status or a predicate, got {document_filter!r}")
    return document_filter


__all__ = [
    "DocumentPredicate",
    "DocumentFilter",
    "WordSplitter",
    "as_predicate",
]
