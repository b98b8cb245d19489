"""Errors raised by the SearchServer core."""
from __future__ import annotations

from enum import Enum


class ValidationReason(str, Enum):
    NEGATIVE_ID = "negative ids are not allowed"
    DUPLICATE_ID = "repeating ids are not allowed"
    INVALID_CHARACTER = "special symbols in words are not allowed"
    EMPTY_MINUS_WORD = "empty minus words are not allowed"
    DOUBLE_MINUS_WORD = "double minus words are not allowed"
    EMPTY_TOKEN = "caught empty word, check for double spaces"


class LookupReason(str, Enum):
    INDEX_OUT_OF_RANGE = "document index is out of range"
    UNKNOWN_DOCUMENT_ID = "document id is not indexed"


class SearchServerError(Exception):
    """Base class for every error raised by the search engine."""


class DocumentValidationError(SearchServerError, ValueError):
    """Document text, query text, stop words or document id were rejected."""

    def __init__(self, reason: ValidationReason, detail: str | None = None) -> None:
        self.reason = reason
        self.detail = detail
        message = reason.value if detail is None else f"{reason.value}: {detail!r}"
        super().__init__(message)


class DocumentLookupError(SearchServerError, LookupError):
    """A document position or id does not exist in the index."""

    def __init__(self, reason: LookupReason, key: int) -> None:
        self.reason = reason
        self.key = key
        super().__init__(f"{reason.value}: {key}")


__all__ = [
    "ValidationReason",
    "LookupReason",
    "SearchServerError",
    "DocumentValidationError",
    "DocumentLookupError",
]
