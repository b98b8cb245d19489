"""Per-document data keyed by id, remembering insertion order."""
from __future__ import annotations

from typing import Iterator

from domain.entities import DocumentData
from domain.errors import DocumentLookupError, LookupReason


class DocumentStore:
    """Keeps ``DocumentData`` for every indexed document."""

    def __init__(self) -> None:
        self._documents: dict[int, DocumentData] = {}
        self._document_ids: list[int] = []

    def add(self, document_id: int, data: DocumentData) -> None:
        self._documents[document_id] = data
        self._document_ids.append(document_id)

    def remove(self, document_id: int) -> DocumentData | None:
        data = self._documents.pop(document_id, None)
        if data is not None:
            self._document_ids.remove(document_id)
        return data

    def get(self, document_id: int) -> DocumentData | None:
        return self._documents.get(document_id)

    def require(self, document_id: int) -> DocumentData:
        try:
            return self._documents[document_id]
        except KeyError as exc:
            raise DocumentLookupError(LookupReason.UNKNOWN_DOCUMENT_ID, document_id) from exc

    def document_id_at(self, index: int) -> int:
        if index < 0 or index >= len(self._document_ids):
            raise DocumentLookupError(LookupReason.INDEX_OUT_OF_RANGE, index)
        return self._document_ids[index]

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    def __iter__(self) -> Iterator[int]:
        return iter(self._document_ids)

    def __len__(self) -> int:
        return len(self._documents)


__all__ = ["DocumentStore"]
