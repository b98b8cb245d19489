"""In-memory TF-IDF search server over whitespace-tokenized documents."""
from __future__ import annotations

from collections import Counter
from functools import cmp_to_key
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, Sequence

from application.services.document_store import DocumentStore
from application.services.inverted_index import InvertedIndex
from application.services.query_parser import QueryParser
from domain.entities import Document, DocumentData, DocumentStatus, MatchResult, Query
from domain.errors import DocumentValidationError, ValidationReason
from domain.interfaces import DocumentFilter, WordSplitter, as_predicate
from infrastructure.text_processing.whitespace_splitter import WhitespaceSplitter

MAX_RESULT_DOCUMENT_COUNT = 5
RELEVANCE_ACCURACY = 1e-6

_EMPTY_FREQUENCIES: Mapping[str, float] = MappingProxyType({})


class SearchServer:
    """Indexes documents and answers plus/minus word queries ranked by TF-IDF.

    Every mutating call either succeeds completely or raises before touching
    the index, so a rejected document or query leaves the server unchanged.
    """

    def __init__(
        self,
        stop_words: str | Iterable[str] | None = None,
        *,
        splitter: WordSplitter | None = None,
        max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT,
        relevance_accuracy: float = RELEVANCE_ACCURACY,
    ) -> None:
        self._splitter = splitter or WhitespaceSplitter()
        self._stop_words: set[str] = set()
        self._index = InvertedIndex()
        self._documents = DocumentStore()
        self._query_parser = QueryParser(self._splitter, self._stop_words)
        self.max_result_document_count = max_result_document_count
        self.relevance_accuracy = relevance_accuracy

        if isinstance(stop_words, str):
            self.set_stop_words(stop_words)
        elif stop_words is not None:
            self._add_stop_words(stop_words)

    # ---- stop words ----
    @property
    def stop_words(self) -> frozenset[str]:
        return frozenset(self._stop_words)

    def set_stop_words(self, text: str) -> None:
        self._add_stop_words(self._splitter.split(text))

    def _add_stop_words(self, words: Iterable[str]) -> None:
        accepted = [word for word in words if word]
        for word in accepted:
            if not self._splitter.is_valid_word(word):
                raise DocumentValidationError(ValidationReason.INVALID_CHARACTER, word)
        self._stop_words.update(accepted)

    def is_stop_word(self, word: str) -> bool:
        return word in self._stop_words

    # ---- ingestion ----
    def add_document(
        self,
        document_id: int,
        document: str,
        status: DocumentStatus = DocumentStatus.ACTUAL,
        ratings: Sequence[int] = (),
    ) -> None:
        if document_id < 0:
            raise DocumentValidationError(ValidationReason.NEGATIVE_ID, str(document_id))
        if document_id in self._documents:
            raise DocumentValidationError(ValidationReason.DUPLICATE_ID, str(document_id))
        if not self._splitter.is_valid_word(document):
            raise DocumentValidationError(ValidationReason.INVALID_CHARACTER, document)

        words = self._split_into_words_no_stop(document)
        word_frequencies: dict[str, float] = {}
        if words:
            word_count = len(words)
            word_frequencies = {word: count / word_count for word, count in Counter(words).items()}
        # everything that may raise happens before the index is touched
        data = DocumentData(
            rating=compute_average_rating(ratings),
            status=DocumentStatus(status),
            word_frequencies=word_frequencies,
        )

        self._index.add(document_id, word_frequencies)
        self._documents.add(document_id, data)

    def _split_into_words_no_stop(self, text: str) -> list[str]:
        return [word for word in self._splitter.split(text) if word not in self._stop_words]

    # ---- corpus ----
    def get_document_count(self) -> int:
        return len(self._documents)

    def get_document_id(self, index: int) -> int:
        return self._documents.document_id_at(index)

    def get_word_frequencies(self, document_id: int) -> Mapping[str, float]:
        data = self._documents.get(document_id)
        if data is None:
            return _EMPTY_FREQUENCIES
        return MappingProxyType(data.word_frequencies)

    def remove_document(self, document_id: int) -> None:
        data = self._documents.remove(document_id)
        if data is None:
            return
        self._index.remove(document_id, data.word_frequencies)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._documents))

    def __len__(self) -> int:
        return self.get_document_count()

    def __contains__(self, document_id: object) -> bool:
        return document_id in self._documents

    # ---- search ----
    def parse_query(self, raw_query: str) -> Query:
        return self._query_parser.parse(raw_query)

    def find_top_documents(self, raw_query: str, document_filter: DocumentFilter = None) -> list[Document]:
        """Return at most ``max_result_document_count`` best documents.

        ``document_filter`` is a status, a ``(document_id, status, rating)``
        predicate or ``None`` for documents with ``DocumentStatus.ACTUAL``.
        """
        query = self.parse_query(raw_query)
        predicate = as_predicate(document_filter)

        matched_documents: list[Document] = []
        for document in self._find_all_documents(query):
            data = self._documents.require(document.id)
            if predicate(document.id, data.status, data.rating):
                matched_documents.append(document)

        matched_documents.sort(key=cmp_to_key(self._compare_documents))
        return matched_documents[: self.max_result_document_count]

    def _compare_documents(self, left: Document, right: Document) -> int:
        if abs(left.relevance - right.relevance) < self.relevance_accuracy:
            return right.rating - left.rating
        return -1 if left.relevance > right.relevance else 1

    def _find_all_documents(self, query: Query) -> list[Document]:
        document_count = self.get_document_count()
        document_to_relevance: dict[int, float] = {}

        for word in query.plus_words:
            if word not in self._index:
                continue
            inverse_document_frequency = self._index.inverse_document_frequency(word, document_count)
            for document_id, term_frequency in self._index.postings(word).items():
                document_to_relevance[document_id] = (
                    document_to_relevance.get(document_id, 0.0) + term_frequency * inverse_document_frequency
                )

        for word in query.minus_words:
            for document_id in self._index.postings(word):
                document_to_relevance.pop(document_id, None)

        return [
            Document(
                id=document_id,
                relevance=document_to_relevance[document_id],
                rating=self._documents.require(document_id).rating,
            )
            for document_id in sorted(document_to_relevance)
        ]

    def match_document(self, raw_query: str, document_id: int) -> MatchResult:
        query = self.parse_query(raw_query)
        data = self._documents.require(document_id)

        if any(self._index.contains(word, document_id) for word in query.minus_words):
            return MatchResult(words=[], status=data.status)

        matched_words = sorted(word for word in query.plus_words if self._index.contains(word, document_id))
        return MatchResult(words=matched_words, status=data.status)


def compute_average_rating(ratings: Sequence[int]) -> int:
    """Average truncated toward zero; an empty list rates 0."""
    if not ratings:
        return 0
    total = sum(ratings)
    average = abs(total) // len(ratings)
    return average if total >= 0 else -average


__all__ = [
    "SearchServer",
    "compute_average_rating",
    "MAX_RESULT_DOCUMENT_COUNT",
    "RELEVANCE_ACCURACY",
]
