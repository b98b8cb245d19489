"""Inverted index mapping every term to the documents that contain it."""
from __future__ import annotations

import math
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

_EMPTY_POSTINGS: Mapping[int, float] = MappingProxyType({})


class InvertedIndex:
    """Term -> {document id -> term frequency}.

    A term is present only while at least one document contains it.
    """

    def __init__(self) -> None:
        self._postings: dict[str, dict[int, float]] = {}

    def add(self, document_id: int, word_frequencies: Mapping[str, float]) -> None:
        for word, term_frequency in word_frequencies.items():
            self._postings.setdefault(word, {})[document_id] = term_frequency

    def remove(self, document_id: int, words: Iterable[str]) -> None:
        for word in words:
            postings = self._postings.get(word)
            if postings is None:
                continue
            postings.pop(document_id, None)
            if not postings:
                del self._postings[word]

    def postings(self, word: str) -> Mapping[int, float]:
        postings = self._postings.get(word)
        if postings is None:
            return _EMPTY_POSTINGS
        return MappingProxyType(postings)

    def contains(self, word: str, document_id: int) -> bool:
        return document_id in self._postings.get(word, ())

    def document_frequency(self, word: str) -> int:
        return len(self._postings.get(word, ()))

    def inverse_document_frequency(self, word: str, document_count: int) -> float:
        """Return ``ln(document_count / df)``; the word must be indexed."""
        postings = self._postings[word]
        return math.log(document_count / len(postings))

    def __contains__(self, word: object) -> bool:
        return word in self._postings

    def __iter__(self) -> Iterator[str]:
        return iter(self._postings)

    def __len__(self) -> int:
        return len(self._postings)


__all__ = ["InvertedIndex"]
