"""Parses raw query text into plus and minus words."""
from __future__ import annotations

from typing import Container

from domain.entities import Query, QueryWord
from domain.errors import DocumentValidationError, ValidationReason
from domain.interfaces import WordSplitter


class QueryParser:
    """Splits a query and sorts its words into plus and minus sets.

    Malformed minus words reject the whole query instead of being
    reinterpreted, so ``--x`` never silently turns into ``x``.
    """

    def __init__(self, splitter: WordSplitter, stop_words: Container[str]) -> None:
        self._splitter = splitter
        self._stop_words = stop_words

    def parse(self, text: str) -> Query:
        query = Query()
        for word in self._splitter.split(text):
            query_word = self.parse_word(word)
            if query_word.is_stop:
                continue
            if query_word.is_minus:
                query.minus_words.add(query_word.data)
            else:
                query.plus_words.add(query_word.data)
        return query

    def parse_word(self, text: str) -> QueryWord:
        if not text:
            raise DocumentValidationError(ValidationReason.EMPTY_TOKEN)

        is_minus = False
        if text[0] == "-":
            text = text[1:]
            if not text:
                raise DocumentValidationError(ValidationReason.EMPTY_MINUS_WORD)
            if text[0] == "-":
                raise DocumentValidationError(ValidationReason.DOUBLE_MINUS_WORD, text)
            is_minus = True

        if not self._splitter.is_valid_word(text):
            raise DocumentValidationError(ValidationReason.INVALID_CHARACTER, text)

        return QueryWord(data=text, is_minus=is_minus, is_stop=text in self._stop_words)


__all__ = ["QueryParser"]
