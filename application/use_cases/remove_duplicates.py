"""Use case that removes documents repeating another document's vocabulary."""
from __future__ import annotations

import logging

from application.services.search_server import SearchServer

logger = logging.getLogger(__name__)


def find_duplicates(search_server: SearchServer) -> list[int]:
    """Return ids whose set of words already appeared in an earlier document.

    Word frequencies are ignored: ``"cat cat dog"`` duplicates ``"dog cat"``.
    """

    seen_word_sets: set[frozenset[str]] = set()
    duplicate_ids: list[int] = []
    for document_id in search_server:
        words = frozenset(search_server.get_word_frequencies(document_id))
        if words in seen_word_sets:
            duplicate_ids.append(document_id)
        else:
            seen_word_sets.add(words)
    return duplicate_ids


def remove_duplicates(search_server: SearchServer) -> list[int]:
    """Remove every duplicate found by :func:`find_duplicates` and return their ids."""

    duplicate_ids = find_duplicates(search_server)
    for document_id in duplicate_ids:
        logger.info("Found duplicate document id %s", document_id)
        search_server.remove_document(document_id)
    return duplicate_ids


__all__ = ["find_duplicates", "remove_duplicates"]
