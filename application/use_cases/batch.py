"""Batch helpers that report a failed document or query and carry on."""
from __future__ import annotations

import logging
from typing import Iterable, Sequence

from application.services.search_server import SearchServer
from domain.entities import Document, DocumentStatus, MatchResult
from domain.errors import SearchServerError
from domain.interfaces import DocumentFilter

logger = logging.getLogger(__name__)


def create_search_server(stop_words: str | Iterable[str] | None = None, **options) -> SearchServer:
    """Build a server, falling back to no stop words when they are rejected."""

    try:
        return SearchServer(stop_words, **options)
    except SearchServerError as exc:
        logger.error("Failed to create search server: %s", exc)
        return SearchServer(**options)


def add_document(
    search_server: SearchServer,
    document_id: int,
    document: str,
    status: DocumentStatus = DocumentStatus.ACTUAL,
    ratings: Sequence[int] = (),
) -> bool:
    try:
        search_server.add_document(document_id, document, status, ratings)
    except SearchServerError as exc:
        logger.error("Failed to add document %s: %s", document_id, exc)
        return False
    return True


def find_top_documents(
    search_server: SearchServer,
    raw_query: str,
    document_filter: DocumentFilter = None,
) -> list[Document]:
    logger.info("Search results for query: %s", raw_query)
    try:
        documents = search_server.find_top_documents(raw_query, document_filter)
    except SearchServerError as exc:
        logger.error("Search failed: %s", exc)
        return []
    for document in documents:
        logger.info("%s", format_document(document))
    return documents


def match_documents(search_server: SearchServer, raw_query: str) -> list[tuple[int, MatchResult]]:
    """Match ``raw_query`` against every document in insertion order."""

    logger.info("Matching documents for query: %s", raw_query)
    matches: list[tuple[int, MatchResult]] = []
    try:
        for document_id in search_server:
            result = search_server.match_document(raw_query, document_id)
            logger.info("%s", format_match_result(document_id, result))
            matches.append((document_id, result))
    except SearchServerError as exc:
        logger.error("Failed to match documents for query %s: %s", raw_query, exc)
    return matches


def format_document(document: Document) -> str:
    return str(document)


def format_match_result(document_id: int, result: MatchResult) -> str:
    words = "".join(f" {word}" for word in result.words)
    return f"{{ document_id = {document_id}, status = {result.status.name}, words ={words}}}"


__all__ = [
    "create_search_server",
    "add_document",
    "find_top_documents",
    "match_documents",
    "format_document",
    "format_match_result",
]
