"""FastAPI layer that exposes ingest/search/match operations."""
from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException, Query as FastAPIQuery
from pydantic import BaseModel, Field

from application.use_cases.remove_duplicates import remove_duplicates
from domain.entities import DocumentStatus
from domain.errors import DocumentLookupError, DocumentValidationError
from infrastructure.config import Container, SearchServerConfig, build_default_container
from ui.logging_utils import log_duration

logger = logging.getLogger(__name__)


class DocumentPayload(BaseModel):
    id: int
    content: str
    status: DocumentStatus = DocumentStatus.ACTUAL
    ratings: list[int] = Field(default_factory=list)


class DocumentListResponse(BaseModel):
    count: int
    ids: list[int]


class SearchResult(BaseModel):
    id: int
    relevance: float
    rating: int


class SearchResponse(BaseModel):
    query: str
    results: list[SearchResult]


class MatchResponse(BaseModel):
    document_id: int
    words: list[str]
    status: DocumentStatus


class DuplicatesResponse(BaseModel):
    removed: list[int]
    count: int


class StatsResponse(BaseModel):
    document_count: int
    no_result_requests: int


def create_app(container: Container | None = None) -> FastAPI:
    """Build the API around ``container`` (a fresh env-configured one by default)."""

    container = container or build_default_container(SearchServerConfig.from_env())
    server = container.search_server
    api = FastAPI(title="SearchServer API")

    @api.post("/documents", status_code=201, response_model=DocumentPayload)
    def add_document_endpoint(payload: DocumentPayload) -> DocumentPayload:
        try:
            server.add_document(payload.id, payload.content, payload.status, payload.ratings)
        except DocumentValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return payload

    @api.get("/documents", response_model=DocumentListResponse)
    def documents_endpoint() -> DocumentListResponse:
        return DocumentListResponse(count=server.get_document_count(), ids=list(server))

    @api.delete("/documents/{document_id}", status_code=204)
    def remove_document_endpoint(document_id: int) -> None:
        if document_id not in server:
            raise HTTPException(status_code=404, detail=f"document {document_id} not found")
        server.remove_document(document_id)

    @api.get("/search", response_model=SearchResponse)
    def search_endpoint(
        q: str = FastAPIQuery(..., description="Query with optional -minus words"),
        status: DocumentStatus = FastAPIQuery(DocumentStatus.ACTUAL, description="Document status filter"),
    ) -> SearchResponse:
        with log_duration(f"search {q!r}", logger=logger):
            try:
                documents = container.request_queue.add_find_request(q, status)
            except DocumentValidationError as exc:
                raise HTTPException(status_code=400, detail=str(exc)) from exc
        results = [SearchResult(id=doc.id, relevance=doc.relevance, rating=doc.rating) for doc in documents]
        return SearchResponse(query=q, results=results)

    @api.get("/documents/{document_id}/match", response_model=MatchResponse)
    def match_endpoint(document_id: int, q: str = FastAPIQuery(..., description="User query")) -> MatchResponse:
        try:
            words, status = server.match_document(q, document_id)
        except DocumentValidationError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        except DocumentLookupError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return MatchResponse(document_id=document_id, words=words, status=status)

    @api.post("/duplicates/remove", response_model=DuplicatesResponse)
    def remove_duplicates_endpoint() -> DuplicatesResponse:
        removed = remove_duplicates(server)
        return DuplicatesResponse(removed=removed, count=server.get_document_count())

    @api.get("/stats", response_model=StatsResponse)
    def stats_endpoint() -> StatsResponse:
        return StatsResponse(
            document_count=server.get_document_count(),
            no_result_requests=container.request_queue.get_no_result_requests(),
        )

    return api


app = create_app()
