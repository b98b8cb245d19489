"""Sliding log of search requests that counts the ones without results."""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass

from application.services.search_server import SearchServer
from domain.entities import Document
from domain.interfaces import DocumentFilter

MINUTES_IN_DAY = 1440


@dataclass(slots=True)
class _QueryResult:
    time_created: int
    is_empty: bool


class RequestQueue:
    """Wraps ``SearchServer.find_top_documents`` and remembers the last ``window`` requests."""

    def __init__(self, search_server: SearchServer, window: int = MINUTES_IN_DAY) -> None:
        if window < 1:
            raise ValueError("window must be positive")
        self._server = search_server
        self._window = window
        self._requests: deque[_QueryResult] = deque()
        self._no_result_requests = 0
        self._time = 0

    @property
    def window(self) -> int:
        return self._window

    def add_find_request(self, raw_query: str, document_filter: DocumentFilter = None) -> list[Document]:
        results = self._server.find_top_documents(raw_query, document_filter)

        self._time += 1
        while self._requests and self._time - self._requests[0].time_created >= self._window:
            expired = self._requests.popleft()
            if expired.is_empty:
                self._no_result_requests -= 1

        is_empty = not results
        self._requests.append(_QueryResult(time_created=self._time, is_empty=is_empty))
        if is_empty:
            self._no_result_requests += 1
        return results

    def get_no_result_requests(self) -> int:
        return self._no_result_requests

    def __len__(self) -> int:
        return len(self._requests)


__all__ = ["RequestQueue", "MINUTES_IN_DAY"]
