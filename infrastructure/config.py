"""Dependency wiring for the SearchServer application."""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

from application.services.request_queue import MINUTES_IN_DAY, RequestQueue
from application.services.search_server import (
    MAX_RESULT_DOCUMENT_COUNT,
    RELEVANCE_ACCURACY,
    SearchServer,
)
from domain.interfaces import WordSplitter
from infrastructure.text_processing.whitespace_splitter import WhitespaceSplitter, split_into_words


@dataclass(slots=True)
class SearchServerConfig:
    """Tunable settings of the search server."""

    stop_words: tuple[str, ...] = ()
    max_result_document_count: int = MAX_RESULT_DOCUMENT_COUNT
    relevance_accuracy: float = RELEVANCE_ACCURACY
    request_window: int = MINUTES_IN_DAY

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "SearchServerConfig":
        """Read ``SEARCHSERVER_*`` variables, keeping defaults for missing ones."""

        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            stop_words=tuple(split_into_words(env.get("SEARCHSERVER_STOP_WORDS", ""))),
            max_result_document_count=_positive_int(
                env, "SEARCHSERVER_MAX_RESULTS", defaults.max_result_document_count
            ),
            relevance_accuracy=_positive_float(env, "SEARCHSERVER_ACCURACY", defaults.relevance_accuracy),
            request_window=_positive_int(env, "SEARCHSERVER_REQUEST_WINDOW", defaults.request_window),
        )


@dataclass(slots=True)
class Container:
    """Bundle of the objects shared by the UI layers."""

    config: SearchServerConfig
    search_server: SearchServer
    request_queue: RequestQueue
    splitter: WordSplitter = field(default_factory=WhitespaceSplitter)


def build_default_container(config: SearchServerConfig | None = None) -> Container:
    """Instantiate the default stack."""

    cfg = config or SearchServerConfig()
    splitter = WhitespaceSplitter()
    search_server = SearchServer(
        cfg.stop_words,
        splitter=splitter,
        max_result_document_count=cfg.max_result_document_count,
        relevance_accuracy=cfg.relevance_accuracy,
    )
    request_queue = RequestQueue(search_server, window=cfg.request_window)
    return Container(
        config=cfg,
        search_server=search_server,
        request_queue=request_queue,
        splitter=splitter,
    )


def _positive_int(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from exc
    if value < 1:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


def _positive_float(env: Mapping[str, str], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number, got {raw!r}") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive, got {value}")
    return value


__all__ = ["Container", "SearchServerConfig", "build_default_container"]
