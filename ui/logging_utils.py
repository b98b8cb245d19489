"""Утилиты для настройки логирования поискового сервера."""
from __future__ import annotations

import logging
import os
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def resolve_level(level: int | str | None = None) -> int:
    """Уровень из аргумента, иначе из SEARCHSERVER_LOG_LEVEL (по умолчанию INFO)."""
    if isinstance(level, int):
        return level
    level_name = (level or os.getenv("SEARCHSERVER_LOG_LEVEL", "INFO")).upper()
    return getattr(logging, level_name, logging.INFO)


def setup_logging(level: int | str | None = None, log_file: str | Path | None = None) -> list[logging.Handler]:
    """Вывести логи сервера в консоль и, если задан SEARCHSERVER_LOG_FILE, в файл.

    Повторный вызов ничего не меняет и возвращает пустой список.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return []

    formatter = logging.Formatter(LOG_FORMAT)
    handlers: list[logging.Handler] = [logging.StreamHandler()]

    log_file = log_file or os.getenv("SEARCHSERVER_LOG_FILE")
    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)
    root_logger.setLevel(resolve_level(level))
    return handlers


@contextmanager
def log_duration(operation: str, level: int = logging.INFO, logger: logging.Logger | None = None) -> Iterator[None]:
    """Записать в лог время выполнения блока в миллисекундах."""
    target = logger or logging.getLogger(__name__)
    started = time.perf_counter()
    try:
        yield
    finally:
        elapsed_ms = (time.perf_counter() - started) * 1000
        target.log(level, "%s: %.3f ms", operation, elapsed_ms)
