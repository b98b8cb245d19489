"""Наполнить поисковый сервер демо-документами и выполнить запросы."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import TextIO

from application.services.request_queue import RequestQueue
from application.use_cases.batch import (
    add_document,
    create_search_server,
    find_top_documents,
    match_documents,
)
from application.use_cases.paginate import paginate
from application.use_cases.remove_duplicates import remove_duplicates
from domain.entities import DocumentStatus
from ui.logging_utils import log_duration, setup_logging

logger = logging.getLogger("searchserver.demo")

DEMO_STOP_WORDS = "and with"
DEMO_DOCUMENTS = (
    (1, "funny pet and nasty rat", [7, 2, 7]),
    (2, "funny pet with curly hair", [1, 2]),
    (3, "funny pet with curly hair", [1, 2]),
    (4, "funny pet and curly hair", [1, 2]),
    (5, "funny funny pet and nasty nasty rat", [1, 2]),
    (6, "funny pet and not very nasty rat", [1, 2]),
    (7, "very nasty rat and not very funny pet", [1, 2]),
    (8, "pet with rat and rat and rat", [1, 2]),
    (9, "nasty rat with curly hair", [1, 2]),
)


def read_line(stream: TextIO) -> str:
    return stream.readline().rstrip("\n")


def read_line_with_number(stream: TextIO) -> int:
    return int(read_line(stream).strip())


def run_stdin(stream: TextIO) -> None:
    """Формат: стоп-слова, число документов, документы по строке, запрос."""
    search_server = create_search_server(read_line(stream))
    document_count = read_line_with_number(stream)
    for document_id in range(document_count):
        add_document(search_server, document_id, read_line(stream))

    query = read_line(stream)
    with log_duration("Operation time", logger=logger):
        documents = find_top_documents(search_server, query)
    for document in documents:
        print(document)


def run_demo(page_size: int) -> None:
    search_server = create_search_server(DEMO_STOP_WORDS)
    for document_id, text, ratings in DEMO_DOCUMENTS:
        add_document(search_server, document_id, text, DocumentStatus.ACTUAL, ratings)
    add_document(search_server, 10, "big dog s\x12parrow", DocumentStatus.ACTUAL, [1])

    with log_duration("Operation time", logger=logger):
        match_documents(search_server, "curly -rat")

    request_queue = RequestQueue(search_server)
    for query in ("empty request", "curly dog", "funny pet", "rat"):
        request_queue.add_find_request(query)
    print(f"Requests without results: {request_queue.get_no_result_requests()}")

    for page in paginate(find_top_documents(search_server, "funny nasty rat"), page_size):
        print(page)
        print("Page break")

    print(f"Before duplicates removed: {search_server.get_document_count()}")
    remove_duplicates(search_server)
    print(f"After duplicates removed: {search_server.get_document_count()}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--stdin",
        action="store_true",
        help="Прочитать стоп-слова, документы и запрос из stdin.",
    )
    parser.add_argument(
        "--page-size",
        type=int,
        default=2,
        help="Размер страницы результатов (по умолчанию: 2)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Подробный лог (уровень DEBUG).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging("DEBUG" if args.verbose else None)
    if args.stdin:
        run_stdin(sys.stdin)
    else:
        run_demo(args.page_size)


if __name__ == "__main__":
    main()
