import unittest

from application.services.request_queue import MINUTES_IN_DAY, RequestQueue
from application.services.search_server import SearchServer
from domain.entities import DocumentStatus
from domain.errors import DocumentValidationError


def build_server() -> SearchServer:
    server = SearchServer("and in at")
    server.add_document(1, "curly cat curly tail", DocumentStatus.ACTUAL, [7, 2, 7])
    server.add_document(2, "curly dog and fancy collar", DocumentStatus.ACTUAL, [1, 2, 3])
    server.add_document(3, "big cat fancy collar ", DocumentStatus.ACTUAL, [1, 2, 8])
    server.add_document(4, "big dog sparrow Eugene", DocumentStatus.ACTUAL, [1, 3, 2])
    server.add_document(5, "big dog sparrow Vasiliy", DocumentStatus.ACTUAL, [1, 1, 1])
    return server


class TestRequestQueue(unittest.TestCase):
    def test_day_window(self):
        queue = RequestQueue(build_server())
        for _ in range(MINUTES_IN_DAY - 1):
            queue.add_find_request("empty request")
        queue.add_find_request("curly dog")
        queue.add_find_request("big collar")
        queue.add_find_request("sparrow")
        self.assertEqual(queue.get_no_result_requests(), 1437)
        self.assertEqual(len(queue), MINUTES_IN_DAY)

    def test_small_window_evicts_oldest(self):
        queue = RequestQueue(build_server(), window=2)
        queue.add_find_request("nothing")
        queue.add_find_request("nothing")
        self.assertEqual(queue.get_no_result_requests(), 2)
        queue.add_find_request("curly")
        self.assertEqual(queue.get_no_result_requests(), 1)
        queue.add_find_request("curly")
        self.assertEqual(queue.get_no_result_requests(), 0)

    def test_returns_server_results_and_honours_filter(self):
        server = build_server()
        queue = RequestQueue(server)
        self.assertEqual(queue.add_find_request("curly"), server.find_top_documents("curly"))
        self.assertEqual(queue.add_find_request("curly", DocumentStatus.BANNED), [])
        self.assertEqual(queue.add_find_request("curly", lambda document_id, status, rating: document_id == 2)[0].id, 2)
        self.assertEqual(queue.get_no_result_requests(), 1)

    def test_integer_status_filter(self):
        queue = RequestQueue(build_server())
        self.assertEqual([doc.id for doc in queue.add_find_request("sparrow", 0)], [4, 5])
        self.assertEqual(queue.add_find_request("sparrow", 2), [])
        self.assertEqual(queue.get_no_result_requests(), 1)

    def test_failed_query_is_not_recorded(self):
        queue = RequestQueue(build_server())
        with self.assertRaises(DocumentValidationError):
            queue.add_find_request("--curly")
        self.assertEqual(len(queue), 0)

    def test_window_must_be_positive(self):
        with self.assertRaises(ValueError):
            RequestQueue(build_server(), window=0)


if __name__ == "__main__":
    unittest.main()
