import importlib.util
import unittest


@unittest.skipIf(
    importlib.util.find_spec("fastapi") is None or importlib.util.find_spec("httpx") is None,
    "fastapi or httpx not installed",
)
class TestSearchApi(unittest.TestCase):
    def setUp(self) -> None:
        from fastapi.testclient import TestClient

        from infrastructure.config import SearchServerConfig, build_default_container
        from ui.api.main import create_app

        self.container = build_default_container(SearchServerConfig(stop_words=("and", "with")))
        self.client = TestClient(create_app(self.container))
        for document_id, content in (
            (1, "funny pet and nasty rat"),
            (2, "funny pet with curly hair"),
            (3, "funny pet and curly hair"),
        ):
            response = self.client.post("/documents", json={"id": document_id, "content": content, "ratings": [1, 2]})
            self.assertEqual(response.status_code, 201)

    def test_rejects_invalid_documents(self):
        response = self.client.post("/documents", json={"id": 1, "content": "again"})
        self.assertEqual(response.status_code, 400)
        response = self.client.post("/documents", json={"id": 4, "content": "s\u0012parrow"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(self.client.get("/documents").json()["count"], 3)

    def test_search(self):
        response = self.client.get("/search", params={"q": "nasty -hair"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual([item["id"] for item in response.json()["results"]], [1])

        self.assertEqual(self.client.get("/search", params={"q": "--nasty"}).status_code, 400)
        self.client.get("/search", params={"q": "missing"})
        self.assertEqual(self.client.get("/stats").json()["no_result_requests"], 1)

    def test_match(self):
        response = self.client.get("/documents/2/match", params={"q": "curly pet dog"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["words"], ["curly", "pet"])
        self.assertEqual(self.client.get("/documents/42/match", params={"q": "pet"}).status_code, 404)

    def test_remove_duplicates_and_delete(self):
        response = self.client.post("/duplicates/remove")
        self.assertEqual(response.json(), {"removed": [3], "count": 2})

        self.assertEqual(self.client.delete("/documents/2").status_code, 204)
        self.assertEqual(self.client.delete("/documents/2").status_code, 404)
        self.assertEqual(self.client.get("/documents").json(), {"count": 1, "ids": [1]})


if __name__ == "__main__":
    unittest.main()
