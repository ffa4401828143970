import unittest

from nqueens import app as app_module
from nqueens.app import app


class AppTests(unittest.TestCase):
    def setUp(self) -> None:
        app.config["TESTING"] = True
        self.client = app.test_client()

    def test_index(self) -> None:
        resp = self.client.get("/")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"title": "N-Queens", "max_size": app_module.MAX_SIZE})

    def test_solve(self) -> None:
        resp = self.client.get("/solve/4")
        self.assertEqual(resp.status_code, 200)
        data = resp.get_json()
        self.assertEqual(data["size"], 4)
        self.assertTrue(data["solved"])
        self.assertEqual(data["queens"], [[0, 1], [1, 3], [2, 0], [3, 2]])
        self.assertEqual(data["board"], ["[X][Q][X][X]", "[X][X][X][Q]", "[Q][X][X][X]", "[X][X][Q][X]"])

    def test_solve_unsolvable(self) -> None:
        data = self.client.get("/solve/2").get_json()
        self.assertFalse(data["solved"])
        self.assertEqual(data["queens"], [])
        self.assertEqual(data["board"], ["[ ][ ]", "[ ][ ]"])

    def test_count(self) -> None:
        resp = self.client.get("/count/6")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.get_json(), {"size": 6, "count": 4})

    def test_zero_size_is_bad_request(self) -> None:
        for route in ("/solve/0", "/count/0"):
            resp = self.client.get(route)
            self.assertEqual(resp.status_code, 400)
            self.assertIn("positive integer", resp.get_json()["error"])

    def test_oversized_board_is_bad_request(self) -> None:
        resp = self.client.get(f"/count/{app_module.MAX_SIZE + 1}")
        self.assertEqual(resp.status_code, 400)
        self.assertIn("at most", resp.get_json()["error"])

    def test_negative_size_is_not_routed(self) -> None:
        self.assertEqual(self.client.get("/solve/-1").status_code, 404)


if __name__ == "__main__":
    unittest.main()
