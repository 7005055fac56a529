import unittest
from unittest import mock

import app as app_module


class TestWorkRoute(unittest.TestCase):

    def setUp(self):
        """Set up a test client for the Flask app."""
        app_module.app.config["TESTING"] = True
        self.client = app_module.app.test_client()

    def test_explicit_n(self):
        """Test the count for a given n."""
        response = self.client.get("/work?n=250")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_data(as_text=True), "Processed 250 items")
        self.assertEqual(response.mimetype, "text/plain")

    def test_default_n(self):
        """Test that a missing n falls back to 10000."""
        response = self.client.get("/work")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_data(as_text=True), "Processed 10000 items")

    def test_blank_n(self):
        """Test that an empty n is treated as missing."""
        with mock.patch.object(app_module, "DEFAULT_N", 7):
            response = self.client.get("/work?n=")
        self.assertEqual(response.get_data(as_text=True), "Processed 7 items")

    def test_zero_and_negative(self):
        """Test that non-positive n reports zero items."""
        for raw in ("0", "-5"):
            response = self.client.get(f"/work?n={raw}")
            self.assertEqual(response.status_code, 200)
            self.assertEqual(response.get_data(as_text=True), "Processed 0 items")

    def test_non_integer_n(self):
        """Test that non-numeric n is rejected."""
        response = self.client.get("/work?n=abc")
        self.assertEqual(response.status_code, 400)
        self.assertIn("must be an integer", response.get_json()["error"])

    def test_non_decimal_n(self):
        """Test that underscores and non-ASCII digits are rejected."""
        for raw in ("1_000", "١٢", "1e3", "0x10", "5.0"):
            response = self.client.get("/work", query_string={"n": raw})
            self.assertEqual(response.status_code, 400, raw)
            self.assertIn("must be an integer", response.get_json()["error"])

    def test_parse_n_signs_and_spaces(self):
        """Test that an explicit sign and surrounding spaces are accepted."""
        self.assertEqual(app_module.parse_n("+5"), 5)
        self.assertEqual(app_module.parse_n(" 12 "), 12)
        self.assertEqual(app_module.parse_n("-3"), -3)
        with self.assertRaises(ValueError) as ctx:
            app_module.parse_n("abc")
        self.assertIsNone(ctx.exception.__cause__)

    def test_n_above_limit(self):
        """Test that n above MAX_N is rejected."""
        with mock.patch.object(app_module, "MAX_N", 100):
            response = self.client.get("/work?n=101")
            self.assertEqual(response.status_code, 400)
            self.assertIn("must not exceed 100", response.get_json()["error"])
            response = self.client.get("/work?n=100")
            self.assertEqual(response.status_code, 200)

    def test_limit_disabled(self):
        """Test that MAX_N of zero turns the limit off."""
        with mock.patch.object(app_module, "MAX_N", 0):
            self.assertEqual(app_module.parse_n("20000000"), 20000000)

    def test_healthz(self):
        response = self.client.get("/healthz")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.get_json(), {"ok": True})


if __name__ == '__main__':
    unittest.main()
