"""Unit tests for shared/db.py"""

import unittest
from unittest.mock import patch

from shared.db import StoreConfigurationError, get_news_store, get_supabase_client
from shared.store import NewsStore


class TestGetSupabaseClient(unittest.TestCase):
    @patch.dict("os.environ", {"SUPABASE_URL": "https://db.example.com"}, clear=True)
    def test_missing_key_raises(self):
        with self.assertRaises(StoreConfigurationError) as ctx:
            get_supabase_client()
        self.assertIn("SUPABASE_SERVICE_KEY", str(ctx.exception))
        self.assertNotIn("SUPABASE_URL", str(ctx.exception))

    @patch.dict("os.environ", {}, clear=True)
    def test_missing_everything_is_value_error(self):
        with self.assertRaises(ValueError):
            get_supabase_client()

    @patch("shared.db.create_client")
    @patch.dict(
        "os.environ",
        {"SUPABASE_URL": "https://db.example.com", "SUPABASE_SERVICE_KEY": "secret"},
        clear=True,
    )
    def test_store_wraps_client(self, mock_create_client):
        store = get_news_store()

        mock_create_client.assert_called_once_with("https://db.example.com", "secret")
        self.assertIsInstance(store, NewsStore)
        self.assertIs(store.client, mock_create_client.return_value)


if __name__ == "__main__":
    unittest.main()
