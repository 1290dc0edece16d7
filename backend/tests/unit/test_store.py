"""
Unit tests for shared/store.py

Supabase is mocked with the chainable query builder from mock_helpers.
"""

import unittest
from datetime import datetime, timezone
from unittest.mock import Mock

from models.notification import Notification
from shared.store import INSERT_BATCH_SIZE, NewsStore
from tests.fixtures.article_factory import create_test_article
from tests.fixtures.mock_helpers import create_mock_supabase

NOW = datetime(2026, 1, 24, 12, 0, tzinfo=timezone.utc)


class TestSources(unittest.TestCase):
    def test_get_active_sources(self):
        client = create_mock_supabase(
            [
                {
                    "id": 2,
                    "name": "News API",
                    "adapter_name": "NewsAPI",
                    "base_url": "https://newsapi.org/v2/top-headlines",
                    "api_key": "k",
                    "is_active": True,
                    "last_access": None,
                }
            ]
        )

        sources = NewsStore(client).get_active_sources()

        self.assertEqual(sources[0].adapter_name, "NewsAPI")
        client.table.assert_called_with("news_sources")
        client.eq.assert_called_with("is_active", True)

    def test_update_source_status(self):
        client = create_mock_supabase()

        NewsStore(client).update_source_status(2, True, NOW)

        client.update.assert_called_once_with(
            {"is_active": True, "last_access": NOW.isoformat()}
        )
        client.eq.assert_called_with("id", 2)


class TestCategories(unittest.TestCase):
    def test_find_by_name_is_case_insensitive(self):
        client = create_mock_supabase([{"id": 3, "name": "Sports", "is_hidden": False}])

        category = NewsStore(client).find_category_by_name("sPoRtS")

        self.assertEqual(category.id, 3)

    def test_find_escapes_wildcards(self):
        """ilike wildcards in a label must not match other categories."""
        client = create_mock_supabase([{"id": 9, "name": "Sports", "is_hidden": False}])

        category = NewsStore(client).find_category_by_name("Sp_rts")

        self.assertIsNone(category)
        client.ilike.assert_called_once_with("name", "Sp\\_rts")

    def test_find_missing(self):
        self.assertIsNone(NewsStore(create_mock_supabase([])).find_category_by_name("x"))

    def test_create_category(self):
        client = create_mock_supabase([{"id": 12, "name": "Tech", "is_hidden": False}])

        category = NewsStore(client).create_category("Tech", NOW)

        self.assertEqual(category.id, 12)
        inserted = client.insert.call_args[0][0]
        self.assertEqual(inserted["name"], "Tech")
        self.assertEqual(inserted["created_by_id"], -1)

    def test_default_preferences_are_disabled_and_batched(self):
        users = [{"id": i} for i in range(INSERT_BATCH_SIZE + 5)]
        client = create_mock_supabase()
        client.execute.side_effect = [
            Mock(data=users),
            Mock(data=[]),
            Mock(data=None),
            Mock(data=None),
        ]

        created = NewsStore(client).add_preferences_for_category(12, NOW)

        self.assertEqual(created, INSERT_BATCH_SIZE + 5)
        self.assertEqual(client.insert.call_count, 2)
        first_batch = client.insert.call_args_list[0][0][0]
        self.assertEqual(len(first_batch), INSERT_BATCH_SIZE)
        self.assertTrue(all(row["is_enabled"] is False for row in first_batch))
        self.assertTrue(all(row["category_id"] == 12 for row in first_batch))
        client.eq.assert_any_call("category_id", 12)

    def test_default_preferences_skip_users_with_rows(self):
        """Repeating the seeding only fills in users still missing a row."""
        client = create_mock_supabase()
        client.execute.side_effect = [
            Mock(data=[{"id": 1}, {"id": 2}, {"id": 3}]),
            Mock(data=[{"user_id": 1}, {"user_id": 3}]),
            Mock(data=None),
        ]

        created = NewsStore(client).add_preferences_for_category(12, NOW)

        self.assertEqual(created, 1)
        rows = client.insert.call_args[0][0]
        self.assertEqual([row["user_id"] for row in rows], [2])

    def test_default_preferences_when_all_seeded(self):
        client = create_mock_supabase()
        client.execute.side_effect = [
            Mock(data=[{"id": 1}]),
            Mock(data=[{"user_id": 1}]),
        ]

        self.assertEqual(NewsStore(client).add_preferences_for_category(12, NOW), 0)
        client.insert.assert_not_called()


class TestPreferences(unittest.TestCase):
    def test_keywords_skip_query_without_users(self):
        client = create_mock_supabase()

        self.assertEqual(NewsStore(client).get_keywords([]), [])
        client.table.assert_not_called()

    def test_active_users(self):
        client = create_mock_supabase([{"id": 1, "email": "a@example.com", "is_active": True}])

        users = NewsStore(client).get_active_users([1])

        self.assertEqual(users[0].email, "a@example.com")
        client.in_.assert_called_with("id", [1])


class TestArticlesAndNotifications(unittest.TestCase):
    def test_save_articles_returns_ids(self):
        client = create_mock_supabase([{"id": 40}, {"id": 41}])
        articles = [
            create_test_article(article_id=None, title="One"),
            create_test_article(article_id=None, title="Two"),
        ]

        saved = NewsStore(client).save_articles(articles)

        self.assertEqual([a.id for a in saved], [40, 41])
        self.assertEqual([a.title for a in saved], ["One", "Two"])
        self.assertIsNone(articles[0].id)
        row = client.insert.call_args[0][0][0]
        self.assertNotIn("id", row)
        self.assertEqual(row["created_by_id"], -1)

    def test_save_notifications(self):
        client = create_mock_supabase()
        notification = Notification(user_id=1, title="Alert", message="<b>x</b>", created_at=NOW)

        self.assertEqual(NewsStore(client).save_notifications([notification]), 1)
        row = client.insert.call_args[0][0][0]
        self.assertFalse(row["is_read"])

    def test_save_no_notifications(self):
        client = create_mock_supabase()

        self.assertEqual(NewsStore(client).save_notifications([]), 0)
        client.insert.assert_not_called()


if __name__ == "__main__":
    unittest.main()
