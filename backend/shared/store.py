"""
Supabase-backed repository for articles, sources, categories and preferences.

Only the reads and writes the fetch pipeline needs live here; everything
else about the tables is owned by the API service.
"""

from datetime import datetime
from typing import Any, cast

from supabase import Client

from models.article import Article, Category
from models.notification import (
    Notification,
    NotificationPreference,
    UserKeyword,
    UserProfile,
)
from models.source import NewsSourceConfig
from models.types import SYSTEM_USER_ID, CategoryID, SourceID, UserID

# Supabase caps bulk inserts; stay well below it
INSERT_BATCH_SIZE = 100


def _escape_like(value: str) -> str:
    """Escape LIKE wildcards so ilike() compares literally."""
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class NewsStore:
    """Thin repository over the Supabase tables used by the fetch pipeline."""

    def __init__(self, client: Client):
        self.client = client

    # Sources

    def get_active_sources(self) -> list[NewsSourceConfig]:
        response = (
            self.client.table("news_sources")
            .select("id, name, adapter_name, base_url, api_key, is_active, last_access")
            .eq("is_active", True)
            .execute()
        )
        return [NewsSourceConfig(**row) for row in response.data or []]

    def update_source_status(
        self, source_id: SourceID, is_active: bool, last_access: datetime
    ) -> None:
        self.client.table("news_sources").update(
            {"is_active": is_active, "last_access": last_access.isoformat()}
        ).eq("id", source_id).execute()

    # Categories

    def find_category_by_name(self, name: str) -> Category | None:
        """Case-insensitive exact lookup."""
        response = (
            self.client.table("news_categories")
            .select("id, name, is_hidden")
            .ilike("name", _escape_like(name))
            .execute()
        )
        for row in response.data or []:
            if str(row["name"]).strip().lower() == name.strip().lower():
                return Category(**row)
        return None

    def create_category(self, name: str, created_at: datetime) -> Category:
        response = (
            self.client.table("news_categories")
            .insert(
                {
                    "name": name,
                    "is_hidden": False,
                    "created_by_id": SYSTEM_USER_ID,
                    "created_date": created_at.isoformat(),
                }
            )
            .execute()
        )
        return Category(**cast(dict[str, Any], response.data[0]))

    def get_categories(self) -> list[Category]:
        response = (
            self.client.table("news_categories")
            .select("id, name, is_hidden")
            .execute()
        )
        return [Category(**row) for row in response.data or []]

    # Preferences

    def add_preferences_for_category(
        self, category_id: CategoryID, created_at: datetime
    ) -> int:
        """
        Give every user without one a disabled preference row for a category.

        Users who already have any row for the category are skipped, so the
        call can be repeated after an interrupted seeding.

        Returns:
            Number of rows inserted
        """
        users_response = self.client.table("user_profiles").select("id").execute()
        existing_response = (
            self.client.table("notification_preferences")
            .select("user_id")
            .eq("category_id", category_id)
            .execute()
        )
        seeded = {row["user_id"] for row in existing_response.data or []}
        user_ids = [
            row["id"] for row in users_response.data or [] if row["id"] not in seeded
        ]

        created = 0
        for start in range(0, len(user_ids), INSERT_BATCH_SIZE):
            batch = user_ids[start : start + INSERT_BATCH_SIZE]
            rows = [
                {
                    "user_id": user_id,
                    "category_id": category_id,
                    "keyword_id": None,
                    "is_enabled": False,
                    "created_by_id": SYSTEM_USER_ID,
                    "created_date": created_at.isoformat(),
                }
                for user_id in batch
            ]
            self.client.table("notification_preferences").insert(
                rows, returning="minimal"
            ).execute()
            created += len(rows)
        return created

    def get_enabled_preference_rows(self) -> list[NotificationPreference]:
        response = (
            self.client.table("notification_preferences")
            .select("user_id, category_id, keyword_id, is_enabled")
            .eq("is_enabled", True)
            .execute()
        )
        return [NotificationPreference(**row) for row in response.data or []]

    def get_keywords(self, user_ids: list[UserID]) -> list[UserKeyword]:
        if not user_ids:
            return []
        response = (
            self.client.table("user_news_keywords")
            .select("id, user_id, category_id, keyword")
            .in_("user_id", user_ids)
            .execute()
        )
        return [UserKeyword(**row) for row in response.data or []]

    def get_active_users(self, user_ids: list[UserID]) -> list[UserProfile]:
        if not user_ids:
            return []
        response = (
            self.client.table("user_profiles")
            .select("id, email, is_active")
            .in_("id", user_ids)
            .eq("is_active", True)
            .execute()
        )
        return [UserProfile(**row) for row in response.data or []]

    # Articles and notifications

    def save_articles(self, articles: list[Article]) -> list[Article]:
        """Insert articles and return copies carrying their new ids."""
        saved: list[Article] = []
        for start in range(0, len(articles), INSERT_BATCH_SIZE):
            batch = articles[start : start + INSERT_BATCH_SIZE]
            rows = [_article_row(article) for article in batch]
            response = self.client.table("articles").insert(rows).execute()
            for article, row in zip(batch, response.data or []):
                saved.append(article.model_copy(update={"id": row["id"]}))
        return saved

    def save_notifications(self, notifications: list[Notification]) -> int:
        if not notifications:
            return 0
        rows = [_notification_row(notification) for notification in notifications]
        self.client.table("notifications").insert(rows, returning="minimal").execute()
        return len(rows)


def _article_row(article: Article) -> dict[str, Any]:
    return {
        "title": article.title,
        "description": article.description,
        "url": article.url,
        "image_url": article.image_url,
        "published_at": article.published_at.isoformat() if article.published_at else None,
        "source_name": article.source_name,
        "author": article.author,
        "content": article.content,
        "category_id": article.category_id,
        "created_by_id": article.created_by_id,
        "created_date": article.created_at.isoformat(),
    }


def _notification_row(notification: Notification) -> dict[str, Any]:
    return {
        "user_id": notification.user_id,
        "title": notification.title,
        "message": notification.message,
        "is_read": notification.is_read,
        "created_by_id": notification.created_by_id,
        "created_date": notification.created_at.isoformat(),
    }
