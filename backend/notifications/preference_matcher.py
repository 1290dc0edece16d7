"""
Preference matching for new-article alerts.

Matches a batch of freshly fetched articles against every user's enabled
category preferences and renders one notification (and one email) per user
with at least one match.
"""

from collections import defaultdict
from typing import Iterable

from models.article import Article, Category
from models.notification import (
    CategoryPreference,
    Notification,
    NotificationPreference,
    UserKeyword,
    UserPreferences,
)
from models.run import MatchResult
from models.types import SYSTEM_USER_ID, CategoryID, KeywordID, UserID
from notifications.email_renderer import (
    NOTIFICATION_TITLE,
    build_email_payload,
    build_notification_message,
)
from shared.clock import Clock
from shared.store import NewsStore


def match_articles_to_preferences(
    articles: list[Article],
    preferences: list[UserPreferences],
    article_base_url: str,
    clock: Clock,
) -> MatchResult:
    """
    Build notifications and email payloads for every user with matches.

    Within one category preference, keywords are OR-ed. Across a user's
    preferences, matched articles are unioned and de-duplicated.

    Args:
        articles: Saved articles from this run
        preferences: Enabled preferences grouped per user
        article_base_url: Base URL for canonical article links
        clock: Clock used to stamp the notifications

    Returns:
        MatchResult with notifications and emails (users without an email
        address get the notification only)
    """
    result = MatchResult()

    for user in preferences:
        matched: list[Article] = []
        for category in user.categories:
            matched.extend(_articles_for_category(category, articles))

        distinct = _dedupe(matched)
        if not distinct:
            continue

        notification = Notification(
            user_id=user.user_id,
            title=NOTIFICATION_TITLE,
            message=build_notification_message(distinct, article_base_url),
            is_read=False,
            created_by_id=SYSTEM_USER_ID,
            created_at=clock.now(),
        )
        result.notifications.append(notification)

        if user.email:
            result.emails.append(build_email_payload(user.email, notification))

    return result


def _articles_for_category(
    category: CategoryPreference, articles: list[Article]
) -> list[Article]:
    """
    Articles matched by one category preference.

    With keywords: any keyword (trimmed, case-insensitive) contained in
    title + description. Without usable keywords: category name equality.
    """
    keywords = _normalize_keywords(category.keywords)
    if keywords:
        return [
            article
            for article in articles
            if any(keyword in _searchable_text(article) for keyword in keywords)
        ]

    wanted = category.name.strip().lower()
    return [
        article
        for article in articles
        if article.category_name.strip().lower() == wanted
    ]


def _normalize_keywords(keywords: Iterable[str]) -> list[str]:
    return [keyword.strip().lower() for keyword in keywords if keyword and keyword.strip()]


def _searchable_text(article: Article) -> str:
    return f"{article.title or ''} {article.description or ''}".lower()


def _dedupe(articles: list[Article]) -> list[Article]:
    """Keep first occurrence of each article. Unsaved articles compare by object."""
    seen: set[object] = set()
    distinct: list[Article] = []
    for article in articles:
        key: object = article.id if article.id is not None else id(article)
        if key in seen:
            continue
        seen.add(key)
        distinct.append(article)
    return distinct


def group_preferences(
    rows: list[NotificationPreference],
    categories: list[Category],
    keywords: list[UserKeyword],
    emails: dict[UserID, str | None],
) -> list[UserPreferences]:
    """
    Group enabled preference rows into one UserPreferences per user.

    Rows for hidden or unknown categories, disabled rows, and rows of users
    missing from ``emails`` (inactive users) are dropped. Keyword rows
    contribute their keyword text to the category's keyword list.
    """
    categories_by_id: dict[CategoryID, Category] = {c.id: c for c in categories}
    keywords_by_id: dict[KeywordID, UserKeyword] = {k.id: k for k in keywords}

    grouped: dict[UserID, dict[CategoryID, list[str]]] = defaultdict(dict)
    for row in rows:
        if not row.is_enabled or row.user_id not in emails:
            continue
        category = categories_by_id.get(row.category_id)
        if category is None or category.is_hidden:
            continue

        category_keywords = grouped[row.user_id].setdefault(row.category_id, [])
        if row.keyword_id is not None:
            keyword = keywords_by_id.get(row.keyword_id)
            if keyword and keyword.keyword and keyword.keyword not in category_keywords:
                category_keywords.append(keyword.keyword)

    return [
        UserPreferences(
            user_id=user_id,
            email=emails[user_id],
            categories=[
                CategoryPreference(
                    category_id=category_id,
                    name=categories_by_id[category_id].name,
                    keywords=category_keywords,
                )
                for category_id, category_keywords in user_categories.items()
            ],
        )
        for user_id, user_categories in grouped.items()
    ]


def load_enabled_preferences(store: NewsStore) -> list[UserPreferences]:
    """Read enabled preferences of active users from the store."""
    rows = store.get_enabled_preference_rows()
    if not rows:
        return []

    user_ids = sorted({row.user_id for row in rows})
    users = store.get_active_users(user_ids)
    emails: dict[UserID, str | None] = {user.id: user.email for user in users}

    return group_preferences(
        rows,
        store.get_categories(),
        store.get_keywords(user_ids),
        emails,
    )
