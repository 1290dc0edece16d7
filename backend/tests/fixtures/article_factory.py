"""Factory functions for creating test article and provider payload data."""

import json
from datetime import datetime, timezone
from typing import Any

from models.article import Article, Category
from models.source import NewsSourceConfig


def create_test_article(
    article_id: int | None = 1,
    title: str = "Test Article",
    description: str | None = "Test description",
    category_id: int = 1,
    category_name: str = "General",
    **overrides,
) -> Article:
    """Factory for creating a normalized article."""
    fields: dict[str, Any] = {
        "id": article_id,
        "title": title,
        "description": description,
        "url": f"https://news.example.com/{article_id}",
        "image_url": None,
        "published_at": datetime(2026, 1, 24, 9, 0, tzinfo=timezone.utc),
        "source_name": "Example News",
        "author": None,
        "content": "Body text",
        "category_id": category_id,
        "category_name": category_name,
        "created_at": datetime(2026, 1, 24, 12, 0, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return Article(**fields)


def create_test_category(category_id: int = 1, name: str = "General", **overrides) -> Category:
    fields: dict[str, Any] = {"id": category_id, "name": name}
    fields.update(overrides)
    return Category(**fields)


def create_test_source(
    source_id: int = 2,
    name: str = "News API",
    adapter_name: str = "NewsAPI",
    base_url: str = "https://newsapi.org/v2/top-headlines",
    api_key: str = "test-key",
    is_active: bool = True,
    **overrides,
) -> NewsSourceConfig:
    fields: dict[str, Any] = {
        "id": source_id,
        "name": name,
        "adapter_name": adapter_name,
        "base_url": base_url,
        "api_key": api_key,
        "is_active": is_active,
    }
    fields.update(overrides)
    return NewsSourceConfig(**fields)


def create_newsapi_payload(entries: list[dict[str, Any]] | None = None) -> str:
    """Raw NewsAPI response body."""
    articles = entries if entries is not None else [
        {
            "source": {"id": None, "name": "Example News"},
            "author": "Jane Reporter",
            "title": "Markets rally",
            "description": "Stocks climbed on Friday",
            "url": "https://news.example.com/markets",
            "urlToImage": "https://news.example.com/markets.png",
            "publishedAt": "2026-01-24T10:00:00Z",
            "content": "Stocks climbed...",
        }
    ]
    return json.dumps({"status": "ok", "totalResults": len(articles), "articles": articles})


def create_thenewsapi_payload(entries: list[dict[str, Any]] | None = None) -> str:
    """Raw TheNewsAPI response body."""
    data = entries if entries is not None else [
        {
            "uuid": "abc-123",
            "title": "Cup final tonight",
            "description": "Preview of the final",
            "keywords": "",
            "snippet": "The final kicks off...",
            "url": "https://news.example.com/final",
            "image_url": "https://news.example.com/final.png",
            "language": "en",
            "published_at": "2026-01-24T08:30:00.000000Z",
            "source": "sports.example.com",
            "categories": ["sports"],
            "relevance_score": None,
            "locale": "us",
        }
    ]
    return json.dumps(
        {"meta": {"found": len(data), "returned": len(data), "limit": 3, "page": 1}, "data": data}
    )
