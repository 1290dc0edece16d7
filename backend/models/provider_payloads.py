"""Pydantic models for raw provider response envelopes.

Every field is optional: providers omit fields freely and a missing value must
become None rather than a validation error.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Envelope(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class NewsApiSource(_Envelope):
    id: str | None = None
    name: str | None = None


class NewsApiArticle(_Envelope):
    """One entry of a NewsAPI ``articles`` array."""

    author: str | None = None
    title: str | None = None
    description: str | None = None
    url: str | None = None
    url_to_image: str | None = Field(None, alias="urlToImage")
    published_at: str | None = Field(None, alias="publishedAt")
    content: str | None = None
    source: NewsApiSource | None = None


class NewsApiResponse(_Envelope):
    """NewsAPI envelope: top-level ``articles`` array."""

    status: str | None = None
    total_results: int | None = Field(None, alias="totalResults")
    # Raw entries; strategies validate each one on its own so a single bad
    # entry does not discard the batch
    articles: list[Any] = Field(default_factory=list)

    @field_validator("articles", mode="before")
    @classmethod
    def _null_articles(cls, value: Any) -> Any:
        return [] if value is None else value


class TheNewsApiMeta(_Envelope):
    """Pagination block of a TheNewsAPI response."""

    found: int | None = None
    returned: int | None = None
    limit: int | None = None
    page: int | None = None


class TheNewsApiArticle(_Envelope):
    """One entry of a TheNewsAPI ``data`` array. ``snippet`` stands in for content."""

    uuid: str | None = None
    title: str | None = None
    description: str | None = None
    keywords: str | None = None
    snippet: str | None = None
    url: str | None = None
    image_url: str | None = None
    language: str | None = None
    published_at: str | None = None
    source: str | None = None
    categories: list[str | None] = Field(default_factory=list)
    relevance_score: float | None = None
    locale: str | None = None

    @field_validator("categories", mode="before")
    @classmethod
    def _null_categories(cls, value: Any) -> Any:
        return [] if value is None else value


class TheNewsApiResponse(_Envelope):
    """TheNewsAPI envelope: top-level ``data`` array plus ``meta``."""

    meta: TheNewsApiMeta | None = None
    # Raw entries, validated one by one like NewsApiResponse.articles
    data: list[Any] = Field(default_factory=list)

    @field_validator("data", mode="before")
    @classmethod
    def _null_data(cls, value: Any) -> Any:
        return [] if value is None else value


class TopicPredictionRequest(_Envelope):
    """Body posted to the topic classifier."""

    text: str = ""


class TopicPredictionResponse(_Envelope):
    """Classifier answer. ``topic`` may be missing."""

    topic: str | None = None
