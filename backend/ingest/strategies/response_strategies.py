"""
Response strategies for the different provider payload formats.
Each strategy knows how to turn one provider's raw response body into
normalized articles with a resolved category.
"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from ingest.providers.factory import UnknownProviderError
from models.article import Article
from models.provider_payloads import (
    NewsApiArticle,
    NewsApiResponse,
    TheNewsApiArticle,
    TheNewsApiResponse,
)
from models.source import NewsSourceConfig
from models.types import SYSTEM_USER_ID
from processing.category_resolver import CategoryResolver
from shared.clock import Clock
from shared.run_context import RunContext
from shared.utils import parse_datetime

EntryModel = TypeVar("EntryModel", bound=BaseModel)


class ResponseStrategy(ABC):
    """Base strategy for parsing a provider response"""

    provider_name: str

    def __init__(self, resolver: CategoryResolver, clock: Clock):
        self.resolver = resolver
        self.clock = clock

    @abstractmethod
    def process(
        self,
        raw_text: str,
        source: NewsSourceConfig,
        context: RunContext | None = None,
    ) -> list[Article]:
        """
        Parse a raw response body into normalized articles.

        Malformed or empty bodies yield an empty list, never an exception.
        """
        pass

    def _validate_entries(
        self,
        raw_entries: list[Any],
        entry_model: type[EntryModel],
        source: NewsSourceConfig,
    ) -> list[EntryModel]:
        """Validate entries one by one, skipping those that do not fit the schema."""
        entries: list[EntryModel] = []
        for index, raw_entry in enumerate(raw_entries):
            try:
                entries.append(entry_model.model_validate(raw_entry))
            except ValidationError:
                print(f"  ⚠ Skipping unreadable {self.provider_name} entry #{index} from {source.name}")
        return entries

    def _build_article(
        self,
        label: str | None,
        *,
        title: str | None,
        description: str | None,
        url: str | None,
        image_url: str | None,
        published_at: datetime | None,
        source_name: str | None,
        author: str | None,
        content: str | None,
    ) -> Article:
        category = self.resolver.lookup_or_create(label)
        return Article(
            title=title or "",
            description=description,
            url=url,
            image_url=image_url,
            published_at=published_at,
            source_name=source_name,
            author=author,
            content=content,
            category_id=category.id,
            category_name=category.name,
            created_by_id=SYSTEM_USER_ID,
            created_at=self.clock.now(),
        )


class NewsApiResponseStrategy(ResponseStrategy):
    """NewsAPI: ``articles`` array, no categories, so every entry is classified."""

    provider_name = "NewsAPI"

    def process(
        self,
        raw_text: str,
        source: NewsSourceConfig,
        context: RunContext | None = None,
    ) -> list[Article]:
        try:
            envelope = NewsApiResponse.model_validate_json(raw_text or "")
        except ValidationError:
            print(f"  ⚠ Unreadable {self.provider_name} payload from {source.name}, treating as empty")
            envelope = NewsApiResponse()

        entries = self._validate_entries(envelope.articles, NewsApiArticle, source)
        return [self._process_entry(entry, context) for entry in entries]

    def _process_entry(
        self, entry: NewsApiArticle, context: RunContext | None
    ) -> Article:
        label = self.resolver.predict(f"{entry.content or ''}{entry.title or ''}", context)
        return self._build_article(
            label,
            title=entry.title,
            description=entry.description,
            url=entry.url,
            image_url=entry.url_to_image,
            published_at=parse_datetime(entry.published_at),
            source_name=entry.source.name if entry.source else None,
            author=entry.author,
            content=entry.content,
        )


class TheNewsApiResponseStrategy(ResponseStrategy):
    """TheNewsAPI: ``data`` array; provider categories win over prediction."""

    provider_name = "TheNewsAPI"

    def process(
        self,
        raw_text: str,
        source: NewsSourceConfig,
        context: RunContext | None = None,
    ) -> list[Article]:
        try:
            envelope = TheNewsApiResponse.model_validate_json(raw_text or "")
        except ValidationError:
            print(f"  ⚠ Unreadable {self.provider_name} payload from {source.name}, treating as empty")
            envelope = TheNewsApiResponse()

        entries = self._validate_entries(envelope.data, TheNewsApiArticle, source)
        return [self._process_entry(entry, context) for entry in entries]

    def _process_entry(
        self, entry: TheNewsApiArticle, context: RunContext | None
    ) -> Article:
        label = _first_label(entry.categories)
        if not label:
            label = self.resolver.predict(f"{entry.snippet or ''}{entry.title or ''}", context)

        return self._build_article(
            label,
            title=entry.title,
            description=entry.description,
            url=entry.url,
            image_url=entry.image_url,
            published_at=parse_datetime(entry.published_at),
            source_name=entry.source,
            author=None,
            content=entry.snippet,
        )


def _first_label(categories: list[str | None]) -> str:
    """First non-blank provider category, trimmed."""
    for category in categories:
        if category and category.strip():
            return category.strip()
    return ""


STRATEGIES_BY_PROVIDER: dict[str, type[ResponseStrategy]] = {
    NewsApiResponseStrategy.provider_name: NewsApiResponseStrategy,
    TheNewsApiResponseStrategy.provider_name: TheNewsApiResponseStrategy,
}


def get_strategy_for_provider(
    provider_name: str, resolver: CategoryResolver, clock: Clock
) -> ResponseStrategy:
    """Select the response strategy paired with a provider adapter"""
    strategy_class = STRATEGIES_BY_PROVIDER.get(provider_name)
    if strategy_class is None:
        raise UnknownProviderError(f"No response strategy for provider: {provider_name}")
    return strategy_class(resolver, clock)
