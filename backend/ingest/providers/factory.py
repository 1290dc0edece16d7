"""
Adapter factory: resolves a provider adapter by kind or by name.

Unknown kinds and names are configuration errors and fail fast.
"""

import requests

from ingest.providers.base import NewsProviderAdapter
from ingest.providers.newsapi_adapter import NewsApiAdapter
from ingest.providers.thenewsapi_adapter import TheNewsApiAdapter
from models.source import NewsSourceConfig, ProviderKind

ADAPTERS_BY_KIND: dict[ProviderKind, type[NewsProviderAdapter]] = {
    ProviderKind.NEWS_API: NewsApiAdapter,
    ProviderKind.THE_NEWS_API: TheNewsApiAdapter,
}

# Name lookup is case-sensitive
ADAPTERS_BY_NAME: dict[str, type[NewsProviderAdapter]] = {
    adapter.name: adapter for adapter in ADAPTERS_BY_KIND.values()
}


class UnknownProviderError(LookupError):
    """No adapter is registered for the requested provider."""


class ProviderAdapterFactory:
    def __init__(
        self,
        sources: list[NewsSourceConfig],
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ):
        self.sources_by_adapter = {source.adapter_name: source for source in sources}
        self.session = session or requests.Session()
        self.timeout = timeout

    def create_adapter(self, kind: ProviderKind) -> NewsProviderAdapter:
        adapter_class = ADAPTERS_BY_KIND.get(kind)
        if adapter_class is None:
            raise UnknownProviderError(f"No adapter found for news source type: {kind}")
        return self._build(adapter_class)

    def create_adapter_by_name(self, name: str) -> NewsProviderAdapter:
        adapter_class = ADAPTERS_BY_NAME.get(name)
        if adapter_class is None:
            raise UnknownProviderError(f"No adapter found with name: {name}")
        return self._build(adapter_class)

    def _build(self, adapter_class: type[NewsProviderAdapter]) -> NewsProviderAdapter:
        source = self.sources_by_adapter.get(adapter_class.name)
        if source is None:
            raise UnknownProviderError(
                f"No news source configured for adapter: {adapter_class.name}"
            )
        return adapter_class(source, session=self.session, timeout=self.timeout)
