"""
Provider registry: the explicit, ordered map from provider name to its
(adapter, strategy) pair, resolved once at startup.

Insertion order is provider priority for failover.
"""

from dataclasses import dataclass

from ingest.providers.base import NewsProviderAdapter
from ingest.providers.factory import (
    ADAPTERS_BY_NAME,
    ProviderAdapterFactory,
    UnknownProviderError,
)
from ingest.strategies.response_strategies import (
    ResponseStrategy,
    get_strategy_for_provider,
)
from models.article import Article
from models.source import NewsSourceConfig
from models.types import ProviderName
from processing.category_resolver import CategoryResolver
from shared.clock import Clock
from shared.run_context import RunContext


@dataclass(frozen=True)
class ProviderBinding:
    name: ProviderName
    adapter: NewsProviderAdapter
    strategy: ResponseStrategy
    source: NewsSourceConfig

    def fetch_articles(
        self,
        country: str = "us",
        category: str = "",
        context: RunContext | None = None,
    ) -> list[Article]:
        """Fetch from the provider and normalize every returned body."""
        articles: list[Article] = []
        for raw_text in self.adapter.fetch(country, category, context):
            articles.extend(self.strategy.process(raw_text, self.source, context))
        return articles


def build_provider_registry(
    sources: list[NewsSourceConfig],
    provider_order: list[ProviderName],
    factory: ProviderAdapterFactory,
    resolver: CategoryResolver,
    clock: Clock,
) -> dict[ProviderName, ProviderBinding]:
    """
    Pair each configured provider with its adapter and strategy.

    Args:
        sources: Active source rows from the store
        provider_order: Provider names, highest priority first
        factory: Adapter factory built over the same sources
        resolver: Category resolver shared by all strategies
        clock: Clock used to stamp article audit fields

    Returns:
        Ordered dict of provider name to binding. Providers without an active
        source row are left out.

    Raises:
        UnknownProviderError: If a name in provider_order has no adapter
    """
    active = {source.adapter_name: source for source in sources if source.is_active}
    registry: dict[ProviderName, ProviderBinding] = {}

    for name in provider_order:
        if name not in ADAPTERS_BY_NAME:
            raise UnknownProviderError(f"No adapter found with name: {name}")
        if name in registry:
            continue
        source = active.get(name)
        if source is None:
            print(f"  ⊘ {name}: no active news source configured, skipping")
            continue

        registry[name] = ProviderBinding(
            name=name,
            adapter=factory.create_adapter_by_name(name),
            strategy=get_strategy_for_provider(name, resolver, clock),
            source=source,
        )

    return registry


def fetch_from_provider(
    registry: dict[ProviderName, ProviderBinding],
    name: ProviderName,
    country: str = "us",
    category: str = "",
    context: RunContext | None = None,
) -> list[Article]:
    """Fetch from one named provider on demand, outside the failover loop."""
    binding = registry.get(name)
    if binding is None:
        raise UnknownProviderError(f"Provider not registered: {name}")

    articles = binding.fetch_articles(country, category, context)
    print(f"  ✓ Fetched {len(articles)} articles using {name}")
    return articles
