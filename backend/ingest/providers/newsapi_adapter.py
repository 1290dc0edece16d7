from typing import Any

from ingest.providers.base import NewsProviderAdapter
from models.source import ProviderKind


class NewsApiAdapter(NewsProviderAdapter):
    """newsapi.org top-headlines endpoint."""

    name = "NewsAPI"
    kind = ProviderKind.NEWS_API

    def build_params(self, country: str, category: str) -> dict[str, Any]:
        return {
            "country": country,
            "category": category,
            "apiKey": self.source.api_key,
        }
