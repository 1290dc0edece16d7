from typing import Any

from ingest.providers.base import NewsProviderAdapter
from models.source import ProviderKind

# Free plan returns at most three articles per request
PAGE_LIMIT = 3


class TheNewsApiAdapter(NewsProviderAdapter):
    """thenewsapi.com headlines endpoint. Country is sent as ``locale``."""

    name = "TheNewsAPI"
    kind = ProviderKind.THE_NEWS_API

    def build_params(self, country: str, category: str) -> dict[str, Any]:
        params: dict[str, Any] = {
            "locale": country,
            "limit": PAGE_LIMIT,
            "api_token": self.source.api_key,
        }
        if category:
            params["categories"] = category
        return params
