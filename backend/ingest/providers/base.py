"""
Provider adapter contract.

An adapter knows how to call one provider's article-search endpoint and
nothing else: it returns the raw response body and leaves interpretation to
the matching response strategy.
"""

from abc import ABC, abstractmethod
from typing import Any

import requests

from models.source import NewsSourceConfig, ProviderKind
from shared.run_context import RunContext


class ProviderFetchError(Exception):
    """Provider answered with a non-success status."""

    def __init__(self, provider_name: str, status_code: int, message: str = ""):
        self.provider_name = provider_name
        self.status_code = status_code
        super().__init__(
            f"Failed to fetch news from source: {provider_name}, "
            f"With Status Code: {status_code}, and Message: {message[:500]}"
        )


class NewsProviderAdapter(ABC):
    """Base adapter: one outbound GET per fetch, raw body returned untouched."""

    name: str
    kind: ProviderKind

    def __init__(
        self,
        source: NewsSourceConfig,
        session: requests.Session | None = None,
        timeout: float = 30.0,
    ):
        self.source = source
        self.session = session or requests.Session()
        self.timeout = timeout

    @abstractmethod
    def build_params(self, country: str, category: str) -> dict[str, Any]:
        """Query parameters for the provider's search endpoint."""
        pass

    def fetch(
        self,
        country: str = "us",
        category: str = "",
        context: RunContext | None = None,
    ) -> list[str]:
        """Fetch raw response bodies. Raises on transport errors and bad status."""
        timeout = self.timeout
        if context is not None:
            context.check(f"fetching from {self.name}")
            timeout = context.timeout(self.timeout)

        print(f"→ Fetching {self.name} (country={country}, category={category or '-'})")
        response = self.session.get(
            self.source.base_url,
            params=self.build_params(country, category),
            timeout=timeout,
        )
        if response.status_code >= 400:
            raise ProviderFetchError(self.name, response.status_code, response.text)

        print(f"  ✓ {self.name} responded {response.status_code}")
        return [response.text]
