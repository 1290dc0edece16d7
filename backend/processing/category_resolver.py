"""
Topic classification and category resolution for incoming articles.

Predictions come from an external HTTP classifier. Any failure there is
treated as "no prediction" and the article lands in the catch-all "All"
category. Store failures are different: an article without a valid category
id cannot be saved, so they surface as CategoryResolutionError.
"""

import requests
from pydantic import ValidationError

from models.article import Category
from models.provider_payloads import TopicPredictionRequest, TopicPredictionResponse
from models.types import CategoryID
from shared.clock import Clock
from shared.run_context import RunContext
from shared.store import NewsStore

CATCH_ALL_CATEGORY = "All"

# Id carried by categories a read-only resolver has not found in the store
UNSAVED_CATEGORY_ID = CategoryID(0)


class CategoryResolutionError(Exception):
    """The store could not look up or create a category."""

    def __init__(self, label: str, cause: Exception):
        self.label = label
        super().__init__(f"Could not resolve category '{label}': {cause}")


class CategoryResolver:
    """Classifier client plus lookup-or-create of categories by name."""

    def __init__(
        self,
        store: NewsStore,
        clock: Clock,
        prediction_url: str,
        session: requests.Session | None = None,
        timeout: float = 30.0,
        read_only: bool = False,
    ):
        self.store = store
        self.clock = clock
        self.prediction_url = prediction_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self.read_only = read_only
        self._cache: dict[str, Category] = {}

    def predict(self, text: str, context: RunContext | None = None) -> str:
        """Ask the classifier for a topic label. Returns "" when it cannot answer."""
        timeout = self.timeout
        if context is not None:
            context.check("topic prediction")
            timeout = context.timeout(self.timeout)

        payload = TopicPredictionRequest(text=text).model_dump()
        try:
            response = self.session.post(
                self.prediction_url, json=payload, timeout=timeout
            )
        except requests.RequestException as e:
            print(f"  ⚠ Topic classifier unreachable: {e}")
            return ""

        if not response.ok:
            print(f"  ⚠ Topic classifier returned {response.status_code}")
            return ""

        try:
            prediction = TopicPredictionResponse.model_validate_json(response.text)
        except ValidationError:
            print("  ⚠ Topic classifier returned an unreadable body")
            return ""

        return (prediction.topic or CATCH_ALL_CATEGORY).strip()

    def lookup_or_create(self, label: str | None) -> Category:
        """
        Find the category named ``label`` (ignoring case), creating it if absent.

        The first resolution of a label also fills in missing default
        preference rows, which repairs a category whose seeding was cut short
        by an earlier failed run. A read-only resolver never writes: unknown
        labels come back as an unsaved category with id UNSAVED_CATEGORY_ID.
        """
        name = (label or "").strip() or CATCH_ALL_CATEGORY
        key = name.lower()
        if key in self._cache:
            return self._cache[key]

        try:
            category = self.store.find_category_by_name(name)
            if self.read_only:
                category = category or Category(id=UNSAVED_CATEGORY_ID, name=name.title())
            else:
                if category is None:
                    category = self.store.create_category(name.title(), self.clock.now())
                    print(f"  ✓ Created category '{category.name}' (id {category.id})")
                seeded = self.store.add_preferences_for_category(category.id, self.clock.now())
                if seeded:
                    print(f"  ✓ Added {seeded} default preference(s) for '{category.name}'")
        except Exception as e:
            raise CategoryResolutionError(name, e) from e

        self._cache[key] = category
        return category

    def resolve_category(self, label: str | None) -> CategoryID:
        return self.lookup_or_create(label).id
