"""
Fetch orchestrator: one scheduled run of the news pipeline.

Providers are tried in registry order. The first provider that yields at
least one article wins: its articles are saved, matched against user
preferences, and the resulting notifications and emails are delivered.
Later providers are not attempted in the same run. Provider failures are
recovered locally; a store failure or a cancellation ends the run with a
failed or cancelled result instead of raising.
"""

import threading
import uuid

from ingest.providers.registry import ProviderBinding
from models.article import Article
from models.run import RunResult, RunStatus
from models.types import ProviderName
from notifications.email_dispatcher import BulkEmailDispatcher
from notifications.error_logger import log_pipeline_error
from notifications.preference_matcher import (
    load_enabled_preferences,
    match_articles_to_preferences,
)
from processing.category_resolver import CategoryResolutionError
from shared.clock import Clock
from shared.run_context import RunCancelledError, RunContext
from shared.store import NewsStore
from shared.utils import print_run_summary


class FetchOrchestrator:
    def __init__(
        self,
        providers: dict[ProviderName, ProviderBinding],
        store: NewsStore,
        dispatcher: BulkEmailDispatcher,
        clock: Clock,
        article_base_url: str,
        country: str = "us",
        category: str = "",
        deadline_seconds: float | None = None,
    ):
        self.providers = providers
        self.store = store
        self.dispatcher = dispatcher
        self.clock = clock
        self.article_base_url = article_base_url
        self.country = country
        self.category = category
        self.deadline_seconds = deadline_seconds
        self._run_lock = threading.Lock()

    def run(self, context: RunContext | None = None) -> RunResult:
        """
        Execute one fetch run. Overlapping calls return immediately.

        Args:
            context: Optional cancellation/deadline context. A fresh one is
                created from ``deadline_seconds`` when omitted.

        Returns:
            RunResult describing what happened
        """
        if not self._run_lock.acquire(blocking=False):
            print("⚠ Fetch run already in progress, skipping this trigger")
            now = self.clock.now()
            return RunResult(
                run_id=_new_run_id(),
                status=RunStatus.SKIPPED_OVERLAP,
                started_at=now,
                finished_at=now,
            )

        try:
            return self._execute(context or RunContext(self.deadline_seconds))
        finally:
            self._run_lock.release()

    def _execute(self, context: RunContext) -> RunResult:
        result = RunResult(run_id=_new_run_id(), started_at=self.clock.now())
        print(f"[{result.started_at}] Starting fetch run {result.run_id}...")

        try:
            self._run_providers(result, context)
        except RunCancelledError as e:
            print(f"⚠ Fetch run {result.run_id} stopped: {e}")
            result.status = RunStatus.CANCELLED
            result.error = str(e)
        except Exception as e:
            # Category lookups and every store write after the winning fetch
            result.status = RunStatus.FAILED
            result.error = str(e)
            error_file = log_pipeline_error(
                error_type="run",
                error_message=f"{type(e).__name__}: {e}",
                context={
                    "run_id": result.run_id,
                    "provider": result.provider,
                    "articles_fetched": result.articles_fetched,
                    "notifications_generated": result.notifications_generated,
                },
            )
            print(f"✗ Fetch run {result.run_id} failed. Details logged to: {error_file}")

        result.finished_at = self.clock.now()
        print_run_summary(result)
        return result

    def _run_providers(self, result: RunResult, context: RunContext) -> None:
        for name, binding in self.providers.items():
            context.check(f"fetching from {name}")
            result.provider = name
            try:
                articles = binding.fetch_articles(self.country, self.category, context)
            except (RunCancelledError, CategoryResolutionError):
                raise
            except Exception as e:
                result.failed_providers.append(name)
                error_file = log_pipeline_error(
                    error_type="fetch",
                    error_message=str(e),
                    context={"run_id": result.run_id, "provider": name},
                )
                print(f"  ✗ {name} failed: {e}")
                print(f"    Error details logged to: {error_file}")
                continue

            if not articles:
                print(f"  ⊘ {name} returned no articles")
                continue

            print(f"  ✓ Fetched {len(articles)} articles using {name}")
            self._notify(binding, articles, result, context)
            result.status = RunStatus.SUCCEEDED
            return

        result.provider = None
        result.status = RunStatus.NO_ARTICLES
        print("⚠ No active news source returned any articles")

    def _notify(
        self,
        binding: ProviderBinding,
        articles: list[Article],
        result: RunResult,
        context: RunContext,
    ) -> None:
        """Persist the winning batch, then generate and deliver alerts."""
        context.check("saving articles")
        saved = self.store.save_articles(articles)
        self.store.update_source_status(binding.source.id, True, self.clock.now())
        result.articles_fetched = len(saved)

        preferences = load_enabled_preferences(self.store)
        match = match_articles_to_preferences(
            saved, preferences, self.article_base_url, self.clock
        )

        # Last point where the run can stop without leaving partial alerts
        context.check("saving notifications")
        result.notifications_generated = self.store.save_notifications(match.notifications)
        print(f"  ✓ Saved {result.notifications_generated} notifications")

        dispatch = self.dispatcher.send_bulk(match.emails, context)
        result.emails_sent = dispatch.sent_count
        result.emails_failed = dispatch.failed_count


def _new_run_id() -> str:
    return uuid.uuid4().hex[:12]
