"""
CLI entry point for the news fetch pipeline.

Usage:
    # Run one fetch cycle (fetch, match preferences, notify)
    uv run python main.py

    # Keep running every FETCH_INTERVAL_MINUTES
    uv run python main.py --loop

    # Preview one provider: fetch and print, without writing to the store
    uv run python main.py --provider NewsAPI
"""

import argparse
import time
from datetime import datetime

import requests

from config.settings import Settings, load_settings
from ingest.providers.factory import ProviderAdapterFactory
from ingest.providers.registry import (
    ProviderBinding,
    build_provider_registry,
    fetch_from_provider,
)
from models.run import RunResult
from notifications.email_dispatcher import BulkEmailDispatcher
from processing.category_resolver import CategoryResolver
from scheduler.fetch_orchestrator import FetchOrchestrator
from shared.clock import SystemClock
from shared.db import get_news_store
from shared.run_context import RunContext
from shared.store import NewsStore


def build_pipeline(
    settings: Settings, store: NewsStore, read_only: bool = False
) -> tuple[dict[str, ProviderBinding], FetchOrchestrator]:
    """
    Wire the provider registry and orchestrator from settings.

    With ``read_only`` the category resolver never creates categories or
    default preferences, for previews that must leave the store untouched.
    """
    clock = SystemClock()
    session = requests.Session()

    resolver = CategoryResolver(
        store,
        clock,
        settings.topic_prediction_url,
        session=session,
        timeout=settings.http_timeout_seconds,
        read_only=read_only,
    )
    sources = store.get_active_sources()
    factory = ProviderAdapterFactory(
        sources, session=session, timeout=settings.http_timeout_seconds
    )
    registry = build_provider_registry(
        sources, settings.provider_order, factory, resolver, clock
    )
    dispatcher = BulkEmailDispatcher(
        settings.from_email,
        max_workers=settings.email_max_workers,
        api_key=settings.resend_api_key,
    )
    orchestrator = FetchOrchestrator(
        registry,
        store,
        dispatcher,
        clock,
        settings.article_base_url,
        country=settings.country,
        category=settings.category,
        deadline_seconds=settings.run_deadline_seconds,
    )
    return registry, orchestrator


def run_loop(orchestrator: FetchOrchestrator, interval_minutes: int) -> None:
    """Trigger a run every ``interval_minutes`` until interrupted."""
    print(f"[{datetime.now()}] Scheduling fetch runs every {interval_minutes} minutes")
    while True:
        orchestrator.run()
        time.sleep(interval_minutes * 60)


def main() -> RunResult | None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Fetch news articles and send new-article alerts"
    )
    parser.add_argument(
        "--loop",
        action="store_true",
        help="Run repeatedly every FETCH_INTERVAL_MINUTES",
    )
    parser.add_argument(
        "--provider",
        type=str,
        help=(
            "Only fetch from this provider (e.g. NewsAPI) and print the articles. "
            "Nothing is written: no articles, categories, preferences or alerts"
        ),
    )
    args = parser.parse_args()

    settings = load_settings()
    store = get_news_store()
    registry, orchestrator = build_pipeline(settings, store, read_only=bool(args.provider))

    if args.provider:
        articles = fetch_from_provider(
            registry,
            args.provider,
            settings.country,
            settings.category,
            RunContext(settings.run_deadline_seconds),
        )
        for article in articles:
            print(f"  - [{article.category_name}] {article.title}")
        return None

    if args.loop:
        run_loop(orchestrator, settings.fetch_interval_minutes)
        return None

    return orchestrator.run()


if __name__ == "__main__":
    main()
