from datetime import datetime
from dateutil import parser as date_parser

from models.run import RunResult


def parse_datetime(date_str: str | None) -> datetime | None:
    """Parse provider date strings of any common format, None if unparseable."""
    if not date_str:
        return None
    try:
        return date_parser.parse(date_str)
    except (ValueError, OverflowError, TypeError):
        return None


def print_run_summary(result: RunResult) -> None:
    """Print fetch run summary."""
    print(f"\n{'=' * 60}")
    print(f"[{result.finished_at or datetime.now()}] Fetch Run {result.run_id} Complete!")
    print(f"{'=' * 60}")
    print(f"Status:        {result.status.value}")
    print(f"Provider:      {result.provider or '-'}")
    print(f"✓ Articles:      {result.articles_fetched}")
    print(f"✓ Notifications: {result.notifications_generated}")
    print(f"✓ Emails sent:   {result.emails_sent}")
    print(f"✗ Emails failed: {result.emails_failed}")
    if result.failed_providers:
        print(f"✗ Failed providers: {', '.join(result.failed_providers)}")
    print(f"{'=' * 60}\n")
