"""
Runtime settings for the news fetch pipeline.

All values come from the environment (a local .env file is loaded first).
Numeric values are validated at load time so a bad deployment fails before
the first run rather than halfway through one.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field

DEFAULT_TOPIC_PREDICTION_URL = "http://127.0.0.1:5000/predict-topic"
DEFAULT_PROVIDER_ORDER = "TheNewsAPI,NewsAPI"


class Settings(BaseModel):
    article_base_url: str = "http://localhost:5000"
    topic_prediction_url: str = DEFAULT_TOPIC_PREDICTION_URL
    from_email: str = "news-alerts@example.com"
    resend_api_key: str | None = None
    country: str = "us"
    category: str = ""
    # Single source of truth for the schedule cadence
    fetch_interval_minutes: int = Field(59, ge=1)
    provider_order: list[str] = Field(default_factory=list)
    email_max_workers: int = Field(8, ge=1)
    http_timeout_seconds: float = Field(30.0, gt=0)
    run_deadline_seconds: float | None = Field(None, gt=0)


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


def _parse_number(name: str, default: str, cast: type) -> float | int:
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def load_settings() -> Settings:
    """Build Settings from the environment."""
    load_dotenv()

    deadline_raw = os.getenv("RUN_DEADLINE_SECONDS")
    deadline = (
        _parse_number("RUN_DEADLINE_SECONDS", "", float)
        if deadline_raw and deadline_raw.strip()
        else None
    )

    return Settings(
        article_base_url=os.getenv("ARTICLE_BASE_URL", "http://localhost:5000"),
        topic_prediction_url=os.getenv(
            "TOPIC_PREDICTION_URL", DEFAULT_TOPIC_PREDICTION_URL
        ),
        from_email=os.getenv("NOTIFICATION_FROM_EMAIL", "news-alerts@example.com"),
        resend_api_key=os.getenv("RESEND_API_KEY"),
        country=os.getenv("FETCH_COUNTRY", "us"),
        category=os.getenv("FETCH_CATEGORY", ""),
        fetch_interval_minutes=_parse_number("FETCH_INTERVAL_MINUTES", "59", int),
        provider_order=_split_csv(os.getenv("PROVIDER_ORDER", DEFAULT_PROVIDER_ORDER)),
        email_max_workers=_parse_number("EMAIL_MAX_WORKERS", "8", int),
        http_timeout_seconds=_parse_number("HTTP_TIMEOUT_SECONDS", "30", float),
        run_deadline_seconds=deadline,
    )
