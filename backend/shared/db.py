from supabase import create_client, Client
from dotenv import load_dotenv
import os

from shared.store import NewsStore

load_dotenv()


class StoreConfigurationError(ValueError):
    """Store connection settings are missing."""


def get_supabase_client() -> Client:
    """Get an initialized Supabase client from SUPABASE_URL / SUPABASE_SERVICE_KEY."""
    url: str | None = os.getenv("SUPABASE_URL")
    key: str | None = os.getenv("SUPABASE_SERVICE_KEY")

    if not url or not key:
        missing = [name for name, value in (("SUPABASE_URL", url), ("SUPABASE_SERVICE_KEY", key)) if not value]
        raise StoreConfigurationError(f"Missing store settings: {', '.join(missing)}")

    return create_client(url, key)


def get_news_store() -> NewsStore:
    return NewsStore(get_supabase_client())
