"""Pydantic models for news provider (source) configuration."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from models.types import SourceID


class ProviderKind(Enum):
    """Closed set of providers with an in-tree adapter.

    Values match the source ids seeded in the store.
    """

    THE_NEWS_API = 1
    NEWS_API = 2


class NewsSourceConfig(BaseModel):
    """A configured news provider row.

    ``adapter_name`` binds the row to a provider adapter ("NewsAPI",
    "TheNewsAPI").
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: SourceID
    name: str = Field(..., min_length=1)
    adapter_name: str = Field(..., min_length=1)
    base_url: str = Field(..., min_length=1)
    api_key: str = ""
    is_active: bool = True
    last_access: datetime | None = None
