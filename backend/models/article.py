"""Pydantic models for normalized article data."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from models.types import SYSTEM_USER_ID, ArticleID, CategoryID, UserID


class Article(BaseModel):
    """Normalized article produced by every provider strategy.

    ``id`` is None until the article has been saved to the store.
    ``category_name`` is the resolved category label, carried alongside the id
    so preference matching does not need a second lookup.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    id: ArticleID | None = None
    title: str = ""
    description: str | None = None
    url: str | None = None
    image_url: str | None = None
    published_at: datetime | None = None
    source_name: str | None = None
    author: str | None = None
    content: str | None = None
    category_id: CategoryID
    category_name: str = ""
    created_by_id: UserID = SYSTEM_USER_ID
    created_at: datetime


class Category(BaseModel):
    """News category. Names are unique ignoring case."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: CategoryID
    name: str = Field(..., min_length=1)
    is_hidden: bool = False
