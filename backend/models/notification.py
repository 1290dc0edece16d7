"""Pydantic models for notification preferences and outputs."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from models.types import (
    SYSTEM_USER_ID,
    CategoryID,
    KeywordID,
    KeywordList,
    UserID,
)


class NotificationPreference(BaseModel):
    """One preference row: a user opted into a category, optionally by keyword."""

    user_id: UserID
    category_id: CategoryID
    keyword_id: KeywordID | None = None
    is_enabled: bool = True


class UserKeyword(BaseModel):
    """Keyword a user registered under a category."""

    model_config = ConfigDict(str_strip_whitespace=True)

    id: KeywordID
    user_id: UserID
    category_id: CategoryID
    keyword: str


class CategoryPreference(BaseModel):
    """A user's enabled category with the keywords registered under it.

    An empty ``keywords`` list means "match by category name".
    """

    category_id: CategoryID
    name: str
    keywords: KeywordList = Field(default_factory=list)


class UserPreferences(BaseModel):
    """All enabled category preferences of one user."""

    user_id: UserID
    email: str | None = None
    categories: list[CategoryPreference] = Field(default_factory=list)


class UserProfile(BaseModel):
    """User profile fields needed for delivery."""

    id: UserID
    email: str | None = Field(None, pattern=r"^[^@]+@[^@]+\.[^@]+$")
    is_active: bool = True


class Notification(BaseModel):
    """In-app notification. Read flag is flipped later by the API."""

    user_id: UserID
    title: str = Field(..., min_length=1)
    message: str
    is_read: bool = False
    created_by_id: UserID = SYSTEM_USER_ID
    created_at: datetime


class EmailPayload(BaseModel):
    """Rendered email, handed from the matcher to the dispatcher."""

    email: str
    subject: str
    body: str
