"""Pydantic models for data validation and type checking."""

from models.article import Article, Category
from models.notification import (
    CategoryPreference,
    EmailPayload,
    Notification,
    NotificationPreference,
    UserKeyword,
    UserPreferences,
    UserProfile,
)
from models.provider_payloads import (
    NewsApiArticle,
    NewsApiResponse,
    TheNewsApiArticle,
    TheNewsApiResponse,
    TopicPredictionRequest,
    TopicPredictionResponse,
)
from models.run import (
    DispatchFailure,
    DispatchResult,
    MatchResult,
    RunResult,
    RunStatus,
)
from models.source import NewsSourceConfig, ProviderKind

__all__ = [
    "Article",
    "Category",
    "CategoryPreference",
    "EmailPayload",
    "Notification",
    "NotificationPreference",
    "UserKeyword",
    "UserPreferences",
    "UserProfile",
    "NewsApiArticle",
    "NewsApiResponse",
    "TheNewsApiArticle",
    "TheNewsApiResponse",
    "TopicPredictionRequest",
    "TopicPredictionResponse",
    "DispatchFailure",
    "DispatchResult",
    "MatchResult",
    "RunResult",
    "RunStatus",
    "NewsSourceConfig",
    "ProviderKind",
]
