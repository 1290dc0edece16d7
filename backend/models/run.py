"""Pydantic models describing the outcome of a fetch run and an email batch."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, Field

from models.notification import EmailPayload, Notification
from models.types import ProviderName, RunID


class RunStatus(str, Enum):
    SUCCEEDED = "succeeded"
    NO_ARTICLES = "no_articles"
    SKIPPED_OVERLAP = "skipped_overlap"
    CANCELLED = "cancelled"
    FAILED = "failed"


class DispatchFailure(BaseModel):
    email: str
    error: str


class DispatchResult(BaseModel):
    """Per-recipient outcome of one bulk send."""

    sent: list[str] = Field(default_factory=list)
    failures: list[DispatchFailure] = Field(default_factory=list)
    cancelled: list[str] = Field(default_factory=list)

    @property
    def sent_count(self) -> int:
        return len(self.sent)

    @property
    def failed_count(self) -> int:
        return len(self.failures)


class MatchResult(BaseModel):
    """Output of preference matching for one batch of articles."""

    notifications: list[Notification] = Field(default_factory=list)
    emails: list[EmailPayload] = Field(default_factory=list)


class RunResult(BaseModel):
    """Structured result of one orchestrator run, for operators."""

    run_id: RunID
    status: RunStatus = RunStatus.NO_ARTICLES
    provider: ProviderName | None = None
    articles_fetched: int = 0
    notifications_generated: int = 0
    emails_sent: int = 0
    emails_failed: int = 0
    failed_providers: list[ProviderName] = Field(default_factory=list)
    error: str | None = None
    started_at: datetime
    finished_at: datetime | None = None
