"""Alert entities — what gets pushed to Slack, email, SMS and webhooks."""

from dataclasses import dataclass, field
from datetime import datetime

from sentiment_watchdog.domain.value_objects.enums import NotificationChannel, Severity


@dataclass
class AffectedMessage:
    customer: str
    channel: str
    emotion: str
    sentiment_score: float
    summary: str = ""
    id: str | None = None


@dataclass
class SentimentAlert:
    """Alert raised by a burst of negative support messages."""

    id: str
    severity: Severity
    summary: str
    message_count: int
    average_sentiment: float
    timestamp: datetime
    type: str = "negative_sentiment"
    time_window: str | None = None
    affected_messages: list[AffectedMessage] = field(default_factory=list)


@dataclass
class AffectedMention:
    author: str
    platform: str
    followers: int
    url: str
    sentiment_score: float
    viral_potential: float


@dataclass
class BrandAlert:
    """Alert raised by brand-monitoring rules."""

    alert_id: str
    title: str
    description: str
    severity: Severity
    average_sentiment: float
    timestamp: datetime
    affected_mentions: list[AffectedMention] = field(default_factory=list)
    channels: set[NotificationChannel] = field(default_factory=set)


@dataclass
class DeliveryResult:
    channel: NotificationChannel
    delivered: bool
    payload: dict
    error: str | None = None
