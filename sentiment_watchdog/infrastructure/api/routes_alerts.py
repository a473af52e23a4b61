"""Alert endpoints — push sentiment and brand alerts to Slack, email, SMS and webhooks."""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from statistics import mean
from typing import Annotated

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from sentiment_watchdog.application.use_cases.dispatch_alert import DispatchAlertUseCase
from sentiment_watchdog.domain.entities.alert import (
    AffectedMention,
    AffectedMessage,
    BrandAlert,
    DeliveryResult,
    SentimentAlert,
)
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel, Severity
from sentiment_watchdog.infrastructure.api.dependencies import get_dispatch_alert_uc

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alerts"])


# ── Request schemas ─────────────────────────────────────────────────

class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _lower(value):
    return value.lower() if isinstance(value, str) else value


SeverityIn = Annotated[Severity, BeforeValidator(_lower)]


class AffectedMessageIn(_Body):
    id: str | int | None = None
    customer: str = Field(
        default="Unknown", validation_alias=AliasChoices("customer", "customerName")
    )
    channel: str = "unknown"
    emotion: str = "neutral"
    sentiment_score: float = Field(
        default=0.0, validation_alias=AliasChoices("sentimentScore", "sentiment_score")
    )
    summary: str = ""

    def to_entity(self) -> AffectedMessage:
        return AffectedMessage(
            id=str(self.id) if self.id is not None else None,
            customer=self.customer,
            channel=self.channel,
            emotion=self.emotion,
            sentiment_score=self.sentiment_score,
            summary=self.summary,
        )


class SentimentAlertIn(_Body):
    """Sentiment alert as sent by the dashboard.

    Counts may arrive flat or nested under ``metrics``; affected messages
    under ``affectedMessages`` or ``messages``.
    """

    id: str | int | None = Field(default=None, validation_alias=AliasChoices("alertId", "id"))
    type: str = "negative_sentiment"
    severity: SeverityIn = Severity.MEDIUM
    summary: str = ""
    message_count: int | None = Field(
        default=None, validation_alias=AliasChoices("messageCount", "message_count")
    )
    average_sentiment: float = Field(
        default=0.0, validation_alias=AliasChoices("averageSentiment", "average_sentiment")
    )
    time_window: str | None = Field(
        default=None, validation_alias=AliasChoices("timeWindow", "time_window")
    )
    timestamp: datetime | None = None
    affected_messages: list[AffectedMessageIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("affectedMessages", "messages", "affected_messages"),
    )

    @model_validator(mode="before")
    @classmethod
    def flatten_metrics(cls, data):
        if isinstance(data, dict) and isinstance(data.get("metrics"), dict):
            return {**data["metrics"], **data}
        return data

    def to_entity(self) -> SentimentAlert:
        messages = [m.to_entity() for m in self.affected_messages]
        return SentimentAlert(
            id=str(self.id or uuid.uuid4()),
            type=self.type,
            severity=self.severity,
            summary=self.summary,
            message_count=self.message_count if self.message_count is not None else len(messages),
            average_sentiment=self.average_sentiment,
            time_window=self.time_window,
            timestamp=self.timestamp or datetime.now(timezone.utc),
            affected_messages=messages,
        )


class EnhancedAlertConfig(_Body):
    slack_enabled: bool = Field(default=True, alias="slackEnabled")
    email_enabled: bool = Field(default=False, alias="emailEnabled")


class EnhancedAlertRequest(_Body):
    alert: SentimentAlertIn
    config: EnhancedAlertConfig = Field(default_factory=EnhancedAlertConfig)


class MentionAuthorIn(_Body):
    username: str = "unknown"
    followers: int = 0


class MentionSentimentIn(_Body):
    score: float = 0.0


class AffectedMentionIn(_Body):
    platform: str = ""
    url: str = ""
    author: MentionAuthorIn = Field(default_factory=MentionAuthorIn)
    sentiment: MentionSentimentIn = Field(default_factory=MentionSentimentIn)
    viral_potential: float = Field(default=0.0, alias="viralPotential")

    def to_entity(self) -> AffectedMention:
        return AffectedMention(
            author=self.author.username,
            platform=self.platform,
            followers=self.author.followers,
            url=self.url,
            sentiment_score=self.sentiment.score,
            viral_potential=self.viral_potential,
        )


class BrandAlertIn(_Body):
    id: str | int | None = Field(default=None, validation_alias=AliasChoices("alertId", "id"))
    title: str = "Brand alert"
    description: str = ""
    severity: SeverityIn = Severity.MEDIUM
    timestamp: datetime | None = None
    mentions: list[AffectedMentionIn] = Field(
        default_factory=list,
        validation_alias=AliasChoices("affectedMentions", "mentions"),
    )


class NotificationFlags(_Body):
    email: bool = False
    sms: bool = False
    slack: bool = False
    webhook: bool = False


class BrandContext(_Body):
    average_sentiment: float | None = Field(default=None, alias="averageSentiment")


class BrandAlertRequest(BrandAlertIn):
    """Brand alert as the dashboard posts it: alert fields and ``notifications`` side by side.

    A body that wraps the alert fields in an ``alert`` object is flattened first.
    """

    notifications: NotificationFlags = Field(default_factory=NotificationFlags)
    brand_context: BrandContext = Field(default_factory=BrandContext, alias="brandContext")

    @model_validator(mode="before")
    @classmethod
    def flatten_alert(cls, data):
        if isinstance(data, dict) and isinstance(data.get("alert"), dict):
            rest = {k: v for k, v in data.items() if k != "alert"}
            return {**data["alert"], **rest}
        return data

    def to_entity(self) -> BrandAlert:
        mentions = [m.to_entity() for m in self.mentions]
        average = self.brand_context.average_sentiment
        if average is None:
            average = mean(m.sentiment_score for m in mentions) if mentions else 0.0

        return BrandAlert(
            alert_id=str(self.id or uuid.uuid4()),
            title=self.title,
            description=self.description,
            severity=self.severity,
            average_sentiment=average,
            timestamp=self.timestamp or datetime.now(timezone.utc),
            affected_mentions=mentions,
            channels=self.requested_channels(),
        )

    def requested_channels(self) -> set[NotificationChannel]:
        flags = self.notifications
        return {
            channel
            for channel, enabled in (
                (NotificationChannel.EMAIL, flags.email),
                (NotificationChannel.SMS, flags.sms),
                (NotificationChannel.SLACK, flags.slack),
                (NotificationChannel.WEBHOOK, flags.webhook),
            )
            if enabled
        }


# ── Helpers ─────────────────────────────────────────────────────────

def _delivery_summary(results: dict[NotificationChannel, DeliveryResult]) -> dict[str, bool]:
    return {channel.value: result.delivered for channel, result in results.items()}


# ── Sentiment alerts ────────────────────────────────────────────────

@router.post("/send-alert")
async def send_alert(
    body: SentimentAlertIn,
    use_case: DispatchAlertUseCase = Depends(get_dispatch_alert_uc),
):
    """Slack-only sentiment alert."""
    alert = body.to_entity()
    results = await use_case.execute(alert, {NotificationChannel.SLACK})
    return {
        "success": True,
        "message": "Alert processed",
        "channels": _delivery_summary(results),
    }


@router.post("/send-enhanced-alert")
async def send_enhanced_alert(
    body: EnhancedAlertRequest,
    use_case: DispatchAlertUseCase = Depends(get_dispatch_alert_uc),
):
    """Sentiment alert to Slack and/or email, as toggled by ``config``."""
    channels = set()
    if body.config.slack_enabled:
        channels.add(NotificationChannel.SLACK)
    if body.config.email_enabled:
        channels.add(NotificationChannel.EMAIL)

    results = await use_case.execute(body.alert.to_entity(), channels)
    return {
        "success": True,
        "message": "Enhanced alert processed",
        "channels": _delivery_summary(results),
    }


@router.post("/send-alert-notification")
async def send_alert_notification(
    body: SentimentAlertIn,
    use_case: DispatchAlertUseCase = Depends(get_dispatch_alert_uc),
):
    """Sentiment alert to Slack, email and the generic webhook."""
    alert = body.to_entity()
    results = await use_case.execute(
        alert,
        {NotificationChannel.SLACK, NotificationChannel.EMAIL, NotificationChannel.WEBHOOK},
    )
    return {
        "success": True,
        "message": "Alert notifications processed",
        "channels": _delivery_summary(results),
        "alertId": alert.id,
    }


# ── Brand alerts ────────────────────────────────────────────────────

@router.post("/send-brand-alert")
async def send_brand_alert(
    body: BrandAlertRequest,
    use_case: DispatchAlertUseCase = Depends(get_dispatch_alert_uc),
):
    """Brand alert to the channels flagged in ``notifications``.

    SMS goes out only for critical alerts; the dashboard always receives it.
    """
    alert = body.to_entity()
    results = await use_case.execute(alert, alert.channels)

    flags = body.notifications
    logger.info(
        "Brand alert %s (%s): %s", alert.alert_id, alert.severity.value, alert.title
    )
    return {
        "success": True,
        "alertId": alert.alert_id,
        "notificationsSent": {
            "sms": flags.sms and alert.severity == Severity.CRITICAL,
            "email": flags.email,
            "slack": flags.slack,
            "webhook": flags.webhook,
            "dashboard": True,
        },
        "delivered": _delivery_summary(results),
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
