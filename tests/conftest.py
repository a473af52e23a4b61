"""Pytest configuration and shared fixtures."""

from datetime import datetime, timezone

import pytest

from sentiment_watchdog.domain.entities.alert import (
    AffectedMention,
    AffectedMessage,
    BrandAlert,
    SentimentAlert,
)
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel, Severity


@pytest.fixture
def fixed_now():
    return datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def sentiment_alert(fixed_now):
    return SentimentAlert(
        id="alert-1",
        severity=Severity.HIGH,
        summary="Spike in negative messages",
        message_count=5,
        average_sentiment=-0.72,
        timestamp=fixed_now,
        time_window="15m",
        affected_messages=[
            AffectedMessage(
                id=str(i),
                customer=f"Customer {i}",
                channel="email",
                emotion="frustration",
                sentiment_score=-0.8,
                summary="Checkout keeps failing",
            )
            for i in range(5)
        ],
    )


@pytest.fixture
def brand_alert(fixed_now):
    return BrandAlert(
        alert_id="brand-1",
        title="Negative spike on Twitter",
        description="Several large accounts complaining about outages",
        severity=Severity.CRITICAL,
        average_sentiment=-0.65,
        timestamp=fixed_now,
        affected_mentions=[
            AffectedMention(
                author="bigvoice",
                platform="twitter",
                followers=1_200_000,
                url="https://twitter.example/status/1",
                sentiment_score=-0.8,
                viral_potential=0.9,
            )
        ],
        channels={NotificationChannel.SLACK, NotificationChannel.SMS},
    )
