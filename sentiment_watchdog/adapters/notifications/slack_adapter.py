"""Slack adapter — posts alerts to an incoming webhook."""

from __future__ import annotations

import httpx

from sentiment_watchdog.adapters.notifications.http_notifier import HttpNotifier
from sentiment_watchdog.adapters.notifications.templates import (
    slack_brand_payload,
    slack_sentiment_payload,
)
from sentiment_watchdog.config import settings
from sentiment_watchdog.domain.entities.alert import BrandAlert, SentimentAlert
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel


class SlackAdapter(HttpNotifier):
    channel = NotificationChannel.SLACK

    def __init__(self, webhook_url: str | None = None, dashboard_url: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self._webhook_url = webhook_url if webhook_url is not None else settings.slack_webhook_url
        self._dashboard_url = dashboard_url or settings.dashboard_url

    @property
    def configured(self) -> bool:
        return bool(self._webhook_url)

    def render(self, alert: SentimentAlert | BrandAlert) -> dict:
        if isinstance(alert, BrandAlert):
            return slack_brand_payload(alert)
        return slack_sentiment_payload(alert, self._dashboard_url)

    async def _deliver(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(self._webhook_url, json=payload)
