"""Generic webhook adapter — posts alert events as JSON for third-party integrations."""

from __future__ import annotations

import httpx

from sentiment_watchdog.adapters.notifications.http_notifier import HttpNotifier
from sentiment_watchdog.adapters.notifications.templates import webhook_payload
from sentiment_watchdog.config import settings
from sentiment_watchdog.domain.entities.alert import BrandAlert, SentimentAlert
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel


class WebhookAdapter(HttpNotifier):
    channel = NotificationChannel.WEBHOOK

    def __init__(self, url: str | None = None, environment: str | None = None, **kwargs):
        super().__init__(**kwargs)
        self._url = url if url is not None else settings.webhook_url
        self._environment = environment or settings.environment

    @property
    def configured(self) -> bool:
        return bool(self._url)

    def render(self, alert: SentimentAlert | BrandAlert) -> dict:
        return webhook_payload(alert, self._environment)

    async def _deliver(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(self._url, json=payload)
