"""SendGrid adapter — sends HTML alert emails through the v3 mail/send API."""

from __future__ import annotations

import httpx

from sentiment_watchdog.adapters.notifications.http_notifier import HttpNotifier
from sentiment_watchdog.adapters.notifications.templates import (
    email_brand_payload,
    email_sentiment_payload,
)
from sentiment_watchdog.config import settings
from sentiment_watchdog.domain.entities.alert import BrandAlert, SentimentAlert
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel

SENDGRID_URL = "https://api.sendgrid.com/v3/mail/send"


class SendGridAdapter(HttpNotifier):
    channel = NotificationChannel.EMAIL

    def __init__(
        self,
        api_key: str | None = None,
        sender: str | None = None,
        recipients: list[str] | None = None,
        dashboard_url: str | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._api_key = api_key if api_key is not None else settings.sendgrid_api_key
        self._sender = sender or settings.sendgrid_from_email
        self._recipients = recipients or settings.alert_recipients
        self._dashboard_url = dashboard_url or settings.dashboard_url

    @property
    def configured(self) -> bool:
        return bool(self._api_key) and bool(self._recipients)

    def render(self, alert: SentimentAlert | BrandAlert) -> dict:
        if isinstance(alert, BrandAlert):
            return email_brand_payload(alert, self._recipients, self._sender, self._dashboard_url)
        return email_sentiment_payload(alert, self._recipients, self._sender, self._dashboard_url)

    async def _deliver(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(
            SENDGRID_URL,
            json=payload,
            headers={"Authorization": f"Bearer {self._api_key}"},
        )
