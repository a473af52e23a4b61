"""Twilio adapter — sends SMS alerts through the Messages REST API."""

from __future__ import annotations

import httpx

from sentiment_watchdog.adapters.notifications.http_notifier import HttpNotifier
from sentiment_watchdog.adapters.notifications.templates import sms_body
from sentiment_watchdog.config import settings
from sentiment_watchdog.domain.entities.alert import BrandAlert, SentimentAlert
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel

TWILIO_MESSAGES_URL = "https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json"


class TwilioAdapter(HttpNotifier):
    channel = NotificationChannel.SMS

    def __init__(
        self,
        account_sid: str | None = None,
        auth_token: str | None = None,
        from_number: str | None = None,
        to_number: str | None = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._sid = account_sid if account_sid is not None else settings.twilio_account_sid
        self._token = auth_token if auth_token is not None else settings.twilio_auth_token
        self._from = from_number or settings.twilio_phone_number
        self._to = to_number or settings.alert_phone_number

    @property
    def configured(self) -> bool:
        return all([self._sid, self._token, self._from, self._to])

    def render(self, alert: SentimentAlert | BrandAlert) -> dict:
        return {"From": self._from, "To": self._to, "Body": sms_body(alert)}

    async def _deliver(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        return await client.post(
            TWILIO_MESSAGES_URL.format(sid=self._sid),
            data=payload,
            auth=(self._sid, self._token),
        )
