"""Shared httpx plumbing for the notification adapters."""

from __future__ import annotations

import logging
from abc import abstractmethod

import httpx

from sentiment_watchdog.application.ports.notifier_port import NotifierPort
from sentiment_watchdog.config import settings
from sentiment_watchdog.domain.entities.alert import BrandAlert, DeliveryResult, SentimentAlert

logger = logging.getLogger(__name__)


class HttpNotifier(NotifierPort):
    """Renders a payload, POSTs it, and turns any failure into a DeliveryResult."""

    def __init__(
        self,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._timeout = timeout or settings.http_timeout
        self._transport = transport

    @abstractmethod
    def render(self, alert: SentimentAlert | BrandAlert) -> dict:
        """Channel-specific payload for *alert*."""
        ...

    @abstractmethod
    async def _deliver(self, client: httpx.AsyncClient, payload: dict) -> httpx.Response:
        ...

    async def notify(self, alert: SentimentAlert | BrandAlert) -> DeliveryResult:
        payload = self.render(alert)

        if not self.configured:
            logger.info(
                "%s notifier is not configured; payload not sent: %s",
                self.channel.value, payload,
            )
            return DeliveryResult(channel=self.channel, delivered=False, payload=payload)

        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await self._deliver(client, payload)
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("%s alert failed: %s", self.channel.value, e)
            return DeliveryResult(
                channel=self.channel, delivered=False, payload=payload, error=str(e)
            )

        logger.info("%s alert sent successfully", self.channel.value)
        return DeliveryResult(channel=self.channel, delivered=True, payload=payload)
