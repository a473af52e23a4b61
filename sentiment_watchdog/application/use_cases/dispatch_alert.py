"""DispatchAlertUseCase — fan an alert out to the requested notification channels."""

from __future__ import annotations

import asyncio
import logging

from sentiment_watchdog.application.ports.notifier_port import NotifierPort
from sentiment_watchdog.domain.entities.alert import BrandAlert, DeliveryResult, SentimentAlert
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel, Severity

logger = logging.getLogger(__name__)


def effective_channels(
    alert: SentimentAlert | BrandAlert, requested: set[NotificationChannel]
) -> set[NotificationChannel]:
    """Channels that will actually be attempted.

    SMS is reserved for critical alerts; every other requested channel
    is kept as-is.
    """
    channels = set(requested)
    if NotificationChannel.SMS in channels and alert.severity != Severity.CRITICAL:
        channels.discard(NotificationChannel.SMS)
    return channels


class DispatchAlertUseCase:
    """Sends one alert through several notifiers concurrently.

    A failing channel never fails the dispatch: it is logged and reported
    as not delivered.
    """

    def __init__(self, notifiers: dict[NotificationChannel, NotifierPort]):
        self._notifiers = notifiers

    async def execute(
        self,
        alert: SentimentAlert | BrandAlert,
        channels: set[NotificationChannel],
    ) -> dict[NotificationChannel, DeliveryResult]:
        targets = [
            c for c in NotificationChannel if c in effective_channels(alert, channels)
        ]
        missing = [c for c in targets if c not in self._notifiers]
        for channel in missing:
            logger.warning("No notifier registered for channel %s", channel.value)
        targets = [c for c in targets if c in self._notifiers]

        outcomes = await asyncio.gather(
            *(self._notifiers[c].notify(alert) for c in targets),
            return_exceptions=True,
        )

        results: dict[NotificationChannel, DeliveryResult] = {}
        for channel, outcome in zip(targets, outcomes):
            if isinstance(outcome, BaseException):
                logger.error(
                    "%s notification failed for alert %s: %s",
                    channel.value, _alert_id(alert), outcome,
                )
                results[channel] = DeliveryResult(
                    channel=channel, delivered=False, payload={}, error=str(outcome)
                )
            else:
                results[channel] = outcome

        delivered = [c.value for c, r in results.items() if r.delivered]
        logger.info(
            "Alert %s dispatched: attempted=%s delivered=%s",
            _alert_id(alert), [c.value for c in targets], delivered,
        )
        return results


def _alert_id(alert: SentimentAlert | BrandAlert) -> str:
    return alert.alert_id if isinstance(alert, BrandAlert) else alert.id
