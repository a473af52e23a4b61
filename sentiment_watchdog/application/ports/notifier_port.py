"""Port interface for alert delivery channels."""

from abc import ABC, abstractmethod

from sentiment_watchdog.domain.entities.alert import BrandAlert, DeliveryResult, SentimentAlert
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel


class NotifierPort(ABC):
    channel: NotificationChannel

    @property
    @abstractmethod
    def configured(self) -> bool:
        """True when credentials/URLs for real delivery are present."""
        ...

    @abstractmethod
    async def notify(self, alert: SentimentAlert | BrandAlert) -> DeliveryResult:
        """Render the channel payload for *alert* and deliver it.

        Must not raise on delivery failure; report it in the result instead.
        When the channel is not configured the payload is rendered and
        logged, and the result has delivered=False.
        """
        ...
