"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from sentiment_watchdog.adapters.llm.openai_adapter import OpenAIAdapter
from sentiment_watchdog.adapters.notifications.sendgrid_adapter import SendGridAdapter
from sentiment_watchdog.adapters.notifications.slack_adapter import SlackAdapter
from sentiment_watchdog.adapters.notifications.twilio_adapter import TwilioAdapter
from sentiment_watchdog.adapters.notifications.webhook_adapter import WebhookAdapter
from sentiment_watchdog.application.ports.notifier_port import NotifierPort
from sentiment_watchdog.application.use_cases.analyze_mention import AnalyzeMentionUseCase
from sentiment_watchdog.application.use_cases.analyze_message import AnalyzeMessageUseCase
from sentiment_watchdog.application.use_cases.dispatch_alert import DispatchAlertUseCase
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel

logger = logging.getLogger(__name__)

# Singleton adapters (they hold configuration only)
_llm_adapter = OpenAIAdapter()

_notifiers: dict[NotificationChannel, NotifierPort] = {
    n.channel: n
    for n in (SlackAdapter(), SendGridAdapter(), TwilioAdapter(), WebhookAdapter())
}

if not _llm_adapter.available:
    logger.info("No OpenAI key configured; support messages use keyword analysis")


def get_llm_adapter() -> OpenAIAdapter:
    return _llm_adapter


def get_analyze_mention_uc() -> AnalyzeMentionUseCase:
    return AnalyzeMentionUseCase()


def get_analyze_message_uc() -> AnalyzeMessageUseCase:
    return AnalyzeMessageUseCase(llm=_llm_adapter)


def get_dispatch_alert_uc() -> DispatchAlertUseCase:
    return DispatchAlertUseCase(notifiers=_notifiers)
