"""AnalyzeMessageUseCase — sentiment analysis of a customer support message."""

from __future__ import annotations

import logging

from sentiment_watchdog.application.ports.llm_port import LLMPort
from sentiment_watchdog.domain.entities.message_analysis import MessageAnalysis, MessageContext
from sentiment_watchdog.domain.errors import MissingFieldError
from sentiment_watchdog.domain.value_objects.enums import AnalysisDepth

logger = logging.getLogger(__name__)


class AnalyzeMessageUseCase:
    """Validates the message and delegates to the LLM port."""

    def __init__(self, llm: LLMPort):
        self._llm = llm

    async def execute(
        self, context: MessageContext, depth: AnalysisDepth = AnalysisDepth.BASIC
    ) -> MessageAnalysis:
        """Analyze a support message.

        Raises:
            MissingFieldError: if the message is empty or whitespace only.
        """
        if not context.message or not context.message.strip():
            raise MissingFieldError("Message")

        analysis = await self._llm.analyze_message(context, depth)

        logger.info(
            "Message analyzed (%s): customer=%s channel=%s emotion=%s score=%.2f model=%s",
            depth.value,
            context.customer_name,
            context.channel,
            analysis.emotion.value,
            analysis.sentiment_score,
            analysis.model,
        )
        return analysis
