"""Port interface for LLM-based support-message analysis."""

from abc import ABC, abstractmethod

from sentiment_watchdog.domain.entities.message_analysis import MessageAnalysis, MessageContext
from sentiment_watchdog.domain.value_objects.enums import AnalysisDepth


class LLMPort(ABC):
    @abstractmethod
    async def analyze_message(self, context: MessageContext, depth: AnalysisDepth) -> MessageAnalysis:
        """Analyze a support message and return a structured result.

        Optional fields of MessageAnalysis are filled according to *depth*:
        BASIC leaves them None. ENHANCED and PRO both add confidence, priority,
        actions and escalation; only ENHANCED sets urgency and satisfaction risk.
        PRO may answer with the urgency and complaint emotions.
        """
        ...
