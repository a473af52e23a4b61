"""OpenAI adapter — implements LLMPort using the OpenAI API."""

from __future__ import annotations

import logging

from openai import AsyncOpenAI
from pydantic import ValidationError

from sentiment_watchdog.adapters.llm.schemas import (
    BasicSentimentSchema,
    EnhancedSentimentSchema,
    ProSentimentSchema,
)
from sentiment_watchdog.application.ports.llm_port import LLMPort
from sentiment_watchdog.config import settings
from sentiment_watchdog.domain.entities.message_analysis import MessageAnalysis, MessageContext
from sentiment_watchdog.domain.policies.keyword_scorer import score_text
from sentiment_watchdog.domain.policies.support_triage import triage
from sentiment_watchdog.domain.value_objects.enums import AnalysisDepth, Priority, SupportEmotion
from sentiment_watchdog.domain.value_objects.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are an expert sentiment analyst for customer support teams.
Analyze the customer support message you are given and return ONLY a valid
JSON object, no markdown or extra text.

Consider the context of customer support where customers may be experiencing issues."""

BASIC_FIELDS = """\
{
  "emotion": one of ["anger", "frustration", "confusion", "joy", "satisfaction", "neutral"],
  "sentimentScore": number from -1 (very negative) to +1 (very positive),
  "summary": brief summary of the message (max 100 characters),
  "reasoning": your reasoning for the classification
}"""

ENHANCED_FIELDS = """\
{
  "emotion": one of ["anger", "frustration", "confusion", "joy", "satisfaction", "neutral"],
  "sentimentScore": number from -1 (very negative) to +1 (very positive),
  "confidenceScore": number from 0 to 1 for your analysis accuracy,
  "summary": brief summary (max 150 characters),
  "reasoning": detailed reasoning for your classification,
  "priority": one of ["low", "medium", "high", "critical"],
  "suggestedActions": list of suggested actions for the support team,
  "escalationRecommended": true or false,
  "urgencyLevel": integer 1-10,
  "customerSatisfactionRisk": one of ["low", "medium", "high", "critical"]
}"""

PRO_FIELDS = """\
{
  "emotion": one of ["anger", "frustration", "confusion", "joy", "satisfaction", "neutral", "urgency", "complaint"],
  "sentimentScore": number from -1 (very negative) to +1 (very positive),
  "confidenceScore": number from 0 to 1 for your analysis,
  "summary": brief summary (max 150 characters),
  "reasoning": your reasoning for the classification,
  "priority": one of ["low", "medium", "high", "critical"] based on sentiment, customer tier and urgency,
  "suggestedActions": list of short actions for the support team,
  "escalationRecommended": true or false
}"""

CONTEXT_GUIDELINES = """\
Consider:
- Customer tier affects priority (platinum/gold customers get higher priority)
- Multiple previous interactions may indicate frustration
- Channel context (phone calls are often more urgent than emails)
- Language nuances and cultural context
- Urgency indicators and escalation triggers"""

SCHEMAS = {
    AnalysisDepth.BASIC: BasicSentimentSchema,
    AnalysisDepth.ENHANCED: EnhancedSentimentSchema,
    AnalysisDepth.PRO: ProSentimentSchema,
}

# Providers the dashboard can request; all are served by the OpenAI model for now.
KNOWN_PROVIDERS = ("openai", "huggingface", "google", "azure")


def _usable_key(api_key: str | None) -> bool:
    key = (api_key or "").strip()
    return bool(key) and "your-openai-api-key" not in key


class OpenAIAdapter(LLMPort):
    """OpenAI implementation of LLMPort with a keyword-heuristic fallback."""

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        max_retries: int | None = None,
        client: AsyncOpenAI | None = None,
        lexicon: Lexicon = DEFAULT_LEXICON,
    ):
        key = api_key if api_key is not None else settings.openai_api_key
        if client is not None:
            self._client = client
        elif _usable_key(key):
            self._client = AsyncOpenAI(api_key=key)
        else:
            self._client = None
        self._model = model or settings.openai_model
        self._max_retries = max_retries or settings.llm_max_retries
        self._lexicon = lexicon

    @property
    def available(self) -> bool:
        return self._client is not None

    def resolve_model(self, provider: str | None) -> str:
        """Map a requested provider to the model that will serve it."""
        if provider and provider != "openai":
            if provider in KNOWN_PROVIDERS:
                logger.info("Provider '%s' requested; serving with %s", provider, self._model)
            else:
                logger.warning("Unknown provider '%s'; serving with %s", provider, self._model)
        return self._model

    async def analyze_message(self, context: MessageContext, depth: AnalysisDepth) -> MessageAnalysis:
        """Send the message to OpenAI and validate the structured response."""
        if self._client is None:
            logger.warning("OPENAI_API_KEY is not set (or placeholder). Using heuristic fallback.")
            return self.heuristic_fallback(context, depth)

        model = self.resolve_model(context.provider)
        schema = SCHEMAS[depth]
        user_prompt = self._build_user_prompt(context, depth)

        for attempt in range(1, self._max_retries + 1):
            try:
                response = await self._client.chat.completions.create(
                    model=model,
                    messages=[
                        {"role": "system", "content": SYSTEM_PROMPT},
                        {"role": "user", "content": user_prompt},
                    ],
                    temperature=0.1,
                    response_format={"type": "json_object"},
                )

                raw_text = response.choices[0].message.content or ""
                parsed = schema.model_validate_json(raw_text)
                return self._map_to_analysis(parsed, model)

            except ValidationError as e:
                logger.warning(
                    "Attempt %d/%d: LLM response failed schema validation: %s",
                    attempt, self._max_retries, e.error_count(),
                )
            except Exception:
                logger.exception(
                    "Attempt %d/%d: unexpected error during LLM call",
                    attempt, self._max_retries,
                )

        logger.warning("All LLM attempts failed, using heuristic fallback")
        return self.heuristic_fallback(context, depth)

    def heuristic_fallback(self, context: MessageContext, depth: AnalysisDepth) -> MessageAnalysis:
        """Keyword-scored analysis with the same shape as the LLM result."""
        return triage(context, score_text(context.message, self._lexicon), depth)

    @staticmethod
    def _build_user_prompt(context: MessageContext, depth: AnalysisDepth) -> str:
        if depth == AnalysisDepth.BASIC:
            return (
                "Analyze the sentiment and emotion of this customer support message:\n\n"
                f'"{context.message}"\n\n'
                f"Return a JSON object with exactly these fields:\n{BASIC_FIELDS}"
            )

        lines = [
            "Analyze this customer support message with enhanced context:",
            "",
            f"Customer Tier: {context.customer_tier}",
            f"Previous Interactions: {context.previous_interactions}",
            f"Channel: {context.channel}",
        ]
        if depth == AnalysisDepth.ENHANCED:
            lines[2:2] = [
                f"Customer Name: {context.customer_name}",
                f"Customer ID: {context.customer_id}",
            ]
            lines.append(f"Current Priority: {context.current_priority}")
            lines.append(f"Tags: {', '.join(context.tags) or 'None'}")
            fields = ENHANCED_FIELDS
        else:
            lines.append(f"Language: {context.language}")
            fields = PRO_FIELDS

        lines += [
            "",
            f'Message: "{context.message}"',
            "",
            f"Return a JSON object with exactly these fields:\n{fields}",
            "",
            CONTEXT_GUIDELINES,
        ]
        return "\n".join(lines)

    @staticmethod
    def _map_to_analysis(
        parsed: BasicSentimentSchema | EnhancedSentimentSchema | ProSentimentSchema,
        model: str,
    ) -> MessageAnalysis:
        """Map a validated LLM response to the MessageAnalysis domain entity."""
        analysis = MessageAnalysis(
            emotion=SupportEmotion(parsed.emotion),
            sentiment_score=parsed.sentiment_score,
            summary=parsed.summary,
            reasoning=parsed.reasoning,
            model=model,
        )
        if isinstance(parsed, (EnhancedSentimentSchema, ProSentimentSchema)):
            analysis.confidence_score = parsed.confidence_score
            analysis.priority = Priority(parsed.priority)
            analysis.suggested_actions = parsed.suggested_actions
            analysis.escalation_recommended = parsed.escalation_recommended
        if isinstance(parsed, EnhancedSentimentSchema):
            analysis.urgency_level = parsed.urgency_level
            analysis.customer_satisfaction_risk = Priority(parsed.customer_satisfaction_risk)
        return analysis
