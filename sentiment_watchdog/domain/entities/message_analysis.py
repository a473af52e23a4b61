"""Support-message analysis — context sent to the LLM and the result it yields."""

from dataclasses import dataclass, field

from sentiment_watchdog.domain.value_objects.enums import Priority, SupportEmotion


@dataclass
class MessageContext:
    message: str
    customer_name: str | None = None
    customer_id: str | None = None
    customer_tier: str | None = None
    previous_interactions: int | None = None
    channel: str | None = None
    language: str | None = None
    current_priority: str | None = None
    tags: list[str] = field(default_factory=list)
    provider: str | None = None


@dataclass
class MessageAnalysis:
    emotion: SupportEmotion
    sentiment_score: float
    summary: str
    reasoning: str
    confidence_score: float | None = None
    priority: Priority | None = None
    suggested_actions: list[str] | None = None
    escalation_recommended: bool | None = None
    urgency_level: int | None = None
    customer_satisfaction_risk: Priority | None = None
    model: str | None = None
