"""SupportTriagePolicy — turns a keyword score into a support-message analysis.

Used whenever the LLM is unavailable, so every analysis route still answers
with the same shape.
"""

from __future__ import annotations

from sentiment_watchdog.domain.entities.analysis import SentimentResult
from sentiment_watchdog.domain.entities.message_analysis import MessageAnalysis, MessageContext
from sentiment_watchdog.domain.policies.mention_classifier import classify_priority
from sentiment_watchdog.domain.value_objects.enums import (
    AnalysisDepth,
    Emotion,
    Priority,
    SupportEmotion,
)

HEURISTIC_MODEL = "keyword-heuristic"

EMOTION_MAP: dict[Emotion, SupportEmotion] = {
    Emotion.POSITIVE: SupportEmotion.SATISFACTION,
    Emotion.NEGATIVE: SupportEmotion.FRUSTRATION,
    Emotion.MIXED: SupportEmotion.CONFUSION,
    Emotion.NEUTRAL: SupportEmotion.NEUTRAL,
}

URGENCY_BY_PRIORITY: dict[Priority, int] = {
    Priority.LOW: 2,
    Priority.MEDIUM: 4,
    Priority.HIGH: 7,
    Priority.CRITICAL: 9,
}

PREMIUM_TIERS = frozenset({"gold", "platinum"})

SUMMARY_LIMIT: dict[AnalysisDepth, int] = {
    AnalysisDepth.BASIC: 100,
    AnalysisDepth.ENHANCED: 150,
    AnalysisDepth.PRO: 150,
}


def support_priority(score: float, customer_tier: str | None) -> Priority:
    """Classifier priority, one level higher for gold/platinum customers."""
    priority = classify_priority(score)
    if (customer_tier or "").strip().lower() in PREMIUM_TIERS:
        priority = priority.bump()
    return priority


def suggested_actions(priority: Priority, score: float) -> list[str]:
    actions: list[str] = []
    if priority in (Priority.HIGH, Priority.CRITICAL):
        actions.append("Escalate to a senior support agent")
    if score < 0:
        actions.append("Acknowledge the issue and follow up with the customer")
    elif score > 0:
        actions.append("Thank the customer for the feedback")
    else:
        actions.append("Respond with the requested information")
    return actions


def triage(context: MessageContext, result: SentimentResult, depth: AnalysisDepth) -> MessageAnalysis:
    """Build a MessageAnalysis for *depth* from a keyword SentimentResult."""
    summary = context.message.strip()[: SUMMARY_LIMIT[depth]]
    analysis = MessageAnalysis(
        emotion=EMOTION_MAP[result.emotion],
        sentiment_score=result.score,
        summary=summary,
        reasoning=result.reasoning,
        model=HEURISTIC_MODEL,
    )
    if depth == AnalysisDepth.BASIC:
        return analysis

    priority = support_priority(result.score, context.customer_tier)
    analysis.confidence_score = result.confidence
    analysis.priority = priority
    analysis.suggested_actions = suggested_actions(priority, result.score)
    analysis.escalation_recommended = priority in (Priority.HIGH, Priority.CRITICAL)

    if depth == AnalysisDepth.ENHANCED:
        analysis.urgency_level = URGENCY_BY_PRIORITY[priority]
        analysis.customer_satisfaction_risk = priority if result.score < 0 else Priority.LOW

    return analysis
