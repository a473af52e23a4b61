"""Tests for keyword-based support-message triage."""

import pytest

from sentiment_watchdog.domain.entities.message_analysis import MessageContext
from sentiment_watchdog.domain.policies.keyword_scorer import score_text
from sentiment_watchdog.domain.policies.support_triage import (
    HEURISTIC_MODEL,
    suggested_actions,
    support_priority,
    triage,
)
from sentiment_watchdog.domain.value_objects.enums import (
    AnalysisDepth,
    Priority,
    SupportEmotion,
)

ANGRY = "I hate this, it is terrible"


def _triage(message, depth, **context):
    ctx = MessageContext(message=message, **context)
    return triage(ctx, score_text(message), depth)


def test_basic_has_core_fields_only():
    result = _triage(ANGRY, AnalysisDepth.BASIC)
    assert result.emotion == SupportEmotion.FRUSTRATION
    assert result.sentiment_score == pytest.approx(-0.9)
    assert result.model == HEURISTIC_MODEL
    assert result.priority is None
    assert result.urgency_level is None


def test_pro_adds_priority_and_actions():
    result = _triage(ANGRY, AnalysisDepth.PRO)
    assert result.priority == Priority.CRITICAL
    assert result.escalation_recommended is True
    assert result.confidence_score == pytest.approx(0.93)
    assert "Escalate to a senior support agent" in result.suggested_actions
    assert result.urgency_level is None


def test_enhanced_adds_urgency_and_risk():
    result = _triage(ANGRY, AnalysisDepth.ENHANCED, customer_tier="gold")
    assert result.priority == Priority.CRITICAL
    assert result.urgency_level == 9
    assert result.customer_satisfaction_risk == Priority.CRITICAL


def test_positive_message_has_low_risk():
    result = _triage("Thanks, the agent was wonderful", AnalysisDepth.ENHANCED)
    assert result.emotion == SupportEmotion.SATISFACTION
    assert result.customer_satisfaction_risk == Priority.LOW


def test_neutral_message():
    result = _triage("Where can I find my invoice", AnalysisDepth.ENHANCED)
    assert result.emotion == SupportEmotion.NEUTRAL
    assert result.priority == Priority.LOW
    assert result.escalation_recommended is False


def test_summary_truncated_per_depth():
    message = "x" * 200
    assert len(_triage(message, AnalysisDepth.BASIC).summary) == 100
    assert len(_triage(message, AnalysisDepth.PRO).summary) == 150


@pytest.mark.parametrize(
    "tier, expected",
    [(None, Priority.MEDIUM), ("silver", Priority.MEDIUM), ("Gold", Priority.HIGH), ("platinum", Priority.HIGH)],
)
def test_premium_tier_bumps_priority(tier, expected):
    assert support_priority(-0.4, tier) == expected


def test_critical_stays_critical():
    assert support_priority(0.9, "platinum") == Priority.CRITICAL


def test_suggested_actions_for_neutral_low():
    assert suggested_actions(Priority.LOW, 0.0) == ["Respond with the requested information"]
