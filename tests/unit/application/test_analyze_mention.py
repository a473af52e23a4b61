"""Tests for AnalyzeMentionUseCase."""

import pytest

from sentiment_watchdog.application.use_cases.analyze_mention import AnalyzeMentionUseCase
from sentiment_watchdog.domain.entities.analysis import AnalysisInput
from sentiment_watchdog.domain.policies.brand_signals import COMPETITOR_TOPIC, POSITIVE_RESPONSE
from sentiment_watchdog.domain.value_objects.enums import (
    Category,
    Emotion,
    InfluencerTier,
    Priority,
)


@pytest.fixture
def use_case():
    return AnalyzeMentionUseCase()


def test_competitor_switch_is_opportunity(use_case):
    result = use_case.execute(AnalysisInput(
        text="Switching from RivalCo, I highly recommend it, absolutely brilliant!",
        brand_keywords=["Acme"],
        competitor_keywords=["RivalCo"],
    ))
    assert result.sentiment.emotion == Emotion.POSITIVE
    assert result.sentiment.score == pytest.approx(0.9)
    assert result.classification.priority == Priority.CRITICAL
    assert result.classification.category == Category.OPPORTUNITY
    assert result.competitor_mentioned is True
    assert result.competitor_keywords_found == ["RivalCo"]
    assert result.brand_keywords_found == []
    assert result.brand_relevance == pytest.approx(0.5)
    assert result.key_topics == [COMPETITOR_TOPIC, "opportunity"]
    assert result.viral_potential == pytest.approx(0.5)
    assert result.action_required is True
    assert result.suggested_response == POSITIVE_RESPONSE


def test_reasoning_includes_priority(use_case):
    result = use_case.execute(AnalysisInput(text="I do not love this product"))
    assert result.sentiment.reasoning.endswith(
        "Priority: medium based on sentiment strength and viral potential."
    )
    assert result.classification.category == Category.PRODUCT


def test_viral_potential_drives_priority(use_case):
    result = use_case.execute(AnalysisInput(text="just posted this", viral_potential=0.85))
    assert result.sentiment.score == 0
    assert result.classification.priority == Priority.CRITICAL
    assert result.action_required is True


def test_influencer_tier_boosts_virality(use_case):
    result = use_case.execute(AnalysisInput(
        text="hello there", viral_potential=0.4, influencer_tier=InfluencerTier.CELEBRITY
    ))
    assert result.viral_potential == pytest.approx(0.7)
    assert result.influencer_tier == InfluencerTier.CELEBRITY


def test_empty_text_is_neutral_low_brand(use_case):
    result = use_case.execute(AnalysisInput(text=""))
    assert result.sentiment.score == 0
    assert result.sentiment.emotion == Emotion.NEUTRAL
    assert result.classification.priority == Priority.LOW
    assert result.classification.category == Category.BRAND
    assert result.action_required is False
    assert result.suggested_response is None


def test_same_input_same_output(use_case):
    data = AnalysisInput(text="Terrible support, I want a refund")
    assert use_case.execute(data) == use_case.execute(data)
