"""AnalyzeMentionUseCase — keyword scoring + classification of a brand mention."""

from __future__ import annotations

import dataclasses
import logging

from sentiment_watchdog.domain.entities.analysis import AnalysisInput, BrandMentionAnalysis
from sentiment_watchdog.domain.policies import brand_signals
from sentiment_watchdog.domain.policies.keyword_scorer import score_text
from sentiment_watchdog.domain.policies.mention_classifier import classify
from sentiment_watchdog.domain.value_objects.lexicon import DEFAULT_LEXICON, Lexicon

logger = logging.getLogger(__name__)


class AnalyzeMentionUseCase:
    """Pure, synchronous pipeline: score → classify → brand signals."""

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self._lexicon = lexicon

    def execute(self, data: AnalysisInput) -> BrandMentionAnalysis:
        sentiment = score_text(data.text, self._lexicon)
        classification = classify(sentiment.score, data.text, data.viral_potential)

        sentiment = dataclasses.replace(
            sentiment,
            reasoning=(
                f"{sentiment.reasoning} Priority: {classification.priority.value} "
                "based on sentiment strength and viral potential."
            ),
        )

        brand_found = brand_signals.matching_keywords(data.text, data.brand_keywords)
        competitor_found = brand_signals.matching_keywords(data.text, data.competitor_keywords)
        competitor_mentioned = bool(competitor_found)

        analysis = BrandMentionAnalysis(
            sentiment=sentiment,
            classification=classification,
            brand_relevance=brand_signals.brand_relevance(len(brand_found)),
            viral_potential=brand_signals.adjusted_viral_potential(
                data.viral_potential, sentiment.score, data.influencer_tier
            ),
            competitor_mentioned=competitor_mentioned,
            brand_keywords_found=brand_found,
            competitor_keywords_found=competitor_found,
            key_topics=brand_signals.key_topics(
                brand_found, competitor_mentioned, classification.category
            ),
            action_required=brand_signals.action_required(
                sentiment.score, classification.priority
            ),
            suggested_response=brand_signals.suggested_response(sentiment.score),
            influencer_tier=data.influencer_tier,
        )

        logger.debug(
            "Mention scored %.2f (%s), priority=%s category=%s",
            sentiment.score,
            sentiment.emotion.value,
            classification.priority.value,
            classification.category.value,
        )
        return analysis
