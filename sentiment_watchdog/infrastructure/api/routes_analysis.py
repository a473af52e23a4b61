"""Analysis endpoints — brand mentions (keyword scoring) and support messages (LLM).

These routes fail soft: a missing required field is a 400, any other failure
is logged and answered with a neutral fallback body and HTTP 200.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from sentiment_watchdog.application.use_cases.analyze_mention import AnalyzeMentionUseCase
from sentiment_watchdog.application.use_cases.analyze_message import AnalyzeMessageUseCase
from sentiment_watchdog.domain.entities.analysis import AnalysisInput, BrandMentionAnalysis
from sentiment_watchdog.domain.entities.message_analysis import MessageAnalysis, MessageContext
from sentiment_watchdog.domain.errors import MissingFieldError, WatchdogError
from sentiment_watchdog.domain.value_objects.enums import AnalysisDepth, InfluencerTier
from sentiment_watchdog.infrastructure.api.dependencies import (
    get_analyze_mention_uc,
    get_analyze_message_uc,
)

logger = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])

NEUTRAL_FALLBACK = {
    "sentimentScore": 0,
    "emotion": "neutral",
    "confidence": 0.5,
    "reasoning": "Analysis failed, using neutral fallback due to processing error",
}


# ── Request schemas ─────────────────────────────────────────────────

class _Body(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


def _empty_if_none(value):
    return [] if value is None else value


# Dashboards send null for lists they have nothing to put in.
StrList = Annotated[list[str], BeforeValidator(_empty_if_none)]


class MentionAuthor(_Body):
    username: str | None = None
    display_name: str | None = Field(default=None, alias="displayName")
    followers: int | None = None
    verified: bool | None = None
    influencer_tier: str | None = Field(default=None, alias="influencerTier")


class MentionContent(_Body):
    text: str | None = None
    url: str | None = None


class Mention(_Body):
    id: str | int | None = None
    platform: str | None = None
    author: MentionAuthor = Field(default_factory=MentionAuthor)
    content: MentionContent | None = None
    hashtags: StrList = Field(default_factory=list)
    mentions: StrList = Field(default_factory=list)
    metrics: dict[str, Any] = Field(default_factory=dict)
    viral_potential: float | None = Field(default=None, alias="viralPotential", ge=0, le=1)


class BrandMentionRequest(_Body):
    mention: Mention | None = None
    brand_keywords: StrList = Field(default_factory=list, alias="brandKeywords")
    competitor_keywords: StrList = Field(default_factory=list, alias="competitorKeywords")


class MessageRequest(_Body):
    message: str | None = None
    customer_name: str | None = Field(default=None, alias="customerName")
    customer_id: str | int | None = Field(default=None, alias="customerId")
    customer_tier: str | None = Field(default=None, alias="customerTier")
    previous_interactions: int | None = Field(default=None, alias="previousInteractions")
    channel: str | None = None
    language: str | None = None
    priority: str | None = None
    tags: StrList = Field(default_factory=list)
    model: str | None = None


# ── Helpers ─────────────────────────────────────────────────────────

def _influencer_tier(raw: str | None) -> InfluencerTier | None:
    try:
        return InfluencerTier(raw.lower()) if raw else None
    except ValueError:
        return None


def _mention_input(payload: BrandMentionRequest) -> AnalysisInput:
    if payload.mention is None:
        raise MissingFieldError("Mention data")
    if payload.mention.content is None or payload.mention.content.text is None:
        raise MissingFieldError("Mention text")

    return AnalysisInput(
        text=payload.mention.content.text,
        viral_potential=payload.mention.viral_potential,
        brand_keywords=payload.brand_keywords,
        competitor_keywords=payload.competitor_keywords,
        influencer_tier=_influencer_tier(payload.mention.author.influencer_tier),
    )


def _message_context(payload: MessageRequest) -> MessageContext:
    if not payload.message:
        raise MissingFieldError("Message")
    return MessageContext(
        message=payload.message,
        customer_name=payload.customer_name,
        customer_id=str(payload.customer_id) if payload.customer_id is not None else None,
        customer_tier=payload.customer_tier,
        previous_interactions=payload.previous_interactions,
        channel=payload.channel,
        language=payload.language,
        current_priority=payload.priority,
        tags=payload.tags,
        provider=payload.model,
    )


def _serialize_mention(a: BrandMentionAnalysis) -> dict:
    return {
        "sentimentScore": a.sentiment.score,
        "emotion": a.sentiment.emotion.value,
        "confidence": a.sentiment.confidence,
        "reasoning": a.sentiment.reasoning,
        "priority": a.classification.priority.value,
        "category": a.classification.category.value,
    }


def _serialize_mention_document(mention: Mention, a: BrandMentionAnalysis) -> dict:
    """Full brand-monitoring document for downstream systems."""
    now = datetime.now(timezone.utc).isoformat()
    return {
        "mentionId": mention.id,
        "timestamp": now,
        "platform": mention.platform,
        "author": {
            "username": mention.author.username,
            "displayName": mention.author.display_name,
            "followers": mention.author.followers,
            "verified": mention.author.verified,
            "influencerTier": a.influencer_tier.value if a.influencer_tier else None,
        },
        "content": {
            "text": mention.content.text if mention.content else None,
            "url": mention.content.url if mention.content else None,
            "hashtags": mention.hashtags,
            "mentions": mention.mentions,
        },
        "metrics": mention.metrics,
        "analysis": {
            "sentiment": {
                "score": a.sentiment.score,
                "emotion": a.sentiment.emotion.value,
                "confidence": a.sentiment.confidence,
                "reasoning": a.sentiment.reasoning,
                "keywords": sorted(a.sentiment.keywords),
            },
            "brand": {
                "relevance": a.brand_relevance,
                "priority": a.classification.priority.value,
                "category": a.classification.category.value,
                "keyTopics": a.key_topics,
            },
            "viral": {
                "potential": a.viral_potential,
                "currentEngagement": mention.metrics.get("engagement"),
                "reachPotential": mention.metrics.get("reach"),
            },
            "competitive": {
                "competitorMentioned": a.competitor_mentioned,
                "brandKeywordsFound": a.brand_keywords_found,
                "competitorKeywordsFound": a.competitor_keywords_found,
            },
            "actionable": {
                "actionRequired": a.action_required,
                "suggestedResponse": a.suggested_response,
                "urgency": a.classification.priority.value,
            },
        },
        "processing": {
            "timestamp": now,
            "model": a.model,
            "version": "2.0",
            "processed": True,
            "method": "keyword-based-sentiment-analysis",
        },
    }


def _serialize_message(a: MessageAnalysis, depth: AnalysisDepth) -> dict:
    data: dict[str, Any] = {
        "emotion": a.emotion.value,
        "sentimentScore": a.sentiment_score,
        "summary": a.summary,
        "reasoning": a.reasoning,
    }
    if depth == AnalysisDepth.BASIC:
        return data

    data.update({
        "confidenceScore": a.confidence_score,
        "priority": a.priority.value if a.priority else None,
        "suggestedActions": a.suggested_actions,
        "escalationRecommended": a.escalation_recommended,
    })
    if depth == AnalysisDepth.ENHANCED:
        data.update({
            "urgencyLevel": a.urgency_level,
            "customerSatisfactionRisk": (
                a.customer_satisfaction_risk.value if a.customer_satisfaction_risk else None
            ),
        })
    return data


# ── Brand mentions ──────────────────────────────────────────────────

@router.post("/analyze-brand-mention")
async def analyze_brand_mention(
    request: Request,
    use_case: AnalyzeMentionUseCase = Depends(get_analyze_mention_uc),
):
    """Keyword-based sentiment, priority and category for one brand mention."""
    try:
        payload = BrandMentionRequest.model_validate(await request.json())
        analysis = use_case.execute(_mention_input(payload))
        return _serialize_mention(analysis)
    except WatchdogError:
        raise
    except Exception:
        logger.exception("Brand mention analysis error")
        return NEUTRAL_FALLBACK


@router.post("/analyze-brand-mention/detailed")
async def analyze_brand_mention_detailed(
    request: Request,
    use_case: AnalyzeMentionUseCase = Depends(get_analyze_mention_uc),
):
    """Same analysis, returned as the full brand-monitoring document."""
    try:
        payload = BrandMentionRequest.model_validate(await request.json())
        analysis = use_case.execute(_mention_input(payload))
        document = _serialize_mention_document(payload.mention, analysis)
        logger.info(
            "Brand mention analyzed: id=%s platform=%s emotion=%s priority=%s",
            payload.mention.id,
            payload.mention.platform,
            analysis.sentiment.emotion.value,
            analysis.classification.priority.value,
        )
        return document
    except WatchdogError:
        raise
    except Exception:
        logger.exception("Brand mention analysis error")
        return NEUTRAL_FALLBACK


# ── Support messages ────────────────────────────────────────────────

async def _analyze_message(
    request: Request, use_case: AnalyzeMessageUseCase, depth: AnalysisDepth
) -> dict:
    try:
        payload = MessageRequest.model_validate(await request.json())
        analysis = await use_case.execute(_message_context(payload), depth)
        return _serialize_message(analysis, depth)
    except WatchdogError:
        raise
    except Exception:
        logger.exception("Sentiment analysis error (%s)", depth.value)
        return NEUTRAL_FALLBACK


@router.post("/analyze-sentiment")
async def analyze_sentiment(
    request: Request,
    use_case: AnalyzeMessageUseCase = Depends(get_analyze_message_uc),
):
    """Emotion, score, summary and reasoning for a support message."""
    return await _analyze_message(request, use_case, AnalysisDepth.BASIC)


@router.post("/analyze-sentiment-enhanced")
async def analyze_sentiment_enhanced(
    request: Request,
    use_case: AnalyzeMessageUseCase = Depends(get_analyze_message_uc),
):
    """Customer-aware triage: priority, actions, escalation, urgency and satisfaction risk."""
    return await _analyze_message(request, use_case, AnalysisDepth.ENHANCED)


@router.post("/analyze-sentiment-pro")
async def analyze_sentiment_pro(
    request: Request,
    use_case: AnalyzeMessageUseCase = Depends(get_analyze_message_uc),
):
    """Language-aware triage with the wider emotion set (urgency, complaint); no urgency score."""
    return await _analyze_message(request, use_case, AnalysisDepth.PRO)
