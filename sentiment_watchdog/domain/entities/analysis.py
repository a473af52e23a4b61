"""Brand-mention analysis entities — inputs and results of keyword scoring."""

from dataclasses import dataclass, field

from sentiment_watchdog.domain.value_objects.enums import (
    Category,
    Emotion,
    InfluencerTier,
    Priority,
)


@dataclass
class AnalysisInput:
    text: str
    viral_potential: float | None = None
    brand_keywords: list[str] = field(default_factory=list)
    competitor_keywords: list[str] = field(default_factory=list)
    influencer_tier: InfluencerTier | None = None


@dataclass(frozen=True)
class SentimentResult:
    score: float
    emotion: Emotion
    confidence: float
    reasoning: str
    keywords: frozenset[str] = frozenset()
    positive_score: int = 0
    negative_score: int = 0
    neutral_score: int = 0
    has_negation: bool = False


@dataclass(frozen=True)
class ClassificationResult:
    priority: Priority
    category: Category


@dataclass
class BrandMentionAnalysis:
    """Everything derived from one brand mention."""

    sentiment: SentimentResult
    classification: ClassificationResult
    brand_relevance: float
    viral_potential: float
    competitor_mentioned: bool
    brand_keywords_found: list[str]
    competitor_keywords_found: list[str]
    key_topics: list[str]
    action_required: bool
    suggested_response: str | None = None
    influencer_tier: InfluencerTier | None = None
    model: str = "enhanced-fallback-analysis"
