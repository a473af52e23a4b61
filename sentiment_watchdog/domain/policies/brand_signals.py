"""BrandSignals — relevance, competitor and virality signals around a mention."""

from __future__ import annotations

from sentiment_watchdog.domain.value_objects.enums import Category, InfluencerTier, Priority

DEFAULT_VIRAL_POTENTIAL = 0.3
HIGH_REACH_TIERS = frozenset({InfluencerTier.MEGA, InfluencerTier.CELEBRITY})

NEGATIVE_RESPONSE = "Consider reaching out to address concerns and provide support"
POSITIVE_RESPONSE = "Engage positively and consider amplifying this positive mention"
COMPETITOR_TOPIC = "competitor analysis"


def matching_keywords(text: str | None, keywords: list[str] | None) -> list[str]:
    """Keywords (original casing kept) that occur case-insensitively in *text*.

    An empty keyword is contained in every text, so it always matches.
    """
    lowered = (text or "").lower()
    return [k for k in keywords or [] if k.lower() in lowered]


def brand_relevance(matched_brand_keywords: int) -> float:
    return min(1.0, 0.5 + matched_brand_keywords * 0.2)


def adjusted_viral_potential(
    viral_potential: float | None,
    score: float,
    influencer_tier: InfluencerTier | None = None,
) -> float:
    """Boost the supplied viral potential for big audiences and strong sentiment.

    A missing (or zero) value starts at the 0.3 baseline. Mega/celebrity
    authors add 0.3 and |score| > 0.6 adds 0.2; the result is capped at 1.
    """
    viral = viral_potential or DEFAULT_VIRAL_POTENTIAL
    if influencer_tier in HIGH_REACH_TIERS:
        viral = min(1.0, viral + 0.3)
    if abs(score) > 0.6:
        viral = min(1.0, viral + 0.2)
    return viral


def key_topics(brand_matches: list[str], competitor_mentioned: bool, category: Category) -> list[str]:
    topics = list(brand_matches)
    if competitor_mentioned:
        topics.append(COMPETITOR_TOPIC)
    topics.append(category.value)
    return topics


def action_required(score: float, priority: Priority) -> bool:
    return abs(score) > 0.5 or priority == Priority.CRITICAL


def suggested_response(score: float) -> str | None:
    if score < -0.5:
        return NEGATIVE_RESPONSE
    if score > 0.7:
        return POSITIVE_RESPONSE
    return None
