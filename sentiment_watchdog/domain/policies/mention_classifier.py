"""MentionClassifier — assigns priority and topical category to a scored mention."""

from __future__ import annotations

from sentiment_watchdog.domain.entities.analysis import ClassificationResult
from sentiment_watchdog.domain.value_objects.enums import Category, Priority

# Evaluated in order; first match wins.
CATEGORY_MARKERS: list[tuple[Category, tuple[str, ...]]] = [
    (Category.PRODUCT, ("product", "feature", "update")),
    (Category.SERVICE, ("service", "support", "help")),
    (Category.CAMPAIGN, ("campaign", "ad", "marketing")),
    (Category.CRISIS, ("down", "broken", "issue", "problem")),
]
OPPORTUNITY_MARKERS = ("recommend", "switch", "try")
OPPORTUNITY_MIN_SCORE = 0.5


def classify_priority(score: float, viral_potential: float | None = None) -> Priority:
    """Urgency from sentiment strength, or from virality alone.

    Rules (first match wins):
      1. |score| > 0.7 or viral > 0.8  →  critical
      2. |score| > 0.5 or viral > 0.6  →  high
      3. |score| > 0.3                 →  medium
      4. otherwise                     →  low

    An absent viral potential never triggers a rule.
    """
    strength = abs(score)
    viral = viral_potential if viral_potential is not None else 0.0

    if strength > 0.7 or viral > 0.8:
        return Priority.CRITICAL
    if strength > 0.5 or viral > 0.6:
        return Priority.HIGH
    if strength > 0.3:
        return Priority.MEDIUM
    return Priority.LOW


def classify_category(score: float, text: str | None) -> Category:
    """Topical bucket from substring markers on the lowercased text."""
    lowered = (text or "").lower()

    for category, markers in CATEGORY_MARKERS:
        if any(m in lowered for m in markers):
            return category

    if score > OPPORTUNITY_MIN_SCORE and any(m in lowered for m in OPPORTUNITY_MARKERS):
        return Category.OPPORTUNITY

    return Category.BRAND


def classify(score: float, text: str | None, viral_potential: float | None = None) -> ClassificationResult:
    return ClassificationResult(
        priority=classify_priority(score, viral_potential),
        category=classify_category(score, text),
    )
