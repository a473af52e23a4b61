"""KeywordScorer — rule-based sentiment from lexicon substring counts."""

from __future__ import annotations

from sentiment_watchdog.domain.entities.analysis import SentimentResult
from sentiment_watchdog.domain.value_objects.enums import Emotion
from sentiment_watchdog.domain.value_objects.lexicon import DEFAULT_LEXICON, Lexicon

MAX_SCORE = 0.9
NEGATION_SCORE = 0.4
MIXED_DAMPING = 0.3
INTENSIFIER_STEP = 0.2
BASE_CONFIDENCE = 0.75
CONFIDENCE_SPAN = 0.2


def _weighted_count(text: str, words: tuple[str, ...], threshold: int | None) -> tuple[int, set[str]]:
    """Sum non-overlapping substring occurrences of *words* in *text*.

    When *threshold* is given, words longer than it weigh 2.
    """
    total = 0
    matched: set[str] = set()
    for word in words:
        count = text.count(word)
        if not count:
            continue
        matched.add(word)
        weight = 2 if threshold is not None and len(word) > threshold else 1
        total += count * weight
    return total, matched


def intensifier_multiplier(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> float:
    """1.0 plus 0.2 per distinct intensifier present (repeats count once)."""
    multiplier = 1.0
    for word in lexicon.intensifiers:
        if word in text:
            multiplier += INTENSIFIER_STEP
    return multiplier


def has_negation(text: str, lexicon: Lexicon = DEFAULT_LEXICON) -> bool:
    return any(word in text for word in lexicon.negations)


def score_text(text: str | None, lexicon: Lexicon = DEFAULT_LEXICON) -> SentimentResult:
    """Score free text against the lexicon.

    Matching is plain substring containment on the lowercased text, so
    "cannot" also triggers "not" and "no". The function is total: any
    string (empty or None included) yields a well-formed result.

    Decision tree:
      1. Negation present → the dominant polarity is flipped to a fixed
         ±0.4 × intensifier multiplier; a tie stays neutral.
      2. Positive is the unique maximum → positive share × multiplier,
         capped at 0.9.
      3. Negative is the unique maximum → negated negative share × multiplier,
         capped at 0.9.
      4. Both polarities present without a unique winner → mixed, damped
         to ±0.3.
      5. Otherwise neutral, score 0.
    """
    lowered = (text or "").lower()

    positive, pos_words = _weighted_count(lowered, lexicon.positive, lexicon.long_word_threshold)
    negative, neg_words = _weighted_count(lowered, lexicon.negative, lexicon.long_word_threshold)
    neutral, neu_words = _weighted_count(lowered, lexicon.neutral, None)

    multiplier = intensifier_multiplier(lowered, lexicon)
    negated = has_negation(lowered, lexicon)

    score = 0.0
    emotion = Emotion.NEUTRAL

    if negated:
        if positive > negative:
            score = -min(MAX_SCORE, NEGATION_SCORE * multiplier)
            emotion = Emotion.NEGATIVE
        elif negative > positive:
            score = min(MAX_SCORE, NEGATION_SCORE * multiplier)
            emotion = Emotion.POSITIVE
    else:
        total = positive + negative + neutral
        if positive > negative and positive > neutral:
            score = min(MAX_SCORE, (positive / total) * multiplier)
            emotion = Emotion.POSITIVE
        elif negative > positive and negative > neutral:
            score = -min(MAX_SCORE, (negative / total) * multiplier)
            emotion = Emotion.NEGATIVE
        elif positive > 0 and negative > 0:
            score = ((positive - negative) / (positive + negative)) * MIXED_DAMPING
            emotion = Emotion.MIXED

    reasoning = (
        f"Found {positive} positive signals, {negative} negative signals, "
        f"{neutral} neutral signals. "
        f"{'Negation detected. ' if negated else ''}"
        f"Sentiment: {emotion.value} ({score:.2f})."
    )

    return SentimentResult(
        score=score,
        emotion=emotion,
        confidence=BASE_CONFIDENCE + abs(score) * CONFIDENCE_SPAN,
        reasoning=reasoning,
        keywords=frozenset(pos_words | neg_words | neu_words),
        positive_score=positive,
        negative_score=negative,
        neutral_score=neutral,
        has_negation=negated,
    )
