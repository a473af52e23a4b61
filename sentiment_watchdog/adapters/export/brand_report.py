"""Brand-monitoring export — mentions, alerts and analytics as CSV, JSON or text."""

from __future__ import annotations

import csv
import io
import json
from datetime import datetime, timezone

from sentiment_watchdog.adapters.export.support_report import as_float, join_values
from sentiment_watchdog.domain.entities.export import ExportedFile
from sentiment_watchdog.domain.errors import UnsupportedFormatError
from sentiment_watchdog.domain.value_objects.enums import ExportFormat

CSV_HEADERS = [
    "ID",
    "Timestamp",
    "Platform",
    "Author",
    "Username",
    "Followers",
    "Verified",
    "Influencer Tier",
    "Content",
    "Likes",
    "Shares",
    "Comments",
    "Views",
    "Engagement",
    "Reach",
    "Sentiment Score",
    "Sentiment Emotion",
    "Confidence",
    "Brand Relevance",
    "Viral Potential",
    "Priority",
    "Category",
    "Hashtags",
    "Keywords",
    "Location",
    "Language",
]


def content_text(mention: dict) -> str:
    """Mention text whether ``content`` is a plain string or a ``{text: ...}`` object."""
    content = mention.get("content")
    if isinstance(content, dict):
        content = content.get("text")
    return str(content) if content else ""


def _mention_row(mention: dict) -> list:
    author = mention.get("author") or {}
    metrics = mention.get("metrics") or {}
    sentiment = mention.get("sentiment") or {}
    return [
        mention.get("id", ""),
        mention.get("timestamp", ""),
        mention.get("platform", ""),
        author.get("displayName", ""),
        author.get("username", ""),
        author.get("followers", 0),
        author.get("verified", False),
        author.get("influencerTier", ""),
        content_text(mention),
        metrics.get("likes", 0),
        metrics.get("shares", 0),
        metrics.get("comments", 0),
        metrics.get("views", 0),
        metrics.get("engagement", 0),
        metrics.get("reach", 0),
        sentiment.get("score", 0),
        sentiment.get("emotion", ""),
        sentiment.get("confidence", 0),
        mention.get("brandRelevance", 0),
        mention.get("viralPotential", 0),
        mention.get("priority", ""),
        mention.get("category", ""),
        join_values(mention.get("hashtags")),
        join_values(mention.get("keywords")),
        mention.get("location", ""),
        mention.get("language", ""),
    ]


def to_csv(mentions: list[dict]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(_mention_row(m) for m in mentions)
    return buffer.getvalue()


def to_text(mentions: list[dict], alerts: list[dict], analytics: dict, now: datetime) -> str:
    mention_blocks = []
    for index, mention in enumerate(mentions[:10], 1):
        author = mention.get("author") or {}
        sentiment = mention.get("sentiment") or {}
        metrics = mention.get("metrics") or {}
        mention_blocks.append(
            f"{index}. {author.get('displayName') or 'Unknown'} (@{author.get('username') or 'unknown'})\n"
            f"   Platform: {mention.get('platform', '')}\n"
            f"   Sentiment: {sentiment.get('emotion', '')} ({as_float(sentiment.get('score')):.2f})\n"
            f"   Content: {content_text(mention)[:100]}...\n"
            f"   Engagement: {metrics.get('likes', 0)} likes, {metrics.get('shares', 0)} shares\n"
            f"   Timestamp: {mention.get('timestamp', '')}"
        )

    alert_blocks = []
    for index, alert in enumerate(alerts[:5], 1):
        alert_blocks.append(
            f"{index}. {alert.get('title', '')}\n"
            f"   Severity: {str(alert.get('severity', '')).upper()}\n"
            f"   Type: {str(alert.get('type', '')).replace('_', ' ').upper()}\n"
            f"   Status: {'Acknowledged' if alert.get('acknowledged') else 'Pending'}\n"
            f"   Time: {alert.get('timestamp', '')}"
        )

    return "\n".join([
        "BRAND MONITORING REPORT",
        f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S %Z')}",
        "",
        "SUMMARY",
        "=======",
        f"Total Mentions: {len(mentions)}",
        f"Brand Health: {as_float(analytics.get('brandHealth')):.1f}%",
        f"Share of Voice: {as_float(analytics.get('shareOfVoice')):.1f}%",
        f"Total Alerts: {len(alerts)}",
        "",
        "RECENT MENTIONS",
        "===============",
        "\n\n".join(mention_blocks) or "No mentions available",
        "",
        "ALERTS SUMMARY",
        "==============",
        "\n\n".join(alert_blocks) or "No alerts available",
        "",
        "ANALYTICS",
        "=========",
        f"Positive Mentions: {analytics.get('positiveMentions', 0)}",
        f"Negative Mentions: {analytics.get('negativeMentions', 0)}",
        f"Neutral Mentions: {analytics.get('neutralMentions', 0)}",
        f"Average Sentiment: {as_float(analytics.get('averageSentiment')):.2f}",
        f"Total Reach: {int(as_float(analytics.get('totalReach'))):,}",
        f"Influencer Mentions: {analytics.get('influencerMentions', 0)}",
        f"Viral Posts: {analytics.get('viralPosts', 0)}",
        "",
        "---",
        "Report generated by Sentiment Watchdog Pro",
    ])


def render(
    fmt: str | None,
    payload: dict,
    now: datetime | None = None,
) -> ExportedFile:
    """Render the brand-monitoring export.

    *payload* is the raw export request (format, mentions, alerts, analytics).
    The JSON format echoes it back unchanged.

    Raises:
        UnsupportedFormatError: for anything but csv, json or pdf.
    """
    now = now or datetime.now(timezone.utc)
    day = now.date().isoformat()
    mentions = payload.get("mentions") or []
    alerts = payload.get("alerts") or []
    analytics = payload.get("analytics") or {}

    if fmt == ExportFormat.JSON.value:
        return ExportedFile(
            json.dumps(payload, indent=2, default=str),
            "application/json",
            f"brand-monitoring-{day}.json",
        )
    if fmt == ExportFormat.CSV.value:
        return ExportedFile(to_csv(mentions), "text/csv", f"brand-monitoring-{day}.csv")
    if fmt == ExportFormat.PDF.value:
        return ExportedFile(
            to_text(mentions, alerts, analytics, now), "text/plain", f"brand-monitoring-{day}.txt"
        )
    raise UnsupportedFormatError(fmt)
