"""Support-message export — CSV, JSON and plain-text reports of analyzed messages."""

from __future__ import annotations

import csv
import io
import json
from datetime import datetime, timezone
from typing import Any

from sentiment_watchdog.domain.entities.export import ExportedFile
from sentiment_watchdog.domain.errors import UnsupportedFormatError
from sentiment_watchdog.domain.value_objects.enums import ExportFormat

CSV_HEADERS = [
    "Timestamp",
    "Customer Name",
    "Customer ID",
    "Channel",
    "Message",
    "Emotion",
    "Sentiment Score",
    "Confidence Score",
    "Priority",
    "Customer Tier",
    "Previous Interactions",
    "Escalated",
    "Tags",
]

NEGATIVE_REPORT_THRESHOLD = -0.3


def as_float(value: Any, default: float = 0.0) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


def join_values(values: Any) -> str:
    """Comma-joined list cell; non-string items are stringified."""
    if isinstance(values, (list, tuple)):
        return ", ".join(str(v) for v in values)
    return str(values) if values else ""


def to_csv(messages: list[dict]) -> str:
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for msg in messages:
        writer.writerow([
            msg.get("timestamp", ""),
            msg.get("customerName", ""),
            msg.get("customerId", ""),
            msg.get("channel", ""),
            msg.get("message", ""),
            msg.get("emotion", ""),
            msg.get("sentimentScore", ""),
            msg.get("confidenceScore", ""),
            msg.get("priority", ""),
            msg.get("customerTier", ""),
            msg.get("previousInteractions", ""),
            msg.get("escalated", ""),
            join_values(msg.get("tags")),
        ])
    return buffer.getvalue()


def to_document(
    messages: list[dict], alerts: list[dict], stats: dict, time_range: str | None, now: datetime
) -> dict:
    """Restructure flat message/alert records into the export document."""
    return {
        "metadata": {
            "exportDate": now.isoformat(),
            "timeRange": time_range,
            "totalMessages": len(messages),
            "totalAlerts": len(alerts),
            "version": "1.0",
        },
        "statistics": stats,
        "messages": [
            {
                "id": msg.get("id"),
                "timestamp": msg.get("timestamp"),
                "customer": {
                    "name": msg.get("customerName"),
                    "id": msg.get("customerId"),
                    "tier": msg.get("customerTier"),
                    "previousInteractions": msg.get("previousInteractions"),
                },
                "communication": {
                    "channel": msg.get("channel"),
                    "language": msg.get("language"),
                    "message": msg.get("message"),
                    "summary": msg.get("summary"),
                },
                "analysis": {
                    "emotion": msg.get("emotion"),
                    "sentimentScore": msg.get("sentimentScore"),
                    "confidenceScore": msg.get("confidenceScore"),
                    "priority": msg.get("priority"),
                    "escalated": msg.get("escalated"),
                    "tags": msg.get("tags"),
                },
            }
            for msg in messages
        ],
        "alerts": [
            {
                "id": alert.get("id"),
                "timestamp": alert.get("timestamp"),
                "severity": alert.get("severity"),
                "summary": alert.get("summary"),
                "messageCount": alert.get("messageCount"),
                "averageSentiment": alert.get("averageSentiment"),
                "acknowledged": alert.get("acknowledged"),
                "affectedMessages": [
                    m.get("id") if isinstance(m, dict) else m for m in alert.get("messages") or []
                ],
            }
            for alert in alerts
        ],
    }


def to_text(messages: list[dict], alerts: list[dict], stats: dict, now: datetime) -> str:
    alert_lines = "\n".join(
        f"{a.get('timestamp')}: {str(a.get('severity', '')).upper()} - "
        f"{a.get('summary', '')} ({a.get('messageCount', 0)} messages)"
        for a in alerts[:10]
    )
    negative = [m for m in messages if as_float(m.get("sentimentScore")) < NEGATIVE_REPORT_THRESHOLD]
    message_lines = "\n\n".join(
        f"{m.get('timestamp')}: {m.get('customerName', '')} ({m.get('channel', '')}) - "
        f"Score: {as_float(m.get('sentimentScore')):.2f}\n\"{m.get('summary', '')}\""
        for m in negative[:20]
    )

    return "\n".join([
        "SENTIMENT WATCHDOG PRO - REPORT",
        f"Generated: {now.strftime('%Y-%m-%d %H:%M:%S %Z')}",
        "",
        "SUMMARY STATISTICS",
        "==================",
        f"Total Messages: {stats.get('totalMessages', len(messages))}",
        f"Negative Messages: {stats.get('negativeMessages', len(negative))}",
        f"Average Sentiment: {as_float(stats.get('averageSentiment')):.3f}",
        f"Active Alerts: {len(alerts)}",
        f"Response Time: {as_float(stats.get('responseTime')):.1f} minutes",
        f"Customer Satisfaction: {as_float(stats.get('customerSatisfaction')):.1f}%",
        "",
        "RECENT ALERTS",
        "=============",
        alert_lines,
        "",
        "TOP NEGATIVE MESSAGES",
        "=====================",
        message_lines,
    ])


def render(
    fmt: str | None,
    messages: list[dict],
    alerts: list[dict],
    stats: dict,
    time_range: str | None = None,
    now: datetime | None = None,
) -> ExportedFile:
    """Render the support-message export in the requested format.

    Raises:
        UnsupportedFormatError: for anything but csv, json or pdf.
    """
    now = now or datetime.now(timezone.utc)
    day = now.date().isoformat()

    if fmt == ExportFormat.CSV.value:
        return ExportedFile(to_csv(messages), "text/csv", f"sentiment-data-{day}.csv")
    if fmt == ExportFormat.JSON.value:
        document = to_document(messages, alerts, stats, time_range, now)
        return ExportedFile(
            json.dumps(document, indent=2, default=str),
            "application/json",
            f"sentiment-report-{day}.json",
        )
    if fmt == ExportFormat.PDF.value:
        # Plain-text report; no PDF rendering library is involved.
        return ExportedFile(
            to_text(messages, alerts, stats, now), "text/plain", f"sentiment-report-{day}.txt"
        )
    raise UnsupportedFormatError(fmt)
