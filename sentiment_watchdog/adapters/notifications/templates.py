"""Notification payload templates — Slack, SendGrid email, Twilio SMS and webhooks."""

from __future__ import annotations

from datetime import datetime
from html import escape

from sentiment_watchdog.domain.entities.alert import BrandAlert, SentimentAlert
from sentiment_watchdog.domain.value_objects.enums import Severity

SLACK_COLORS = {
    Severity.CRITICAL: "danger",
    Severity.HIGH: "warning",
}
SEVERITY_ACCENTS = {
    Severity.CRITICAL: ("#fee2e2", "#dc2626"),
    Severity.HIGH: ("#fef3c7", "#d97706"),
}
DEFAULT_ACCENT = ("#dbeafe", "#2563eb")

SLACK_SAMPLE_SIZE = 3
EMAIL_SAMPLE_SIZE = 5


def _when(ts: datetime) -> str:
    return ts.strftime("%Y-%m-%d %H:%M:%S")


# ── Slack ───────────────────────────────────────────────────────────

def slack_sentiment_payload(alert: SentimentAlert, dashboard_url: str) -> dict:
    """Block Kit message for a support-sentiment alert."""
    level = alert.severity.value.upper()
    sample = "\n".join(
        f"• {m.customer} ({m.channel}): {m.emotion} - {m.sentiment_score:.2f}"
        for m in alert.affected_messages[:SLACK_SAMPLE_SIZE]
    )
    extra = len(alert.affected_messages) - SLACK_SAMPLE_SIZE
    if extra > 0:
        sample += f"\n• +{extra} more messages"

    blocks = [
        {
            "type": "header",
            "text": {"type": "plain_text", "text": f"🚨 {level} Sentiment Alert"},
        },
        {
            "type": "section",
            "fields": [
                {"type": "mrkdwn", "text": f"*Alert Type:* {alert.type}"},
                {"type": "mrkdwn", "text": f"*Messages Affected:* {alert.message_count}"},
                {"type": "mrkdwn", "text": f"*Average Sentiment:* {alert.average_sentiment:.2f}"},
                {"type": "mrkdwn", "text": f"*Time:* {_when(alert.timestamp)}"},
            ],
        },
        {
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"*Summary:* {alert.summary}"},
        },
    ]
    if sample:
        blocks.append({
            "type": "section",
            "text": {"type": "mrkdwn", "text": f"*Affected Messages:*\n{sample}"},
        })
    blocks.append({
        "type": "actions",
        "elements": [
            {
                "type": "button",
                "text": {"type": "plain_text", "text": "View Dashboard"},
                "url": dashboard_url,
                "style": "primary",
            },
            {
                "type": "button",
                "text": {"type": "plain_text", "text": "Acknowledge Alert"},
                "action_id": f"acknowledge_{alert.id}",
            },
        ],
    })
    return {"text": f"🚨 {level} Alert: {alert.summary}", "blocks": blocks}


def slack_brand_payload(alert: BrandAlert) -> dict:
    """Attachment-style message for a brand alert."""
    return {
        "text": f"🚨 Brand Alert: {alert.title}",
        "attachments": [
            {
                "color": SLACK_COLORS.get(alert.severity, "good"),
                "fields": [
                    {"title": "Severity", "value": alert.severity.value.upper(), "short": True},
                    {"title": "Mentions", "value": str(len(alert.affected_mentions)), "short": True},
                    {"title": "Description", "value": alert.description, "short": False},
                ],
                "footer": "Sentiment Watchdog Pro",
                "ts": int(alert.timestamp.timestamp()),
            }
        ],
    }


# ── Email (SendGrid v3 mail/send body) ──────────────────────────────

def _sendgrid_body(recipients: list[str], sender: str, subject: str, html_body: str) -> dict:
    return {
        "personalizations": [{"to": [{"email": r} for r in recipients], "subject": subject}],
        "from": {"email": sender, "name": "Sentiment Watchdog Pro"},
        "content": [{"type": "text/html", "value": html_body}],
    }


def email_sentiment_payload(
    alert: SentimentAlert, recipients: list[str], sender: str, dashboard_url: str
) -> dict:
    level = alert.severity.value.upper()
    rows = "".join(
        f'<div style="border-left: 4px solid #dc3545; padding: 10px; margin: 10px 0;">'
        f"<strong>{escape(m.customer)}</strong> via {escape(m.channel)}<br>"
        f'<span style="color: #dc3545;">{escape(m.emotion)} ({m.sentiment_score:.2f})</span><br>'
        f"<em>{escape(m.summary)}</em></div>"
        for m in alert.affected_messages[:EMAIL_SAMPLE_SIZE]
    )
    extra = len(alert.affected_messages) - EMAIL_SAMPLE_SIZE
    if extra > 0:
        rows += f"<p><em>+{extra} more messages affected</em></p>"

    html_body = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f"<h1>🚨 Sentiment Alert</h1><p>{level} Priority Alert</p>"
        f"<h2>{escape(alert.summary)}</h2>"
        "<table>"
        f"<tr><td><strong>Alert Type:</strong></td><td>{escape(alert.type)}</td></tr>"
        f"<tr><td><strong>Messages Affected:</strong></td><td>{alert.message_count}</td></tr>"
        f"<tr><td><strong>Average Sentiment:</strong></td><td>{alert.average_sentiment:.2f}</td></tr>"
        f"<tr><td><strong>Time Window:</strong></td><td>{escape(alert.time_window or '-')}</td></tr>"
        f"<tr><td><strong>Timestamp:</strong></td><td>{_when(alert.timestamp)}</td></tr>"
        "</table>"
        f"{rows}"
        f'<p><a href="{escape(dashboard_url)}">View Live Dashboard</a></p>'
        f"<p>This is an automated alert from Sentiment Watchdog Pro. Alert ID: {escape(alert.id)}</p>"
        "</div>"
    )
    subject = f"🚨 {level} Sentiment Alert - {alert.message_count} messages affected"
    return _sendgrid_body(recipients, sender, subject, html_body)


def email_brand_payload(
    alert: BrandAlert, recipients: list[str], sender: str, dashboard_url: str
) -> dict:
    background, accent = SEVERITY_ACCENTS.get(alert.severity, DEFAULT_ACCENT)
    mentions = "".join(
        '<div style="border: 1px solid #e5e7eb; border-radius: 8px; padding: 15px; margin-bottom: 10px;">'
        f"<strong>@{escape(m.author)}</strong> "
        f"<span>{escape(m.platform)} • {m.followers:,} followers</span>"
        f'<p><em>"{escape(m.url)}"</em></p>'
        f"<div>Sentiment: {m.sentiment_score:.2f} • Viral Potential: {m.viral_potential * 100:.0f}%</div>"
        "</div>"
        for m in alert.affected_mentions[:SLACK_SAMPLE_SIZE]
    )
    html_body = (
        '<div style="font-family: Arial, sans-serif; max-width: 600px; margin: 0 auto;">'
        f"<h1>🚨 Brand Alert Triggered</h1><p>{_when(alert.timestamp)}</p>"
        f'<div style="background: {background}; border-left: 4px solid {accent}; padding: 15px;">'
        f'<h2 style="color: {accent};">{escape(alert.title)}</h2>'
        f"<p>{escape(alert.description)}</p></div>"
        f"<p><strong>Mentions:</strong> {len(alert.affected_mentions)} | "
        f"<strong>Severity:</strong> {alert.severity.value.upper()} | "
        f"<strong>Avg Sentiment:</strong> {alert.average_sentiment:.2f}</p>"
        f"<h3>Affected Mentions:</h3>{mentions}"
        f'<p><a href="{escape(dashboard_url)}">View Dashboard</a></p>'
        "<p>Sentiment Watchdog Pro • Brand Monitoring System<br>"
        "This is an automated alert. Please do not reply to this email.</p>"
        "</div>"
    )
    return _sendgrid_body(recipients, sender, f"🚨 Brand Alert: {alert.title}", html_body)


# ── SMS ─────────────────────────────────────────────────────────────

def sms_body(alert: SentimentAlert | BrandAlert) -> str:
    if isinstance(alert, BrandAlert):
        return (
            f"🚨 BRAND ALERT: {alert.title}\n\n{alert.description}\n\n"
            f"Severity: {alert.severity.value.upper()}\n"
            f"Mentions: {len(alert.affected_mentions)}\n\n"
            f"Time: {_when(alert.timestamp)}"
        )
    return (
        f"🚨 SENTIMENT ALERT: {alert.summary}\n\n"
        f"Severity: {alert.severity.value.upper()}\n"
        f"Messages: {alert.message_count}\n"
        f"Avg Sentiment: {alert.average_sentiment:.2f}\n\n"
        f"Time: {_when(alert.timestamp)}"
    )


# ── Generic webhook ─────────────────────────────────────────────────

def webhook_payload(alert: SentimentAlert | BrandAlert, environment: str) -> dict:
    if isinstance(alert, BrandAlert):
        return {
            "event": "brand_alert",
            "timestamp": alert.timestamp.isoformat(),
            "data": {
                "alertId": alert.alert_id,
                "title": alert.title,
                "description": alert.description,
                "severity": alert.severity.value,
                "averageSentiment": alert.average_sentiment,
                "affectedMentions": [
                    {
                        "author": m.author,
                        "platform": m.platform,
                        "followers": m.followers,
                        "url": m.url,
                        "sentimentScore": m.sentiment_score,
                        "viralPotential": m.viral_potential,
                    }
                    for m in alert.affected_mentions
                ],
            },
        }
    return {
        "event": "sentiment_alert",
        "timestamp": alert.timestamp.isoformat(),
        "alert": {
            "id": alert.id,
            "type": alert.type,
            "severity": alert.severity.value,
            "summary": alert.summary,
            "metrics": {
                "messageCount": alert.message_count,
                "averageSentiment": alert.average_sentiment,
                "timeWindow": alert.time_window,
            },
            "affectedMessages": [
                {
                    "id": m.id,
                    "customer": m.customer,
                    "channel": m.channel,
                    "emotion": m.emotion,
                    "sentimentScore": m.sentiment_score,
                }
                for m in alert.affected_messages
            ],
        },
        "metadata": {
            "source": "sentiment-watchdog-pro",
            "version": "1.0",
            "environment": environment,
        },
    }
