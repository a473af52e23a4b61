"""HTTP-level tests for the FastAPI routes (fake notifiers, no OpenAI key)."""

import pytest
from fastapi.testclient import TestClient

from sentiment_watchdog.adapters.llm.openai_adapter import OpenAIAdapter
from sentiment_watchdog.application.ports.notifier_port import NotifierPort
from sentiment_watchdog.application.use_cases.analyze_message import AnalyzeMessageUseCase
from sentiment_watchdog.application.use_cases.dispatch_alert import DispatchAlertUseCase
from sentiment_watchdog.domain.entities.alert import DeliveryResult
from sentiment_watchdog.domain.value_objects.enums import NotificationChannel
from sentiment_watchdog.infrastructure.api import dependencies
from sentiment_watchdog.infrastructure.api.routes_analysis import NEUTRAL_FALLBACK
from sentiment_watchdog.main import app


class RecordingNotifier(NotifierPort):
    def __init__(self, channel: NotificationChannel):
        self.channel = channel
        self.sent = []

    @property
    def configured(self) -> bool:
        return True

    async def notify(self, alert) -> DeliveryResult:
        self.sent.append(alert)
        return DeliveryResult(channel=self.channel, delivered=True, payload={})


class BrokenMentionUseCase:
    def execute(self, data):
        raise RuntimeError("scorer exploded")


@pytest.fixture
def notifiers():
    return {c: RecordingNotifier(c) for c in NotificationChannel}


@pytest.fixture
def client(notifiers):
    llm = OpenAIAdapter(api_key="")
    app.dependency_overrides[dependencies.get_llm_adapter] = lambda: llm
    app.dependency_overrides[dependencies.get_analyze_message_uc] = lambda: AnalyzeMessageUseCase(llm=llm)
    app.dependency_overrides[dependencies.get_dispatch_alert_uc] = lambda: DispatchAlertUseCase(notifiers)
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["status"] == "ok"
    assert response.json()["llm"] == "keyword-heuristic"


# ─── Brand mentions ─────────────────────────────────────────────────


def test_analyze_brand_mention(client):
    response = client.post(
        "/api/analyze-brand-mention",
        json={"mention": {"content": {"text": "I do not love this product"}}},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["sentimentScore"] == pytest.approx(-0.4)
    assert body["emotion"] == "negative"
    assert body["confidence"] == pytest.approx(0.83)
    assert body["priority"] == "medium"
    assert body["category"] == "product"
    assert "Negation detected." in body["reasoning"]


def test_viral_potential_from_request(client):
    response = client.post(
        "/api/analyze-brand-mention",
        json={"mention": {"viralPotential": 0.85, "content": {"text": "hello"}}},
    )
    assert response.json()["priority"] == "critical"


def test_detailed_mention_document(client):
    response = client.post(
        "/api/analyze-brand-mention/detailed",
        json={
            "mention": {
                "id": "t1",
                "platform": "twitter",
                "author": {"username": "fan", "influencerTier": "mega"},
                "content": {"text": "Switching from RivalCo, I highly recommend it, absolutely brilliant!"},
            },
            "brandKeywords": ["Acme"],
            "competitorKeywords": ["RivalCo"],
        },
    )
    body = response.json()
    analysis = body["analysis"]
    assert body["mentionId"] == "t1"
    assert body["author"]["influencerTier"] == "mega"
    assert analysis["brand"]["category"] == "opportunity"
    assert analysis["competitive"]["competitorKeywordsFound"] == ["RivalCo"]
    assert analysis["viral"]["potential"] == pytest.approx(0.8)
    assert analysis["actionable"]["actionRequired"] is True
    assert body["processing"]["model"] == "enhanced-fallback-analysis"


@pytest.mark.parametrize(
    "payload, error",
    [
        ({}, "Mention data is required"),
        ({"mention": {"platform": "x"}}, "Mention text is required"),
        ({"mention": {"content": {}}}, "Mention text is required"),
    ],
)
def test_missing_mention_fields(client, payload, error):
    response = client.post("/api/analyze-brand-mention", json=payload)
    assert response.status_code == 400
    assert response.json() == {"error": error}


def test_empty_text_is_analyzed(client):
    response = client.post("/api/analyze-brand-mention", json={"mention": {"content": {"text": ""}}})
    assert response.status_code == 200
    assert response.json()["category"] == "brand"


def test_null_keyword_lists_are_scored(client):
    response = client.post(
        "/api/analyze-brand-mention",
        json={
            "mention": {"content": {"text": "I love it, absolutely amazing"}, "hashtags": None, "mentions": None},
            "brandKeywords": None,
            "competitorKeywords": None,
        },
    )
    body = response.json()
    assert response.status_code == 200
    assert body["sentimentScore"] == pytest.approx(0.9)
    assert body["emotion"] == "positive"


def test_null_tags_on_support_message(client):
    response = client.post(
        "/api/analyze-sentiment-enhanced",
        json={"message": "I hate this, terrible", "tags": None},
    )
    assert response.json()["urgencyLevel"] == 9


def test_scorer_failure_returns_neutral_fallback(client):
    app.dependency_overrides[dependencies.get_analyze_mention_uc] = BrokenMentionUseCase
    response = client.post("/api/analyze-brand-mention", json={"mention": {"content": {"text": "hi"}}})
    assert response.status_code == 200
    assert response.json() == NEUTRAL_FALLBACK


def test_malformed_json_returns_neutral_fallback(client):
    response = client.post(
        "/api/analyze-brand-mention",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 200
    assert response.json() == NEUTRAL_FALLBACK


# ─── Support messages ───────────────────────────────────────────────


def test_analyze_sentiment_basic(client):
    response = client.post("/api/analyze-sentiment", json={"message": "This is terrible, I hate it"})
    body = response.json()
    assert response.status_code == 200
    assert set(body) == {"emotion", "sentimentScore", "summary", "reasoning"}
    assert body["emotion"] == "frustration"


def test_analyze_sentiment_enhanced(client):
    response = client.post(
        "/api/analyze-sentiment-enhanced",
        json={"message": "I hate this, terrible", "customerName": "Ann", "customerTier": "gold"},
    )
    body = response.json()
    assert response.status_code == 200
    assert body["priority"] == "critical"
    assert body["escalationRecommended"] is True
    assert body["urgencyLevel"] == 9
    assert body["customerSatisfactionRisk"] == "critical"


def test_analyze_sentiment_pro(client):
    response = client.post(
        "/api/analyze-sentiment-pro",
        json={"message": "where is my invoice", "customerTier": "platinum", "language": "en", "model": "google"},
    )
    body = response.json()
    assert body["priority"] == "medium"
    assert body["escalationRecommended"] is False
    assert "urgencyLevel" not in body
    assert "customerSatisfactionRisk" not in body


def test_missing_message(client):
    response = client.post("/api/analyze-sentiment-pro", json={})
    assert response.status_code == 400
    assert response.json() == {"error": "Message is required"}


# ─── Alerts ─────────────────────────────────────────────────────────


def test_send_alert_slack_only(client, notifiers):
    response = client.post(
        "/api/send-alert",
        json={
            "alertId": "a9",
            "severity": "critical",
            "summary": "Angry customers",
            "metrics": {"messageCount": 3, "averageSentiment": -0.6},
        },
    )
    body = response.json()
    assert body["success"] is True
    assert body["channels"] == {"slack": True}
    sent = notifiers[NotificationChannel.SLACK].sent[0]
    assert sent.id == "a9"
    assert sent.message_count == 3
    assert notifiers[NotificationChannel.EMAIL].sent == []


def test_send_enhanced_alert(client):
    response = client.post(
        "/api/send-enhanced-alert",
        json={"alert": {"summary": "x"}, "config": {"slackEnabled": False, "emailEnabled": True}},
    )
    assert response.json()["channels"] == {"email": True}


def test_send_alert_notification_generates_id(client):
    response = client.post(
        "/api/send-alert-notification",
        json={"severity": "HIGH", "summary": "x", "messages": [{"customerName": "Ann", "sentimentScore": -0.9}]},
    )
    body = response.json()
    assert body["alertId"]
    assert set(body["channels"]) == {"slack", "email", "webhook"}


def test_send_brand_alert_skips_sms_unless_critical(client, notifiers):
    response = client.post(
        "/api/send-brand-alert",
        json={
            "alertId": "b1",
            "title": "Spike",
            "severity": "high",
            "affectedMentions": [{"platform": "twitter", "sentiment": {"score": -0.5}}],
            "notifications": {"sms": True, "slack": True},
        },
    )
    body = response.json()
    assert body["alertId"] == "b1"
    assert body["notificationsSent"]["sms"] is False
    assert body["notificationsSent"]["dashboard"] is True
    assert body["delivered"] == {"slack": True}
    assert notifiers[NotificationChannel.SMS].sent == []
    assert notifiers[NotificationChannel.SLACK].sent[0].average_sentiment == pytest.approx(-0.5)


def test_send_brand_alert_critical_sms(client, notifiers):
    response = client.post(
        "/api/send-brand-alert",
        json={
            "alertId": "a1",
            "title": "Spike",
            "description": "Negative wave",
            "severity": "critical",
            "affectedMentions": [],
            "notifications": {"email": False, "sms": True, "slack": False, "webhook": False},
            "brandContext": {"averageSentiment": -0.75},
        },
    )
    body = response.json()
    assert response.status_code == 200
    assert body["alertId"] == "a1"
    assert body["notificationsSent"]["sms"] is True
    sent = notifiers[NotificationChannel.SMS].sent
    assert len(sent) == 1
    assert sent[0].title == "Spike"
    assert sent[0].average_sentiment == pytest.approx(-0.75)


def test_send_brand_alert_accepts_wrapped_alert(client, notifiers):
    response = client.post(
        "/api/send-brand-alert",
        json={"alert": {"alertId": "w1", "severity": "low"}, "notifications": {"webhook": True}},
    )
    assert response.json()["alertId"] == "w1"
    assert response.json()["delivered"] == {"webhook": True}


def test_malformed_alert_is_rejected(client):
    response = client.post("/api/send-alert", json={"severity": "apocalyptic"})
    assert response.status_code == 422


# ─── Export ─────────────────────────────────────────────────────────


def test_export_csv(client):
    response = client.post(
        "/api/export-data",
        json={"format": "csv", "messages": [{"customerName": "Ann", "sentimentScore": -0.5}]},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/csv")
    assert response.headers["content-disposition"].startswith('attachment; filename="sentiment-data-')
    assert "Ann" in response.text


def test_export_unsupported_format(client):
    response = client.post("/api/export-data", json={"format": "xml"})
    assert response.status_code == 400
    assert response.json() == {"error": "Unsupported format"}


def test_export_brand_json(client):
    payload = {"format": "json", "mentions": [], "analytics": {"brandHealth": 72}}
    response = client.post("/api/export-brand-data", json=payload)
    assert response.status_code == 200
    assert response.json() == payload
