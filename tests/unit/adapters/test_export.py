"""Tests for the support and brand-monitoring export renderers."""

import csv
import io
import json

import pytest

from sentiment_watchdog.adapters.export import brand_report, support_report
from sentiment_watchdog.domain.errors import UnsupportedFormatError

MESSAGES = [
    {
        "id": "m1",
        "timestamp": "2024-05-01T10:00:00Z",
        "customerName": "Doe, Jane",
        "customerId": "C1",
        "channel": "email",
        "message": 'She said "never again"',
        "emotion": "anger",
        "sentimentScore": -0.8,
        "summary": "Furious about delays",
        "tags": ["billing", "vip"],
    },
    {
        "id": "m2",
        "timestamp": "2024-05-01T11:00:00Z",
        "customerName": "Bob",
        "channel": "chat",
        "message": "Thanks!",
        "emotion": "joy",
        "sentimentScore": 0.7,
    },
]
ALERTS = [{"id": "a1", "severity": "high", "summary": "Spike", "messageCount": 2, "messages": [{"id": "m1"}]}]


# ─── Support export ─────────────────────────────────────────────────


def test_support_csv_quotes_fields(fixed_now):
    exported = support_report.render("csv", MESSAGES, [], {}, now=fixed_now)
    assert exported.media_type == "text/csv"
    assert exported.filename == "sentiment-data-2024-05-01.csv"

    rows = list(csv.reader(io.StringIO(exported.content)))
    assert rows[0] == support_report.CSV_HEADERS
    assert rows[1][1] == "Doe, Jane"
    assert rows[1][4] == 'She said "never again"'
    assert rows[1][-1] == "billing, vip"
    assert len(rows) == 3


def test_support_json_document(fixed_now):
    exported = support_report.render("json", MESSAGES, ALERTS, {"totalMessages": 2}, "24h", now=fixed_now)
    document = json.loads(exported.content)
    assert exported.filename == "sentiment-report-2024-05-01.json"
    assert document["metadata"]["totalMessages"] == 2
    assert document["metadata"]["timeRange"] == "24h"
    assert document["messages"][0]["customer"]["name"] == "Doe, Jane"
    assert document["alerts"][0]["affectedMessages"] == ["m1"]


def test_support_text_report_lists_negative_messages(fixed_now):
    exported = support_report.render("pdf", MESSAGES, ALERTS, {}, now=fixed_now)
    assert exported.media_type == "text/plain"
    assert exported.filename.endswith(".txt")
    assert exported.content.startswith("SENTIMENT WATCHDOG PRO - REPORT")
    assert "Doe, Jane (email) - Score: -0.80" in exported.content
    assert "Bob (chat)" not in exported.content


@pytest.mark.parametrize("fmt", ["xml", None, "CSV"])
def test_unsupported_format(fmt):
    with pytest.raises(UnsupportedFormatError, match="Unsupported format"):
        support_report.render(fmt, [], [], {})


def test_support_exports_tolerate_loose_records(fixed_now):
    messages = [{"customerName": "Ann", "tags": [1, None, "vip"]}]
    alerts = [{"id": "a2", "messages": ["m1", {"id": "m2"}]}]

    rows = list(csv.reader(io.StringIO(support_report.render("csv", messages, [], {}, now=fixed_now).content)))
    assert rows[1][-1] == "1, None, vip"

    document = json.loads(support_report.render("json", messages, alerts, {}, now=fixed_now).content)
    assert document["alerts"][0]["affectedMessages"] == ["m1", "m2"]


@pytest.mark.parametrize(
    "values, expected",
    [(["a", "b"], "a, b"), ([2, 3.5], "2, 3.5"), ("solo", "solo"), (None, ""), ([], "")],
)
def test_join_values(values, expected):
    assert support_report.join_values(values) == expected


def test_as_float():
    assert support_report.as_float("0.5") == 0.5
    assert support_report.as_float(None) == 0.0
    assert support_report.as_float("n/a", 1.0) == 1.0


# ─── Brand export ───────────────────────────────────────────────────


def test_brand_json_echoes_payload(fixed_now):
    payload = {"format": "json", "mentions": [{"id": 1}], "analytics": {"brandHealth": 80}}
    exported = brand_report.render("json", payload, now=fixed_now)
    assert json.loads(exported.content) == payload
    assert exported.content_disposition == 'attachment; filename="brand-monitoring-2024-05-01.json"'


def test_brand_csv_row(fixed_now):
    mention = {
        "id": "x1",
        "platform": "twitter",
        "author": {"displayName": "Big Voice", "username": "bigvoice", "followers": 5000},
        "content": "Love it, truly",
        "sentiment": {"score": 0.8, "emotion": "positive"},
        "hashtags": ["acme", "launch"],
    }
    exported = brand_report.render("csv", {"mentions": [mention]}, now=fixed_now)
    rows = list(csv.reader(io.StringIO(exported.content)))
    assert len(rows[0]) == len(brand_report.CSV_HEADERS) == 26
    assert rows[1][3] == "Big Voice"
    assert rows[1][8] == "Love it, truly"
    assert rows[1][22] == "acme, launch"


def test_brand_text_report_empty(fixed_now):
    exported = brand_report.render("pdf", {}, now=fixed_now)
    assert exported.content.startswith("BRAND MONITORING REPORT")
    assert "No mentions available" in exported.content
    assert "No alerts available" in exported.content


def test_brand_unsupported_format():
    with pytest.raises(UnsupportedFormatError):
        brand_report.render("docx", {})


def test_brand_exports_tolerate_object_content_and_numeric_tags(fixed_now):
    mention = {
        "id": "x2",
        "author": {"displayName": "Fan"},
        "content": {"text": "Great launch", "url": "https://t.example/1"},
        "hashtags": [2024, "launch"],
        "keywords": None,
    }
    rows = list(csv.reader(io.StringIO(brand_report.render("csv", {"mentions": [mention]}, now=fixed_now).content)))
    assert rows[1][8] == "Great launch"
    assert rows[1][22] == "2024, launch"
    assert rows[1][23] == ""

    report = brand_report.render("pdf", {"mentions": [mention]}, now=fixed_now).content
    assert "Content: Great launch..." in report


def test_content_text():
    assert brand_report.content_text({"content": "plain"}) == "plain"
    assert brand_report.content_text({"content": {"text": "nested"}}) == "nested"
    assert brand_report.content_text({"content": {}}) == ""
    assert brand_report.content_text({}) == ""
