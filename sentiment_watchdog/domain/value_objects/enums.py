"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Emotion(str, Enum):
    """Emotion labels produced by the keyword scorer."""

    POSITIVE = "positive"
    NEGATIVE = "negative"
    NEUTRAL = "neutral"
    MIXED = "mixed"


class SupportEmotion(str, Enum):
    """Emotion labels used for customer support messages."""

    ANGER = "anger"
    FRUSTRATION = "frustration"
    CONFUSION = "confusion"
    JOY = "joy"
    SATISFACTION = "satisfaction"
    NEUTRAL = "neutral"
    URGENCY = "urgency"
    COMPLAINT = "complaint"


class Priority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"

    def bump(self) -> "Priority":
        """Return the next priority level (critical stays critical)."""
        order = list(Priority)
        return order[min(order.index(self) + 1, len(order) - 1)]


class Category(str, Enum):
    PRODUCT = "product"
    SERVICE = "service"
    BRAND = "brand"
    CAMPAIGN = "campaign"
    CRISIS = "crisis"
    OPPORTUNITY = "opportunity"


class InfluencerTier(str, Enum):
    NANO = "nano"
    MICRO = "micro"
    MACRO = "macro"
    MEGA = "mega"
    CELEBRITY = "celebrity"


class AnalysisDepth(str, Enum):
    """How much detail a support-message analysis returns."""

    BASIC = "basic"
    ENHANCED = "enhanced"
    PRO = "pro"


class Severity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class NotificationChannel(str, Enum):
    SLACK = "slack"
    EMAIL = "email"
    SMS = "sms"
    WEBHOOK = "webhook"


class ExportFormat(str, Enum):
    CSV = "csv"
    JSON = "json"
    PDF = "pdf"
