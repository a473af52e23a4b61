"""Response schemas the LLM output is validated against, one per analysis depth."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

BasicEmotion = Literal["anger", "frustration", "confusion", "joy", "satisfaction", "neutral"]
ProEmotion = Literal[
    "anger", "frustration", "confusion", "joy", "satisfaction", "neutral", "urgency", "complaint"
]
Level = Literal["low", "medium", "high", "critical"]


class _LLMSchema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class BasicSentimentSchema(_LLMSchema):
    emotion: BasicEmotion
    sentiment_score: float = Field(alias="sentimentScore", ge=-1, le=1)
    summary: str
    reasoning: str


class EnhancedSentimentSchema(_LLMSchema):
    emotion: BasicEmotion
    sentiment_score: float = Field(alias="sentimentScore", ge=-1, le=1)
    confidence_score: float = Field(alias="confidenceScore", ge=0, le=1)
    summary: str = Field(max_length=150)
    reasoning: str
    priority: Level
    suggested_actions: list[str] | None = Field(default=None, alias="suggestedActions")
    escalation_recommended: bool = Field(alias="escalationRecommended")
    urgency_level: int = Field(alias="urgencyLevel", ge=1, le=10)
    customer_satisfaction_risk: Level = Field(alias="customerSatisfactionRisk")


class ProSentimentSchema(_LLMSchema):
    emotion: ProEmotion
    sentiment_score: float = Field(alias="sentimentScore", ge=-1, le=1)
    confidence_score: float = Field(alias="confidenceScore", ge=0, le=1)
    summary: str = Field(max_length=150)
    reasoning: str
    priority: Level
    suggested_actions: list[str] | None = Field(default=None, alias="suggestedActions")
    escalation_recommended: bool = Field(alias="escalationRecommended")
