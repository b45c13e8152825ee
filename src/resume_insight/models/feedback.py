"""Pydantic models for interview-feedback analysis."""

from __future__ import annotations

from typing import Literal

from pydantic import Field

from resume_insight.models.base import RecordModel


class FeedbackKeywords(RecordModel):
    positive: list[str] = []
    negative: list[str] = []
    neutral: list[str] = []


class FeedbackRecord(RecordModel):
    """Sentiment and risk signals extracted from free-text interview feedback."""

    sentiment: Literal["positive", "negative", "neutral"] = "neutral"
    score: float = Field(default=0.0, ge=0.0, le=1.0)
    confidence: float = Field(default=0.0, ge=0.0, le=1.0)
    keywords: FeedbackKeywords = Field(default_factory=FeedbackKeywords)
    red_flags: list[str] = Field(default=[], alias="redFlags")
    strengths: list[str] = []
    recommendation: str = ""

    def to_json_dict(self) -> dict:
        """Dump with the camelCase keys the dashboard expects."""
        return self.model_dump(by_alias=True)
