"""Models for records kept in the per-user record store."""

from __future__ import annotations

import uuid
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from resume_insight.models.resume import ResumeRecord


class StoredAnalysis(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    created_at: datetime = Field(default_factory=datetime.now)
    record: ResumeRecord
    brief: str | None = None


class CourseLink(BaseModel):
    title: str
    provider: str
    url: str


class JobMatch(BaseModel):
    id: int
    title: str
    company: str
    location: str = ""
    match_score: float = 0.0
    skills_match: float = 0.0
    experience_match: float = 0.0
    education_match: float = 0.0
    certifications_match: float = 0.0
    summary: str = ""
    requirements: list[str] = []
    salary: str = ""
    type: str = ""
    courses: list[CourseLink] = []


class Interview(BaseModel):
    id: int
    candidate_name: str
    position: str
    date: str
    time: str
    duration: str
    status: Literal["confirmed", "pending", "completed"] = "pending"
    meeting_link: str | None = None
    notes: str | None = None
    interviewer: str | None = None
