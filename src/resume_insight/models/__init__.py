"""Data models for the extraction pipeline and record store."""

from resume_insight.models.feedback import FeedbackKeywords, FeedbackRecord
from resume_insight.models.resume import (
    EducationEntry,
    ExperienceEntry,
    ProjectEntry,
    ResumeRecord,
)
from resume_insight.models.store import CourseLink, Interview, JobMatch, StoredAnalysis

__all__ = [
    "CourseLink",
    "EducationEntry",
    "ExperienceEntry",
    "FeedbackKeywords",
    "FeedbackRecord",
    "Interview",
    "JobMatch",
    "ProjectEntry",
    "ResumeRecord",
    "StoredAnalysis",
]
