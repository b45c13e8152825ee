"""Pydantic models for extracted resume records."""

from __future__ import annotations

from resume_insight.models.base import RecordModel


class ExperienceEntry(RecordModel):
    title: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class EducationEntry(RecordModel):
    degree: str = ""
    school: str = ""
    year: str = ""
    cgpa: str | None = None
    stream: str | None = None  # field of study


class ProjectEntry(RecordModel):
    name: str = ""
    description: str = ""
    technologies: list[str] = []


class ResumeRecord(RecordModel):
    """Structured candidate profile extracted from resume text.

    Every field has an empty default so a partially answered extraction
    still renders without missing keys.
    """

    name: str = ""
    email: str = ""
    phone: str = ""
    linkedin: str = ""
    skills: list[str] = []
    experience: list[ExperienceEntry] = []
    education: list[EducationEntry] = []
    certifications: list[str] = []
    projects: list[ProjectEntry] = []
