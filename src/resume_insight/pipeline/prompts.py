"""Prompt builders for resume extraction, feedback analysis and candidate briefs."""

from __future__ import annotations

from enum import Enum

from resume_insight.models.resume import ResumeRecord


class RecordKind(str, Enum):
    RESUME = "resume"
    FEEDBACK = "feedback"


RESUME_INSTRUCTION = (
    "Analyze the following resume and extract structured information. "
    "Return ONLY a JSON object with no additional text."
)

RESUME_SCHEMA = """\
{
  "name": "Full name",
  "email": "Email address",
  "phone": "Phone number",
  "linkedin": "LinkedIn profile URL",
  "skills": ["skill1", "skill2"],
  "experience": [
    {
      "title": "Job title",
      "company": "Company name",
      "duration": "Duration",
      "description": "Brief description"
    }
  ],
  "education": [
    {
      "degree": "Degree name",
      "school": "School name",
      "year": "Year",
      "cgpa": "CGPA/GPA",
      "stream": "Field of study"
    }
  ],
  "certifications": ["cert1", "cert2"],
  "projects": [
    {
      "name": "Project name",
      "description": "Description",
      "technologies": ["tech1", "tech2"]
    }
  ]
}"""

FEEDBACK_INSTRUCTION = (
    "Analyze the following interview feedback for sentiment, hiring risks and "
    "strengths. Return ONLY a JSON object with no additional text."
)

FEEDBACK_SCHEMA = """\
{
  "sentiment": "positive | negative | neutral",
  "score": 0.8,
  "confidence": 0.9,
  "keywords": {"positive": [], "negative": [], "neutral": []},
  "redFlags": [],
  "strengths": [],
  "recommendation": "One-sentence hiring recommendation"
}"""

FEEDBACK_RULES = """\
Rules:
- "score" and "confidence" are numbers between 0 and 1
- "sentiment" is exactly one of positive, negative, neutral
- Use empty lists when nothing applies"""

_TEMPLATES: dict[RecordKind, tuple[str, str, str]] = {
    RecordKind.RESUME: (RESUME_INSTRUCTION, "Resume text", RESUME_SCHEMA),
    RecordKind.FEEDBACK: (FEEDBACK_INSTRUCTION, "Feedback", FEEDBACK_SCHEMA),
}


def build_prompt(document_text: str, kind: RecordKind | str) -> str:
    """Build the extraction prompt for a document.

    The document is concatenated, never passed through ``str.format``, so
    braces in user text need no escaping.
    """
    instruction, label, schema = _TEMPLATES[RecordKind(kind)]
    parts = [
        instruction,
        "",
        f"{label}:",
        document_text,
        "",
        "Extract and return a JSON object with this exact structure:",
        schema,
    ]
    if RecordKind(kind) is RecordKind.FEEDBACK:
        parts += ["", FEEDBACK_RULES]
    parts += ["", "Respond with the JSON object only. No markdown, no commentary."]
    return "\n".join(parts)


def build_brief_prompt(record: ResumeRecord) -> str:
    """Build the recruiter-brief prompt from an already extracted record."""
    skills = ", ".join(record.skills)
    experience = ", ".join(f"{exp.title} at {exp.company}" for exp in record.experience)
    education = ", ".join(
        f"{edu.degree} in {edu.stream or 'general studies'} from {edu.school}"
        for edu in record.education
    )
    return f"""Create a concise 4-5 line professional brief about this candidate for recruiters.

Candidate Data:
Name: {record.name}
Email: {record.email}
Skills: {skills}
Experience: {experience}
Education: {education}

Create a brief that highlights:
1. Key qualifications
2. Relevant experience
3. Technical skills
4. Educational background

Keep it professional and concise (4-5 lines maximum)."""
