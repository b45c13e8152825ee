"""Shared test fixtures."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock

import pytest

from resume_insight.clients.gateway import GatewayClient, LLMResponse
from resume_insight.models.resume import EducationEntry, ExperienceEntry, ResumeRecord


@pytest.fixture
def sample_resume_text() -> str:
    return """Jane Park
jane.park@example.com | +1 (415) 555-0199 | linkedin.com/in/janepark

Experience
- Backend Engineer, Acme Corp (2021 - present)
  - Built Go services handling 2M requests/day
  - Cut PostgreSQL query latency by 40%
- Junior Developer, Initech (2019 - 2021)
  - Python/Django REST APIs

Education
- B.Sc. Computer Science, State University (2019), GPA 3.8

Skills: Go, Python, SQL, Docker, Kubernetes
"""


@pytest.fixture
def sample_resume_json() -> str:
    return json.dumps(
        {
            "name": "Jane Park",
            "email": "jane.park@example.com",
            "phone": "+1 (415) 555-0199",
            "linkedin": "linkedin.com/in/janepark",
            "skills": ["Go", "Python", "SQL"],
            "experience": [
                {
                    "title": "Backend Engineer",
                    "company": "Acme Corp",
                    "duration": "2021 - present",
                    "description": "Built Go services",
                }
            ],
            "education": [
                {
                    "degree": "B.Sc.",
                    "school": "State University",
                    "year": "2019",
                    "cgpa": "3.8",
                    "stream": "Computer Science",
                }
            ],
        }
    )


@pytest.fixture
def sample_record() -> ResumeRecord:
    return ResumeRecord(
        name="Jane Park",
        email="jane.park@example.com",
        skills=["Go", "SQL"],
        experience=[ExperienceEntry(title="Engineer", company="Acme")],
        education=[EducationEntry(degree="B.Sc.", school="State University", stream="CS")],
    )


@pytest.fixture
def mock_gateway() -> GatewayClient:
    """Create a mock gateway client."""
    client = AsyncMock(spec=GatewayClient)
    client.model = "deepseek-chat"
    client.generate = AsyncMock(
        return_value=LLMResponse(text="{}", input_tokens=100, output_tokens=50)
    )
    return client


