"""Tests for fallback records and the templated brief."""

from resume_insight.models.resume import EducationEntry, ExperienceEntry, ResumeRecord
from resume_insight.pipeline.fallback import (
    fallback_feedback,
    fallback_resume,
    is_fallback_resume,
    templated_brief,
)


class TestFallbackResume:
    def test_placeholder_values(self):
        """The fallback resume carries the demo placeholder values."""
        record = fallback_resume()
        assert record.name == "Demo User"
        assert record.email == "demo@email.com"
        assert record.skills == ["JavaScript", "React"]
        assert record.experience == []
        assert record.education == []

    def test_deterministic(self):
        """Two calls return equal records."""
        assert fallback_resume() == fallback_resume()

    def test_fresh_instances(self):
        """Mutating one fallback does not affect the next."""
        first = fallback_resume()
        first.skills.append("Mutated")
        assert fallback_resume().skills == ["JavaScript", "React"]

    def test_is_fallback_resume(self):
        """is_fallback_resume tells placeholder from real records."""
        assert is_fallback_resume(fallback_resume())
        assert not is_fallback_resume(ResumeRecord(name="Jane"))


class TestFallbackFeedback:
    def test_placeholder_values(self):
        """The fallback feedback is positive with fixed scores."""
        record = fallback_feedback()
        assert record.sentiment == "positive"
        assert record.score == 0.75
        assert record.confidence == 0.87
        assert record.keywords.positive == []
        assert record.keywords.negative == []
        assert record.keywords.neutral == []
        assert record.red_flags == []
        assert record.strengths == []
        assert record.recommendation == "Proceed."

    def test_deterministic(self):
        """Two calls return equal records."""
        assert fallback_feedback() == fallback_feedback()


class TestTemplatedBrief:
    def test_contains_title_and_company(self, sample_record):
        """The brief names the candidate, skills, role and degree."""
        brief = templated_brief(sample_record)
        assert "Engineer" in brief
        assert "Acme" in brief
        assert "Jane Park" in brief
        assert "Go, SQL" in brief
        assert "B.Sc." in brief

    def test_only_first_three_skills(self):
        """Only the first three skills are listed."""
        record = ResumeRecord(name="A", skills=["a", "b", "c", "d"])
        assert "a, b, c." in templated_brief(record)

    def test_empty_record(self):
        """An empty record still yields a sentence without None."""
        brief = templated_brief(ResumeRecord())
        assert brief.startswith("This candidate is a qualified candidate")
        assert "None" not in brief

    def test_title_without_company(self):
        """A title without a company is rendered alone."""
        record = ResumeRecord(name="A", experience=[ExperienceEntry(title="Analyst")])
        assert "worked as Analyst." in templated_brief(record)

    def test_education_without_degree_omitted(self):
        """Education without a degree is left out."""
        record = ResumeRecord(name="A", education=[EducationEntry(school="MIT")])
        assert "hold a" not in templated_brief(record)

    def test_deterministic(self, sample_record):
        """Same record, same brief."""
        assert templated_brief(sample_record) == templated_brief(sample_record)
