"""
End-to-end tests for job analysis against a résumé profile.
"""

import dataclasses
import unittest

from jobfit.analysis import (
    analyze_job,
    generate_job_id,
    normalize_job_url,
    recommendation_label,
)
from jobfit.models import (
    APPLY,
    MAYBE,
    PASS,
    RECOMMENDATIONS,
    AnalyzedJob,
    ExperienceEntry,
    JobPosting,
    ResumeProfile,
)

IT_SUPPORT_JOB = """IT Support Analyst

Required:
- Windows
- Active Directory
- Technical Support
- IT Support
- Networking
- Microsoft Office
- Troubleshooting
- Customer Service
- Communication
- Documentation

2+ years experience required.
"""

IT_SUPPORT_SKILLS = [
    "Windows", "Active Directory", "Technical Support", "IT Support", "Networking",
    "Microsoft Office", "Troubleshooting", "Customer Service", "Communication",
    "Documentation",
]


def _job(description, url="https://jobs.example.com/1"):
    return JobPosting(url=url, title="Analyst", company="Acme", description=description)


def _without_timestamp(result):
    return dataclasses.replace(result, analyzed_date="")


class TestAnalyzeJob(unittest.TestCase):

    def test_strong_it_support_match(self):
        profile = ResumeProfile(skills=list(IT_SUPPORT_SKILLS), total_experience_years=1.7)
        result = analyze_job(_job(IT_SUPPORT_JOB), profile)
        self.assertGreater(result.match_score, 70)
        self.assertEqual(result.recommendation, APPLY)
        self.assertEqual(result.match_details.missing_skills, [])
        self.assertEqual(len(result.match_details.matched_skills), 10)

    def test_empty_profile_scores_low(self):
        result = analyze_job(_job(IT_SUPPORT_JOB), ResumeProfile())
        self.assertLess(result.match_score, 10)
        self.assertEqual(result.match_details.matched_skills, [])
        self.assertEqual(result.recommendation, PASS)

    def test_deterministic(self):
        profile = ResumeProfile(skills=["Windows", "Networking", "Python"], total_experience_years=2.3)
        first = analyze_job(_job(IT_SUPPORT_JOB), profile)
        second = analyze_job(_job(IT_SUPPORT_JOB), profile)
        self.assertEqual(_without_timestamp(first), _without_timestamp(second))

    def test_required_matches_beat_preferred(self):
        profile = ResumeProfile(skills=["Python", "Docker"])
        required_fit = analyze_job(_job("Required: Python, Docker\nPreferred: SQL, Git"), profile)
        preferred_fit = analyze_job(_job("Required: SQL, Git\nPreferred: Python, Docker"), profile)
        self.assertEqual(required_fit.match_score, 75)
        self.assertEqual(preferred_fit.match_score, 25)

    def test_score_rounded_once(self):
        profile = ResumeProfile(skills=["Python", "Java"], total_experience_years=1.5)
        result = analyze_job(_job("Required: Python, Java, SQL"), profile)
        self.assertEqual(result.match_score, 74)
        self.assertEqual(result.base_score, 67)
        self.assertEqual(result.bonus_points, 8)

    def test_missing_skills_are_required_only(self):
        profile = ResumeProfile(skills=["Python"])
        result = analyze_job(_job("Required: Python, Docker\nPreferred: Kubernetes"), profile)
        self.assertEqual(result.match_details.missing_skills, ["Docker"])
        self.assertEqual(result.match_details.weak_areas, ["Missing Docker experience"])

    def test_more_experience_never_lowers_score(self):
        previous = -1
        for years in (0, 0.5, 1, 2, 3, 4, 8):
            profile = ResumeProfile(skills=["Python"], total_experience_years=years)
            current = analyze_job(_job("Required: Python, Java\nPreferred: Docker"), profile).match_score
            self.assertGreaterEqual(current, previous)
            previous = current

    def test_score_range_for_odd_inputs(self):
        profile = ResumeProfile(skills=list(IT_SUPPORT_SKILLS), total_experience_years=30)
        for description in ("", "   ", "Ünïcödé ✓ 日本語 Python", IT_SUPPORT_JOB * 2000):
            result = analyze_job(_job(description), profile)
            self.assertGreaterEqual(result.match_score, 0)
            self.assertLessEqual(result.match_score, 100)
            self.assertIn(result.recommendation, RECOMMENDATIONS)

    def test_confidence_uses_profile_shape(self):
        profile = ResumeProfile(
            skills=list(IT_SUPPORT_SKILLS),
            experience=[ExperienceEntry("A", "B"), ExperienceEntry("C", "D")],
        )
        result = analyze_job(_job(IT_SUPPORT_JOB * 3), profile)
        self.assertEqual(result.confidence, 0.8)

    def test_tracking_record(self):
        job = _job(IT_SUPPORT_JOB)
        result = analyze_job(job, ResumeProfile(skills=["Windows"]))
        record = AnalyzedJob.from_analysis(job, result)
        self.assertEqual(record.status, "analyzed")
        self.assertEqual(record.job_id, result.job_id)
        self.assertEqual(record.match_score, result.match_score)

    def test_unknown_status_rejected(self):
        job = _job(IT_SUPPORT_JOB)
        result = analyze_job(job, ResumeProfile())
        with self.assertRaises(ValueError):
            dataclasses.replace(AnalyzedJob.from_analysis(job, result), status="ghosted")


class TestHelpers(unittest.TestCase):

    def test_job_id(self):
        first = generate_job_id("https://jobs.example.com/1")
        self.assertTrue(first.startswith("job_"))
        self.assertEqual(len(first), 16)
        self.assertEqual(first, generate_job_id("https://jobs.example.com/1"))
        self.assertNotEqual(first, generate_job_id("https://jobs.example.com/2"))

    def test_normalize_url(self):
        self.assertEqual(
            normalize_job_url("https://jobs.example.com/view/42?utm_source=x#apply"),
            "https://jobs.example.com/view/42",
        )
        self.assertEqual(normalize_job_url("not a url"), "not a url")

    def test_labels(self):
        self.assertEqual(recommendation_label(APPLY), "Strong Fit - Apply!")
        self.assertEqual(recommendation_label(MAYBE), "Possible Fit - Consider")
        self.assertEqual(recommendation_label(PASS), "Weak Fit - Pass")


if __name__ == "__main__":
    unittest.main()
