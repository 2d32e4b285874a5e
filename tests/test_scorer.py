"""
Unit tests for weighted scoring, recommendation and narrative.
"""

import unittest

from jobfit.models import APPLY, MAYBE, PASS, ExperienceEntry, ResumeProfile
from jobfit.scorer import (
    confidence,
    experience_bonus,
    final_score,
    recommend,
    round_half_up,
    score,
    strength_areas,
    weak_areas,
)


class TestRounding(unittest.TestCase):

    def test_half_up(self):
        self.assertEqual(round_half_up(0.5), 1)
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(2.49), 2)

    def test_no_clustering_from_early_rounding(self):
        self.assertEqual(final_score(88.7, 8), 97)
        self.assertEqual(final_score(89.3, 8), 97)
        self.assertEqual(final_score(90.1, 8), 98)

    def test_clamped(self):
        self.assertEqual(final_score(95.0, 20.0), 100)
        self.assertEqual(final_score(0.0, 0.0), 0)

    def test_single_rounding_point(self):
        result = score(["Python", "Java", "SQL"], ["Python", "Java"], [], [], 1.5)
        self.assertAlmostEqual(result.base_score, 200 / 3)
        self.assertEqual(result.bonus, 7.5)
        self.assertEqual(result.match_score, 74)
        self.assertNotEqual(round_half_up(result.base_score) + round_half_up(result.bonus), 74)


class TestScore(unittest.TestCase):

    def test_experience_bonus_capped(self):
        self.assertEqual(experience_bonus(0), 0)
        self.assertEqual(experience_bonus(1.7), 8.5)
        self.assertEqual(experience_bonus(4), 20)
        self.assertEqual(experience_bonus(12), 20)

    def test_monotonic_in_experience(self):
        scores = [
            score(["Python", "Java"], ["Python"], ["Docker"], [], years).match_score
            for years in (0, 1, 2, 3, 4)
        ]
        self.assertEqual(scores, sorted(set(scores)))
        capped = score(["Python", "Java"], ["Python"], ["Docker"], [], 10).match_score
        self.assertEqual(capped, scores[-1])

    def test_required_outweighs_preferred(self):
        required_hit = score(["Python", "Docker"], ["Python", "Docker"], ["SQL", "Git"], [], 0)
        preferred_hit = score(["Python", "Docker"], [], ["SQL", "Git"], ["SQL", "Git"], 0)
        self.assertEqual(required_hit.match_score, 75)
        self.assertEqual(preferred_hit.match_score, 25)

    def test_no_job_skills(self):
        result = score([], [], [], [], 0)
        self.assertEqual(result.base_score, 0)
        self.assertEqual(result.match_score, 0)

    def test_breakdown(self):
        result = score(["Python", "Java"], ["Python"], ["Docker"], ["Docker"], 2)
        self.assertEqual(result.breakdown.required_matched, 1)
        self.assertEqual(result.breakdown.required_total, 2)
        self.assertEqual(result.breakdown.preferred_matched, 1)
        self.assertEqual(result.breakdown.preferred_total, 1)
        self.assertEqual(result.breakdown.experience_bonus, 10)

    def test_always_in_range(self):
        for years in (0, 0.3, 5, 40):
            for matched in ([], ["Python"], ["Python", "Go"]):
                result = score(["Python", "Go"], matched, ["Jira"], ["Jira"], years)
                self.assertGreaterEqual(result.match_score, 0)
                self.assertLessEqual(result.match_score, 100)


class TestRecommendation(unittest.TestCase):

    def test_apply(self):
        self.assertEqual(recommend(75, 0, 5), APPLY)
        self.assertEqual(recommend(70, 1, 5), APPLY)

    def test_maybe(self):
        self.assertEqual(recommend(75, 2, 5), MAYBE)
        self.assertEqual(recommend(69, 0, 6), MAYBE)
        self.assertEqual(recommend(90, 0, 4), MAYBE)

    def test_pass(self):
        self.assertEqual(recommend(95, 4, 10), PASS)
        self.assertEqual(recommend(55, 1, 2), PASS)
        self.assertEqual(recommend(49, 0, 5), PASS)


class TestNarrative(unittest.TestCase):

    def test_weak_areas(self):
        self.assertEqual(weak_areas([]), [])
        self.assertEqual(weak_areas(["Docker"]), ["Missing Docker experience"])
        self.assertEqual(weak_areas(["Docker", "AWS"]), ["Missing Docker and AWS experience"])
        self.assertEqual(weak_areas(["Docker", "AWS", "Go"]), ["Missing 3 required skills"])

    def test_strengths(self):
        profile = ResumeProfile(total_experience_years=4.5)
        strengths = strength_areas(["React", "JavaScript", "TypeScript", "Python", "SQL"], profile)
        self.assertIn("Strong frontend development background", strengths)
        self.assertIn("Full-stack development capabilities", strengths)
        self.assertIn("4+ years of professional experience", strengths)

    def test_strength_fallback(self):
        self.assertEqual(strength_areas(["Jira"], ResumeProfile()), ["Relevant technical skills"])
        self.assertEqual(strength_areas([], ResumeProfile()), [])

    def test_confidence(self):
        profile = ResumeProfile(
            skills=["Python", "SQL", "Git", "Docker", "Linux", "Bash"],
            experience=[ExperienceEntry("A", "B"), ExperienceEntry("C", "D")],
        )
        self.assertEqual(confidence("x" * 600, profile), 0.8)
        self.assertEqual(confidence("short", ResumeProfile()), 0.3)
        self.assertEqual(confidence("x" * 300, ResumeProfile()), 0.5)


if __name__ == "__main__":
    unittest.main()
