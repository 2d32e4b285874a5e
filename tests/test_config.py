"""
Tests for settings and stored-profile round trips.
"""

import os
import tempfile
import unittest
from pathlib import Path
from unittest import mock

import yaml

from jobfit.config import load_profile, load_settings, max_text_chars, save_profile
from jobfit.models import EducationEntry, ExperienceEntry, PersonalInfo, ResumeProfile


class TestSettings(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "settings.yaml"

    def tearDown(self):
        self.tmp.cleanup()

    def test_defaults_when_missing(self):
        settings = load_settings(self.path)
        self.assertEqual(settings["max_text_chars"], 100_000)
        self.assertEqual(settings["minimum_match_percentage"], 70)
        self.assertEqual(settings["retention_days"], 90)

    def test_file_then_env(self):
        self.path.write_text("minimum_match_percentage: 60\nunknown_key: 1\n", encoding="utf-8")
        with mock.patch.dict(os.environ, {"JOBFIT_RETENTION_DAYS": "30"}):
            settings = load_settings(self.path)
        self.assertEqual(settings["minimum_match_percentage"], 60)
        self.assertEqual(settings["retention_days"], 30)
        self.assertNotIn("unknown_key", settings)

    def test_invalid_env_is_ignored(self):
        with mock.patch.dict(os.environ, {"JOBFIT_MAX_TEXT_CHARS": "lots"}):
            self.assertEqual(max_text_chars(), 100_000)

    def test_non_mapping_file(self):
        self.path.write_text("- just\n- a list\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_settings(self.path)


class TestProfileStore(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.path = Path(self.tmp.name) / "config" / "profile.yaml"

    def tearDown(self):
        self.tmp.cleanup()

    def test_round_trip(self):
        profile = ResumeProfile(
            personal_info=PersonalInfo(name="Jane Doe", email="jane@example.com"),
            summary="IT support technician",
            skills=["Active Directory", "Windows"],
            experience=[
                ExperienceEntry("IT Technician", "VantageUAV", "Sep 2021 – Mar 2022", "Support", ["Outlook"]),
                ExperienceEntry("Telephone Interviewer", "IFF Research", "Sep 2019 – Oct 2020"),
            ],
            education=[EducationEntry("BSc Computer Science", "University of Leeds", "2018")],
            certifications=["CompTIA A+"],
            languages=["English"],
            total_experience_years=1.6,
        )
        save_profile(profile, self.path)
        self.assertTrue(self.path.read_text(encoding="utf-8").startswith("# ====="))
        self.assertEqual(load_profile(self.path), profile)

    def test_years_recomputed_on_load(self):
        self.path.parent.mkdir(parents=True)
        data = {
            "skills": ["Python"],
            "experience": [{"title": "Dev", "company": "Acme", "duration": "2019 – 2021"}],
            "total_experience_years": 99,
        }
        self.path.write_text(yaml.safe_dump(data), encoding="utf-8")
        self.assertEqual(load_profile(self.path).total_experience_years, 2.0)

    def test_missing_profile(self):
        with self.assertRaises(FileNotFoundError):
            load_profile(self.path)

    def test_malformed_profile(self):
        self.path.parent.mkdir(parents=True)
        self.path.write_text("just a string\n", encoding="utf-8")
        with self.assertRaises(ValueError):
            load_profile(self.path)


if __name__ == "__main__":
    unittest.main()
