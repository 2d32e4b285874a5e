"""Weighted match scoring, recommendation and narrative for one analysis.

Score = weighted share of job skills the résumé covers (required skills
count 3x, each skill further weighted by its category) plus an experience
bonus of 5 points per year, capped at 20. Base score and bonus are kept as
floats and rounded exactly once, after they are summed.
"""
from __future__ import annotations

import math

from jobfit.log import get_logger
from jobfit.matching import equivalent
from jobfit.models import APPLY, MAYBE, PASS, ResumeProfile, ScoreResult, ScoringBreakdown
from jobfit.skills import weighted_total

log = get_logger(__name__)

REQUIRED_MULTIPLIER = 3.0
PREFERRED_MULTIPLIER = 1.0
BONUS_PER_YEAR = 5.0
MAX_EXPERIENCE_BONUS = 20.0

APPLY_THRESHOLD = 70
MAYBE_THRESHOLD = 50

FRONTEND_SKILLS = ["React", "Vue", "Angular", "JavaScript", "TypeScript", "HTML", "CSS"]
BACKEND_SKILLS = ["Node.js", "Python", "Java", "Django", "Express", "SQL"]
CLOUD_SKILLS = ["AWS", "Azure", "GCP", "Docker", "Kubernetes"]
SUPPORT_SKILLS = [
    "Technical Support", "IT Support", "Help Desk", "Service Desk",
    "Troubleshooting", "Active Directory", "Ticketing",
]


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def experience_bonus(years: float) -> float:
    return min(MAX_EXPERIENCE_BONUS, max(0.0, years) * BONUS_PER_YEAR)


def final_score(base_score: float, bonus: float) -> int:
    """The only place a score is rounded."""
    return round_half_up(max(0.0, min(100.0, base_score + bonus)))


def score(
    required_skills: list[str],
    matched_required: list[str],
    preferred_skills: list[str],
    matched_preferred: list[str],
    experience_years: float,
) -> ScoreResult:
    required_weight = weighted_total(matched_required) * REQUIRED_MULTIPLIER
    required_possible = weighted_total(required_skills) * REQUIRED_MULTIPLIER
    preferred_weight = weighted_total(matched_preferred) * PREFERRED_MULTIPLIER
    preferred_possible = weighted_total(preferred_skills) * PREFERRED_MULTIPLIER

    total_possible = required_possible + preferred_possible
    if total_possible == 0:
        base = 0.0
    else:
        base = (required_weight + preferred_weight) / total_possible * 100

    bonus = experience_bonus(experience_years)
    match_score = final_score(base, bonus)
    log.debug(
        "Score: base=%.3f bonus=%.3f -> %d (required %d/%d, preferred %d/%d)",
        base, bonus, match_score,
        len(matched_required), len(required_skills),
        len(matched_preferred), len(preferred_skills),
    )
    return ScoreResult(
        match_score=match_score,
        base_score=base,
        bonus=bonus,
        breakdown=ScoringBreakdown(
            required_matched=len(matched_required),
            required_total=len(required_skills),
            preferred_matched=len(matched_preferred),
            preferred_total=len(preferred_skills),
            experience_bonus=bonus,
            weighted_score=base,
        ),
    )


def recommend(match_score: int, missing_required_count: int, matched_count: int) -> str:
    if missing_required_count > 3:
        return PASS
    if match_score >= APPLY_THRESHOLD and matched_count >= 5 and missing_required_count <= 1:
        return APPLY
    if match_score >= MAYBE_THRESHOLD and matched_count >= 3:
        return MAYBE
    return PASS


def _matching(skills: list[str], group: list[str]) -> list[str]:
    return [s for s in skills if any(equivalent(s, g) for g in group)]


def strength_areas(matched_skills: list[str], profile: ResumeProfile) -> list[str]:
    strengths: list[str] = []

    frontend = _matching(matched_skills, FRONTEND_SKILLS)
    backend = _matching(matched_skills, BACKEND_SKILLS)
    if len(frontend) >= 3:
        strengths.append("Strong frontend development background")
    if len(backend) >= 3:
        strengths.append("Solid backend development experience")
    if len(frontend) >= 2 and len(backend) >= 2:
        strengths.append("Full-stack development capabilities")
    if len(_matching(matched_skills, CLOUD_SKILLS)) >= 2:
        strengths.append("Cloud and DevOps experience")
    if len(_matching(matched_skills, SUPPORT_SKILLS)) >= 3:
        strengths.append("Strong IT support background")

    if profile.total_experience_years >= 3:
        strengths.append(f"{math.floor(profile.total_experience_years)}+ years of professional experience")

    if not strengths and matched_skills:
        strengths.append("Relevant technical skills")
    return strengths


def weak_areas(missing_required: list[str]) -> list[str]:
    if not missing_required:
        return []
    if len(missing_required) == 1:
        return [f"Missing {missing_required[0]} experience"]
    if len(missing_required) == 2:
        return [f"Missing {' and '.join(missing_required)} experience"]
    return [f"Missing {len(missing_required)} required skills"]


def confidence(job_description: str, profile: ResumeProfile) -> float:
    """How much the inputs support the score; informational only."""
    value = 0.5
    if len(profile.skills) > 5:
        value += 0.1
    if len(profile.experience) > 1:
        value += 0.1
    if len(job_description) > 500:
        value += 0.1
    if len(job_description) < 200:
        value -= 0.2
    return round(max(0.0, min(1.0, value)), 2)
