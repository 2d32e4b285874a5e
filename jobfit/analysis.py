"""Analyze a job posting against a résumé profile."""
from __future__ import annotations

import hashlib
from datetime import datetime, timezone
from urllib.parse import urlsplit, urlunsplit

from jobfit.config import max_text_chars
from jobfit.log import get_logger
from jobfit.matching import match_skills
from jobfit.models import (
    APPLY,
    MAYBE,
    AnalysisResult,
    JobPosting,
    MatchDetails,
    ResumeProfile,
)
from jobfit.scorer import (
    confidence,
    recommend,
    round_half_up,
    score,
    strength_areas,
    weak_areas,
)
from jobfit.skills import extract_preferred_skills, extract_required_skills, extract_skills

log = get_logger(__name__)

_RECOMMENDATION_LABELS: dict[str, str] = {
    APPLY: "Strong Fit - Apply!",
    MAYBE: "Possible Fit - Consider",
}


def generate_job_id(url: str) -> str:
    return "job_" + hashlib.sha256((url or "").encode("utf-8")).hexdigest()[:12]


def normalize_job_url(url: str) -> str:
    """Drop query string and fragment so tracking parameters don't split a job."""
    try:
        parts = urlsplit(url)
    except ValueError:
        return url
    if not parts.scheme or not parts.netloc:
        return url
    return urlunsplit((parts.scheme, parts.netloc, parts.path, "", ""))


def recommendation_label(recommendation: str) -> str:
    return _RECOMMENDATION_LABELS.get(recommendation, "Weak Fit - Pass")


def analyze_job(job: JobPosting, profile: ResumeProfile) -> AnalysisResult:
    description = job.description or ""
    text = description[: max_text_chars()]

    job_skills = extract_skills(text)
    required = extract_required_skills(text, job_skills)
    preferred = extract_preferred_skills(text, job_skills, required)
    cv_skills = [s.strip() for s in profile.skills]

    matched_skills, _ = match_skills(job_skills, cv_skills)
    matched_required, missing_required = match_skills(required, cv_skills)
    matched_preferred, _ = match_skills(preferred, cv_skills)

    result = score(
        required, matched_required, preferred, matched_preferred,
        profile.total_experience_years,
    )
    recommendation = recommend(result.match_score, len(missing_required), len(matched_skills))

    log.debug(
        "Job skills=%d required=%d preferred=%d matched=%d",
        len(job_skills), len(required), len(preferred), len(matched_skills),
    )
    log.info(
        "Analyzed %s @ %s — %d%% (%s)",
        job.title or "untitled", job.company or "unknown", result.match_score, recommendation,
    )

    return AnalysisResult(
        job_id=generate_job_id(normalize_job_url(job.url)),
        analyzed_date=datetime.now(timezone.utc).isoformat(),
        match_score=result.match_score,
        base_score=round_half_up(result.base_score),
        bonus_points=round_half_up(result.bonus),
        recommendation=recommendation,
        match_details=MatchDetails(
            matched_skills=matched_skills,
            missing_skills=missing_required,
            strength_areas=strength_areas(matched_skills, profile),
            weak_areas=weak_areas(missing_required),
        ),
        confidence=confidence(description, profile),
        scoring_breakdown=result.breakdown,
    )
