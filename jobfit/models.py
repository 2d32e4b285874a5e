"""Data models for résumé profiles, job postings and analyses."""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from typing import Any

APPLY = "apply"
MAYBE = "maybe"
PASS = "pass"
RECOMMENDATIONS: tuple[str, ...] = (APPLY, MAYBE, PASS)

# Lifecycle of a tracked job; transitions are owned by the caller.
JOB_STATUSES: tuple[str, ...] = (
    "analyzed", "applied", "rejected", "interviewing", "offer", "accepted",
)


@dataclass
class PersonalInfo:
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    location: str | None = None
    linkedin: str | None = None
    github: str | None = None


@dataclass
class ExperienceEntry:
    title: str
    company: str
    duration: str = ""
    description: str = ""
    technologies: list[str] = field(default_factory=list)


@dataclass
class EducationEntry:
    degree: str
    institution: str
    year: str = ""
    grade: str | None = None


@dataclass
class ResumeProfile:
    personal_info: PersonalInfo = field(default_factory=PersonalInfo)
    summary: str = ""
    skills: list[str] = field(default_factory=list)
    experience: list[ExperienceEntry] = field(default_factory=list)
    education: list[EducationEntry] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    total_experience_years: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ResumeProfile:
        """Rebuild a profile; the experience total is always recomputed."""
        from jobfit.dates import calculate_experience_years

        info = data.get("personal_info") or {}
        experience = [
            ExperienceEntry(
                title=str(e.get("title", "")),
                company=str(e.get("company", "")),
                duration=str(e.get("duration", "")),
                description=str(e.get("description", "")),
                technologies=list(e.get("technologies") or []),
            )
            for e in data.get("experience") or []
        ]
        education = [
            EducationEntry(
                degree=str(e.get("degree", "")),
                institution=str(e.get("institution", "")),
                year=str(e.get("year", "")),
                grade=e.get("grade"),
            )
            for e in data.get("education") or []
        ]
        return cls(
            personal_info=PersonalInfo(**{k: info.get(k) for k in PersonalInfo.__dataclass_fields__}),
            summary=data.get("summary") or "",
            skills=[str(s) for s in data.get("skills") or []],
            experience=experience,
            education=education,
            certifications=[str(c) for c in data.get("certifications") or []],
            languages=[str(lang) for lang in data.get("languages") or []],
            total_experience_years=calculate_experience_years(experience),
        )


@dataclass
class JobPosting:
    url: str
    title: str
    company: str
    description: str
    location: str | None = None
    source: str | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> JobPosting:
        return cls(
            url=str(data.get("url", "")),
            title=str(data.get("title", "")),
            company=str(data.get("company", "")),
            description=str(data.get("description", "")),
            location=data.get("location"),
            source=data.get("source"),
        )


@dataclass
class ScoringBreakdown:
    required_matched: int
    required_total: int
    preferred_matched: int
    preferred_total: int
    experience_bonus: float
    weighted_score: float


@dataclass
class ScoreResult:
    """Output of the weighted scorer; base_score and bonus stay unrounded."""

    match_score: int
    base_score: float
    bonus: float
    breakdown: ScoringBreakdown


@dataclass
class MatchDetails:
    matched_skills: list[str] = field(default_factory=list)
    missing_skills: list[str] = field(default_factory=list)
    strength_areas: list[str] = field(default_factory=list)
    weak_areas: list[str] = field(default_factory=list)


@dataclass
class AnalysisResult:
    job_id: str
    analyzed_date: str
    match_score: int
    base_score: int
    bonus_points: int
    recommendation: str
    match_details: MatchDetails
    confidence: float
    scoring_breakdown: ScoringBreakdown | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class AnalyzedJob:
    """Analysis plus the mutable tracking fields a persistence layer keeps."""

    job_id: str
    url: str
    title: str
    company: str
    analyzed_date: str
    match_score: int
    match_details: MatchDetails
    status: str = "analyzed"
    notes: str | None = None
    application_date: str | None = None
    last_updated: str = ""

    def __post_init__(self) -> None:
        if self.status not in JOB_STATUSES:
            raise ValueError(f"Unknown job status: {self.status}")

    @classmethod
    def from_analysis(cls, job: JobPosting, result: AnalysisResult) -> AnalyzedJob:
        return cls(
            job_id=result.job_id,
            url=job.url,
            title=job.title,
            company=job.company,
            analyzed_date=result.analyzed_date,
            match_score=result.match_score,
            match_details=result.match_details,
            last_updated=datetime.now(timezone.utc).isoformat(),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
