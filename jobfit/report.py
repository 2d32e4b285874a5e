"""Render analyses as Markdown reports and JSON/CSV/Markdown exports."""
from __future__ import annotations

import csv
import io
import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

from jobfit.analysis import recommendation_label
from jobfit.config import REPORTS_DIR
from jobfit.log import get_logger
from jobfit.models import AnalysisResult, AnalyzedJob, JobPosting
from jobfit.scorer import round_half_up

log = get_logger(__name__)

EXPORT_FORMATS: tuple[str, ...] = ("json", "csv", "md")

CSV_HEADERS: list[str] = [
    "Job Title", "Company", "URL", "Match Score", "Status", "Analyzed Date",
    "Application Date", "Matched Skills Count", "Missing Skills Count",
    "Strengths Count", "Gaps Count", "Notes",
]


def _score_emoji(score: int) -> str:
    if score >= 80:
        return "\U0001f3af"
    if score >= 70:
        return "✅"
    if score >= 50:
        return "⚠️"
    return "❌"


def _date_only(iso: str) -> str:
    return (iso or "")[:10]


def build_analysis_report(job: JobPosting, result: AnalysisResult, *, min_score: int = 70) -> str:
    """Markdown summary of a single analysis."""
    details = result.match_details
    lines: list[str] = [f"# {job.title or 'Untitled role'} @ {job.company or 'Unknown company'}", ""]

    lines.append(
        f"**{result.match_score}%** {_score_emoji(result.match_score)} — "
        f"{recommendation_label(result.recommendation)}"
    )
    lines.append("")
    lines.append(f"- **Base score:** {result.base_score}%")
    lines.append(f"- **Experience bonus:** +{result.bonus_points}")
    lines.append(f"- **Confidence:** {result.confidence:.0%}")
    if job.location:
        lines.append(f"- **Location:** {job.location}")
    if job.url:
        lines.append(f"- **URL:** {job.url}")
    if result.match_score < min_score:
        lines.append(f"- _Below your {min_score}% threshold_")
    lines.append("")

    breakdown = result.scoring_breakdown
    if breakdown is not None:
        lines.append("| Required | Preferred | Weighted | Bonus |")
        lines.append("|---------:|----------:|---------:|------:|")
        lines.append(
            f"| {breakdown.required_matched}/{breakdown.required_total} "
            f"| {breakdown.preferred_matched}/{breakdown.preferred_total} "
            f"| {breakdown.weighted_score:.1f} | {breakdown.experience_bonus:.1f} |"
        )
        lines.append("")

    if details.matched_skills:
        lines.append(f"**✓ Matched Skills ({len(details.matched_skills)}):** {', '.join(details.matched_skills)}")
        lines.append("")
    if details.missing_skills:
        lines.append(f"**✗ Missing Required ({len(details.missing_skills)}):** {', '.join(details.missing_skills)}")
        lines.append("")
    for heading, items in (("Strengths", details.strength_areas), ("Gaps", details.weak_areas)):
        if items:
            lines.append(f"## {heading}")
            lines.append("")
            lines.extend(f"- {item}" for item in items)
            lines.append("")

    return "\n".join(lines)


def filter_recent(jobs: list[AnalyzedJob], retention_days: int) -> list[AnalyzedJob]:
    """Drop jobs analyzed more than *retention_days* ago."""
    cutoff = datetime.now(timezone.utc) - timedelta(days=retention_days)
    kept: list[AnalyzedJob] = []
    for job in jobs:
        try:
            analyzed = datetime.fromisoformat(job.analyzed_date)
        except ValueError:
            kept.append(job)
            continue
        if analyzed.tzinfo is None:
            analyzed = analyzed.replace(tzinfo=timezone.utc)
        if analyzed >= cutoff:
            kept.append(job)
    return kept


def export_to_json(jobs: list[AnalyzedJob]) -> str:
    return json.dumps([j.to_dict() for j in jobs], indent=2, ensure_ascii=False)


def export_to_csv(jobs: list[AnalyzedJob]) -> str:
    if not jobs:
        return "No jobs to export"
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for job in jobs:
        d = job.match_details
        writer.writerow([
            job.title, job.company, job.url, job.match_score, job.status,
            job.analyzed_date, job.application_date or "",
            len(d.matched_skills), len(d.missing_skills),
            len(d.strength_areas), len(d.weak_areas), job.notes or "",
        ])
    return buf.getvalue().rstrip("\n")


def export_to_markdown(jobs: list[AnalyzedJob]) -> str:
    if not jobs:
        return "# Job Application Analysis Report\n\nNo jobs analyzed yet."

    today = datetime.now(timezone.utc).strftime("%Y-%m-%d")
    lines: list[str] = ["# Job Application Analysis Report", ""]
    lines.append(f"**Total Jobs Analyzed:** {len(jobs)}")
    lines.append(f"**Report Generated:** {today}")
    lines.append("")

    avg = round_half_up(sum(j.match_score for j in jobs) / len(jobs))
    status_counts: dict[str, int] = {}
    for j in jobs:
        status_counts[j.status] = status_counts.get(j.status, 0) + 1

    lines.append("## Summary")
    lines.append("")
    lines.append(f"- **Average Match Score:** {avg}%")
    lines.append("- **Status Breakdown:**")
    for status, count in status_counts.items():
        lines.append(f"  - {status.capitalize()}: {count}")
    lines.append("")
    lines.append("---")
    lines.append("")
    lines.append("## Job Details")
    lines.append("")

    for i, job in enumerate(jobs, 1):
        d = job.match_details
        lines.append(f"### {i}. {job.title} at {job.company}")
        lines.append("")
        lines.append(f"- **Match Score:** {job.match_score}% {_score_emoji(job.match_score)}")
        lines.append(f"- **Status:** {job.status.capitalize()}")
        lines.append(f"- **Analyzed:** {_date_only(job.analyzed_date)}")
        if job.application_date:
            lines.append(f"- **Applied:** {_date_only(job.application_date)}")
        lines.append(f"- **URL:** {job.url}")
        lines.append("")
        if d.matched_skills:
            lines.append(f"**✓ Matched Skills ({len(d.matched_skills)}):**")
            lines.append(", ".join(d.matched_skills))
            lines.append("")
        if d.missing_skills:
            lines.append(f"**✗ Missing Skills ({len(d.missing_skills)}):**")
            lines.append(", ".join(d.missing_skills))
            lines.append("")
        if d.strength_areas:
            lines.append("**Strengths:**")
            lines.extend(f"- {s}" for s in d.strength_areas)
            lines.append("")
        if d.weak_areas:
            lines.append("**Gaps:**")
            lines.extend(f"- {g}" for g in d.weak_areas)
            lines.append("")
        if job.notes:
            lines.append(f"**Notes:** {job.notes}")
            lines.append("")
        lines.append("---")
        lines.append("")

    log.info("Built Markdown export: %d jobs, average %d%%", len(jobs), avg)
    return "\n".join(lines)


def export(jobs: list[AnalyzedJob], fmt: str) -> str:
    if fmt == "json":
        return export_to_json(jobs)
    if fmt == "csv":
        return export_to_csv(jobs)
    if fmt == "md":
        return export_to_markdown(jobs)
    raise ValueError(f"Unknown export format: {fmt}")


def export_filename(fmt: str) -> str:
    return f"job-analysis-{datetime.now(timezone.utc).strftime('%Y-%m-%d')}.{fmt}"


def write_report(content: str, filename: str, directory: Path | None = None) -> Path:
    directory = directory or REPORTS_DIR
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / filename
    path.write_text(content, encoding="utf-8")
    log.info("Report written → %s", path)
    return path
