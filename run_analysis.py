#!/usr/bin/env python3
"""Command-line entry point for résumé parsing and job analysis.

    python run_analysis.py parse-resume resume.pdf
    python run_analysis.py analyze job.yaml other_job.txt --format md --write

Job files are YAML (url, title, company, location, description, source) or
plain text, in which case the whole file is the description.
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobfit.analysis import analyze_job
from jobfit.config import PROFILE_PATH, load_profile, load_settings, save_profile
from jobfit.log import get_logger, set_verbose
from jobfit.models import AnalyzedJob, JobPosting
from jobfit.report import (
    EXPORT_FORMATS,
    build_analysis_report,
    export,
    export_filename,
    filter_recent,
    write_report,
)
from jobfit.resume_parser import parse_resume_file
from jobfit.skills import SOFT, TECHNICAL, TOOLS, categorize_skills

log = get_logger(__name__)


def load_job(path: Path) -> JobPosting:
    if path.suffix.lower() in (".yaml", ".yml"):
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Malformed job file: {path}")
        return JobPosting.from_dict(data)
    return JobPosting(
        url=path.resolve().as_uri(),
        title=path.stem,
        company="",
        description=path.read_text(encoding="utf-8", errors="ignore"),
    )


def cmd_parse_resume(args: argparse.Namespace) -> int:
    profile = parse_resume_file(Path(args.file))
    path = save_profile(profile, Path(args.output) if args.output else None)
    grouped = categorize_skills(profile.skills)
    log.info(
        "Saved profile with %d skills (%d technical, %d tools, %d soft) to %s",
        len(profile.skills), len(grouped[TECHNICAL]), len(grouped[TOOLS]), len(grouped[SOFT]), path,
    )
    return 0


def cmd_analyze(args: argparse.Namespace) -> int:
    settings = load_settings()
    profile = load_profile(Path(args.profile) if args.profile else None)
    if not profile.skills:
        log.error("Your résumé profile has no recognised skills — nothing to match against")
        return 1

    analyzed: list[tuple[JobPosting, AnalyzedJob, str]] = []
    for name in args.jobs:
        job = load_job(Path(name))
        result = analyze_job(job, profile)
        report = build_analysis_report(job, result, min_score=settings["minimum_match_percentage"])
        analyzed.append((job, AnalyzedJob.from_analysis(job, result), report))

    analyzed.sort(key=lambda item: -item[1].match_score)

    if args.format == "report":
        content = "\n---\n\n".join(report for _, _, report in analyzed)
        fmt = "md"
    else:
        records = filter_recent([record for _, record, _ in analyzed], settings["retention_days"])
        content = export(records, args.format)
        fmt = args.format

    if args.write:
        write_report(content, export_filename(fmt))
    else:
        print(content)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Match job postings against your résumé",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log debug detail to stderr")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p = subparsers.add_parser("parse-resume", help="Parse a résumé into a stored profile")
    p.add_argument("file", help="Résumé file (PDF, DOCX or TXT)")
    p.add_argument("--output", "-o", help=f"Profile path (default {PROFILE_PATH})")
    p.set_defaults(func=cmd_parse_resume)

    a = subparsers.add_parser("analyze", help="Analyze job postings against the profile")
    a.add_argument("jobs", nargs="+", help="Job files (YAML or plain text)")
    a.add_argument("--profile", "-p", help=f"Profile path (default {PROFILE_PATH})")
    a.add_argument("--format", "-f", choices=("report",) + EXPORT_FORMATS, default="report")
    a.add_argument("--write", "-w", action="store_true", help="Write to reports/ instead of stdout")
    a.set_defaults(func=cmd_analyze)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    if args.verbose:
        set_verbose()
    try:
        return args.func(args)
    except (FileNotFoundError, ValueError, RuntimeError) as exc:
        log.error("%s", exc)
        return 1


if __name__ == "__main__":
    sys.exit(main())
