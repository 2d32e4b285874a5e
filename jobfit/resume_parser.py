"""Turn a résumé into a structured profile.

Text extraction supports PDF (via pdftotext or pypdf), DOCX (via stdlib
zipfile) and TXT. Profile extraction is heuristic: section detection,
dictionary skill matching and date-range parsing.
"""
from __future__ import annotations

import re
import shutil
import subprocess
import zipfile
from pathlib import Path
from xml.etree import ElementTree

from jobfit.config import max_text_chars
from jobfit.dates import calculate_experience_years
from jobfit.log import get_logger
from jobfit.models import ResumeProfile
from jobfit.sections import (
    ResumeSections,
    detect_sections,
    extract_certifications,
    extract_education,
    extract_experience,
    extract_languages,
    extract_personal_info,
)
from jobfit.skills import extract_skills

log = get_logger(__name__)

SUMMARY_MAX_CHARS = 500

# ── Text extraction ──────────────────────────────────────────────────────


def extract_text(path: Path) -> str:
    """Return plain text from a PDF, DOCX, or TXT file."""
    suffix = path.suffix.lower()
    if suffix == ".txt":
        return path.read_text(encoding="utf-8", errors="ignore")
    if suffix == ".docx":
        return _extract_docx(path)
    if suffix == ".pdf":
        return _extract_pdf(path)
    raise ValueError(f"Unsupported résumé format: {suffix}")


def _fix_spacing(text: str) -> str:
    """Re-insert spaces when PDF extraction merges words together.

    Detects the problem by checking if the space-to-character ratio is
    abnormally low, then applies heuristic space insertion.
    """
    if not text or len(text) < 50:
        return text
    space_ratio = text.count(" ") / len(text)
    if space_ratio > 0.08:
        return text

    log.debug("Low space ratio (%.2f%%) — applying spacing fix", space_ratio * 100)
    fixed = re.sub(r"([a-z])([A-Z])", r"\1 \2", text)
    fixed = re.sub(r"([a-zA-Z])(\d)", r"\1 \2", fixed)
    fixed = re.sub(r"(\d)([a-zA-Z])", r"\1 \2", fixed)
    fixed = re.sub(r"([.!?,;:])([A-Za-z])", r"\1 \2", fixed)
    return fixed


def _extract_pdf(path: Path) -> str:
    # Prefer pdftotext (keeps line layout) over pypdf
    if shutil.which("pdftotext"):
        result = subprocess.run(
            ["pdftotext", "-layout", str(path), "-"],
            capture_output=True,
            text=True,
            timeout=30,
        )
        if result.returncode == 0 and result.stdout.strip():
            return result.stdout

    try:
        from pypdf import PdfReader
    except ImportError as exc:
        raise RuntimeError(
            "Cannot read PDF — install pypdf (`pip install pypdf`) "
            "or pdftotext (poppler-utils)."
        ) from exc

    reader = PdfReader(str(path))
    pages = [_fix_spacing(page.extract_text() or "") for page in reader.pages]
    return "\n\n".join(pages).strip()


def _extract_docx(path: Path) -> str:
    """Parse DOCX using only stdlib (zipfile + xml), one line per paragraph."""
    ns = "{http://schemas.openxmlformats.org/wordprocessingml/2006/main}"
    texts: list[str] = []
    with zipfile.ZipFile(path) as zf:
        with zf.open("word/document.xml") as f:
            tree = ElementTree.parse(f)
            for para in tree.iter(f"{ns}p"):
                parts = [node.text for node in para.iter(f"{ns}t") if node.text]
                texts.append("".join(parts))
    text = "\n".join(texts)
    return re.sub(r"\n{3,}", "\n\n", text).strip()


# ── Profile extraction ───────────────────────────────────────────────────


def _profile_skills(text: str, sections: ResumeSections) -> list[str]:
    found: dict[str, None] = {}
    for block in (sections.skills, sections.experience, sections.projects):
        if block:
            found.update(dict.fromkeys(extract_skills(block)))
    if not found:
        found.update(dict.fromkeys(extract_skills(text)))
    return sorted(found, key=str.lower)


def parse_resume(raw_text: str) -> ResumeProfile:
    """Build a ResumeProfile from résumé text. Never raises on string input."""
    text = (raw_text or "")[: max_text_chars()]
    sections = detect_sections(text)

    experience = extract_experience(sections.experience or "")
    profile = ResumeProfile(
        personal_info=extract_personal_info(text),
        summary=(sections.summary or "")[:SUMMARY_MAX_CHARS],
        skills=_profile_skills(text, sections),
        experience=experience,
        education=extract_education(sections.education or ""),
        certifications=extract_certifications(sections.certifications or ""),
        languages=extract_languages(sections.languages or ""),
        total_experience_years=calculate_experience_years(experience),
    )
    log.info(
        "Résumé parsed — skills=%d, experience=%d, education=%d, certifications=%d, years=%.1f",
        len(profile.skills), len(profile.experience), len(profile.education),
        len(profile.certifications), profile.total_experience_years,
    )
    return profile


def parse_resume_file(path: Path) -> ResumeProfile:
    log.info("Extracting text from %s", path.name)
    text = extract_text(path)
    if not text.strip():
        raise ValueError(f"Could not extract any text from {path.name}")
    return parse_resume(text)
