"""Split résumé text into sections and pull structured entries out of them."""
from __future__ import annotations

import re
from dataclasses import dataclass, field

from jobfit.dates import find_date_range
from jobfit.log import get_logger
from jobfit.models import EducationEntry, ExperienceEntry, PersonalInfo
from jobfit.skills import extract_skills

log = get_logger(__name__)


@dataclass
class ResumeSections:
    summary: str | None = None
    experience: str | None = None
    education: str | None = None
    skills: str | None = None
    certifications: str | None = None
    projects: str | None = None
    languages: str | None = None
    other: str = ""


def _headers(*patterns: str) -> tuple[re.Pattern[str], ...]:
    return tuple(re.compile(rf"^\s*{p}\s*:?\s*$", re.IGNORECASE) for p in patterns)


# Checked in this order; the first family that matches wins.
SECTION_HEADERS: dict[str, tuple[re.Pattern[str], ...]] = {
    "experience": _headers(
        r"(?:professional\s+)?experience",
        r"work\s+(?:history|experience)",
        r"employment\s+(?:history|record)",
        r"career\s+(?:history|summary)",
        r"professional\s+background",
        r"work",
    ),
    "education": _headers(
        r"education",
        r"academic\s+(?:background|qualifications)",
        r"educational\s+background",
        r"qualifications",
        r"degrees?",
    ),
    "skills": _headers(
        r"(?:technical\s+)?skills",
        r"core\s+(?:competencies|skills)",
        r"competencies",
        r"areas\s+of\s+expertise",
        r"technical\s+proficienc(?:y|ies)",
        r"key\s+skills",
    ),
    "certifications": _headers(
        r"certifications?",
        r"professional\s+certifications?",
        r"licenses?(?:\s+and\s+certifications?)?",
        r"credentials",
    ),
    "summary": _headers(
        r"(?:professional\s+)?(?:summary|profile)",
        r"career\s+objective",
        r"objective",
        r"about\s+(?:me|myself)",
        r"executive\s+summary",
    ),
    "projects": _headers(
        r"projects?",
        r"key\s+projects?",
        r"notable\s+projects?",
        r"portfolio",
    ),
    "languages": _headers(
        r"languages?",
        r"language\s+proficienc(?:y|ies)",
        r"linguistic\s+skills",
    ),
}

_BULLET_RE = re.compile(r"^\s*[•●○■□▪▫–—*\-]\s+")
_CONNECTORS = frozenset({"of", "and", "&", "at", "the", "for", "in", "-", "–", "—", "/", "@"})


def detect_section_header(line: str) -> str | None:
    for name, patterns in SECTION_HEADERS.items():
        if any(p.match(line) for p in patterns):
            return name
    return None


def detect_sections(text: str) -> ResumeSections:
    """Assign every line to the section whose header last preceded it.

    Header lines themselves are dropped; lines before the first header go
    to ``other``. Without any header the whole text is ``other``.
    """
    buffers: dict[str, list[str]] = {"other": []}
    current = "other"
    found_header = False

    for raw in (text or "").splitlines():
        line = raw.strip()
        if not line:
            buffers.setdefault(current, []).append("")
            continue
        section = detect_section_header(line)
        if section:
            found_header = True
            current = section
            buffers.setdefault(section, [])
            continue
        buffers.setdefault(current, []).append(line)

    if not found_header:
        return ResumeSections(other=(text or "").strip())

    sections = ResumeSections(other="\n".join(buffers.pop("other")).strip())
    for name, lines in buffers.items():
        setattr(sections, name, "\n".join(lines).strip())
    log.debug("Detected sections: %s", ", ".join(sorted(buffers)) or "none")
    return sections


# ── Experience ───────────────────────────────────────────────────────────


@dataclass
class _Draft:
    title: str = ""
    company: str = ""
    duration: str = ""
    one_line: bool = False
    lines: list[str] = field(default_factory=list)

    @property
    def complete(self) -> bool:
        if self.one_line:
            return bool(self.title)
        return bool(self.title and self.company)


def _is_heading_phrase(line: str) -> bool:
    """Short capitalised phrase, e.g. "IT Support Technician" or "Tech Corp"."""
    if len(line) > 60 or line.endswith((".", ":", ";")):
        return False
    words = line.split()
    if not 1 <= len(words) <= 7:
        return False
    for word in words:
        if word.lower() in _CONNECTORS:
            continue
        if not (word[0].isupper() or word[0].isdigit()):
            return False
    return True


def _split_fields(text: str) -> list[str]:
    parts = re.split(r"\s*(?:\||,|\s[-–—]\s|\bat\b|@)\s*", text)
    return [p.strip(" ,|-–—()") for p in parts if p.strip(" ,|-–—()")]


def _finish(draft: _Draft | None, out: list[ExperienceEntry]) -> None:
    if draft is None:
        return
    if not draft.complete:
        log.debug("Dropping partial experience entry: %r", draft.title or draft.duration)
        return
    description = " ".join(draft.lines).strip()
    out.append(ExperienceEntry(
        title=draft.title,
        company=draft.company,
        duration=draft.duration,
        description=description,
        technologies=extract_skills(description),
    ))


def extract_experience(experience_text: str) -> list[ExperienceEntry]:
    """Group experience lines into entries.

    Two shapes are understood: one-line records ("Title | Company | Place |
    Sep 2021 – Mar 2022") and stacked lines (title, company and a date
    range on separate lines). Bullets and other prose attach to the most
    recent entry. Entries missing a title or company are dropped.
    """
    entries: list[ExperienceEntry] = []
    draft: _Draft | None = None

    for raw in (experience_text or "").splitlines():
        line = raw.strip()
        if not line:
            continue

        if _BULLET_RE.match(line):
            if draft is not None:
                draft.lines.append(_BULLET_RE.sub("", line))
            continue

        date_range = find_date_range(line)

        if date_range and "|" in line:
            parts = [p.strip() for p in line.split("|") if p.strip() and date_range not in p]
            if parts:
                _finish(draft, entries)
                draft = _Draft(
                    title=parts[0],
                    company=parts[1] if len(parts) > 1 else "",
                    duration=date_range,
                    one_line=True,
                )
                continue

        if date_range:
            rest = _split_fields(line.replace(date_range, " "))
            if draft is None or draft.duration or draft.one_line:
                _finish(draft, entries)
                draft = _Draft()
            draft.duration = date_range
            for part in rest:
                if not draft.title:
                    draft.title = part
                elif not draft.company:
                    draft.company = part
            continue

        if _is_heading_phrase(line):
            if draft is None or draft.complete:
                _finish(draft, entries)
                draft = _Draft(title=line)
            elif not draft.title:
                draft.title = line
            else:
                draft.company = line
            continue

        if draft is not None:
            draft.lines.append(line)

    _finish(draft, entries)
    return entries


# ── Education ────────────────────────────────────────────────────────────

_DEGREE_RE = re.compile(
    r"\b(?:bachelor|master|phd|ph\.d|doctorate|associate|diploma|certificate"
    r"|b\.?sc|m\.?sc|b\.?s\.?|m\.?s\.?|b\.?a\.?|m\.?a\.?|mba|b\.?e\.?|m\.?tech|b\.?tech)\b",
    re.IGNORECASE,
)
_EDU_YEAR_RE = re.compile(r"(?<!\d)(?:19|20)\d{2}(?!\d)")
_GRADE_RE = re.compile(r"\b(?:gpa|grade|classification)\s*[:\-]?\s*(.+)$", re.IGNORECASE)


def extract_education(education_text: str) -> list[EducationEntry]:
    entries: list[EducationEntry] = []
    current: EducationEntry | None = None

    def flush() -> None:
        if current is not None and current.degree and current.institution:
            entries.append(current)

    for raw in (education_text or "").splitlines():
        line = _BULLET_RE.sub("", raw.strip())
        if not line:
            continue

        is_degree = _DEGREE_RE.search(line) is not None
        grade = _GRADE_RE.search(line)
        if grade and current is not None and not is_degree:
            current.grade = grade.group(1).strip()
            continue

        years = _EDU_YEAR_RE.findall(line)
        if is_degree:
            if current is not None and current.degree:
                flush()
                current = None
            if current is None:
                current = EducationEntry(degree="", institution="")
            current.degree = line
            if years:
                current.year = years[-1]
        elif years:
            if current is None or current.year:
                flush()
                current = EducationEntry(degree="", institution="")
            current.year = years[-1]
            rest = _EDU_YEAR_RE.sub("", line).strip(" ,-–—|()")
            if rest and re.search(r"[A-Za-z]", rest) and not current.institution:
                current.institution = rest
        elif current is not None and not current.institution:
            current.institution = line

    flush()
    return entries


# ── Certifications and languages ─────────────────────────────────────────


def extract_certifications(certifications_text: str) -> list[str]:
    certs: list[str] = []
    for raw in (certifications_text or "").splitlines():
        line = _BULLET_RE.sub("", raw.strip())
        if detect_section_header(line) == "certifications":
            continue
        if len(line) > 3:
            certs.append(line)
    return certs


def extract_languages(languages_text: str) -> list[str]:
    items = re.split(r"[,\n|•;]", languages_text or "")
    cleaned = (_BULLET_RE.sub("", i.strip()).strip() for i in items)
    return list(dict.fromkeys(i for i in cleaned if i))


# ── Personal info ────────────────────────────────────────────────────────

_EMAIL_RE = re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b")
_PHONE_RES = (
    re.compile(r"(?:\+?\d{1,3}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}\b"),
    re.compile(r"\+?\d{1,4}[-.\s]?\d{1,5}[-.\s]?\d{1,5}[-.\s]?\d{1,5}\b"),
)
_LINKEDIN_RE = re.compile(r"linkedin\.com/in/[\w-]+", re.IGNORECASE)
_GITHUB_RE = re.compile(r"github\.com/[\w-]+", re.IGNORECASE)
_LOCATION_RE = re.compile(r"\b[A-Z][a-z]+(?:[ -][A-Z][a-z]+)*, *[A-Z][a-z]+(?: +[A-Z][a-z]+)?\b")

# Contact details live at the top of a résumé.
_HEADER_LINES = 10


def _find_phone(text: str) -> str | None:
    for pattern in _PHONE_RES:
        for m in pattern.finditer(text):
            if sum(c.isdigit() for c in m.group(0)) >= 7:
                return m.group(0).strip()
    return None


def extract_personal_info(text: str) -> PersonalInfo:
    text = text or ""
    header = "\n".join(text.strip().splitlines()[:_HEADER_LINES])
    info = PersonalInfo()

    email = _EMAIL_RE.search(text)
    if email:
        info.email = email.group(0)
    info.phone = _find_phone(header)
    linkedin = _LINKEDIN_RE.search(text)
    github = _GITHUB_RE.search(text)
    location = _LOCATION_RE.search(header)
    info.linkedin = linkedin.group(0) if linkedin else None
    info.github = github.group(0) if github else None
    info.location = location.group(0) if location else None

    if info.email:
        before = text[: text.index(info.email)].strip().splitlines()
        for line in reversed(before):
            line = line.strip()
            if not line or _LOCATION_RE.fullmatch(line) or any(c.isdigit() for c in line):
                continue
            if len(line) < 50 and line[0].isupper():
                info.name = line
                break
    else:
        for line in header.splitlines():
            line = line.strip()
            if not line:
                continue
            if _is_heading_phrase(line) and not detect_section_header(line):
                info.name = line
            break
    return info
