"""Parse free-text employment durations into elapsed months.

Recognised shapes: "Sep 2021 – Mar 2022", "September 2021 - Present",
"2019 – 2021", "2020 to Now". Anything without a year is worth 0 months.
"""
from __future__ import annotations

import math
import re
from datetime import date
from typing import Iterable, Protocol

from jobfit.log import get_logger

log = get_logger(__name__)

_MONTHS: dict[str, int] = {
    "jan": 1, "feb": 2, "mar": 3, "apr": 4, "may": 5, "jun": 6,
    "jul": 7, "aug": 8, "sep": 9, "oct": 10, "nov": 11, "dec": 12,
}

_MONTH_NAME = (
    r"(?:jan(?:uary)?|feb(?:ruary)?|mar(?:ch)?|apr(?:il)?|may|june?|july?"
    r"|aug(?:ust)?|sep(?:t(?:ember)?)?|oct(?:ober)?|nov(?:ember)?|dec(?:ember)?)"
)
_YEAR = r"(?:19|20)\d{2}"
_PRESENT = r"(?:present|current|now|today)"

_YEAR_RE = re.compile(rf"(?<!\d)({_YEAR})(?!\d)")
_MONTH_YEAR_RE = re.compile(rf"\b({_MONTH_NAME})\.?\s+({_YEAR})(?!\d)", re.IGNORECASE)
_PRESENT_RE = re.compile(rf"\b{_PRESENT}\b", re.IGNORECASE)
_RANGE_RE = re.compile(
    rf"(?:\b{_MONTH_NAME}\.?\s+)?(?<!\d){_YEAR}\s*(?:[-–—]|\bto\b)\s*"
    rf"(?:(?:{_MONTH_NAME}\.?\s+)?{_YEAR}(?!\d)|{_PRESENT}\b)",
    re.IGNORECASE,
)

SELF_EMPLOYMENT_MARKERS: tuple[str, ...] = (
    "independent", "freelance", "self-employed", "consulting", "contract",
)


class _Entry(Protocol):
    title: str
    company: str
    duration: str


def find_date_range(text: str) -> str | None:
    """Return the first date-range substring of *text*, if any."""
    m = _RANGE_RE.search(text or "")
    return m.group(0).strip() if m else None


def months_between(duration: str, today: date | None = None) -> int:
    """Elapsed months described by *duration*; 0 when it cannot be read."""
    if not duration:
        return 0
    years = [(m.start(1), int(m.group(1))) for m in _YEAR_RE.finditer(duration)]
    if not years:
        return 0

    month_at: dict[int, int] = {
        m.start(2): _MONTHS[m.group(1)[:3].lower()]
        for m in _MONTH_YEAR_RE.finditer(duration)
    }
    start_pos, start_year = years[0]
    start_month = month_at.get(start_pos)

    if _PRESENT_RE.search(duration):
        today = today or date.today()
        end_year, end_month = today.year, today.month
    elif len(years) >= 2:
        end_pos, end_year = years[1]
        end_month = month_at.get(end_pos)
    else:
        # A lone date is ambiguous.
        return 0

    if start_month and end_month:
        months = (end_year * 12 + end_month) - (start_year * 12 + start_month)
    else:
        months = (end_year - start_year) * 12
    return max(0, months)


def is_self_employed(entry: _Entry) -> bool:
    text = f"{entry.title} {entry.company}".lower()
    return any(marker in text for marker in SELF_EMPLOYMENT_MARKERS)


def round_one_decimal(value: float) -> float:
    return math.floor(value * 10 + 0.5) / 10


def calculate_experience_years(entries: Iterable[_Entry], today: date | None = None) -> float:
    """Total years across *entries*, skipping self-employment, to one decimal."""
    total_months = 0
    for entry in entries:
        if is_self_employed(entry):
            log.debug("Excluding self-employment entry: %s", entry.title)
            continue
        total_months += months_between(entry.duration, today)
    return round_one_decimal(total_months / 12)
