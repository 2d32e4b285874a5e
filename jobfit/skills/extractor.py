"""Literal, whole-word skill extraction and required/preferred classification.

Matching is purely lexical: a skill is found only when its dictionary name
appears as a whole word (case-insensitive). Paraphrases such as "great with
customers" are not mapped onto dictionary skills.
"""
from __future__ import annotations

import math
import re

from jobfit.log import get_logger
from jobfit.skills.dictionary import SKILL_DICTIONARY

log = get_logger(__name__)

REQUIRED_KEYWORDS: tuple[str, ...] = (
    "required", "must have", "must-have", "essential", "mandatory", "necessary",
)
PREFERRED_KEYWORDS: tuple[str, ...] = (
    "preferred", "nice to have", "nice-to-have", "bonus", "plus", "desirable",
    "would be great",
)


def _compile(skill: str) -> re.Pattern[str]:
    # Lookarounds instead of \b so names ending in symbols (C++, C#) still match.
    return re.compile(rf"(?<!\w){re.escape(skill)}(?!\w)", re.IGNORECASE)


_PATTERNS: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (skill, _compile(skill)) for skill in SKILL_DICTIONARY
)
_PATTERN_BY_SKILL: dict[str, re.Pattern[str]] = dict(_PATTERNS)


def extract_skills(text: str) -> list[str]:
    """Return every dictionary skill present in *text*, in dictionary order."""
    if not text:
        return []
    return [skill for skill, pattern in _PATTERNS if pattern.search(text)]


def _mentions(skill: str, line: str) -> bool:
    pattern = _PATTERN_BY_SKILL.get(skill) or _compile(skill)
    return pattern.search(line) is not None


def extract_required_skills(text: str, all_skills: list[str] | None = None) -> list[str]:
    """Skills listed in "required" blocks of *text*.

    A line containing a required keyword switches the block on (the line's
    own skills count); a line containing a preferred keyword switches it
    off. When no required keyword appears anywhere, the first half
    (rounded up) of the extracted skills is treated as required.
    """
    if all_skills is None:
        all_skills = extract_skills(text)
    if not all_skills:
        return []

    required: list[str] = []
    saw_marker = False
    in_required = False

    for line in text.splitlines():
        low = line.lower()
        if any(k in low for k in REQUIRED_KEYWORDS):
            in_required = True
            saw_marker = True
        elif any(k in low for k in PREFERRED_KEYWORDS):
            in_required = False
            continue

        if not in_required:
            continue
        for skill in all_skills:
            if skill not in required and _mentions(skill, line):
                required.append(skill)

    if not saw_marker:
        cut = math.ceil(len(all_skills) / 2)
        log.debug("No required markers found; treating first %d of %d skills as required", cut, len(all_skills))
        return all_skills[:cut]
    return required


def extract_preferred_skills(
    text: str,
    all_skills: list[str] | None = None,
    required: list[str] | None = None,
) -> list[str]:
    """Everything extracted that is not required, in discovery order."""
    if all_skills is None:
        all_skills = extract_skills(text)
    if required is None:
        required = extract_required_skills(text, all_skills)
    required_set = set(required)
    return [s for s in all_skills if s not in required_set]
