"""Decide whether two skill names denote the same skill."""
from __future__ import annotations

import re

from jobfit.log import get_logger

log = get_logger(__name__)

# canonical form -> accepted variants (normalised); no transitive closure.
SKILL_ALIASES: dict[str, tuple[str, ...]] = {
    "javascript": ("js", "ecmascript"),
    "typescript": ("ts",),
    "react": ("reactjs",),
    "vue": ("vuejs",),
    "node": ("nodejs",),
    "postgres": ("postgresql",),
    "kubernetes": ("k8s",),
    "docker": ("containerization",),
}

_STRIP_RE = re.compile(r"[.\-_\s]")


def normalize_skill(skill: str) -> str:
    return _STRIP_RE.sub("", (skill or "").lower())


def equivalent(a: str, b: str) -> bool:
    s1, s2 = normalize_skill(a), normalize_skill(b)
    if not s1 or not s2:
        return False
    if s1 == s2:
        return True
    if s1 in s2 or s2 in s1:
        return True
    for canonical, variants in SKILL_ALIASES.items():
        if (s1 == canonical and s2 in variants) or (s2 == canonical and s1 in variants):
            return True
    return False


def match_skills(targets: list[str], candidates: list[str]) -> tuple[list[str], list[str]]:
    """Split *targets* into (matched, missing) against *candidates*, keeping order."""
    matched: list[str] = []
    missing: list[str] = []
    for target in targets:
        if any(equivalent(target, c) for c in candidates):
            matched.append(target)
        else:
            missing.append(target)
    return matched, missing
