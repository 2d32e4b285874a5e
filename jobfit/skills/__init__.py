from .dictionary import (
    SKILL_DICTIONARY,
    SKILL_WEIGHTS,
    SOFT,
    TECHNICAL,
    TOOLS,
    categorize_skills,
    category,
    weight,
    weighted_total,
)
from .extractor import (
    PREFERRED_KEYWORDS,
    REQUIRED_KEYWORDS,
    extract_preferred_skills,
    extract_required_skills,
    extract_skills,
)

__all__ = [
    "SKILL_DICTIONARY", "SKILL_WEIGHTS", "TECHNICAL", "TOOLS", "SOFT",
    "category", "weight", "weighted_total", "categorize_skills",
    "REQUIRED_KEYWORDS", "PREFERRED_KEYWORDS",
    "extract_skills", "extract_required_skills", "extract_preferred_skills",
]
