"""Load settings, env configuration and the stored résumé profile."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from jobfit.log import get_logger
from jobfit.models import ResumeProfile

log = get_logger(__name__)

load_dotenv()

ROOT_DIR: Path = Path(__file__).resolve().parent.parent
CONFIG_DIR: Path = ROOT_DIR / "config"
SETTINGS_PATH: Path = CONFIG_DIR / "settings.yaml"
PROFILE_PATH: Path = CONFIG_DIR / "profile.yaml"
REPORTS_DIR: Path = ROOT_DIR / "reports"

DEFAULT_SETTINGS: dict[str, Any] = {
    "max_text_chars": 100_000,
    "minimum_match_percentage": 70,
    "retention_days": 90,
}


def get_env(key: str, default: str = "") -> str:
    return os.environ.get(key, default).strip()


def load_settings(path: Path | None = None) -> dict[str, Any]:
    """Defaults, overridden by settings.yaml, overridden by JOBFIT_* env vars."""
    settings = dict(DEFAULT_SETTINGS)
    path = path or SETTINGS_PATH
    if path.exists():
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Settings file must contain a mapping: {path}")
        settings.update({k: v for k, v in data.items() if k in DEFAULT_SETTINGS})

    for key, default in DEFAULT_SETTINGS.items():
        raw = get_env(f"JOBFIT_{key.upper()}")
        if not raw:
            continue
        try:
            settings[key] = type(default)(raw)
        except ValueError:
            log.warning("Ignoring invalid JOBFIT_%s=%r", key.upper(), raw)
    return settings


def max_text_chars() -> int:
    return int(load_settings()["max_text_chars"])


def load_profile(path: Path | None = None) -> ResumeProfile:
    path = path or PROFILE_PATH
    if not path.exists():
        raise FileNotFoundError(f"No résumé profile at {path}; run parse-resume first")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Malformed profile file: {path}")
    return ResumeProfile.from_dict(data)


def save_profile(profile: ResumeProfile, path: Path | None = None) -> Path:
    """Write the profile to YAML."""
    path = path or PROFILE_PATH
    path.parent.mkdir(parents=True, exist_ok=True)

    header = (
        "# ============================================================\n"
        "# Résumé Profile — auto-generated from your résumé\n"
        "# total_experience_years is recomputed from experience on load\n"
        "# ============================================================\n\n"
    )

    yaml_str = yaml.safe_dump(profile.to_dict(), default_flow_style=False, sort_keys=False, allow_unicode=True)
    path.write_text(header + yaml_str, encoding="utf-8")
    log.info("Profile written → %s", path)
    return path
