"""Logging setup shared by the library and the CLI — stdlib only.

Console output goes to stderr so exports printed on stdout stay clean.
"""
from __future__ import annotations

import logging
import os
import sys
from datetime import datetime
from pathlib import Path

_DEFAULT_LOG_DIR = Path(__file__).resolve().parent.parent / "logs"
_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s  %(message)s"
_DATE_FMT = "%Y-%m-%d %H:%M:%S"
# pypdf warns on every malformed object it skips.
_NOISY_LOGGERS = ("pypdf",)
_configured = False


def get_logger(name: str) -> logging.Logger:
    """Return a named logger; configures root handlers on first call."""
    global _configured
    if not _configured:
        _configure()
        _configured = True
    return logging.getLogger(name)


def set_verbose(verbose: bool = True) -> None:
    """Switch the console handler between DEBUG and the LOG_LEVEL default."""
    level = logging.DEBUG if verbose else _env_level()
    root = logging.getLogger()
    root.setLevel(level)
    for handler in root.handlers:
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)


def _env_level() -> int:
    return getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)


def _log_dir() -> Path | None:
    if os.environ.get("JOBFIT_LOG_FILE", "1").strip().lower() in ("0", "false", "no"):
        return None
    custom = os.environ.get("JOBFIT_LOG_DIR", "").strip()
    return Path(custom) if custom else _DEFAULT_LOG_DIR


def _configure() -> None:
    level = _env_level()
    root = logging.getLogger()
    root.setLevel(level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.ERROR)

    if root.handlers:
        return

    formatter = logging.Formatter(_FORMAT, datefmt=_DATE_FMT)
    console = logging.StreamHandler(sys.stderr)
    console.setLevel(level)
    console.setFormatter(formatter)
    root.addHandler(console)

    log_dir = _log_dir()
    if log_dir is None:
        return
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_dir / f"jobfit_{datetime.now():%Y-%m-%d}.log", encoding="utf-8")
    except OSError:
        return
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    root.addHandler(fh)
