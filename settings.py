"""
Settings for the Wordle archiver.

The store path and the poll interval are fixed. A .env file or the
environment can tune the request pacing, the zone used for "today" and
logging.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Optional
import os

from dotenv import load_dotenv

BASE_DIR = Path(__file__).resolve().parent

WORDS_FILE = BASE_DIR / "wordle-words.json"
CHECK_INTERVAL = 1440 * 60  # 1440 minutes, in seconds

DEFAULT_LOG_DIR = BASE_DIR / "logs"
DEFAULT_REQUEST_DELAY = 1.0


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    log_dir: Path
    request_delay: float
    request_timeout: Optional[float]
    timezone: Optional[str]
    debug_mode: bool


@lru_cache
def get_settings() -> Settings:
    """Read .env and the current environment and build a Settings instance."""
    load_dotenv()

    def _float(value: Optional[str], default: Optional[float]) -> Optional[float]:
        if value is None or not value.strip():
            return default
        try:
            return float(value)
        except ValueError:
            return default

    def _bool(value: Optional[str], default: bool = False) -> bool:
        if value is None:
            return default
        return value.strip().lower() in {"1", "true", "yes", "on"}

    return Settings(
        log_dir=Path(os.getenv("WORDLE_LOG_DIR") or DEFAULT_LOG_DIR),
        request_delay=_float(os.getenv("WORDLE_REQUEST_DELAY"), DEFAULT_REQUEST_DELAY),
        request_timeout=_float(os.getenv("WORDLE_REQUEST_TIMEOUT"), None),
        timezone=(os.getenv("WORDLE_TIMEZONE") or "").strip() or None,
        debug_mode=_bool(os.getenv("DEBUG_MODE"), False),
    )
