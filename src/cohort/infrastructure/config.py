"""Runtime settings read from the environment (and a .env file when present)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Repo root: src/cohort/infrastructure/config.py -> four levels up
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent.parent

DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    default_region: str | None = None
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def log_level_value(self) -> int:
        value = logging.getLevelName(self.log_level.upper())
        return value if isinstance(value, int) else logging.INFO


def load_env_file(candidates: tuple[Path, ...] | None = None) -> Path | None:
    """Load the first existing .env (repo root, then cwd). Returns the path loaded."""
    for path in candidates or (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            return path
    return None


def load_settings() -> Settings:
    """Build Settings from COHORT_* environment variables."""
    region = os.environ.get("COHORT_DEFAULT_REGION", "").strip().upper() or None
    log_level = os.environ.get("COHORT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip() or DEFAULT_LOG_LEVEL
    return Settings(default_region=region, log_level=log_level)
