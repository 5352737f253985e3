"""Runtime configuration.

Environment variables are read here and nowhere else. CLI options
override what this module resolves.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

DEFAULT_REVENUE_DELAY_SECONDS = 3.0
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    # Full SQLAlchemy URL for a hosted backend; takes precedence over db_path
    database_url: Optional[str]
    # SQLite file used when no URL is configured
    db_path: Optional[str]
    # Simulated latency of the revenue query, in seconds
    revenue_delay: float
    log_level: str


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def _parse_delay(raw: Optional[str]) -> float:
    if raw is None:
        return DEFAULT_REVENUE_DELAY_SECONDS
    try:
        delay = float(raw)
    except ValueError:
        raise ValueError(f"INVOICEDASH_REVENUE_DELAY must be a number of seconds, got '{raw}'")
    return max(delay, 0.0)


def get_config() -> AppConfig:
    """Resolve configuration from the environment."""
    return AppConfig(
        database_url=_getenv("INVOICEDASH_DATABASE_URL"),
        db_path=_getenv("INVOICEDASH_DB_PATH"),
        revenue_delay=_parse_delay(_getenv("INVOICEDASH_REVENUE_DELAY")),
        log_level=(_getenv("INVOICEDASH_LOG_LEVEL", DEFAULT_LOG_LEVEL) or DEFAULT_LOG_LEVEL).upper(),
    )


def default_db_path() -> str:
    """Return ~/.invoicedash/invoicedash.db, creating the directory."""
    db_dir = Path.home() / ".invoicedash"
    db_dir.mkdir(exist_ok=True)
    return str(db_dir / "invoicedash.db")
