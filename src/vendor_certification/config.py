"""Environment-driven settings.

DATA_DIR                                  SQLite directory (default ~/.vendor-certification)
DATABASE_URL                              Full SQLAlchemy async URL, overrides DATA_DIR
LOG_LEVEL                                 Root log level (default INFO)
CERTIFICATION_ENFORCE_DEPLOYMENT_MINIMUMS Require Gold 1+ / Platinum 3+ active deployments
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_DATA_DIR = os.path.expanduser("~/.vendor-certification")

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class Settings:
    data_dir: str
    database_url: Optional[str]
    log_level: str
    enforce_deployment_minimums: bool


def _env_flag(name: str, default: bool = False) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in _TRUTHY


def load_settings() -> Settings:
    """Read settings from the environment. Called per use so tests can monkeypatch."""
    return Settings(
        data_dir=os.environ.get("DATA_DIR", DEFAULT_DATA_DIR),
        database_url=os.environ.get("DATABASE_URL") or None,
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        enforce_deployment_minimums=_env_flag("CERTIFICATION_ENFORCE_DEPLOYMENT_MINIMUMS"),
    )
