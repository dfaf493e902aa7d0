"""Application configuration objects."""

from __future__ import annotations

import os
from typing import List, Optional

DEFAULT_CORS_ORIGINS = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
]

DEFAULT_NOISY_LOGGERS = ["werkzeug"]


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: List[str]) -> List[str]:
    raw = os.getenv(name, "")
    items = [item.strip() for item in raw.split(",") if item.strip()]
    return items or list(default)


class BaseConfig:
    """Settings read from DEBTPLAN_* environment variables."""

    APP_NAME = "debtplan"
    TESTING = False

    def __init__(self) -> None:
        self.DEBUG = _env_bool("DEBTPLAN_DEBUG", default=False)
        self.CORS_ORIGINS = _env_list("DEBTPLAN_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
        self.LOG_LEVEL = os.getenv("DEBTPLAN_LOG_LEVEL", "INFO")
        self.LOG_FILE: Optional[str] = os.getenv("DEBTPLAN_LOG_FILE") or None
        self.NOISY_LOG_LEVEL = os.getenv("DEBTPLAN_NOISY_LOG_LEVEL", "WARNING")
        self.NOISY_LOGGERS = _env_list("DEBTPLAN_NOISY_LOGGERS", DEFAULT_NOISY_LOGGERS)


class TestingConfig(BaseConfig):
    TESTING = True

    def __init__(self) -> None:
        super().__init__()
        self.LOG_LEVEL = "DEBUG"
        self.LOG_FILE = None
