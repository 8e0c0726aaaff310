"""Application configuration and constants."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_USERS_URL = "https://fe-take-home-assignment.s3.us-east-2.amazonaws.com/Data.json"


def _get_env(name: str, default: str) -> str:
    value = os.getenv(name)
    return value if value is not None else default


@dataclass(frozen=True)
class Settings:
    """Simple settings container with environment variable overrides."""

    users_url: str = _get_env("USERS_URL", DEFAULT_USERS_URL)
    filter_debounce_ms: int = int(_get_env("FILTER_DEBOUNCE_MS", "150"))
    hover_debounce_ms: int = int(_get_env("HOVER_DEBOUNCE_MS", "50"))
    fetch_timeout_seconds: float = float(_get_env("FETCH_TIMEOUT_SECONDS", "10"))
    log_level: str = _get_env("LOG_LEVEL", "INFO")

    @property
    def filter_delay(self) -> float:
        return self.filter_debounce_ms / 1000

    @property
    def hover_delay(self) -> float:
        return self.hover_debounce_ms / 1000


settings = Settings()
