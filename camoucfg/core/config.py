"""Application configuration management."""
from __future__ import annotations

import logging
import os
from functools import lru_cache

DEFAULT_VARIABLE_NAME = "CAMOU_CONFIG"
DEFAULT_LOG_LEVEL = "WARNING"


class Settings:
    """Container for environment-driven configuration."""

    def __init__(self) -> None:
        self.variable_name: str = (
            os.environ.get("CAMOUCFG_VARIABLE", "").strip() or DEFAULT_VARIABLE_NAME
        )
        self.log_level: str = _normalise_level(os.environ.get("CAMOUCFG_LOG_LEVEL"))


def _normalise_level(raw: str | None) -> str:
    level = (raw or DEFAULT_LOG_LEVEL).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        return DEFAULT_LOG_LEVEL
    return level


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance to avoid repeated environment parsing."""

    return Settings()


__all__: tuple[str, ...] = ("Settings", "get_settings", "DEFAULT_VARIABLE_NAME")
