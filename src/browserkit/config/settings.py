"""Logging Settings

Pydantic-based settings for :func:`browserkit.config.setup.basic_config`.
Values come from keyword options, ``BROWSERKIT_*`` environment variables or
a ``.env`` file, in that order of precedence.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from browserkit.domain.shared.constants import Defaults
from browserkit.domain.shared.messages import ErrorMessages


class BrowserkitSettings(BaseSettings):
    """Handler and formatter selection for the root logger.

    Environment variable naming:
    - BROWSERKIT_URL (selects beacon delivery when set)
    - BROWSERKIT_FORMAT, BROWSERKIT_TIME_FORMAT
    - BROWSERKIT_GROUPING
    - BROWSERKIT_STYLES (JSON object)
    - BROWSERKIT_LEVEL (name or number)
    """

    model_config = SettingsConfigDict(
        env_prefix="BROWSERKIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    url: str | None = None
    format: str = Field(default=Defaults.BASIC_FORMAT, min_length=1)
    time_format: str = ""
    grouping: bool = True
    styles: dict[str, Any] | None = None
    level: str | int | None = None

    @field_validator("url")
    @classmethod
    def validate_url(cls, v: str | None) -> str | None:
        """Require an HTTP(S) endpoint."""
        if v is not None and not v.startswith(("http://", "https://")):
            raise ValueError(ErrorMessages.INVALID_URL_SCHEME)
        return v

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str | int | None) -> str | int | None:
        """Accept a known level name (normalized upper-case) or a number."""
        if v is None:
            return v
        if isinstance(v, str) and v.strip().isdigit():
            v = int(v)
        if isinstance(v, int):
            if v < 0:
                raise ValueError(ErrorMessages.NEGATIVE_LEVEL)
            return v
        v_upper = v.strip().upper()
        if v_upper not in logging.getLevelNamesMapping():
            raise ValueError(ErrorMessages.INVALID_LEVEL.format(level=v))
        return v_upper

    @property
    def level_number(self) -> int | None:
        if isinstance(self.level, str):
            return logging.getLevelNamesMapping()[self.level]
        return self.level


@lru_cache(maxsize=1)
def get_settings() -> BrowserkitSettings:
    """Get cached settings loaded from the environment."""
    return BrowserkitSettings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for testing)."""
    get_settings.cache_clear()
