"""Application configuration, read from ``ORDERTRACK_*`` variables or ``.env``."""

from __future__ import annotations

from datetime import tzinfo
from functools import lru_cache
from pathlib import Path

import pytz
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Runtime settings for the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="ORDERTRACK_", env_file=".env", extra="ignore"
    )

    supabase_url: str = ""
    supabase_key: str = ""
    timezone: str = "Asia/Kolkata"
    country_code: str = "91"
    session_file: Path = Path.home() / ".ordertrack" / "session.json"
    log_level: str = "WARNING"

    @field_validator("timezone")
    @classmethod
    def _known_timezone(cls, value: str) -> str:
        try:
            pytz.timezone(value)
        except pytz.UnknownTimeZoneError as exc:
            raise ValueError(f"Unknown timezone: {value}") from exc
        return value

    @field_validator("country_code")
    @classmethod
    def _digits_only(cls, value: str) -> str:
        value = value.lstrip("+")
        if not value.isdigit():
            raise ValueError(f"Country code must be digits, got {value!r}")
        return value

    @property
    def tz(self) -> tzinfo:
        return pytz.timezone(self.timezone)


@lru_cache
def get_settings() -> Settings:
    return Settings()
