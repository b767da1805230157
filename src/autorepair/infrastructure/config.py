"""Application settings, loaded from the environment.

A Settings instance is built once by the entry point and handed to the
composition root; nothing reads the environment after that.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings read from ``AUTOREPAIR_*`` variables or a ``.env`` file."""

    model_config = SettingsConfigDict(
        env_prefix="AUTOREPAIR_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    data_dir: Path = Path("data")
    log_level: str = "INFO"
    currency: str = "BRL"
    notification_sender: str = "no-reply@autorepair.local"

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @field_validator("currency")
    @classmethod
    def _currency_code(cls, value: str) -> str:
        code = value.strip().upper()
        if len(code) != 3 or not code.isalpha():
            raise ValueError(f"Currency must be a 3-letter code, got {value!r}")
        return code
