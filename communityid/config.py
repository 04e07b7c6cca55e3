"""
communityid/config.py

Configuration via Pydantic Settings.
All values can be overridden with COMMUNITYID_-prefixed environment
variables or a .env file.

Quick start — create a .env file in your project root:
    COMMUNITYID_SEED=1
    COMMUNITYID_USE_BASE64=false
    COMMUNITYID_DEBUG=true
"""

from __future__ import annotations

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="COMMUNITYID_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Hashing
    SEED: int = 0
    USE_BASE64: bool = True

    # Dump every hashed segment to the debug log
    DEBUG: bool = False

    # Logging
    LOG_LEVEL: str = "WARNING"

    @field_validator("SEED")
    @classmethod
    def check_seed(cls, v: int) -> int:
        if not 0 <= v <= 0xFFFF:
            raise ValueError(f"seed must be in [0, 65535], got {v}")
        return v

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def check_log_level(cls, v):
        if isinstance(v, str):
            v = v.strip().upper()
        if v not in _LOG_LEVELS:
            raise ValueError(f"log level must be one of {', '.join(_LOG_LEVELS)}")
        return v


settings = Settings()
