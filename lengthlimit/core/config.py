"""Library configuration using Pydantic Settings.

Configuration is environment-aware:
- LENGTHLIMIT_ENV determines which .env file to load
- Supports: development, testing, staging, production
- Each environment has its own .env.{environment} file

Only the web helpers and ``configure_logging`` read these settings; the
core reader and writer take every value as an explicit argument.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# Determine which environment to load (default: development)
LENGTHLIMIT_ENV = os.getenv("LENGTHLIMIT_ENV", "development")

# Project root (so .env resolution doesn't depend on current working directory)
PROJECT_ROOT = Path(__file__).resolve().parents[2]

ENV_FILE_MAP = {
    "development": ".env.development",
    "testing": ".env.testing",
    "staging": ".env.staging",
    "production": ".env.production",
}

_env_filename = ENV_FILE_MAP.get(LENGTHLIMIT_ENV, ".env.development")
_env_path = PROJECT_ROOT / _env_filename

# Only load from file if it exists (deployments might inject via env vars only)
_env_file = str(_env_path) if _env_path.is_file() else None


# Nested BaseSettings don't inherit env_file, so populate os.environ up front.
if _env_file:
    from dotenv import load_dotenv
    load_dotenv(_env_file, override=True)


def _build_limit_settings() -> "LimitSettings":
    """Build limit settings from environment."""

    return LimitSettings()


def _build_log_settings() -> "LogSettings":
    """Build log settings from environment."""

    return LogSettings()


class LimitSettings(BaseSettings):
    """Default byte limits used by the web helpers."""

    max_upload_size_mb: int = Field(
        10,
        description="Maximum file upload size in megabytes",
        ge=0,
    )
    max_request_body_bytes: int = Field(
        1024 * 1024,
        description="Maximum raw request body size in bytes",
        ge=0,
    )
    read_chunk_size: int = Field(
        8192,
        description="Chunk size used when draining a limited stream",
        ge=1,
    )
    check_at_limit: bool = Field(
        True,
        description=(
            "Check the source for end-of-data once the limit is reached so a "
            "stream of exactly `limit` bytes is accepted"
        ),
    )

    model_config = SettingsConfigDict(
        env_prefix="LIMIT_",
        case_sensitive=False,
    )

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_size_mb * 1024 * 1024


class LogSettings(BaseSettings):
    """Logging output configuration."""

    level: str = Field("INFO", description="Root log level")
    format: str = Field("json", description="Log format: json or plain")
    output: str = Field("stdout", description="Log output: stdout or file")
    file_path: str | None = Field(
        None,
        description="Log file path when output=file",
    )
    max_bytes: int = Field(
        0,
        description="Rotate the log file after this many bytes (0 disables rotation)",
        ge=0,
    )
    backup_count: int = Field(
        5,
        description="Number of rotated log files to keep",
        ge=0,
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        case_sensitive=False,
    )


class Settings(BaseSettings):
    """Settings container composed from the domain-specific sections."""

    lengthlimit_env: str = LENGTHLIMIT_ENV
    limits: LimitSettings = Field(default_factory=_build_limit_settings)
    log: LogSettings = Field(default_factory=_build_log_settings)

    model_config = SettingsConfigDict(
        case_sensitive=False,
    )


# Global settings instance; nested settings are created via default_factory
# so env loading works.
settings = Settings()
