"""
Shared settings base.

Every settings class reads the process environment and an optional
``.env`` file the same way; the top-level ``Settings`` also carries the
log level applied at startup.

Dependencies: pydantic_settings
System role: Foundation for the service configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Environment and .env loading shared by the service settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = Field(
        default="INFO",
        description="Root log level applied by configure_logging (LOG_LEVEL)",
    )
