"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from pydantic import Field

from task_generator.configs.base import BaseSettings
from task_generator.configs.llm import LLMSettings
from task_generator.configs.renderer import RendererSettings
from task_generator.configs.server import ServerSettings
from task_generator.configs.uploads import UploadSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    llm: LLMSettings = Field(default_factory=LLMSettings)
    renderer: RendererSettings = Field(default_factory=RendererSettings)
    uploads: UploadSettings = Field(default_factory=UploadSettings)
    server: ServerSettings = Field(default_factory=ServerSettings)


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from task_generator.configs import get_settings
        settings = get_settings()
    """
    return Settings()
