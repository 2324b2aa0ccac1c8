"""
Text-generation backend configuration.

Settings for the OpenAI chat model used to write tasks and diagrams.

Dependencies: pydantic_settings
System role: LLM client configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMSettings(BaseSettings):
    """OpenAI chat completion settings."""

    model_config = SettingsConfigDict(
        env_prefix="OPENAI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="OpenAI API key (requests fail at generation time when unset)",
    )
    model: str = Field(
        default="gpt-4",
        description="Chat model identifier",
    )
    temperature: float = Field(
        default=0.7,
        description="Sampling temperature",
    )
    request_timeout: float = Field(
        default=120.0,
        description="Per-call timeout in seconds",
    )
