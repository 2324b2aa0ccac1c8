"""
Upload configuration settings.

Limits applied to pattern PDFs posted to /generate-from-pdf.

Dependencies: pydantic_settings
System role: Upload validation configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UploadSettings(BaseSettings):
    """Settings for pattern PDF uploads."""

    model_config = SettingsConfigDict(
        env_prefix="UPLOAD_",
        case_sensitive=False,
        extra="ignore",
    )

    max_file_size: int = Field(
        default=10 * 1024 * 1024,
        description="Maximum upload size in bytes (default 10MB)",
    )
    allowed_content_types: set[str] = Field(
        default={"application/pdf"},
        description="Accepted upload MIME types",
    )
