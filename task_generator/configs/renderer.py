"""
Headless browser rendering configuration.

Settings for the Playwright HTML to PDF export and the Mermaid runtime
embedded in generated documents.

Dependencies: pydantic_settings
System role: PDF exporter configuration
"""

import tempfile

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RendererSettings(BaseSettings):
    """Settings for PDF rendering with headless Chromium."""

    model_config = SettingsConfigDict(
        env_prefix="RENDERER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    work_dir: str = Field(
        default_factory=tempfile.gettempdir,
        description="Directory for intermediate HTML and output PDF files",
    )
    viewport_width: int = Field(default=1200, description="Page viewport width in px")
    viewport_height: int = Field(default=1600, description="Page viewport height in px")
    device_scale_factor: float = Field(default=1, description="Viewport device scale factor")
    navigation_timeout_ms: int = Field(
        default=60000,
        description="Timeout for loading the HTML document until network idle",
    )
    diagram_wait_timeout_ms: int = Field(
        default=10000,
        description="Timeout for diagrams to render (expiry is not fatal)",
    )
    settle_delay_ms: int = Field(
        default=2000,
        description="Fixed delay after diagram rendering before export",
    )
    page_format: str = Field(default="A4", description="PDF paper format")
    page_margin: str = Field(default="50px", description="Margin applied to all PDF edges")
    mermaid_cdn_url: str = Field(
        default="https://cdn.jsdelivr.net/npm/mermaid@10.6.1/dist/mermaid.min.js",
        description="Mermaid script embedded in rendered documents",
    )
