"""API-specific dependencies."""

from .dependencies import (
    get_generation_service,
    get_pdf_text_extractor,
    get_service_cache,
    get_settings_dependency,
)

__all__ = [
    "get_generation_service",
    "get_pdf_text_extractor",
    "get_service_cache",
    "get_settings_dependency",
]
