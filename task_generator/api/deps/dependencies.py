"""
Dependency injection container.

Factory functions for FastAPI dependencies. Services are stateless, so
one cached instance of each serves every request.

Dependencies: task_generator.configs, task_generator.application, task_generator.core
System role: DI container for service injection
"""

from functools import lru_cache

from task_generator.application.services import GenerationService
from task_generator.configs import Settings, get_settings
from task_generator.core.document_processing import PdfTextExtractor


class ServiceCache:
    """Container for cached service instances."""

    def __init__(self):
        self._generation_client = None
        self._pdf_exporter = None
        self._generation_service = None
        self._pdf_text_extractor = None

    @property
    def generation_client(self):
        """Get cached text-generation client."""
        if self._generation_client is None:
            from task_generator.core.generation import GenerationClient

            self._generation_client = GenerationClient(settings=get_settings().llm)
        return self._generation_client

    @property
    def pdf_exporter(self):
        """Get cached PDF exporter."""
        if self._pdf_exporter is None:
            from task_generator.core.rendering import PdfExporter

            self._pdf_exporter = PdfExporter(settings=get_settings().renderer)
        return self._pdf_exporter

    @property
    def generation_service(self) -> GenerationService:
        """Get cached generation service."""
        if self._generation_service is None:
            self._generation_service = GenerationService(
                generation_client=self.generation_client,
                pdf_exporter=self.pdf_exporter,
            )
        return self._generation_service

    @property
    def pdf_text_extractor(self) -> PdfTextExtractor:
        """Get cached PDF text extractor."""
        if self._pdf_text_extractor is None:
            self._pdf_text_extractor = PdfTextExtractor()
        return self._pdf_text_extractor

    def clear(self) -> None:
        """Clear all cached instances."""
        self._generation_client = None
        self._pdf_exporter = None
        self._generation_service = None
        self._pdf_text_extractor = None


# Global service cache
_service_cache = ServiceCache()


def get_service_cache() -> ServiceCache:
    """Get service cache singleton."""
    return _service_cache


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings singleton."""
    return get_settings()


def get_generation_service() -> GenerationService:
    """
    Get generation service instance.

    Returns:
        GenerationService: Service wired with the OpenAI client and PDF exporter
    """
    return get_service_cache().generation_service


def get_pdf_text_extractor() -> PdfTextExtractor:
    """Get PDF text extractor instance."""
    return get_service_cache().pdf_text_extractor
