"""
Shared test fixtures and configuration for entire test suite.

Provides: temp files and directories, request samples, service mocks, API client
Dependencies: pytest, fastapi
System role: Test infrastructure and fixture management
"""

import shutil
import tempfile
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from task_generator.api.deps import (
    get_generation_service,
    get_pdf_text_extractor,
    get_settings_dependency,
)
from task_generator.configs import Settings
from task_generator.configs.llm import LLMSettings
from task_generator.configs.renderer import RendererSettings
from task_generator.main import create_app
from task_generator.models.generation import DiagramOptions, GenerationRequest

SAMPLE_PATTERN = """### Task: Word Counter
Write a program that counts words in a text file.
#### Requirements
- Read the file path from the command line
- Print the ten most common words
"""


@pytest.fixture
def temp_dir():
    """
    Create a temporary directory for test files.

    Yields:
        Path: Path to temporary directory
    """
    temp_path = Path(tempfile.mkdtemp(prefix="taskgen_test_"))
    yield temp_path

    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def temp_pdf_file():
    """
    Create a temporary PDF-like file for testing.

    Yields:
        Path: Path to temporary PDF file
    """
    with tempfile.NamedTemporaryFile(suffix=".pdf", delete=False) as f:
        temp_path = Path(f.name)
        # Write minimal PDF header for testing
        f.write(b"%PDF-1.4\n")
        f.write(b"1 0 obj\n<< >>\nendobj\n")

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def renderer_settings(temp_dir) -> RendererSettings:
    """Renderer settings writing into the test temp directory."""
    return RendererSettings(work_dir=str(temp_dir), settle_delay_ms=0)


@pytest.fixture
def sample_request() -> GenerationRequest:
    """Single category, single language, no diagrams."""
    return GenerationRequest.build(
        source_pattern=SAMPLE_PATTERN,
        task_categories=["algorithm"],
        target_languages=["python"],
    )


@pytest.fixture
def diagram_request() -> GenerationRequest:
    """Request asking for every diagram kind."""
    return GenerationRequest.build(
        source_pattern=SAMPLE_PATTERN,
        task_categories=["algorithm", "desktop application"],
        target_languages=["python", "go"],
        output_language="Polish",
        diagram_options=DiagramOptions(algorithm=True, structure=True, ui_mockup=True),
    )


@pytest.fixture
def mock_generation_service(temp_dir):
    """
    Create mock GenerationService for testing.

    generate_pdf writes a real file into temp_dir so that delivery and
    cleanup can be observed.

    Returns:
        AsyncMock: Mocked GenerationService
    """
    service = AsyncMock()
    produced: list[Path] = []

    async def _generate_pdf(request):
        path = temp_dir / f"output_{len(produced)}.pdf"
        path.write_bytes(b"%PDF-1.4\n%%EOF\n")
        produced.append(path)
        return path

    service.generate_pdf = AsyncMock(side_effect=_generate_pdf)
    service.produced = produced
    return service


@pytest.fixture
def mock_pdf_text_extractor():
    """
    Create mock PdfTextExtractor returning the sample pattern.

    Returns:
        MagicMock: Mocked extractor with a synchronous extract_text
    """
    extractor = MagicMock()
    extractor.extract_text = MagicMock(return_value=SAMPLE_PATTERN)
    return extractor


@pytest.fixture
def test_settings() -> Settings:
    """Settings with an API key configured."""
    return Settings(llm=LLMSettings(api_key="sk-test"))


@pytest.fixture
def client(mock_generation_service, mock_pdf_text_extractor, test_settings):
    """API client with generation dependencies replaced by mocks."""
    app = create_app()
    app.dependency_overrides[get_generation_service] = lambda: mock_generation_service
    app.dependency_overrides[get_pdf_text_extractor] = lambda: mock_pdf_text_extractor
    app.dependency_overrides[get_settings_dependency] = lambda: test_settings
    return TestClient(app)
