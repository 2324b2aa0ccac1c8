"""
Test suite for PdfExporter.

Uses a fake Playwright context so no browser is launched. Verifies page
setup, diagram wait handling and that every temporary file and the browser
are released on each exit path.

System role: Verification of HTML to PDF export
"""

import asyncio
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from task_generator.configs.renderer import RendererSettings
from task_generator.core.exceptions import RenderFailed
from task_generator.core.rendering.pdf_exporter import PdfExporter


@pytest.fixture
def mock_page() -> MagicMock:
    """Page whose pdf() writes the requested file."""
    page = MagicMock()
    page.goto = AsyncMock()
    page.wait_for_function = AsyncMock()
    page.wait_for_timeout = AsyncMock()

    async def _pdf(path, **kwargs):
        Path(path).write_bytes(b"%PDF-1.4\n%%EOF\n")

    page.pdf = AsyncMock(side_effect=_pdf)
    return page


@pytest.fixture
def mock_browser(mock_page) -> MagicMock:
    browser = MagicMock()
    browser.new_page = AsyncMock(return_value=mock_page)
    browser.close = AsyncMock()
    return browser


@pytest.fixture
def mock_playwright(mock_browser) -> MagicMock:
    playwright = MagicMock()
    playwright.chromium.launch = AsyncMock(return_value=mock_browser)
    return playwright


@pytest.fixture
def playwright_factory(mock_playwright):
    """Callable returning an async context that yields the fake Playwright."""
    context = MagicMock()
    context.__aenter__.return_value = mock_playwright
    context.__aexit__.return_value = False
    return lambda: context


@pytest.fixture
def exporter(renderer_settings, playwright_factory) -> PdfExporter:
    """Exporter wired to the fake Playwright context."""
    return PdfExporter(settings=renderer_settings, playwright_factory=playwright_factory)


def _leftovers(directory: Path) -> list[Path]:
    return list(directory.glob("taskgen_*"))


class TestPdfExporterSuccess:
    """Test suite for the happy path."""

    @pytest.mark.asyncio
    async def test_export_returns_pdf_and_removes_html(self, exporter, temp_dir) -> None:
        """Test produced PDF exists and the intermediate HTML is gone."""
        # Act
        pdf_path = await exporter.export("<html><body>task</body></html>")

        # Assert
        assert pdf_path.exists()
        assert pdf_path.suffix == ".pdf"
        assert [p.name for p in _leftovers(temp_dir)] == [pdf_path.name]

    @pytest.mark.asyncio
    async def test_page_configuration(self, exporter, mock_playwright, mock_browser, mock_page) -> None:
        """Test launch, viewport, navigation and print options."""
        # Act
        await exporter.export("<html></html>")

        # Assert
        assert mock_playwright.chromium.launch.await_args.kwargs["headless"] is True
        assert mock_browser.new_page.await_args.kwargs["viewport"] == {"width": 1200, "height": 1600}

        goto_args = mock_page.goto.await_args
        assert goto_args.args[0].startswith("file://")
        assert goto_args.kwargs == {"wait_until": "networkidle", "timeout": 60000}

        assert mock_page.wait_for_function.await_args.kwargs["timeout"] == 10000

        pdf_kwargs = mock_page.pdf.await_args.kwargs
        assert pdf_kwargs["format"] == "A4"
        assert pdf_kwargs["print_background"] is True
        assert pdf_kwargs["margin"] == {"top": "50px", "right": "50px", "bottom": "50px", "left": "50px"}
        mock_browser.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_diagram_timeout_is_not_fatal(self, exporter, mock_page) -> None:
        """Test export proceeds when diagrams never settle."""
        # Arrange
        mock_page.wait_for_function.side_effect = PlaywrightTimeoutError("Timeout 10000ms exceeded")

        # Act
        pdf_path = await exporter.export("<html></html>")

        # Assert
        assert pdf_path.exists()
        mock_page.pdf.assert_awaited_once()


class TestPdfExporterFailures:
    """Test suite for cleanup on failure."""

    @pytest.mark.asyncio
    async def test_launch_failure(self, exporter, mock_playwright, temp_dir) -> None:
        """Test browser launch errors are RenderFailed and leave no files."""
        # Arrange
        mock_playwright.chromium.launch.side_effect = RuntimeError("Executable doesn't exist")

        # Act & Assert
        with pytest.raises(RenderFailed) as exc_info:
            await exporter.export("<html></html>")

        assert exc_info.value.details["step"] == "launch"
        assert _leftovers(temp_dir) == []

    @pytest.mark.asyncio
    async def test_navigation_failure(self, exporter, mock_page, mock_browser, temp_dir) -> None:
        """Test navigation errors close the browser and remove files."""
        # Arrange
        mock_page.goto.side_effect = PlaywrightTimeoutError("Timeout 60000ms exceeded")

        # Act & Assert
        with pytest.raises(RenderFailed) as exc_info:
            await exporter.export("<html></html>")

        assert exc_info.value.details["step"] == "navigate"
        mock_browser.close.assert_awaited_once()
        assert _leftovers(temp_dir) == []

    @pytest.mark.asyncio
    async def test_export_failure_removes_partial_pdf(self, exporter, mock_page, mock_browser, temp_dir) -> None:
        """Test a partially written PDF is deleted."""

        # Arrange
        async def _broken_pdf(path, **kwargs):
            Path(path).write_bytes(b"%PDF-1.4\n")
            raise RuntimeError("Target closed")

        mock_page.pdf.side_effect = _broken_pdf

        # Act & Assert
        with pytest.raises(RenderFailed) as exc_info:
            await exporter.export("<html></html>")

        assert exc_info.value.details["step"] == "export"
        mock_browser.close.assert_awaited_once()
        assert _leftovers(temp_dir) == []

    @pytest.mark.asyncio
    async def test_browser_close_error_does_not_mask_result(self, exporter, mock_browser) -> None:
        """Test close failures are logged only."""
        # Arrange
        mock_browser.close.side_effect = RuntimeError("already closed")

        # Act
        pdf_path = await exporter.export("<html></html>")

        # Assert
        assert pdf_path.exists()

    @pytest.mark.asyncio
    async def test_cancellation_during_close_removes_pdf(self, exporter, mock_browser, temp_dir) -> None:
        """Test a request cancelled after the PDF was written leaves no files."""
        # Arrange
        mock_browser.close.side_effect = asyncio.CancelledError()

        # Act & Assert
        with pytest.raises(asyncio.CancelledError):
            await exporter.export("<html></html>")

        assert _leftovers(temp_dir) == []


class TestPdfExporterWorkDir:
    """Test suite for work directory handling."""

    @pytest.mark.asyncio
    async def test_relative_work_dir_resolved(self, playwright_factory, mock_page, temp_dir, monkeypatch) -> None:
        """Test a relative work dir still yields a loadable file URI."""
        # Arrange
        monkeypatch.chdir(temp_dir)
        (temp_dir / "work").mkdir()
        exporter = PdfExporter(
            settings=RendererSettings(work_dir="work", settle_delay_ms=0),
            playwright_factory=playwright_factory,
        )

        # Act
        pdf_path = await exporter.export("<html></html>")

        # Assert
        assert pdf_path.is_absolute()
        assert pdf_path.parent == (temp_dir / "work").resolve()
        assert mock_page.goto.await_args.args[0].startswith("file:///")
