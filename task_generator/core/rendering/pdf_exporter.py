"""
HTML to PDF export with headless Chromium.

Loads the rendered task document in Playwright, waits for Mermaid diagrams
to settle and prints it to an A4 PDF. The browser and the intermediate
HTML file are released on every exit path.

Dependencies: playwright.async_api, task_generator.configs, task_generator.core
System role: PDF exporter for the generation pipeline
"""

import logging
import time
from pathlib import Path

from playwright.async_api import TimeoutError as PlaywrightTimeoutError
from playwright.async_api import async_playwright

from task_generator.configs.renderer import RendererSettings
from task_generator.core.exceptions import RenderFailed
from task_generator.core.temp_files import ArtifactKind, TemporaryArtifact

logger = logging.getLogger(__name__)

BROWSER_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]

DIAGRAMS_SETTLED_JS = """() => {
    const diagrams = document.querySelectorAll('.mermaid');
    return Array.from(diagrams).every(
        diagram => diagram.querySelector('svg') || diagram.querySelector('.error-message')
    );
}"""


class PdfExporter:
    """Renders HTML documents to PDF files."""

    def __init__(self, settings: RendererSettings | None = None, playwright_factory=async_playwright) -> None:
        """
        Initialize exporter.

        Args:
            settings: Renderer settings (loaded from environment if None)
            playwright_factory: Callable returning the Playwright async context manager
        """
        self._settings = settings or RendererSettings()
        self._playwright_factory = playwright_factory

    @property
    def settings(self) -> RendererSettings:
        """Renderer settings in use."""
        return self._settings

    async def export(self, html_text: str, output_dir: str | Path | None = None) -> Path:
        """
        Render HTML to a PDF file.

        Args:
            html_text: Complete HTML document
            output_dir: Directory for the intermediate HTML and the PDF

        Returns:
            Path: Location of the produced PDF; the caller owns and deletes it

        Raises:
            RenderFailed: Browser launch, navigation or export failed
        """
        # file:// URIs need an absolute path
        work_dir = Path(output_dir or self._settings.work_dir).resolve()
        html_file = TemporaryArtifact.create(work_dir, ArtifactKind.INTERMEDIATE_HTML, ".html")
        pdf_file = TemporaryArtifact.create(work_dir, ArtifactKind.OUTPUT_PDF, ".pdf")
        start = time.time()
        succeeded = False

        logger.info(f"{__name__}:export - START html_len={len(html_text)}, work_dir={work_dir}")

        try:
            html_file.path.write_text(html_text, encoding="utf-8")
            await self._render(html_file.path, pdf_file.path)
            succeeded = True
        except RenderFailed:
            raise
        except Exception as e:
            logger.error(f"{__name__}:export - {type(e).__name__}: {e}")
            raise RenderFailed(f"Failed to render PDF: {e}") from e
        finally:
            html_file.cleanup()
            # Also reached on cancellation
            if not succeeded:
                pdf_file.cleanup()

        logger.info(
            f"{__name__}:export - END pdf={pdf_file.path}, "
            f"elapsed_ms={round((time.time() - start) * 1000, 2)}"
        )
        return pdf_file.path

    async def _render(self, html_path: Path, pdf_path: Path) -> None:
        settings = self._settings
        step = "launch"

        async with self._playwright_factory() as playwright:
            try:
                browser = await playwright.chromium.launch(headless=True, args=BROWSER_ARGS)
            except Exception as e:
                raise RenderFailed(f"Failed to launch browser: {e}", step=step) from e

            try:
                step = "navigate"
                page = await browser.new_page(
                    viewport={"width": settings.viewport_width, "height": settings.viewport_height},
                    device_scale_factor=settings.device_scale_factor,
                )
                await page.goto(
                    html_path.as_uri(),
                    wait_until="networkidle",
                    timeout=settings.navigation_timeout_ms,
                )

                step = "diagrams"
                await self._wait_for_diagrams(page)
                await page.wait_for_timeout(settings.settle_delay_ms)

                step = "export"
                margin = settings.page_margin
                await page.pdf(
                    path=str(pdf_path),
                    format=settings.page_format,
                    margin={"top": margin, "right": margin, "bottom": margin, "left": margin},
                    print_background=True,
                )
            except Exception as e:
                logger.error(f"{__name__}:_render - step={step} {type(e).__name__}: {e}")
                raise RenderFailed(f"PDF rendering failed during {step}: {e}", step=step) from e
            finally:
                await self._close_browser(browser)

    async def _wait_for_diagrams(self, page) -> None:
        try:
            await page.wait_for_function(
                DIAGRAMS_SETTLED_JS,
                timeout=self._settings.diagram_wait_timeout_ms,
            )
        except PlaywrightTimeoutError:
            logger.warning(f"{__name__}:_wait_for_diagrams - Timeout waiting for diagrams, proceeding anyway")

    async def _close_browser(self, browser) -> None:
        try:
            await browser.close()
        except Exception as e:
            logger.error(f"{__name__}:_close_browser - {type(e).__name__}: {e}")
