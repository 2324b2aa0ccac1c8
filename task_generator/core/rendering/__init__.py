"""HTML document rendering and PDF export."""

from task_generator.core.rendering.html_renderer import (
    convert_markdown_subset,
    render_task_html,
)
from task_generator.core.rendering.pdf_exporter import PdfExporter

__all__ = ["PdfExporter", "convert_markdown_subset", "render_task_html"]
