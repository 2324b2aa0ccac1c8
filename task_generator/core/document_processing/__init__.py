"""Pattern extraction from uploaded documents."""

from task_generator.core.document_processing.pdf_text_extractor import (
    PdfTextExtractor,
    extract_pattern_from_pdf,
)

__all__ = ["PdfTextExtractor", "extract_pattern_from_pdf"]
