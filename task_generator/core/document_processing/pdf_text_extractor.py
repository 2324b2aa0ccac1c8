"""
Pattern text extraction using LangChain PyPDFLoader.

Turns an uploaded pattern PDF into the plain text the prompt builder
embeds.

Dependencies: langchain_community.document_loaders, fastapi.concurrency
System role: Input normalizer for PDF patterns
"""

import logging
from pathlib import Path

from fastapi.concurrency import run_in_threadpool
from langchain_community.document_loaders import PyPDFLoader
from langchain_core.documents import Document

from task_generator.core.exceptions import InvalidDocument

logger = logging.getLogger(__name__)


class PdfTextExtractor:
    """Parse PDF documents into pattern text."""

    def load(self, file_path: str) -> list[Document]:
        """
        Parse PDF document into LangChain Documents, one per page.

        Args:
            file_path: Path to PDF document

        Returns:
            list[Document]: Parsed pages

        Raises:
            InvalidDocument: When the file is missing, not a PDF, or unparseable
        """
        path = Path(file_path)
        if not path.exists():
            raise InvalidDocument(f"File not found: {path.name}", file_name=path.name)

        if not path.suffix.lower() == ".pdf":
            raise InvalidDocument(
                f"Unsupported file format: {path.suffix}. Only PDF files are supported.",
                file_name=path.name,
            )

        try:
            return PyPDFLoader(file_path).load()
        except Exception as e:
            raise InvalidDocument(f"Failed to parse PDF: {e}", file_name=path.name) from e

    def extract_text(self, file_path: str) -> str:
        """
        Extract the concatenated page text.

        Raises:
            InvalidDocument: When parsing fails or no text is extractable
        """
        documents = self.load(file_path)
        text = "\n".join(doc.page_content for doc in documents)

        if not text.strip():
            raise InvalidDocument(
                "PDF document contains no extractable text",
                file_name=Path(file_path).name,
            )

        logger.info(
            "Extracted pattern text from PDF",
            extra={"file_name": Path(file_path).name, "pages": len(documents), "chars": len(text)},
        )
        return text


async def extract_pattern_from_pdf(file_path: str, extractor: PdfTextExtractor | None = None) -> str:
    """Extract pattern text off the event loop."""
    extractor = extractor or PdfTextExtractor()
    return await run_in_threadpool(extractor.extract_text, file_path)
