"""
Pattern PDF upload handling.

Validates the uploaded file and stores it in a private temp directory for
the text extractor. The caller removes it right after extraction.

Dependencies: fastapi, task_generator.configs, task_generator.core
System role: Upload validation and temp storage
"""

import logging
from pathlib import Path

from fastapi import UploadFile

from task_generator.configs.uploads import UploadSettings
from task_generator.core.exceptions import InvalidRequest
from task_generator.core.temp_files import ArtifactKind, TemporaryArtifact, make_upload_dir

logger = logging.getLogger(__name__)


async def read_pattern_upload(upload: UploadFile | None, settings: UploadSettings) -> bytes:
    """
    Validate and read an uploaded pattern PDF.

    Args:
        upload: Uploaded file (None when the field is missing)
        settings: Upload limits

    Returns:
        bytes: File content

    Raises:
        InvalidRequest: Missing file, wrong MIME type, or too large
    """
    if upload is None or not upload.filename:
        raise InvalidRequest("No file uploaded", field="pdfFile")

    if upload.content_type not in settings.allowed_content_types:
        raise InvalidRequest("Only PDF files are allowed", field="pdfFile")

    content = await upload.read(settings.max_file_size + 1)
    if len(content) > settings.max_file_size:
        raise InvalidRequest(
            f"File too large. Maximum size is {settings.max_file_size // (1024 * 1024)}MB",
            field="pdfFile",
        )
    if not content:
        raise InvalidRequest("Uploaded file is empty", field="pdfFile")

    return content


def save_upload_to_temp(content: bytes, filename: str | None) -> TemporaryArtifact:
    """
    Write upload content to a fresh temp directory.

    Args:
        content: File bytes
        filename: Client filename, only its base name is kept

    Returns:
        TemporaryArtifact: The stored upload
    """
    safe_name = Path(filename or "pattern.pdf").name or "pattern.pdf"
    if not safe_name.lower().endswith(".pdf"):
        safe_name = f"{safe_name}.pdf"

    artifact = TemporaryArtifact(path=make_upload_dir() / safe_name, kind=ArtifactKind.UPLOADED_PDF)
    artifact.path.write_bytes(content)

    logger.debug(
        "Saved pattern upload",
        extra={"file_path": str(artifact.path), "size_bytes": len(content)},
    )
    return artifact
