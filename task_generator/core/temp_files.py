"""
Temporary artifact helpers.

Every file a request creates (uploaded PDF, intermediate HTML, output PDF)
is owned by that request and removed on every exit path. Removal failures
are logged and never raised.

Dependencies: logging, pathlib, shutil, tempfile
System role: Scoped cleanup of per-request files
"""

import logging
import shutil
import tempfile
import uuid
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

TEMP_PREFIX = "taskgen_"


class ArtifactKind(str, Enum):
    """Kinds of per-request files."""

    UPLOADED_PDF = "uploaded_pdf"
    INTERMEDIATE_HTML = "intermediate_html"
    OUTPUT_PDF = "output_pdf"


@dataclass(frozen=True)
class TemporaryArtifact:
    """A file created during one request."""

    path: Path
    kind: ArtifactKind

    @classmethod
    def create(cls, work_dir: str | Path, kind: ArtifactKind, suffix: str) -> "TemporaryArtifact":
        """Reserve a unique path in ``work_dir`` (the file is not created)."""
        name = f"{TEMP_PREFIX}{kind.value}_{uuid.uuid4().hex}{suffix}"
        return cls(path=Path(work_dir) / name, kind=kind)

    def cleanup(self) -> None:
        """Remove the file, and its private directory for uploads."""
        cleanup_temp_file(str(self.path), remove_parent=self.kind is ArtifactKind.UPLOADED_PDF)


def make_upload_dir() -> Path:
    """Create a private temp directory for one upload."""
    return Path(tempfile.mkdtemp(prefix=TEMP_PREFIX))


def cleanup_temp_file(file_path: str, remove_parent: bool = True) -> None:
    """
    Safely remove temporary file and its parent temp directory.

    Args:
        file_path: Path to file to remove
        remove_parent: Also remove a taskgen_ prefixed parent directory
    """
    try:
        path = Path(file_path)
        parent_dir = path.parent

        if path.exists():
            path.unlink()
            logger.debug("Cleaned up temp file", extra={"file_path": file_path})

        # Upload directories are private to one request
        if remove_parent and parent_dir.exists() and parent_dir.name.startswith(TEMP_PREFIX):
            shutil.rmtree(parent_dir, ignore_errors=True)
            logger.debug("Cleaned up temp directory", extra={"temp_dir": str(parent_dir)})

    except Exception as e:
        logger.warning(
            "Failed to cleanup temp file",
            extra={"file_path": file_path, "error": str(e)},
        )
