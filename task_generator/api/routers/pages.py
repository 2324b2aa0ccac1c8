"""
Static form page.

Routes: GET /

Dependencies: fastapi
System role: Serves the browser form
"""

from pathlib import Path

from fastapi import APIRouter
from fastapi.responses import FileResponse

STATIC_DIR = Path(__file__).resolve().parents[2] / "static"

router = APIRouter(tags=["pages"])


@router.get("/", include_in_schema=False)
async def index() -> FileResponse:
    """Serve the task generator form."""
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")
