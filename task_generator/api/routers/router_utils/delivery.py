"""
PDF delivery.

File download response that deletes its file once streaming ends, whether
the client received it or not.

Dependencies: starlette, task_generator.core
System role: Delivery and cleanup of generated PDFs
"""

import logging

from fastapi.responses import FileResponse, JSONResponse
from starlette.types import Message, Receive, Scope, Send

from task_generator.core.exceptions import DeliveryFailed
from task_generator.core.temp_files import cleanup_temp_file
from task_generator.models.common import ErrorResponse

logger = logging.getLogger(__name__)


class TemporaryFileResponse(FileResponse):
    """FileResponse that owns and removes its file."""

    def __init__(self, path: str, filename: str, **kwargs) -> None:
        super().__init__(path, media_type="application/pdf", filename=filename, **kwargs)

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        headers_sent = False

        async def tracking_send(message: Message) -> None:
            nonlocal headers_sent
            if message["type"] == "http.response.start":
                headers_sent = True
            await send(message)

        try:
            await super().__call__(scope, receive, tracking_send)
        except Exception as e:
            error = DeliveryFailed("Error sending PDF", details={"path": str(self.path), "error": str(e)})
            logger.error(f"{__name__}:__call__ - {error}")
            if not headers_sent:
                response = JSONResponse(
                    ErrorResponse(error=error.message, details=str(e)).model_dump(),
                    status_code=500,
                )
                await response(scope, receive, send)
        finally:
            cleanup_temp_file(str(self.path), remove_parent=False)
            logger.debug("Temporary PDF file deleted", extra={"file_path": str(self.path)})
