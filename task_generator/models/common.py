"""
Common response models.

Error schema returned by every endpoint on failure.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    error: str = Field(description="Human-readable error message")
    details: str | None = Field(default=None, description="Underlying error detail")
