"""
Health check API endpoints.

Routes: GET /health

Dependencies: fastapi, pydantic
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from task_generator.api.deps import get_settings_dependency
from task_generator.configs import Settings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    generation_configured: bool


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(settings: Settings = Depends(get_settings_dependency)) -> HealthResponse:
    """Basic health check, reporting whether an API key is configured."""
    return HealthResponse(
        status="healthy",
        message="Server Healthy",
        generation_configured=bool(settings.llm.api_key),
    )
