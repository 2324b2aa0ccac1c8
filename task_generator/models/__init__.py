"""Domain and API models."""

from task_generator.models.common import ErrorResponse
from task_generator.models.generation import (
    DiagramArtifact,
    DiagramKind,
    DiagramOptions,
    GenerateRequest,
    GeneratedTask,
    GenerationRequest,
    RenderedDocument,
)

__all__ = [
    "DiagramArtifact",
    "DiagramKind",
    "DiagramOptions",
    "ErrorResponse",
    "GenerateRequest",
    "GeneratedTask",
    "GenerationRequest",
    "RenderedDocument",
]
