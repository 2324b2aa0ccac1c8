"""
Core business logic module.

Contains prompt building, text generation, diagram extraction, document
rendering, and the exception hierarchy.
"""

from task_generator.core.exceptions import (
    DeliveryFailed,
    GenerationFailed,
    InvalidDocument,
    InvalidRequest,
    RenderFailed,
    TaskGeneratorException,
)

__all__ = [
    "TaskGeneratorException",
    "InvalidRequest",
    "InvalidDocument",
    "GenerationFailed",
    "RenderFailed",
    "DeliveryFailed",
]
