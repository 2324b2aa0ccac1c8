"""Prompt building and text generation."""

from task_generator.core.generation.generation_client import GenerationClient
from task_generator.core.generation.task_prompt import (
    build_diagram_messages,
    build_language_instruction,
    build_task_messages,
    build_ui_mockup_messages,
    format_languages_for_prompt,
    format_task_types,
)

__all__ = [
    "GenerationClient",
    "build_diagram_messages",
    "build_language_instruction",
    "build_task_messages",
    "build_ui_mockup_messages",
    "format_languages_for_prompt",
    "format_task_types",
]
