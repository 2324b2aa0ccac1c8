"""Mermaid diagram extraction from generated text."""

from task_generator.core.diagrams.extractor import (
    build_diagram_artifacts,
    create_safe_mermaid_wrapper,
    create_ui_fallback_diagram,
    extract_diagram,
    extract_ui_mockup,
    find_mermaid_blocks,
)

__all__ = [
    "build_diagram_artifacts",
    "create_safe_mermaid_wrapper",
    "create_ui_fallback_diagram",
    "extract_diagram",
    "extract_ui_mockup",
    "find_mermaid_blocks",
]
