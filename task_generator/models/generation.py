"""
Generation domain models and schemas.

Request schema for the JSON endpoint plus the per-request values that flow
through the pipeline: the normalized request, the generated task, diagram
artifacts and the rendered document. Nothing here outlives a request.

Dependencies: pydantic, task_generator.core.exceptions
System role: Generation API contracts and pipeline values
"""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from task_generator.core.exceptions import InvalidRequest

_WHITESPACE_RUN = re.compile(r"\s+")


class DiagramKind(str, Enum):
    """Diagram kinds in the fixed order they appear in a document."""

    ALGORITHM = "algorithm"
    STRUCTURE = "structure"
    UI_MOCKUP = "ui_mockup"

    @property
    def section_title(self) -> str:
        """Heading of the document section holding this diagram."""
        return _SECTION_TITLES[self]

    @property
    def fallback_title(self) -> str:
        """Name used by the error diagram substituted for malformed markup."""
        return _FALLBACK_TITLES[self]


_SECTION_TITLES = {
    DiagramKind.ALGORITHM: "Algorithm Flowchart",
    DiagramKind.STRUCTURE: "Application Structure",
    DiagramKind.UI_MOCKUP: "GUI Mockup",
}

_FALLBACK_TITLES = {
    DiagramKind.ALGORITHM: "Algorithm",
    DiagramKind.STRUCTURE: "App Structure",
    DiagramKind.UI_MOCKUP: "GUI",
}


class DiagramOptions(BaseModel):
    """Which diagrams the caller asked for."""

    model_config = ConfigDict(frozen=True)

    algorithm: bool = False
    structure: bool = False
    ui_mockup: bool = False

    @property
    def requested_kinds(self) -> list[DiagramKind]:
        """Requested kinds in document order."""
        flags = {
            DiagramKind.ALGORITHM: self.algorithm,
            DiagramKind.STRUCTURE: self.structure,
            DiagramKind.UI_MOCKUP: self.ui_mockup,
        }
        return [kind for kind in DiagramKind if flags[kind]]

    @property
    def wants_diagram_set(self) -> bool:
        """True when the algorithm/structure prompt has to be sent."""
        return self.algorithm or self.structure


def _require_string_list(values: list[str] | None, field: str, message: str) -> list[str]:
    if not isinstance(values, list) or not values:
        raise InvalidRequest(message, field=field)
    for value in values:
        if not isinstance(value, str) or not value.strip():
            raise InvalidRequest(f"Invalid {field} entry: {value!r}", field=field)
    return list(values)


class GenerationRequest(BaseModel):
    """
    Normalized request shared by the JSON and PDF upload endpoints.

    A single target language is just a one-element list; prompt phrasing
    collapses to the single-language form automatically.
    """

    model_config = ConfigDict(frozen=True)

    source_pattern: str
    task_categories: list[str] = Field(min_length=1)
    target_languages: list[str] = Field(min_length=1)
    output_language: str = "English"
    diagram_options: DiagramOptions = Field(default_factory=DiagramOptions)

    @classmethod
    def build(
        cls,
        source_pattern: str | None,
        task_categories: list[str] | None,
        target_languages: list[str] | None,
        output_language: str | None = None,
        diagram_options: DiagramOptions | None = None,
    ) -> "GenerationRequest":
        """
        Validate raw fields and create a request.

        Raises:
            InvalidRequest: Missing pattern, empty or malformed category or
                language lists
        """
        if not source_pattern or not source_pattern.strip():
            raise InvalidRequest("Pattern is required", field="pattern")
        categories = _require_string_list(
            task_categories, "taskTypes", "At least one task type must be selected"
        )
        languages = _require_string_list(
            target_languages,
            "languages",
            "At least one programming language must be selected",
        )
        return cls(
            source_pattern=source_pattern,
            task_categories=categories,
            target_languages=languages,
            output_language=(output_language or "English").strip() or "English",
            diagram_options=diagram_options or DiagramOptions(),
        )

    @property
    def display_categories(self) -> str:
        """Categories with a capitalized first letter, comma separated."""
        return ", ".join(c[:1].upper() + c[1:] for c in self.task_categories)

    @property
    def display_languages(self) -> str:
        """Languages upper-cased, comma separated."""
        return ", ".join(lang.upper() for lang in self.target_languages)

    @property
    def download_filename(self) -> str:
        """Deterministic attachment name, e.g. ``algorithm_python_english.pdf``."""
        categories = _WHITESPACE_RUN.sub("-", "-".join(self.task_categories).lower())
        languages = _WHITESPACE_RUN.sub("-", "-".join(self.target_languages).lower())
        return f"{categories}_{languages}_{self.output_language.lower()}.pdf"


class GenerateRequest(BaseModel):
    """Request body for POST /generate."""

    model_config = ConfigDict(populate_by_name=True)

    pattern: str | None = Field(default=None, description="Example task to imitate")
    task_types: list[str] | None = Field(
        default=None,
        alias="taskTypes",
        description="Task categories, e.g. ['algorithm', 'web']",
    )
    languages: list[str] | None = Field(
        default=None,
        description="Target programming languages",
    )
    output_language: str | None = Field(
        default="English",
        alias="outputLanguage",
        description="Natural language of the generated task",
    )
    with_algorithm_chart: bool = Field(default=False, alias="withAlgorithmChart")
    with_app_structure: bool = Field(default=False, alias="withAppStructure")
    with_gui_visualization: bool = Field(default=False, alias="withGuiVisualization")

    def to_generation_request(self) -> GenerationRequest:
        """Validate and convert into the pipeline request."""
        return GenerationRequest.build(
            source_pattern=self.pattern,
            task_categories=self.task_types,
            target_languages=self.languages,
            output_language=self.output_language,
            diagram_options=DiagramOptions(
                algorithm=self.with_algorithm_chart,
                structure=self.with_app_structure,
                ui_mockup=self.with_gui_visualization,
            ),
        )


class GeneratedTask(BaseModel):
    """Task text returned by the generator."""

    model_config = ConfigDict(frozen=True)

    body_text: str


class DiagramArtifact(BaseModel):
    """Mermaid markup for one document section."""

    model_config = ConfigDict(frozen=True)

    kind: DiagramKind
    markup_text: str
    is_fallback: bool = False


class RenderedDocument(BaseModel):
    """HTML ready for the PDF exporter."""

    model_config = ConfigDict(frozen=True)

    html_text: str
    task: GeneratedTask
    diagrams: list[DiagramArtifact] = Field(default_factory=list)
