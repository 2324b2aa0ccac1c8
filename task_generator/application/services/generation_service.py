"""Generation service layer.

Orchestrates the task generation pipeline for one request:
prompt building, text generation, diagram extraction, HTML rendering and
PDF export. Stages run strictly in sequence because every diagram prompt
embeds the generated task text.

Dependencies: logging, task_generator.core, task_generator.models
System role: Service layer for the generate endpoints
"""

import logging
from pathlib import Path

from task_generator.core.diagrams.extractor import build_diagram_artifacts
from task_generator.core.generation.generation_client import GenerationClient
from task_generator.core.generation.task_prompt import (
    build_diagram_messages,
    build_task_messages,
    build_ui_mockup_messages,
)
from task_generator.core.rendering.html_renderer import render_task_html
from task_generator.core.rendering.pdf_exporter import PdfExporter
from task_generator.models.generation import (
    DiagramArtifact,
    GeneratedTask,
    GenerationRequest,
    RenderedDocument,
)

logger = logging.getLogger(__name__)


class GenerationService:
    """Service turning a GenerationRequest into a task PDF.

    Holds no per-request state; one instance serves all requests.
    """

    def __init__(
        self,
        generation_client: GenerationClient,
        pdf_exporter: PdfExporter,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            generation_client: Client for the text-generation backend
            pdf_exporter: Headless browser PDF exporter
        """
        self._client = generation_client
        self._exporter = pdf_exporter

    async def generate_task(self, request: GenerationRequest) -> GeneratedTask:
        """Generate the task description text."""
        body_text = await self._client.complete(build_task_messages(request), stage="task")
        return GeneratedTask(body_text=body_text)

    async def generate_diagrams(
        self,
        request: GenerationRequest,
        task: GeneratedTask,
    ) -> list[DiagramArtifact]:
        """Generate requested diagrams; skipped calls cost nothing.

        Args:
            request: Normalized request
            task: Generated task embedded in the diagram prompts

        Returns:
            list[DiagramArtifact]: Diagrams in document order

        Raises:
            GenerationFailed: Diagram or mockup generation call failed
        """
        options = request.diagram_options
        diagram_output = None
        ui_output = None

        diagram_messages = build_diagram_messages(task.body_text, options)
        if diagram_messages is not None:
            diagram_output = await self._client.complete(diagram_messages, stage="diagrams")

        if options.ui_mockup:
            ui_output = await self._client.complete(
                build_ui_mockup_messages(task.body_text),
                stage="ui_mockup",
            )

        return build_diagram_artifacts(
            options=options,
            task_categories=request.task_categories,
            diagram_output=diagram_output,
            ui_output=ui_output,
        )

    def render_document(
        self,
        request: GenerationRequest,
        task: GeneratedTask,
        diagrams: list[DiagramArtifact],
    ) -> RenderedDocument:
        """Assemble the printable HTML document."""
        html_text = render_task_html(
            task_text=task.body_text,
            languages_display=request.display_languages,
            task_type_display=request.display_categories,
            output_language=request.output_language,
            diagrams=diagrams,
            mermaid_url=self._exporter.settings.mermaid_cdn_url,
        )
        return RenderedDocument(html_text=html_text, task=task, diagrams=diagrams)

    async def generate_pdf(self, request: GenerationRequest) -> Path:
        """Run the full pipeline.

        Args:
            request: Normalized request

        Returns:
            Path: Produced PDF; the caller streams and deletes it

        Raises:
            GenerationFailed: Any text-generation call failed
            RenderFailed: PDF export failed
        """
        logger.info(
            f"{__name__}:generate_pdf - START "
            f"categories={request.task_categories}, languages={request.target_languages}, "
            f"output_language={request.output_language}, "
            f"diagrams={[kind.value for kind in request.diagram_options.requested_kinds]}"
        )

        task = await self.generate_task(request)
        logger.info(f"{__name__}:generate_pdf - Task generated, chars={len(task.body_text)}")

        diagrams = await self.generate_diagrams(request, task)
        document = self.render_document(request, task, diagrams)
        pdf_path = await self._exporter.export(document.html_text)

        logger.info(
            f"{__name__}:generate_pdf - END diagrams={len(diagrams)}, pdf={pdf_path}"
        )
        return pdf_path
