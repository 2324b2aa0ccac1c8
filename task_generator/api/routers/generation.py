"""
Task generation API endpoints.

Routes:
- POST /generate - Generate a task PDF from a text pattern (JSON body)
- POST /generate-from-pdf - Generate a task PDF from an uploaded pattern PDF

Both return the PDF as a download, or JSON {error, details} with 400 for
invalid input and 500 for generation or rendering failures.

Dependencies: task_generator.application.services, task_generator.models
System role: Generation HTTP API
"""

import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile

from task_generator.api.deps import (
    get_generation_service,
    get_pdf_text_extractor,
    get_settings_dependency,
)
from task_generator.api.routers.router_utils import (
    TemporaryFileResponse,
    decode_string_list,
    parse_form_flag,
    read_pattern_upload,
    save_upload_to_temp,
)
from task_generator.application.services import GenerationService
from task_generator.configs import Settings
from task_generator.core.document_processing import PdfTextExtractor, extract_pattern_from_pdf
from task_generator.core.exceptions import TaskGeneratorException
from task_generator.core.temp_files import cleanup_temp_file
from task_generator.models.common import ErrorResponse
from task_generator.models.generation import DiagramOptions, GenerateRequest, GenerationRequest

logger = logging.getLogger(__name__)

router = APIRouter(tags=["generation"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request or document"},
    500: {"model": ErrorResponse, "description": "Generation or rendering failed"},
}


async def _run_pipeline(
    request: GenerationRequest,
    service: GenerationService,
    endpoint: str,
) -> TemporaryFileResponse:
    logger.info(
        f"Generating {', '.join(request.task_categories)} task using "
        f"{', '.join(request.target_languages)} ({request.output_language})",
        extra={"endpoint": endpoint},
    )

    try:
        pdf_path = await service.generate_pdf(request)
    except TaskGeneratorException:
        raise
    except Exception as e:
        logger.exception(f"Error in {endpoint} endpoint", extra={"error": str(e)})
        raise TaskGeneratorException(str(e)) from e

    try:
        return TemporaryFileResponse(str(pdf_path), filename=request.download_filename)
    except Exception:
        cleanup_temp_file(str(pdf_path), remove_parent=False)
        raise


@router.post(
    "/generate",
    responses={200: {"content": {"application/pdf": {}}}, **ERROR_RESPONSES},
)
async def generate(
    body: GenerateRequest,
    service: GenerationService = Depends(get_generation_service),
) -> TemporaryFileResponse:
    """
    Generate a programming task PDF from a text pattern.

    Args:
        body: Pattern, categories, languages and diagram flags
        service: Injected GenerationService

    Returns:
        TemporaryFileResponse: PDF download, deleted after streaming

    Raises:
        InvalidRequest: Missing pattern, categories or languages (400)
        GenerationFailed: Text-generation backend error (500)
        RenderFailed: Headless browser error (500)
    """
    request = body.to_generation_request()
    return await _run_pipeline(request, service, "/generate")


@router.post(
    "/generate-from-pdf",
    responses={200: {"content": {"application/pdf": {}}}, **ERROR_RESPONSES},
)
async def generate_from_pdf(
    pdf_file: UploadFile | None = File(default=None, alias="pdfFile"),
    task_types: str | None = Form(default=None, alias="taskTypes"),
    languages: str | None = Form(default=None),
    output_language: str | None = Form(default="English", alias="outputLanguage"),
    with_algorithm_chart: str | None = Form(default=None, alias="withAlgorithmChart"),
    with_app_structure: str | None = Form(default=None, alias="withAppStructure"),
    with_gui_visualization: str | None = Form(default=None, alias="withGuiVisualization"),
    service: GenerationService = Depends(get_generation_service),
    extractor: PdfTextExtractor = Depends(get_pdf_text_extractor),
    settings: Settings = Depends(get_settings_dependency),
) -> TemporaryFileResponse:
    """
    Generate a programming task PDF from an uploaded pattern PDF.

    All fields are validated before the upload touches disk. The upload is
    removed as soon as its text has been extracted.

    Raises:
        InvalidRequest: Missing/invalid file or option fields (400)
        InvalidDocument: Unparseable PDF or no extractable text (400)
        GenerationFailed: Text-generation backend error (500)
        RenderFailed: Headless browser error (500)
    """
    content = await read_pattern_upload(pdf_file, settings.uploads)
    categories = decode_string_list(task_types, "taskTypes")
    target_languages = decode_string_list(languages, "languages")
    options = DiagramOptions(
        algorithm=parse_form_flag(with_algorithm_chart),
        structure=parse_form_flag(with_app_structure),
        ui_mockup=parse_form_flag(with_gui_visualization),
    )

    upload = save_upload_to_temp(content, pdf_file.filename)
    try:
        pattern = await extract_pattern_from_pdf(str(upload.path), extractor)
    finally:
        upload.cleanup()

    request = GenerationRequest.build(
        source_pattern=pattern,
        task_categories=categories,
        target_languages=target_languages,
        output_language=output_language,
        diagram_options=options,
    )
    return await _run_pipeline(request, service, "/generate-from-pdf")
