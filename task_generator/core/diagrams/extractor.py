"""
Mermaid diagram extraction.

Best-effort mining of fenced Mermaid blocks out of free-form LLM output.
Upstream text has no grammar, so extraction is a tolerant pattern match
with fallback tiers (keyword match, positional match, empty) plus a safety
wrapper that swaps structurally implausible markup for a small error
diagram. Nothing in this module raises.

Dependencies: re, task_generator.models
System role: Diagram extractor for the generation pipeline
"""

import logging
import re

from task_generator.models.generation import DiagramArtifact, DiagramKind, DiagramOptions

logger = logging.getLogger(__name__)

MERMAID_BLOCK = re.compile(r"```mermaid\s*([\s\S]*?)\s*```", re.IGNORECASE)
FLOWCHART_BLOCK = re.compile(r"```(?:mermaid)?\s*(flowchart[\s\S]*?)```", re.IGNORECASE)
ANY_FENCED_BLOCK = re.compile(r"```(?:mermaid)?\s*([\s\S]*?)```", re.IGNORECASE)

KIND_KEYWORDS: dict[DiagramKind, tuple[str, ...]] = {
    DiagramKind.ALGORITHM: ("flowchart", "graph"),
    DiagramKind.STRUCTURE: ("classdiagram", "erdiagram", "flowchart"),
}

STRUCTURAL_TOKENS = ("-->", "---", "|", "(")
MIN_UI_MOCKUP_LENGTH = 20
FLOWCHART_HEADER = "flowchart TD\n    "
UI_CATEGORY_HINTS = ("desktop", "mobile", "web")


def find_mermaid_blocks(raw: str) -> list[str]:
    """Return the bodies of all ```mermaid fenced blocks, in order."""
    return [match.group(1) for match in MERMAID_BLOCK.finditer(raw or "")]


def extract_diagram(
    raw: str,
    kind: DiagramKind,
    options: DiagramOptions,
    exclude: frozenset[str] = frozenset(),
) -> str:
    """
    Pull an algorithm or structure diagram out of generator output.

    Tier 1 is the first mermaid block whose first token belongs to the
    kind's keyword set. Tier 2 (structure only) is the Nth mermaid block,
    N being the number of diagrams requested before this one. The kind of
    a positional match is not checked.

    Args:
        raw: Generator output holding one or more fenced blocks
        kind: DiagramKind.ALGORITHM or DiagramKind.STRUCTURE
        options: Requested diagrams, used for the positional index
        exclude: Blocks already claimed by an earlier kind

    Returns:
        str: Diagram markup, or "" when nothing was found
    """
    blocks = find_mermaid_blocks(raw)
    keywords = KIND_KEYWORDS.get(kind, ())

    for block in blocks:
        if block in exclude:
            continue
        if block.lower().startswith(keywords):
            return block

    if kind is DiagramKind.STRUCTURE:
        index = 1 if options.algorithm else 0
        if len(blocks) > index:
            logger.debug(f"{__name__}:extract_diagram - Positional fallback index={index}")
            return blocks[index]

    return ""


def _ui_app_type(task_categories: list[str]) -> str:
    for category in task_categories:
        if any(hint in category for hint in UI_CATEGORY_HINTS):
            return category
    return "application"


def create_ui_fallback_diagram(task_categories: list[str]) -> str:
    """Three-node mockup: title, main screen, features."""
    app_type = _ui_app_type(task_categories)
    label = app_type[:1].upper() + app_type[1:]
    return (
        "flowchart TD\n"
        f'    title["{label} UI Mockup"]\n'
        '    mainScreen["Main Screen"]\n'
        '    features["Features"]\n'
        "\n"
        "    title --> mainScreen\n"
        "    mainScreen --> features"
    )


def extract_ui_mockup(raw: str, task_categories: list[str]) -> tuple[str, bool]:
    """
    Pull the UI mockup flowchart out of generator output.

    Args:
        raw: Generator output
        task_categories: Request categories, used to label the fallback

    Returns:
        tuple[str, bool]: Markup and whether it is the synthesized fallback
    """
    raw = raw or ""
    match = FLOWCHART_BLOCK.search(raw)
    code = match.group(1).strip() if match else ""

    if not code:
        match = ANY_FENCED_BLOCK.search(raw)
        code = match.group(1).strip() if match else ""

    if code and not code.lower().startswith("flowchart"):
        code = FLOWCHART_HEADER + code

    if len(code) < MIN_UI_MOCKUP_LENGTH:
        logger.info(f"{__name__}:extract_ui_mockup - Using fallback mockup, extracted_len={len(code)}")
        return create_ui_fallback_diagram(task_categories), True

    return code, False


def has_structural_tokens(code: str) -> bool:
    """True when markup contains any arrow, divider, pipe or parenthesis."""
    return any(token in code for token in STRUCTURAL_TOKENS)


def create_safe_mermaid_wrapper(code: str, title: str) -> str:
    """
    Replace structurally implausible markup with a two-node error diagram.

    Args:
        code: Diagram markup
        title: Diagram name shown in the error node

    Returns:
        str: ``code`` unchanged, or the error diagram
    """
    if has_structural_tokens(code):
        return code

    return (
        "flowchart TD\n"
        f'    error["Could not generate {title} visualization."]\n'
        '    note["Please try again with different settings."]\n'
        "    error --> note"
    )


def build_diagram_artifacts(
    options: DiagramOptions,
    task_categories: list[str],
    diagram_output: str | None = None,
    ui_output: str | None = None,
) -> list[DiagramArtifact]:
    """
    Turn raw generator output into wrapped diagram artifacts.

    Empty extractions are dropped; everything else goes through the safety
    wrapper. Artifacts come back in document order.

    Args:
        options: Requested diagrams
        task_categories: Request categories, used by the UI fallback
        diagram_output: Output of the algorithm/structure prompt
        ui_output: Output of the UI mockup prompt

    Returns:
        list[DiagramArtifact]: Zero to three artifacts
    """
    extracted: dict[DiagramKind, tuple[str, bool]] = {}

    if options.algorithm:
        extracted[DiagramKind.ALGORITHM] = (
            extract_diagram(diagram_output or "", DiagramKind.ALGORITHM, options),
            False,
        )
    if options.structure:
        claimed = frozenset(code for code, _ in extracted.values() if code)
        extracted[DiagramKind.STRUCTURE] = (
            extract_diagram(diagram_output or "", DiagramKind.STRUCTURE, options, exclude=claimed),
            False,
        )
    if options.ui_mockup:
        extracted[DiagramKind.UI_MOCKUP] = extract_ui_mockup(ui_output or "", task_categories)

    artifacts = []
    for kind in options.requested_kinds:
        code, is_fallback = extracted[kind]
        if not code:
            logger.warning(f"{__name__}:build_diagram_artifacts - No {kind.value} diagram found, omitting")
            continue

        wrapped = create_safe_mermaid_wrapper(code, kind.fallback_title)
        artifacts.append(
            DiagramArtifact(
                kind=kind,
                markup_text=wrapped,
                is_fallback=is_fallback or wrapped != code,
            )
        )

    return artifacts
