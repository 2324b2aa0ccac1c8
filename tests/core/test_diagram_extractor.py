"""
Test suite for Mermaid diagram extraction.

Covers keyword and positional tiers, UI mockup fallback and the safety
wrapper.

System role: Verification of diagram extraction
"""

import pytest

from task_generator.core.diagrams.extractor import (
    MIN_UI_MOCKUP_LENGTH,
    build_diagram_artifacts,
    create_safe_mermaid_wrapper,
    create_ui_fallback_diagram,
    extract_diagram,
    extract_ui_mockup,
    find_mermaid_blocks,
)
from task_generator.models.generation import DiagramKind, DiagramOptions

FLOWCHART = "flowchart TD\n    A[Start] --> B[End]"
CLASS_DIAGRAM = "classDiagram\n    Queue <|-- PriorityQueue"
SEQUENCE = "sequenceDiagram\n    A->>B: hello"

BOTH = DiagramOptions(algorithm=True, structure=True)


def _fenced(*blocks: str) -> str:
    return "\n\nSome prose.\n\n".join(f"```mermaid\n{block}\n```" for block in blocks)


class TestFindMermaidBlocks:
    """Test suite for fenced block discovery."""

    def test_blocks_in_order(self) -> None:
        """Test bodies are trimmed and returned in order."""
        assert find_mermaid_blocks(_fenced(FLOWCHART, CLASS_DIAGRAM)) == [FLOWCHART, CLASS_DIAGRAM]

    def test_no_blocks(self) -> None:
        """Test plain text yields nothing."""
        assert find_mermaid_blocks("no diagrams here") == []


class TestExtractDiagram:
    """Test suite for algorithm and structure extraction."""

    def test_algorithm_keyword_match(self) -> None:
        """Test the first flowchart block is the algorithm."""
        raw = _fenced(CLASS_DIAGRAM, FLOWCHART)
        assert extract_diagram(raw, DiagramKind.ALGORITHM, BOTH) == FLOWCHART

    def test_algorithm_accepts_graph(self) -> None:
        """Test legacy graph syntax counts as a flowchart."""
        block = "graph LR\n    A --> B"
        assert extract_diagram(_fenced(block), DiagramKind.ALGORITHM, BOTH) == block

    def test_structure_keyword_match(self) -> None:
        """Test classDiagram is matched case-insensitively."""
        raw = _fenced(FLOWCHART, CLASS_DIAGRAM)
        assert extract_diagram(raw, DiagramKind.STRUCTURE, BOTH, exclude=frozenset({FLOWCHART})) == CLASS_DIAGRAM

    def test_structure_skips_claimed_flowchart(self) -> None:
        """Test structure never reuses the algorithm's block."""
        component = "flowchart LR\n    UI --> Service"
        raw = _fenced(FLOWCHART, component)
        result = extract_diagram(raw, DiagramKind.STRUCTURE, BOTH, exclude=frozenset({FLOWCHART}))
        assert result == component

    def test_structure_positional_fallback(self) -> None:
        """Test unrecognized second block is taken by position."""
        raw = _fenced(SEQUENCE, "stateDiagram-v2\n    [*] --> Idle")
        result = extract_diagram(raw, DiagramKind.STRUCTURE, BOTH)
        assert result == "stateDiagram-v2\n    [*] --> Idle"

    def test_structure_only_positional_index_zero(self) -> None:
        """Test lone structure request falls back to the first block."""
        raw = _fenced(SEQUENCE)
        assert extract_diagram(raw, DiagramKind.STRUCTURE, DiagramOptions(structure=True)) == SEQUENCE

    def test_algorithm_has_no_positional_fallback(self) -> None:
        """Test unmatched algorithm yields empty markup."""
        assert extract_diagram(_fenced(SEQUENCE), DiagramKind.ALGORITHM, BOTH) == ""

    def test_empty_output(self) -> None:
        """Test empty generator output."""
        assert extract_diagram("", DiagramKind.STRUCTURE, BOTH) == ""


class TestExtractUiMockup:
    """Test suite for UI mockup extraction and fallback."""

    def test_flowchart_block(self) -> None:
        """Test fenced flowchart is returned verbatim."""
        raw = "```mermaid\nflowchart LR\n    btn1[Save] --> list1[Items]\n```"
        code, is_fallback = extract_ui_mockup(raw, ["web"])
        assert code == "flowchart LR\n    btn1[Save] --> list1[Items]"
        assert is_fallback is False

    def test_unlabeled_fence_gets_header(self) -> None:
        """Test block without a flowchart header is prefixed with one."""
        raw = "```\nbtn1[Save] --> list1[Items]\n```"
        code, is_fallback = extract_ui_mockup(raw, ["web"])
        assert code == "flowchart TD\n    btn1[Save] --> list1[Items]"
        assert is_fallback is False

    def test_short_output_uses_fallback(self) -> None:
        """Test too-short markup is replaced by the three-node mockup."""
        code, is_fallback = extract_ui_mockup("```\nA\n```", ["algorithm", "mobile app"])
        assert is_fallback is True
        assert 'title["Mobile app UI Mockup"]' in code

    def test_no_block_uses_fallback(self) -> None:
        """Test missing fences."""
        code, is_fallback = extract_ui_mockup("I cannot draw that.", ["algorithm"])
        assert is_fallback is True
        assert code == create_ui_fallback_diagram(["algorithm"])

    def test_fallback_defaults_to_application(self) -> None:
        """Test label when no category hints at a UI."""
        code = create_ui_fallback_diagram(["algorithm"])
        assert 'title["Application UI Mockup"]' in code
        assert "title --> mainScreen" in code
        assert "mainScreen --> features" in code

    @pytest.mark.parametrize(
        "code, is_fallback",
        [
            ("flowchart TD\nA -->B", True),
            ("flowchart TD\nA --> B", False),
        ],
    )
    def test_minimum_length_boundary(self, code, is_fallback) -> None:
        """Test markup one character short of the minimum falls back."""
        # Arrange
        raw = f"```mermaid\n{code}\n```"

        # Act
        extracted, used_fallback = extract_ui_mockup(raw, ["web"])

        # Assert
        assert len(code) in (MIN_UI_MOCKUP_LENGTH - 1, MIN_UI_MOCKUP_LENGTH)
        assert used_fallback is is_fallback
        if not is_fallback:
            assert extracted == code


class TestSafeWrapper:
    """Test suite for the structural sanity wrapper."""

    def test_structural_markup_unchanged(self) -> None:
        """Test markup with arrows passes through."""
        assert create_safe_mermaid_wrapper(FLOWCHART, "Algorithm") == FLOWCHART

    def test_pipe_counts_as_structural(self) -> None:
        """Test any structural token is enough."""
        assert create_safe_mermaid_wrapper("pie\n  A | B", "GUI") == "pie\n  A | B"

    @pytest.mark.parametrize(
        "code",
        [
            "flowchart TD\n    A --> B",
            "graph LR\n    A --- B",
            "flowchart TD\n    A[Start] | B",
            "flowchart TD\n    start(Begin)",
        ],
    )
    def test_each_structural_token_alone_is_enough(self, code) -> None:
        """Test markup carrying any single structural token passes through."""
        assert create_safe_mermaid_wrapper(code, "Algorithm") == code

    def test_implausible_markup_replaced(self) -> None:
        """Test markup without structure becomes the error diagram."""
        wrapped = create_safe_mermaid_wrapper("just some words", "App Structure")
        assert 'error["Could not generate App Structure visualization."]' in wrapped
        assert 'note["Please try again with different settings."]' in wrapped
        assert "error --> note" in wrapped


class TestBuildDiagramArtifacts:
    """Test suite for assembling artifacts from raw output."""

    def test_all_kinds_in_document_order(self) -> None:
        """Test algorithm, structure, mockup ordering."""
        # Act
        artifacts = build_diagram_artifacts(
            DiagramOptions(algorithm=True, structure=True, ui_mockup=True),
            ["web"],
            diagram_output=_fenced(FLOWCHART, CLASS_DIAGRAM),
            ui_output="```mermaid\nflowchart TD\n    a[Header] --> b[Body]\n```",
        )

        # Assert
        assert [a.kind for a in artifacts] == [
            DiagramKind.ALGORITHM,
            DiagramKind.STRUCTURE,
            DiagramKind.UI_MOCKUP,
        ]
        assert artifacts[0].markup_text == FLOWCHART
        assert artifacts[1].markup_text == CLASS_DIAGRAM
        assert not any(a.is_fallback for a in artifacts)

    def test_missing_diagram_omitted(self) -> None:
        """Test an empty extraction produces no artifact."""
        artifacts = build_diagram_artifacts(
            DiagramOptions(algorithm=True),
            ["algorithm"],
            diagram_output="Sorry, no diagram.",
        )
        assert artifacts == []

    def test_wrapped_markup_flagged_as_fallback(self) -> None:
        """Test safety-wrapped markup is marked."""
        artifacts = build_diagram_artifacts(
            DiagramOptions(structure=True),
            ["web"],
            diagram_output=_fenced("classDiagram Queue"),
        )
        assert len(artifacts) == 1
        assert artifacts[0].is_fallback is True
        assert "Could not generate App Structure visualization." in artifacts[0].markup_text

    def test_ui_fallback_flagged(self) -> None:
        """Test synthesized mockup is marked."""
        artifacts = build_diagram_artifacts(DiagramOptions(ui_mockup=True), ["desktop tool"], ui_output="")
        assert len(artifacts) == 1
        assert artifacts[0].kind is DiagramKind.UI_MOCKUP
        assert artifacts[0].is_fallback is True
