"""
Task, diagram and UI mockup prompts.

Defines the prompt templates sent to the text-generation backend and the
phrase helpers that turn option lists into natural language.

Dependencies: langchain_core.prompts, task_generator.models
System role: Prompt builder for the generation pipeline
"""

from langchain_core.messages import BaseMessage
from langchain_core.prompts import ChatPromptTemplate

from task_generator.models.generation import DiagramOptions, GenerationRequest

TASK_SYSTEM_PROMPT = """You are a programming task generator. Generate a programming task following the same structure as the provided pattern but with a different problem to solve.
Format the output with Markdown headings (### for main sections, #### for subsections) and use proper Markdown formatting for lists and important points.
The output should be in {output_language} language."""

TASK_PROMPT = ChatPromptTemplate.from_messages([
    ("system", TASK_SYSTEM_PROMPT),
    (
        "human",
        """Pattern: {pattern}

Create a new programming task following this pattern but for {task_type_phrase}.
{language_instruction}
The task should incorporate elements from all the specified types.
The task description should be written in {output_language}.""",
    ),
])

DIAGRAM_SYSTEM_PROMPT = (
    "You are an expert in creating Mermaid diagrams for software documentation. "
    "Generate clear, well-organized diagrams that visualize software components and algorithms."
)

DIAGRAM_PROMPT = ChatPromptTemplate.from_messages([
    ("system", DIAGRAM_SYSTEM_PROMPT),
    (
        "human",
        """Based on the following programming task description, create {diagram_count} Mermaid {diagram_noun}:
{diagram_list}

Only provide the Mermaid code blocks, each fenced with ```mermaid. Use the latest Mermaid syntax and make the diagrams visually clear.

Task description: {task_text}""",
    ),
])

ALGORITHM_DIAGRAM_ITEM = "A flowchart showing the algorithm or main process flow described in the task."
STRUCTURE_DIAGRAM_ITEM = (
    "A class diagram or component diagram showing the structure of the application described in the task."
)

UI_MOCKUP_SYSTEM_PROMPT = """You are an expert in creating UI mockups using Mermaid diagrams.
Generate simple, valid Mermaid code that represents the user interface described in the task.
Follow these strict guidelines:
1. Use flowchart LR or flowchart TD syntax for UI mockups
2. Keep node IDs short and descriptive (e.g., btn1, input1)
3. Avoid special characters in node text
4. Use simple shapes like rectangles and rounded rectangles
5. Use minimal styling to avoid syntax errors
6. Ensure all nodes are properly connected
7. Test your syntax mentally before providing it"""

UI_MOCKUP_PROMPT = ChatPromptTemplate.from_messages([
    ("system", UI_MOCKUP_SYSTEM_PROMPT),
    (
        "human",
        """Create a simple Mermaid diagram showing a mockup of the UI for the following task.
Focus on the main screens or components only. Use the flowchart syntax (NOT stateDiagram).

Task description: {task_text}""",
    ),
])


def _join_with_and(items: list[str]) -> str:
    if len(items) == 1:
        return items[0]
    if len(items) == 2:
        return f"{items[0]} and {items[1]}"
    return f"{', '.join(items[:-1])}, and {items[-1]}"


def format_task_types(task_types: list[str]) -> str:
    """
    Describe the requested task categories as a program.

    Examples:
        ["x"] -> "a x program"
        ["x", "y"] -> "a program combining x and y elements"
        ["x", "y", "z"] -> "a program combining x, y, and z elements"
    """
    if len(task_types) == 1:
        return f"a {task_types[0]} program"
    return f"a program combining {_join_with_and(task_types)} elements"


def format_languages_for_prompt(languages: list[str]) -> str:
    """Join languages as "Go", "Go and Rust" or "Go, Rust, and C"."""
    return _join_with_and(languages)


def build_language_instruction(languages: list[str]) -> str:
    """Ask for a direct implementation or a multi-language solution."""
    if len(languages) > 1:
        return (
            f"Create a multi-language solution using {format_languages_for_prompt(languages)}. "
            "Include code examples or explanations for each language where appropriate. "
            "Focus on how the languages would interact or how the solution would differ between languages."
        )
    return f"Implement the solution in {languages[0]}."


def build_task_messages(request: GenerationRequest) -> list[BaseMessage]:
    """
    Build the task-description prompt for a request.

    Args:
        request: Normalized generation request

    Returns:
        list[BaseMessage]: System and human messages
    """
    return TASK_PROMPT.format_messages(
        pattern=request.source_pattern,
        task_type_phrase=format_task_types(request.task_categories),
        language_instruction=build_language_instruction(request.target_languages),
        output_language=request.output_language,
    )


def build_diagram_messages(task_text: str, options: DiagramOptions) -> list[BaseMessage] | None:
    """
    Build the algorithm/structure diagram prompt.

    Items are numbered by position among the requested diagrams, so a lone
    structure diagram is item 1.

    Args:
        task_text: Generated task description
        options: Requested diagrams

    Returns:
        list[BaseMessage] | None: Messages, or None when neither diagram is wanted
    """
    if not options.wants_diagram_set:
        return None

    items = []
    if options.algorithm:
        items.append(ALGORITHM_DIAGRAM_ITEM)
    if options.structure:
        items.append(STRUCTURE_DIAGRAM_ITEM)

    diagram_list = "\n".join(f"{index}. {item}" for index, item in enumerate(items, start=1))
    return DIAGRAM_PROMPT.format_messages(
        diagram_count="two" if len(items) == 2 else "one",
        diagram_noun="diagrams" if len(items) == 2 else "diagram",
        diagram_list=diagram_list,
        task_text=task_text,
    )


def build_ui_mockup_messages(task_text: str) -> list[BaseMessage]:
    """Build the UI mockup prompt for a generated task."""
    return UI_MOCKUP_PROMPT.format_messages(task_text=task_text)
