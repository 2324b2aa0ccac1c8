"""
Task document renderer.

Converts the markdown subset produced by the generator into HTML and wraps
it, together with any Mermaid diagrams, in a print-styled page.

Supported markdown: ``###`` and ``####`` headings, ``-``/``•`` bullets and
``N.`` items. Consecutive items become one ``<ul>``; numbered items keep
their numeral as text instead of becoming an ``<ol>``.

Dependencies: html, re, string, task_generator.models
System role: Document renderer for the generation pipeline
"""

import html
import re
from datetime import date
from string import Template

from task_generator.models.generation import DiagramArtifact, DiagramKind

DEFAULT_MERMAID_URL = "https://cdn.jsdelivr.net/npm/mermaid@10.6.1/dist/mermaid.min.js"

# Applied in order, one line at a time
LINE_RULES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(r"^\s*### (.*)$"), r"<h2>\1</h2>"),
    (re.compile(r"^\s*#### (.*)$"), r"<h3>\1</h3>"),
    (re.compile(r"^\s*-\s+(.*)$"), r"<li>\1</li>"),
    (re.compile(r"^\s*•\s+(.*)$"), r"<li>\1</li>"),
    (re.compile(r"^\s*(\d+)\.\s+(.*)$"), r"<li>\1. \2</li>"),
]

HEADING_LINE = re.compile(r"^<h[23]>.*</h[23]>$")

DIAGRAM_SECTION = Template("""
    <div class="diagram-section">
      <h2>$title</h2>
      <div class="mermaid">
$markup
      </div>
    </div>
""")

DOCUMENT = Template("""<!DOCTYPE html>
<html>
<head>
  <meta charset="UTF-8">
  <title>$task_type Programming Task</title>
  <script src="$mermaid_url"></script>
  <style>
    body {
      font-family: Arial, 'Helvetica Neue', Helvetica, sans-serif;
      line-height: 1.6;
      color: #333;
      margin: 0;
      padding: 20px;
      font-size: 12pt;
    }
    .header {
      text-align: center;
      margin-bottom: 20px;
      border-bottom: 1px solid #ddd;
      padding-bottom: 20px;
    }
    h1 { font-size: 18pt; margin-bottom: 10px; }
    h2 { font-size: 16pt; margin-top: 20px; }
    h3 { font-size: 14pt; }
    .info { font-size: 12pt; margin-bottom: 5px; }
    .date { font-size: 10pt; font-style: italic; }
    ul, ol { margin-left: 20px; padding-left: 15px; }
    li { margin-bottom: 5px; }
    p { margin: 10px 0; }
    .footer {
      text-align: center;
      font-size: 10pt;
      margin-top: 30px;
      border-top: 1px solid #ddd;
      padding-top: 10px;
    }
    .diagram-section {
      margin-top: 30px;
      padding: 20px;
      background-color: #f8f8f8;
      border-radius: 5px;
      page-break-inside: avoid;
    }
    .diagram-section h2 {
      margin-top: 0;
      border-bottom: 1px solid #ddd;
      padding-bottom: 10px;
    }
    .mermaid { display: flex; justify-content: center; margin: 20px 0; }
    .error-message {
      color: #d9534f;
      text-align: center;
      padding: 20px;
      border: 1px solid #d9534f;
      border-radius: 5px;
      margin: 20px;
    }
    @page { margin: 50px; size: A4; }
  </style>
</head>
<body>
  <div class="header">
    <h1>$task_type Programming Task</h1>
    <div class="info">Languages: $languages</div>
    <div class="info">Instructions in: $output_language</div>
    <div class="date">Generated: $generated_on</div>
  </div>

  <div class="content">
    $content
  </div>
$diagram_sections
  <div class="footer">
    Page <span class="pageNumber"></span>
  </div>

  <script>
    mermaid.initialize({
      startOnLoad: true,
      theme: 'default',
      flowchart: { useMaxWidth: true, htmlLabels: true, curve: 'basis' },
      securityLevel: 'loose',
      fontFamily: 'Arial',
      logLevel: 'fatal'
    });

    document.addEventListener('DOMContentLoaded', function() {
      window.handleMermaidError = function() {
        document.querySelectorAll('.mermaid').forEach(function(diagram) {
          if (!diagram.querySelector('svg')) {
            diagram.innerHTML = '<div class="error-message">Error rendering diagram. The visualization could not be generated correctly.</div>';
          }
        });
      };
      setTimeout(window.handleMermaidError, $error_sweep_ms);
    });

    document.querySelectorAll('.pageNumber').forEach(function(el) {
      el.textContent = '1';
    });
  </script>
</body>
</html>
""")

ERROR_SWEEP_MS = 3000
DIAGRAM_ORDER = {kind: index for index, kind in enumerate(DiagramKind)}


def _convert_line(line: str) -> str:
    for pattern, replacement in LINE_RULES:
        if pattern.match(line):
            return pattern.sub(replacement, line)
    return line


def convert_markdown_subset(text: str) -> str:
    """
    Convert generator markdown to HTML body content.

    Task text is HTML-escaped first, so code such as ``List<String>`` shows
    up literally and cannot open tags of its own.

    Args:
        text: Generated task text

    Returns:
        str: HTML fragment
    """
    output = []
    in_list = False

    for raw_line in html.escape(text or "", quote=False).splitlines():
        line = _convert_line(raw_line)

        if line.startswith("<li>"):
            if not in_list:
                output.append("<ul>")
                in_list = True
            output.append(line)
            continue

        if in_list:
            output.append("</ul>")
            in_list = False

        if not line.strip():
            continue
        if HEADING_LINE.match(line):
            output.append(line)
        else:
            output.append(f"<p>{line}</p>")

    if in_list:
        output.append("</ul>")

    return "".join(output)


def render_diagram_sections(diagrams: list[DiagramArtifact]) -> str:
    """One titled section per diagram, in the order given."""
    return "\n".join(
        DIAGRAM_SECTION.substitute(title=diagram.kind.section_title, markup=diagram.markup_text)
        for diagram in diagrams
    )


def render_task_html(
    task_text: str,
    languages_display: str,
    task_type_display: str,
    output_language: str,
    diagrams: list[DiagramArtifact] | None = None,
    generated_on: date | None = None,
    mermaid_url: str = DEFAULT_MERMAID_URL,
) -> str:
    """
    Render the complete task document.

    Args:
        task_text: Generated task markdown
        languages_display: Languages line, e.g. "PYTHON, GO"
        task_type_display: Categories line, e.g. "Algorithm, Web"
        output_language: Natural language of the instructions
        diagrams: Diagram artifacts, already in document order
        generated_on: Date printed in the header (today if None)
        mermaid_url: Mermaid script URL

    Returns:
        str: HTML document
    """
    generated_on = generated_on or date.today()
    diagrams = sorted(diagrams or [], key=lambda d: DIAGRAM_ORDER[d.kind])

    return DOCUMENT.substitute(
        task_type=html.escape(task_type_display),
        mermaid_url=html.escape(mermaid_url),
        languages=html.escape(languages_display),
        output_language=html.escape(output_language),
        generated_on=f"{generated_on.month}/{generated_on.day}/{generated_on.year}",
        content=convert_markdown_subset(task_text),
        diagram_sections=render_diagram_sections(diagrams),
        error_sweep_ms=ERROR_SWEEP_MS,
    )
