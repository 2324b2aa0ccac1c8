"""
Programming task generator service.

Turns a pattern (text or PDF) into a generated programming task PDF,
optionally illustrated with Mermaid diagrams.
"""

__version__ = "0.1.0"
