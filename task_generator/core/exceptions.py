"""
Exception hierarchy for the task generator.

Provides layered exception structure for pipeline errors.
All exceptions include context for observability and debugging, and carry
the HTTP status the API layer reports for them.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TaskGeneratorException(Exception):
    """Base exception for all task generator errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class InvalidRequest(TaskGeneratorException):
    """Raised when request fields are missing or malformed."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class InvalidDocument(TaskGeneratorException):
    """Raised when an uploaded PDF cannot be parsed or holds no text."""

    status_code = 400

    def __init__(
        self,
        message: str,
        file_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document error.

        Args:
            message: Error message
            file_name: Name of the rejected document
            details: Additional context
        """
        details = details or {}
        if file_name:
            details["file_name"] = file_name
        super().__init__(message, details)


class GenerationFailed(TaskGeneratorException):
    """Raised when the text-generation backend call fails."""

    def __init__(
        self,
        message: str,
        stage: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize generation error.

        Args:
            message: Error message
            stage: Pipeline stage that issued the call (task, diagrams, ui_mockup)
            details: Additional context
        """
        details = details or {}
        if stage:
            details["stage"] = stage
        super().__init__(message, details)


class RenderFailed(TaskGeneratorException):
    """Raised when headless browser navigation or PDF export fails."""

    def __init__(
        self,
        message: str,
        step: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize render error.

        Args:
            message: Error message
            step: Browser step that failed (launch, navigate, export)
            details: Additional context
        """
        details = details or {}
        if step:
            details["step"] = step
        super().__init__(message, details)


class DeliveryFailed(TaskGeneratorException):
    """Raised when the produced PDF cannot be streamed to the client."""

    pass
