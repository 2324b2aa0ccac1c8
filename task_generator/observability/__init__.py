"""
Observability module.

Provides structured logging, correlation ID tracking and request logging.
"""

from task_generator.observability.logger import configure_logging

__all__ = ["configure_logging"]
