"""Structured logging for SmartEncode.

Text or JSON output with file rotation, per-file context for hosts that
evaluate files concurrently, and decision fields on pipeline records.
"""

from smartencode.logging.config import (
    ENGINE_LOGGER_NAME,
    build_formatter,
    configure_logging,
)
from smartencode.logging.context import (
    FileContextFilter,
    file_context,
    get_file_context,
)
from smartencode.logging.handlers import (
    DECISION_FIELDS,
    JSONFormatter,
    TextFormatter,
    decision_fields,
)

__all__ = [
    "DECISION_FIELDS",
    "ENGINE_LOGGER_NAME",
    "FileContextFilter",
    "JSONFormatter",
    "TextFormatter",
    "build_formatter",
    "configure_logging",
    "decision_fields",
    "file_context",
    "get_file_context",
]
