"""Logging setup for the SmartEncode engine.

``configure_logging`` attaches handlers to the ``smartencode`` logger only.
Engine records do not propagate past it, so a host that embeds the engine
keeps its own root logger configuration.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from smartencode.logging.context import FileContextFilter
from smartencode.logging.handlers import JSONFormatter, TextFormatter

if TYPE_CHECKING:
    from smartencode.config.models import LoggingConfig

# Parent of every module logger in the package
ENGINE_LOGGER_NAME = "smartencode"

_LEVEL_MAP: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


def build_formatter(log_format: str) -> logging.Formatter:
    """Return the formatter for a LoggingConfig format name."""
    if log_format.casefold() == "json":
        return JSONFormatter()
    return TextFormatter()


def _open_log_file(config: LoggingConfig) -> logging.Handler | None:
    file_path = Path(config.file).expanduser()
    try:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        return RotatingFileHandler(
            file_path,
            maxBytes=config.max_bytes,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
    except OSError as e:
        sys.stderr.write(f"Warning: Could not open log file {file_path}: {e}\n")
        return None


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """Install handlers for ``config`` on the engine logger.

    Handlers from a previous call are closed and replaced. A log file that
    cannot be opened falls back to stderr.

    Args:
        config: Validated logging configuration.

    Returns:
        The configured ``smartencode`` logger.
    """
    level = _LEVEL_MAP[config.level.casefold()]
    engine_logger = logging.getLogger(ENGINE_LOGGER_NAME)

    for handler in engine_logger.handlers[:]:
        engine_logger.removeHandler(handler)
        handler.close()
    engine_logger.setLevel(level)
    engine_logger.propagate = False

    handlers: list[logging.Handler] = []
    if config.file:
        file_handler = _open_log_file(config)
        if file_handler is not None:
            handlers.append(file_handler)
    if config.include_stderr or not handlers:
        handlers.append(logging.StreamHandler(sys.stderr))

    formatter = build_formatter(config.format)
    context_filter = FileContextFilter()
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        handler.addFilter(context_filter)
        engine_logger.addHandler(handler)

    return engine_logger
