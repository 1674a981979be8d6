"""Per-file context for structured logging.

The engine is stateless, but hosts may evaluate many files concurrently.
``evaluate`` wraps each run in ``file_context`` so every record emitted
during one evaluation carries the file it belongs to.
"""

from __future__ import annotations

import contextvars
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Generator

_media_file: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "media_file", default=None
)


def get_file_context() -> str | None:
    """Get the file currently being evaluated, or None."""
    return _media_file.get()


@contextmanager
def file_context(file_path: Path | str | None) -> Generator[None, None, None]:
    """Tag log records emitted inside the block with ``file_path``.

    Restores the previous value on exit, so contexts nest.
    """
    token = _media_file.set(str(file_path) if file_path else None)
    try:
        yield
    finally:
        _media_file.reset(token)


class FileContextFilter(logging.Filter):
    """Copy the current file context onto records as ``media_file``."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.media_file = get_file_context()
        return True
