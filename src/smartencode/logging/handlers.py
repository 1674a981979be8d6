"""Log formatters for SmartEncode.

The pipeline announces every decision with one record whose ``extra``
carries some of DECISION_FIELDS. The JSON formatter nests those fields
under "decision"; the text formatter appends them as ``key=value`` pairs.
Records also carry ``media_file`` when emitted inside a file context.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import PurePath
from typing import Any

# Attributes a decision record may carry, in output order
DECISION_FIELDS: tuple[str, ...] = (
    "process_file",
    "reason_type",
    "tier",
    "encoder",
    "quality",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
TEXT_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"


def decision_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Return the decision fields present on a record."""
    return {
        name: getattr(record, name)
        for name in DECISION_FIELDS
        if getattr(record, name, None) is not None
    }


class TextFormatter(logging.Formatter):
    """Single-line text output.

    Inside a file context the message is prefixed with the file name, e.g.
    ``[clip.mkv] Skipping: ... (process_file=False reason_type=too_short)``.
    """

    def __init__(self) -> None:
        super().__init__(TEXT_FORMAT, datefmt=TEXT_DATE_FORMAT)

    def formatMessage(self, record: logging.LogRecord) -> str:
        media_file = getattr(record, "media_file", None)
        if media_file:
            record.message = f"[{PurePath(media_file).name}] {record.message}"
        line = super().formatMessage(record)
        fields = decision_fields(record)
        if fields:
            pairs = " ".join(f"{name}={value}" for name, value in fields.items())
            line = f"{line} ({pairs})"
        return line


class JSONFormatter(logging.Formatter):
    """Format log records as one JSON object per line.

    Keys: timestamp (ISO-8601 UTC), level, logger, message, plus ``file``
    inside a file context, ``decision`` on decision records and
    ``exception`` when exception info is attached.
    """

    def format(self, record: logging.LogRecord) -> str:
        record_time = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": record_time.isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        media_file = getattr(record, "media_file", None)
        if media_file:
            entry["file"] = media_file

        fields = decision_fields(record)
        if fields:
            entry["decision"] = fields

        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)
