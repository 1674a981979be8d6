"""Pure parsing functions for ffprobe JSON output.

These functions transform ``ffprobe -show_format -show_streams -of json``
output into SmartEncode domain objects. All functions are pure (no I/O, no
side effects) for easy testing.
"""

from __future__ import annotations

import logging
import math
from pathlib import PurePath
from typing import Any

from smartencode.core.codecs import normalize_container_format
from smartencode.domain import (
    UNDETERMINED_LANGUAGE,
    FileInfo,
    MediaProbe,
    StreamInfo,
    StreamKind,
)
from smartencode.policy.exceptions import MissingProbeDataError

logger = logging.getLogger(__name__)

_KIND_MAP: dict[str, StreamKind] = {
    "video": StreamKind.VIDEO,
    "audio": StreamKind.AUDIO,
    "subtitle": StreamKind.SUBTITLE,
}


def validate_positive_int(value: Any, field_name: str) -> int | None:
    """Coerce a probe value to a non-negative int, or None if invalid."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = int(value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Expected int for %s, got %r", field_name, value)
        return None
    if number < 0:
        logger.warning("Invalid negative %s: %d", field_name, number)
        return None
    return number


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_text(value: Any) -> str | None:
    return value if isinstance(value, str) and value else None


def parse_duration(value: Any) -> float | None:
    """Parse duration string from ffprobe into seconds.

    Args:
        value: Duration string from ffprobe (e.g., "3600.000") or None.

    Returns:
        Duration in seconds as float, or None if parsing fails.
    """
    if value is None:
        return None
    try:
        duration = float(value)
    except (ValueError, TypeError):
        return None
    return duration if math.isfinite(duration) else None


def parse_stream(stream: dict[str, Any]) -> StreamInfo:
    """Parse a single ffprobe stream dict into a StreamInfo.

    Args:
        stream: Stream dictionary from ffprobe JSON.

    Returns:
        StreamInfo domain object.
    """
    codec_type = str(stream.get("codec_type", "")).casefold()
    kind = _KIND_MAP.get(codec_type, StreamKind.OTHER)
    tags = _as_dict(stream.get("tags"))
    language = (_as_text(tags.get("language")) or UNDETERMINED_LANGUAGE).casefold()

    fields: dict[str, Any] = {
        "index": validate_positive_int(stream.get("index"), "index") or 0,
        "kind": kind,
        "codec": _as_text(stream.get("codec_name")),
        "language": language,
    }

    if kind is StreamKind.VIDEO:
        fields["width"] = validate_positive_int(stream.get("width"), "width")
        fields["height"] = validate_positive_int(stream.get("height"), "height")
        fields["color_transfer"] = _as_text(stream.get("color_transfer"))
    elif kind is StreamKind.AUDIO:
        fields["channels"] = validate_positive_int(stream.get("channels"), "channels")

    return StreamInfo(**fields)


def parse_ffprobe(
    data: dict[str, Any] | None,
    file_path: str | None = None,
    release_year: int | None = None,
) -> tuple[MediaProbe, FileInfo]:
    """Parse ffprobe JSON into a MediaProbe and FileInfo pair.

    Args:
        data: Parsed ffprobe JSON (with "format" and "streams").
        file_path: Path of the media file; defaults to format.filename.
        release_year: Externally supplied release year, if known.

    Returns:
        Tuple of (MediaProbe, FileInfo).

    Raises:
        MissingProbeDataError: If the JSON has no "streams" list.
    """
    if not isinstance(data, dict) or not isinstance(data.get("streams"), list):
        raise MissingProbeDataError()

    fmt = _as_dict(data.get("format"))
    path = file_path or _as_text(fmt.get("filename")) or ""

    container = normalize_container_format(_as_text(fmt.get("format_name")))
    if not container and path:
        # Fall back to the file extension
        container = normalize_container_format(PurePath(path).suffix)

    probe = MediaProbe(
        container=container or None,
        streams=tuple(
            parse_stream(s) for s in data["streams"] if isinstance(s, dict)
        ),
    )
    file_info = FileInfo(
        file_name=PurePath(path).name,
        file_path=path,
        size_bytes=validate_positive_int(fmt.get("size"), "size"),
        duration_seconds=parse_duration(fmt.get("duration")),
        release_year=release_year,
    )
    return probe, file_info
