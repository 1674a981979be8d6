"""Adapters from probe tool output to SmartEncode domain records."""

from smartencode.introspector.parsers import (
    parse_duration,
    parse_ffprobe,
    parse_stream,
)

__all__ = [
    "parse_duration",
    "parse_ffprobe",
    "parse_stream",
]
