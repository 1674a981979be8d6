"""Core utilities shared across SmartEncode modules."""

from smartencode.core.codecs import (
    audio_codec_matches,
    normalize_container_format,
    video_codec_matches,
)

__all__ = [
    "audio_codec_matches",
    "normalize_container_format",
    "video_codec_matches",
]
