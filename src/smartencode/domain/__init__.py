"""Domain records and enums for SmartEncode.

These types are the data contracts between the host and the engine:

- Input records: StreamInfo, MediaProbe, FileInfo
- Enums: StreamKind, ContentTier, TargetCodec, EncoderType, SkipReasonType

Usage:
    from smartencode.domain import MediaProbe, StreamInfo, FileInfo
    from smartencode.domain import ContentTier, TargetCodec
"""

from .enums import (
    AudioSelectionMode,
    ContentTier,
    EncoderType,
    PerfectAudioCheck,
    SkipReasonType,
    StreamKind,
    TargetCodec,
)
from .models import (
    UNDETERMINED_LANGUAGE,
    FileInfo,
    MediaProbe,
    StreamInfo,
)

__all__ = [
    # Models
    "StreamInfo",
    "MediaProbe",
    "FileInfo",
    "UNDETERMINED_LANGUAGE",
    # Enums
    "StreamKind",
    "ContentTier",
    "TargetCodec",
    "EncoderType",
    "PerfectAudioCheck",
    "AudioSelectionMode",
    "SkipReasonType",
]
