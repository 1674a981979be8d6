"""Domain enums for SmartEncode.

Enum values double as the option strings accepted from the host, so they
must stay stable.
"""

from enum import Enum


class StreamKind(Enum):
    """Kind of a probed stream."""

    VIDEO = "video"
    AUDIO = "audio"
    SUBTITLE = "subtitle"
    OTHER = "other"  # data, attachment, unknown


class ContentTier(Enum):
    """Content category that selects the encoder parameter bundle.

    Detection priority (first match wins):
    1. ELITE: high resolution or HDR
    2. ANIMATION: animation keywords or bracketed release tags
    3. CLASSIC: pre-2000 release or film/grain keywords
    4. GENERAL: default
    """

    GENERAL = "general"
    ANIMATION = "animation"
    CLASSIC = "classic"
    ELITE = "4k_elite"


class TargetCodec(Enum):
    """Target video codec family."""

    H264 = "h264"
    H265 = "h265"
    AV1 = "av1"

    @property
    def probe_name(self) -> str:
        """Codec name as reported by ffprobe for this family."""
        return {"h264": "h264", "h265": "hevc", "av1": "av1"}[self.value]


class EncoderType(Enum):
    """Encoder backend."""

    CPU = "cpu"
    GPU_AMD = "gpu_amd"  # AMF
    GPU_NVIDIA = "gpu_nvidia"  # NVENC
    GPU_INTEL = "gpu_intel"  # Quick Sync

    @property
    def is_hardware(self) -> bool:
        return self is not EncoderType.CPU


class PerfectAudioCheck(Enum):
    """Strictness of the audio conjunct of the already-perfect check."""

    STRICT = "strict"  # ac3 with exactly 6ch and aac with exactly 2ch
    LENIENT = "lenient"  # any ac3 track and any aac track


class AudioSelectionMode(Enum):
    """How source audio tracks are selected for the output."""

    LANGUAGES = "languages"  # accepted-language filter, first track as fallback
    FIRST = "first"  # only the first source audio track


class SkipReasonType(Enum):
    """Why a file was not processed."""

    MISSING_PROBE_DATA = "missing_probe_data"
    NO_VIDEO_STREAM = "no_video_stream"
    INVALID_OPTIONS = "invalid_options"
    FILE_TOO_SMALL = "file_too_small"
    TOO_SHORT = "too_short"
    ALREADY_PERFECT = "already_perfect"
