"""Video encoder selection and encoder-specific parameter mapping.

Functions in this module:
- select_encoder: Pick the FFmpeg encoder for a codec family and backend
- resolve_tune: Filter a tune against what the encoder accepts
- map_preset: Translate named presets for encoders with ordinal presets
- size_adaptive_preset: Derive a speed preset from the file size
- auto_thread_count: Derive a thread count from the file size
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from smartencode.domain import EncoderType, TargetCodec

logger = logging.getLogger(__name__)


# Software encoder mappings by codec
SOFTWARE_ENCODERS: dict[TargetCodec, str] = {
    TargetCodec.H264: "libx264",
    TargetCodec.H265: "libx265",
    TargetCodec.AV1: "libsvtav1",
}

# Hardware encoder mappings by backend and codec
HARDWARE_ENCODERS: dict[EncoderType, dict[TargetCodec, str]] = {
    EncoderType.GPU_AMD: {
        TargetCodec.H264: "h264_amf",
        TargetCodec.H265: "hevc_amf",
        TargetCodec.AV1: "av1_amf",  # RDNA3 and newer
    },
    EncoderType.GPU_NVIDIA: {
        TargetCodec.H264: "h264_nvenc",
        TargetCodec.H265: "hevc_nvenc",
        TargetCodec.AV1: "av1_nvenc",  # RTX 40 series only
    },
    EncoderType.GPU_INTEL: {
        TargetCodec.H264: "h264_qsv",
        TargetCodec.H265: "hevc_qsv",
        TargetCodec.AV1: "av1_qsv",  # Intel Arc / newer iGPU
    },
}

# Tunes accepted per encoder; encoders absent here take no tune
ENCODER_TUNES: dict[str, frozenset[str]] = {
    "libx264": frozenset(
        {"film", "animation", "grain", "stillimage", "fastdecode", "zerolatency"}
    ),
    "libx265": frozenset(
        {"animation", "grain", "psnr", "ssim", "fastdecode", "zerolatency"}
    ),
}

# SVT-AV1 uses numeric presets (lower is slower)
SVT_AV1_PRESET_MAP: dict[str, int] = {
    "slower": 5,
    "slow": 6,
    "medium": 8,
    "fast": 10,
    "faster": 12,
}
DEFAULT_SVT_AV1_PRESET = 8

ORDINAL_PRESET_ENCODERS = frozenset({"libsvtav1"})


@dataclass(frozen=True)
class EncoderSelection:
    """Result of encoder selection."""

    encoder: str
    """FFmpeg encoder name (e.g., 'libx265', 'hevc_amf')."""

    codec: TargetCodec
    encoder_type: EncoderType

    @property
    def is_hardware(self) -> bool:
        return self.encoder_type.is_hardware

    @property
    def supports_tune(self) -> bool:
        return self.encoder in ENCODER_TUNES

    @property
    def uses_ordinal_presets(self) -> bool:
        return self.encoder in ORDINAL_PRESET_ENCODERS


def select_encoder(codec: TargetCodec, encoder_type: EncoderType) -> EncoderSelection:
    """Select the FFmpeg encoder for a codec family and backend.

    Args:
        codec: Target codec family.
        encoder_type: CPU or a GPU backend.

    Returns:
        EncoderSelection naming the encoder.
    """
    if encoder_type.is_hardware:
        encoder = HARDWARE_ENCODERS[encoder_type][codec]
    else:
        encoder = SOFTWARE_ENCODERS[codec]
    return EncoderSelection(encoder=encoder, codec=codec, encoder_type=encoder_type)


def resolve_tune(encoder: str, tune: str | None) -> str | None:
    """Return the tune if the encoder accepts it, else None."""
    if tune is None:
        return None
    supported = ENCODER_TUNES.get(encoder)
    if supported is None or tune not in supported:
        logger.debug("Encoder %s does not support tune '%s', omitting", encoder, tune)
        return None
    return tune


def map_preset(encoder: str, preset: str) -> str:
    """Translate a named preset for encoders that use ordinal presets.

    Examples:
        map_preset("libsvtav1", "slow") -> "6"
        map_preset("libsvtav1", "veryslow") -> "8"
        map_preset("libx264", "slow") -> "slow"
    """
    if encoder not in ORDINAL_PRESET_ENCODERS:
        return preset
    return str(SVT_AV1_PRESET_MAP.get(preset, DEFAULT_SVT_AV1_PRESET))


def size_adaptive_preset(size_mb: float | None) -> str:
    """Pick a faster preset for larger files.

    Returns 'faster' above 4000 MB, 'fast' above 1000 MB, else 'medium'.
    """
    if size_mb is None:
        return "medium"
    if size_mb > 4000:
        return "faster"
    if size_mb > 1000:
        return "fast"
    return "medium"


def auto_thread_count(size_mb: float | None) -> int | None:
    """One thread per 500 MB, clamped to 4..16; None if size is unknown."""
    if size_mb is None:
        return None
    return min(16, max(4, int(size_mb // 500)))
