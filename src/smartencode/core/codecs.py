"""Centralized codec registry and utilities.

This module provides the single source of truth for codec knowledge used by
the skip rules and the command assembler:
- Codec alias groups for matching/normalization
- Container name normalization
"""

from __future__ import annotations

# =============================================================================
# Codec Alias Groups
# =============================================================================
# Groups of equivalent codec identifiers that should be treated as matching.

VIDEO_CODEC_ALIASES: dict[str, frozenset[str]] = {
    "hevc": frozenset({"hevc", "h265", "h.265", "x265", "hvc1", "hev1"}),
    "h265": frozenset({"hevc", "h265", "h.265", "x265", "hvc1", "hev1"}),
    "h264": frozenset({"h264", "h.264", "avc", "avc1", "x264"}),
    "avc": frozenset({"h264", "h.264", "avc", "avc1", "x264"}),
    "av1": frozenset({"av1", "av01", "libaom-av1", "libsvtav1"}),
}

AUDIO_CODEC_ALIASES: dict[str, frozenset[str]] = {
    "aac": frozenset({"aac", "aac_latm", "mp4a"}),
    "ac3": frozenset({"ac3", "ac-3", "a52"}),
    "eac3": frozenset({"eac3", "e-ac-3", "ec3"}),
}

_CONTAINER_ALIASES: dict[str, str] = {
    "matroska": "mkv",
    "matroska,webm": "mkv",
    "mov,mp4,m4a,3gp,3g2,mj2": "mp4",
    "quicktime": "mov",
}


def normalize_container_format(container: str | None) -> str:
    """Normalize container format names.

    Handles common aliases from ffprobe output (e.g., 'matroska' -> 'mkv',
    'mov,mp4,m4a,3gp,3g2,mj2' -> 'mp4') as well as file extensions with a
    leading dot.

    Args:
        container: Container format string (from ffprobe or file extension).

    Returns:
        Normalized format name (lowercase, standardized), empty if unknown.
    """
    if not container:
        return ""
    container = container.casefold().strip().lstrip(".")

    if container in _CONTAINER_ALIASES:
        return _CONTAINER_ALIASES[container]

    # Substring matching handles different ffprobe versions
    if "matroska" in container or container == "webm":
        return "mkv"
    if any(x in container for x in ("mp4", "m4a", "m4v")):
        return "mp4"
    if "mov" in container or "quicktime" in container:
        return "mov"
    if "avi" in container:
        return "avi"

    return container


def _codec_matches(
    current_codec: str | None,
    target: str,
    aliases: dict[str, frozenset[str]],
) -> bool:
    if current_codec is None:
        return False

    current_lower = current_codec.casefold().strip()
    target_lower = target.casefold().strip()

    if current_lower == target_lower:
        return True

    return current_lower in aliases.get(target_lower, frozenset())


def video_codec_matches(current_codec: str | None, target: str) -> bool:
    """Check if current video codec matches target (case-insensitive, alias-aware).

    Args:
        current_codec: Current video codec from ffprobe.
        target: Target codec to match against.

    Returns:
        True if codec matches.
    """
    return _codec_matches(current_codec, target, VIDEO_CODEC_ALIASES)


def audio_codec_matches(current_codec: str | None, target: str) -> bool:
    """Check if current audio codec matches target (case-insensitive, alias-aware)."""
    return _codec_matches(current_codec, target, AUDIO_CODEC_ALIASES)
