"""Skip evaluation: decide whether a file should be left untouched.

Checks run in a fixed order and the first match wins:

1. File size below the configured minimum (0 disables the check)
2. Duration under one minute
3. File already matches the target state (container, video codec,
   subtitle policy and audio layout)

The cheap size and duration checks run before the stream inspection of
the already-perfect check. Unknown size or duration never causes a skip.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from smartencode.core.codecs import audio_codec_matches, video_codec_matches
from smartencode.domain import PerfectAudioCheck, SkipReasonType, StreamInfo
from smartencode.policy.extractor import MediaView
from smartencode.policy.options import EncodeOptions

logger = logging.getLogger(__name__)

# Output container for every processed file
TARGET_CONTAINER = "mp4"

# Files shorter than this are never worth processing
MIN_DURATION_SECONDS = 60.0

# Designated audio codecs of a finished file
SURROUND_CODEC = "ac3"
COMPATIBILITY_CODEC = "aac"
SURROUND_CHANNELS = 6
COMPATIBILITY_CHANNELS = 2


@dataclass(frozen=True)
class SkipReason:
    """Structured reason for skipping a file."""

    reason_type: SkipReasonType
    message: str


@dataclass(frozen=True)
class PerfectFileCheck:
    """Outcome of each conjunct of the already-perfect check."""

    container_ok: bool
    video_ok: bool
    subtitles_ok: bool
    audio_ok: bool

    @property
    def is_perfect(self) -> bool:
        return (
            self.container_ok and self.video_ok and self.subtitles_ok and self.audio_ok
        )

    @property
    def failed_conditions(self) -> tuple[str, ...]:
        """Names of the conjuncts that did not hold."""
        checks = (
            ("container", self.container_ok),
            ("video", self.video_ok),
            ("subtitles", self.subtitles_ok),
            ("audio", self.audio_ok),
        )
        return tuple(name for name, ok in checks if not ok)


def _has_audio_track(
    streams: tuple[StreamInfo, ...], codec: str, channels: int | None
) -> bool:
    return any(
        audio_codec_matches(s.codec, codec)
        and (channels is None or s.channels == channels)
        for s in streams
    )


def audio_layout_is_final(
    audio_streams: tuple[StreamInfo, ...], strictness: PerfectAudioCheck
) -> bool:
    """Check whether the audio already has a surround and a compatibility track.

    Strict mode additionally requires AC3 with exactly 6 channels and AAC with
    exactly 2 channels.
    """
    strict = strictness is PerfectAudioCheck.STRICT
    return _has_audio_track(
        audio_streams, SURROUND_CODEC, SURROUND_CHANNELS if strict else None
    ) and _has_audio_track(
        audio_streams,
        COMPATIBILITY_CODEC,
        COMPATIBILITY_CHANNELS if strict else None,
    )


def check_already_perfect(view: MediaView, options: EncodeOptions) -> PerfectFileCheck:
    """Evaluate every conjunct of the already-perfect predicate."""
    return PerfectFileCheck(
        container_ok=view.container == TARGET_CONTAINER,
        video_ok=video_codec_matches(
            view.video.codec, options.target_codec.probe_name
        ),
        subtitles_ok=options.keep_subtitles or not view.subtitle_streams,
        audio_ok=audio_layout_is_final(
            view.audio_streams, options.perfect_audio_check
        ),
    )


def _check_file_size(view: MediaView, options: EncodeOptions) -> SkipReason | None:
    threshold_mb = options.skip_small_files_mb
    size_mb = view.size_mb
    if threshold_mb <= 0 or size_mb is None:
        return None
    if size_mb < threshold_mb:
        return SkipReason(
            reason_type=SkipReasonType.FILE_TOO_SMALL,
            message=f"Skipping small file ({round(size_mb)}MB < {threshold_mb}MB)",
        )
    return None


def _check_duration(view: MediaView, options: EncodeOptions) -> SkipReason | None:
    duration = view.duration_seconds
    if duration is None:
        logger.debug("Cannot evaluate duration check: duration unknown")
        return None
    if duration < MIN_DURATION_SECONDS:
        return SkipReason(
            reason_type=SkipReasonType.TOO_SHORT,
            message=f"Skipping short video ({duration:.1f}s < 1 minute)",
        )
    return None


def _check_already_perfect(
    view: MediaView, options: EncodeOptions
) -> SkipReason | None:
    result = check_already_perfect(view, options)
    if not result.is_perfect:
        logger.debug(
            "File needs processing, unmet: %s", ", ".join(result.failed_conditions)
        )
        return None
    return SkipReason(
        reason_type=SkipReasonType.ALREADY_PERFECT,
        message=(
            f"File is already perfect ({TARGET_CONTAINER.upper()}/"
            f"{options.target_codec.value}, "
            f"{SURROUND_CODEC.upper()}+{COMPATIBILITY_CODEC.upper()} audio, "
            f"subtitles {'kept' if options.keep_subtitles else 'absent'})"
        ),
    )


# Ordered skip checks; the first one returning a reason wins
SKIP_CHECKS: tuple[Callable[[MediaView, EncodeOptions], SkipReason | None], ...] = (
    _check_file_size,
    _check_duration,
    _check_already_perfect,
)


def evaluate_skip(view: MediaView, options: EncodeOptions) -> SkipReason | None:
    """Evaluate skip checks in order.

    Args:
        view: Extracted media view.
        options: Encode options.

    Returns:
        SkipReason for the first matching check, None if the file should be
        processed.
    """
    for check in SKIP_CHECKS:
        reason = check(view, options)
        if reason is not None:
            logger.debug("Skip check matched: %s", reason.reason_type.value)
            return reason
    return None
