"""Audio track selection and FFmpeg argument building.

Every selected source track produces exactly two output tracks:

1. A surround track that keeps the channel layout. Sources with two or
   fewer channels are stream-copied; others are encoded to AC3 (448k at
   six or more channels, 384k otherwise, at most 6 channels).
2. A compatibility track, always AAC stereo at 160k.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from smartencode.domain import UNDETERMINED_LANGUAGE, AudioSelectionMode, StreamInfo
from smartencode.executor.types import ArgSection, FFmpegArg
from smartencode.policy.options import EncodeOptions

logger = logging.getLogger(__name__)

SURROUND_CODEC = "ac3"
SURROUND_BITRATE = "448k"  # Six or more source channels
SURROUND_REDUCED_BITRATE = "384k"
MAX_SURROUND_CHANNELS = 6

COMPATIBILITY_CODEC = "aac"
COMPATIBILITY_BITRATE = "160k"
COMPATIBILITY_CHANNELS = 2

# Channel count assumed when the probe does not report one
DEFAULT_CHANNELS = 2


class AudioAction(Enum):
    """Action to take for an output audio track."""

    COPY = "copy"  # Stream copy (preserve as-is)
    TRANSCODE = "transcode"  # Encode to the track's codec


class AudioRole(Enum):
    """Purpose of an output audio track."""

    SURROUND = "surround"
    COMPATIBILITY = "compatibility"


@dataclass(frozen=True)
class AudioTrackPlan:
    """Plan for one output audio track."""

    source_index: int  # Index among the source audio streams (0:a:N)
    output_index: int  # Index among the output audio streams
    role: AudioRole
    action: AudioAction
    codec: str  # Output codec, "copy" for stream copy
    bitrate: str | None
    channels: int
    language: str
    source_codec: str | None = None


@dataclass(frozen=True)
class AudioPlan:
    """Complete plan for the output audio tracks, in output order."""

    tracks: tuple[AudioTrackPlan, ...] = ()

    @property
    def source_indices(self) -> tuple[int, ...]:
        """Selected source audio indices in selection order."""
        return tuple(
            t.source_index for t in self.tracks if t.role is AudioRole.SURROUND
        )

    @property
    def is_empty(self) -> bool:
        return not self.tracks


def _language_of(stream: StreamInfo) -> str:
    return (stream.language or UNDETERMINED_LANGUAGE).casefold()


def select_audio_streams(
    audio_streams: tuple[StreamInfo, ...], options: EncodeOptions
) -> tuple[tuple[int, StreamInfo], ...]:
    """Select the source audio streams to keep.

    In language mode, streams whose language tag is accepted are kept in
    source order; if none is accepted, the first stream is kept. In first
    mode only the first stream is kept.

    Args:
        audio_streams: Source audio streams in probe order.
        options: Encode options.

    Returns:
        Tuple of (audio-relative index, stream) pairs.
    """
    if not audio_streams:
        return ()

    indexed = tuple(enumerate(audio_streams))
    if options.audio_selection is AudioSelectionMode.FIRST:
        return indexed[:1]

    selected = tuple(
        (i, s) for i, s in indexed if _language_of(s) in options.audio_languages
    )
    if not selected:
        logger.debug(
            "No audio stream in accepted languages, falling back to the first stream"
        )
        return indexed[:1]
    return selected


def _surround_track(
    source_index: int, output_index: int, stream: StreamInfo
) -> AudioTrackPlan:
    channels = stream.channels or DEFAULT_CHANNELS
    if channels <= COMPATIBILITY_CHANNELS:
        return AudioTrackPlan(
            source_index=source_index,
            output_index=output_index,
            role=AudioRole.SURROUND,
            action=AudioAction.COPY,
            codec="copy",
            bitrate=None,
            channels=channels,
            language=_language_of(stream),
            source_codec=stream.codec,
        )
    return AudioTrackPlan(
        source_index=source_index,
        output_index=output_index,
        role=AudioRole.SURROUND,
        action=AudioAction.TRANSCODE,
        codec=SURROUND_CODEC,
        bitrate=(
            SURROUND_BITRATE
            if channels >= MAX_SURROUND_CHANNELS
            else SURROUND_REDUCED_BITRATE
        ),
        channels=min(channels, MAX_SURROUND_CHANNELS),
        language=_language_of(stream),
        source_codec=stream.codec,
    )


def _compatibility_track(
    source_index: int, output_index: int, stream: StreamInfo
) -> AudioTrackPlan:
    return AudioTrackPlan(
        source_index=source_index,
        output_index=output_index,
        role=AudioRole.COMPATIBILITY,
        action=AudioAction.TRANSCODE,
        codec=COMPATIBILITY_CODEC,
        bitrate=COMPATIBILITY_BITRATE,
        channels=COMPATIBILITY_CHANNELS,
        language=_language_of(stream),
        source_codec=stream.codec,
    )


def build_audio_plan(
    audio_streams: tuple[StreamInfo, ...], options: EncodeOptions
) -> AudioPlan:
    """Create the output audio plan for a file.

    Args:
        audio_streams: Source audio streams in probe order.
        options: Encode options.

    Returns:
        AudioPlan with two output tracks per selected source stream.
    """
    tracks: list[AudioTrackPlan] = []
    for source_index, stream in select_audio_streams(audio_streams, options):
        output_index = len(tracks)
        tracks.append(_surround_track(source_index, output_index, stream))
        tracks.append(_compatibility_track(source_index, output_index + 1, stream))
    return AudioPlan(tracks=tuple(tracks))


def build_audio_maps(plan: AudioPlan) -> list[FFmpegArg]:
    """Build one -map per output track, in output order."""
    return [
        FFmpegArg("-map", f"0:a:{track.source_index}", ArgSection.AUDIO_MAP)
        for track in plan.tracks
    ]


def build_audio_codec_args(plan: AudioPlan) -> list[FFmpegArg]:
    """Build per-output-stream codec, bitrate and channel arguments."""
    args: list[FFmpegArg] = []
    for track in plan.tracks:
        n = track.output_index
        args.append(FFmpegArg(f"-c:a:{n}", track.codec, ArgSection.AUDIO_CODEC))
        if track.action is AudioAction.COPY:
            continue
        if track.bitrate:
            args.append(FFmpegArg(f"-b:a:{n}", track.bitrate, ArgSection.AUDIO_CODEC))
        args.append(
            FFmpegArg(f"-ac:a:{n}", str(track.channels), ArgSection.AUDIO_CODEC)
        )
    return args


def describe_audio_plan(plan: AudioPlan) -> list[str]:
    """Generate human-readable descriptions of the audio plan.

    Args:
        plan: Audio plan to describe.

    Returns:
        List of description strings.
    """
    descriptions = []
    for track in plan.tracks:
        source = f"source {track.source_index + 1}, {track.language}"
        if track.action is AudioAction.COPY:
            detail = f"{track.channels}ch -> copy original"
        else:
            detail = (
                f"{track.codec.upper()} {track.channels}ch ({track.bitrate})"
            )
        descriptions.append(
            f"Audio {track.output_index + 1} ({source}): {detail}"
        )
    return descriptions
