"""Transcode directive assembly.

This module turns a classified file and its encode options into an ordered
TranscodeDirective: stream maps, the scale filter, pixel format, video and
audio codec arguments, and the container finalization flag.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from smartencode.domain import ContentTier, EncoderType
from smartencode.executor.audio import (
    AudioPlan,
    build_audio_codec_args,
    build_audio_maps,
)
from smartencode.executor.encoders import (
    EncoderSelection,
    auto_thread_count,
    map_preset,
    resolve_tune,
    select_encoder,
    size_adaptive_preset,
)
from smartencode.executor.types import ArgSection, FFmpegArg, TranscodeDirective
from smartencode.policy.extractor import MediaView
from smartencode.policy.options import AUTO_PRESET, EncodeOptions
from smartencode.policy.tiers import TierBundle, get_tier_bundle

logger = logging.getLogger(__name__)

TARGET_CONTAINER_EXT = ".mp4"
OUTPUT_PIXEL_FORMAT = "yuv420p"
DOWNSCALE_FILTER = "scale=1920:-2:flags=lanczos"

# Encoders that take the tier's rate ceiling
RATE_CAPPED_ENCODERS = frozenset({"libx264", "libx265"})


@dataclass(frozen=True)
class VideoPlan:
    """Resolved video encoding parameters for one file."""

    selection: EncoderSelection
    bundle: TierBundle
    preset: str  # Named preset, or the ordinal value for SVT-AV1
    tune: str | None
    threads: int | None
    scale_filter: str | None

    @property
    def encoder(self) -> str:
        return self.selection.encoder

    @property
    def quality(self) -> int:
        return self.bundle.quality


def _resolve_preset(
    bundle: TierBundle, options: EncodeOptions, size_mb: float | None
) -> str:
    if options.cpu_speed_preset is None:
        return bundle.preset
    if options.cpu_speed_preset == AUTO_PRESET:
        return size_adaptive_preset(size_mb)
    return options.cpu_speed_preset


def _resolve_threads(options: EncodeOptions, size_mb: float | None) -> int | None:
    if options.thread_count > 0:
        return options.thread_count
    return auto_thread_count(size_mb)


def build_scale_filter(view: MediaView, options: EncodeOptions) -> str | None:
    """Return the downscale filter for high-resolution sources, if enabled."""
    if options.force_1080p and view.is_high_resolution:
        return DOWNSCALE_FILTER
    return None


def plan_video(
    view: MediaView, options: EncodeOptions, tier: ContentTier
) -> VideoPlan:
    """Resolve the encoder and its parameters for a classified file.

    Args:
        view: Extracted media view.
        options: Encode options.
        tier: Content tier chosen by the classifier.

    Returns:
        VideoPlan with every parameter resolved.
    """
    selection = select_encoder(options.target_codec, options.encoder_type)
    bundle = get_tier_bundle(tier, options.quality_level)

    preset = map_preset(
        selection.encoder, _resolve_preset(bundle, options, view.size_mb)
    )
    tune = None
    if options.enable_smart_tuning:
        tune = resolve_tune(selection.encoder, bundle.tune)
    threads = None
    if not selection.is_hardware:
        threads = _resolve_threads(options, view.size_mb)

    logger.debug(
        "Video plan: encoder=%s preset=%s tune=%s quality=%d threads=%s",
        selection.encoder,
        preset,
        tune,
        bundle.quality,
        threads,
    )
    return VideoPlan(
        selection=selection,
        bundle=bundle,
        preset=preset,
        tune=tune,
        threads=threads,
        scale_filter=build_scale_filter(view, options),
    )


def _software_video_args(plan: VideoPlan) -> list[tuple[str, str]]:
    encoder = plan.encoder
    bundle = plan.bundle
    pairs = [("-c:v", encoder), ("-preset", plan.preset)]
    if plan.selection.uses_ordinal_presets:
        pairs.append(("-crf", str(bundle.quality)))
        return pairs

    if plan.tune:
        pairs.append(("-tune", plan.tune))
    if encoder == "libx264":
        pairs.append(("-profile:v", bundle.x264_profile))
        pairs.append(("-level", bundle.x264_level))
    pairs.append(("-crf", str(bundle.quality)))
    if encoder in RATE_CAPPED_ENCODERS:
        pairs.append(("-maxrate", bundle.maxrate))
        pairs.append(("-bufsize", bundle.bufsize))
    if encoder == "libx264" and bundle.x264_params:
        pairs.append(("-x264-params", bundle.x264_params))
    if plan.threads:
        pairs.append(("-threads", str(plan.threads)))
    return pairs


def _hardware_video_args(plan: VideoPlan) -> list[tuple[str, str]]:
    quality = str(plan.quality)
    pairs = [("-c:v", plan.encoder)]
    encoder_type = plan.selection.encoder_type
    if encoder_type is EncoderType.GPU_AMD:
        pairs += [
            ("-quality", "balanced"),
            ("-rc", "cqp"),
            ("-qp_i", quality),
            ("-qp_p", quality),
        ]
    elif encoder_type is EncoderType.GPU_NVIDIA:
        pairs += [("-preset", "p5"), ("-rc", "vbr"), ("-cq", quality)]
    elif encoder_type is EncoderType.GPU_INTEL:
        pairs += [("-preset", "medium"), ("-global_quality", quality)]
    return pairs


def build_video_args(plan: VideoPlan) -> list[FFmpegArg]:
    """Build video codec arguments for the planned encoder."""
    if plan.selection.is_hardware:
        pairs = _hardware_video_args(plan)
    else:
        pairs = _software_video_args(plan)
    return [FFmpegArg(flag, value, ArgSection.VIDEO_CODEC) for flag, value in pairs]


def build_subtitle_args(view: MediaView, options: EncodeOptions) -> list[FFmpegArg]:
    """Map all subtitle streams as copies when retention is enabled."""
    if not options.keep_subtitles or not view.subtitle_streams:
        return []
    return [
        FFmpegArg("-map", "0:s?", ArgSection.SUBTITLE_MAP),
        FFmpegArg("-c:s", "copy", ArgSection.SUBTITLE_MAP),
    ]


def assemble_directive(
    video_plan: VideoPlan,
    audio_plan: AudioPlan,
    subtitle_args: list[FFmpegArg],
) -> TranscodeDirective:
    """Assemble the full directive in its fixed section order.

    Order: video map, audio maps, subtitle maps, scale filter, pixel
    format, video codec, audio codecs, container flag.
    """
    args: list[FFmpegArg] = [FFmpegArg("-map", "0:v:0", ArgSection.VIDEO_MAP)]
    args.extend(build_audio_maps(audio_plan))
    args.extend(subtitle_args)
    if video_plan.scale_filter:
        args.append(FFmpegArg("-vf", video_plan.scale_filter, ArgSection.FILTER))
    args.append(FFmpegArg("-pix_fmt", OUTPUT_PIXEL_FORMAT, ArgSection.PIXEL_FORMAT))
    args.extend(build_video_args(video_plan))
    args.extend(build_audio_codec_args(audio_plan))
    args.append(FFmpegArg("-movflags", "+faststart", ArgSection.CONTAINER))
    return TranscodeDirective(args=tuple(args), container_ext=TARGET_CONTAINER_EXT)
