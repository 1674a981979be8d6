"""Encoder selection, audio planning and directive assembly."""

from smartencode.executor.audio import (
    AudioAction,
    AudioPlan,
    AudioRole,
    AudioTrackPlan,
    build_audio_codec_args,
    build_audio_maps,
    build_audio_plan,
    describe_audio_plan,
    select_audio_streams,
)
from smartencode.executor.command import (
    VideoPlan,
    assemble_directive,
    build_scale_filter,
    build_subtitle_args,
    build_video_args,
    plan_video,
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

__all__ = [
    "ArgSection",
    "AudioAction",
    "AudioPlan",
    "AudioRole",
    "AudioTrackPlan",
    "EncoderSelection",
    "FFmpegArg",
    "TranscodeDirective",
    "VideoPlan",
    "assemble_directive",
    "auto_thread_count",
    "build_audio_codec_args",
    "build_audio_maps",
    "build_audio_plan",
    "build_scale_filter",
    "build_subtitle_args",
    "build_video_args",
    "describe_audio_plan",
    "map_preset",
    "plan_video",
    "resolve_tune",
    "select_audio_streams",
    "size_adaptive_preset",
]
