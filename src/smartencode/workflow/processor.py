"""Per-file decision pipeline.

Stages run strictly forward:

    extract -> skip checks -> classify -> plan video/audio/subtitles -> assemble

Each call is pure given its inputs. No exception crosses the boundary of
``evaluate`` or ``evaluate_file``: every failure becomes a SkipDecision
whose summary explains it.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from smartencode.config.profiles import DEFAULT_PROFILE_TITLE
from smartencode.domain import FileInfo, MediaProbe, SkipReasonType
from smartencode.executor.audio import build_audio_plan
from smartencode.executor.command import (
    assemble_directive,
    build_subtitle_args,
    plan_video,
)
from smartencode.introspector.parsers import parse_ffprobe
from smartencode.logging.context import file_context
from smartencode.policy.classification import classify_content
from smartencode.policy.exceptions import (
    EngineError,
    MissingProbeDataError,
    NoVideoStreamError,
    OptionsError,
)
from smartencode.policy.extractor import extract_media_view
from smartencode.policy.options import EncodeOptions, build_options
from smartencode.policy.skip import SkipReason, evaluate_skip
from smartencode.workflow.decision import Decision, ProcessDecision, SkipDecision
from smartencode.workflow.summary import format_process_summary, format_skip_summary

if TYPE_CHECKING:
    from smartencode.config.models import Profile

logger = logging.getLogger(__name__)


def _error_reason_type(error: EngineError) -> SkipReasonType:
    if isinstance(error, MissingProbeDataError):
        return SkipReasonType.MISSING_PROBE_DATA
    if isinstance(error, NoVideoStreamError):
        return SkipReasonType.NO_VIDEO_STREAM
    raise error


def _skip(title: str, reason: SkipReason, level: int = logging.INFO) -> SkipDecision:
    decision = SkipDecision(reason=reason, summary=format_skip_summary(title, reason))
    logger.log(level, "Skipping: %s", reason.message, extra=decision.log_fields())
    return decision


def _run_pipeline(
    probe: MediaProbe | None,
    file_info: FileInfo,
    options: EncodeOptions,
    title: str,
) -> Decision:
    view = extract_media_view(probe, file_info)

    skip_reason = evaluate_skip(view, options)
    if skip_reason is not None:
        return _skip(title, skip_reason)

    classification = classify_content(view, options.force_preset)
    video_plan = plan_video(view, options, classification.tier)
    audio_plan = build_audio_plan(view.audio_streams, options)
    subtitle_args = build_subtitle_args(view, options)
    directive = assemble_directive(video_plan, audio_plan, subtitle_args)

    subtitles_kept = bool(subtitle_args)
    decision = ProcessDecision(
        directive=directive,
        classification=classification,
        video_plan=video_plan,
        audio_plan=audio_plan,
        subtitles_kept=subtitles_kept,
        summary=format_process_summary(
            title, view, classification, video_plan, audio_plan, subtitles_kept
        ),
    )
    logger.info(
        "Processing as %s with %s (quality %d)",
        classification.tier.value,
        video_plan.encoder,
        video_plan.quality,
        extra=decision.log_fields(),
    )
    return decision


def evaluate(
    probe: MediaProbe | None,
    file_info: FileInfo,
    options: EncodeOptions,
    *,
    title: str | None = None,
) -> Decision:
    """Evaluate one file and decide what to do with it.

    Args:
        probe: Probed stream metadata, or None if probing failed.
        file_info: File name, path, size, duration and optional year.
        options: Validated encode options.
        title: Header line for the summary; defaults to the engine name.

    Returns:
        SkipDecision or ProcessDecision.
    """
    title = title or DEFAULT_PROFILE_TITLE
    with file_context(file_info.file_path or file_info.file_name):
        try:
            return _run_pipeline(probe, file_info, options, title)
        except EngineError as e:
            reason = SkipReason(reason_type=_error_reason_type(e), message=str(e))
            return _skip(title, reason, logging.WARNING)


def evaluate_file(
    probe_data: Mapping[str, Any] | None,
    raw_options: Mapping[str, Any] | EncodeOptions | None = None,
    *,
    profile: Profile | None = None,
    file_path: str | None = None,
    release_year: int | None = None,
) -> Decision:
    """Evaluate a file from raw ffprobe JSON and raw option values.

    This is the host-facing entry point: it parses the probe, builds the
    options once and runs the pipeline. Option errors become a
    SkipDecision with reason type ``invalid_options``.

    Args:
        probe_data: Parsed ``ffprobe -show_format -show_streams`` JSON.
        raw_options: Option values from the host (strings accepted).
        profile: Optional profile supplying defaults and the summary title.
        file_path: Media file path; defaults to the probe's format.filename.
        release_year: Externally supplied release year.

    Returns:
        SkipDecision or ProcessDecision.
    """
    title = profile.title if profile is not None else DEFAULT_PROFILE_TITLE

    try:
        options = build_options(raw_options, profile)
    except OptionsError as e:
        reason = SkipReason(
            reason_type=SkipReasonType.INVALID_OPTIONS, message=e.message
        )
        return _skip(title, reason, logging.ERROR)

    try:
        probe, file_info = parse_ffprobe(
            dict(probe_data) if isinstance(probe_data, Mapping) else None,
            file_path,
            release_year,
        )
    except MissingProbeDataError as e:
        reason = SkipReason(
            reason_type=SkipReasonType.MISSING_PROBE_DATA, message=str(e)
        )
        return _skip(title, reason, logging.WARNING)

    return evaluate(probe, file_info, options, title=title)
