"""Human-readable summaries for the host's info log."""

from __future__ import annotations

from smartencode.domain import SkipReasonType
from smartencode.executor.audio import AudioPlan, describe_audio_plan
from smartencode.executor.command import VideoPlan
from smartencode.policy.classification import ClassificationResult
from smartencode.policy.extractor import MediaView
from smartencode.policy.skip import SkipReason

# Skip reasons that abort evaluation rather than skip a healthy file
_ABORT_REASONS = frozenset(
    {
        SkipReasonType.MISSING_PROBE_DATA,
        SkipReasonType.NO_VIDEO_STREAM,
        SkipReasonType.INVALID_OPTIONS,
    }
)


def format_skip_summary(title: str, reason: SkipReason) -> str:
    """Render the summary for a skipped or aborted file."""
    if reason.reason_type in _ABORT_REASONS:
        return f"{title}\n\n{reason.message}. Aborting.\n"
    return f"{title}\n\n{reason.message}.\n"


def _tree(items: list[tuple[str, str]]) -> list[str]:
    lines = []
    for i, (label, value) in enumerate(items):
        branch = "└─" if i == len(items) - 1 else "├─"
        lines.append(f"{branch} {label}: {value}")
    return lines


def format_process_summary(
    title: str,
    view: MediaView,
    classification: ClassificationResult,
    video_plan: VideoPlan,
    audio_plan: AudioPlan,
    subtitles_kept: bool,
) -> str:
    """Render the summary for a file that will be processed.

    Args:
        title: Profile title used as the header line.
        view: Extracted media view.
        classification: Chosen content tier.
        video_plan: Resolved video parameters.
        audio_plan: Output audio tracks.
        subtitles_kept: Whether subtitle streams are mapped to the output.

    Returns:
        Multi-line summary text.
    """
    prefix = "Forced" if classification.forced else "Detected"
    lines = [title, "", f"{prefix}: {classification.description}"]
    if video_plan.scale_filter:
        lines.append(f"Downscaling from {view.width}x{view.height} to 1080p")

    lines.append("")
    lines.append(f"Original audio streams found: {len(view.audio_streams)}")
    lines.extend(f"   - {line}" for line in describe_audio_plan(audio_plan))

    if view.subtitle_streams and not subtitles_kept:
        lines.append(
            f"Original subtitles found: {len(view.subtitle_streams)} tracks. "
            "These will be removed."
        )

    video = view.video
    hdr = " (HDR)" if view.is_hdr else ""
    source = f"{view.width}x{view.height} {video.codec or 'unknown'}{hdr}"
    year = view.release_year or "unknown"

    selection = video_plan.selection
    if selection.is_hardware:
        speed = "hardware default"
    else:
        speed = f"Preset '{video_plan.preset}'"
        if video_plan.threads:
            speed += f" with {video_plan.threads} threads"

    lines.append("")
    lines.append(f"Ready to encode with preset: {video_plan.bundle.name}")
    lines.extend(
        _tree(
            [
                ("Source", f"{source}, Year: {year}"),
                (
                    "Encoder",
                    f"{selection.encoder} ({selection.encoder_type.value})",
                ),
                ("Quality", str(video_plan.quality)),
                ("Speed", speed),
                ("Smart-Tuning", video_plan.tune or "Disabled"),
                (
                    "Audio",
                    f"{len(audio_plan.source_indices)}x2 tracks "
                    f"({len(audio_plan.tracks)} total)",
                ),
                ("Subtitles", "Kept" if subtitles_kept else "Removed"),
            ]
        )
    )
    return "\n".join(lines) + "\n"
