"""Decision records returned to the host.

A Decision is either a SkipDecision or a ProcessDecision, never both.
Both carry the human-readable summary and serialize to the host's
response record with ``to_response``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from smartencode.domain import ContentTier, SkipReasonType
from smartencode.executor.audio import AudioPlan
from smartencode.executor.command import TARGET_CONTAINER_EXT, VideoPlan
from smartencode.executor.types import ArgSection, FFmpegArg, TranscodeDirective
from smartencode.policy.classification import ClassificationResult
from smartencode.policy.skip import SkipReason


@dataclass(frozen=True)
class SkipDecision:
    """The file is left untouched."""

    reason: SkipReason
    summary: str

    @property
    def process_file(self) -> bool:
        return False

    @property
    def reason_type(self) -> SkipReasonType:
        return self.reason.reason_type

    def log_fields(self) -> dict[str, Any]:
        """Fields attached to the record announcing this decision."""
        return {"process_file": False, "reason_type": self.reason_type.value}

    def to_response(self) -> dict[str, Any]:
        """Build the host response record."""
        return {
            "processFile": False,
            "preset": "",
            "container": TARGET_CONTAINER_EXT,
            "handBrakeMode": False,
            "FFmpegMode": True,
            "reQueueAfter": False,
            "infoLog": self.summary,
        }


@dataclass(frozen=True)
class ProcessDecision:
    """The file should be transcoded with the attached directive."""

    directive: TranscodeDirective
    classification: ClassificationResult
    video_plan: VideoPlan
    audio_plan: AudioPlan
    subtitles_kept: bool
    summary: str

    @property
    def process_file(self) -> bool:
        return True

    @property
    def tier(self) -> ContentTier:
        return self.classification.tier

    @property
    def scale_filter(self) -> str | None:
        return self.video_plan.scale_filter

    @property
    def container_ext(self) -> str:
        return self.directive.container_ext

    @property
    def video_args(self) -> tuple[FFmpegArg, ...]:
        return self.directive.section(ArgSection.VIDEO_CODEC)

    @property
    def subtitle_args(self) -> tuple[FFmpegArg, ...]:
        return self.directive.section(ArgSection.SUBTITLE_MAP)

    def log_fields(self) -> dict[str, Any]:
        """Fields attached to the record announcing this decision."""
        return {
            "process_file": True,
            "tier": self.tier.value,
            "encoder": self.video_plan.encoder,
            "quality": self.video_plan.quality,
        }

    def to_response(self) -> dict[str, Any]:
        """Build the host response record."""
        return {
            "processFile": True,
            "preset": self.directive.to_preset(),
            "container": self.container_ext,
            "handBrakeMode": False,
            "FFmpegMode": True,
            "reQueueAfter": False,
            "infoLog": self.summary,
        }


Decision = SkipDecision | ProcessDecision
