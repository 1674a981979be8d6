"""Unit tests for the human-readable decision summary."""

from smartencode.domain import SkipReasonType
from smartencode.policy.options import build_options
from smartencode.policy.skip import SkipReason
from smartencode.workflow import evaluate, format_skip_summary


class TestSkipSummary:
    """Tests for format_skip_summary."""

    def test_skip_reason(self) -> None:
        reason = SkipReason(
            reason_type=SkipReasonType.FILE_TOO_SMALL,
            message="Skipping small file (50MB < 100MB)",
        )

        assert format_skip_summary("SmartEncode", reason) == (
            "SmartEncode\n\nSkipping small file (50MB < 100MB).\n"
        )

    def test_abort_reason(self) -> None:
        reason = SkipReason(
            reason_type=SkipReasonType.NO_VIDEO_STREAM,
            message="No video stream found",
        )

        summary = format_skip_summary("SmartEncode", reason)

        assert summary.endswith("No video stream found. Aborting.\n")


class TestProcessSummary:
    """Tests for the summary of processed files."""

    def test_mentions_every_decision(
        self, make_video, make_audio, make_subtitle, make_probe, make_file_info
    ) -> None:
        """Tier, encoder, quality, speed, tune, audio and subtitles are listed."""
        probe = make_probe(
            make_video(codec="hevc", width=3840, height=2160),
            make_audio(index=1, channels=6),
            make_subtitle(index=2),
        )

        decision = evaluate(probe, make_file_info(size_mb=3000), build_options())
        lines = decision.summary.splitlines()

        assert lines[0] == "SmartEncode"
        assert "Detected: 4K/HDR content" in lines
        assert "Downscaling from 3840x2160 to 1080p" in lines
        assert "   - Audio 1 (source 1, eng): AC3 6ch (448k)" in lines
        assert (
            "Original subtitles found: 1 tracks. These will be removed." in lines
        )
        assert "Ready to encode with preset: 4K Elite" in lines
        assert "├─ Encoder: libx264 (cpu)" in lines
        assert "├─ Quality: 18" in lines
        assert "├─ Speed: Preset 'slow' with 6 threads" in lines
        assert "├─ Smart-Tuning: Disabled" in lines
        assert "├─ Audio: 1x2 tracks (2 total)" in lines
        assert lines[-1] == "└─ Subtitles: Removed"

    def test_forced_tier(self, make_probe, make_file_info) -> None:
        decision = evaluate(
            make_probe(),
            make_file_info(),
            build_options({"force_preset": "animation"}),
        )

        assert "Forced: User selected preset 'animation'" in decision.summary
        assert "├─ Smart-Tuning: animation" in decision.summary

    def test_hardware_speed(self, make_probe, make_file_info) -> None:
        decision = evaluate(
            make_probe(),
            make_file_info(),
            build_options({"encoder_type": "gpu_intel"}),
        )
        assert "├─ Speed: hardware default" in decision.summary

    def test_subtitles_kept(
        self, make_video, make_audio, make_subtitle, make_probe, make_file_info
    ) -> None:
        decision = evaluate(
            make_probe(make_video(), make_audio(index=1), make_subtitle(index=2)),
            make_file_info(),
            build_options({"keep_subtitles": "true"}),
        )

        assert decision.summary.endswith("└─ Subtitles: Kept\n")
        assert "These will be removed" not in decision.summary
