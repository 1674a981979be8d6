"""Unit tests for the per-file decision pipeline."""

import pytest

from smartencode.config.profiles import get_profile
from smartencode.domain import ContentTier, MediaProbe, SkipReasonType
from smartencode.executor.command import DOWNSCALE_FILTER
from smartencode.policy.options import build_options
from smartencode.workflow import (
    ProcessDecision,
    SkipDecision,
    evaluate,
    evaluate_file,
)


class TestScenarios:
    """End-to-end scenarios."""

    def test_a_perfect_file_skipped(
        self, make_video, make_audio, make_probe, make_file_info
    ) -> None:
        """mp4/h264 with ac3 6ch + aac 2ch and no subtitles is skipped."""
        probe = make_probe(
            make_video(codec="h264"),
            make_audio(index=1, codec="ac3", channels=6),
            make_audio(index=2, codec="aac", channels=2),
            container="mp4",
        )

        decision = evaluate(probe, make_file_info(), build_options())

        assert isinstance(decision, SkipDecision)
        assert not decision.process_file
        assert decision.reason_type is SkipReasonType.ALREADY_PERFECT

    def test_b_4k_hdr_downscaled(
        self, make_video, make_audio, make_probe, make_file_info
    ) -> None:
        probe = make_probe(
            make_video(width=3840, height=2160, color_transfer="smpte2084"),
            make_audio(index=1),
        )

        decision = evaluate(
            probe, make_file_info(), build_options({"force_1080p": "true"})
        )

        assert isinstance(decision, ProcessDecision)
        assert decision.tier is ContentTier.ELITE
        assert decision.scale_filter == DOWNSCALE_FILTER
        assert decision.directive.values("-vf") == [DOWNSCALE_FILTER]

    def test_c_anime_name(self, make_probe, make_file_info) -> None:
        decision = evaluate(
            make_probe(),
            make_file_info(file_name="My.Anime.Movie.[1080p].mkv"),
            build_options({"force_preset": "auto"}),
        )
        assert decision.tier is ContentTier.ANIMATION

    def test_d_old_film(self, make_probe, make_file_info) -> None:
        decision = evaluate(
            make_probe(),
            make_file_info(file_name="Old.Noir.Film.1955.mkv"),
            build_options(),
        )

        assert decision.tier is ContentTier.CLASSIC
        assert "from 1955" in decision.classification.description

    def test_e_small_file(self, make_probe, make_file_info) -> None:
        decision = evaluate(
            make_probe(),
            make_file_info(size_mb=50),
            build_options({"skip_small_files_mb": "100"}),
        )

        assert isinstance(decision, SkipDecision)
        assert decision.reason_type is SkipReasonType.FILE_TOO_SMALL

    def test_f_single_six_channel_track(
        self, make_video, make_audio, make_probe, make_file_info
    ) -> None:
        probe = make_probe(
            make_video(), make_audio(index=1, codec="dts", channels=6, language="eng")
        )

        decision = evaluate(probe, make_file_info(), build_options())

        tracks = decision.audio_plan.tracks
        assert [(t.codec, t.bitrate, t.channels) for t in tracks] == [
            ("ac3", "448k", 6),
            ("aac", "160k", 2),
        ]


class TestFatalErrors:
    """Tests for missing probe data and missing video."""

    def test_missing_probe(self, make_file_info) -> None:
        decision = evaluate(None, make_file_info(), build_options())

        assert isinstance(decision, SkipDecision)
        assert decision.reason_type is SkipReasonType.MISSING_PROBE_DATA
        assert "Aborting" in decision.summary

    @pytest.mark.parametrize(
        "options",
        [
            {},
            {"skip_small_files_mb": "100"},
            {"keep_subtitles": "true", "force_preset": "classic"},
        ],
    )
    def test_no_video_regardless_of_other_fields(
        self, options, make_audio, make_subtitle, make_probe, make_file_info
    ) -> None:
        """A probe without video always reports no video stream."""
        probe = make_probe(make_audio(index=0), make_subtitle(index=1))

        decision = evaluate(
            probe,
            make_file_info(size_mb=1, duration_seconds=1.0),
            build_options(options),
        )

        assert not decision.process_file
        assert decision.reason_type is SkipReasonType.NO_VIDEO_STREAM
        assert "No video stream found" in decision.summary

    def test_empty_probe(self, make_file_info) -> None:
        decision = evaluate(
            MediaProbe(container="mkv"), make_file_info(), build_options()
        )
        assert decision.reason_type is SkipReasonType.NO_VIDEO_STREAM


class TestProperties:
    """Tests for pipeline-wide properties."""

    def test_decision_is_deterministic(self, make_probe, make_file_info) -> None:
        probe = make_probe()
        info = make_file_info(file_name="Old.Cartoon.1950.mkv")
        options = build_options()

        first = evaluate(probe, info, options)
        second = evaluate(probe, info, options)

        assert first == second

    def test_subtitles_do_not_change_audio_plan(
        self, make_video, make_audio, make_subtitle, make_probe, make_file_info
    ) -> None:
        audio = (
            make_audio(index=1, language="ger", channels=6),
            make_audio(index=2, language="eng", channels=2),
        )
        without_subs = evaluate(
            make_probe(make_video(), *audio), make_file_info(), build_options()
        )
        with_subs = evaluate(
            make_probe(make_video(), *audio, make_subtitle(index=3), make_subtitle(4)),
            make_file_info(),
            build_options(),
        )

        assert without_subs.audio_plan == with_subs.audio_plan

    @pytest.mark.parametrize(
        "breaker",
        ["container", "video", "subtitles", "audio"],
    )
    def test_one_unmet_conjunct_processes(
        self,
        breaker: str,
        make_video,
        make_audio,
        make_subtitle,
        make_probe,
        make_file_info,
    ) -> None:
        """Violating exactly one perfect-file condition forces processing."""
        video = make_video(codec="hevc" if breaker == "video" else "h264")
        streams = [
            video,
            make_audio(index=1, codec="ac3", channels=6),
            make_audio(
                index=2, codec="mp3" if breaker == "audio" else "aac", channels=2
            ),
        ]
        if breaker == "subtitles":
            streams.append(make_subtitle(index=3))
        probe = make_probe(
            *streams, container="mkv" if breaker == "container" else "mp4"
        )

        decision = evaluate(probe, make_file_info(), build_options())

        assert decision.process_file


class TestResponse:
    """Tests for the host response record."""

    def test_process_response(self, make_probe, make_file_info) -> None:
        decision = evaluate(make_probe(), make_file_info(), build_options())

        response = decision.to_response()

        assert response["processFile"] is True
        assert response["preset"].startswith(", -map 0:v:0 -map 0:a:0 -map 0:a:0")
        assert response["preset"].endswith("-movflags +faststart")
        assert response["container"] == ".mp4"
        assert response["FFmpegMode"] is True
        assert response["handBrakeMode"] is False
        assert response["reQueueAfter"] is False
        assert response["infoLog"] == decision.summary

    def test_skip_response(self, make_probe, make_file_info) -> None:
        decision = evaluate(
            make_probe(), make_file_info(duration_seconds=10.0), build_options()
        )

        response = decision.to_response()

        assert response["processFile"] is False
        assert response["preset"] == ""
        assert "Skipping short video" in response["infoLog"]

    def test_summary_uses_title(self, make_probe, make_file_info) -> None:
        decision = evaluate(
            make_probe(), make_file_info(), build_options(), title="My Library"
        )
        assert decision.summary.startswith("My Library\n")


class TestEvaluateFile:
    """Tests for the raw-input entry point."""

    def test_fixture_4k_hdr(self, load_ffprobe_fixture) -> None:
        decision = evaluate_file(load_ffprobe_fixture("movie_4k_hdr"))

        assert decision.process_file
        assert decision.tier is ContentTier.ELITE
        # eng eac3 kept, ger dropped, subtitles removed by default
        assert decision.directive.values("-map") == ["0:v:0", "0:a:0", "0:a:0"]
        assert decision.subtitle_args == ()

    def test_fixture_perfect(self, load_ffprobe_fixture) -> None:
        decision = evaluate_file(load_ffprobe_fixture("perfect_mp4"))
        assert decision.reason_type is SkipReasonType.ALREADY_PERFECT

    def test_fixture_audio_only(self, load_ffprobe_fixture) -> None:
        decision = evaluate_file(load_ffprobe_fixture("audio_only"))
        assert decision.reason_type is SkipReasonType.NO_VIDEO_STREAM

    def test_missing_probe_data(self) -> None:
        decision = evaluate_file({"format": {"filename": "/x.mkv"}})
        assert decision.reason_type is SkipReasonType.MISSING_PROBE_DATA

    def test_none_probe(self) -> None:
        decision = evaluate_file(None)
        assert decision.reason_type is SkipReasonType.MISSING_PROBE_DATA

    def test_invalid_options(self, load_ffprobe_fixture) -> None:
        decision = evaluate_file(
            load_ffprobe_fixture("movie_4k_hdr"), {"target_codec": "vp9"}
        )

        assert not decision.process_file
        assert decision.reason_type is SkipReasonType.INVALID_OPTIONS
        assert "target_codec" in decision.summary

    def test_profile_title_and_options(self, load_ffprobe_fixture) -> None:
        profile = get_profile("titan")

        decision = evaluate_file(load_ffprobe_fixture("movie_4k_hdr"), profile=profile)

        assert decision.summary.startswith(profile.title)
        assert decision.video_plan.encoder == "libx265"
        assert decision.scale_filter is None
        assert decision.subtitles_kept

    def test_raw_options_override_profile(self, load_ffprobe_fixture) -> None:
        decision = evaluate_file(
            load_ffprobe_fixture("movie_4k_hdr"),
            {"keep_subtitles": "false"},
            profile=get_profile("titan"),
        )
        assert not decision.subtitles_kept

    def test_release_year(self, load_ffprobe_fixture) -> None:
        decision = evaluate_file(
            load_ffprobe_fixture("movie_4k_hdr"),
            {"force_1080p": "false"},
            release_year=1968,
        )
        # 4K still wins over the classic year
        assert decision.tier is ContentTier.ELITE
        assert "Year: 1968" in decision.summary

    @pytest.mark.parametrize(
        "key", ["quality_level", "skip_small_files_mb", "thread_count"]
    )
    @pytest.mark.parametrize("value", ["inf", "-inf", "1e400", "nan"])
    def test_non_finite_numbers_use_defaults(
        self, key, value, load_ffprobe_fixture
    ) -> None:
        """Non-finite numeric options fall back to their defaults."""
        decision = evaluate_file(load_ffprobe_fixture("movie_4k_hdr"), {key: value})

        assert isinstance(decision, ProcessDecision)
        assert decision.video_plan.quality == 18

    def test_non_text_languages_are_invalid_options(self, load_ffprobe_fixture) -> None:
        decision = evaluate_file(
            load_ffprobe_fixture("movie_4k_hdr"), {"audio_languages": 5}
        )

        assert decision.reason_type is SkipReasonType.INVALID_OPTIONS
        assert "audio_languages" in decision.summary

    def test_malformed_stream_fields(self, load_ffprobe_fixture) -> None:
        """Badly typed stream fields degrade to unknown values."""
        data = load_ffprobe_fixture("movie_4k_hdr")
        data["streams"][1]["tags"] = ["eng"]
        data["streams"][1]["channels"] = 1e400

        decision = evaluate_file(data)

        assert isinstance(decision, ProcessDecision)
        assert decision.directive.values("-map") == ["0:v:0", "0:a:0", "0:a:0"]
        assert decision.audio_plan.tracks[0].channels == 2

    def test_non_mapping_format(self, load_ffprobe_fixture) -> None:
        data = load_ffprobe_fixture("movie_4k_hdr")
        data["format"] = ["matroska"]

        decision = evaluate_file(data)

        assert decision.process_file
