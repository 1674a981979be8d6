"""Unit tests for domain records and enums."""

from smartencode.domain import (
    ContentTier,
    EncoderType,
    FileInfo,
    MediaProbe,
    StreamInfo,
    StreamKind,
    TargetCodec,
)


class TestTargetCodec:
    """Tests for TargetCodec."""

    def test_probe_name_for_h265_is_hevc(self) -> None:
        """ffprobe reports H.265 as hevc."""
        assert TargetCodec.H265.probe_name == "hevc"

    def test_probe_name_defaults_to_value(self) -> None:
        assert TargetCodec.H264.probe_name == "h264"
        assert TargetCodec.AV1.probe_name == "av1"


class TestEncoderType:
    """Tests for EncoderType."""

    def test_cpu_is_not_hardware(self) -> None:
        assert not EncoderType.CPU.is_hardware

    def test_gpu_backends_are_hardware(self) -> None:
        for encoder_type in (
            EncoderType.GPU_AMD,
            EncoderType.GPU_NVIDIA,
            EncoderType.GPU_INTEL,
        ):
            assert encoder_type.is_hardware


class TestContentTier:
    """Tests for ContentTier."""

    def test_fixed_set_of_tiers(self) -> None:
        """Exactly four tiers exist."""
        assert {t.value for t in ContentTier} == {
            "general",
            "animation",
            "classic",
            "4k_elite",
        }


class TestMediaProbe:
    """Tests for MediaProbe."""

    def test_streams_of_preserves_order(self) -> None:
        """streams_of returns streams of one kind in probe order."""
        probe = MediaProbe(
            container="mkv",
            streams=(
                StreamInfo(index=0, kind=StreamKind.VIDEO, codec="h264"),
                StreamInfo(index=1, kind=StreamKind.AUDIO, codec="dts"),
                StreamInfo(index=2, kind=StreamKind.SUBTITLE, codec="subrip"),
                StreamInfo(index=3, kind=StreamKind.AUDIO, codec="aac"),
            ),
        )

        audio = probe.streams_of(StreamKind.AUDIO)

        assert [s.index for s in audio] == [1, 3]

    def test_default_language_is_undetermined(self) -> None:
        stream = StreamInfo(index=1, kind=StreamKind.AUDIO)
        assert stream.language == "und"


class TestFileInfo:
    """Tests for FileInfo."""

    def test_size_mb(self) -> None:
        info = FileInfo(file_name="a.mkv", size_bytes=50 * 1024 * 1024)
        assert info.size_mb == 50

    def test_size_mb_unknown(self) -> None:
        assert FileInfo(file_name="a.mkv").size_mb is None
