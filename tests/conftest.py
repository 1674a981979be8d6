"""Shared test fixtures for SmartEncode."""

import json
from pathlib import Path
from typing import Any

import pytest

from smartencode.domain import FileInfo, MediaProbe, StreamInfo, StreamKind

MB = 1024 * 1024


@pytest.fixture
def make_video():
    """Factory for video streams (1080p h264 by default)."""

    def _create(
        index: int = 0,
        codec: str = "h264",
        width: int = 1920,
        height: int = 1080,
        color_transfer: str | None = None,
    ) -> StreamInfo:
        return StreamInfo(
            index=index,
            kind=StreamKind.VIDEO,
            codec=codec,
            width=width,
            height=height,
            color_transfer=color_transfer,
        )

    return _create


@pytest.fixture
def make_audio():
    """Factory for audio streams (5.1 eng ac3 by default)."""

    def _create(
        index: int = 1,
        codec: str = "ac3",
        channels: int | None = 6,
        language: str = "eng",
    ) -> StreamInfo:
        return StreamInfo(
            index=index,
            kind=StreamKind.AUDIO,
            codec=codec,
            channels=channels,
            language=language,
        )

    return _create


@pytest.fixture
def make_subtitle():
    """Factory for subtitle streams."""

    def _create(
        index: int = 3, codec: str = "subrip", language: str = "eng"
    ) -> StreamInfo:
        return StreamInfo(
            index=index, kind=StreamKind.SUBTITLE, codec=codec, language=language
        )

    return _create


@pytest.fixture
def make_probe(make_video, make_audio):
    """Factory for probes; defaults to one 1080p video and one 5.1 eng track."""

    def _create(*streams: StreamInfo, container: str | None = "mkv") -> MediaProbe:
        if not streams:
            streams = (make_video(), make_audio())
        return MediaProbe(container=container, streams=tuple(streams))

    return _create


@pytest.fixture
def make_file_info():
    """Factory for file info with the size given in megabytes."""

    def _create(
        file_name: str = "Some.Movie.2015.1080p.mkv",
        file_path: str | None = None,
        size_mb: float | None = 2000,
        duration_seconds: float | None = 5400.0,
        release_year: int | None = None,
    ) -> FileInfo:
        if file_path is None:
            file_path = f"/media/movies/{file_name}"
        return FileInfo(
            file_name=file_name,
            file_path=file_path,
            size_bytes=int(size_mb * MB) if size_mb is not None else None,
            duration_seconds=duration_seconds,
            release_year=release_year,
        )

    return _create


@pytest.fixture
def ffprobe_fixtures_dir() -> Path:
    """Return the path to the ffprobe fixtures directory."""
    return Path(__file__).parent / "fixtures" / "ffprobe"


@pytest.fixture
def load_ffprobe_fixture(ffprobe_fixtures_dir: Path):
    """Factory that loads an ffprobe JSON fixture by name (without .json)."""

    def _load(name: str) -> dict[str, Any]:
        return json.loads((ffprobe_fixtures_dir / f"{name}.json").read_text())

    return _load
