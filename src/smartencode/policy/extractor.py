"""Metadata extraction: typed views over one file's probe data.

Pure functions; the only failures are a missing probe and a probe without
a video stream, both raised as EngineError subclasses.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from smartencode.core.codecs import normalize_container_format
from smartencode.domain import FileInfo, MediaProbe, StreamInfo, StreamKind
from smartencode.policy.exceptions import MissingProbeDataError, NoVideoStreamError

logger = logging.getLogger(__name__)

# Anything above 1080p counts as high resolution
MAX_STANDARD_WIDTH = 1920
MAX_STANDARD_HEIGHT = 1080

# Transfer characteristics that mark HDR content: PQ (HDR10) and HLG
HDR_TRANSFER_CHARACTERISTICS: frozenset[str] = frozenset({"smpte2084", "arib-std-b67"})

# Four-digit release year between 1900 and 2029
_YEAR_PATTERN = re.compile(r"\b(19\d{2}|20[0-2]\d)\b")


@dataclass(frozen=True)
class MediaView:
    """Normalized view of a file used by the skip, classify and assemble stages."""

    video: StreamInfo
    audio_streams: tuple[StreamInfo, ...]
    subtitle_streams: tuple[StreamInfo, ...]
    container: str
    file_name: str
    file_path: str
    size_bytes: int | None
    duration_seconds: float | None
    release_year: int | None

    @property
    def width(self) -> int:
        return self.video.width or 0

    @property
    def height(self) -> int:
        return self.video.height or 0

    @property
    def is_high_resolution(self) -> bool:
        """True when the video exceeds 1920x1080 in either dimension."""
        return self.width > MAX_STANDARD_WIDTH or self.height > MAX_STANDARD_HEIGHT

    @property
    def is_hdr(self) -> bool:
        return is_hdr_transfer(self.video.color_transfer)

    @property
    def size_mb(self) -> float | None:
        if self.size_bytes is None:
            return None
        return self.size_bytes / (1024 * 1024)


def is_hdr_transfer(color_transfer: str | None) -> bool:
    """Check whether a color transfer characteristic is PQ or HLG."""
    if not color_transfer:
        return False
    return color_transfer.casefold().strip() in HDR_TRANSFER_CHARACTERISTICS


def extract_release_year(file_name: str) -> int | None:
    """Extract a release year (1900-2029) from a file name.

    The first four-digit match wins.

    Examples:
        extract_release_year("Old.Noir.Film.1955.mkv") -> 1955
        extract_release_year("Movie.2160p.mkv") -> None
    """
    match = _YEAR_PATTERN.search(file_name.casefold())
    return int(match.group(1)) if match else None


def extract_media_view(probe: MediaProbe | None, file_info: FileInfo) -> MediaView:
    """Build the typed view of a file.

    Args:
        probe: Probe data for the file (None if probing failed).
        file_info: File-level facts.

    Returns:
        MediaView for the downstream stages.

    Raises:
        MissingProbeDataError: If probe data is absent.
        NoVideoStreamError: If the probe contains no video stream.
    """
    if probe is None:
        raise MissingProbeDataError()

    video = next((s for s in probe.streams if s.kind is StreamKind.VIDEO), None)
    if video is None:
        raise NoVideoStreamError()

    if file_info.release_year is not None:
        release_year = file_info.release_year
    else:
        release_year = extract_release_year(file_info.file_name)

    view = MediaView(
        video=video,
        audio_streams=probe.streams_of(StreamKind.AUDIO),
        subtitle_streams=probe.streams_of(StreamKind.SUBTITLE),
        container=normalize_container_format(probe.container),
        file_name=file_info.file_name,
        file_path=file_info.file_path,
        size_bytes=file_info.size_bytes,
        duration_seconds=file_info.duration_seconds,
        release_year=release_year,
    )
    logger.debug(
        "Extracted %dx%d %s (hdr=%s), %d audio, %d subtitle, year=%s",
        view.width,
        view.height,
        video.codec,
        view.is_hdr,
        len(view.audio_streams),
        len(view.subtitle_streams),
        release_year,
    )
    return view
