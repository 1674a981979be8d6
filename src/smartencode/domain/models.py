"""Domain models for SmartEncode.

These records are supplied by the host once per file and are never mutated
by the engine.
"""

from dataclasses import dataclass

from .enums import StreamKind

# Language tag assumed when a stream carries none
UNDETERMINED_LANGUAGE = "und"


@dataclass(frozen=True)
class StreamInfo:
    """A single probed stream (domain model)."""

    index: int  # Absolute stream index within the file
    kind: StreamKind
    codec: str | None = None
    # Video-specific fields
    width: int | None = None
    height: int | None = None
    color_transfer: str | None = None  # e.g., "smpte2084" (PQ), "arib-std-b67" (HLG)
    # Audio-specific fields
    channels: int | None = None
    language: str = UNDETERMINED_LANGUAGE


@dataclass(frozen=True)
class MediaProbe:
    """Probed container and stream layout of one media file."""

    container: str | None
    streams: tuple[StreamInfo, ...] = ()

    def streams_of(self, kind: StreamKind) -> tuple[StreamInfo, ...]:
        """Return streams of the given kind in probe order."""
        return tuple(s for s in self.streams if s.kind is kind)


@dataclass(frozen=True)
class FileInfo:
    """File-level facts about the media file."""

    file_name: str
    file_path: str = ""
    size_bytes: int | None = None
    duration_seconds: float | None = None
    # Externally supplied release year (e.g., from a library manager)
    release_year: int | None = None

    @property
    def size_mb(self) -> float | None:
        """File size in mebibytes, or None if unknown."""
        if self.size_bytes is None:
            return None
        return self.size_bytes / (1024 * 1024)
