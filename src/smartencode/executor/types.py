"""Structured transcode directive types.

The directive is an ordered list of typed FFmpeg arguments. It is only
flattened to text at the host boundary (``TranscodeDirective.to_preset``),
so intermediate state stays inspectable in tests.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ArgSection(Enum):
    """Which part of the command an argument belongs to."""

    VIDEO_MAP = "video_map"
    AUDIO_MAP = "audio_map"
    SUBTITLE_MAP = "subtitle_map"
    FILTER = "filter"
    PIXEL_FORMAT = "pixel_format"
    VIDEO_CODEC = "video_codec"
    AUDIO_CODEC = "audio_codec"
    CONTAINER = "container"


@dataclass(frozen=True)
class FFmpegArg:
    """One FFmpeg option with an optional value."""

    flag: str
    value: str | None
    section: ArgSection

    def tokens(self) -> list[str]:
        if self.value is None:
            return [self.flag]
        return [self.flag, self.value]


@dataclass(frozen=True)
class TranscodeDirective:
    """Ordered output arguments plus the target container extension."""

    args: tuple[FFmpegArg, ...]
    container_ext: str = ".mp4"

    def section(self, section: ArgSection) -> tuple[FFmpegArg, ...]:
        """Return the arguments of one section, in order."""
        return tuple(arg for arg in self.args if arg.section is section)

    def values(self, flag: str) -> list[str | None]:
        """Return the values of every occurrence of a flag."""
        return [arg.value for arg in self.args if arg.flag == flag]

    def to_args(self) -> list[str]:
        """Flatten to an FFmpeg argument list."""
        tokens: list[str] = []
        for arg in self.args:
            tokens.extend(arg.tokens())
        return tokens

    def to_preset(self) -> str:
        """Serialize to the host's preset string.

        The host splits on the first comma into input and output arguments;
        the directive only carries output arguments.
        """
        return ", " + " ".join(self.to_args())
