"""Encode option model and the boundary step that builds it.

Options arrive from the host as loosely typed values (the plugin UI hands
every input over as a string). ``build_options`` merges profile defaults
with the raw values and validates them once, so the pipeline only ever
sees a complete, frozen EncodeOptions.

Malformed numeric values are recovered by substituting the documented
default and logging a warning. Invalid enumerated values are rejected.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from pydantic import (
    AliasChoices,
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from smartencode.domain import (
    AudioSelectionMode,
    ContentTier,
    EncoderType,
    PerfectAudioCheck,
    TargetCodec,
)
from smartencode.policy.exceptions import OptionsError

if TYPE_CHECKING:
    from smartencode.config.models import Profile

logger = logging.getLogger(__name__)

# Valid named speed presets (slowest to fastest)
VALID_PRESETS = (
    "ultrafast",
    "superfast",
    "veryfast",
    "faster",
    "fast",
    "medium",
    "slow",
    "slower",
    "veryslow",
)

# Speed preset value that derives the preset from file size
AUTO_PRESET = "auto"

# Audio languages kept when filtering source tracks
DEFAULT_AUDIO_LANGUAGES: frozenset[str] = frozenset(
    {"da", "dan", "dansk", "en", "eng", "english", "und"}
)

_TARGET_CODEC_ALIASES = {"hevc": "h265", "x265": "h265", "avc": "h264", "x264": "h264"}
_TIER_ALIASES = {"elite": "4k_elite", "4k": "4k_elite"}


def _parse_lenient_int(value: Any, field_name: str, default: int | None) -> int | None:
    """Parse an integer option, substituting the default when malformed."""
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if not text:
        return default
    try:
        number = float(text)
    except ValueError:
        number = math.nan
    if not math.isfinite(number):
        logger.warning(
            "Invalid %s value %r, using default %s", field_name, value, default
        )
        return default
    return int(number)


class EncodeOptions(BaseModel):
    """Per-invocation encoding configuration.

    Field names match the host-facing option names.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_codec: TargetCodec = TargetCodec.H264
    encoder_type: EncoderType = EncoderType.CPU

    quality_level: int | None = Field(
        default=None,
        ge=0,
        le=63,
        validation_alias=AliasChoices("quality_level", "custom_crf", "base_crf"),
    )
    """CRF/QP override; None uses the content tier's default."""

    cpu_speed_preset: str | None = None
    """Named preset, 'auto' for size-adaptive, None for the tier's preset."""

    enable_smart_tuning: bool = True
    keep_subtitles: bool = False
    force_1080p: bool = True
    skip_small_files_mb: int = Field(default=0, ge=0)
    thread_count: int = Field(default=0, ge=0)

    force_preset: ContentTier | None = None
    """Explicit content tier; None lets the classifier decide."""

    perfect_audio_check: PerfectAudioCheck = PerfectAudioCheck.STRICT
    audio_selection: AudioSelectionMode = AudioSelectionMode.LANGUAGES
    audio_languages: frozenset[str] = DEFAULT_AUDIO_LANGUAGES

    @field_validator("target_codec", mode="before")
    @classmethod
    def normalize_target_codec(cls, v: Any) -> Any:
        """Accept codec aliases such as 'hevc'."""
        if isinstance(v, str):
            v = v.casefold().strip()
            return _TARGET_CODEC_ALIASES.get(v, v)
        return v

    @field_validator(
        "encoder_type", "perfect_audio_check", "audio_selection", mode="before"
    )
    @classmethod
    def normalize_choice(cls, v: Any) -> Any:
        """Compare enumerated choices case-insensitively."""
        if isinstance(v, str):
            return v.casefold().strip()
        return v

    @field_validator("quality_level", mode="before")
    @classmethod
    def parse_quality_level(cls, v: Any) -> int | None:
        """Empty or malformed quality falls back to the tier default."""
        value = _parse_lenient_int(v, "quality_level", None)
        if value is not None and not 0 <= value <= 63:
            logger.warning("Out of range quality_level %r, using tier default", v)
            return None
        return value

    @field_validator("skip_small_files_mb", "thread_count", mode="before")
    @classmethod
    def parse_count(cls, v: Any, info: ValidationInfo) -> int:
        """Empty or malformed counts fall back to 0 (disabled / auto)."""
        value = _parse_lenient_int(v, info.field_name, 0)
        if value is not None and value < 0:
            logger.warning("Negative %s value %r, using 0", info.field_name, v)
            return 0
        return value if value is not None else 0

    @field_validator("cpu_speed_preset", mode="before")
    @classmethod
    def validate_speed_preset(cls, v: Any) -> str | None:
        """Validate the named speed preset."""
        if v is None:
            return None
        text = str(v).casefold().strip()
        if not text:
            return None
        if text != AUTO_PRESET and text not in VALID_PRESETS:
            raise ValueError(
                f"Invalid cpu_speed_preset '{v}'. "
                f"Must be '{AUTO_PRESET}' or one of: {', '.join(VALID_PRESETS)}"
            )
        return text

    @field_validator("force_preset", mode="before")
    @classmethod
    def normalize_force_preset(cls, v: Any) -> Any:
        """Map 'auto' (or empty) to None and accept tier aliases."""
        if v is None:
            return None
        if isinstance(v, str):
            text = v.casefold().strip()
            if text in ("", "auto"):
                return None
            return _TIER_ALIASES.get(text, text)
        return v

    @field_validator("audio_languages", mode="before")
    @classmethod
    def parse_audio_languages(cls, v: Any) -> frozenset[str]:
        """Accept a comma-separated string or an iterable of tags."""
        if v is None:
            return DEFAULT_AUDIO_LANGUAGES
        if isinstance(v, str):
            items = v.split(",")
        elif isinstance(v, Iterable) and not isinstance(v, Mapping):
            items = list(v)
        else:
            items = [v]
        if not all(isinstance(item, str) for item in items):
            raise ValueError(
                "audio_languages must be a comma-separated string or a list of tags"
            )
        languages = frozenset(item.casefold().strip() for item in items)
        languages = frozenset(lang for lang in languages if lang)
        if not languages:
            raise ValueError("audio_languages must name at least one language")
        return languages


def build_options(
    raw: Mapping[str, Any] | EncodeOptions | None = None,
    profile: Profile | None = None,
) -> EncodeOptions:
    """Build a validated EncodeOptions value.

    Precedence (highest wins):
        1. Raw option values (None values are ignored)
        2. Profile option overrides
        3. Model defaults

    Args:
        raw: Option values from the host, or an already built EncodeOptions.
        profile: Optional profile whose options act as defaults.

    Returns:
        Frozen EncodeOptions.

    Raises:
        OptionsError: If an option is unknown or has an invalid value.
    """
    if isinstance(raw, EncodeOptions):
        return raw

    merged: dict[str, Any] = {}
    if profile is not None:
        merged.update(profile.options)
    if raw:
        merged.update({key: value for key, value in raw.items() if value is not None})

    try:
        return EncodeOptions.model_validate(merged)
    except ValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ())) or None
        raise OptionsError(
            f"Invalid encode options: {first.get('msg', str(e))}"
            + (f" (field: {field})" if field else ""),
            field=field,
        ) from e
