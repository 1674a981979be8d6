"""Option profile management.

Profiles store named option presets for different deployments (NAS
streaming, high-end workstation, ...) and are applied via --profile.
Built-in profiles reproduce the historical rule-set variants; user profiles
are YAML files in ~/.smartencode/profiles/.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import yaml

from smartencode.config.models import LoggingConfig, Profile

DEFAULT_PROFILE_TITLE = "SmartEncode"


class ProfileError(Exception):
    """Error loading or validating a profile."""

    pass


class ProfileNotFoundError(ProfileError):
    """Profile does not exist."""

    pass


BUILTIN_PROFILES: dict[str, Profile] = {
    "final": Profile(
        name="final",
        title="SmartEncode Final v2.1",
        description=(
            "H.264 tier presets, first audio track only, subtitles removed. "
            "Skips only files with AC3 5.1 + AAC stereo and no subtitles."
        ),
        options={
            "target_codec": "h264",
            "encoder_type": "cpu",
            "keep_subtitles": False,
            "force_1080p": True,
            "perfect_audio_check": "strict",
            "audio_selection": "first",
        },
    ),
    "nas": Profile(
        name="nas",
        title="SmartEncode v2.5 (NAS-Centric Edition)",
        description=(
            "CPU H.264 for NAS playback: skips small and short files, "
            "size-adaptive preset and thread count."
        ),
        options={
            "target_codec": "h264",
            "encoder_type": "cpu",
            "quality_level": "22",
            "cpu_speed_preset": "auto",
            "keep_subtitles": False,
            "force_1080p": True,
            "skip_small_files_mb": "100",
            "thread_count": "0",
            "perfect_audio_check": "lenient",
        },
    ),
    "titan": Profile(
        name="titan",
        title="SmartEncode v3.0 (Titan Edition)",
        description=(
            "H.265 by default, CPU or GPU encoders, subtitles kept, no downscale."
        ),
        options={
            "target_codec": "h265",
            "encoder_type": "cpu",
            "quality_level": "22",
            "cpu_speed_preset": "medium",
            "keep_subtitles": True,
            "force_1080p": False,
            "perfect_audio_check": "lenient",
        },
    ),
}

_PROFILE_KEYS = frozenset({"name", "title", "description", "options", "logging"})
_LOGGING_KEYS = frozenset(
    {"level", "file", "format", "include_stderr", "max_bytes", "backup_count"}
)


def get_profiles_directory() -> Path:
    """Get the user profiles directory path.

    Returns:
        Path to ~/.smartencode/profiles/
    """
    return Path.home() / ".smartencode" / "profiles"


def list_profiles(profiles_dir: Path | None = None) -> list[str]:
    """List available profile names (built-in first, then user profiles).

    Returns:
        List of profile names (without .yaml extension).
    """
    names = list(BUILTIN_PROFILES)
    profiles_dir = profiles_dir or get_profiles_directory()
    if profiles_dir.exists():
        names.extend(
            sorted(
                p.stem
                for p in profiles_dir.glob("*.yaml")
                if p.is_file()
                and not p.name.startswith(".")
                and p.stem not in BUILTIN_PROFILES
            )
        )
    return names


def get_profile(name: str, profiles_dir: Path | None = None) -> Profile:
    """Return a built-in profile or load a user profile by name.

    Built-in names always resolve to the built-in profile.

    Raises:
        ProfileNotFoundError: If the profile doesn't exist.
        ProfileError: If the profile is invalid.
    """
    if name in BUILTIN_PROFILES:
        return BUILTIN_PROFILES[name]

    if not re.match(r"^[a-zA-Z0-9_-]+$", name):
        raise ProfileError(f"Profile name must be alphanumeric (with - or _): {name}")

    profiles_dir = profiles_dir or get_profiles_directory()
    profile_path = profiles_dir / f"{name}.yaml"
    if not profile_path.exists():
        raise ProfileNotFoundError(f"Profile not found: {name}")

    return load_profile_file(profile_path)


def load_profile_file(path: Path) -> Profile:
    """Load a profile from a YAML file.

    Args:
        path: Path to the profile YAML file.

    Returns:
        Loaded Profile.

    Raises:
        ProfileNotFoundError: If the file doesn't exist.
        ProfileError: If the YAML or its structure is invalid.
    """
    if not path.exists():
        raise ProfileNotFoundError(f"Profile not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ProfileError(f"Invalid YAML in profile {path.name}: {e}") from e

    if not isinstance(data, dict):
        raise ProfileError(f"Profile {path.name} must be a mapping")

    name = str(data.get("name", path.stem))
    unknown_keys = set(data) - _PROFILE_KEYS
    if unknown_keys:
        raise ProfileError(
            f"Unknown keys in profile '{name}': {sorted(unknown_keys)}. "
            f"Valid keys are: {sorted(_PROFILE_KEYS)}"
        )

    options = data.get("options") or {}
    if not isinstance(options, dict):
        raise ProfileError(f"'options' in profile '{name}' must be a mapping")

    logging_config: LoggingConfig | None = None
    if data.get("logging") is not None:
        logging_config = _build_logging_config(data["logging"], name)

    return Profile(
        name=name,
        title=str(data.get("title") or DEFAULT_PROFILE_TITLE),
        description=data.get("description"),
        options=options,
        logging=logging_config,
    )


def _build_logging_config(data: Any, profile_name: str) -> LoggingConfig:
    """Construct LoggingConfig with validation for unknown keys."""
    if not isinstance(data, dict):
        raise ProfileError(f"'logging' in profile '{profile_name}' must be a mapping")

    unknown_keys = set(data) - _LOGGING_KEYS
    if unknown_keys:
        raise ProfileError(
            f"Unknown keys in 'logging' section of profile '{profile_name}': "
            f"{sorted(unknown_keys)}. Valid keys are: {sorted(_LOGGING_KEYS)}"
        )

    logging_data = dict(data)
    if logging_data.get("file"):
        logging_data["file"] = Path(logging_data["file"]).expanduser()
    try:
        return LoggingConfig(**logging_data)
    except (TypeError, ValueError) as e:
        raise ProfileError(
            f"Invalid 'logging' configuration in profile '{profile_name}': {e}"
        ) from e
