"""Configuration management for SmartEncode.

- Profiles: built-in rule-set variants and user YAML presets
- LoggingConfig: logging destinations and format
"""

from smartencode.config.models import LoggingConfig, Profile
from smartencode.config.profiles import (
    BUILTIN_PROFILES,
    DEFAULT_PROFILE_TITLE,
    ProfileError,
    ProfileNotFoundError,
    get_profile,
    get_profiles_directory,
    list_profiles,
    load_profile_file,
)

__all__ = [
    # Models
    "LoggingConfig",
    "Profile",
    # Profiles
    "BUILTIN_PROFILES",
    "DEFAULT_PROFILE_TITLE",
    "ProfileError",
    "ProfileNotFoundError",
    "get_profile",
    "get_profiles_directory",
    "list_profiles",
    "load_profile_file",
]
