"""Configuration loading and profile resolution.

This module provides the config file models, the built-in default
profiles, and the resolver that turns a profile into scan parameters.
"""

from artifact_cleaner.config.defaults import DEFAULT_PROFILE, get_default_config
from artifact_cleaner.config.loader import (
    ConfigError,
    ConfigNotFoundError,
    ConfigParseError,
    ConfigValidationError,
    UnknownProfileError,
    create_default_config,
    load_config,
    load_config_or_default,
    resolve_profile,
    save_config,
)
from artifact_cleaner.config.models import CleanerConfig, ProfileConfig, ResolvedProfile

__all__ = [
    "DEFAULT_PROFILE",
    "CleanerConfig",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigParseError",
    "ConfigValidationError",
    "ProfileConfig",
    "ResolvedProfile",
    "UnknownProfileError",
    "create_default_config",
    "get_default_config",
    "load_config",
    "load_config_or_default",
    "resolve_profile",
    "save_config",
]
