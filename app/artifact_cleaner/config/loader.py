"""Config file I/O and profile resolution.

This module provides functions for loading and saving the config file
in TOML format with validation via Pydantic models, and for resolving
a named profile into the immutable parameters a scan needs.
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile

import tomli_w
from pydantic import ValidationError

from artifact_cleaner.config.defaults import get_default_config
from artifact_cleaner.config.models import CleanerConfig, ResolvedProfile
from artifact_cleaner.core.paths import get_config_path

logger = logging.getLogger(__name__)


class ConfigError(Exception):
    """Base exception for config-related errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


class ConfigValidationError(ConfigError):
    """Raised when config content is invalid."""


class UnknownProfileError(ConfigError):
    """Raised when a requested profile is not configured."""

    def __init__(self, name: str, available: list[str]) -> None:
        choices = ", ".join(available) or "none"
        super().__init__(f"Unknown profile '{name}' (available: {choices})")
        self.name = name
        self.available = available


def load_config(path: Path | None = None) -> CleanerConfig:
    """Load and validate the config from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated CleanerConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigValidationError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax in {config_path}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return CleanerConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigValidationError(f"Invalid config content in {config_path}: {e}") from e


def load_config_or_default(path: Path | None = None) -> CleanerConfig:
    """Load the config file, falling back to built-in defaults if it is missing.

    Only a missing file falls back; unreadable or invalid files still raise.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        CleanerConfig from the file, or the default config.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file at %s, using defaults", path or get_config_path())
        return get_default_config()


def save_config(config: CleanerConfig, path: Path | None = None) -> Path:
    """Save the config to a TOML file.

    The file is written atomically by first writing to a temporary file
    in the same directory and then using os.replace() for atomic rename.

    Args:
        config: The CleanerConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()

    try:
        config_path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Cannot create config directory {config_path.parent}: {e}") from e

    data = config.model_dump(mode="json")

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    logger.info("Saved config to %s", config_path)
    return config_path


def create_default_config(path: Path | None = None, overwrite: bool = False) -> Path:
    """Write the built-in default config to a file.

    Args:
        path: Destination path. If None, uses the default config path.
        overwrite: Replace an existing file instead of refusing.

    Returns:
        Path where the config was written.

    Raises:
        ConfigError: If the file exists and overwrite is False, or writing fails.
    """
    config_path = path or get_config_path()
    if config_path.exists() and not overwrite:
        raise ConfigError(f"Config already exists: {config_path}")
    return save_config(get_default_config(), config_path)


def _merge_names(profile_names: list[str], global_names: list[str]) -> tuple[str, ...]:
    """Merge profile and global names, profile first, dropping duplicates."""
    return tuple(dict.fromkeys([*profile_names, *global_names]))


def resolve_profile(
    config: CleanerConfig,
    name: str,
    max_depth: int | None = None,
) -> ResolvedProfile:
    """Resolve a named profile into immutable scan parameters.

    Args:
        config: Loaded configuration.
        name: Profile to resolve.
        max_depth: Explicit depth budget overriding the configured one.

    Returns:
        ResolvedProfile with merged name sets.

    Raises:
        UnknownProfileError: If the profile is not configured.
        ConfigValidationError: If max_depth is negative.
    """
    profile = config.profiles.get(name)
    if profile is None:
        raise UnknownProfileError(name, config.profile_names)

    depth = config.max_depth if max_depth is None else max_depth
    if depth < 0:
        raise ConfigValidationError(f"max_depth must be >= 0, got {depth}")

    resolved = ResolvedProfile(
        name=name,
        artifact_names=_merge_names(profile.artifact_directories, config.artifact_directories),
        ignore_names=_merge_names(profile.ignore_directories, config.ignore_directories),
        max_depth=depth,
    )

    if resolved.overlapping_names:
        logger.warning(
            "Profile '%s' lists %s as both artifact and ignore directories; "
            "they will be treated as artifacts",
            name,
            ", ".join(resolved.overlapping_names),
        )
    return resolved
