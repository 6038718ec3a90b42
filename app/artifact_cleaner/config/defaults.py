"""Built-in default configuration.

Used when no config file exists and written out by ``config init``.
"""

from artifact_cleaner.cleaning.scanner import DEFAULT_MAX_DEPTH
from artifact_cleaner.config.models import CleanerConfig, ProfileConfig

DEFAULT_PROFILE = "py"

# Global ignore names apply to every profile.
DEFAULT_IGNORE_DIRECTORIES: list[str] = [".git"]

DEFAULT_PROFILES: dict[str, dict[str, list[str]]] = {
    "py": {
        "artifact_directories": ["__pycache__", ".pytest_cache", ".mypy_cache", ".ruff_cache"],
        "ignore_directories": [],
    },
    "rust": {
        "artifact_directories": ["target"],
        "ignore_directories": [],
    },
    "node": {
        "artifact_directories": ["node_modules"],
        "ignore_directories": [],
    },
    # User-defined names; empty until edited.
    "custom": {
        "artifact_directories": [],
        "ignore_directories": [],
    },
}


def get_default_config() -> CleanerConfig:
    """Create the built-in default configuration.

    Returns:
        CleanerConfig with the default profiles and global ignore list.
    """
    return CleanerConfig(
        max_depth=DEFAULT_MAX_DEPTH,
        artifact_directories=[],
        ignore_directories=list(DEFAULT_IGNORE_DIRECTORIES),
        profiles={
            name: ProfileConfig(
                artifact_directories=list(lists["artifact_directories"]),
                ignore_directories=list(lists["ignore_directories"]),
            )
            for name, lists in DEFAULT_PROFILES.items()
        },
    )
