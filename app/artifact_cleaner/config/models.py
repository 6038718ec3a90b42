"""Pydantic models for the artifact-cleaner config file.

The config file holds a global pair of name lists, a default depth
budget, and one named profile per ecosystem. A profile is resolved
into an immutable ResolvedProfile before any scanning happens.
"""

from dataclasses import dataclass
from typing import Annotated, Self

from pydantic import AfterValidator, BaseModel, ConfigDict, Field, model_validator

from artifact_cleaner.cleaning.models import NameSet
from artifact_cleaner.cleaning.scanner import DEFAULT_MAX_DEPTH


def _validate_names(names: list[str]) -> list[str]:
    """Validate that every entry is a plain, non-empty directory basename."""
    for name in names:
        if not name.strip():
            msg = "Directory names cannot be empty"
            raise ValueError(msg)
        if "/" in name or "\\" in name:
            msg = f"Directory names must be basenames, not paths: {name!r}"
            raise ValueError(msg)
        if name in (".", ".."):
            msg = f"Directory name {name!r} is not allowed"
            raise ValueError(msg)
    return names


DirectoryNames = Annotated[list[str], AfterValidator(_validate_names)]


class ProfileConfig(BaseModel):
    """Name lists for a single profile.

    Attributes:
        artifact_directories: Basenames of directories to delete.
        ignore_directories: Basenames of directories never to enter.
    """

    model_config = ConfigDict(extra="forbid")

    artifact_directories: Annotated[
        DirectoryNames,
        Field(default_factory=list, description="Directory names to delete"),
    ]
    ignore_directories: Annotated[
        DirectoryNames,
        Field(default_factory=list, description="Directory names to skip"),
    ]

    @model_validator(mode="after")
    def validate_disjoint(self) -> Self:
        """Validate that no name is both an artifact and an ignore name."""
        overlap = set(self.artifact_directories) & set(self.ignore_directories)
        if overlap:
            msg = f"Names cannot be both artifact and ignore directories: {sorted(overlap)}"
            raise ValueError(msg)
        return self


class CleanerConfig(BaseModel):
    """Top-level config file model.

    The global name lists apply to every profile and are merged into
    the profile's own lists on resolution.

    Attributes:
        max_depth: Default depth budget for scans.
        artifact_directories: Artifact names shared by all profiles.
        ignore_directories: Ignore names shared by all profiles.
        profiles: Named profiles (e.g., "py", "rust", "custom").
    """

    model_config = ConfigDict(extra="forbid")

    max_depth: Annotated[
        int,
        Field(ge=0, description="Maximum recursion depth"),
    ] = DEFAULT_MAX_DEPTH
    artifact_directories: Annotated[
        DirectoryNames,
        Field(default_factory=list, description="Global directory names to delete"),
    ]
    ignore_directories: Annotated[
        DirectoryNames,
        Field(default_factory=list, description="Global directory names to skip"),
    ]
    profiles: Annotated[
        dict[str, ProfileConfig],
        Field(default_factory=dict, description="Named profiles"),
    ]

    @model_validator(mode="after")
    def validate_global_disjoint(self) -> Self:
        """Validate that the global lists do not overlap."""
        overlap = set(self.artifact_directories) & set(self.ignore_directories)
        if overlap:
            msg = f"Names cannot be both artifact and ignore directories: {sorted(overlap)}"
            raise ValueError(msg)
        return self

    @property
    def profile_names(self) -> list[str]:
        """Get the configured profile names in sorted order."""
        return sorted(self.profiles)


@dataclass(frozen=True, slots=True)
class ResolvedProfile:
    """Immutable scan parameters for one invocation.

    Attributes:
        name: Profile the parameters were resolved from.
        artifact_names: Profile artifact names merged with the global ones.
        ignore_names: Profile ignore names merged with the global ones.
        max_depth: Depth budget for the scan.
    """

    name: str
    artifact_names: NameSet
    ignore_names: NameSet
    max_depth: int

    def __post_init__(self) -> None:
        """Validate resolved profile data after initialization."""
        if self.max_depth < 0:
            msg = f"max_depth must be >= 0, got {self.max_depth}"
            raise ValueError(msg)

    @property
    def overlapping_names(self) -> NameSet:
        """Names present in both sets; the artifact classification wins for these."""
        ignore = set(self.ignore_names)
        return tuple(name for name in self.artifact_names if name in ignore)
