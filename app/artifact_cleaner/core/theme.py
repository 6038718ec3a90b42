"""Console colours for artifact-cleaner.

The bundled data/theme.toml holds the default palette. A theme.toml in
the user config directory may override any subset of it.
"""

import logging
import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from artifact_cleaner.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


def _check_hex(value: str) -> str:
    digits = value.strip().removeprefix("#")
    if not value.strip().startswith("#") or len(digits) not in (3, 6):
        raise ValueError(f"expected #RGB or #RRGGBB, got {value!r}")
    try:
        int(digits, 16)
    except ValueError:
        raise ValueError(f"not a hex colour: {value!r}") from None
    return value.strip()


HexColor = Annotated[str, AfterValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Palette used by the tables and status messages."""

    model_config = ConfigDict(extra="forbid")

    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    artifact: HexColor = "#f5b332"
    ignored: HexColor = "#226666"

    def styles(self) -> dict[str, str]:
        """Map Rich style names used in markup to colour definitions."""
        return {
            "muted": self.muted,
            "dim": self.muted,
            "border": self.border,
            "bold_header": f"bold {self.header}",
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
            "info": self.info,
            "artifact": self.artifact,
            "ignored": self.ignored,
        }


def _read_colors(source: Path) -> dict[str, str]:
    """Read the [colors] table of a theme file; missing or broken files give {}."""
    try:
        with source.open("rb") as f:
            table = tomllib.load(f).get("colors", {})
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", source, e)
        return {}

    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", source)
        return {}
    return {str(k): v for k, v in table.items() if isinstance(v, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Load the bundled palette and apply user overrides.

    Args:
        user_path: Override file. Defaults to theme.toml in the config dir.

    Returns:
        Validated colours. Invalid overrides fall back to the built-in palette.
    """
    bundled = Path(str(resources.files("artifact_cleaner.data").joinpath("theme.toml")))
    colors = _read_colors(bundled)
    colors.update(_read_colors(user_path or get_user_theme_path()))

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme colours, using defaults: %s", e)
        return ThemeColors()


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Rich theme for the shared consoles, built once per process."""
    return Theme(load_theme().styles())
