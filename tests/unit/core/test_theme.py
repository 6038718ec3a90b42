"""Unit tests for console colours."""

from collections.abc import Iterator
from pathlib import Path

import pytest
from artifact_cleaner.core.paths import APP_NAME
from artifact_cleaner.core.theme import ThemeColors, get_theme, load_theme
from pydantic import ValidationError
from rich.theme import Theme


@pytest.fixture
def user_theme(isolated_config_home: Path) -> Path:
    """Location of the user theme file (not created)."""
    path = isolated_config_home / APP_NAME / "theme.toml"
    path.parent.mkdir(parents=True)
    return path


@pytest.fixture
def fresh_theme_cache() -> Iterator[None]:
    get_theme.cache_clear()
    yield
    get_theme.cache_clear()


class TestThemeColors:
    """Tests for colour validation."""

    @pytest.mark.parametrize("value", ["#abc", "#A0B1C2", "  #226666 "])
    def test_accepts_hex(self, value: str) -> None:
        assert ThemeColors(artifact=value).artifact == value.strip()

    @pytest.mark.parametrize("value", ["red", "226666", "#12", "#12345", "#zzzzzz"])
    def test_rejects_non_hex(self, value: str) -> None:
        with pytest.raises(ValidationError):
            ThemeColors(ignored=value)

    def test_unknown_colour_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ThemeColors(deleted="#ffffff")  # type: ignore[call-arg]

    def test_styles_cover_markup_names(self) -> None:
        """Every style name used in tables and messages is defined."""
        styles = ThemeColors().styles()

        for name in ("artifact", "ignored", "bold_header", "border", "muted", "dim", "info"):
            assert name in styles
        assert styles["error"].startswith("bold ")


class TestLoadTheme:
    """Tests for load_theme."""

    def test_bundled_palette_matches_defaults(self, user_theme: Path) -> None:
        """Without overrides the bundled file yields the built-in palette."""
        assert load_theme() == ThemeColors()

    def test_partial_override(self, user_theme: Path) -> None:
        """A user file overrides only the colours it names."""
        user_theme.write_text('[colors]\nartifact = "#ff0000"\n')

        colors = load_theme()

        assert colors.artifact == "#ff0000"
        assert colors.ignored == ThemeColors().ignored

    def test_explicit_user_path(self, tmp_path: Path) -> None:
        override = tmp_path / "mine.toml"
        override.write_text('[colors]\nignored = "#000"\n')

        assert load_theme(override).ignored == "#000"

    def test_invalid_colour_falls_back(self, user_theme: Path, caplog: pytest.LogCaptureFixture) -> None:
        """An invalid override keeps the default palette and logs a warning."""
        user_theme.write_text('[colors]\nartifact = "orange"\n')

        assert load_theme() == ThemeColors()
        assert "Invalid theme colours" in caplog.text

    def test_broken_toml_ignored(self, user_theme: Path, caplog: pytest.LogCaptureFixture) -> None:
        user_theme.write_text("[colors\n")

        assert load_theme() == ThemeColors()
        assert "Ignoring theme file" in caplog.text

    def test_colors_not_a_table(self, user_theme: Path) -> None:
        user_theme.write_text('colors = "#ffffff"\n')

        assert load_theme() == ThemeColors()


class TestGetTheme:
    """Tests for get_theme."""

    def test_builds_rich_theme_once(self, fresh_theme_cache: None) -> None:
        theme = get_theme()

        assert isinstance(theme, Theme)
        assert "artifact" in theme.styles
        assert get_theme() is theme
