"""Unit tests for the config commands."""

import tomllib
from pathlib import Path

from artifact_cleaner.cli.main import app
from artifact_cleaner.core.paths import APP_NAME
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigInit:
    """Tests for artifact-cleaner config init."""

    def test_writes_default_config(self, isolated_config_home: Path) -> None:
        """init writes the built-in profiles to the default location."""
        result = runner.invoke(app, ["config", "init"])

        assert result.exit_code == 0
        assert "Created default config" in result.stdout

        path = isolated_config_home / APP_NAME / "config.toml"
        with path.open("rb") as f:
            data = tomllib.load(f)
        assert data["max_depth"] == 10
        assert data["ignore_directories"] == [".git"]
        assert set(data["profiles"]) == {"py", "rust", "node", "custom"}

    def test_honours_config_option(self, tmp_path: Path) -> None:
        """--config selects where init writes."""
        target = tmp_path / "nested" / "cleaner.toml"

        result = runner.invoke(app, ["--config", str(target), "config", "init"])

        assert result.exit_code == 0
        assert target.is_file()

    def test_refuses_to_overwrite(self, config_file: Path) -> None:
        """init fails on an existing file without --force."""
        before = config_file.read_text()

        result = runner.invoke(app, ["-c", str(config_file), "config", "init"])

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert config_file.read_text() == before

    def test_force_overwrites(self, config_file: Path) -> None:
        """init --force replaces an existing file."""
        result = runner.invoke(app, ["-c", str(config_file), "config", "init", "--force"])

        assert result.exit_code == 0
        with config_file.open("rb") as f:
            data = tomllib.load(f)
        assert "node" in data["profiles"]


class TestConfigShow:
    """Tests for artifact-cleaner config show."""

    def test_shows_default_profiles(self) -> None:
        """Without a config file the built-in profiles are shown."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "Profiles" in result.stdout
        for name in ("py", "rust", "node", "custom"):
            assert name in result.stdout
        assert "Max depth: 10" in result.stdout

    def test_shows_config_file_profiles(self, config_file: Path) -> None:
        """Profiles come from the selected config file."""
        result = runner.invoke(app, ["-c", str(config_file), "config", "show"])

        assert result.exit_code == 0
        assert "rust" in result.stdout
        assert "node" not in result.stdout

    def test_invalid_config(self, tmp_path: Path) -> None:
        """A config that fails validation exits with an error."""
        bad = tmp_path / "bad.toml"
        bad.write_text("max_depth = -1\n")

        result = runner.invoke(app, ["-c", str(bad), "config", "show"])

        assert result.exit_code == 1


class TestConfigPath:
    """Tests for artifact-cleaner config path."""

    def test_default_path(self, isolated_config_home: Path) -> None:
        """path prints the XDG config location."""
        result = runner.invoke(app, ["config", "path"])

        assert result.exit_code == 0
        assert result.stdout.strip() == str(isolated_config_home / APP_NAME / "config.toml")

    def test_override_path(self, tmp_path: Path) -> None:
        """path prints the --config override."""
        target = tmp_path / "other.toml"

        result = runner.invoke(app, ["-c", str(target), "config", "path"])

        assert result.stdout.strip() == str(target)
