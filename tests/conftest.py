"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    """Undo logging.basicConfig calls made by CLI invocations."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in root.handlers[:]:
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """Create a small project tree with Python and Rust artifacts.

    Layout::

        project/
            pkg/__pycache__/mod.cpython-312.pyc
            pkg/sub/__pycache__/
            tests/__pycache__/
            .git/objects/__pycache__/
            crate/target/debug/
            README.md
    """
    root = tmp_path / "project"
    (root / "pkg" / "__pycache__").mkdir(parents=True)
    (root / "pkg" / "__pycache__" / "mod.cpython-312.pyc").write_bytes(b"\x00" * 64)
    (root / "pkg" / "sub" / "__pycache__").mkdir(parents=True)
    (root / "tests" / "__pycache__").mkdir(parents=True)
    (root / ".git" / "objects" / "__pycache__").mkdir(parents=True)
    (root / "crate" / "target" / "debug").mkdir(parents=True)
    (root / "README.md").write_text("# project\n")
    return root


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file with a single "py" profile and return its path."""
    path = tmp_path / "config.toml"
    path.write_text(
        "max_depth = 10\n"
        'ignore_directories = [".git"]\n'
        "\n"
        "[profiles.py]\n"
        'artifact_directories = ["__pycache__"]\n'
        "\n"
        "[profiles.rust]\n"
        'artifact_directories = ["target"]\n'
    )
    return path
