"""
Pytest configuration and fixtures for pkgwright tests.
"""

import os
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pkgwright.core.config import InstallerSettings

PKGBUILD_TEXT = """\
pkgname=(lumen lumen-electron)
pkgver=2.0.0
pkgrel=1
arch=(x86_64)
"""


@pytest.fixture(autouse=True)
def restore_cwd(monkeypatch):
    """The workspace code changes directory; put it back after every test."""
    monkeypatch.chdir(os.getcwd())


@pytest.fixture
def settings():
    """Settings pointing at a fake repository with the PKGBUILD under arch/."""
    return InstallerSettings(
        repo_url="https://example.com/lumen-pkgbuild.git",
        clone_dir="lumen-pkgbuild",
        pkg_subdir="arch",
        standard_pkg="lumen",
        electron_pkg="lumen-electron",
    )


@pytest.fixture
def workspace_root(tmp_path):
    """Parent directory for workspaces, so leaks are easy to spot."""
    root = tmp_path / "workspaces"
    root.mkdir()
    return root


@pytest.fixture
def fake_cloner():
    """GitCloner stand-in that writes a PKGBUILD instead of running git."""

    def _clone(url, destination, branch=None):
        definition_dir = destination / "arch"
        definition_dir.mkdir(parents=True)
        (definition_dir / "PKGBUILD").write_text(PKGBUILD_TEXT)
        return destination

    cloner = MagicMock()
    cloner.shallow_clone.side_effect = _clone
    return cloner


@pytest.fixture
def mock_database():
    """Package database reporting nothing installed."""
    database = MagicMock()
    database.installed_version.return_value = None
    return database


@pytest.fixture
def mock_evaluator():
    """PKGBUILD evaluator reporting pkgver=2.0.0, pkgrel=1."""
    evaluator = MagicMock()
    evaluator.read_fields.return_value = {"pkgver": "2.0.0", "pkgrel": "1"}
    return evaluator


@pytest.fixture
def mock_builder():
    """makepkg stand-in that drops a package file next to the PKGBUILD."""

    def _build(directory, package_name):
        (directory / f"{package_name}-2.0.0-1-x86_64.pkg.tar.zst").write_bytes(b"pkg")

    builder = MagicMock()
    builder.build.side_effect = _build
    return builder


@pytest.fixture
def mock_installer():
    """pacman -U stand-in."""
    return MagicMock()
