"""
Tests for the makepkg wrapper.
"""

import subprocess
import textwrap
from unittest.mock import patch

import pytest

from pkgwright.domain.errors import BuildError
from pkgwright.infra.makepkg import PackageBuilder


class TestPackageBuilder:
    """Tests for PackageBuilder."""

    def test_command_scopes_to_package(self):
        assert PackageBuilder().command("lumen-electron") == [
            "makepkg",
            "--syncdeps",
            "--noconfirm",
            "--needed",
            "--pkg",
            "lumen-electron",
        ]

    def test_build_runs_in_directory(self, tmp_path):
        ok = subprocess.CompletedProcess([], 0)
        with patch("pkgwright.infra.makepkg.run_command", return_value=ok) as run:
            PackageBuilder().build(tmp_path, "lumen")
        assert run.call_args.kwargs["cwd"] == tmp_path
        assert run.call_args.kwargs["capture_output"] is False

    def test_failure_names_package(self, tmp_path):
        failed = subprocess.CompletedProcess([], 4)
        with patch("pkgwright.infra.makepkg.run_command", return_value=failed):
            with pytest.raises(BuildError) as exc_info:
                PackageBuilder().build(tmp_path, "lumen")
        assert "lumen" in str(exc_info.value)

    def test_makepkg_not_executable(self, tmp_path):
        builder = PackageBuilder(makepkg_binary=str(tmp_path / "no-makepkg"))
        with pytest.raises(BuildError):
            builder.build(tmp_path, "lumen")

    def test_stdin_is_terminal_device(self, tmp_path):
        tty = tmp_path / "tty"
        tty.write_text("")
        ok = subprocess.CompletedProcess([], 0)
        with patch("pkgwright.infra.makepkg.run_command", return_value=ok) as run:
            PackageBuilder(tty_path=str(tty)).build(tmp_path, "lumen")
        terminal = run.call_args.kwargs["stdin"]
        assert terminal.name == str(tty)
        assert terminal.closed

    def test_makepkg_reads_terminal_not_our_stdin(self, tmp_path):
        """makepkg answers come from the terminal device even if stdin is a pipe."""
        tty = tmp_path / "tty"
        tty.write_text("typed-at-terminal\n")
        makepkg = tmp_path / "makepkg"
        makepkg.write_text(
            textwrap.dedent(
                """\
                #!/bin/sh
                cat > "$PWD/stdin-seen"
                """
            )
        )
        makepkg.chmod(0o755)

        PackageBuilder(makepkg_binary=str(makepkg), tty_path=str(tty)).build(tmp_path, "lumen")
        assert (tmp_path / "stdin-seen").read_text() == "typed-at-terminal\n"

    def test_no_terminal_inherits_stdin(self, tmp_path):
        ok = subprocess.CompletedProcess([], 0)
        with patch("pkgwright.infra.makepkg.run_command", return_value=ok) as run:
            PackageBuilder(tty_path=str(tmp_path / "no-tty")).build(tmp_path, "lumen")
        assert run.call_args.kwargs["stdin"] is None
