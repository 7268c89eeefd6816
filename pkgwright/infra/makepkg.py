# Copyright 2026 Pramod Kumar Voola
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

# -----------------------------------------------------------------------------
# MAKEPKG PROVIDER - Package Builder
# -----------------------------------------------------------------------------
# Responsibility: Turn a PKGBUILD directory into a package archive.
#
# makepkg writes its output next to the PKGBUILD (PKGDEST is not touched),
# so the artifact lookup that follows searches the same directory.
# -----------------------------------------------------------------------------

from pathlib import Path

from rich.console import Console

from pkgwright.domain.errors import BuildError
from pkgwright.infra.prompt import DEFAULT_TTY
from pkgwright.infra.shell import run_command, terminal_stdin

console = Console(stderr=True)

# --syncdeps: let makepkg install missing dependencies through pacman
# --noconfirm: do not stop at pacman's dependency confirmation
# --needed: skip dependencies that are already up to date
BUILD_FLAGS = ["--syncdeps", "--noconfirm", "--needed"]


class PackageBuilder:
    """Runs makepkg for a single package out of a (possibly split) PKGBUILD."""

    def __init__(self, makepkg_binary: str = "makepkg", tty_path: str = DEFAULT_TTY) -> None:
        self._makepkg = makepkg_binary
        self._tty_path = tty_path

    def command(self, package_name: str) -> list[str]:
        """The makepkg invocation for `package_name`."""
        return [self._makepkg, *BUILD_FLAGS, "--pkg", package_name]

    def build(self, directory: Path, package_name: str) -> None:
        """
        Build `package_name` from the PKGBUILD in `directory`.

        Runs attached to the terminal, with stdin read from `tty_path`:
        makepkg calls sudo for --syncdeps and the user must be able to answer
        the password prompt even when our stdin is a pipe.

        Raises:
            BuildError: If makepkg exits non-zero or cannot be executed
        """
        console.print(f"[cyan][BUILD] Building {package_name} in {directory}...[/cyan]")
        try:
            with terminal_stdin(self._tty_path) as terminal:
                result = run_command(
                    self.command(package_name),
                    cwd=directory,
                    capture_output=False,
                    stdin=terminal,
                )
        except OSError as e:
            raise BuildError(f"Failed to build {package_name}: {e}")

        if result.returncode != 0:
            console.print(f"[red][BUILD] makepkg exited with {result.returncode}[/red]")
            raise BuildError(f"Failed to build {package_name} (makepkg exit {result.returncode})")

        console.print(f"[green][BUILD] {package_name} built[/green]")
