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
# PACMAN PROVIDER - Host Package Database & Installer
# -----------------------------------------------------------------------------
# Responsibility: Everything that touches the host's package manager.
#
# - PackageDatabase: read-only `pacman -Q <name>` lookups
# - PackageInstaller: privileged `sudo pacman -U <file>` installs
#
# The installer runs attached to the terminal, reading stdin from /dev/tty,
# so sudo can ask for a password and pacman can ask for confirmation even
# when our own stdin is a pipe.
# -----------------------------------------------------------------------------

from pathlib import Path

from rich.console import Console

from pkgwright.domain.errors import InstallError
from pkgwright.infra.prompt import DEFAULT_TTY
from pkgwright.infra.shell import run_command, terminal_stdin

console = Console(stderr=True)


class PackageDatabase:
    """Read-only view of the local pacman database."""

    def __init__(self, pacman_binary: str = "pacman") -> None:
        self._pacman = pacman_binary

    def installed_version(self, package_name: str) -> str | None:
        """
        Return the installed "pkgver-pkgrel" token, or None if not installed.

        `pacman -Q name` prints "name 1.2.3-1" and exits 0 when the package
        is installed, and exits 1 with "package 'name' was not found"
        otherwise. Any non-zero exit is treated as absent.
        """
        result = run_command([self._pacman, "-Q", package_name])
        if result.returncode != 0:
            return None

        fields = result.stdout.split()
        if len(fields) < 2 or fields[0] != package_name:
            return None
        return fields[1]


class PackageInstaller:
    """Installs a built package file with sudo + pacman."""

    def __init__(
        self,
        sudo_binary: str = "sudo",
        pacman_binary: str = "pacman",
        tty_path: str = DEFAULT_TTY,
    ) -> None:
        self._sudo = sudo_binary
        self._pacman = pacman_binary
        self._tty_path = tty_path

    def install(self, artifact: Path, package_name: str) -> None:
        """
        Install `artifact` via `sudo pacman -U`.

        Raises:
            InstallError: If pacman (or sudo) exits non-zero
        """
        console.print(f"[cyan][INSTALL] Installing {artifact.name}...[/cyan]")
        try:
            with terminal_stdin(self._tty_path) as terminal:
                result = run_command(
                    [self._sudo, self._pacman, "-U", str(artifact)],
                    capture_output=False,
                    stdin=terminal,
                )
        except OSError as e:
            raise InstallError(f"Failed to install {package_name}: {e}")

        if result.returncode != 0:
            console.print(f"[red][INSTALL] pacman exited with {result.returncode}[/red]")
            raise InstallError(
                f"Failed to install {package_name} (pacman exit {result.returncode})"
            )

        console.print(f"[green][INSTALL] {package_name} installed[/green]")
