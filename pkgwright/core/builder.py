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
# THE BUILD DRIVER - MAKEPKG -> ARTIFACT -> PACMAN
# -----------------------------------------------------------------------------
# Responsibility: Build the selected package, find the file makepkg wrote,
# and hand it to pacman.
#
# Artifact lookup:
# - pattern: {pkgname}-{pkgver}-{pkgrel}-*{ext}
# - order: by extension preference (makepkg's default .zst first), then by
#   name, so the pick never depends on directory listing order
# - several matches: warning, first one wins
# - no match: ArtifactNotFoundError
# -----------------------------------------------------------------------------

from pathlib import Path

from rich.console import Console

from pkgwright.domain.errors import ArtifactNotFoundError
from pkgwright.domain.models import ArtifactSelection, VariantTarget
from pkgwright.infra.makepkg import PackageBuilder
from pkgwright.infra.pacman import PackageInstaller

console = Console(stderr=True)

# Every PKGEXT makepkg supports, most common first.
ARTIFACT_EXTENSIONS = [
    ".pkg.tar.zst",
    ".pkg.tar.xz",
    ".pkg.tar.gz",
    ".pkg.tar.bz2",
    ".pkg.tar.lz4",
    ".pkg.tar.lzo",
    ".pkg.tar.lrz",
    ".pkg.tar.lz",
    ".pkg.tar.Z",
    ".pkg.tar",
]


def artifact_pattern(package_name: str, version: str) -> str:
    return f"{package_name}-{version}-*"


def locate_artifact(package_name: str, version: str, directory: Path) -> ArtifactSelection:
    """
    Find the package file makepkg produced for `package_name` at `version`.

    Raises:
        ArtifactNotFoundError: If no file matches the pattern
    """
    pattern = artifact_pattern(package_name, version)
    candidates: list[Path] = []
    for extension in ARTIFACT_EXTENSIONS:
        for path in sorted(directory.glob(f"{pattern}{extension}")):
            if path.is_file() and path not in candidates:
                candidates.append(path)

    if not candidates:
        console.print(f"[red][BUILD] No package matching {pattern} in {directory}[/red]")
        raise ArtifactNotFoundError(pattern, str(directory))

    selection = ArtifactSelection(path=candidates[0], pattern=pattern, candidates=candidates)
    if selection.ambiguous:
        names = ", ".join(p.name for p in candidates)
        console.print(
            f"[yellow][BUILD] Multiple packages match {pattern}: {names}. "
            f"Using {selection.path.name}[/yellow]"
        )
    else:
        console.print(f"[green][BUILD] Package file: {selection.path.name}[/green]")
    return selection


class BuildDriver:
    """Runs the build, artifact lookup and install steps for one target."""

    def __init__(self, builder: PackageBuilder, installer: PackageInstaller) -> None:
        self._builder = builder
        self._installer = installer

    def build_and_install(
        self, target: VariantTarget, version: str, directory: Path
    ) -> ArtifactSelection:
        """
        Build `target` from the PKGBUILD in `directory` and install it.

        Raises:
            BuildError: makepkg failed
            ArtifactNotFoundError: makepkg succeeded but wrote no matching file
            InstallError: pacman failed
        """
        self._builder.build(directory, target.package_name)
        selection = locate_artifact(target.package_name, version, directory)
        self._installer.install(selection.path, target.package_name)
        return selection
