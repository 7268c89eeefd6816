# -----------------------------------------------------------------------------
# VERSION RESOLVER
# -----------------------------------------------------------------------------
# Responsibility: Produce the two version tokens the decision compares.
#
# - installed: from the host pacman database (None when not installed)
# - available: pkgver + pkgrel from the fetched PKGBUILD
# -----------------------------------------------------------------------------

from pathlib import Path

from rich.console import Console

from pkgwright.domain.errors import DefinitionNotFoundError, DefinitionParseError
from pkgwright.domain.models import derive_version
from pkgwright.infra.pacman import PackageDatabase
from pkgwright.infra.pkgbuild import DefinitionEvaluator

console = Console(stderr=True)

VERSION_FIELDS = ["pkgver", "pkgrel"]


class VersionResolver:
    """Reads installed and available versions through the collaborators."""

    def __init__(self, database: PackageDatabase, evaluator: DefinitionEvaluator) -> None:
        self._database = database
        self._evaluator = evaluator

    def installed_version(self, package_name: str) -> str | None:
        """Installed version token, or None when the package is absent."""
        version = self._database.installed_version(package_name)
        if version is None:
            console.print(f"[cyan][VERSION] {package_name} is not installed[/cyan]")
        else:
            console.print(f"[cyan][VERSION] Installed {package_name}: {version}[/cyan]")
        return version

    def definition_version(self, definition_file: Path) -> str:
        """
        Version token declared by a PKGBUILD.

        Raises:
            DefinitionNotFoundError: If the file does not exist
            DefinitionParseError: If pkgver or pkgrel is unset or empty
        """
        if not definition_file.is_file():
            raise DefinitionNotFoundError(f"Package definition not found: {definition_file}")

        fields = self._evaluator.read_fields(definition_file, VERSION_FIELDS)
        missing = [name for name in VERSION_FIELDS if not fields.get(name)]
        if missing:
            raise DefinitionParseError(
                f"Could not read {', '.join(missing)} from {definition_file}"
            )

        version = derive_version(fields["pkgver"], fields["pkgrel"])
        console.print(f"[cyan][VERSION] Available: {version}[/cyan]")
        return version
