# -----------------------------------------------------------------------------
# INFRASTRUCTURE LAYER
# -----------------------------------------------------------------------------
# Thin wrappers around the external tools the installer drives:
# - GitCloner: shallow clone of the PKGBUILD repository
# - DefinitionEvaluator: reads pkgver/pkgrel by sourcing the PKGBUILD
# - PackageBuilder: makepkg
# - PackageDatabase / PackageInstaller: pacman (+ sudo)
# - TerminalPrompt / FixedPrompt: where answers come from
# -----------------------------------------------------------------------------

from .git_client import GitCloner
from .makepkg import PackageBuilder
from .pacman import PackageDatabase, PackageInstaller
from .pkgbuild import DefinitionEvaluator
from .prompt import FixedPrompt, PromptSource, TerminalPrompt

__all__ = [
    "GitCloner", "PackageBuilder", "PackageDatabase", "PackageInstaller",
    "DefinitionEvaluator", "FixedPrompt", "PromptSource", "TerminalPrompt",
]
