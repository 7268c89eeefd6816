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
# DOMAIN MODELS - INSTALL TARGETS & VERSIONS
# -----------------------------------------------------------------------------
# The small vocabulary shared by every stage of the install flow:
# - PackageVariant: which flavour of the package the user wants
# - VariantTarget: the concrete pacman package name behind a variant
# - Decision / DecisionBranch: the outcome of the version comparison
# - ArtifactSelection: the package file picked after makepkg finishes
# -----------------------------------------------------------------------------

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field

VERSION_SEPARATOR = "-"


class PackageVariant(str, Enum):
    """
    The two mutually exclusive flavours this installer can install.

    The value doubles as the key accepted by the PKGWRIGHT_VARIANT override.
    Enum order is menu order: option 1 is STANDARD.
    """

    STANDARD = "standard"
    ELECTRON = "electron"


class VariantTarget(BaseModel):
    """A variant resolved to the package name pacman knows it by."""

    variant: PackageVariant
    package_name: str = Field(
        ...,
        min_length=1,
        pattern=r"^[a-z0-9@._+][a-z0-9@._+-]*$",
        description="pacman package name (pkgname in the PKGBUILD)",
    )
    label: str = Field(..., min_length=1, description="Human-readable name for menus")

    class Config:
        """Pydantic configuration for strict validation."""

        str_strip_whitespace = True
        frozen = True


def derive_version(pkgver: str, pkgrel: str) -> str:
    """
    Build the composite version token compared between host and PKGBUILD.

    The token is only ever compared for exact equality, so no normalisation
    happens here: derive_version("1.2.3", "04") is not "1.2.3-4".
    """
    return f"{pkgver}{VERSION_SEPARATOR}{pkgrel}"


class DecisionBranch(str, Enum):
    """Which comparison outcome the decision engine acted on."""

    FRESH_INSTALL = "fresh_install"
    REINSTALL = "reinstall"
    UPGRADE = "upgrade"


@dataclass(frozen=True)
class Decision:
    """Outcome of comparing installed and available versions."""

    proceed: bool
    branch: DecisionBranch
    installed: str | None
    available: str


@dataclass
class ArtifactSelection:
    """The package file chosen for installation, plus everything that matched."""

    path: Path
    pattern: str
    candidates: list[Path] = field(default_factory=list)

    @property
    def ambiguous(self) -> bool:
        """True when more than one file matched the artifact pattern."""
        return len(self.candidates) > 1


@dataclass
class FlowResult:
    """Summary of one installer run."""

    target: VariantTarget
    available: str
    installed_before: str | None = None
    installed: bool = False
    artifact: Path | None = None
