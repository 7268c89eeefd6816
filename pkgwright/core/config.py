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
# INSTALLER SETTINGS
# -----------------------------------------------------------------------------
# Responsibility: Collect every environment-provided input in one validated
# model. Values come from the process environment, optionally seeded from a
# .env file by the CLI entry point.
#
# Why Pydantic: A typo in PKGWRIGHT_ASSUME must fail before anything is
# cloned, not halfway through a build.
# -----------------------------------------------------------------------------

import os

from pydantic import BaseModel, Field, ValidationError, field_validator

from pkgwright.domain.errors import ConfigurationError
from pkgwright.domain.models import PackageVariant, VariantTarget

ENV_PREFIX = "PKGWRIGHT_"

DEFAULT_REPO_URL = "https://github.com/lumen-notes/lumen-pkgbuild.git"
DEFAULT_CLONE_DIR = "lumen-pkgbuild"
DEFAULT_PKG_SUBDIR = "arch"
DEFAULT_STANDARD_PKG = "lumen"
DEFAULT_ELECTRON_PKG = "lumen-electron"

VARIANT_LABELS = {
    PackageVariant.STANDARD: "Lumen (standard)",
    PackageVariant.ELECTRON: "Lumen (Electron)",
}

# Tools the flow shells out to; checked before the workspace exists.
REQUIRED_TOOLS = ["git", "bash", "makepkg", "pacman", "sudo"]


class InstallerSettings(BaseModel):
    """Validated installer configuration."""

    repo_url: str = Field(DEFAULT_REPO_URL, min_length=1)
    repo_branch: str = ""
    clone_dir: str = Field(DEFAULT_CLONE_DIR, min_length=1)
    pkg_subdir: str = DEFAULT_PKG_SUBDIR
    standard_pkg: str = Field(DEFAULT_STANDARD_PKG, min_length=1)
    electron_pkg: str = Field(DEFAULT_ELECTRON_PKG, min_length=1)
    variant: str = ""
    assume: str = ""
    tty: str = "/dev/tty"

    class Config:
        """Pydantic configuration for strict validation."""

        str_strip_whitespace = True

    @field_validator("assume")
    @classmethod
    def _check_assume(cls, value: str) -> str:
        value = value.lower()
        if value not in ("", "yes", "no"):
            raise ValueError(f"must be 'yes' or 'no', got '{value}'")
        return value

    @field_validator("clone_dir")
    @classmethod
    def _check_clone_dir(cls, value: str) -> str:
        if "/" in value or value in (".", ".."):
            raise ValueError(f"must be a plain directory name, got '{value}'")
        return value

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "InstallerSettings":
        """
        Build settings from PKGWRIGHT_* environment variables.

        Unset variables keep their defaults; set-but-empty variables count
        as empty (so PKGWRIGHT_PKG_SUBDIR= means "repository root").

        Raises:
            ConfigurationError: If any value fails validation
        """
        environ = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            key = f"{ENV_PREFIX}{name.upper()}"
            if key in environ:
                values[name] = environ[key]

        try:
            return cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{ENV_PREFIX}{str(err['loc'][0]).upper()}: {err['msg']}" for err in e.errors()
            )
            raise ConfigurationError(f"Invalid configuration: {problems}")

    def targets(self) -> dict[PackageVariant, VariantTarget]:
        """Map each variant to its configured package, in menu order."""
        try:
            return {
                PackageVariant.STANDARD: VariantTarget(
                    variant=PackageVariant.STANDARD,
                    package_name=self.standard_pkg,
                    label=VARIANT_LABELS[PackageVariant.STANDARD],
                ),
                PackageVariant.ELECTRON: VariantTarget(
                    variant=PackageVariant.ELECTRON,
                    package_name=self.electron_pkg,
                    label=VARIANT_LABELS[PackageVariant.ELECTRON],
                ),
            }
        except ValidationError as e:
            raise ConfigurationError(f"Invalid package name: {e.errors()[0]['msg']}")
