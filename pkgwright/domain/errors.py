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
# INSTALLER ERRORS
# -----------------------------------------------------------------------------
# Every failure in the install flow is terminal. The CLI reports the message
# once and exits with status 1, after the workspace has been removed.
# A user declining the install is NOT an error and has no class here.
# -----------------------------------------------------------------------------


class InstallerError(Exception):
    """Base class for fatal install-flow failures."""

    exit_code = 1


class ConfigurationError(InstallerError):
    """Raised when an environment override holds an unusable value."""

    pass


class InvalidChoiceError(ConfigurationError):
    """Raised when the variant menu receives something other than 1 or 2."""

    pass


class MissingToolError(InstallerError):
    """Raised when a required external command is not on PATH."""

    def __init__(self, tool: str) -> None:
        super().__init__(f"Required command not found: {tool}")
        self.tool = tool


class WorkspaceError(InstallerError):
    """Raised when the temporary workspace cannot be created."""

    pass


class FetchError(InstallerError):
    """Raised when the package-definition repository cannot be fetched."""

    pass


class DefinitionNotFoundError(FetchError):
    """Raised when the PKGBUILD is missing from the fetched repository."""

    pass


class DefinitionParseError(InstallerError):
    """Raised when pkgver or pkgrel cannot be read from a PKGBUILD."""

    pass


class BuildError(InstallerError):
    """Raised when makepkg exits non-zero."""

    pass


class ArtifactNotFoundError(InstallerError):
    """Raised when no built package file matches the expected pattern."""

    def __init__(self, pattern: str, directory: str) -> None:
        super().__init__(f"No package file matching '{pattern}' found in {directory}")
        self.pattern = pattern
        self.directory = directory


class InstallError(InstallerError):
    """Raised when pacman fails to install the built package."""

    pass
