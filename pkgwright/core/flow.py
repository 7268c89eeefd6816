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
# THE INSTALLER FLOW - ORCHESTRATOR
# -----------------------------------------------------------------------------
# Pipeline: Preflight -> Choice -> Workspace + Fetch -> Versions -> Decision
#           -> (if confirmed) Build -> Artifact -> Install
#
# Everything after the choice runs inside workspace_scope, so every exit
# (return, exception, SIGINT, SIGTERM) removes the temporary directory.
# All collaborators are injected; nothing here spawns a process directly.
# makepkg and pacman read their stdin from settings.tty, the same device the
# terminal prompt uses.
# -----------------------------------------------------------------------------

import os
import shutil
from typing import Callable

from rich.console import Console
from rich.panel import Panel

from pkgwright.core.builder import BuildDriver
from pkgwright.core.choice import resolve_variant
from pkgwright.core.config import REQUIRED_TOOLS, InstallerSettings
from pkgwright.core.decision import DecisionEngine
from pkgwright.core.preflight import check_required_tools
from pkgwright.core.versions import VersionResolver
from pkgwright.core.workspace import DEFINITION_FILE, fetch_definition, workspace_scope
from pkgwright.domain.models import FlowResult
from pkgwright.infra.git_client import GitCloner
from pkgwright.infra.makepkg import PackageBuilder
from pkgwright.infra.pacman import PackageDatabase, PackageInstaller
from pkgwright.infra.pkgbuild import DefinitionEvaluator
from pkgwright.infra.prompt import PromptSource

console = Console(stderr=True)


class InstallerFlow:
    """
    One end-to-end install run.

    Collaborators default to the real tool wrappers; tests pass mocks.
    `prompt` answers the variant menu, `confirm_prompt` (default: the same
    source) answers the install confirmation.
    """

    def __init__(
        self,
        settings: InstallerSettings,
        prompt: PromptSource,
        confirm_prompt: PromptSource | None = None,
        cloner: GitCloner | None = None,
        database: PackageDatabase | None = None,
        evaluator: DefinitionEvaluator | None = None,
        builder: PackageBuilder | None = None,
        installer: PackageInstaller | None = None,
        which: Callable[[str], str | None] = shutil.which,
        kill: Callable[[int, int], None] = os.kill,
        workspace_dir: str | None = None,
    ) -> None:
        self._settings = settings
        self._prompt = prompt
        self._cloner = cloner or GitCloner()
        self._versions = VersionResolver(
            database or PackageDatabase(), evaluator or DefinitionEvaluator()
        )
        self._decisions = DecisionEngine(confirm_prompt or prompt)
        self._driver = BuildDriver(
            builder or PackageBuilder(tty_path=settings.tty),
            installer or PackageInstaller(tty_path=settings.tty),
        )
        self._which = which
        self._kill = kill
        self._workspace_dir = workspace_dir

    def run(self) -> FlowResult:
        """
        Execute the full pipeline.

        Returns:
            FlowResult; `installed` is False when the user declined

        Raises:
            InstallerError: Any fatal failure (the workspace is already
                removed by the time this propagates)
        """
        settings = self._settings

        check_required_tools(REQUIRED_TOOLS, which=self._which)
        target = resolve_variant(settings.targets(), settings.variant, self._prompt)

        with workspace_scope(base_dir=self._workspace_dir, kill=self._kill) as workspace:
            definition_dir = fetch_definition(
                workspace,
                self._cloner,
                repo_url=settings.repo_url,
                clone_dir=settings.clone_dir,
                pkg_subdir=settings.pkg_subdir,
                branch=settings.repo_branch,
            )

            installed = self._versions.installed_version(target.package_name)
            available = self._versions.definition_version(definition_dir / DEFINITION_FILE)
            result = FlowResult(target=target, available=available, installed_before=installed)

            decision = self._decisions.decide(installed, available)
            if not decision.proceed:
                console.print("[yellow]Nothing to do. Exiting.[/yellow]")
                return result

            selection = self._driver.build_and_install(target, available, definition_dir)
            result.installed = True
            result.artifact = selection.path

        console.print(
            Panel(
                f"[bold green]{target.label} installed[/bold green]\n\n"
                f"Package: {target.package_name}\n"
                f"Version: {available}",
                title="INSTALL COMPLETE",
                border_style="green",
            )
        )
        return result
