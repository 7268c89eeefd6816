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
# THE WORKSPACE - EPHEMERAL BUILD DIRECTORY
# -----------------------------------------------------------------------------
# Responsibility: Own the temporary directory a run clones and builds in,
# and guarantee it is gone when the process ends.
#
# Exit paths covered:
# - normal return / any exception: the scope's finally block
# - interpreter exit outside the scope: atexit hook
# - SIGINT / SIGTERM: SignalGuard cleans up, then re-raises the signal with
#   its default disposition so the shell sees "killed by signal"
#
# Cleanup is idempotent. The path marker is cleared only after the
# directory is gone, so a signal arriving mid-removal finishes the job
# instead of finding an empty marker. The signal handlers stay installed
# until scope-exit cleanup is done.
# -----------------------------------------------------------------------------

import atexit
import os
import shutil
import signal
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Callable, Iterator

from rich.console import Console

from pkgwright.domain.errors import DefinitionNotFoundError, FetchError, WorkspaceError
from pkgwright.infra.git_client import GitCloner

console = Console(stderr=True)

WORKSPACE_PREFIX = "pkgwright-"
HANDLED_SIGNALS = (signal.SIGINT, signal.SIGTERM)
DEFINITION_FILE = "PKGBUILD"


class Workspace:
    """
    Handle for one run's temporary directory.

    `cancelled` is set by the signal guard before it cleans up, so code that
    observes the handle can tell an interrupted run from a finished one.
    """

    def __init__(self, path: Path, origin: Path) -> None:
        self._path: Path | None = path
        self.origin = origin
        self.cancelled = threading.Event()
        self.cleanups = 0

    @classmethod
    def create(cls, prefix: str = WORKSPACE_PREFIX, base_dir: str | None = None) -> "Workspace":
        """
        Create a uniquely named temporary directory.

        Raises:
            WorkspaceError: If the directory cannot be created
        """
        origin = Path.cwd()
        try:
            path = Path(tempfile.mkdtemp(prefix=prefix, dir=base_dir))
        except OSError as e:
            raise WorkspaceError(f"Could not create temporary workspace: {e}")

        if not path.is_dir():
            raise WorkspaceError(f"Temporary workspace was not created: {path}")

        console.print(f"[cyan][WORKSPACE] Created {path}[/cyan]")
        return cls(path, origin)

    @property
    def path(self) -> Path:
        """The workspace directory. Raises once the workspace is cleaned up."""
        if self._path is None:
            raise WorkspaceError("Workspace has already been removed")
        return self._path

    @property
    def active(self) -> bool:
        return self._path is not None

    def cleanup(self) -> None:
        """
        Remove the workspace directory. Safe to call any number of times.

        Steps back into the original working directory first (a process
        cannot portably remove its own cwd); if that fails the directory is
        removed by absolute path anyway.
        """
        path = self._path
        if path is None:
            return
        if not path.is_dir():
            self._path = None
            return

        try:
            os.chdir(self.origin)
        except OSError as e:
            console.print(f"[yellow][WORKSPACE] Could not return to {self.origin}: {e}[/yellow]")

        shutil.rmtree(path, ignore_errors=True)
        if self._path is None:
            # finished by a nested call from the signal handler
            return
        self._path = None
        self.cleanups += 1

        if path.exists():
            console.print(f"[red][WORKSPACE] Failed to remove {path}[/red]")
        else:
            console.print(f"[dim][WORKSPACE] Removed {path}[/dim]")


class SignalGuard:
    """
    Ties a Workspace to process-exit and signal cleanup.

    On SIGINT/SIGTERM the handler drops the atexit hook, marks the workspace
    cancelled, cleans up, resets the signal to SIG_DFL and sends it to this
    process again. `kill` is injectable so the re-delivery can be observed
    in tests without terminating the test runner.
    """

    def __init__(
        self,
        workspace: Workspace,
        signals: tuple[int, ...] = HANDLED_SIGNALS,
        kill: Callable[[int, int], None] = os.kill,
    ) -> None:
        self._workspace = workspace
        self._signals = signals
        self._kill = kill
        self._previous: dict[int, object] = {}

    def install(self) -> None:
        atexit.register(self._workspace.cleanup)
        for signum in self._signals:
            self._previous[signum] = signal.signal(signum, self._handle)

    def uninstall(self) -> None:
        atexit.unregister(self._workspace.cleanup)
        for signum, previous in self._previous.items():
            signal.signal(signum, previous if previous is not None else signal.SIG_DFL)
        self._previous.clear()

    def _handle(self, signum: int, frame) -> None:
        atexit.unregister(self._workspace.cleanup)
        self._workspace.cancelled.set()
        console.print(
            f"\n[yellow][WORKSPACE] Received {signal.Signals(signum).name}, cleaning up...[/yellow]"
        )
        self._workspace.cleanup()

        signal.signal(signum, signal.SIG_DFL)
        self._kill(os.getpid(), signum)


@contextmanager
def workspace_scope(
    prefix: str = WORKSPACE_PREFIX,
    base_dir: str | None = None,
    kill: Callable[[int, int], None] = os.kill,
) -> Iterator[Workspace]:
    """
    Acquire a Workspace for the duration of the block.

    The directory is removed when the block exits (normally or by
    exception) and on SIGINT/SIGTERM while the block is running.
    """
    workspace = Workspace.create(prefix=prefix, base_dir=base_dir)
    guard = SignalGuard(workspace, kill=kill)
    guard.install()
    try:
        yield workspace
    finally:
        workspace.cleanup()
        guard.uninstall()


def fetch_definition(
    workspace: Workspace,
    cloner: GitCloner,
    repo_url: str,
    clone_dir: str,
    pkg_subdir: str = "",
    branch: str | None = None,
) -> Path:
    """
    Clone the PKGBUILD repository into the workspace and enter it.

    Args:
        workspace: Active workspace handle
        cloner: Git collaborator
        repo_url: Repository to clone
        clone_dir: Directory name for the clone inside the workspace
        pkg_subdir: Subdirectory holding the PKGBUILD ("" = repository root)
        branch: Optional branch for the shallow clone

    Returns:
        The directory containing the PKGBUILD (now the current directory)

    Raises:
        FetchError: If the clone fails or the subdirectory is missing
        DefinitionNotFoundError: If there is no PKGBUILD in the subdirectory
    """
    os.chdir(workspace.path)
    clone_path = cloner.shallow_clone(repo_url, workspace.path / clone_dir, branch=branch or None)

    definition_dir = clone_path / pkg_subdir if pkg_subdir else clone_path
    if not definition_dir.is_dir():
        raise FetchError(f"Directory '{pkg_subdir}' not found in {repo_url}")

    if not (definition_dir / DEFINITION_FILE).is_file():
        raise DefinitionNotFoundError(f"{DEFINITION_FILE} not found in {definition_dir}")

    os.chdir(definition_dir)
    console.print(f"[green][WORKSPACE] Package definition ready: {definition_dir}[/green]")
    return definition_dir
