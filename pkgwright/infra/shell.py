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
# SHELL RUNNER
# -----------------------------------------------------------------------------
# Responsibility: The single place external commands are spawned.
#
# Two modes:
# - captured: stdout/stderr collected as text (queries such as pacman -Q)
# - attached: output goes straight to our terminal and stdin is the
#   controlling terminal device (/dev/tty), so makepkg, sudo and pacman can
#   ask questions even when our own stdin is a pipe
#
# No timeouts and no retries: every tool runs until it finishes.
# -----------------------------------------------------------------------------

import subprocess
from contextlib import contextmanager
from pathlib import Path
from typing import IO, Iterator

from rich.console import Console

console = Console(stderr=True)


def run_command(
    cmd: list[str],
    cwd: Path | str | None = None,
    capture_output: bool = True,
    env: dict[str, str] | None = None,
    display: str | None = None,
    stdin: IO | None = None,
) -> subprocess.CompletedProcess:
    """
    Run an external command and return its CompletedProcess.

    Args:
        cmd: Command parts (e.g., ["pacman", "-Q", "lumen"])
        cwd: Working directory for the child
        capture_output: Capture stdout/stderr as text; False attaches the
            child to the controlling terminal
        env: Replacement environment (None inherits ours)
        display: Text logged instead of the raw command (for redaction)
        stdin: File the child reads as its stdin (None inherits ours)

    Returns:
        CompletedProcess result. Non-zero exits are NOT raised here; callers
        translate them into their own error type.

    Raises:
        FileNotFoundError: If the executable itself does not exist
    """
    console.print(f"[dim][EXEC] {display or ' '.join(cmd)}[/dim]")
    return subprocess.run(
        cmd,
        cwd=cwd,
        capture_output=capture_output,
        text=True,
        env=env,
        stdin=stdin,
    )


def describe_failure(result: subprocess.CompletedProcess) -> str:
    """Short human-readable reason for a failed command."""
    output = (result.stderr or result.stdout or "").strip()
    if output:
        return f"exit {result.returncode}: {output.splitlines()[-1][:200]}"
    return f"exit {result.returncode}"


@contextmanager
def terminal_stdin(tty_path: str) -> Iterator[IO | None]:
    """
    Open the controlling terminal for use as a child's stdin.

    Yields None (the child inherits our stdin) when the device cannot be
    opened, which only happens without a controlling terminal, e.g. an
    unattended PKGWRIGHT_ASSUME run.
    """
    try:
        terminal = open(tty_path, "rb")
    except OSError as e:
        console.print(f"[yellow][EXEC] No terminal at {tty_path} ({e}); using inherited stdin[/yellow]")
        terminal = None

    if terminal is None:
        yield None
        return

    with terminal:
        yield terminal
