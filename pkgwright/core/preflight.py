# -----------------------------------------------------------------------------
# PREFLIGHT CHECK
# -----------------------------------------------------------------------------
# Responsibility: Confirm every external command is on PATH before the
# installer touches the filesystem. Fails on the first missing tool.
# -----------------------------------------------------------------------------

import shutil
from typing import Callable, Iterable

from rich.console import Console

from pkgwright.domain.errors import MissingToolError

console = Console(stderr=True)


def check_required_tools(
    tools: Iterable[str],
    which: Callable[[str], str | None] = shutil.which,
) -> None:
    """
    Verify each command in `tools` resolves on PATH.

    Raises:
        MissingToolError: Naming the first command that does not resolve
    """
    for tool in tools:
        if which(tool) is None:
            console.print(f"[red][PREFLIGHT] Missing required command: {tool}[/red]")
            raise MissingToolError(tool)

    console.print("[green][PREFLIGHT] All required tools found[/green]")
