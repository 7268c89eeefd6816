# -----------------------------------------------------------------------------
# PKGWRIGHT - COMMAND LINE ENTRY POINT
# -----------------------------------------------------------------------------
# Responsibility: Load configuration, wire the real collaborators, run the
# install flow and turn the outcome into an exit status.
#
# Exit status:
# - 0: installed, or the user said no
# - 1: any InstallerError (reported once, to stderr)
# - killed by SIGINT/SIGTERM: the workspace guard re-raises the signal
# -----------------------------------------------------------------------------

import sys
from pathlib import Path

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from pkgwright import __version__
from pkgwright.core.config import InstallerSettings
from pkgwright.core.flow import InstallerFlow
from pkgwright.domain.errors import InstallerError
from pkgwright.infra.prompt import FixedPrompt, PromptSource, TerminalPrompt

SYSTEM_NAME = "PKGWRIGHT"
console = Console(stderr=True)


def build_prompts(settings: InstallerSettings) -> tuple[PromptSource, PromptSource]:
    """
    Pick the menu and confirmation prompt sources.

    PKGWRIGHT_ASSUME=yes|no answers every confirmation and takes the menu
    default, so the run never touches the terminal.
    """
    if settings.assume:
        return FixedPrompt(), FixedPrompt(settings.assume)
    terminal = TerminalPrompt(settings.tty)
    return terminal, terminal


def main() -> int:
    """Run the installer; returns the process exit status."""
    load_dotenv(Path.cwd() / ".env")
    console.rule(f"[bold cyan]{SYSTEM_NAME} v{__version__}[/bold cyan]")

    prompts: tuple[PromptSource, PromptSource] | None = None
    try:
        settings = InstallerSettings.from_env()
        prompts = build_prompts(settings)
        InstallerFlow(settings, prompts[0], confirm_prompt=prompts[1]).run()
    except InstallerError as e:
        console.print(
            Panel(
                f"[bold red]{type(e).__name__}[/bold red]\n\n{escape(str(e))}",
                title="INSTALL HALTED",
                border_style="red",
            )
        )
        return e.exit_code
    finally:
        if prompts is not None:
            for prompt in prompts:
                if isinstance(prompt, TerminalPrompt):
                    prompt.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
