# -----------------------------------------------------------------------------
# THE DECISION ENGINE
# -----------------------------------------------------------------------------
# Responsibility: Given installed vs. available versions, ask the one
# question that fits and turn the answer into proceed / stop.
#
# | installed          | question                        | default |
# |--------------------|---------------------------------|---------|
# | absent             | install version X?              | yes     |
# | == available       | already installed, reinstall?   | no      |
# | != available       | build and install version X?    | yes     |
#
# Only the first letter of the answer counts. Comparison is exact string
# equality; "1.2.3-4" and "1.2.3-04" are different versions.
# -----------------------------------------------------------------------------

from rich.console import Console

from pkgwright.domain.models import Decision, DecisionBranch
from pkgwright.infra.prompt import PromptSource

console = Console(stderr=True)


def answered_no(answer: str) -> bool:
    return answer.strip()[:1] in ("n", "N")


def answered_yes(answer: str) -> bool:
    return answer.strip()[:1] in ("y", "Y")


class DecisionEngine:
    """Chooses between install, reinstall and upgrade prompts."""

    def __init__(self, prompt: PromptSource) -> None:
        self._prompt = prompt

    def decide(self, installed: str | None, available: str) -> Decision:
        """
        Decide whether to build and install `available`.

        Args:
            installed: Installed version token, or None if not installed
            available: Version token declared by the fetched PKGBUILD

        Returns:
            Decision with the branch taken and the proceed flag
        """
        if installed is None:
            branch = DecisionBranch.FRESH_INSTALL
            answer = self._prompt.ask(f"Install version {available}? [Y/n]", "y")
            proceed = not answered_no(answer)
        elif installed == available:
            branch = DecisionBranch.REINSTALL
            answer = self._prompt.ask(
                f"Version {available} is already installed. Reinstall anyway? [y/N]", "n"
            )
            proceed = answered_yes(answer)
        else:
            branch = DecisionBranch.UPGRADE
            answer = self._prompt.ask(
                f"Build and install version {available} (installed: {installed})? [Y/n]", "y"
            )
            proceed = not answered_no(answer)

        if proceed:
            console.print(f"[cyan][DECISION] Proceeding ({branch.value})[/cyan]")
        else:
            console.print(f"[yellow][DECISION] Declined ({branch.value})[/yellow]")

        return Decision(proceed=proceed, branch=branch, installed=installed, available=available)
