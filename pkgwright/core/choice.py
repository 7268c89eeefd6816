# -----------------------------------------------------------------------------
# VARIANT CHOICE
# -----------------------------------------------------------------------------
# Responsibility: Decide which variant this run installs.
#
# PKGWRIGHT_VARIANT wins when set. Otherwise the user picks from a
# two-entry menu on the controlling terminal; an empty answer means 1.
# Anything else is fatal; there is no re-prompt.
# -----------------------------------------------------------------------------

from rich.console import Console

from pkgwright.domain.errors import ConfigurationError, InvalidChoiceError
from pkgwright.domain.models import PackageVariant, VariantTarget
from pkgwright.infra.prompt import PromptSource

console = Console(stderr=True)

DEFAULT_MENU_CHOICE = "1"


def resolve_variant(
    targets: dict[PackageVariant, VariantTarget],
    override: str | None,
    prompt: PromptSource,
) -> VariantTarget:
    """
    Resolve the variant to install.

    Args:
        targets: Variant -> target mapping, in menu order
        override: Forced variant key from the environment (empty/None = ask)
        prompt: Source of the menu answer when no override is given

    Returns:
        The selected VariantTarget

    Raises:
        ConfigurationError: If `override` is not a known variant key
        InvalidChoiceError: If the menu answer is not a listed number
    """
    override = (override or "").strip()
    if override:
        try:
            variant = PackageVariant(override)
        except ValueError:
            keys = ", ".join(v.value for v in targets)
            raise ConfigurationError(
                f"Invalid PKGWRIGHT_VARIANT '{override}' (expected one of: {keys})"
            )
        target = targets[variant]
        console.print(f"[cyan][CHOICE] Using {target.label} from PKGWRIGHT_VARIANT[/cyan]")
        return target

    options = list(targets.values())
    prompt.show("Which version would you like to install?")
    for number, target in enumerate(options, start=1):
        prompt.show(f"  {number}) {target.label} [{target.package_name}]")

    answer = prompt.ask(f"Enter choice [{DEFAULT_MENU_CHOICE}]", DEFAULT_MENU_CHOICE).strip()
    answer = answer or DEFAULT_MENU_CHOICE

    valid = {str(number): target for number, target in enumerate(options, start=1)}
    if answer not in valid:
        raise InvalidChoiceError(f"Invalid choice '{answer}' (expected 1-{len(options)})")

    target = valid[answer]
    console.print(f"[cyan][CHOICE] Selected {target.label}[/cyan]")
    return target
