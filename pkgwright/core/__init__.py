# -----------------------------------------------------------------------------
# CORE LAYER
# -----------------------------------------------------------------------------
# The install flow, stage by stage:
# - check_required_tools: Preflight
# - resolve_variant: Which package to install
# - workspace_scope / fetch_definition: Temporary clone of the PKGBUILD repo
# - VersionResolver: Installed vs. available version
# - DecisionEngine: Whether to go ahead
# - BuildDriver: makepkg + pacman
# - InstallerFlow: Orchestrator
# -----------------------------------------------------------------------------

from .builder import BuildDriver, locate_artifact
from .choice import resolve_variant
from .config import InstallerSettings
from .decision import DecisionEngine
from .flow import InstallerFlow
from .preflight import check_required_tools
from .versions import VersionResolver
from .workspace import SignalGuard, Workspace, fetch_definition, workspace_scope

__all__ = [
    "BuildDriver", "locate_artifact",
    "resolve_variant",
    "InstallerSettings",
    "DecisionEngine",
    "InstallerFlow",
    "check_required_tools",
    "VersionResolver",
    "SignalGuard", "Workspace", "fetch_definition", "workspace_scope",
]
