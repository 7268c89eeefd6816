# -----------------------------------------------------------------------------
# DOMAIN LAYER
# -----------------------------------------------------------------------------
# Plain data shared by the install flow: variants, version tokens,
# decisions, artifact selections and the error taxonomy.
# -----------------------------------------------------------------------------

from .errors import (
    ArtifactNotFoundError,
    BuildError,
    ConfigurationError,
    DefinitionNotFoundError,
    DefinitionParseError,
    FetchError,
    InstallError,
    InstallerError,
    InvalidChoiceError,
    MissingToolError,
    WorkspaceError,
)
from .models import (
    ArtifactSelection,
    Decision,
    DecisionBranch,
    FlowResult,
    PackageVariant,
    VariantTarget,
    derive_version,
)

__all__ = [
    "ArtifactSelection", "Decision", "DecisionBranch", "FlowResult",
    "PackageVariant", "VariantTarget", "derive_version",
    "InstallerError", "ConfigurationError", "InvalidChoiceError",
    "MissingToolError", "WorkspaceError", "FetchError",
    "DefinitionNotFoundError", "DefinitionParseError", "BuildError",
    "ArtifactNotFoundError", "InstallError",
]
