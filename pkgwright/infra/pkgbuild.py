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
# PKGBUILD EVALUATOR
# -----------------------------------------------------------------------------
# Responsibility: Read variables out of a PKGBUILD.
#
# A PKGBUILD is a bash script, so pkgver may be computed (pkgver=${_ver//-/.}).
# The only faithful reader is bash itself. The file is sourced in a child
# bash process with a scrubbed environment: nothing it defines can reach
# this process, and nothing from our environment leaks into it.
# -----------------------------------------------------------------------------

import os
from pathlib import Path

from pkgwright.domain.errors import DefinitionParseError
from pkgwright.infra.shell import describe_failure, run_command

# Prints "name=value" for each requested variable that is set after sourcing.
# Unset variables produce no line at all, so "unset" and "empty" stay distinct.
_READ_SCRIPT = """
__pkgbuild=$1
shift
__names=("$@")
source "$__pkgbuild" >/dev/null 2>&1
for __name in "${__names[@]}"; do
    if [[ -n ${!__name+x} ]]; then
        printf '%s=%s\\n' "$__name" "${!__name}"
    fi
done
"""

ISOLATED_PATH = "/usr/local/sbin:/usr/local/bin:/usr/bin:/bin"


class DefinitionEvaluator:
    """Extracts named variables from a PKGBUILD via an isolated bash."""

    def __init__(self, bash_binary: str = "bash") -> None:
        self._bash = bash_binary

    def read_fields(self, pkgbuild: Path, names: list[str]) -> dict[str, str]:
        """
        Source `pkgbuild` and return the requested variables that are set.

        Raises:
            DefinitionParseError: If bash cannot be started or dies
        """
        env = {"PATH": ISOLATED_PATH, "LC_ALL": "C", "HOME": os.devnull}
        cmd = [
            self._bash, "--noprofile", "--norc", "-c", _READ_SCRIPT,
            "pkgwright", str(pkgbuild), *names,
        ]
        try:
            result = run_command(
                cmd,
                cwd=pkgbuild.parent,
                env=env,
                display=f"{self._bash} (source {pkgbuild.name})",
            )
        except OSError as e:
            raise DefinitionParseError(f"Could not evaluate {pkgbuild}: {e}")

        if result.returncode != 0:
            raise DefinitionParseError(
                f"Could not evaluate {pkgbuild} ({describe_failure(result)})"
            )

        return parse_assignments(result.stdout, names)


def parse_assignments(output: str, names: list[str]) -> dict[str, str]:
    """Parse "name=value" lines, keeping only the requested names."""
    fields: dict[str, str] = {}
    for line in output.splitlines():
        name, sep, value = line.partition("=")
        if sep and name in names:
            fields[name] = value
    return fields
