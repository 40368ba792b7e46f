# shelldep: Shell Script Dependency Analyzer
# Copyright (C) 2026 shelldep Project Contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published
# by the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""Strict-mode variable audit: used but neither declared nor in the environment.

The environment check looks at the analyzer's own process, which is only
an approximation of the environment the script will eventually run in.
"""

from __future__ import annotations

import re
from collections.abc import Set

from shelldep.platform import PlatformFacts

_POSITIONAL = re.compile(r"[0-9]+")
SPECIAL_PARAMETERS = frozenset({"?", "*", "@"})


def is_special_parameter(name: str) -> bool:
    """Positional ($1, $10) and special ($?, $*, $@) parameter names."""
    return bool(_POSITIONAL.fullmatch(name)) or name in SPECIAL_PARAMETERS


def audit_variables(
    used_vars: Set[str],
    declared_vars: Set[str],
    platform: PlatformFacts,
) -> list[str]:
    """Return used names with no declaration and no environment binding, sorted."""
    warnings: list[str] = []
    for name in sorted(used_vars):
        if is_special_parameter(name):
            continue
        if name in declared_vars:
            continue
        if platform.has_env(name):
            continue
        warnings.append(name)
    return warnings
