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

"""Platform facts: builtin names, search-path lookups, environment bindings.

The analyzer never reads these from ambient state directly. A provider is
built once per run and handed to the command resolver and the variable
auditor, so tests can substitute a StaticPlatform with fixed answers.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
from dataclasses import dataclass, field
from typing import Optional, Protocol

from shelldep.scanner.rules import get_syntax_rules

logger = logging.getLogger(__name__)


class PlatformFacts(Protocol):
    """Read-only queries about the environment the analyzer runs in."""

    def builtin_commands(self) -> frozenset[str]: ...

    def which(self, name: str) -> Optional[str]: ...

    def has_env(self, name: str) -> bool: ...


def query_shell_builtins() -> frozenset[str] | None:
    """Ask bash for its builtin list via `compgen -b`.

    Returns None if bash is not available or the query fails.
    """
    try:
        result = subprocess.run(
            ["bash", "-c", "compgen -b"],
            capture_output=True,
            text=True,
            timeout=10,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("bash not found in PATH")
        return None
    except subprocess.TimeoutExpired:
        logger.warning("compgen -b timed out")
        return None
    except OSError as e:
        logger.debug("compgen -b error: %s", e)
        return None

    if result.returncode != 0:
        logger.debug("compgen -b failed: %s", result.stderr)
        return None

    names = frozenset(line.strip() for line in result.stdout.splitlines() if line.strip())
    return names or None


# Module-level cache
_builtin_commands: frozenset[str] | None = None


def get_builtin_commands() -> frozenset[str]:
    """Get the cached builtin set, querying the host shell on first use."""
    global _builtin_commands
    if _builtin_commands is None:
        queried = query_shell_builtins()
        if queried is None:
            logger.info("Using fallback builtin list")
            _builtin_commands = get_syntax_rules().fallback_builtins
        else:
            logger.debug("Host shell reports %d builtins", len(queried))
            _builtin_commands = queried
    return _builtin_commands


class SystemPlatform:
    """Facts about the running process: host shell, PATH and os.environ.

    Search-path probes are memoized so each distinct token is looked up
    once per run.
    """

    def __init__(self) -> None:
        self._which_cache: dict[str, Optional[str]] = {}

    def builtin_commands(self) -> frozenset[str]:
        return get_builtin_commands()

    def which(self, name: str) -> Optional[str]:
        if name not in self._which_cache:
            self._which_cache[name] = shutil.which(name)
        return self._which_cache[name]

    def has_env(self, name: str) -> bool:
        return name in os.environ


@dataclass(frozen=True)
class StaticPlatform:
    """Fixed platform facts, for reproducible analysis."""

    builtins: frozenset[str] = frozenset()
    executables: dict[str, str] = field(default_factory=dict)
    environment: frozenset[str] = frozenset()

    def builtin_commands(self) -> frozenset[str]:
        return self.builtins

    def which(self, name: str) -> Optional[str]:
        return self.executables.get(name)

    def has_env(self, name: str) -> bool:
        return name in self.environment
