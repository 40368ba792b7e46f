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

"""Classification of leading command tokens.

A token is a grammar keyword, a shell builtin, an executable found on the
search path, or unresolved. Only search-path executables are reported.
Unresolved tokens cover script-local functions as well as genuinely
unknown names; telling those apart would require running the script.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Optional

from shelldep.models.script import CommandClass
from shelldep.platform import PlatformFacts
from shelldep.scanner.rules import get_syntax_rules

logger = logging.getLogger(__name__)


def classify_command(
    token: str,
    platform: PlatformFacts,
    ignored_keywords: Optional[frozenset[str]] = None,
) -> CommandClass:
    """Classify one token. The first matching check wins."""
    if ignored_keywords is None:
        ignored_keywords = get_syntax_rules().ignored_keywords

    if not token or token in ignored_keywords:
        return CommandClass.IGNORED
    if token in platform.builtin_commands():
        return CommandClass.BUILTIN
    if platform.which(token) is not None:
        return CommandClass.EXTERNAL
    return CommandClass.UNRESOLVED


def get_external_commands(
    tokens: Iterable[str],
    platform: PlatformFacts,
    ignored_keywords: Optional[frozenset[str]] = None,
) -> list[str]:
    """Return the tokens that resolve to executables, in input order, unique."""
    if ignored_keywords is None:
        ignored_keywords = get_syntax_rules().ignored_keywords

    external: list[str] = []
    for token in tokens:
        kind = classify_command(token, platform, ignored_keywords)
        if kind == CommandClass.EXTERNAL:
            if token not in external:
                external.append(token)
        elif kind == CommandClass.UNRESOLVED:
            logger.debug("Unresolved command token: %s", token)
    return external
