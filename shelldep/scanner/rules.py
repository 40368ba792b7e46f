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

"""Shell syntax tables loaded from rules/shell_syntax.yaml.

Holds the interpreter names recognized in shebang lines, the grammar
keywords that are never reported as commands, and the builtin list used
when the host shell cannot be asked for its own.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

RULES_PATH = Path(__file__).parent.parent / "rules" / "shell_syntax.yaml"


@dataclass(frozen=True)
class ShellSyntaxRules:
    """Immutable view of the syntax tables."""

    recognized_shells: tuple[str, ...] = ()
    ignored_keywords: frozenset[str] = frozenset()
    fallback_builtins: frozenset[str] = frozenset()


def load_syntax_rules(rules_path: Path = RULES_PATH) -> ShellSyntaxRules:
    """Load syntax tables from YAML.

    A missing file yields empty tables and a warning.
    """
    try:
        with open(rules_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        logger.warning("Shell syntax rules not found at %s", rules_path)
        return ShellSyntaxRules()

    return ShellSyntaxRules(
        recognized_shells=tuple(str(s) for s in data.get("recognized_shells", [])),
        ignored_keywords=frozenset(str(k) for k in data.get("ignored_keywords", [])),
        fallback_builtins=frozenset(str(b) for b in data.get("fallback_builtins", [])),
    )


# Module-level cache
_rules: ShellSyntaxRules | None = None


def get_syntax_rules() -> ShellSyntaxRules:
    """Get cached syntax tables."""
    global _rules
    if _rules is None:
        _rules = load_syntax_rules()
    return _rules
