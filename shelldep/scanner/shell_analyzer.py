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

"""Shell script analyzer: regex-based dependency extraction.

Extracts, from comment-stripped text:
- Internal dependencies (`source path` / `. path`)
- Declared variables (`NAME=` at line start)
- Used variables (`$NAME` / `${NAME}` anywhere)
- Candidate command tokens (first word of non-assignment lines)

This is heuristic pattern matching, not a shell parser. Quoting, escaping,
heredocs and compound commands are not modeled; the resulting false
positives and negatives are accepted.
"""

from __future__ import annotations

import logging
import re

from shelldep.models.config import AnalyzerConfig
from shelldep.models.script import AnalyzedScript, ScriptCandidate
from shelldep.platform import PlatformFacts
from shelldep.scanner.command_resolver import get_external_commands
from shelldep.scanner.normalizer import strip_comments
from shelldep.scanner.variable_auditor import audit_variables

logger = logging.getLogger(__name__)


# ── Line patterns ──

SOURCE_PATTERN = re.compile(r"""^\s*(?:source|\.)\s+(\S+)""")

ASSIGNMENT_PATTERN = re.compile(r"""^\s*([a-zA-Z_][a-zA-Z0-9_]*)=""")

EXPANSION_PATTERN = re.compile(r"""\$\{?([a-zA-Z_][a-zA-Z0-9_]*)\}?""")

# Letters, underscore and hyphen only; anything else is not a command word
COMMAND_TOKEN_PATTERN = re.compile(r"""[a-zA-Z_-]+""")


def extract_internal_deps(text: str) -> list[str]:
    """Sourced paths, verbatim, unique and sorted."""
    deps = set()
    for line in text.split("\n"):
        match = SOURCE_PATTERN.match(line)
        if match:
            deps.add(match.group(1))
    return sorted(deps)


def extract_declared_vars(text: str) -> set[str]:
    """Names assigned at the start of a line."""
    declared = set()
    for line in text.split("\n"):
        match = ASSIGNMENT_PATTERN.match(line)
        if match:
            declared.add(match.group(1))
    return declared


def extract_used_vars(text: str) -> set[str]:
    """Names referenced through $NAME or ${NAME}."""
    return set(EXPANSION_PATTERN.findall(text))


def extract_command_candidates(text: str) -> list[str]:
    """Leading words of non-assignment lines, unique and sorted."""
    candidates = set()
    for line in text.split("\n"):
        if ASSIGNMENT_PATTERN.match(line):
            continue
        words = line.split()
        if not words:
            continue
        if COMMAND_TOKEN_PATTERN.fullmatch(words[0]):
            candidates.add(words[0])
    return sorted(candidates)


def analyze_text(
    path: str,
    text: str,
    platform: PlatformFacts,
    strict: bool = False,
) -> AnalyzedScript:
    """Run every extraction pass over a script's text."""
    normalized = strip_comments(text)

    internal_deps = extract_internal_deps(normalized)
    declared_vars = extract_declared_vars(normalized)
    used_vars = extract_used_vars(normalized)
    candidates = extract_command_candidates(normalized)
    external = get_external_commands(candidates, platform)

    warnings = None
    if strict:
        warnings = audit_variables(used_vars, declared_vars, platform)

    logger.debug(
        "%s: %d internal, %d external, %d declared, %d used",
        path, len(internal_deps), len(external), len(declared_vars), len(used_vars),
    )

    return AnalyzedScript(
        path=path,
        internal_deps=internal_deps,
        declared_vars=declared_vars,
        used_vars=used_vars,
        external_commands=external,
        audit_warnings=warnings,
    )


def analyze_script(
    candidate: ScriptCandidate,
    config: AnalyzerConfig,
    platform: PlatformFacts,
) -> AnalyzedScript:
    """Analyze a recognized script candidate."""
    return analyze_text(
        candidate.path,
        candidate.text,
        platform,
        strict=config.strict_mode,
    )
