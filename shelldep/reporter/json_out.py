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

"""Canonical JSON output for analysis runs.

Produces deterministic JSON output:
- Sorted keys
- 2-space indentation
- LF line endings
- Trailing newline
"""

from __future__ import annotations

import json
from typing import Any

from shelldep import __version__
from shelldep.models.config import AnalyzerConfig
from shelldep.models.script import AnalyzedScript


def to_canonical_json(data: dict[str, Any]) -> str:
    """Convert data to canonical JSON string.

    Canonical JSON: sorted keys, 2-space indent, ensure LF, trailing newline.
    """
    result = json.dumps(data, sort_keys=True, indent=2, ensure_ascii=False)
    # Ensure LF line endings
    result = result.replace("\r\n", "\n").replace("\r", "\n")
    # Ensure trailing newline
    if not result.endswith("\n"):
        result += "\n"
    return result


def build_run_document(
    config: AnalyzerConfig, results: list[AnalyzedScript]
) -> dict[str, Any]:
    """Assemble the JSON document for a whole run."""
    return {
        "shelldep_version": __version__,
        "target_directory": str(config.target_directory),
        "strict_mode": config.strict_mode,
        "scripts": [r.model_dump() for r in results],
    }
