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

"""Run configuration, parsed once from the command line."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from shelldep.scanner.rules import get_syntax_rules


def _default_shells() -> tuple[str, ...]:
    return get_syntax_rules().recognized_shells


@dataclass(frozen=True)
class AnalyzerConfig:
    """Immutable settings for one analysis run."""

    target_directory: Path = Path(".")
    strict_mode: bool = False
    recognized_shells: tuple[str, ...] = field(default_factory=_default_shells)
    output_json: bool = False
