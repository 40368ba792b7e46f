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

"""Models for script candidates and their analysis results."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_serializer


class CommandClass(str, Enum):
    """Outcome of classifying a leading command token."""

    IGNORED = "ignored"  # shell grammar keyword
    BUILTIN = "builtin"
    EXTERNAL = "external"
    UNRESOLVED = "unresolved"  # script-local function or unknown


@dataclass(frozen=True)
class ScriptCandidate:
    """A discovered file and its raw bytes, read once."""

    path: str
    content: bytes

    @property
    def first_line(self) -> str:
        return self.content.split(b"\n", 1)[0].decode("utf-8", errors="replace")

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class AnalyzedScript(BaseModel):
    """Dependencies and variable usage of a single shell script.

    internal_deps are the sourced paths exactly as written (not resolved,
    not checked for existence). external_commands keeps first-seen order
    for display; the variable sets are only used for membership.
    audit_warnings is None unless strict mode ran.
    """

    path: str
    internal_deps: list[str] = Field(default_factory=list)
    declared_vars: set[str] = Field(default_factory=set)
    used_vars: set[str] = Field(default_factory=set)
    external_commands: list[str] = Field(default_factory=list)
    audit_warnings: Optional[list[str]] = None

    @property
    def declared_count(self) -> int:
        return len(self.declared_vars)

    @field_serializer("declared_vars", "used_vars")
    def _serialize_sorted(self, names: set[str]) -> list[str]:
        return sorted(names)
