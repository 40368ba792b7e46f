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

"""Rich terminal output: one tree block per analyzed script.

Report lines go to stdout; strict-mode warnings go to stderr. Every line
is printed as a Text object, so paths and names containing brackets are
never read as markup.
"""

from __future__ import annotations

from rich.console import Console
from rich.text import Text

from shelldep.models.config import AnalyzerConfig
from shelldep.models.script import AnalyzedScript

RULE = "-" * 51


def _make_console(stderr: bool = False) -> Console:
    """Console with soft wrap and no auto-highlighting of paths and numbers."""
    return Console(soft_wrap=True, highlight=False, emoji=False, stderr=stderr)


console = _make_console()
err_console = _make_console(stderr=True)


def format_script_lines(result: AnalyzedScript) -> list[str]:
    """Report lines for one script (stdout part only)."""
    lines = [f"📦 Script: {result.path}"]

    if result.internal_deps:
        for dep in result.internal_deps:
            lines.append(f" ├── 🔗 Internal: {dep}")
    else:
        lines.append(" ├── 🔗 Internal: None")

    if result.external_commands:
        lines.append(f" ├── 🛠  External: {', '.join(result.external_commands)}")
    else:
        lines.append(" ├── 🛠  External: None")

    lines.append(f" └── 🎚️  Variables (Declared: {result.declared_count})")
    return lines


def format_warning(name: str) -> str:
    return f"     ⚠️  WARNING: '{name}' used but not declared/exported"


STRICT_PASSED = "     ✅ Strict Check Passed"


def print_run_header(config: AnalyzerConfig) -> None:
    """Print the target directory banner before the first script."""
    console.print(Text(f"Analyze directory: {config.target_directory}"))
    if config.strict_mode:
        console.print(Text("Strict mode: ON (Checking undeclared variables)"))
    console.print(Text(RULE))


def print_script_report(result: AnalyzedScript) -> None:
    """Print the tree block for one script, followed by a blank line."""
    header, *body = format_script_lines(result)
    console.print(Text(header, style="bold"))
    for line in body:
        console.print(Text(line))

    if result.audit_warnings is not None:
        if result.audit_warnings:
            for name in result.audit_warnings:
                err_console.print(Text(format_warning(name), style="yellow"))
        else:
            console.print(Text(STRICT_PASSED, style="green"))

    console.print()
