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

"""shelldep CLI: Typer entry point.

Usage:
    shelldep [OPTIONS] [DIRECTORY]

Scans DIRECTORY (default: current directory) for shell scripts and prints
their sourced files, external commands and declared variable count. With
--strict, also warns about variables that are used but neither declared
nor present in the environment.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import click
import typer
from rich.text import Text
from typer.core import TyperCommand

from shelldep import __version__
from shelldep.models.config import AnalyzerConfig
from shelldep.models.script import AnalyzedScript
from shelldep.platform import PlatformFacts, SystemPlatform
from shelldep.reporter.console_out import (
    console,
    err_console,
    print_run_header,
    print_script_report,
)
from shelldep.reporter.json_out import build_run_document, to_canonical_json
from shelldep.scanner.coordinator import iter_shell_scripts
from shelldep.scanner.shell_analyzer import analyze_script

app = typer.Typer(
    name="shelldep",
    help="shelldep: static dependency analyzer for shell scripts.",
    add_completion=False,
)

logger = logging.getLogger("shelldep")


def _configure_logging(*, verbose: bool, quiet: bool) -> None:
    if quiet:
        logging.basicConfig(level=logging.ERROR)
    elif verbose:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING)


def _split_arguments(args: list[str]) -> list[str]:
    """Return positional arguments, failing on the first unexpected flag."""
    positional: list[str] = []
    for arg in args:
        if arg.startswith("-"):
            err_console.print(Text(f"Did not expect flag - {arg}", style="red"))
            raise typer.Exit(code=1)
        positional.append(arg)
    return positional


class AnalyzerCommand(TyperCommand):
    """Command whose argument errors exit with status 1 instead of 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            err_console.print(Text(f"Error: {e.format_message()}", style="red"))
            raise typer.Exit(code=1)


def _version_callback(value: bool) -> None:
    if value:
        console.print(Text(f"shelldep v{__version__}"))
        raise typer.Exit()


def run_analysis(config: AnalyzerConfig, platform: PlatformFacts) -> list[AnalyzedScript]:
    """Analyze every recognized script under the target directory.

    In text mode each script is printed as soon as it is analyzed; in JSON
    mode the whole document is printed at the end.
    """
    if not config.output_json:
        print_run_header(config)

    results: list[AnalyzedScript] = []
    for candidate in iter_shell_scripts(config.target_directory, config.recognized_shells):
        result = analyze_script(candidate, config, platform)
        results.append(result)
        if not config.output_json:
            print_script_report(result)

    if config.output_json:
        document = build_run_document(config, results)
        console.out(to_canonical_json(document), end="", highlight=False)

    logger.info("Analyzed %d shell script(s) under %s", len(results), config.target_directory)
    return results


@app.command(
    cls=AnalyzerCommand,
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
    },
)
def main(
    args: Optional[List[str]] = typer.Argument(
        None,
        metavar="[DIRECTORY]",
        help="Directory to scan (default: current directory)",
        show_default=False,
    ),
    strict: bool = typer.Option(
        False, "--strict", "-s",
        help="Report variables used but not declared or exported",
    ),
    output_json: bool = typer.Option(False, "--json", help="Output JSON to stdout"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Suppress all logging except errors"),
    version: Optional[bool] = typer.Option(
        None, "--version",
        callback=_version_callback, is_eager=True,
        help="Show the shelldep version and exit",
    ),
) -> None:
    """Analyze shell script dependencies under DIRECTORY.

    Reports sourced files (internal dependencies), commands resolved on the
    search path (external dependencies) and the number of declared
    variables for every script whose shebang names a known shell.
    """
    positional = _split_arguments(args or [])
    _configure_logging(verbose=verbose, quiet=quiet)

    target = Path(positional[0]) if positional else Path(".")
    config = AnalyzerConfig(
        target_directory=target,
        strict_mode=strict,
        output_json=output_json,
    )
    run_analysis(config, SystemPlatform())


if __name__ == "__main__":
    app()
