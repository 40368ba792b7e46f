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

"""File walker and shebang classifier.

Discovery is best-effort: hidden paths are pruned, only regular files are
yielded, and unreadable subtrees are skipped without aborting the walk.
"""

from __future__ import annotations

import logging
import os
import stat
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Optional

from shelldep.models.script import ScriptCandidate
from shelldep.scanner.rules import get_syntax_rules

logger = logging.getLogger(__name__)

SHEBANG = "#!"


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _is_regular_file(path: str) -> bool:
    try:
        return stat.S_ISREG(os.lstat(path).st_mode)
    except OSError as e:
        logger.debug("Could not stat %s: %s", path, e)
        return False


def _log_walk_error(error: OSError) -> None:
    logger.debug("Skipping unreadable path: %s", error)


def iter_candidate_files(target_dir: Path) -> Iterator[str]:
    """Lazily yield every non-hidden regular file under target_dir.

    Paths are target_dir joined with the relative path, in sorted walk
    order, kept as strings so a leading "./" survives. A missing root
    yields nothing.
    """
    root = str(target_dir)
    if not os.path.isdir(root):
        logger.warning("Target directory does not exist or is not a directory: %s", root)
        return

    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        # Prune in place so os.walk never descends into hidden directories
        dirnames[:] = sorted(d for d in dirnames if not _is_hidden(d))
        for name in sorted(filenames):
            if _is_hidden(name):
                continue
            full_path = os.path.join(dirpath, name)
            if _is_regular_file(full_path):
                yield full_path


def load_candidate(path: str | Path) -> Optional[ScriptCandidate]:
    """Read a file's bytes once. Returns None if the file cannot be read."""
    try:
        return ScriptCandidate(path=str(path), content=Path(path).read_bytes())
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
        return None


def has_shell_shebang(first_line: str, shells: Iterable[str]) -> bool:
    """True if first_line is an interpreter directive naming a known shell.

    Matching is plain substring containment, so "bash" also matches any
    interpreter path that merely contains it.
    """
    if not first_line.startswith(SHEBANG):
        return False
    return any(shell in first_line for shell in shells)


def read_first_line(path: str | Path) -> Optional[str]:
    """Read only the first line of a file, or None if it is unreadable."""
    try:
        with open(path, "rb") as f:
            line = f.readline()
    except OSError as e:
        logger.debug("Could not read %s: %s", path, e)
        return None
    return line.rstrip(b"\n").decode("utf-8", errors="replace")


def is_shell_script(path: str | Path, shells: Optional[Iterable[str]] = None) -> bool:
    """Check whether a file's shebang names one of the recognized shells."""
    first_line = read_first_line(path)
    if first_line is None:
        return False
    if shells is None:
        shells = get_syntax_rules().recognized_shells
    return has_shell_shebang(first_line, shells)


def iter_shell_scripts(
    target_dir: Path, shells: Iterable[str]
) -> Iterator[ScriptCandidate]:
    """Discover and classify files, yielding recognized scripts.

    Only the first line of each file is read for classification; the full
    content is loaded once, and only for files that pass.
    """
    shells = tuple(shells)
    for path in iter_candidate_files(target_dir):
        if not is_shell_script(path, shells):
            logger.debug("Not a shell script: %s", path)
            continue
        candidate = load_candidate(path)
        if candidate is not None:
            yield candidate
