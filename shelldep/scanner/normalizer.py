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

"""Comment stripping for shell script text.

Line-oriented and not quote-aware: a `#` inside a quoted string still
starts a comment, and so does the `#` of `$#`. Every later extraction pass
works on this view, so the same truncation applies to all of them.
"""

from __future__ import annotations

import re

# `#` not preceded by a backslash, through end of line
_COMMENT = re.compile(r"(?<!\\)#[^\n]*")


def strip_comments(text: str) -> str:
    """Remove comment text from every line, keeping the newlines."""
    return _COMMENT.sub("", text)
