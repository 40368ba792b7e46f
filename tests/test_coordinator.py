"""Tests for script discovery and shebang classification."""

import logging
import os
from pathlib import Path

import pytest

from shelldep.scanner.coordinator import (
    has_shell_shebang,
    is_shell_script,
    iter_candidate_files,
    iter_shell_scripts,
    load_candidate,
)
from shelldep.scanner.rules import get_syntax_rules

FIXTURES = Path(__file__).parent / "fixtures" / "scripts"
SHELLS = ("sh", "dash", "ksh", "bash", "zsh", "fish")


def _write(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


class TestCandidateDiscovery:
    """Recursive walk with hidden-path pruning."""

    def test_finds_nested_files(self, tmp_path: Path):
        _write(tmp_path / "a.sh", "#!/bin/sh\n")
        _write(tmp_path / "sub" / "b.sh", "#!/bin/sh\n")
        files = list(iter_candidate_files(tmp_path))
        assert files == [str(tmp_path / "a.sh"), str(tmp_path / "sub" / "b.sh")]

    def test_hidden_directory_excluded(self, tmp_path: Path):
        _write(tmp_path / ".hidden" / "tool.sh", "#!/usr/bin/env bash\necho hi\n")
        _write(tmp_path / "visible.sh", "#!/usr/bin/env bash\n")
        files = list(iter_candidate_files(tmp_path))
        assert files == [str(tmp_path / "visible.sh")]

    def test_hidden_file_excluded(self, tmp_path: Path):
        _write(tmp_path / ".envrc", "#!/bin/bash\n")
        assert list(iter_candidate_files(tmp_path)) == []

    def test_nested_hidden_directory_excluded(self, tmp_path: Path):
        _write(tmp_path / "repo" / ".git" / "hooks" / "pre-commit", "#!/bin/sh\n")
        assert list(iter_candidate_files(tmp_path)) == []

    def test_directories_not_yielded(self, tmp_path: Path):
        (tmp_path / "empty").mkdir()
        assert list(iter_candidate_files(tmp_path)) == []

    def test_symlinks_not_yielded(self, tmp_path: Path):
        target = _write(tmp_path / "real.sh", "#!/bin/sh\n")
        os.symlink(target, tmp_path / "link.sh")
        assert list(iter_candidate_files(tmp_path)) == [str(target)]

    def test_nonexistent_root_yields_nothing(self, tmp_path: Path):
        assert list(iter_candidate_files(tmp_path / "missing")) == []

    def test_file_root_yields_nothing(self, tmp_path: Path):
        f = _write(tmp_path / "x.sh", "#!/bin/sh\n")
        assert list(iter_candidate_files(f)) == []

    def test_is_lazy(self, tmp_path: Path):
        _write(tmp_path / "a.sh", "#!/bin/sh\n")
        walker = iter_candidate_files(tmp_path)
        assert next(walker) == str(tmp_path / "a.sh")

    def test_relative_root_keeps_dot_prefix(self, tmp_path: Path, monkeypatch):
        _write(tmp_path / "run.sh", "#!/bin/sh\n")
        _write(tmp_path / "lib" / "common.sh", "#!/bin/sh\n")
        monkeypatch.chdir(tmp_path)
        assert list(iter_candidate_files(Path("."))) == ["./run.sh", "./lib/common.sh"]

    def test_traversal_errors_swallowed(self, tmp_path: Path, monkeypatch, caplog):
        _write(tmp_path / "a.sh", "#!/bin/sh\n")
        real_walk = os.walk

        def failing_walk(top, onerror=None):
            onerror(PermissionError(13, "Permission denied", os.path.join(top, "locked")))
            yield from real_walk(top, onerror=onerror)

        monkeypatch.setattr(os, "walk", failing_walk)
        caplog.set_level(logging.DEBUG, logger="shelldep.scanner.coordinator")

        assert list(iter_candidate_files(tmp_path)) == [str(tmp_path / "a.sh")]
        assert "Skipping unreadable path" in caplog.text


class TestLoadCandidate:
    """Single read of each candidate file."""

    def test_reads_bytes(self, tmp_path: Path):
        path = _write(tmp_path / "a.sh", "#!/bin/sh\necho hi\n")
        candidate = load_candidate(path)
        assert candidate is not None
        assert candidate.content == b"#!/bin/sh\necho hi\n"
        assert candidate.path == str(path)
        assert candidate.first_line == "#!/bin/sh"
        assert candidate.text == "#!/bin/sh\necho hi\n"

    def test_missing_file_returns_none(self, tmp_path: Path):
        assert load_candidate(tmp_path / "gone.sh") is None

    def test_undecodable_bytes_replaced(self, tmp_path: Path):
        path = tmp_path / "bin.sh"
        path.write_bytes(b"#!/bin/sh\n\xff\xfe\n")
        candidate = load_candidate(path)
        assert candidate is not None
        assert "\ufffd" in candidate.text


class TestShebangClassifier:
    """Interpreter directive matching."""

    @pytest.mark.parametrize("line", [
        "#!/usr/bin/env bash",
        "#!/bin/sh",
        "#!/bin/dash",
        "#!/usr/bin/zsh",
        "#!/usr/bin/env fish",
        "#!/bin/ksh -e",
    ])
    def test_recognized(self, line: str):
        assert has_shell_shebang(line, SHELLS)

    @pytest.mark.parametrize("line", [
        "echo bash",
        "# bash script",
        "",
        "#!/usr/bin/env python3",
        "#!/usr/bin/perl",
    ])
    def test_not_recognized(self, line: str):
        assert not has_shell_shebang(line, SHELLS)

    def test_substring_match_is_loose(self):
        """Any interpreter name containing a shell name counts."""
        assert has_shell_shebang("#!/opt/bin/mybashlike", SHELLS)

    def test_is_shell_script_reads_file(self, tmp_path: Path):
        script = _write(tmp_path / "run", "#!/usr/bin/env bash\necho hi\n")
        assert is_shell_script(script)

    def test_no_shebang_file(self, tmp_path: Path):
        script = _write(tmp_path / "run.sh", "echo hi\n")
        assert not is_shell_script(script)

    def test_empty_file(self, tmp_path: Path):
        script = _write(tmp_path / "empty.sh", "")
        assert not is_shell_script(script)

    def test_unreadable_file(self, tmp_path: Path):
        assert not is_shell_script(tmp_path / "missing.sh")

    def test_binary_file(self, tmp_path: Path):
        path = tmp_path / "blob"
        path.write_bytes(b"\x7fELF\x02\x01\x01\x00sh")
        assert not is_shell_script(path)

    def test_default_shells_from_rules(self):
        assert get_syntax_rules().recognized_shells == SHELLS


class TestIterShellScripts:
    """Discovery plus classification over the fixture tree."""

    def test_fixture_scripts(self):
        found = [c.path for c in iter_shell_scripts(FIXTURES, SHELLS)]
        assert found == [
            str(FIXTURES / "deploy.sh"),
            str(FIXTURES / "run.sh"),
            str(FIXTURES / "keys" / "entry.sh"),
            str(FIXTURES / "lib" / "common.sh"),
        ]

    def test_python_and_text_skipped(self):
        names = {os.path.basename(c.path) for c in iter_shell_scripts(FIXTURES, SHELLS)}
        assert "tool.py" not in names
        assert "NOTES.txt" not in names

    def test_empty_shell_set_matches_nothing(self):
        assert list(iter_shell_scripts(FIXTURES, ())) == []

    def test_unreadable_script_skipped(self, tmp_path: Path, monkeypatch):
        for name in ("a.sh", "b.sh", "c.sh"):
            _write(tmp_path / name, "#!/bin/sh\necho hi\n")
        real_read_bytes = Path.read_bytes

        def read_bytes(self):
            if self.name == "b.sh":
                raise PermissionError(13, "Permission denied", str(self))
            return real_read_bytes(self)

        monkeypatch.setattr(Path, "read_bytes", read_bytes)
        found = [c.path for c in iter_shell_scripts(tmp_path, SHELLS)]
        assert found == [str(tmp_path / "a.sh"), str(tmp_path / "c.sh")]

    def test_only_scripts_read_in_full(self, tmp_path: Path, monkeypatch):
        (tmp_path / "blob.bin").write_bytes(b"\x00" * 1_000_000)
        _write(tmp_path / "notes.txt", "plain text\n")
        _write(tmp_path / "run.sh", "#!/bin/sh\necho hi\n")
        real_read_bytes = Path.read_bytes
        reads = []

        def read_bytes(self):
            reads.append(self.name)
            return real_read_bytes(self)

        monkeypatch.setattr(Path, "read_bytes", read_bytes)
        found = [c.path for c in iter_shell_scripts(tmp_path, SHELLS)]
        assert found == [str(tmp_path / "run.sh")]
        assert reads == ["run.sh"]
