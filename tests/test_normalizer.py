"""Tests for comment stripping."""

from shelldep.scanner.normalizer import strip_comments


class TestStripComments:
    """Line-oriented removal of `#` comments."""

    def test_trailing_comment_removed_newline_kept(self):
        assert strip_comments("X=1 # comment\n") == "X=1 \n"

    def test_hash_inside_quotes_not_protected(self):
        """Quotes are not honored: the line is cut at the `#`."""
        assert strip_comments('echo "a#b"\n') == 'echo "a\n'

    def test_full_line_comment_becomes_empty_line(self):
        assert strip_comments("# header\necho hi\n") == "\necho hi\n"

    def test_shebang_is_stripped(self):
        assert strip_comments("#!/bin/bash\nls\n") == "\nls\n"

    def test_escaped_hash_kept(self):
        assert strip_comments("echo \\#tag # note\n") == "echo \\#tag \n"

    def test_every_line_processed(self):
        text = "a # one\nb # two\nc\n"
        assert strip_comments(text) == "a \nb \nc\n"

    def test_no_comment_unchanged(self):
        text = "source ./lib.sh\nX=1\n"
        assert strip_comments(text) == text

    def test_dollar_hash_is_truncated(self):
        """`$#` is read as a comment start, like any other `#`."""
        assert strip_comments('echo "$#"\n') == 'echo "$\n'
