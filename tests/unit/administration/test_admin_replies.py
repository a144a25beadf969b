"""
Unit tests for operator reply formatting helpers.
"""
from administration.domain.replies import AdminReply, code, escape_markdown


class TestReplyHelpers:
    """Tests for Markdown helpers."""

    def test_code_wraps_plain_values(self):
        """Test ordinary values become inline code."""
        assert code("a_b*c") == "`a_b*c`"

    def test_code_escapes_backticks(self):
        """Test values with backticks fall back to escaped text."""
        assert code("a`b") == "a\\`b"

    def test_escape_markdown(self):
        """Test every legacy Markdown delimiter is escaped."""
        assert escape_markdown("_*`[") == "\\_\\*\\`\\["

    def test_reply_defaults_to_markdown(self):
        """Test replies are Markdown unless marked plain."""
        assert AdminReply("x").markdown is True
        assert str(AdminReply("x", markdown=False)) == "x"
