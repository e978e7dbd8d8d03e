"""Unit tests for tag extraction."""

import pytest

from src.models import extract_tags


class TestExtractTags:
    """Test cases for extract_tags."""

    def test_terminated_by_separator_line(self):
        """Test a tags line closed by '---'."""
        assert extract_tags("tags: a, b, c\n---\n# Title") == {"a", "b", "c"}

    def test_terminated_by_blank_line(self):
        """Test a tags line closed by a blank line."""
        assert extract_tags("tags: a, b\n\n# Title\nc, d") == {"a", "b"}

    def test_terminated_by_end_of_text(self):
        """Test a tags line at the end of the text."""
        assert extract_tags("# Title\ntags: a, b") == {"a", "b"}

    @pytest.mark.parametrize(
        "text",
        [
            "tags: a, b, c\r\n---\r\n# Title\r\n",
            "tags: a, b, c\r\n\r\n# Title\r\nd, e\r\n",
            "tags: a, b, c\r---\r# Title\r",
        ],
    )
    def test_windows_and_classic_mac_line_endings(self, text):
        """Test that CRLF and CR documents stop at the same terminators."""
        assert extract_tags(text) == {"a", "b", "c"}

    def test_crlf_front_matter_block_with_yaml_list(self):
        """Test a CRLF front-matter block with a block style YAML list."""
        text = "---\r\ntags:\r\n  - include\r\n  - format\r\n---\r\n# Body\r\n"
        assert extract_tags(text) == {"include", "format"}

    def test_values_wrapping_onto_next_line(self):
        """Test values continuing on the following line."""
        assert extract_tags("tags: a, b,\nc\n---\n") == {"a", "b", "c"}

    def test_values_are_trimmed_and_lowercased(self):
        """Test normalisation of tag values."""
        assert extract_tags("tags:  Include ,FORMAT  ,  STL\n---") == {
            "include",
            "format",
            "stl",
        }

    def test_empty_values_dropped(self):
        """Test that empty comma separated values are ignored."""
        assert extract_tags("tags: a,, ,b,\n---") == {"a", "b"}

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "# Title\n\nSome text without metadata.",
            "The tags: line must start a line\n---",
        ],
    )
    def test_no_tags_line(self, text):
        """Test that text without a tags line yields an empty set."""
        assert extract_tags(text) == frozenset()

    def test_idempotent(self):
        """Test that parsing the same text twice yields the same set."""
        text = "tags: include, format\n---\n# Title"
        assert extract_tags(text) == extract_tags(text)

    def test_inline_yaml_list(self):
        """Test tags written as an inline YAML list."""
        assert extract_tags("tags: [include, format]\n---") == {"include", "format"}

    def test_front_matter_block_with_scalar_tags(self):
        """Test a front-matter block with comma separated tags."""
        text = "---\ntitle: Iterators\ntags: iterator, const\n---\n# Body"
        assert extract_tags(text) == {"iterator", "const"}

    def test_front_matter_block_with_yaml_list(self):
        """Test a front-matter block with a block style YAML list."""
        text = "---\ntags:\n  - Iterator\n  - const\n---\n# Body"
        assert extract_tags(text) == {"iterator", "const"}

    def test_invalid_front_matter_falls_back_to_line_rule(self):
        """Test that unparseable YAML front matter does not raise."""
        text = "---\ntitle: [unclosed\ntags: a, b\n---\n# Body"
        assert extract_tags(text) == {"a", "b"}
