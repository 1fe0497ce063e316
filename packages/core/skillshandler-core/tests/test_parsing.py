"""Tests for SKILL.md frontmatter parsing."""

from skillshandler_core import split_frontmatter
from skillshandler_core.parsing import MAX_FRONTMATTER_BYTES


class TestSplitFrontmatter:
    def test_basic(self):
        raw = "---\nname: my-skill\ndescription: Does things.\n---\n# Title\n\nBody."
        meta, body = split_frontmatter(raw)
        assert meta == {"name": "my-skill", "description": "Does things."}
        assert body == "# Title\n\nBody."

    def test_body_is_stripped(self):
        meta, body = split_frontmatter("---\nname: a\n---\n\n\n# Body\n\n")
        assert meta == {"name": "a"}
        assert body == "# Body"

    def test_crlf_line_endings(self):
        meta, body = split_frontmatter("---\r\nname: a\r\n---\r\nBody\r\n")
        assert meta == {"name": "a"}
        assert body == "Body"

    def test_no_frontmatter(self):
        raw = "# Just a body"
        assert split_frontmatter(raw) == ({}, raw)

    def test_empty_document(self):
        assert split_frontmatter("") == ({}, "")

    def test_unterminated_frontmatter(self):
        raw = "---\nname: a\n# never closed"
        assert split_frontmatter(raw) == ({}, raw)

    def test_delimiter_must_be_first_line(self):
        raw = "\n---\nname: a\n---\nBody"
        assert split_frontmatter(raw) == ({}, raw)

    def test_malformed_yaml(self):
        raw = "---\n: :\ninvalid yaml{{{\n---\n# Body"
        assert split_frontmatter(raw) == ({}, raw)

    def test_non_mapping_yaml(self):
        raw = "---\n- a\n- b\n---\nBody"
        assert split_frontmatter(raw) == ({}, raw)

    def test_empty_frontmatter(self):
        meta, body = split_frontmatter("---\n---\nBody")
        assert meta == {}
        assert body == "Body"

    def test_dashes_inside_body_are_kept(self):
        meta, body = split_frontmatter("---\nname: a\n---\nintro\n---\nmore")
        assert meta == {"name": "a"}
        assert body == "intro\n---\nmore"

    def test_oversized_frontmatter(self):
        filler = "x: " + "y" * MAX_FRONTMATTER_BYTES + "\n"
        raw = f"---\n{filler}---\nBody"
        assert split_frontmatter(raw) == ({}, raw)
