"""Tests for extension-based content types."""

import pytest

from skillshandler_core import get_content_type
from skillshandler_core.content_types import CONTENT_TYPES, DEFAULT_CONTENT_TYPE


class TestGetContentType:
    @pytest.mark.parametrize(
        ("path", "expected"),
        [
            ("README.md", "text/markdown; charset=utf-8"),
            ("notes.markdown", "text/markdown; charset=utf-8"),
            ("data.json", "application/json"),
            ("config.yaml", "text/yaml; charset=utf-8"),
            ("config.yml", "text/yaml; charset=utf-8"),
            ("notes.txt", "text/plain; charset=utf-8"),
            ("scripts/extract.py", "text/x-python; charset=utf-8"),
            ("index.js", "text/javascript; charset=utf-8"),
            ("index.ts", "text/typescript; charset=utf-8"),
            ("run.sh", "text/x-shellscript; charset=utf-8"),
            ("run.bash", "text/x-shellscript; charset=utf-8"),
            ("page.html", "text/html; charset=utf-8"),
            ("style.css", "text/css; charset=utf-8"),
            ("feed.xml", "application/xml"),
        ],
    )
    def test_known_extensions(self, path, expected):
        assert get_content_type(path) == expected

    def test_case_insensitive(self):
        assert get_content_type("scripts/EXTRACT.PY") == CONTENT_TYPES["py"]

    def test_last_extension_wins(self):
        assert get_content_type("archive.tar.json") == "application/json"

    def test_unknown_extension(self):
        assert get_content_type("image.png") == DEFAULT_CONTENT_TYPE

    def test_no_extension(self):
        assert get_content_type("Makefile") == DEFAULT_CONTENT_TYPE
        assert get_content_type("scripts/run") == DEFAULT_CONTENT_TYPE
