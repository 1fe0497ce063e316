"""Map skill file extensions to ``Content-Type`` values."""

from __future__ import annotations

#: Fallback for unknown or missing extensions.
DEFAULT_CONTENT_TYPE: str = "text/plain; charset=utf-8"

CONTENT_TYPES: dict[str, str] = {
    "md": "text/markdown; charset=utf-8",
    "markdown": "text/markdown; charset=utf-8",
    "json": "application/json",
    "yaml": "text/yaml; charset=utf-8",
    "yml": "text/yaml; charset=utf-8",
    "txt": "text/plain; charset=utf-8",
    "py": "text/x-python; charset=utf-8",
    "js": "text/javascript; charset=utf-8",
    "ts": "text/typescript; charset=utf-8",
    "sh": "text/x-shellscript; charset=utf-8",
    "bash": "text/x-shellscript; charset=utf-8",
    "html": "text/html; charset=utf-8",
    "css": "text/css; charset=utf-8",
    "xml": "application/xml",
}


def get_content_type(file_path: str) -> str:
    """Return the ``Content-Type`` for *file_path* based on its extension.

    The extension is whatever follows the last ``.``, compared
    case-insensitively.  File content is never inspected.

    Example::

        >>> get_content_type("scripts/extract.PY")
        'text/x-python; charset=utf-8'
        >>> get_content_type("Makefile")
        'text/plain; charset=utf-8'
    """
    extension = file_path.rsplit(".", 1)[-1].lower()
    return CONTENT_TYPES.get(extension, DEFAULT_CONTENT_TYPE)
