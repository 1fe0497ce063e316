"""Parse ``SKILL.md`` documents into frontmatter and body.

Providers that read skills from disk or over the network use
:func:`split_frontmatter` to recover the metadata and instruction body
that the handler later reassembles with
:func:`~skillshandler_core.reconstruct_skill_md`.
"""

from __future__ import annotations

from typing import Any

import yaml

#: Frontmatter blocks larger than this are ignored (treated as absent).
MAX_FRONTMATTER_BYTES: int = 64 * 1024

_DELIMITER = "---"


def split_frontmatter(raw: str) -> tuple[dict[str, Any], str]:
    """Split ``SKILL.md`` content into YAML frontmatter and markdown body.

    Frontmatter is the YAML block between a ``---`` line at the very
    start of the document and the next line consisting only of ``---``.
    If no well-formed frontmatter is found, or the YAML does not parse
    to a mapping, the whole document is returned as the body together
    with an empty dict.

    Args:
        raw: Full text of a ``SKILL.md`` file.

    Returns:
        A ``(frontmatter, body)`` tuple.  The body is stripped of
        surrounding whitespace when frontmatter was found.

    Example::

        meta, body = split_frontmatter(Path("SKILL.md").read_text())
        print(meta.get("name"))
    """
    lines = raw.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != _DELIMITER:
        return {}, raw

    for index in range(1, len(lines)):
        if lines[index].rstrip() == _DELIMITER:
            break
    else:
        return {}, raw

    fm_text = "".join(lines[1:index])
    if len(fm_text.encode("utf-8")) > MAX_FRONTMATTER_BYTES:
        return {}, raw

    try:
        metadata = yaml.safe_load(fm_text) or {}
    except yaml.YAMLError:
        return {}, raw
    if not isinstance(metadata, dict):
        return {}, raw

    body = "".join(lines[index + 1 :]).strip()
    return metadata, body
