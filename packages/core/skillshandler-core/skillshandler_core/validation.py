"""Naming and path grammars for skills.

These predicates are pure and never raise.  The handler uses them to
reject untrusted URL segments before any provider is consulted, and
providers reuse them to validate the skills they load.

Skill names follow the `Agent Skills naming rules
<https://agentskills.io/specification>`_: 1-64 characters of lowercase
alphanumerics and hyphens, no leading or trailing hyphen, and no
consecutive hyphens.

File paths are checked without touching a filesystem so the same rule
applies to in-memory and remote providers.  A valid path is relative,
uses forward slashes, never contains ``..``, and has no characters that
could smuggle a query, a fragment, or raw binary into a URL.

Example::

    from skillshandler_core import is_valid_file_path, is_valid_skill_name

    assert is_valid_skill_name("git-workflow")
    assert not is_valid_file_path("../etc/passwd")
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from skillshandler_core.skill import Skill

#: Maximum length of a skill name.
SKILL_NAME_MAX_LENGTH: int = 64

#: Maximum length of a skill description.
MAX_DESCRIPTION_LENGTH: int = 1024

#: Lowercase alphanumeric segments joined by single hyphens.
SKILL_NAME_PATTERN: re.Pattern[str] = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")

# ``?`` and ``#`` would start a query or fragment, ``[`` and ``]`` are
# reserved for IPv6 literals, and the ranges cover control characters
# and raw Latin-1 bytes.
_INVALID_PATH_CHARS_RE = re.compile(r"[?#\[\]\x00-\x1f\x7f-\xff]")


def is_valid_skill_name(name: Any) -> bool:
    """Return ``True`` if *name* satisfies the skill-name grammar.

    Args:
        name: Candidate skill name.  Non-string values are rejected.

    Returns:
        Whether the name is 1-64 characters of ``[a-z0-9-]`` with no
        leading, trailing, or doubled hyphen.
    """
    if not isinstance(name, str):
        return False
    if not name or len(name) > SKILL_NAME_MAX_LENGTH:
        return False
    return SKILL_NAME_PATTERN.fullmatch(name) is not None


def is_valid_file_path(path: Any) -> bool:
    """Return ``True`` if *path* is a safe, skill-relative file path.

    Rejects empty strings, absolute paths, any ``..`` substring,
    backslashes, ``?``, ``#``, ``[``, ``]``, and characters in the
    ``0x00-0x1F`` and ``0x7F-0xFF`` ranges.

    Args:
        path: Candidate path relative to the skill directory.

    Returns:
        Whether the path may be passed to a provider.
    """
    if not isinstance(path, str) or not path:
        return False
    if path.startswith("/"):
        return False
    if ".." in path or "\\" in path:
        return False
    return _INVALID_PATH_CHARS_RE.search(path) is None


def validate_skill_frontmatter(data: Any) -> bool:
    """Return ``True`` if *data* is usable skill frontmatter.

    The frontmatter must be a mapping with a string ``name`` that passes
    :func:`is_valid_skill_name` and a string ``description`` of 1-1024
    characters.  Any other shape is rejected without raising.

    Args:
        data: Parsed frontmatter of arbitrary type.

    Returns:
        Whether the frontmatter has the required fields.
    """
    if not isinstance(data, Mapping):
        return False
    if not is_valid_skill_name(data.get("name")):
        return False
    description = data.get("description")
    if not isinstance(description, str):
        return False
    return 0 < len(description) <= MAX_DESCRIPTION_LENGTH


def validate_skill(skill: Skill) -> list[str]:
    """Validate a :class:`~skillshandler_core.Skill` before it is served.

    Validation rules:

    * ``name`` passes the skill-name grammar.
    * ``description`` is a non-empty string of at most 1024 characters.
    * ``files`` contains ``"SKILL.md"``.
    * Every entry in ``files`` passes :func:`is_valid_file_path`.

    Args:
        skill: The skill to validate.

    Returns:
        A list of human-readable error messages.  An empty list means
        the skill is valid.
    """
    errors: list[str] = []
    name = skill.name

    if not is_valid_skill_name(name):
        errors.append(
            f"Skill {name!r}: name must be 1-{SKILL_NAME_MAX_LENGTH} lowercase "
            f"alphanumeric characters or hyphens, must not start or end with a "
            f"hyphen, and must not contain consecutive hyphens"
        )

    description = skill.description
    if not isinstance(description, str) or not description:
        errors.append(f"Skill {name!r}: description is empty")
    elif len(description) > MAX_DESCRIPTION_LENGTH:
        errors.append(f"Skill {name!r}: description exceeds {MAX_DESCRIPTION_LENGTH} characters")

    if "SKILL.md" not in skill.files:
        errors.append(f"Skill {name!r}: files must include SKILL.md")

    for file_path in skill.files:
        if not is_valid_file_path(file_path):
            errors.append(f"Skill {name!r}: invalid file path {file_path!r}")

    return errors
