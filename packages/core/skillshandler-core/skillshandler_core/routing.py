"""Path normalization and route resolution.

Routing is pure: :func:`normalize_path` turns a request path into a
path relative to the handler's base prefix, and :func:`resolve_route`
maps that relative path onto exactly one route shape.  Neither function
performs I/O.

Route shapes, tried in order:

======================  ==============================  =====================
Relative path           Route                           Invalid segment
======================  ==============================  =====================
``/`` or empty          :class:`RootRoute`
``/index.json``         :class:`IndexRoute`
``/{name}/SKILL.md``    :class:`SkillDocumentRoute`     400 invalid name
``/{name}/{path...}``   :class:`SkillFileRoute`         400 invalid name/path
``/{name}``             :class:`SkillRedirectRoute`     falls through to 404
anything else           :class:`NotFoundRoute`
======================  ==============================  =====================

A malformed single-segment path is reported as a plain not-found rather
than an invalid-name error.  This matches the behaviour clients already
rely on and must not be extended to new routes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union
from urllib.parse import unquote

from skillshandler_core.exceptions import ValidationError
from skillshandler_core.validation import is_valid_file_path, is_valid_skill_name

#: Default mount point for the skills endpoints.
DEFAULT_BASE_PATH: str = "/.well-known/skills"

_SKILL_DOCUMENT_RE = re.compile(r"/([^/]+)/SKILL\.md")
_SKILL_FILE_RE = re.compile(r"/([^/]+)/(.+)", re.DOTALL)
_SKILL_DIR_RE = re.compile(r"/([^/]+)")


@dataclass(frozen=True)
class RootRoute:
    """The base path itself; redirects to the index."""


@dataclass(frozen=True)
class IndexRoute:
    """The ``index.json`` discovery index."""


@dataclass(frozen=True)
class SkillDocumentRoute:
    """A skill's reconstructed ``SKILL.md``."""

    skill_name: str


@dataclass(frozen=True)
class SkillFileRoute:
    """A supporting file within a skill."""

    skill_name: str
    file_path: str


@dataclass(frozen=True)
class SkillRedirectRoute:
    """A bare skill directory; redirects to its ``SKILL.md``."""

    skill_name: str


@dataclass(frozen=True)
class NotFoundRoute:
    """No route matched."""


Route = Union[
    RootRoute,
    IndexRoute,
    SkillDocumentRoute,
    SkillFileRoute,
    SkillRedirectRoute,
    NotFoundRoute,
]


def normalize_base_path(base_path: str) -> str:
    """Drop a single trailing slash from *base_path*."""
    return base_path[:-1] if base_path.endswith("/") else base_path


def normalize_path(path: str, base_path: str) -> str:
    """Return *path* relative to *base_path*.

    Steps:

    1. Percent-decode the path.
    2. Strip *base_path* if the path starts with it.  Otherwise the
       whole path is treated as relative, which lets the handler sit
       behind a router that already consumed the prefix.
    3. Ensure a leading ``/``.
    4. Remove one trailing ``/`` unless the result is exactly ``/``.

    Args:
        path: URL path component of the request.
        base_path: Normalized base prefix (see :func:`normalize_base_path`).

    Returns:
        The prefix-relative path.
    """
    relative = unquote(path)
    if relative.startswith(base_path):
        relative = relative[len(base_path) :]
    if not relative.startswith("/"):
        relative = "/" + relative
    if len(relative) > 1 and relative.endswith("/"):
        relative = relative[:-1]
    return relative


def resolve_route(relative_path: str) -> Route:
    """Match a normalized relative path to a route.

    Args:
        relative_path: Output of :func:`normalize_path`.

    Returns:
        The matching route.  Resolution is total: unmatched paths
        yield :class:`NotFoundRoute`.

    Raises:
        ValidationError: If a ``/{name}/...`` path carries an invalid
            skill name or file path.  ``skill_name`` and ``file_path``
            are set on the exception to whatever was parsed.
    """
    if relative_path in ("/", ""):
        return RootRoute()

    if relative_path == "/index.json":
        return IndexRoute()

    match = _SKILL_DOCUMENT_RE.fullmatch(relative_path)
    if match:
        skill_name = match.group(1)
        if not is_valid_skill_name(skill_name):
            raise ValidationError("Invalid skill name", skill_name=skill_name)
        return SkillDocumentRoute(skill_name)

    match = _SKILL_FILE_RE.fullmatch(relative_path)
    if match:
        skill_name, file_path = match.group(1), match.group(2)
        if not is_valid_skill_name(skill_name):
            raise ValidationError("Invalid skill name", skill_name=skill_name)
        if not is_valid_file_path(file_path):
            raise ValidationError(
                "Invalid file path", skill_name=skill_name, file_path=file_path
            )
        return SkillFileRoute(skill_name, file_path)

    match = _SKILL_DIR_RE.fullmatch(relative_path)
    if match and is_valid_skill_name(match.group(1)):
        return SkillRedirectRoute(match.group(1))

    return NotFoundRoute()
