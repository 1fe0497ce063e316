"""Serve Agent Skills over well-known URIs.

This package provides a framework-agnostic handler for the skills
discovery endpoints (``/.well-known/skills/index.json``,
``/{name}/SKILL.md``, ``/{name}/{file}``) and the abstractions it
builds on:

* :class:`SkillsHandler` / :func:`create_skills_handler` -- the request
  router and response renderer.
* :class:`SkillProvider` -- abstract interface for skill backends.
* :class:`StaticSkillProvider` -- skills defined in code.
* :class:`CompositeSkillProvider` -- merge providers, later ones win.
* :class:`Skill` -- immutable skill bundle.
* :func:`is_valid_skill_name`, :func:`is_valid_file_path`,
  :func:`validate_skill_frontmatter` -- standalone grammar checks.
* :class:`SkillsEvent` -- outcome records for the ``on_event`` hook.
* :class:`SkillsHandlerError` -- base class for all library exceptions.

Install::

    pip install skills-handler
"""

from skillshandler_core.cache import SkillSetCache
from skillshandler_core.composite import CompositeSkillProvider
from skillshandler_core.content_types import get_content_type
from skillshandler_core.events import EventSink, SkillsEvent, SkillsEventType
from skillshandler_core.exceptions import (
    MethodNotAllowedError,
    NotFoundError,
    ProviderError,
    ResourceNotFoundError,
    SkillNotFoundError,
    SkillsHandlerError,
    ValidationError,
)
from skillshandler_core.handler import (
    DEFAULT_CACHE_CONTROL,
    SkillsHandler,
    create_skills_handler,
)
from skillshandler_core.http import SkillsRequest, SkillsResponse
from skillshandler_core.parsing import split_frontmatter
from skillshandler_core.provider import SkillProvider
from skillshandler_core.routing import DEFAULT_BASE_PATH, resolve_route
from skillshandler_core.skill import Skill, SkillIndexEntry, reconstruct_skill_md
from skillshandler_core.static import StaticSkillProvider
from skillshandler_core.validation import (
    MAX_DESCRIPTION_LENGTH,
    SKILL_NAME_MAX_LENGTH,
    SKILL_NAME_PATTERN,
    is_valid_file_path,
    is_valid_skill_name,
    validate_skill,
    validate_skill_frontmatter,
)

__all__ = [
    "DEFAULT_BASE_PATH",
    "DEFAULT_CACHE_CONTROL",
    "MAX_DESCRIPTION_LENGTH",
    "SKILL_NAME_MAX_LENGTH",
    "SKILL_NAME_PATTERN",
    "CompositeSkillProvider",
    "EventSink",
    "MethodNotAllowedError",
    "NotFoundError",
    "ProviderError",
    "ResourceNotFoundError",
    "Skill",
    "SkillIndexEntry",
    "SkillNotFoundError",
    "SkillProvider",
    "SkillSetCache",
    "SkillsEvent",
    "SkillsEventType",
    "SkillsHandler",
    "SkillsHandlerError",
    "SkillsRequest",
    "SkillsResponse",
    "StaticSkillProvider",
    "ValidationError",
    "create_skills_handler",
    "get_content_type",
    "is_valid_file_path",
    "is_valid_skill_name",
    "reconstruct_skill_md",
    "resolve_route",
    "split_frontmatter",
    "validate_skill",
    "validate_skill_frontmatter",
]
