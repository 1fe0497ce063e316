"""Remote skill provider for the skills handler.

This package provides :class:`RemoteSkillProvider`, a concrete
implementation of :class:`~skillshandler_core.SkillProvider` that mirrors
the skills published by another ``/.well-known/skills`` endpoint over
HTTP, using `httpx <https://www.python-httpx.org/>`_.

Install::

    pip install skills-handler
"""

from skillshandler_http.remote import RemoteSkillProvider

__all__ = ["RemoteSkillProvider"]
