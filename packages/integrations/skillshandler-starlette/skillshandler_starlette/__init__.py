"""Starlette / ASGI integration for the skills handler.

This package bridges :mod:`skillshandler_core` and
`Starlette <https://www.starlette.io>`_ (and therefore FastAPI),
providing:

* :func:`create_skills_app` -- a standalone ASGI application.
* :func:`create_skills_routes` -- routes to embed in an existing app.
* :class:`SkillsEndpoint` -- the ASGI endpoint behind both.
* :func:`to_skills_request` / :func:`to_starlette_response` -- request
  and response conversion.

Quick start::

    from skillshandler_core import create_skills_handler
    from skillshandler_starlette import create_skills_app

    app = create_skills_app(create_skills_handler(provider))

Install::

    pip install skills-handler
"""

from skillshandler_starlette.app import (
    SkillsEndpoint,
    create_skills_app,
    create_skills_routes,
    to_skills_request,
    to_starlette_response,
)

__all__ = [
    "SkillsEndpoint",
    "create_skills_app",
    "create_skills_routes",
    "to_skills_request",
    "to_starlette_response",
]
