"""Starlette (ASGI) adapter for the skills handler.

The core :class:`~skillshandler_core.SkillsHandler` knows nothing about
web frameworks.  This module translates Starlette requests into
:class:`~skillshandler_core.SkillsRequest` objects and
:class:`~skillshandler_core.SkillsResponse` objects back into Starlette
responses, so the handler can be served by any ASGI server or mounted
inside a larger Starlette / FastAPI application.

Routes are registered with ``methods=None`` so that every method reaches
the core handler, which owns method gating (``OPTIONS`` preflight, JSON
405 for anything else).  Paths are forwarded still percent-encoded and
decoded once by the handler.

Example::

    import uvicorn
    from skillshandler_core import create_skills_handler
    from skillshandler_fs import LocalFileSystemSkillProvider
    from skillshandler_starlette import create_skills_app

    handler = create_skills_handler(LocalFileSystemSkillProvider("./skills"))
    uvicorn.run(create_skills_app(handler))

Embedding in an existing application::

    app = FastAPI()
    app.router.routes.extend(create_skills_routes(handler))
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any
from urllib.parse import quote

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import Response
from starlette.routing import BaseRoute, Route
from starlette.types import Receive, Scope, Send

from skillshandler_core import SkillsHandler, SkillsRequest, SkillsResponse


def _raw_path(scope: Scope) -> str:
    """Return the request path still percent-encoded, including ``root_path``.

    The handler decodes the path itself, so it must see the bytes the
    client sent rather than Starlette's decoded ``scope["path"]``.
    """
    raw_path = scope.get("raw_path")
    if raw_path is None:
        return quote(scope["path"])
    path = raw_path.decode("latin-1").split("?", 1)[0]
    root_path = quote(scope.get("root_path", ""))
    if root_path and path != root_path and not path.startswith(root_path + "/"):
        path = root_path + path
    return path


def to_skills_request(request: Request) -> SkillsRequest:
    """Convert a Starlette request into a :class:`~skillshandler_core.SkillsRequest`.

    The URL keeps the path exactly as received so that encoded characters
    such as ``%3F`` or ``%25`` are decoded once, by the handler.
    """
    url = request.url
    target = _raw_path(request.scope)
    if url.query:
        target = f"{target}?{url.query}"
    return SkillsRequest(
        url=f"{url.scheme}://{url.netloc}{target}",
        method=request.method,
        headers=dict(request.headers),
    )


def to_starlette_response(response: SkillsResponse) -> Response:
    """Convert a :class:`~skillshandler_core.SkillsResponse` into a Starlette response."""
    return Response(
        content=response.body,
        status_code=response.status,
        headers=response.headers,
    )


class SkillsEndpoint:
    """ASGI endpoint that delegates to a :class:`~skillshandler_core.SkillsHandler`.

    Usable as a Starlette route endpoint or as a bare ASGI application.

    Args:
        handler: The skills handler to serve.
    """

    def __init__(self, handler: SkillsHandler) -> None:
        self._handler = handler

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        response = await self._handler(to_skills_request(request))
        await to_starlette_response(response)(scope, receive, send)


def create_skills_routes(handler: SkillsHandler) -> list[BaseRoute]:
    """Return routes serving *handler* under its ``base_path``.

    Two routes are produced: the bare base path and everything below it.

    Args:
        handler: The skills handler to serve.

    Returns:
        Routes ready to be added to a Starlette application.
    """
    endpoint = SkillsEndpoint(handler)
    base_path = handler.base_path
    return [
        Route(base_path or "/", endpoint=endpoint, methods=None),
        Route(f"{base_path}/{{path:path}}", endpoint=endpoint, methods=None),
    ]


def create_skills_app(
    handler: SkillsHandler,
    *,
    debug: bool = False,
    routes: Sequence[BaseRoute] = (),
    **options: Any,
) -> Starlette:
    """Build a standalone Starlette application serving *handler*.

    Every path not claimed by *routes* is passed to the handler, which
    answers 404 for anything outside its endpoints.

    Args:
        handler: The skills handler to serve.
        debug: Enable Starlette debug mode.
        routes: Extra routes matched before the catch-all.
        **options: Forwarded to :class:`~starlette.applications.Starlette`
            (for example ``lifespan``).

    Returns:
        An ASGI application.
    """
    endpoint = SkillsEndpoint(handler)
    return Starlette(
        debug=debug,
        routes=[
            *routes,
            Route("/{path:path}", endpoint=endpoint, methods=None),
        ],
        **options,
    )
