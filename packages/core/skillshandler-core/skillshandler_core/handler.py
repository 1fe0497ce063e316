"""Serve skills over well-known URIs.

:class:`SkillsHandler` is a framework-agnostic request dispatcher.  It
takes a :class:`~skillshandler_core.SkillsRequest`, routes it, asks a
:class:`~skillshandler_core.SkillProvider` for content, and returns a
:class:`~skillshandler_core.SkillsResponse`.  It never raises: every
failure is rendered as a JSON error body.

Endpoints (relative to ``base_path``, default ``/.well-known/skills``):

====================  ===================================================
Path                  Response
====================  ===================================================
``/``                 302 to ``index.json``
``/index.json``       Discovery index of every skill
``/{name}/SKILL.md``  Skill document rebuilt from metadata and body
``/{name}/{file}``    Supporting file, typed by extension
``/{name}``           302 to ``/{name}/SKILL.md``
====================  ===================================================

Only ``GET`` and ``HEAD`` are routed.  ``OPTIONS`` answers a CORS
preflight and every other method gets a 405.

The handler is stateless across requests: configuration is captured at
construction and each request awaits at most one provider call.

Example::

    from skillshandler_core import Skill, StaticSkillProvider, create_skills_handler

    handler = create_skills_handler(
        StaticSkillProvider([
            Skill(
                name="git-workflow",
                description="Follow team Git conventions for branching and commits.",
                body="# Git Workflow\\n\\nCreate feature branches from `main`.",
            ),
        ]),
    )
    response = await handler(SkillsRequest("https://example.com/.well-known/skills/index.json"))
"""

from __future__ import annotations

import json
import logging
from collections.abc import Sequence
from typing import Any, Literal, Union

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
from skillshandler_core.http import SkillsRequest, SkillsResponse
from skillshandler_core.provider import SkillProvider
from skillshandler_core.routing import (
    DEFAULT_BASE_PATH,
    IndexRoute,
    RootRoute,
    Route,
    SkillDocumentRoute,
    SkillFileRoute,
    SkillRedirectRoute,
    normalize_base_path,
    normalize_path,
    resolve_route,
)
from skillshandler_core.skill import Skill, reconstruct_skill_md

_logger = logging.getLogger(__name__)

#: Default ``Cache-Control`` header value.
DEFAULT_CACHE_CONTROL: str = "public, max-age=3600"

ALLOWED_METHODS: str = "GET, HEAD, OPTIONS"

_JSON = "application/json"
_MARKDOWN = "text/markdown; charset=utf-8"

CorsSetting = Union[str, Sequence[str], Literal[False]]


class SkillsHandler:
    """Async request handler for the skills endpoints.

    Instances are callables: ``response = await handler(request)``.

    Args:
        provider: Source of skills and supporting files.
        base_path: URL prefix the endpoints live under.  One trailing
            slash is ignored.
        verbose_logs: Log every request at INFO level and include
            tracebacks when a provider fails.
        cache_control: ``Cache-Control`` header sent with every
            response.
        cors: ``"*"`` to allow any origin, a list of allowed origins,
            or ``False`` to omit CORS headers entirely.
        on_event: Optional callback receiving a
            :class:`~skillshandler_core.SkillsEvent` for each outcome.
            Exceptions it raises are logged and ignored.
    """

    def __init__(
        self,
        provider: SkillProvider,
        *,
        base_path: str = DEFAULT_BASE_PATH,
        verbose_logs: bool = False,
        cache_control: str = DEFAULT_CACHE_CONTROL,
        cors: CorsSetting = "*",
        on_event: EventSink | None = None,
    ) -> None:
        self._provider = provider
        self._base_path = normalize_base_path(base_path)
        self._verbose = verbose_logs
        self._cache_control = cache_control
        self._cors_origin = _cors_origin(cors)
        self._on_event = on_event

    def __repr__(self) -> str:
        return f"SkillsHandler(base_path={self._base_path!r}, provider={self._provider!r})"

    @property
    def base_path(self) -> str:
        """The normalized base path."""
        return self._base_path

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------

    async def __call__(self, request: SkillsRequest) -> SkillsResponse:
        """Handle one request.  Always returns a response.

        A URL that cannot be parsed is answered with a 500 and reported
        under the whole URL, since no path is available.
        """
        full_path = request.url
        try:
            method = request.method.upper()
            full_path = request.path
            self._log("%s %s", method, full_path)
            return await self._handle(request, method, full_path)
        except (ValidationError, NotFoundError) as exc:
            # Invalid names and paths are reported as NOT_FOUND events too.
            self._log("%s: %s", exc.message, full_path)
            self._emit(
                SkillsEventType.NOT_FOUND,
                full_path,
                skill_name=exc.skill_name,
                file_path=exc.file_path,
            )
            return self._error(exc)
        except MethodNotAllowedError as exc:
            return self._error(exc)
        except ProviderError as exc:
            cause = exc.__cause__ or exc
            self._log_failure(f"Provider failed for {full_path}", cause)
            context = {
                key: value
                for key, value in (("skillName", exc.skill_name), ("filePath", exc.file_path))
                if value is not None
            }
            self._emit(SkillsEventType.ERROR, full_path, error=cause, context=context or None)
            return self._error(exc)
        except Exception as exc:
            self._log_failure(f"Unexpected failure handling {full_path}", exc)
            self._emit(SkillsEventType.ERROR, full_path, error=exc)
            return self._json(500, {"error": "Internal server error"})

    async def _handle(self, request: SkillsRequest, method: str, full_path: str) -> SkillsResponse:
        if method == "OPTIONS":
            return self._preflight()
        if method not in ("GET", "HEAD"):
            raise MethodNotAllowedError("Method not allowed")

        relative_path = normalize_path(full_path, self._base_path)
        self._log("Routing relative path: %s", relative_path)

        route: Route = resolve_route(relative_path)

        if isinstance(route, RootRoute):
            return self._redirect(request, f"{self._base_path}/index.json")
        if isinstance(route, IndexRoute):
            return await self._serve_index(full_path)
        if isinstance(route, SkillDocumentRoute):
            return await self._serve_skill_md(route.skill_name, full_path)
        if isinstance(route, SkillFileRoute):
            return await self._serve_skill_file(route.skill_name, route.file_path, full_path)
        if isinstance(route, SkillRedirectRoute):
            return self._redirect(request, f"{self._base_path}/{route.skill_name}/SKILL.md")
        raise NotFoundError("Not found")

    # ------------------------------------------------------------------
    # Route handlers
    # ------------------------------------------------------------------

    async def _serve_index(self, full_path: str) -> SkillsResponse:
        skills = await self._get_skills()
        index = {"skills": [skill.to_index_entry().to_dict() for skill in skills]}
        self._log("Serving index with %d skills", len(skills))
        self._emit(SkillsEventType.INDEX_REQUESTED, full_path, skill_count=len(skills))
        return self._json(200, index, indent=2)

    async def _serve_skill_md(self, skill_name: str, full_path: str) -> SkillsResponse:
        skills = await self._get_skills(skill_name=skill_name)
        skill = next((s for s in skills if s.name == skill_name), None)
        if skill is None:
            raise SkillNotFoundError("Skill not found", skill_name=skill_name)

        self._log("Serving SKILL.md for: %s", skill_name)
        self._emit(SkillsEventType.SKILL_REQUESTED, full_path, skill_name=skill_name)
        return SkillsResponse(200, self._headers(_MARKDOWN), reconstruct_skill_md(skill))

    async def _serve_skill_file(
        self, skill_name: str, file_path: str, full_path: str
    ) -> SkillsResponse:
        try:
            content = await self._provider.get_skill_file(skill_name, file_path)
        except Exception as exc:
            raise ProviderError(
                "Internal server error", skill_name=skill_name, file_path=file_path
            ) from exc

        if content is None:
            raise ResourceNotFoundError(
                "File not found", skill_name=skill_name, file_path=file_path
            )

        self._log("Serving file: %s/%s", skill_name, file_path)
        self._emit(
            SkillsEventType.FILE_REQUESTED,
            full_path,
            skill_name=skill_name,
            file_path=file_path,
        )
        return SkillsResponse(200, self._headers(get_content_type(file_path)), content)

    async def _get_skills(self, *, skill_name: str | None = None) -> list[Skill]:
        try:
            return list(await self._provider.get_skills())
        except Exception as exc:
            raise ProviderError("Internal server error", skill_name=skill_name) from exc

    # ------------------------------------------------------------------
    # Response builders
    # ------------------------------------------------------------------

    def _headers(self, content_type: str) -> dict[str, str]:
        headers = {"Content-Type": content_type, "Cache-Control": self._cache_control}
        if self._cors_origin is not None:
            headers["Access-Control-Allow-Origin"] = self._cors_origin
            headers["Access-Control-Allow-Methods"] = ALLOWED_METHODS
            headers["Access-Control-Allow-Headers"] = "Content-Type"
        return headers

    def _json(self, status: int, payload: Any, *, indent: int | None = None) -> SkillsResponse:
        return SkillsResponse(status, self._headers(_JSON), json.dumps(payload, indent=indent))

    def _error(self, exc: SkillsHandlerError) -> SkillsResponse:
        return self._json(exc.status_code, {"error": exc.message})

    def _preflight(self) -> SkillsResponse:
        headers = self._headers("text/plain")
        headers["Content-Length"] = "0"
        return SkillsResponse(204, headers)

    def _redirect(self, request: SkillsRequest, path: str) -> SkillsResponse:
        return SkillsResponse(302, {"Location": f"{request.origin}{path}"})

    # ------------------------------------------------------------------
    # Logging and events
    # ------------------------------------------------------------------

    def _log(self, msg: str, *args: Any) -> None:
        if self._verbose:
            _logger.info(msg, *args)

    def _log_failure(self, msg: str, exc: BaseException) -> None:
        if self._verbose:
            _logger.error("%s", msg, exc_info=exc)
        else:
            _logger.error("%s: %s", msg, type(exc).__name__)

    def _emit(self, event_type: SkillsEventType, path: str, **fields: Any) -> None:
        if self._on_event is None:
            return
        try:
            self._on_event(SkillsEvent(type=event_type, path=path, **fields))
        except Exception:
            _logger.warning("on_event callback raised; ignoring", exc_info=True)


def create_skills_handler(provider: SkillProvider, **options: Any) -> SkillsHandler:
    """Build a :class:`SkillsHandler` for *provider*.

    Keyword options are those of :class:`SkillsHandler`: ``base_path``,
    ``verbose_logs``, ``cache_control``, ``cors``, and ``on_event``.
    """
    return SkillsHandler(provider, **options)


def _cors_origin(cors: CorsSetting) -> str | None:
    """Return the ``Access-Control-Allow-Origin`` value, or ``None`` if disabled."""
    if cors is False:
        return None
    if isinstance(cors, str):
        return cors
    return ", ".join(cors)

