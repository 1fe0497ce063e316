"""Build a skills handler and ASGI app from a :class:`ServerConfig`.

Each configured provider is resolved to a concrete
:class:`~skillshandler_core.SkillProvider`.  A single provider is used
directly; several are layered with
:class:`~skillshandler_core.CompositeSkillProvider` so later entries
override earlier ones.

Example::

    from skillshandler_server import ServerConfig, create_app

    config = ServerConfig(providers=[{"type": "fs", "options": {"root": "./skills"}}])
    app = create_app(config)  # serve with uvicorn
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import AsyncIterator
from pathlib import Path
from typing import Any

from starlette.applications import Starlette

from skillshandler_core import (
    CompositeSkillProvider,
    EventSink,
    Skill,
    SkillProvider,
    SkillsEvent,
    SkillsHandler,
    StaticSkillProvider,
    create_skills_handler,
)
from skillshandler_server.config import ServerConfig
from skillshandler_starlette import create_skills_app

_logger = logging.getLogger(__name__)

# ------------------------------------------------------------------
# Provider resolution
# ------------------------------------------------------------------

#: Provider types that are recognized by :func:`_resolve_provider`.
SUPPORTED_PROVIDERS: frozenset[str] = frozenset({"fs", "static", "http"})

_SAFE_FS_KEYS = frozenset({"root", "cache_ttl", "max_file_bytes"})
_SAFE_HTTP_KEYS = frozenset(
    {"base_url", "headers", "params", "require_tls", "max_response_bytes", "cache_ttl"}
)


def _resolve_provider(provider_type: str, options: dict[str, Any]) -> SkillProvider:
    """Map a provider type string and options to a concrete provider.

    Args:
        provider_type: One of the :data:`SUPPORTED_PROVIDERS` keys.
        options: Keyword arguments forwarded to the provider
            constructor.  Unknown keys are silently ignored (runtime
            objects such as an HTTP ``client`` cannot come from a
            config file).

    Returns:
        A ready-to-use :class:`~skillshandler_core.SkillProvider`.

    Raises:
        ValueError: If *provider_type* is not recognized or the options
            are rejected by the provider.
    """
    if provider_type == "fs":
        from skillshandler_fs import LocalFileSystemSkillProvider

        filtered = {k: v for k, v in options.items() if k in _SAFE_FS_KEYS}
        root = Path(filtered.pop("root", "."))
        return LocalFileSystemSkillProvider(root, **filtered)

    if provider_type == "static":
        skills = [Skill.from_dict(entry) for entry in options.get("skills", [])]
        return StaticSkillProvider(skills, files=options.get("files"))

    if provider_type == "http":
        from skillshandler_http import RemoteSkillProvider

        filtered = {k: v for k, v in options.items() if k in _SAFE_HTTP_KEYS}
        return RemoteSkillProvider(**filtered)

    raise ValueError(
        f"Unknown provider type: {provider_type!r}. "
        f"Supported types: {', '.join(sorted(SUPPORTED_PROVIDERS))}"
    )


def build_providers(config: ServerConfig) -> list[SkillProvider]:
    """Resolve every provider named in *config*, in order."""
    return [_resolve_provider(p.type, p.options) for p in config.providers]


def log_event(event: SkillsEvent) -> None:
    """Event sink that writes each event to the module logger at DEBUG."""
    _logger.debug("skills event: %s", event.to_dict())


# ------------------------------------------------------------------
# Builders
# ------------------------------------------------------------------


def create_handler(
    config: ServerConfig,
    *,
    on_event: EventSink | None = None,
    providers: list[SkillProvider] | None = None,
) -> SkillsHandler:
    """Build a :class:`~skillshandler_core.SkillsHandler` from *config*.

    Args:
        config: Validated server configuration.
        on_event: Optional event sink passed to the handler.
        providers: Already resolved providers.  Defaults to
            :func:`build_providers` applied to *config*.
    """
    if providers is None:
        providers = build_providers(config)
    provider = providers[0] if len(providers) == 1 else CompositeSkillProvider(providers)
    return create_skills_handler(
        provider,
        base_path=config.base_path,
        cache_control=config.cache_control,
        cors=config.cors,
        verbose_logs=config.verbose_logs,
        on_event=on_event,
    )


def create_app(config: ServerConfig, *, on_event: EventSink | None = None) -> Starlette:
    """Build a Starlette application serving the skills described by *config*.

    Providers holding network resources are closed when the application
    shuts down.  In verbose mode events are logged unless *on_event* is
    given.
    """
    providers = build_providers(config)
    if on_event is None and config.verbose_logs:
        on_event = log_event
    handler = create_handler(config, on_event=on_event, providers=providers)

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        _logger.info("Serving %d provider(s) under %s", len(providers), handler.base_path)
        try:
            yield
        finally:
            for provider in providers:
                aclose = getattr(provider, "aclose", None)
                if aclose is not None:
                    await aclose()

    return create_skills_app(handler, lifespan=lifespan)
