"""Config-driven skills server.

This package wires :mod:`skillshandler_core` providers and the
:mod:`skillshandler_starlette` adapter together from a declarative
config file, providing:

* :class:`ServerConfig` / :class:`ProviderConfig` -- pydantic models
  for the config document.
* :func:`create_handler` -- build a handler from a config.
* :func:`create_app` -- build a Starlette app from a config.
* CLI entry-point (``python -m skillshandler_server --config server.yaml``)
  for zero-code startup under uvicorn.

Install::

    pip install skills-handler
"""

from skillshandler_server.config import (
    ProviderConfig,
    ServerConfig,
    load_config,
    resolve_env_vars,
)
from skillshandler_server.server import (
    SUPPORTED_PROVIDERS,
    build_providers,
    create_app,
    create_handler,
    log_event,
)

__all__ = [
    "SUPPORTED_PROVIDERS",
    "ProviderConfig",
    "ServerConfig",
    "build_providers",
    "create_app",
    "create_handler",
    "load_config",
    "log_event",
    "resolve_env_vars",
]
