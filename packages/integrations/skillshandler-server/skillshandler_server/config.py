"""Pydantic configuration models for skills servers.

This module defines the declarative configuration schema used by the
CLI (``python -m skillshandler_server --config server.yaml``).

String values may contain ``${VAR}`` placeholders that are resolved
from environment variables at load time.  Unset variables resolve to
an empty string and emit a warning.

Example config (YAML)::

    base_path: /.well-known/skills
    cors: "*"
    providers:
      - type: fs
        options:
          root: ./skills
      - type: http
        options:
          base_url: https://cdn.example.com/.well-known/skills
          headers:
            Authorization: Bearer ${API_TOKEN}

Providers are layered in order: when two define the same skill, the
later one wins.
"""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from skillshandler_core import DEFAULT_BASE_PATH, DEFAULT_CACHE_CONTROL

_logger = logging.getLogger(__name__)


class ProviderConfig(BaseModel):
    """Configuration for a single skill provider."""

    type: Literal["fs", "static", "http"] = Field(
        ..., description="Provider type ('fs', 'static' or 'http')"
    )
    options: dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific options passed to the provider constructor",
    )


class ServerConfig(BaseModel):
    """Top-level configuration for a skills server.

    Attributes:
        base_path: URL prefix the skills endpoints live under.
        cache_control: ``Cache-Control`` header sent with every response.
        cors: ``"*"``, a list of allowed origins, or ``false`` to
            disable CORS headers.
        verbose_logs: Log every request and provider tracebacks.
        providers: One or more providers, later ones overriding earlier
            ones on name collisions.
    """

    base_path: str = Field(DEFAULT_BASE_PATH, description="URL prefix for the endpoints")
    cache_control: str = Field(DEFAULT_CACHE_CONTROL, description="Cache-Control header value")
    cors: str | list[str] | Literal[False] = Field("*", description="Allowed CORS origins")
    verbose_logs: bool = Field(False, description="Enable per-request logging")
    providers: list[ProviderConfig] = Field(..., description="Skill providers", min_length=1)

    @field_validator("base_path")
    @classmethod
    def _check_base_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError("base_path must start with '/'")
        return value


# ------------------------------------------------------------------
# Environment variable resolution
# ------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}]+)\}")


def resolve_env_vars(data: Any) -> Any:
    """Recursively resolve ``${VAR}`` placeholders in config data.

    Walks dicts, lists, and strings.  Other scalars are returned as-is.
    Unset environment variables resolve to an empty string and a
    warning is logged.

    Args:
        data: Parsed config data (typically the dict returned by
            ``json.loads`` or ``yaml.safe_load``).

    Returns:
        A new data structure with every placeholder replaced.
    """
    if isinstance(data, str):
        return _resolve_env_vars_in_string(data)
    if isinstance(data, dict):
        return {k: resolve_env_vars(v) for k, v in data.items()}
    if isinstance(data, list):
        return [resolve_env_vars(item) for item in data]
    return data


def _resolve_env_vars_in_string(value: str) -> str:
    def _replace(match: re.Match[str]) -> str:
        var_name = match.group(1)
        env_value = os.environ.get(var_name, "")
        if not env_value:
            _logger.warning("Environment variable '%s' is not set or empty", var_name)
        return env_value

    return _ENV_VAR_RE.sub(_replace, value)


# ------------------------------------------------------------------
# Loading
# ------------------------------------------------------------------


def load_config(path: Path) -> ServerConfig:
    """Read a JSON or YAML config file and validate it.

    Files ending in ``.yaml`` or ``.yml`` are parsed as YAML, anything
    else as JSON.  ``${VAR}`` placeholders are resolved before
    validation.

    Raises:
        FileNotFoundError: If *path* does not exist.
        pydantic.ValidationError: If the document does not match
            :class:`ServerConfig`.
    """
    raw = path.read_text(encoding="utf-8")
    if path.suffix in (".yaml", ".yml"):
        data = yaml.safe_load(raw)
    else:
        data = json.loads(raw)
    return ServerConfig.model_validate(resolve_env_vars(data or {}))
