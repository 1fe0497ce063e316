"""Framework-agnostic HTTP request and response types.

The handler consumes a :class:`SkillsRequest` and returns a
:class:`SkillsResponse`.  Adapters (see ``skillshandler_starlette``)
translate between these and a concrete web framework.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any
from urllib.parse import urlsplit


@dataclass(frozen=True)
class SkillsRequest:
    """An immutable incoming request.

    Args:
        url: Absolute request URL, including scheme and host.
        method: HTTP method.  Compared case-insensitively.
        headers: Request headers.  Stored read-only.

    Example::

        request = SkillsRequest("https://example.com/.well-known/skills/index.json")
        response = await handler(request)
    """

    url: str
    method: str = "GET"
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @property
    def path(self) -> str:
        """The raw (still percent-encoded) path component of the URL."""
        return urlsplit(self.url).path

    @property
    def origin(self) -> str:
        """``scheme://host[:port]`` of the URL."""
        parts = urlsplit(self.url)
        return f"{parts.scheme}://{parts.netloc}"


@dataclass
class SkillsResponse:
    """An outgoing response.

    Attributes:
        status: HTTP status code.
        headers: Response headers, keyed by canonical header name.
        body: Response body, or ``None`` for body-less responses.
    """

    status: int
    headers: dict[str, str] = field(default_factory=dict)
    body: str | None = None

    @property
    def text(self) -> str:
        """The body as text (empty string when there is no body)."""
        return self.body or ""

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.text)

    def header(self, name: str) -> str | None:
        """Return a header value by case-insensitive name, or ``None``."""
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return None
