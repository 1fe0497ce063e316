"""Remote skill provider.

This module implements :class:`RemoteSkillProvider`, which mirrors the
skills published by another skills endpoint (any server that implements
the ``/.well-known/skills`` layout, including this library).

Expected URL layout::

    {base_url}/
    ├── index.json                     # {"skills": [{name, description, files}]}
    ├── git-workflow/
    │   └── SKILL.md                   # YAML frontmatter + markdown body
    └── pdf-processing/
        ├── SKILL.md
        └── scripts/extract.py

The index does not carry skill bodies, so loading the skill set fetches
``index.json`` and then each skill's ``SKILL.md``.  The result is cached
for ``cache_ttl`` seconds.  Supporting files are fetched on demand.

All methods use `httpx <https://www.python-httpx.org/>`_ for non-blocking
HTTP requests.
"""

from __future__ import annotations

import asyncio
import json
import logging
import warnings
from typing import Any
from urllib.parse import quote, urlparse

import httpx

from skillshandler_core import (
    ProviderError,
    Skill,
    SkillProvider,
    SkillSetCache,
    is_valid_file_path,
    is_valid_skill_name,
    split_frontmatter,
    validate_skill,
    validate_skill_frontmatter,
)
from skillshandler_core.cache import DEFAULT_CACHE_TTL_SECONDS

_logger = logging.getLogger(__name__)

#: Default maximum HTTP response size in bytes (10 MB).
DEFAULT_MAX_RESPONSE_BYTES: int = 10 * 1024 * 1024

#: Default HTTP request timeout in seconds.
DEFAULT_TIMEOUT_SECONDS: float = 30.0


class RemoteSkillProvider(SkillProvider):
    """Skill provider backed by a remote skills endpoint.

    The provider owns an :class:`httpx.AsyncClient` for connection
    pooling.  If you supply your own client the provider will use it
    without closing it.  Otherwise call :meth:`aclose` or use
    ``async with`` when you are finished.

    Index entries that fail validation, or whose ``SKILL.md`` cannot be
    fetched or parsed, are skipped with a warning.  A failure to fetch
    ``index.json`` itself raises :class:`~skillshandler_core.ProviderError`.

    Args:
        base_url: URL of the remote skills root (for example
            ``https://example.com/.well-known/skills``).  A trailing
            slash is stripped automatically.
        client: Optional pre-configured :class:`httpx.AsyncClient`.
            When provided, the caller is responsible for closing it.
        headers: Optional extra headers sent with every request (e.g.
            ``Authorization``).
        params: Optional query parameters appended to every request.
        require_tls: If ``True``, reject ``http://`` base URLs with
            a :class:`ValueError`.  Defaults to ``False``, which
            allows HTTP but emits a :class:`UserWarning`.
        max_response_bytes: Maximum allowed response size in bytes.
        cache_ttl: Seconds a fetched skill set stays valid.

    Example::

        async with RemoteSkillProvider("https://example.com/.well-known/skills") as remote:
            handler = create_skills_handler(CompositeSkillProvider([remote, local]))
    """

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
        headers: dict[str, str] | None = None,
        params: dict[str, str] | None = None,
        require_tls: bool = False,
        max_response_bytes: int = DEFAULT_MAX_RESPONSE_BYTES,
        cache_ttl: float = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        if client is not None and (headers is not None or params is not None):
            raise ValueError(
                "Cannot specify both 'client' and 'headers'/'params'. "
                "Configure headers and params on the client directly."
            )

        parsed = urlparse(base_url)
        if parsed.scheme not in ("http", "https"):
            raise ValueError(f"base_url must be an http(s) URL, got {base_url!r}")
        if parsed.scheme == "http":
            if require_tls:
                raise ValueError(
                    "require_tls is enabled but base_url uses plain HTTP. "
                    "Use an HTTPS URL or set require_tls=False."
                )
            warnings.warn(
                "base_url uses unencrypted HTTP. "
                "Skill content fetched over HTTP is vulnerable to "
                "man-in-the-middle attacks. Use HTTPS in production.",
                UserWarning,
                stacklevel=2,
            )

        self._base_url = base_url.rstrip("/")
        self._max_response_bytes = max_response_bytes
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            headers=headers,
            params=params,
            timeout=httpx.Timeout(DEFAULT_TIMEOUT_SECONDS),
            follow_redirects=False,
        )
        self._cache = SkillSetCache(self._load_skills, ttl=cache_ttl)

    def __repr__(self) -> str:
        return f"RemoteSkillProvider({self._base_url!r})"

    async def aclose(self) -> None:
        """Close the underlying HTTP client if it is owned by this provider."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> RemoteSkillProvider:
        return self

    async def __aexit__(self, *exc: object) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # SkillProvider interface
    # ------------------------------------------------------------------

    async def get_skills(self) -> list[Skill]:
        """Return the remote skill set, in the remote index order.

        Raises:
            ProviderError: If ``index.json`` cannot be fetched or is
                not a valid index document.
        """
        return await self._cache.get()

    async def get_skill_file(self, skill_name: str, file_path: str) -> str | None:
        """Fetch a supporting file from the remote endpoint.

        Args:
            skill_name: Skill name.
            file_path: Path relative to the skill root.

        Returns:
            File content, or ``None`` if the remote answers 404, the
            inputs are invalid, or *file_path* is ``SKILL.md``.

        Raises:
            ProviderError: On transport errors, other HTTP errors, or
                oversized responses.
        """
        if not is_valid_skill_name(skill_name) or not is_valid_file_path(file_path):
            return None
        if file_path == "SKILL.md":
            return None
        return await self._get_text(self._skill_url(skill_name, file_path))

    def invalidate(self) -> None:
        """Discard the cached skill set; the next call refetches it."""
        self._cache.invalidate()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def _load_skills(self) -> list[Skill]:
        raw_index = await self._get_text(f"{self._base_url}/index.json")
        if raw_index is None:
            raise ProviderError("Remote index.json not found")
        try:
            index = json.loads(raw_index)
        except ValueError as exc:
            raise ProviderError("Remote index.json is not valid JSON") from exc
        entries = index.get("skills") if isinstance(index, dict) else None
        if not isinstance(entries, list):
            raise ProviderError("Remote index.json has no 'skills' list")

        candidates = [entry for entry in entries if self._is_valid_entry(entry)]
        loaded = await asyncio.gather(*(self._load_skill(entry) for entry in candidates))

        skills: list[Skill] = []
        seen: set[str] = set()
        for skill in loaded:
            if skill is None or skill.name in seen:
                continue
            seen.add(skill.name)
            skills.append(skill)
        _logger.debug("Loaded %d skills from %s", len(skills), self._base_url)
        return skills

    @staticmethod
    def _is_valid_entry(entry: Any) -> bool:
        if not validate_skill_frontmatter(entry):
            _logger.warning("Skipping invalid index entry: %r", entry)
            return False
        files = entry.get("files")
        if not isinstance(files, list) or not all(isinstance(f, str) for f in files):
            _logger.warning("Skipping index entry %r: 'files' must be a list", entry["name"])
            return False
        return True

    async def _load_skill(self, entry: dict[str, Any]) -> Skill | None:
        name = entry["name"]
        try:
            raw = await self._get_text(self._skill_url(name, "SKILL.md"))
        except ProviderError as exc:
            _logger.warning("Skipping remote skill %r: %s", name, exc)
            return None
        if raw is None:
            _logger.warning("Skipping remote skill %r: SKILL.md not found", name)
            return None

        _, body = split_frontmatter(raw)
        skill = Skill(
            name=name,
            description=entry["description"],
            body=body,
            files=tuple(entry["files"]),
        )
        errors = validate_skill(skill)
        if errors:
            _logger.warning("Skipping remote skill %r: %s", name, "; ".join(errors))
            return None
        return skill

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _skill_url(self, skill_name: str, file_path: str) -> str:
        return f"{self._base_url}/{quote(skill_name, safe='')}/{quote(file_path, safe='/')}"

    async def _get_text(self, url: str) -> str | None:
        """GET a URL and return the response text, or ``None`` on 404.

        Raises:
            ProviderError: On other HTTP or connection errors, or if the
                response exceeds *max_response_bytes*.
        """
        try:
            resp = await self._client.get(url)
        except httpx.HTTPError as exc:
            raise ProviderError("HTTP request failed") from exc
        if resp.status_code == 404:
            return None
        try:
            resp.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise ProviderError(f"HTTP {resp.status_code} error") from exc
        if len(resp.content) > self._max_response_bytes:
            raise ProviderError(
                f"Response exceeds maximum size ({self._max_response_bytes} bytes)"
            )
        return resp.text
