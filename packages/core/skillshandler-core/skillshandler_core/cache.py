"""Time-boxed cache for provider skill sets.

Providers that load skills from slow sources (a directory scan, an HTTP
round-trip) wrap the loader in a :class:`SkillSetCache`.  The cached set
is reused until ``ttl`` seconds have passed or :meth:`SkillSetCache.invalidate`
is called.  Refreshes are single-flight: concurrent callers that find
the cache stale wait for one reload instead of each running their own.
"""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skillshandler_core.skill import Skill

#: Default cache lifetime in seconds.
DEFAULT_CACHE_TTL_SECONDS: float = 60.0


class SkillSetCache:
    """Cache the result of an async skill loader for a fixed time.

    Args:
        loader: Coroutine function that returns a fresh skill set.
        ttl: Lifetime of a loaded set in seconds.  ``0`` disables
            caching.
        clock: Monotonic clock, injectable for tests.

    Example::

        cache = SkillSetCache(self._scan, ttl=60.0)
        skills = await cache.get()
    """

    def __init__(
        self,
        loader: Callable[[], Awaitable[list[Skill]]],
        *,
        ttl: float = DEFAULT_CACHE_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if ttl < 0:
            raise ValueError("ttl must be non-negative")
        self._loader = loader
        self._ttl = ttl
        self._clock = clock
        self._skills: list[Skill] | None = None
        self._loaded_at = 0.0
        self._lock = asyncio.Lock()

    def _is_fresh(self) -> bool:
        return self._skills is not None and self._clock() - self._loaded_at < self._ttl

    async def get(self) -> list[Skill]:
        """Return the cached skill set, reloading it if stale."""
        if self._is_fresh():
            return list(self._skills or [])
        async with self._lock:
            # Another task may have refreshed while we waited.
            if not self._is_fresh():
                skills = await self._loader()
                self._skills = list(skills)
                self._loaded_at = self._clock()
            return list(self._skills or [])

    def invalidate(self) -> None:
        """Drop the cached set so the next :meth:`get` reloads it."""
        self._skills = None
        self._loaded_at = 0.0
