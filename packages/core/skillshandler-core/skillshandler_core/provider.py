"""Abstract interface for skill backing stores.

The handler owns no skill data.  For each request it borrows what it
needs from a :class:`SkillProvider`, which exposes exactly two
operations:

1. **List** -- :meth:`SkillProvider.get_skills` returns the full current
   skill set.
2. **Fetch** -- :meth:`SkillProvider.get_skill_file` returns the content
   of one supporting file, or ``None``.

The interface holds no state.  Concrete providers are independent of one
another and may be combined with
:class:`~skillshandler_core.CompositeSkillProvider`:

* :class:`~skillshandler_core.StaticSkillProvider` -- in-memory skills
  defined in code.
* :class:`~skillshandler_fs.LocalFileSystemSkillProvider` -- a directory
  tree of ``SKILL.md`` files, rescanned on a time-to-live.
* :class:`~skillshandler_http.RemoteSkillProvider` -- another skills
  endpoint reached over HTTP.

Both methods are ``async`` so that providers backed by I/O can suspend.
Providers that share state between concurrent requests (caches, client
pools) are responsible for their own task-safety.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from skillshandler_core.skill import Skill


class SkillProvider(ABC):
    """Abstract base class that every skill backend must implement.

    Example::

        class MyProvider(SkillProvider):
            async def get_skills(self) -> list[Skill]:
                return [Skill("demo", "A demo skill.", "# Demo")]

            async def get_skill_file(self, skill_name: str, file_path: str) -> str | None:
                return None
    """

    @abstractmethod
    async def get_skills(self) -> list[Skill]:
        """Return every skill the provider currently serves.

        An empty list is valid.  No two returned skills may share a
        name.  The order of the list is the order of the discovery
        index.

        Returns:
            The current skill set.
        """

    @abstractmethod
    async def get_skill_file(self, skill_name: str, file_path: str) -> str | None:
        """Return the content of a file within a skill.

        Implementations must return ``None`` for ``file_path ==
        "SKILL.md"``: the handler always rebuilds that document from
        the skill's metadata and body.

        Args:
            skill_name: The skill identifier.
            file_path: Path relative to the skill root.

        Returns:
            The file content, or ``None`` if the skill or the file does
            not exist.
        """
