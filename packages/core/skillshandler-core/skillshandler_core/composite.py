"""Merge several providers into one.

:class:`CompositeSkillProvider` lets an application layer skills from
different sources, for example a shared directory of base skills
overridden by a few skills defined in code.  Providers later in the list
take precedence.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from skillshandler_core.provider import SkillProvider
from skillshandler_core.skill import Skill

_logger = logging.getLogger(__name__)


class CompositeSkillProvider(SkillProvider):
    """Skill provider that merges other providers by skill name.

    When two providers serve a skill with the same name, the one that
    appears later in *providers* wins.  A merged skill keeps the index
    position of the first provider that served that name.

    Args:
        providers: Providers to merge, lowest precedence first.

    Example::

        provider = CompositeSkillProvider([
            LocalFileSystemSkillProvider(Path("./base-skills")),
            StaticSkillProvider([custom_skill]),
        ])
    """

    def __init__(self, providers: Sequence[SkillProvider]) -> None:
        self._providers = list(providers)

    def __repr__(self) -> str:
        return f"CompositeSkillProvider({self._providers!r})"

    async def get_skills(self) -> list[Skill]:
        """Return the union of all providers' skills, later ones overriding."""
        merged: dict[str, Skill] = {}
        for provider in self._providers:
            for skill in await provider.get_skills():
                if skill.name in merged:
                    _logger.debug("Skill %r overridden by %r", skill.name, provider)
                merged[skill.name] = skill
        return list(merged.values())

    async def get_skill_file(self, skill_name: str, file_path: str) -> str | None:
        """Return the file from the highest-precedence provider that has it."""
        for provider in reversed(self._providers):
            content = await provider.get_skill_file(skill_name, file_path)
            if content is not None:
                return content
        return None
