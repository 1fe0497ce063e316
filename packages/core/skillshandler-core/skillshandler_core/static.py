"""In-memory skill provider.

:class:`StaticSkillProvider` serves skills defined directly in code.
The skill set is fixed at construction time and validated up front, so
misconfiguration fails at startup rather than on the first request.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from skillshandler_core.provider import SkillProvider
from skillshandler_core.skill import Skill
from skillshandler_core.validation import validate_skill


class StaticSkillProvider(SkillProvider):
    """Skill provider backed by a fixed list of skills.

    Args:
        skills: Skills to serve, in index order.
        files: Optional supporting file contents, keyed by skill name
            and then by path relative to the skill root.

    Raises:
        ValueError: If a skill fails validation or two skills share a
            name.

    Example::

        provider = StaticSkillProvider(
            [
                Skill(
                    name="code-review",
                    description="Review code for bugs and security issues.",
                    body="# Code Review",
                    files=["SKILL.md", "references/CHECKLIST.md"],
                ),
            ],
            files={"code-review": {"references/CHECKLIST.md": "# Checklist"}},
        )
    """

    def __init__(
        self,
        skills: Iterable[Skill],
        files: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self._skills: dict[str, Skill] = {}
        for skill in skills:
            errors = validate_skill(skill)
            if errors:
                raise ValueError(
                    f"Skill {skill.name!r} failed validation:\n"
                    + "\n".join(f"  - {e}" for e in errors)
                )
            if skill.name in self._skills:
                raise ValueError(f"Duplicate skill name {skill.name!r}")
            self._skills[skill.name] = skill
        self._files = {name: dict(contents) for name, contents in (files or {}).items()}

    def __repr__(self) -> str:
        n = len(self._skills)
        label = "skill" if n == 1 else "skills"
        return f"StaticSkillProvider({n} {label})"

    async def get_skills(self) -> list[Skill]:
        """Return the configured skills in the order they were given."""
        return list(self._skills.values())

    async def get_skill_file(self, skill_name: str, file_path: str) -> str | None:
        """Return a supporting file registered for *skill_name*.

        ``SKILL.md`` always yields ``None``; the handler rebuilds it.
        """
        if skill_name not in self._skills or file_path == "SKILL.md":
            return None
        return self._files.get(skill_name, {}).get(file_path)
