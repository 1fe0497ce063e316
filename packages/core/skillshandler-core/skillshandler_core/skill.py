"""Immutable skill model served by the handler.

A :class:`Skill` is a named content bundle: frontmatter metadata
(``name`` and ``description``), the markdown instruction ``body``, and
the list of ``files`` the skill exposes.  Skills are frozen once built.
Providers that need to change what they serve replace their whole skill
set instead of mutating a single skill.

:class:`SkillIndexEntry` is the projection published in ``index.json``;
it deliberately omits the body so the discovery index stays small.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class SkillIndexEntry:
    """A single line item of the discovery index."""

    name: str
    description: str
    files: tuple[str, ...]

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON-serializable form used in ``index.json``."""
        return {
            "name": self.name,
            "description": self.description,
            "files": list(self.files),
        }


@dataclass(frozen=True)
class Skill:
    """A named skill bundle.

    Args:
        name: Skill identifier, unique within a provider's skill set.
        description: Short description of what the skill does and when
            to use it.
        body: Markdown instructions (everything after the frontmatter).
        files: Paths relative to the skill root.  Must include
            ``"SKILL.md"``.  Any iterable is accepted and stored as a
            tuple.

    Example::

        skill = Skill(
            name="git-workflow",
            description="Follow team Git conventions for branching and commits.",
            body="# Git Workflow\\n\\nCreate feature branches from `main`.",
        )
        print(skill.files)  # ('SKILL.md',)
    """

    name: str
    description: str
    body: str = ""
    files: tuple[str, ...] = field(default=("SKILL.md",))

    def __post_init__(self) -> None:
        if isinstance(self.files, str):
            raise TypeError("files must be an iterable of paths, not a string")
        object.__setattr__(self, "files", tuple(self.files))

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Skill:
        """Build a skill from a plain mapping (e.g. parsed JSON or YAML).

        ``files`` defaults to ``["SKILL.md"]`` and ``body`` to ``""``.
        """
        files: Iterable[str] = data.get("files") or ("SKILL.md",)
        return cls(
            name=data["name"],
            description=data["description"],
            body=data.get("body", ""),
            files=tuple(files),
        )

    def to_index_entry(self) -> SkillIndexEntry:
        """Return the discovery-index projection of this skill."""
        return SkillIndexEntry(name=self.name, description=self.description, files=self.files)


def reconstruct_skill_md(skill: Skill) -> str:
    """Render the ``SKILL.md`` document for *skill*.

    The document is always rebuilt from the skill's metadata and body;
    a provider's literal copy of ``SKILL.md`` is never served.

    Example::

        >>> print(reconstruct_skill_md(Skill("demo", "A demo.", "# Demo")))
        ---
        name: demo
        description: A demo.
        ---
        <BLANKLINE>
        # Demo
    """
    frontmatter = f"---\nname: {skill.name}\ndescription: {skill.description}\n---"
    return f"{frontmatter}\n\n{skill.body}"
