"""Tests for the SkillProvider interface."""

import pytest

from skillshandler_core import Skill, SkillProvider


class TestSkillProviderABC:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            SkillProvider()  # type: ignore[abstract]

    def test_incomplete_subclass(self):
        class Partial(SkillProvider):
            async def get_skills(self) -> list[Skill]:
                return []

        with pytest.raises(TypeError):
            Partial()  # type: ignore[abstract]

    async def test_minimal_subclass(self):
        class Minimal(SkillProvider):
            async def get_skills(self) -> list[Skill]:
                return [Skill("demo", "A demo skill.", "# Demo")]

            async def get_skill_file(self, skill_name: str, file_path: str) -> str | None:
                return None

        provider = Minimal()
        assert [s.name for s in await provider.get_skills()] == ["demo"]
        assert await provider.get_skill_file("demo", "x.md") is None
