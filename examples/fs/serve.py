"""Serve a directory of skills with Starlette and uvicorn.

This script serves ``examples/skills`` under ``/.well-known/skills`` and
layers one extra skill defined in code on top of it.

Flow:
    1. Create a LocalFileSystemSkillProvider for the skills directory
    2. Merge it with a StaticSkillProvider via CompositeSkillProvider
    3. Build a Starlette app with create_skills_app()
    4. Run it with uvicorn

Requirements:
    pip install skills-handler

Usage:
    python examples/fs/serve.py
    curl -L http://127.0.0.1:8000/.well-known/skills/
"""

import logging
from pathlib import Path

import uvicorn

from skillshandler_core import (
    CompositeSkillProvider,
    Skill,
    StaticSkillProvider,
    create_skills_handler,
)
from skillshandler_fs import LocalFileSystemSkillProvider
from skillshandler_starlette import create_skills_app


def main() -> None:
    logging.basicConfig(level=logging.INFO)

    # ------------------------------------------------------------------
    # 1. Set up the providers
    # ------------------------------------------------------------------
    skills_root = Path(__file__).resolve().parent.parent / "skills"
    on_disk = LocalFileSystemSkillProvider(skills_root, cache_ttl=5)
    in_code = StaticSkillProvider(
        [
            Skill(
                name="release-notes",
                description="Draft release notes from merged pull requests.",
                body="# Release Notes\n\nGroup changes by feature, fix, and chore.",
            )
        ]
    )

    # ------------------------------------------------------------------
    # 2. Build the app
    # ------------------------------------------------------------------
    handler = create_skills_handler(
        CompositeSkillProvider([on_disk, in_code]),
        verbose_logs=True,
    )
    app = create_skills_app(handler)

    # ------------------------------------------------------------------
    # 3. Serve
    # ------------------------------------------------------------------
    uvicorn.run(app, host="127.0.0.1", port=8000)


if __name__ == "__main__":
    main()
