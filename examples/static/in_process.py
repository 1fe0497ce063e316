"""Skills handler without a web server: static provider.

This script demonstrates calling the framework-agnostic handler
directly, which is also how you would wire it into a framework that
has no ready-made adapter.

Flow:
    1. Define skills in code with a StaticSkillProvider
    2. Build a handler with create_skills_handler()
    3. Send requests and print the responses and emitted events

Requirements:
    pip install skills-handler

Usage:
    python examples/static/in_process.py
"""

import asyncio

from skillshandler_core import (
    Skill,
    SkillsEvent,
    SkillsRequest,
    StaticSkillProvider,
    create_skills_handler,
)

ORIGIN = "https://example.com"


def print_event(event: SkillsEvent) -> None:
    print(f"    event: {event.to_dict()}")


async def main() -> None:
    # ------------------------------------------------------------------
    # 1. Define skills in code
    # ------------------------------------------------------------------
    provider = StaticSkillProvider(
        [
            Skill(
                name="git-workflow",
                description="Follow team Git conventions for branching and commits.",
                body="# Git Workflow\n\nCreate feature branches from `main`.",
            ),
            Skill(
                name="code-review",
                description="Review pull requests against the team checklist.",
                body="# Code Review\n\nWork through `references/CHECKLIST.md`.",
                files=["SKILL.md", "references/CHECKLIST.md"],
            ),
        ],
        files={"code-review": {"references/CHECKLIST.md": "# Checklist\n\n- Tests pass\n"}},
    )

    # ------------------------------------------------------------------
    # 2. Build the handler
    # ------------------------------------------------------------------
    handler = create_skills_handler(provider, on_event=print_event)

    # ------------------------------------------------------------------
    # 3. Exercise every endpoint
    # ------------------------------------------------------------------
    requests = [
        ("GET", "/.well-known/skills"),
        ("GET", "/.well-known/skills/index.json"),
        ("GET", "/.well-known/skills/git-workflow/SKILL.md"),
        ("GET", "/.well-known/skills/code-review/references/CHECKLIST.md"),
        ("GET", "/.well-known/skills/unknown/SKILL.md"),
        ("GET", "/.well-known/skills/Bad_Name/SKILL.md"),
        ("OPTIONS", "/.well-known/skills/index.json"),
        ("POST", "/.well-known/skills/index.json"),
    ]
    for method, path in requests:
        print(f"=== {method} {path} ===")
        response = await handler(SkillsRequest(f"{ORIGIN}{path}", method=method))
        print(f"  {response.status}")
        for name, value in response.headers.items():
            print(f"  {name}: {value}")
        if response.body:
            print()
            print(response.body)
        print()


if __name__ == "__main__":
    asyncio.run(main())
