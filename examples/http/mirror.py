"""Mirror another skills endpoint.

This script fetches the skills published at a remote
``/.well-known/skills`` root and prints what a local handler would
serve for them.  Start ``examples/fs/serve.py`` first to have something
to mirror.

Flow:
    1. Create a RemoteSkillProvider for the remote root
    2. Build a handler on top of it
    3. Print the mirrored index and one skill document

Requirements:
    pip install skills-handler

Usage:
    python examples/http/mirror.py [BASE_URL]
"""

import asyncio
import sys

from skillshandler_core import SkillsRequest, create_skills_handler
from skillshandler_http import RemoteSkillProvider

DEFAULT_REMOTE = "http://127.0.0.1:8000/.well-known/skills"


async def main(base_url: str) -> None:
    async with RemoteSkillProvider(base_url, cache_ttl=30) as remote:
        handler = create_skills_handler(remote, base_path="/mirror")

        print("=== Mirrored index ===")
        index = await handler(SkillsRequest("https://mirror.example.com/mirror/index.json"))
        print(index.body)
        print()

        skills = index.json().get("skills", []) if index.status == 200 else []
        if not skills:
            print("No skills found.")
            return

        first = skills[0]["name"]
        print(f"=== {first}/SKILL.md ===")
        doc = await handler(SkillsRequest(f"https://mirror.example.com/mirror/{first}/SKILL.md"))
        print(doc.body)


if __name__ == "__main__":
    asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_REMOTE))
