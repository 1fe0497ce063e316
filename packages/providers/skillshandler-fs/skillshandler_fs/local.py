"""Local filesystem-based skill provider.

This module implements :class:`LocalFileSystemSkillProvider`, which serves
skills from a local directory tree.  Each immediate subdirectory holding a
``SKILL.md`` file is one skill:

* **Metadata** (``name``, ``description``) comes from the YAML frontmatter.
* **Body** is the markdown content after the frontmatter.
* **Files** lists every regular file under the skill directory.

Scanning the tree is comparatively expensive, so the resulting skill set
is cached for ``cache_ttl`` seconds.  Supporting files are read on demand
and are never cached.

File I/O is synchronous inside ``async def`` methods because skill files
are small and local disk reads do not meaningfully block the event loop.
"""

from __future__ import annotations

import logging
from pathlib import Path

from skillshandler_core import (
    Skill,
    SkillProvider,
    SkillSetCache,
    is_valid_file_path,
    is_valid_skill_name,
    split_frontmatter,
    validate_skill_frontmatter,
)
from skillshandler_core.cache import DEFAULT_CACHE_TTL_SECONDS

_logger = logging.getLogger(__name__)

#: Default maximum file size in bytes (10 MB).
DEFAULT_MAX_FILE_BYTES: int = 10 * 1024 * 1024


class LocalFileSystemSkillProvider(SkillProvider):
    """Skill provider backed by a local directory tree.

    Expected layout::

        root/
        ├── git-workflow/
        │   └── SKILL.md          # YAML frontmatter + markdown body
        └── pdf-processing/
            ├── SKILL.md
            ├── scripts/
            │   └── extract.py
            └── references/
                └── deep/nested/file.md

    A directory is skipped (with a warning) when its name is not a valid
    skill name, when ``SKILL.md`` is missing, unreadable, or larger than
    *max_file_bytes*, when the frontmatter lacks a valid ``name`` and
    ``description``, or when the frontmatter ``name`` differs from the
    directory name.

    Args:
        root: Directory containing one subdirectory per skill.
        cache_ttl: Seconds a scanned skill set stays valid.  ``0``
            rescans on every call.
        max_file_bytes: Largest ``SKILL.md`` or supporting file that
            will be read.  Defaults to 10 MB.

    Raises:
        NotADirectoryError: If *root* does not exist or is not a
            directory.

    Example::

        provider = LocalFileSystemSkillProvider(Path("./skills"))
        handler = create_skills_handler(provider)
    """

    def __init__(
        self,
        root: Path | str,
        *,
        cache_ttl: float = DEFAULT_CACHE_TTL_SECONDS,
        max_file_bytes: int = DEFAULT_MAX_FILE_BYTES,
    ) -> None:
        self._root = Path(root)
        if not self._root.is_dir():
            raise NotADirectoryError(f"Skill root does not exist: {self._root}")
        self._resolved_root = self._root.resolve()
        self._max_file_bytes = max_file_bytes
        self._cache = SkillSetCache(self._scan, ttl=cache_ttl)

    def __repr__(self) -> str:
        return f"LocalFileSystemSkillProvider({str(self._root)!r})"

    # ------------------------------------------------------------------
    # SkillProvider interface
    # ------------------------------------------------------------------

    async def get_skills(self) -> list[Skill]:
        """Return the skills found under the root, sorted by directory name.

        The result is served from cache until ``cache_ttl`` expires or
        :meth:`invalidate` is called.
        """
        return await self._cache.get()

    async def get_skill_file(self, skill_name: str, file_path: str) -> str | None:
        """Read a supporting file as UTF-8 text.

        Returns ``None`` when the name or path is invalid, when
        *file_path* is ``SKILL.md``, when the path resolves outside the
        skill directory (for example through a symlink), when the file
        does not exist or exceeds *max_file_bytes*, or when it cannot be
        decoded.

        Args:
            skill_name: Skill name (directory name).
            file_path: Path relative to the skill directory.

        Returns:
            File content, or ``None``.
        """
        if not is_valid_skill_name(skill_name) or not is_valid_file_path(file_path):
            return None
        if file_path == "SKILL.md":
            return None

        # resolve() raises RuntimeError for symlink loops before Python 3.13.
        try:
            skill_dir = (self._root / skill_name).resolve()
            path = (skill_dir / file_path).resolve()
            if not (
                skill_dir.is_relative_to(self._resolved_root) and path.is_relative_to(skill_dir)
            ):
                _logger.warning("Refusing file outside skill %r: %r", skill_name, file_path)
                return None
            if not path.is_file():
                return None
            if path.stat().st_size > self._max_file_bytes:
                _logger.warning(
                    "File %r for skill %r exceeds maximum size (%d bytes)",
                    file_path,
                    skill_name,
                    self._max_file_bytes,
                )
                return None
            return path.read_text(encoding="utf-8")
        except (OSError, RuntimeError, UnicodeDecodeError) as exc:
            _logger.warning("Cannot read %r for skill %r: %s", file_path, skill_name, exc)
            return None

    def invalidate(self) -> None:
        """Discard the cached skill set; the next call rescans the root."""
        self._cache.invalidate()

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------

    async def _scan(self) -> list[Skill]:
        """Scan the root directory and build a fresh skill set."""
        try:
            entries = sorted(self._root.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            _logger.error("Error scanning skills directory %s: %s", self._root, exc)
            return []

        skills: list[Skill] = []
        for entry in entries:
            if not entry.is_dir() or not is_valid_skill_name(entry.name):
                continue
            skill = self._load_skill(entry)
            if skill is not None:
                skills.append(skill)
        _logger.debug("Scanned %d skills under %s", len(skills), self._root)
        return skills

    def _load_skill(self, skill_dir: Path) -> Skill | None:
        """Build a :class:`Skill` from *skill_dir*, or ``None`` to skip it."""
        skill_md = skill_dir / "SKILL.md"
        if not skill_md.is_file():
            return None
        if not skill_dir.resolve().is_relative_to(self._resolved_root):
            _logger.warning("Skipping %s: resolves outside the skill root", skill_dir.name)
            return None
        try:
            if skill_md.stat().st_size > self._max_file_bytes:
                _logger.warning(
                    "Skipping %s: SKILL.md exceeds maximum size (%d bytes)",
                    skill_dir.name,
                    self._max_file_bytes,
                )
                return None
            raw = skill_md.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            _logger.warning("Skipping %s: cannot read SKILL.md: %s", skill_dir.name, exc)
            return None

        frontmatter, body = split_frontmatter(raw)
        if not validate_skill_frontmatter(frontmatter):
            _logger.warning("Invalid frontmatter in %s/SKILL.md, skipping", skill_dir.name)
            return None
        if frontmatter["name"] != skill_dir.name:
            _logger.warning(
                "Skipping %s: frontmatter name %r does not match the directory name",
                skill_dir.name,
                frontmatter["name"],
            )
            return None

        return Skill(
            name=frontmatter["name"],
            description=frontmatter["description"],
            body=body,
            files=self._collect_files(skill_dir),
        )

    def _collect_files(self, skill_dir: Path) -> list[str]:
        """Return every servable file under *skill_dir*, sorted, POSIX-relative."""
        files: list[str] = []
        for path in sorted(skill_dir.rglob("*")):
            if not path.is_file():
                continue
            relative = path.relative_to(skill_dir).as_posix()
            if is_valid_file_path(relative):
                files.append(relative)
            else:
                _logger.debug("Not listing %r in skill %r: invalid path", relative, skill_dir.name)
        return files
