"""Local filesystem-based skill provider for the skills handler.

This package provides :class:`LocalFileSystemSkillProvider`, a concrete
implementation of :class:`~skillshandler_core.SkillProvider` that serves
skills from a local directory tree, rescanning it on a time-to-live.

Install::

    pip install skills-handler
"""

from skillshandler_fs.local import DEFAULT_MAX_FILE_BYTES, LocalFileSystemSkillProvider

__all__ = ["DEFAULT_MAX_FILE_BYTES", "LocalFileSystemSkillProvider"]
