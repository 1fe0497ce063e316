"""Request outcome events for analytics and telemetry.

The handler reports each observable outcome to an optional ``on_event``
callback.  Events are fire-and-forget: they never change the response,
and an exception raised by the callback is logged and discarded.
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class SkillsEventType(str, Enum):
    """Kinds of outcome the handler reports."""

    INDEX_REQUESTED = "INDEX_REQUESTED"
    SKILL_REQUESTED = "SKILL_REQUESTED"
    FILE_REQUESTED = "FILE_REQUESTED"
    NOT_FOUND = "NOT_FOUND"
    ERROR = "ERROR"


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass(frozen=True)
class SkillsEvent:
    """An immutable record of a request outcome.

    Only the fields relevant to ``type`` are set:

    ==================  ==========================================
    Type                Fields
    ==================  ==========================================
    INDEX_REQUESTED     ``skill_count``
    SKILL_REQUESTED     ``skill_name``
    FILE_REQUESTED      ``skill_name``, ``file_path``
    NOT_FOUND           ``skill_name`` and ``file_path`` when parsed
    ERROR               ``error``, optional ``context``
    ==================  ==========================================

    Attributes:
        type: The outcome kind.
        path: Raw request path, before base-path stripping.
        timestamp: Wall-clock time in milliseconds since the epoch.
    """

    type: SkillsEventType
    path: str
    timestamp: int = field(default_factory=_now_ms)
    skill_count: int | None = None
    skill_name: str | None = None
    file_path: str | None = None
    error: BaseException | None = None
    context: dict[str, Any] | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-friendly dict, omitting unset fields.

        Keys use the camelCase names of the wire format
        (``skillCount``, ``skillName``, ``filePath``).  The error is
        rendered as its string form.
        """
        data: dict[str, Any] = {
            "type": self.type.value,
            "timestamp": self.timestamp,
            "path": self.path,
        }
        if self.skill_count is not None:
            data["skillCount"] = self.skill_count
        if self.skill_name is not None:
            data["skillName"] = self.skill_name
        if self.file_path is not None:
            data["filePath"] = self.file_path
        if self.error is not None:
            data["error"] = str(self.error)
        if self.context is not None:
            data["context"] = dict(self.context)
        return data


#: Signature of the ``on_event`` callback.
EventSink = Callable[[SkillsEvent], None]
