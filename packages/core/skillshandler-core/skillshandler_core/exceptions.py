"""Exception hierarchy for the skills handler.

All exceptions raised by :mod:`skillshandler_core` (and by providers that
follow the library conventions) inherit from :class:`SkillsHandlerError`,
so callers can catch the whole family with a single ``except`` clause.

Every class carries the HTTP ``status_code`` the handler renders it as.
The exception message is the client-facing ``error`` string, so it must
never contain internal details such as filesystem paths.

* :class:`ValidationError` -- malformed skill name or file path (400).
* :class:`NotFoundError` -- unknown route, skill, or file (404).
* :class:`MethodNotAllowedError` -- unsupported HTTP method (405).
* :class:`ProviderError` -- the backing store failed (500).
"""

from __future__ import annotations


class SkillsHandlerError(Exception):
    """Base exception for all skills handler errors.

    Args:
        message: Client-facing error message.
        skill_name: Skill name parsed from the request, if any.
        file_path: File path parsed from the request, if any.
    """

    status_code: int = 500

    def __init__(
        self,
        message: str,
        *,
        skill_name: str | None = None,
        file_path: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.skill_name = skill_name
        self.file_path = file_path


class ValidationError(SkillsHandlerError, ValueError):
    """A path segment failed the skill-name or file-path grammar.

    Raised during routing, before any provider call is made.

    Example::

        try:
            route = resolve_route("/Bad_Name/SKILL.md")
        except ValidationError as exc:
            print(exc.message, exc.skill_name)
    """

    status_code = 400


class NotFoundError(SkillsHandlerError, LookupError):
    """The requested route, skill, or file does not exist."""

    status_code = 404


class SkillNotFoundError(NotFoundError):
    """No skill with the requested name is held by the provider."""


class ResourceNotFoundError(NotFoundError):
    """The provider has no file at the requested path for the skill."""


class MethodNotAllowedError(SkillsHandlerError):
    """The request method is not ``GET``, ``HEAD``, or ``OPTIONS``."""

    status_code = 405


class ProviderError(SkillsHandlerError):
    """The backing provider raised while serving a request.

    The provider's original exception is chained as ``__cause__``; the
    message itself stays generic so nothing internal leaks to clients.
    """

    status_code = 500
