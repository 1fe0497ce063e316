"""Tests for the exception hierarchy."""

import pytest

from skillshandler_core import (
    MethodNotAllowedError,
    NotFoundError,
    ProviderError,
    ResourceNotFoundError,
    SkillNotFoundError,
    SkillsHandlerError,
    ValidationError,
)


class TestExceptionHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [
            ValidationError,
            NotFoundError,
            SkillNotFoundError,
            ResourceNotFoundError,
            MethodNotAllowedError,
            ProviderError,
        ],
    )
    def test_all_are_skills_handler_errors(self, cls):
        assert issubclass(cls, SkillsHandlerError)

    def test_validation_error_is_value_error(self):
        assert issubclass(ValidationError, ValueError)

    def test_not_found_errors_are_lookup_errors(self):
        assert issubclass(NotFoundError, LookupError)
        assert issubclass(SkillNotFoundError, NotFoundError)
        assert issubclass(ResourceNotFoundError, NotFoundError)

    def test_skills_handler_error_is_exception(self):
        assert issubclass(SkillsHandlerError, Exception)


class TestStatusCodes:
    @pytest.mark.parametrize(
        ("cls", "status"),
        [
            (SkillsHandlerError, 500),
            (ValidationError, 400),
            (NotFoundError, 404),
            (SkillNotFoundError, 404),
            (ResourceNotFoundError, 404),
            (MethodNotAllowedError, 405),
            (ProviderError, 500),
        ],
    )
    def test_status_code(self, cls, status):
        assert cls("x").status_code == status


class TestAttributes:
    def test_message(self):
        err = SkillNotFoundError("Skill not found", skill_name="my-skill")
        assert str(err) == "Skill not found"
        assert err.message == "Skill not found"
        assert err.skill_name == "my-skill"
        assert err.file_path is None

    def test_file_path(self):
        err = ResourceNotFoundError("File not found", skill_name="a", file_path="b.md")
        assert err.file_path == "b.md"

    def test_provider_error_chains_cause(self):
        cause = OSError("disk on fire")
        try:
            raise ProviderError("Internal server error") from cause
        except ProviderError as exc:
            assert exc.__cause__ is cause
            assert "disk" not in exc.message

    def test_catch_base_catches_subclasses(self):
        with pytest.raises(SkillsHandlerError):
            raise ResourceNotFoundError("x")
