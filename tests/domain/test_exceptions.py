"""Tests for the domain exception hierarchy"""

from src.domain.exceptions import (
    BlogException,
    DomainValidationError,
    InvalidResultAccessError,
)


class TestBlogException:
    def test_to_dict_carries_code_message_and_details(self):
        error = BlogException("oops", "X", {"a": 1})

        assert error.to_dict() == {"error": "X", "message": "oops", "details": {"a": 1}}

    def test_error_code_defaults_to_class_name(self):
        error = BlogException("oops")

        assert error.to_dict() == {"error": "BlogException", "message": "oops", "details": {}}
        assert str(error) == "oops"

    def test_domain_validation_error_names_value_type(self):
        error = DomainValidationError("Title is required.", "PostTitle")

        assert isinstance(error, ValueError)
        assert error.to_dict() == {
            "error": "DOMAIN_VALIDATION_ERROR",
            "message": "Title is required.",
            "details": {"value_type": "PostTitle"},
        }

    def test_invalid_result_access_has_fixed_code(self):
        assert InvalidResultAccessError("no value").to_dict()["error"] == "INVALID_RESULT_ACCESS"
