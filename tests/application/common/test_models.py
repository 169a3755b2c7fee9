"""Tests for ApplicationResult and Error"""

import pytest

from src.application.common.models import ApplicationResult, Error, ErrorType
from src.domain.exceptions import InvalidResultAccessError


class TestError:
    @pytest.mark.parametrize(
        "factory, error_type",
        [
            (Error.validation, ErrorType.VALIDATION),
            (Error.not_found, ErrorType.NOT_FOUND),
            (Error.conflict, ErrorType.CONFLICT),
            (Error.unauthorized, ErrorType.UNAUTHORIZED),
            (Error.forbidden, ErrorType.FORBIDDEN),
            (Error.internal, ErrorType.INTERNAL),
        ],
    )
    def test_factories_set_type(self, factory, error_type):
        error = factory("message")

        assert error.type == error_type
        assert error.message == "message"

    def test_none_has_empty_message(self):
        assert Error.NONE.message == ""


class TestApplicationResult:
    def test_success(self):
        result = ApplicationResult.success("value")

        assert result.is_success
        assert result.value == "value"
        assert result.error == Error.NONE

    def test_failure(self):
        error = Error.not_found("Post with ID 'x' was not found.")

        result = ApplicationResult.failure(error)

        assert result.is_failure
        assert result.error == error

    def test_reading_value_of_failure_raises(self):
        result = ApplicationResult.failure(Error.validation("Title is required."))

        with pytest.raises(InvalidResultAccessError):
            _ = result.value

    def test_success_cannot_carry_error(self):
        with pytest.raises(ValueError):
            ApplicationResult(is_success=True, error=Error.validation("boom"))

    def test_failure_must_carry_error(self):
        with pytest.raises(ValueError):
            ApplicationResult.failure(Error.NONE)
