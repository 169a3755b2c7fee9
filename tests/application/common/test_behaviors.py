"""Tests for the validation and logging pipeline behaviors"""

import logging
from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest

from src.application.common.behaviors import LoggingBehavior, ValidationBehavior
from src.application.common.models import ErrorType


@dataclass(frozen=True)
class Rename:
    name: str


class NameValidator:
    def validate(self, request: Rename) -> list[str]:
        return [] if request.name else ["Name is required."]


class LengthValidator:
    def validate(self, request: Rename) -> list[str]:
        return ["Name is too short."] if len(request.name) < 3 else []


class TestValidationBehavior:
    @pytest.mark.asyncio
    async def test_valid_request_reaches_handler(self):
        behavior = ValidationBehavior({Rename: [NameValidator()]})
        next_handler = AsyncMock(return_value="handled")

        response = await behavior.handle(Rename("Albert"), next_handler)

        assert response == "handled"
        next_handler.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_request_short_circuits(self):
        """
        GIVEN two validators that both fail
        WHEN the request passes through the behavior
        THEN the handler is skipped and the messages are joined with "; ".
        """
        behavior = ValidationBehavior({Rename: [NameValidator(), LengthValidator()]})
        next_handler = AsyncMock()

        response = await behavior.handle(Rename(""), next_handler)

        next_handler.assert_not_awaited()
        assert response.is_failure
        assert response.error.type == ErrorType.VALIDATION
        assert response.error.message == "Name is required.; Name is too short."

    @pytest.mark.asyncio
    async def test_request_without_validators_passes_through(self):
        behavior = ValidationBehavior()
        behavior.add(str, NameValidator())
        next_handler = AsyncMock(return_value="ok")

        assert await behavior.handle(Rename(""), next_handler) == "ok"


class TestLoggingBehavior:
    @pytest.mark.asyncio
    async def test_logs_request_and_duration(self, caplog):
        next_handler = AsyncMock(return_value="done")

        with caplog.at_level(logging.INFO):
            response = await LoggingBehavior().handle(Rename("x"), next_handler)

        assert response == "done"
        assert "Handling Rename" in caplog.text
        assert "Handled Rename in" in caplog.text

    @pytest.mark.asyncio
    async def test_logs_and_reraises_exceptions(self, caplog):
        next_handler = AsyncMock(side_effect=RuntimeError("database down"))

        with pytest.raises(RuntimeError):
            await LoggingBehavior().handle(Rename("x"), next_handler)

        assert "Request Rename failed" in caplog.text
