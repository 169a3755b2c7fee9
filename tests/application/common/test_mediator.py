"""Tests for the Mediator"""

from dataclasses import dataclass
from unittest.mock import AsyncMock

import pytest

from src.application.common.mediator import HandlerNotFoundError, Mediator


@dataclass(frozen=True)
class Ping:
    message: str


@dataclass(frozen=True)
class Pinged:
    message: str


class PingHandler:
    async def handle(self, request: Ping) -> str:
        return f"pong: {request.message}"


class RecordingBehavior:
    """Records the order in which behaviors run"""

    def __init__(self, name: str, calls: list[str]):
        self.name = name
        self.calls = calls

    async def handle(self, request, next_handler):
        self.calls.append(f"{self.name}:before")
        response = await next_handler()
        self.calls.append(f"{self.name}:after")
        return response


class TestMediatorSend:
    @pytest.mark.asyncio
    async def test_send_routes_to_registered_handler(self):
        mediator = Mediator()
        mediator.register(Ping, PingHandler())

        assert await mediator.send(Ping("hello")) == "pong: hello"

    @pytest.mark.asyncio
    async def test_send_without_handler_raises(self):
        with pytest.raises(HandlerNotFoundError):
            await Mediator().send(Ping("hello"))

    def test_register_twice_raises(self):
        mediator = Mediator()
        mediator.register(Ping, PingHandler())

        with pytest.raises(ValueError):
            mediator.register(Ping, PingHandler())

    @pytest.mark.asyncio
    async def test_behaviors_wrap_handler_in_registration_order(self):
        """
        GIVEN two behaviors registered as [outer, inner]
        WHEN a request is sent
        THEN outer runs first and finishes last.
        """
        calls: list[str] = []
        mediator = Mediator(
            behaviors=[RecordingBehavior("outer", calls), RecordingBehavior("inner", calls)]
        )
        mediator.register(Ping, PingHandler())

        await mediator.send(Ping("x"))

        assert calls == ["outer:before", "inner:before", "inner:after", "outer:after"]


class TestMediatorPublish:
    @pytest.mark.asyncio
    async def test_publish_runs_every_subscriber_in_order(self):
        mediator = Mediator()
        first, second = AsyncMock(), AsyncMock()
        mediator.subscribe(Pinged, first)
        mediator.subscribe(Pinged, second)
        event = Pinged("hi")

        await mediator.publish(event)

        first.handle.assert_awaited_once_with(event)
        second.handle.assert_awaited_once_with(event)

    @pytest.mark.asyncio
    async def test_publish_without_subscribers_is_a_no_op(self):
        await Mediator().publish(Pinged("nobody listens"))

    @pytest.mark.asyncio
    async def test_publish_reraises_handler_failure(self, caplog):
        mediator = Mediator()
        failing = AsyncMock()
        failing.handle.side_effect = RuntimeError("handler exploded")
        mediator.subscribe(Pinged, failing)

        with pytest.raises(RuntimeError, match="handler exploded"):
            await mediator.publish(Pinged("boom"))

        assert "failed processing Pinged" in caplog.text
