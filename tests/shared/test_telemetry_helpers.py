"""Test logging and tracing helpers"""

import logging

import pytest
from opentelemetry.sdk.trace.export import ConsoleSpanExporter

from src.shared.context import get_correlation_id, reset_correlation_id, set_correlation_id
from src.shared.telemetry.logging import CorrelationIdFilter
from src.shared.telemetry.telemetry import TelemetryConfig, build_exporter
from src.shared.telemetry.tracing import _call_attributes, get_trace_id, traced


def make_record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "message", None, None)


class TestCorrelationIdFilter:
    def test_injects_current_correlation_id(self):
        token = set_correlation_id("req-42")
        try:
            record = make_record()
            CorrelationIdFilter().filter(record)
        finally:
            reset_correlation_id(token)

        assert record.correlation_id == "req-42"

    def test_uses_placeholder_outside_requests(self):
        record = make_record()

        assert CorrelationIdFilter().filter(record) is True
        assert record.correlation_id == "-"

    def test_reset_restores_previous_value(self):
        token = set_correlation_id("req-1")
        reset_correlation_id(token)

        assert get_correlation_id() is None


class TestTraced:
    @pytest.mark.asyncio
    async def test_async_function_result_is_returned(self):
        @traced("test.double")
        async def double(value):
            return value * 2

        assert await double(21) == 42

    def test_sync_function_result_is_returned(self):
        @traced()
        def greet(name):
            return f"hello {name}"

        assert greet(name="blog") == "hello blog"

    @pytest.mark.asyncio
    async def test_exceptions_propagate(self):
        @traced("test.fail")
        async def fail():
            raise LookupError("missing")

        with pytest.raises(LookupError):
            await fail()

    def test_no_trace_id_without_active_span(self):
        assert get_trace_id() is None

    def test_span_attributes_come_from_keyword_arguments(self):
        merged = _call_attributes(
            {"db.table": "posts"},
            {"post_id": 7, "content": "body", "password": "x", "_session": object()},
        )

        assert merged == {"db.table": "posts", "arg.post_id": "7"}


class TestTelemetryConfig:
    def test_none_exporter_builds_nothing(self):
        assert build_exporter("none", None) is None

    def test_otlp_without_endpoint_falls_back_to_console(self):
        assert isinstance(build_exporter("otlp", None), ConsoleSpanExporter)

    def test_disabled_telemetry_creates_no_provider(self):
        telemetry = TelemetryConfig("Blog", "1.0.0", enabled=False)

        assert telemetry.setup_telemetry() is None
        assert telemetry.active is False
        telemetry.shutdown()
