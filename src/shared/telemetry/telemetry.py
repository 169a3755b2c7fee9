"""
OpenTelemetry tracing for the Blog service.

Spans come from three places: the FastAPI instrumentor (one per HTTP
request), the SQLAlchemy instrumentor (one per statement) and the
application itself (mediator requests, domain event handlers and
repository calls decorated with @traced). Any OTLP-compatible backend can
receive them.
"""

import logging

from fastapi import FastAPI
from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.fastapi import FastAPIInstrumentor
from opentelemetry.instrumentation.logging import LoggingInstrumentor
from opentelemetry.instrumentation.sqlalchemy import SQLAlchemyInstrumentor
from opentelemetry.sdk.resources import SERVICE_NAME, SERVICE_VERSION, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import (
    BatchSpanProcessor,
    ConsoleSpanExporter,
    SpanExporter,
)
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from sqlalchemy.ext.asyncio import AsyncEngine

from src.infrastructure.config.settings import Settings

logger = logging.getLogger(__name__)

# Probed by load balancers every few seconds
UNTRACED_URLS = "/api/health"


def build_exporter(exporter_type: str, otlp_endpoint: str | None) -> SpanExporter | None:
    """Span exporter for the configured type, None for "none" """
    if exporter_type == "none":
        return None

    if exporter_type == "otlp":
        if not otlp_endpoint:
            logger.warning("OTLP exporter selected without an endpoint, using console")
            return ConsoleSpanExporter()
        # Plain gRPC for http:// endpoints, TLS otherwise
        return OTLPSpanExporter(endpoint=otlp_endpoint, insecure=otlp_endpoint.startswith("http://"))

    return ConsoleSpanExporter()


class TelemetryConfig:
    """Owns the tracer provider and the instrumentors attached to it"""

    def __init__(
        self,
        service_name: str,
        service_version: str,
        enabled: bool = True,
        environment: str = "development",
    ):
        self.service_name = service_name
        self.service_version = service_version
        self.enabled = enabled
        self.environment = environment
        self.tracer_provider: TracerProvider | None = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TelemetryConfig":
        return cls(
            service_name=settings.app_name,
            service_version=settings.app_version,
            enabled=settings.telemetry_enabled,
            environment=settings.environment,
        )

    def setup_telemetry(
        self,
        exporter_type: str = "console",
        otlp_endpoint: str | None = None,
        sample_rate: float = 1.0,
    ) -> TracerProvider | None:
        """
        Create the tracer provider and register it globally.

        Sampling follows the caller's decision when a traceparent is present
        and samples sample_rate of new traces otherwise. With the "none"
        exporter spans are still created (trace ids feed correlation ids)
        but never exported.
        """
        if not self.enabled:
            logger.info("Telemetry disabled")
            return None

        resource = Resource(
            attributes={
                SERVICE_NAME: self.service_name,
                SERVICE_VERSION: self.service_version,
                "deployment.environment": self.environment,
            }
        )
        provider = TracerProvider(
            resource=resource, sampler=ParentBased(TraceIdRatioBased(sample_rate))
        )

        exporter = build_exporter(exporter_type, otlp_endpoint)
        if exporter is not None:
            provider.add_span_processor(BatchSpanProcessor(exporter))

        trace.set_tracer_provider(provider)
        self.tracer_provider = provider

        logger.info(
            "OpenTelemetry initialized: service=%s, version=%s, exporter=%s, sample_rate=%s",
            self.service_name,
            self.service_version,
            exporter_type,
            sample_rate,
        )
        return provider

    @property
    def active(self) -> bool:
        return self.enabled and self.tracer_provider is not None

    def instrument_fastapi(self, app: FastAPI):
        if not self.active:
            return
        FastAPIInstrumentor.instrument_app(
            app, tracer_provider=self.tracer_provider, excluded_urls=UNTRACED_URLS
        )
        logger.info("FastAPI instrumentation enabled")

    def instrument_sqlalchemy(self, engine: AsyncEngine):
        if not self.active:
            return
        # The instrumentor hooks the sync engine behind the async facade
        SQLAlchemyInstrumentor().instrument(
            engine=engine.sync_engine,
            tracer_provider=self.tracer_provider,
            enable_commenter=True,
        )
        logger.info("SQLAlchemy instrumentation enabled")

    def instrument_logging(self):
        """Add otelTraceID/otelSpanID to log records; the format stays ours"""
        if not self.active:
            return
        LoggingInstrumentor().instrument(
            tracer_provider=self.tracer_provider, set_logging_format=False
        )
        logger.info("Logging instrumentation enabled")

    def instrument_all(self, app: FastAPI, engine: AsyncEngine):
        self.instrument_fastapi(app)
        self.instrument_sqlalchemy(engine)
        self.instrument_logging()

    def shutdown(self):
        """Flush buffered spans and stop the exporters"""
        if self.tracer_provider is None:
            return
        try:
            self.tracer_provider.shutdown()
            logger.info("Telemetry shutdown complete")
        except Exception as e:
            logger.error("Error during telemetry shutdown: %s", e)
        finally:
            self.tracer_provider = None


_telemetry: TelemetryConfig | None = None


def get_telemetry() -> TelemetryConfig | None:
    return _telemetry


def set_telemetry(telemetry: TelemetryConfig | None):
    global _telemetry
    _telemetry = telemetry
