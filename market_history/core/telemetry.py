"""OpenTelemetry configuration helpers."""

from __future__ import annotations

import logging
from typing import Any

from opentelemetry import trace
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.instrumentation.httpx import HTTPXClientInstrumentor
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.sdk.trace.sampling import ParentBased, TraceIdRatioBased
from opentelemetry.semconv.resource import ResourceAttributes

from market_history.config import AlphaVantageSettings

logger = logging.getLogger(__name__)

_TELEMETRY_INITIALISED = False


def _build_resource(settings: AlphaVantageSettings) -> Resource:
    attributes: dict[str, Any] = {
        ResourceAttributes.SERVICE_NAME: settings.telemetry_service_name,
        ResourceAttributes.SERVICE_NAMESPACE: "market-history",
    }
    return Resource.create(attributes)


def setup_telemetry(settings: AlphaVantageSettings) -> bool:
    """Configure span export and instrument outbound httpx requests.

    Returns True when tracing is active after the call.
    """

    global _TELEMETRY_INITIALISED  # noqa: PLW0603 - single initialisation guard

    if _TELEMETRY_INITIALISED:
        return True

    if not settings.telemetry_enabled:
        logger.info("Telemetry disabled via configuration")
        return False

    tracer_provider = TracerProvider(
        resource=_build_resource(settings),
        sampler=ParentBased(TraceIdRatioBased(settings.telemetry_sample_ratio)),
    )
    exporter = OTLPSpanExporter(**_exporter_options(settings))
    tracer_provider.add_span_processor(BatchSpanProcessor(exporter))
    trace.set_tracer_provider(tracer_provider)

    # Every Alpha Vantage query gets a client span
    HTTPXClientInstrumentor().instrument()

    _TELEMETRY_INITIALISED = True
    logger.info("Telemetry initialised and httpx instrumentation enabled")
    return True


def _exporter_options(settings: AlphaVantageSettings) -> dict[str, Any]:
    endpoint = settings.telemetry_otlp_endpoint
    if endpoint:
        return {"endpoint": endpoint, "insecure": settings.telemetry_otlp_insecure}
    return {"insecure": settings.telemetry_otlp_insecure}


__all__ = ["setup_telemetry"]
